"""
The Quoridor engine: game state plus the rules that guard every change to it.
----

Mutating entry points (`move_player`, `add_wall`) validate first and only then touch the board, so a rejected
action leaves the state exactly as it was. They report through an Outcome instead of raising.
"""

import logging
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Optional, Protocol, Self, runtime_checkable

from src.core.config import MAX_PLAYERS, MIN_PLAYERS
from src.core.exceptions import TooFewPlayersError, UnsupportedPlayerCountError
from src.core.outcome import Outcome, RejectionReason
from src.quoridor.board import Board
from src.quoridor.geometry import Cell
from src.quoridor.moves import check_move
from src.quoridor.pieces import PlayerPiece, Wall
from src.quoridor.wall_index import WallIndex
from src.quoridor.walls import check_add_wall

logger = logging.getLogger(__name__)


@runtime_checkable
class TablegameEngine(Protocol):
    """What any turn-based board game engine offers: a board, players in turn order, and an end condition."""

    def get_board(self) -> Board: ...
    def get_players_list(self) -> list[PlayerPiece]: ...
    def get_current_player(self) -> int: ...
    def next_turn(self) -> None: ...
    def find_winner(self) -> Optional[str]: ...
    def is_game_over(self) -> bool: ...


@dataclass
class QuoridorEngine:
    board: Board
    current_player: int = 0
    wall_index: WallIndex = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.wall_index = WallIndex(self.board.walls)

    @classmethod
    def new_game(cls, player_names: list[str]) -> Self:
        """
        Set up the board with the players specified.
        ---

        * fewer than 2 names: TooFewPlayersError
        * 3 names: UnsupportedPlayerCountError (Quoridor is played by 2 or 4)
        * more than 4 names: only the first 4 take part
        Player i starts on the midpoint of the i-th starting side (left, right, bottom, top).
        """
        if len(player_names) < MIN_PLAYERS:
            raise TooFewPlayersError(
                f"Tried to init game with too few players: {len(player_names)}."
            )
        if len(player_names) > MAX_PLAYERS:
            logger.warning(
                "Got %d player names, only the first %d take part: %s",
                len(player_names),
                MAX_PLAYERS,
                player_names[:MAX_PLAYERS],
            )
            player_names = player_names[:MAX_PLAYERS]
        if len(player_names) not in (MIN_PLAYERS, MAX_PLAYERS):
            raise UnsupportedPlayerCountError(
                f"Quoridor is played by {MIN_PLAYERS} or {MAX_PLAYERS} players, got {len(player_names)}."
            )
        return cls(Board.starting_board(player_names))

    # --- READ-ONLY QUERIES ---
    def get_board(self) -> Board:
        return self.board

    def get_players_list(self) -> list[PlayerPiece]:
        return self.board.players

    def get_current_player(self) -> int:
        return self.current_player

    def player_position(self, player_name: str) -> Optional[Cell]:
        index = self.board.find_player(player_name)
        if index is None:
            return None
        return self.board.players[index].cell

    def find_winner(self) -> Optional[str]:
        """The first player (in turn order) standing on their goal side, if any"""
        return next(
            (player.name for player in self.board.players if player.has_reached_goal()),
            None,
        )

    def is_game_over(self) -> bool:
        return self.find_winner() is not None

    def check_move(self, current: Cell, target: Cell) -> bool:
        return check_move(current, target, self.board, self.wall_index)

    def check_add_wall(self, wall: Wall) -> bool:
        return check_add_wall(wall, self.board.players, self.wall_index)

    # --- ACTIONS ---
    def move_player(self, player_name: str, target: Cell) -> Outcome:
        index = self.board.find_player(player_name)
        if index is None:
            return self._reject(
                RejectionReason.PLAYER_NOT_FOUND, f"Player {player_name} was not found."
            )

        current = self.board.players[index].cell
        if not self.check_move(current, target):
            return self._reject(
                RejectionReason.ILLEGAL_MOVE,
                f"Moving {player_name} to position ({target.x}, {target.y}) is illegal.",
            )

        self.board.move_player(index, target)
        return Outcome.ok()

    def add_wall(self, wall: Wall) -> Outcome:
        if not self.check_add_wall(wall):
            return self._reject(
                RejectionReason.ILLEGAL_MOVE, f"Adding {wall.describe()} is illegal."
            )

        self.board.add_wall(wall)
        self.wall_index.add(wall)
        return Outcome.ok()

    def next_turn(self) -> None:
        """Pass the turn to the next player in order"""
        self.current_player = (self.current_player + 1) % len(self.board.players)

    def copy(self) -> Self:
        """Independent engine on a deep copy of the board"""
        return type(self)(deepcopy(self.board), self.current_player)

    def _reject(self, reason: RejectionReason, message: str) -> Outcome:
        logger.debug("Rejected (%s): %s", reason, message)
        return Outcome.rejected(reason, message)
