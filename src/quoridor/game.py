"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating everything required to play a turn of Quoridor -->
it checks whose turn it is, lets the engine apply the action and keeps track of the history and status.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Self

from src.core.config import MAX_PLAYERS, MIN_PLAYERS
from src.core.exceptions import GameStateError, NotYourTurnError
from src.core.models import GameModel
from src.core.outcome import Outcome
from src.core.shared_types import Status
from src.quoridor.board import Board
from src.quoridor.engine import QuoridorEngine
from src.quoridor.geometry import Cell
from src.quoridor.pieces import STARTING_SIDES, PlayerPiece, Wall
from src.quoridor.player_view import PlayerQuoridorView

logger = logging.getLogger(__name__)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    engine: QuoridorEngine
    history: list[str]  # "<player>:<cell or wall notation>"
    status: Status

    @classmethod
    def new_game(cls, player_names: list[str]) -> Self:
        """Two or four players. Turn order is the order of the names."""
        engine = QuoridorEngine.new_game(player_names)
        return cls(engine=engine, history=[], status=Status.IN_PROGRESS)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in {status.value for status in Status}:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )
        if len(model.positions) != len(model.player_names):
            raise GameStateError(
                f"Got {len(model.positions)} positions for {len(model.player_names)} players."
            )
        if len(model.player_names) not in (MIN_PLAYERS, MAX_PLAYERS):
            raise GameStateError(
                f"A stored game has {MIN_PLAYERS} or {MAX_PLAYERS} players, got {len(model.player_names)}."
            )
        if not 0 <= model.current_player < len(model.player_names):
            raise GameStateError(
                f"Current player index {model.current_player} is out of range for {len(model.player_names)} players."
            )

        players = [
            PlayerPiece(name=name, cell=Cell.from_algebraic(position), start_side=side)
            for name, position, side in zip(
                model.player_names, model.positions, STARTING_SIDES
            )
        ]
        walls = [Wall.from_algebraic(wall) for wall in model.walls]
        engine = QuoridorEngine(Board(players, walls), model.current_player)
        return cls(engine=engine, history=list(model.history), status=Status(model.status))

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        board = self.engine.get_board()
        return GameModel(
            player_names=[player.name for player in board.players],
            positions=[player.cell.to_algebraic() for player in board.players],
            walls=[wall.to_algebraic() for wall in board.walls],
            history=list(self.history),
            current_player=self.engine.get_current_player(),
            status=self.status.value,
            winner=self.winner,
        )

    @property
    def players(self) -> list[str]:
        return [player.name for player in self.engine.get_players_list()]

    @property
    def turn_player(self) -> str:
        return self.players[self.engine.get_current_player()]

    @property
    def winner(self) -> Optional[str]:
        return self.engine.find_winner()

    def view(self) -> PlayerQuoridorView:
        """Read-only view for players. Works on a copy so queries never touch the real game."""
        return PlayerQuoridorView(self.engine.copy())

    def legal_moves(self, player: str) -> list[str]:
        """
        Service will request the set of legal pawn moves.
        ----

        These can be used to display to the user. Asking is allowed at any time, even when it is not your turn.
        """
        self._assert_in_progress()
        return [cell.to_algebraic() for cell in self.view().get_possible_moves(player)]

    def is_wall_possible(self, wall_notation: str) -> bool:
        self._assert_in_progress()
        return self.view().is_wall_possible(Wall.from_algebraic(wall_notation))

    def make_move(self, player: str, target_notation: str) -> None:
        """Attempt to move the player's pawn"""
        target = Cell.from_algebraic(target_notation)
        self._play(player, target_notation, lambda: self.engine.move_player(player, target))

    def place_wall(self, player: str, wall_notation: str) -> None:
        """Attempt to place a wall"""
        wall = Wall.from_algebraic(wall_notation)
        self._play(player, wall_notation, lambda: self.engine.add_wall(wall))

    # -- PRIVATE HELPERS ---
    def _play(
        self, player: str, notation: str, action: Callable[[], Outcome]
    ) -> None:
        """
        1. game must be in progress
        2. it must be your turn
        3. the engine applies the action (raises if it got rejected)
        4. update history, turn and status
        """
        self._assert_in_progress()
        self._assert_your_turn(player)

        outcome = action()
        outcome.raise_for_rejection()

        self.history.append(f"{player}:{notation}")
        logger.info("%s played %s", player, notation)
        self._update_game_status()
        if self.status == Status.IN_PROGRESS:
            self.engine.next_turn()

    def _assert_in_progress(self) -> None:
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

    def _assert_your_turn(self, player: str) -> None:
        """You must wait for your turn before making a move."""
        # unknown names fail here already, with the same error the engine would give
        self.engine.get_board().player(player)
        player_to_move = self.turn_player
        if player != player_to_move:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {player_to_move} to make a move first."
            )

    def _update_game_status(self) -> None:
        winner = self.winner
        if winner is not None:
            logger.info("%s reached their goal side and won", winner)
            self.status = Status.FINISHED
