"""
Read-only view on a Quoridor engine, handed to players (or a UI) to ask "what can I do?".

It wraps an engine instead of extending it, and only exposes queries. Nothing here changes the game.
"""

from typing import Optional

from src.core.exceptions import PlayerNotFoundError
from src.quoridor.board import Board
from src.quoridor.engine import QuoridorEngine
from src.quoridor.geometry import Cell
from src.quoridor.moves import legal_targets
from src.quoridor.pieces import PlayerPiece, Wall


class PlayerQuoridorView:
    def __init__(self, engine: QuoridorEngine) -> None:
        self._engine = engine

    def update_board(self, board: Board) -> None:
        """Load another board. The view keeps its own copy, so later changes to `board` do not leak in."""
        self._engine = QuoridorEngine(board, self._engine.current_player).copy()

    def get_board(self) -> Board:
        return self._engine.get_board()

    def get_players_list(self) -> list[PlayerPiece]:
        return self._engine.get_players_list()

    def get_current_player(self) -> int:
        return self._engine.get_current_player()

    def find_winner(self) -> Optional[str]:
        return self._engine.find_winner()

    def is_game_over(self) -> bool:
        return self._engine.is_game_over()

    def get_possible_moves(self, player_name: str) -> list[Cell]:
        current = self._position(player_name)
        return legal_targets(current, self._engine.board, self._engine.wall_index)

    def is_move_possible(self, player_name: str, target: Cell) -> bool:
        return self._engine.check_move(self._position(player_name), target)

    def is_wall_possible(self, wall: Wall) -> bool:
        return self._engine.check_add_wall(wall)

    def _position(self, player_name: str) -> Cell:
        position = self._engine.player_position(player_name)
        if position is None:
            raise PlayerNotFoundError(f"Player {player_name} was not found.")
        return position
