"""The Board holds the pieces: player pawns in turn order and the walls placed so far."""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import GameStateError, PlayerNotFoundError
from src.quoridor.geometry import Cell
from src.quoridor.pieces import STARTING_SIDES, PlayerPiece, Wall


@dataclass
class Board:
    players: list[PlayerPiece]
    walls: list[Wall] = field(default_factory=list)
    _index_by_name: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._index_by_name = {}
        for index, player in enumerate(self.players):
            if player.name in self._index_by_name:
                raise GameStateError(f"Player name {player.name!r} is used twice.")
            self._index_by_name[player.name] = index

    @classmethod
    def starting_board(cls, player_names: list[str]) -> Self:
        """Every player on the midpoint of their starting side, no walls. Player i gets STARTING_SIDES[i]."""
        players = [
            PlayerPiece(name=name, cell=side.midpoint, start_side=side)
            for name, side in zip(player_names, STARTING_SIDES)
        ]
        return cls(players)

    def find_player(self, name: str) -> Optional[int]:
        """Index of the player in turn order, or None if nobody has that name"""
        return self._index_by_name.get(name)

    def player(self, name: str) -> PlayerPiece:
        index = self.find_player(name)
        if index is None:
            raise PlayerNotFoundError(f"Player {name} was not found.")
        return self.players[index]

    def occupied_cells(self) -> set[Cell]:
        return {player.cell for player in self.players}

    def is_free(self, cell: Cell) -> bool:
        return cell not in self.occupied_cells()

    def move_player(self, index: int, cell: Cell) -> None:
        """Update the position on the board (no rule checks here)"""
        self.players[index].cell = cell

    def add_wall(self, wall: Wall) -> None:
        self.walls.append(wall)
