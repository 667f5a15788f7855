"""
Grid geometry: cells, wall slots and bounds checks.

(placed in its own module as every other module in the rules engine needs it)
"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidNotationError

# Standard Quoridor board is 9x9. Kept as a constant so everything else derives from it
BOARD_SIDE_LENGTH = 9
# Walls are anchored in the gaps between cells: one less per side
WALL_SLOTS_PER_SIDE = BOARD_SIDE_LENGTH - 1

Vector = tuple[int, int]

LEFT: Vector = (-1, 0)
RIGHT: Vector = (1, 0)
DOWN: Vector = (0, -1)
UP: Vector = (0, 1)
DIRECTIONS: tuple[Vector, ...] = (LEFT, RIGHT, DOWN, UP)

FILE_LETTERS = "abcdefghijklmnopqrstuvwxyz"[:BOARD_SIDE_LENGTH]


@dataclass(frozen=True, order=True)
class Cell:
    x: int
    y: int

    @classmethod
    def from_algebraic(cls, notation: str) -> Self:
        """Algebraic notation: 'a1' - 'i9' get converted to (0,0) - (8,8)"""
        rank = notation[1:]
        # isdigit() alone also accepts digits int() cannot parse, like '²'
        if (
            len(notation) < 2
            or notation[0] not in FILE_LETTERS
            or not (rank.isascii() and rank.isdigit())
        ):
            raise InvalidNotationError(f"Cannot interpret {notation!r} as a cell.")
        cell = cls(FILE_LETTERS.index(notation[0]), int(rank) - 1)
        if not is_cell_legal(cell):
            raise InvalidNotationError(f"Cell {notation!r} is not on the board.")
        return cell

    def to_algebraic(self) -> str:
        return f"{FILE_LETTERS[self.x]}{self.y + 1}"

    def shifted(self, vector: Vector) -> Self:
        dx, dy = vector
        return type(self)(self.x + dx, self.y + dy)

    def delta(self, other: Self) -> Vector:
        """Vector pointing from this cell to the other one"""
        return other.x - self.x, other.y - self.y

    def distance(self, other: Self) -> int:
        """Manhattan distance"""
        dx, dy = self.delta(other)
        return abs(dx) + abs(dy)

    def neighbours(self) -> list[Self]:
        """The four orthogonal neighbours. Some may lie off the board."""
        return [self.shifted(direction) for direction in DIRECTIONS]


def is_cell_legal(cell: Cell) -> bool:
    return 0 <= cell.x < BOARD_SIDE_LENGTH and 0 <= cell.y < BOARD_SIDE_LENGTH


def is_wall_slot_legal(slot: Cell) -> bool:
    return 0 <= slot.x < WALL_SLOTS_PER_SIDE and 0 <= slot.y < WALL_SLOTS_PER_SIDE
