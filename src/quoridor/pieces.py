"""Defines the pieces on a Quoridor board: player pawns and walls"""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from src.core.exceptions import InvalidNotationError
from src.core.shared_types import Orientation
from src.quoridor.geometry import BOARD_SIDE_LENGTH, Cell, is_wall_slot_legal

MIDDLE = BOARD_SIDE_LENGTH // 2
LAST = BOARD_SIDE_LENGTH - 1


class Axis(Enum):
    """Which coordinate is fixed along a side of the board."""

    COLUMN = "x"
    ROW = "y"


class Side(Enum):
    """
    A side of the board a player starts on.
    ----

    The value holds (axis, fixed coordinate). The goal of a player is the full opposite side:
    every cell sharing that axis with the opposite coordinate.
    """

    LEFT = (Axis.COLUMN, 0)
    RIGHT = (Axis.COLUMN, LAST)
    BOTTOM = (Axis.ROW, 0)
    TOP = (Axis.ROW, LAST)

    @property
    def axis(self) -> Axis:
        return self.value[0]

    @property
    def coordinate(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Self:
        return OPPOSITE_SIDES[self]

    @property
    def midpoint(self) -> Cell:
        """The starting cell on this side"""
        if self.axis == Axis.COLUMN:
            return Cell(self.coordinate, MIDDLE)
        return Cell(MIDDLE, self.coordinate)

    def contains(self, cell: Cell) -> bool:
        along = cell.x if self.axis == Axis.COLUMN else cell.y
        return along == self.coordinate


OPPOSITE_SIDES: dict[Side, Side] = {
    Side.LEFT: Side.RIGHT,
    Side.RIGHT: Side.LEFT,
    Side.BOTTOM: Side.TOP,
    Side.TOP: Side.BOTTOM,
}

# Player i (in turn order) starts at the midpoint of STARTING_SIDES[i]
STARTING_SIDES: tuple[Side, ...] = (Side.LEFT, Side.RIGHT, Side.BOTTOM, Side.TOP)


@dataclass
class PlayerPiece:
    name: str
    cell: Cell
    start_side: Side

    @property
    def goal_side(self) -> Side:
        return self.start_side.opposite

    def is_goal(self, cell: Cell) -> bool:
        return self.goal_side.contains(cell)

    def has_reached_goal(self) -> bool:
        return self.is_goal(self.cell)


@dataclass(frozen=True, order=True)
class Wall:
    """
    A wall segment, two cells long.
    ----

    The anchor is the lower-left wall slot. With anchor (x, y):
    * a HORIZONTAL wall sits between rows y and y+1 and covers columns x and x+1
    * a VERTICAL wall sits between columns x and x+1 and covers rows y and y+1
    """

    anchor: Cell
    orientation: Orientation

    @classmethod
    def from_algebraic(cls, notation: str) -> Self:
        """Anchor in cell notation followed by the orientation: 'e3h', 'a1v'"""
        if len(notation) < 3 or notation[-1] not in {o.value for o in Orientation}:
            raise InvalidNotationError(f"Cannot interpret {notation!r} as a wall.")
        wall = cls(Cell.from_algebraic(notation[:-1]), Orientation(notation[-1]))
        if not wall.is_in_bounds():
            raise InvalidNotationError(f"Wall {notation!r} is not on the board.")
        return wall

    def to_algebraic(self) -> str:
        return f"{self.anchor.to_algebraic()}{self.orientation.value}"

    @property
    def is_vertical(self) -> bool:
        return self.orientation == Orientation.VERTICAL

    def is_in_bounds(self) -> bool:
        return is_wall_slot_legal(self.anchor)

    def crossing(self) -> Self:
        """The perpendicular wall sharing this anchor"""
        return type(self)(self.anchor, self.orientation.perpendicular)

    def collinear_neighbours(self) -> tuple[Self, Self]:
        """Same orientation, one slot further along the wall's own axis in either direction"""
        step = (0, 1) if self.is_vertical else (1, 0)
        before = self.anchor.shifted((-step[0], -step[1]))
        after = self.anchor.shifted(step)
        return type(self)(before, self.orientation), type(self)(after, self.orientation)

    def describe(self) -> str:
        kind = "vertical" if self.is_vertical else "horizontal"
        return f"{kind} wall to position ({self.anchor.x}, {self.anchor.y})"
