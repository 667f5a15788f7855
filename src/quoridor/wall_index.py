"""
Set of placed walls answering "is this step between two adjacent cells blocked?"
----

Board edges count as walls: stepping off the board is always blocked.
"""

from typing import Iterable, Optional

from src.core.shared_types import Orientation
from src.quoridor.geometry import Cell, is_cell_legal
from src.quoridor.pieces import Wall


def blocking_walls(a: Cell, b: Cell) -> tuple[Wall, Wall]:
    """
    The two walls that could sit between orthogonally adjacent cells a and b.
    ---

    The blocking wall is perpendicular to the direction of travel. Its anchor is at the lower coordinate of the pair,
    or one slot lower along the wall's own axis (a wall spans two cells).
    """
    assert a.distance(b) == 1, f"{a} and {b} are not adjacent"

    low = Cell(min(a.x, b.x), min(a.y, b.y))
    if a.y == b.y:
        # stepping along a row: a vertical wall stands in the way
        return (
            Wall(low, Orientation.VERTICAL),
            Wall(low.shifted((0, -1)), Orientation.VERTICAL),
        )
    # stepping along a column: a horizontal wall stands in the way
    return (
        Wall(low, Orientation.HORIZONTAL),
        Wall(low.shifted((-1, 0)), Orientation.HORIZONTAL),
    )


def wall_blocks_adjacency(a: Cell, b: Cell, wall: Wall) -> bool:
    """Would this wall (placed or not) block the step between adjacent cells a and b?"""
    if not wall.is_in_bounds():
        # a wall that cannot be placed cannot block anything
        return False
    if not is_cell_legal(a) or not is_cell_legal(b):
        return False
    return wall in blocking_walls(a, b)


class WallIndex:
    """Walls on the board, keyed by (anchor, orientation). Only ever grows."""

    def __init__(self, walls: Iterable[Wall] = ()) -> None:
        self._walls: set[Wall] = set(walls)

    def __len__(self) -> int:
        return len(self._walls)

    def __contains__(self, wall: Wall) -> bool:
        return self.contains(wall)

    def contains(self, wall: Wall) -> bool:
        return wall in self._walls

    def add(self, wall: Wall) -> None:
        self._walls.add(wall)

    def blocks_adjacency(
        self, a: Cell, b: Cell, hypothetical: Optional[Wall] = None
    ) -> bool:
        """
        True if a placed wall (or the hypothetical one, when given) separates adjacent cells a and b.
        Off-board cells are always separated.
        """
        if not is_cell_legal(a) or not is_cell_legal(b):
            return True
        if any(wall in self._walls for wall in blocking_walls(a, b)):
            return True
        return hypothetical is not None and wall_blocks_adjacency(a, b, hypothetical)
