"""
Pawn movement rules
-----

A pawn moves one cell orthogonally. When another pawn stands next to it, it may jump straight over that pawn,
and when the straight jump is blocked (by a wall or the board edge) it may step diagonally around it instead.

All functions here only answer questions. Applying a move is done by the engine.
"""

from typing import Protocol

from src.quoridor.geometry import Cell, is_cell_legal
from src.quoridor.wall_index import WallIndex


class Board(Protocol):
    """Just the parts the movement rules need"""

    def is_free(self, cell: Cell) -> bool: ...


def check_move(current: Cell, target: Cell, board: Board, walls: WallIndex) -> bool:
    """
    Can a pawn standing on `current` move to `target`?
    ----

    The board does not need to hold a pawn at `current`. Rules, first failing one rejects:
    1. the target lies on the board
    2. the target is not occupied
    3. the target is one or two steps away (Manhattan distance)
    4. one step: no wall in between
    5. two steps: straight jump or diagonal move (see helpers)
    """
    if not is_cell_legal(target):
        return False

    if not board.is_free(target):
        return False

    distance = current.distance(target)
    if distance not in (1, 2):
        return False

    if distance == 1:
        return not walls.blocks_adjacency(current, target)

    dx, dy = current.delta(target)
    if dx == 0 or dy == 0:
        return _is_straight_jump(current, target, board, walls)
    return _is_diagonal_move(current, target, board, walls)


def _is_straight_jump(current: Cell, target: Cell, board: Board, walls: WallIndex) -> bool:
    """Jump over the pawn on the midpoint. Neither half of the jump may cross a wall."""
    dx, dy = current.delta(target)
    midpoint = current.shifted((dx // 2, dy // 2))
    if board.is_free(midpoint):
        return False
    return not walls.blocks_adjacency(current, midpoint) and not walls.blocks_adjacency(
        midpoint, target
    )


def _is_diagonal_move(current: Cell, target: Cell, board: Board, walls: WallIndex) -> bool:
    """
    Diagonal move around an adjacent pawn
    ---

    Only allowed as a fallback. The two "elbow" cells share one coordinate with current and the other with target.
    For at least one elbow:
    * a pawn stands on it
    * nothing blocks current -> elbow
    * the straight continuation (elbow + the same step again) is blocked by a wall or the edge
    * nothing blocks elbow -> target
    """
    for elbow in (Cell(current.x, target.y), Cell(target.x, current.y)):
        if board.is_free(elbow):
            continue
        beyond = elbow.shifted(current.delta(elbow))
        if (
            not walls.blocks_adjacency(current, elbow)
            and walls.blocks_adjacency(elbow, beyond)
            and not walls.blocks_adjacency(elbow, target)
        ):
            return True
    return False


def candidate_targets(current: Cell, board: Board) -> set[Cell]:
    """
    Cells worth testing with check_move.
    ---

    Free neighbours, and around every occupied neighbour its own neighbours (straight jumps and diagonals).
    Contains illegal targets too; filtering is check_move's job.
    """
    candidates: set[Cell] = set()
    for neighbour in current.neighbours():
        if board.is_free(neighbour):
            candidates.add(neighbour)
        else:
            candidates.update(neighbour.neighbours())
    candidates.discard(current)
    return candidates


def legal_targets(current: Cell, board: Board, walls: WallIndex) -> list[Cell]:
    """Every cell the pawn on `current` may move to, sorted for a stable output"""
    return sorted(
        target
        for target in candidate_targets(current, board)
        if check_move(current, target, board, walls)
    )
