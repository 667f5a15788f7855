"""
Connectivity checks for wall placement.
----

Breadth-first search over the 4-connected grid. A step between two cells is open unless a placed wall,
the hypothetical wall or the board edge blocks it. Pawns do not block paths.

Recomputed from scratch on every call: walls are only ever added, and a search visits each cell at most once.
"""

from collections import deque
from typing import Callable, Iterable, Optional

from src.quoridor.geometry import Cell
from src.quoridor.pieces import PlayerPiece, Wall
from src.quoridor.wall_index import WallIndex


def path_exists(
    start: Cell,
    is_goal: Callable[[Cell], bool],
    walls: WallIndex,
    hypothetical: Optional[Wall] = None,
) -> bool:
    """Is any goal cell reachable from start? Stops as soon as one is found."""
    if is_goal(start):
        return True

    visited: set[Cell] = {start}
    frontier: deque[Cell] = deque([start])
    while frontier:
        cell = frontier.popleft()
        for neighbour in cell.neighbours():
            if neighbour in visited:
                continue
            # board edges are blocked too, so we never expand off the grid
            if walls.blocks_adjacency(cell, neighbour, hypothetical):
                continue
            if is_goal(neighbour):
                return True
            visited.add(neighbour)
            frontier.append(neighbour)
    return False


def path_exists_for_all_players(
    players: Iterable[PlayerPiece],
    walls: WallIndex,
    hypothetical: Optional[Wall] = None,
) -> bool:
    """Every player keeps a path to their goal side. Short-circuits on the first player without one."""
    return all(
        path_exists(player.cell, player.is_goal, walls, hypothetical)
        for player in players
    )
