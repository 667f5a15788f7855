"""Wall placement rules"""

from typing import Iterable

from src.quoridor.pathfinding import path_exists_for_all_players
from src.quoridor.pieces import PlayerPiece, Wall
from src.quoridor.wall_index import WallIndex


def is_wall_structurally_free(wall: Wall, walls: WallIndex) -> bool:
    """
    In bounds and not clashing with a placed wall.
    ---

    Clashing walls:
    * the identical wall
    * the perpendicular wall on the same anchor (the two would cross)
    * the same orientation one slot before or after along the wall's own axis (the two would overlap)
    """
    if not wall.is_in_bounds():
        return False

    clashing = (wall, wall.crossing(), *wall.collinear_neighbours())
    return not any(walls.contains(other) for other in clashing)


def check_add_wall(wall: Wall, players: Iterable[PlayerPiece], walls: WallIndex) -> bool:
    """Structural checks first (cheap), then make sure nobody gets locked away from their goal."""
    if not is_wall_structurally_free(wall, walls):
        return False
    return path_exists_for_all_players(players, walls, hypothetical=wall)
