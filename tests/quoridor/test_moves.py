"""Unit tests for src/quoridor/moves.py"""

import pytest

from src.core.shared_types import Orientation
from src.quoridor.board import Board
from src.quoridor.geometry import BOARD_SIDE_LENGTH, Cell, is_cell_legal
from src.quoridor.moves import candidate_targets, check_move, legal_targets
from src.quoridor.pieces import PlayerPiece, Side, Wall
from src.quoridor.wall_index import WallIndex

H = Orientation.HORIZONTAL
V = Orientation.VERTICAL


def board_with(*cells: Cell) -> Board:
    """Pawns on the given cells. Sides do not matter for movement rules."""
    sides = [Side.LEFT, Side.RIGHT, Side.BOTTOM, Side.TOP]
    return Board(
        [
            PlayerPiece(name=f"player_{i}", cell=cell, start_side=sides[i])
            for i, cell in enumerate(cells)
        ]
    )


# -- SIMPLE STEPS --
@pytest.mark.parametrize(
    "cell", [Cell(x, y) for x in range(BOARD_SIDE_LENGTH) for y in range(BOARD_SIDE_LENGTH)]
)
def test_zero_distance_move_is_illegal(cell: Cell) -> None:
    board = board_with(Cell(0, 0) if cell != Cell(0, 0) else Cell(8, 8))
    assert not check_move(cell, cell, board, WallIndex())


@pytest.mark.parametrize("current", [Cell(0, 0), Cell(4, 4), Cell(8, 3), Cell(2, 8)])
def test_single_step_to_free_cell(current: Cell) -> None:
    board = board_with(current)
    for target in current.neighbours():
        assert check_move(current, target, board, WallIndex()) == is_cell_legal(target)


def test_step_onto_occupied_cell() -> None:
    board = board_with(Cell(4, 4), Cell(4, 5))
    assert not check_move(Cell(4, 4), Cell(4, 5), board, WallIndex())


def test_step_through_wall() -> None:
    board = board_with(Cell(4, 4))
    walls = WallIndex([Wall(Cell(4, 4), H)])
    assert not check_move(Cell(4, 4), Cell(4, 5), board, walls)
    assert check_move(Cell(4, 4), Cell(4, 3), board, walls)


@pytest.mark.parametrize("target", [Cell(4, 7), Cell(7, 4), Cell(5, 6), Cell(4, 4)])
def test_too_far_or_no_move(target: Cell) -> None:
    board = board_with(Cell(4, 4))
    assert not check_move(Cell(4, 4), target, board, WallIndex())


# -- STRAIGHT JUMPS --
def test_straight_jump_over_opponent() -> None:
    board = board_with(Cell(4, 4), Cell(4, 5))
    assert check_move(Cell(4, 4), Cell(4, 6), board, WallIndex())


def test_straight_jump_needs_a_pawn_to_jump_over() -> None:
    board = board_with(Cell(4, 4))
    assert not check_move(Cell(4, 4), Cell(4, 6), board, WallIndex())
    assert not check_move(Cell(4, 4), Cell(2, 4), board, WallIndex())


def test_straight_jump_blocked_behind_opponent() -> None:
    """Wall between (4,5) and (4,6): no straight jump, the diagonals open up instead"""
    board = board_with(Cell(4, 4), Cell(4, 5))
    walls = WallIndex([Wall(Cell(4, 5), H)])
    assert not check_move(Cell(4, 4), Cell(4, 6), board, walls)
    assert check_move(Cell(4, 4), Cell(3, 5), board, walls)
    assert check_move(Cell(4, 4), Cell(5, 5), board, walls)


def test_straight_jump_blocked_in_front_of_opponent() -> None:
    board = board_with(Cell(4, 4), Cell(4, 5))
    walls = WallIndex([Wall(Cell(4, 4), H)])
    assert not check_move(Cell(4, 4), Cell(4, 6), board, walls)
    assert not check_move(Cell(4, 4), Cell(3, 5), board, walls)
    assert not check_move(Cell(4, 4), Cell(5, 5), board, walls)


def test_straight_jump_onto_occupied_cell() -> None:
    board = board_with(Cell(4, 4), Cell(4, 5), Cell(4, 6))
    assert not check_move(Cell(4, 4), Cell(4, 6), board, WallIndex())


# -- DIAGONAL MOVES --
def test_no_diagonal_when_straight_jump_is_open() -> None:
    board = board_with(Cell(4, 4), Cell(4, 5))
    assert not check_move(Cell(4, 4), Cell(3, 5), board, WallIndex())
    assert not check_move(Cell(4, 4), Cell(5, 5), board, WallIndex())


def test_no_diagonal_without_adjacent_pawn() -> None:
    board = board_with(Cell(4, 4))
    assert not check_move(Cell(4, 4), Cell(5, 5), board, WallIndex())


def test_diagonal_at_board_edge() -> None:
    """The board edge behind the opponent works like a wall"""
    board = board_with(Cell(4, 7), Cell(4, 8))
    assert check_move(Cell(4, 7), Cell(3, 8), board, WallIndex())
    assert check_move(Cell(4, 7), Cell(5, 8), board, WallIndex())


def test_diagonal_blocked_by_wall_beside_opponent() -> None:
    board = board_with(Cell(4, 4), Cell(4, 5))
    # behind the opponent, and between the opponent and (3,5)
    walls = WallIndex([Wall(Cell(4, 5), H), Wall(Cell(3, 5), V)])
    assert not check_move(Cell(4, 4), Cell(3, 5), board, walls)
    assert check_move(Cell(4, 4), Cell(5, 5), board, walls)


def test_diagonal_uses_either_elbow() -> None:
    """Opponent to the side (x axis) instead of in front"""
    board = board_with(Cell(4, 4), Cell(5, 4))
    walls = WallIndex([Wall(Cell(5, 4), V)])
    assert check_move(Cell(4, 4), Cell(5, 5), board, walls)
    assert check_move(Cell(4, 4), Cell(5, 3), board, walls)
    assert not check_move(Cell(4, 4), Cell(6, 4), board, walls)


# -- ENUMERATION --
def test_candidate_targets_around_opponent() -> None:
    board = board_with(Cell(4, 4), Cell(4, 5))
    candidates = candidate_targets(Cell(4, 4), board)
    assert Cell(4, 4) not in candidates
    assert {Cell(3, 5), Cell(5, 5), Cell(4, 6), Cell(3, 4), Cell(5, 4), Cell(4, 3)} <= candidates


def test_legal_targets_from_start() -> None:
    board = board_with(Cell(0, 4), Cell(8, 4))
    assert legal_targets(Cell(0, 4), board, WallIndex()) == [
        Cell(0, 3),
        Cell(0, 5),
        Cell(1, 4),
    ]
