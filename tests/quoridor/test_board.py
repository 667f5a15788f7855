"""Unit tests for src/quoridor/board.py"""

import pytest

from src.core.exceptions import GameStateError, PlayerNotFoundError
from src.core.shared_types import Orientation
from src.quoridor.board import Board
from src.quoridor.geometry import Cell
from src.quoridor.pieces import PlayerPiece, Side, Wall


@pytest.fixture
def board() -> Board:
    return Board.starting_board(["alice", "bob", "carol", "dave"])


def test_starting_board(board: Board) -> None:
    assert [p.start_side for p in board.players] == [
        Side.LEFT,
        Side.RIGHT,
        Side.BOTTOM,
        Side.TOP,
    ]
    assert board.walls == []


def test_find_player(board: Board) -> None:
    assert board.find_player("alice") == 0
    assert board.find_player("dave") == 3
    assert board.find_player("mallory") is None


def test_player_lookup(board: Board) -> None:
    assert board.player("carol").cell == Cell(4, 0)
    with pytest.raises(PlayerNotFoundError):
        _ = board.player("mallory")


def test_occupancy(board: Board) -> None:
    assert board.occupied_cells() == {Cell(0, 4), Cell(8, 4), Cell(4, 0), Cell(4, 8)}
    assert not board.is_free(Cell(4, 8))
    assert board.is_free(Cell(4, 4))


def test_move_and_add_wall(board: Board) -> None:
    board.move_player(0, Cell(1, 4))
    board.add_wall(Wall(Cell(0, 0), Orientation.VERTICAL))
    assert board.player("alice").cell == Cell(1, 4)
    assert board.is_free(Cell(0, 4))
    assert len(board.walls) == 1


def test_names_are_unique() -> None:
    with pytest.raises(GameStateError):
        _ = Board(
            [
                PlayerPiece("alice", Cell(0, 4), Side.LEFT),
                PlayerPiece("alice", Cell(8, 4), Side.RIGHT),
            ]
        )
