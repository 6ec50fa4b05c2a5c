import pytest

from tictactoe.core.board import Board
from tictactoe.types import Cell, Position

from conftest import board_from


def test_new_board_is_empty():
    board = Board()
    assert all(board.is_cell_empty(r, c) for r in range(3) for c in range(3))
    assert board.get_winner() is None
    assert board.is_tie() is False
    assert len(board.empty_cells()) == 9


def test_insert_then_cell_is_not_empty():
    board = Board()
    board.insert(1, 2, Cell.O)
    assert board.is_cell_empty(1, 2) is False
    assert board.cell(1, 2) is Cell.O
    assert Position(1, 2) not in board.empty_cells()


def test_insert_overwrites_without_checking():
    board = Board()
    board.insert(0, 0, Cell.X)
    board.insert(0, 0, Cell.O)
    assert board.cell(0, 0) is Cell.O


@pytest.mark.parametrize("row,col", [(3, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_range_index_is_a_programming_error(row, col):
    board = Board()
    with pytest.raises(IndexError):
        board.is_cell_empty(row, col)
    with pytest.raises(IndexError):
        board.insert(row, col, Cell.X)


def test_str_layout():
    board = board_from(["XO.", "...", "..O"])
    assert str(board) == (
        " -------------\n"
        " | X | O |   |\n"
        " -------------\n"
        " |   |   |   |\n"
        " -------------\n"
        " |   |   | O |\n"
        " -------------\n"
    )


def test_alternating_full_board_is_a_tie():
    board = board_from(["XOX", "XOO", "OXX"])
    assert board.get_winner() is None
    assert board.is_tie() is True


def test_full_board_with_line_still_reports_winner():
    board = board_from(["XXX", "OOX", "XOO"])
    assert board.get_winner() is Cell.X
    assert board.is_tie() is True  # full, but callers check the winner first


def test_cell_opponent():
    assert Cell.X.opponent() is Cell.O
    assert Cell.O.opponent() is Cell.X
    with pytest.raises(ValueError):
        Cell.EMPTY.opponent()
