from tictactoe import config
from tictactoe.core.board import Board
from tictactoe.types import Cell, Position
from tictactoe.ui.render import MARK_STYLE, WIN_LINE, board_lines, paint, render

from conftest import board_from


def test_plain_lines_match_board_text():
    board = board_from(["XO.", ".X.", "O.X"])
    assert "\n".join(board_lines(board)) + "\n" == str(board)


def test_render_prints_status_and_board(capsys):
    render(Board(), "Your move.")
    out = capsys.readouterr().out
    assert out.startswith("TIC-TAC-TOE\nYour move.\n")
    assert " |   |   |   |" in out
    assert "\033[" not in out


def test_marks_get_their_own_color(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", True)
    lines = board_lines(board_from(["XO.", "...", "..."]))
    assert MARK_STYLE[Cell.X] + "X" in lines[1]
    assert MARK_STYLE[Cell.O] + "O" in lines[1]
    # empty cells stay a bare space
    assert lines[1].endswith(" |   |")


def test_winning_line_is_highlighted(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", True)
    board = board_from(["XXX", "OO.", "..."])
    lines = board_lines(board, highlight=board.winning_line())
    assert lines[1].count(WIN_LINE) == 3
    assert WIN_LINE not in lines[3]


def test_paint_is_plain_without_color():
    assert paint("X", MARK_STYLE[Cell.X], WIN_LINE) == "X"
