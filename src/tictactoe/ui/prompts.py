from __future__ import annotations
from typing import Optional

from tictactoe.config import SIZE
from tictactoe.core.board import Board
from tictactoe.types import Cell, Position

MARK_PROMPT = "Do you want to play as X or O? "


class InvalidMoveError(ValueError):
    """Raised for move text the player has to type again."""


def parse_mark(raw: str) -> Optional[Cell]:
    s = raw.strip().lower()
    if s == "x":
        return Cell.X
    if s == "o":
        return Cell.O
    return None


def _index(s: str) -> int:
    # Digits only: no inner spaces, signs or "²" (isdigit() alone accepts it)
    if not s or not (s.isascii() and s.isdigit()):
        raise InvalidMoveError("The index value is invalid. Use whole numbers like 0,2.")
    value = int(s)
    if value >= SIZE:
        raise InvalidMoveError(f"The index value is invalid. Each index must be between 0 and {SIZE - 1}.")
    return value


def parse_move(raw: str, board: Optional[Board] = None) -> Position:
    """
    Turn "row,column" into a Position. Only the whole line is trimmed,
    so "1, 2" is rejected.

    Raises InvalidMoveError when the text is malformed, an index is out of
    range, or (when a board is given) the cell is already taken.
    """
    parts = raw.strip().split(",")
    if len(parts) != 2:
        raise InvalidMoveError('Your answer is not written in the right format. Use "row,column".')

    move = Position(_index(parts[0]), _index(parts[1]))

    if board is not None and not board.is_cell_empty(move.row, move.column):
        raise InvalidMoveError("The position you chose already contains a value. Try again.")
    return move


def move_prompt(mark: Cell) -> str:
    return f'Where do you want to place your {mark.char}? ("row,column", each between 0 and {SIZE - 1}): '
