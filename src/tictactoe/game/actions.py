from __future__ import annotations
import logging

from tictactoe.core.board import Board
from tictactoe.types import Cell, Position

logger = logging.getLogger(__name__)


def apply_move(board: Board, move: Position, mark: Cell) -> None:
    if not board.is_cell_empty(move.row, move.column):
        raise ValueError("The position you chose already contains a value. Try again.")
    board.insert(move.row, move.column, mark)
    logger.debug("%s placed at %d,%d", mark.char, move.row, move.column)
