# src/tictactoe/types.py

from __future__ import annotations
from enum import Enum
from typing import NamedTuple


class Cell(Enum):
    X = "X"
    O = "O"
    EMPTY = " "

    @property
    def char(self) -> str:
        return self.value

    def opponent(self) -> "Cell":
        if self is Cell.X:
            return Cell.O
        if self is Cell.O:
            return Cell.X
        raise ValueError("Empty cell has no opponent.")

    def __str__(self) -> str:
        return self.value


class Position(NamedTuple):
    row: int     # 0..2
    column: int  # 0..2
