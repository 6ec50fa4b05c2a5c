# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from tictactoe.config import SIZE
from tictactoe.types import Cell, Position
from tictactoe.core.rules import check_winner, check_winner_with_line, is_full

RULE = " " + "-" * (4 * SIZE + 1)


@dataclass(slots=True)
class Board:
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[Cell.EMPTY for _ in range(SIZE)] for _ in range(SIZE)]

    @staticmethod
    def _check_index(row: int, column: int) -> None:
        # Negative indices would silently wrap around on a list.
        if not (0 <= row < SIZE and 0 <= column < SIZE):
            raise IndexError(f"Position ({row}, {column}) is off the board.")

    def cell(self, row: int, column: int) -> Cell:
        self._check_index(row, column)
        return self.grid[row][column]

    def insert(self, row: int, column: int, cell: Cell) -> None:
        """
        Put a cell value on the board.
        Does not check occupancy: callers must make sure the target is empty.
        """
        self._check_index(row, column)
        self.grid[row][column] = cell

    def is_cell_empty(self, row: int, column: int) -> bool:
        return self.cell(row, column) is Cell.EMPTY

    def empty_cells(self) -> List[Position]:
        return [
            Position(r, c)
            for r in range(SIZE)
            for c in range(SIZE)
            if self.grid[r][c] is Cell.EMPTY
        ]

    def get_winner(self) -> Optional[Cell]:
        return check_winner(self.grid)

    def winning_line(self) -> Optional[List[Position]]:
        res = check_winner_with_line(self.grid)
        return res[1] if res else None

    def is_tie(self) -> bool:
        # A full board with a line is a win: check get_winner() first.
        return is_full(self.grid)

    def __str__(self) -> str:
        out = [RULE]
        for row in self.grid:
            out.append("".join(f" | {cell.char}" for cell in row) + " |")
            out.append(RULE)
        return "\n".join(out) + "\n"
