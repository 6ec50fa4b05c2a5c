from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from tictactoe.config import SIZE
from tictactoe.types import Cell, Position

Grid = Sequence[Sequence[Cell]]


def _lines() -> List[List[Position]]:
    lines: List[List[Position]] = []

    # Rows, top to bottom
    for r in range(SIZE):
        lines.append([Position(r, c) for c in range(SIZE)])

    # Columns, left to right
    for c in range(SIZE):
        lines.append([Position(r, c) for r in range(SIZE)])

    # Main diagonal, then anti-diagonal
    lines.append([Position(i, i) for i in range(SIZE)])
    lines.append([Position(i, SIZE - 1 - i) for i in range(SIZE)])
    return lines


WIN_LINES: Tuple[Tuple[Position, ...], ...] = tuple(tuple(line) for line in _lines())


def check_winner_with_line(grid: Grid) -> Optional[Tuple[Cell, List[Position]]]:
    for line in WIN_LINES:
        first = grid[line[0].row][line[0].column]
        if first is Cell.EMPTY:
            continue
        if all(grid[r][c] is first for r, c in line[1:]):
            return first, list(line)
    return None


def check_winner(grid: Grid) -> Optional[Cell]:
    res = check_winner_with_line(grid)
    return res[0] if res else None


def is_full(grid: Grid) -> bool:
    return all(cell is not Cell.EMPTY for row in grid for cell in row)
