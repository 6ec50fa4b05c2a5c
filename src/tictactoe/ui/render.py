from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Set

from tictactoe import config
from tictactoe.core.board import Board, RULE
from tictactoe.types import Cell, Position

RESET = "\033[0m"
TITLE = "\033[1m"
FRAME = "\033[2m"
STATUS = "\033[36m"
WIN_LINE = "\033[7m"  # reverse video

MARK_STYLE: Dict[Cell, str] = {
    Cell.X: "\033[31m",
    Cell.O: "\033[33m",
}


def paint(text: str, *codes: str) -> str:
    if not config.USE_COLOR or not codes:
        return text
    return f"{''.join(codes)}{text}{RESET}"


def _piece(cell: Cell, highlighted: bool = False) -> str:
    codes = [MARK_STYLE[cell]] if cell in MARK_STYLE else []
    if highlighted:
        codes.append(WIN_LINE)
    return paint(cell.char, *codes)


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Position]] = None) -> List[str]:
    hl: Set[Position] = {Position(*p) for p in highlight} if highlight else set()

    lines = [paint(RULE, FRAME)]
    for r, row in enumerate(board.grid):
        parts = [f" | {_piece(cell, Position(r, col) in hl)}" for col, cell in enumerate(row)]
        lines.append("".join(parts) + " |")
        lines.append(paint(RULE, FRAME))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Position]] = None) -> None:
    clear_screen()

    print(paint("TIC-TAC-TOE", TITLE))
    if status:
        print(paint(status, STATUS))
    else:
        print()

    for line in board_lines(board, highlight):
        print(line)
