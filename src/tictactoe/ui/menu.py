from __future__ import annotations
from typing import Callable, Optional

from tictactoe.types import Cell
from tictactoe.ui.prompts import MARK_PROMPT, parse_mark


def choose_mark(ask: Optional[Callable[[str], str]] = None) -> Cell:
    """Keep asking until the player picks X or O."""
    ask = ask or input
    while True:
        mark = parse_mark(ask(MARK_PROMPT))
        if mark is not None:
            return mark
