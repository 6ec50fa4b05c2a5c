from __future__ import annotations
from typing import Callable, Iterable, List

import pytest

from tictactoe import config
from tictactoe.core.board import Board
from tictactoe.types import Cell


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)
    monkeypatch.setattr(config, "BOT_POLICY", "reject")


def board_from(rows: Iterable[str]) -> Board:
    """Build a board from strings like "XO." ("." is empty)."""
    lookup = {"X": Cell.X, "O": Cell.O, ".": Cell.EMPTY}
    return Board([[lookup[ch] for ch in row] for row in rows])


def scripted(lines: List[str]) -> Callable[[str], str]:
    feed = iter(lines)
    prompts: List[str] = []

    def ask(prompt: str) -> str:
        prompts.append(prompt)
        return next(feed)

    ask.prompts = prompts  # type: ignore[attr-defined]
    return ask
