from __future__ import annotations
from dataclasses import dataclass

from tictactoe.core.board import Board
from tictactoe.types import Cell


@dataclass(slots=True)
class GameState:
    board: Board
    human: Cell
    bot: Cell
    current: Cell
    last_status: str = ""

    @property
    def humans_turn(self) -> bool:
        return self.current is self.human
