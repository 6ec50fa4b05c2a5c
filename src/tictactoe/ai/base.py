from __future__ import annotations
from typing import Protocol

from tictactoe.game.state import GameState
from tictactoe.types import Position


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Position:
        ...
