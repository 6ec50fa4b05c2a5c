from __future__ import annotations
import logging
import random
from typing import Optional

from tictactoe import config
from tictactoe.game.state import GameState
from tictactoe.types import Position

logger = logging.getLogger(__name__)

POLICIES = ("reject", "enumerate")


class RandomAgent:
    """
    Picks an empty cell uniformly at random.

    policy="reject" samples (row, column) pairs until it hits an empty cell.
    policy="enumerate" picks straight from the list of empty cells.
    Both draw from the same distribution.
    """

    name = "Random Bot"

    def __init__(self, policy: Optional[str] = None, rng: Optional[random.Random] = None) -> None:
        policy = policy or config.BOT_POLICY
        if policy not in POLICIES:
            raise ValueError(f"Unknown policy {policy!r}. Use one of: {', '.join(POLICIES)}.")
        self.policy = policy
        self.rng = rng or random.Random()

    def choose_move(self, state: GameState) -> Position:
        board = state.board
        moves = board.empty_cells()
        if not moves:
            raise ValueError("No valid moves.")

        if self.policy == "enumerate":
            return self.rng.choice(moves)

        attempts = 0
        while True:
            attempts += 1
            row = self.rng.randrange(config.SIZE)
            column = self.rng.randrange(config.SIZE)
            if board.is_cell_empty(row, column):
                logger.debug("sampled %d,%d after %d attempt(s)", row, column, attempts)
                return Position(row, column)
