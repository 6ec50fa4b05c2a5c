from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from tictactoe.core.board import Board
from tictactoe.types import Cell, Position


class Status(Enum):
    IN_PROGRESS = "in progress"
    WIN = "win"
    TIE = "tie"


@dataclass(frozen=True, slots=True)
class Outcome:
    status: Status
    winner: Optional[Cell] = None
    line: Optional[List[Position]] = None

    @property
    def is_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS


def outcome(board: Board) -> Outcome:
    """
    Classify the board. The winner check always runs first, so a full
    board with a completed line counts as a win and never as a tie.
    """
    line = board.winning_line()
    if line is not None:
        r, c = line[0]
        return Outcome(Status.WIN, winner=board.cell(r, c), line=line)

    if board.is_tie():
        return Outcome(Status.TIE)

    return Outcome(Status.IN_PROGRESS)
