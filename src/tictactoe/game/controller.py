from __future__ import annotations
import logging
from typing import Callable, Optional

from tictactoe.ai.base import Agent
from tictactoe.core.board import Board
from tictactoe.game.actions import apply_move
from tictactoe.game.results import Outcome, Status, outcome
from tictactoe.game.state import GameState
from tictactoe.types import Cell
from tictactoe.ui.prompts import move_prompt, parse_move
from tictactoe.ui.render import render

logger = logging.getLogger(__name__)

GAME_OVER = "The game is over!"
HUMAN_WINS = "You won!"
BOT_WINS = "You lost to the bot."
TIE = "It's a tie."


def _status_with_players(status: str, state: GameState, bot: Agent) -> str:
    """
    Prepend a persistent header showing who plays which mark.
    """
    header = f"You: {state.human.char} | {bot.name}: {state.bot.char}"
    if status:
        return f"{header}\n{status}"
    return header


def _announce(state: GameState, bot: Agent, result: Outcome) -> None:
    if result.status is Status.TIE:
        message = TIE
    elif result.winner is state.human:
        message = HUMAN_WINS
    else:
        message = BOT_WINS

    render(state.board, _status_with_players("", state, bot), highlight=result.line)
    print(GAME_OVER)
    print(message)
    logger.debug("game finished: %s (winner=%s)", result.status.value, result.winner)


def run_game(
    bot: Agent,
    human: Cell,
    ask: Optional[Callable[[str], str]] = None,
) -> Outcome:
    ask = ask or input
    state = GameState(
        board=Board(),
        human=human,
        bot=human.opponent(),
        current=human,
        last_status=f"You play {human.char}. Good luck!",
    )

    while True:
        if state.humans_turn:
            render(state.board, _status_with_players(state.last_status, state, bot))
            raw = ask(move_prompt(state.human))
            try:
                move = parse_move(raw, state.board)
                apply_move(state.board, move, state.human)
            except ValueError as e:
                # Nothing was committed; ask again.
                state.last_status = str(e)
                continue
            state.last_status = f"You played {move.row},{move.column}."

        else:
            move = bot.choose_move(state)
            apply_move(state.board, move, state.bot)
            state.last_status = f"{bot.name} played {move.row},{move.column}."

        result = outcome(state.board)
        if result.is_over:
            _announce(state, bot, result)
            return result

        state.current = state.current.opponent()
