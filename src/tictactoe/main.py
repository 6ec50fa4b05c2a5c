from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

from tictactoe import config
from tictactoe.ai.random_agent import POLICIES, RandomAgent
from tictactoe.game.controller import run_game
from tictactoe.ui.menu import choose_mark

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tictactoe", description="Play tic-tac-toe against a random bot.")
    ap.add_argument("--seed", type=int, default=None, help="Seed the bot's random source for a reproducible game")
    ap.add_argument("--policy", choices=POLICIES, default=config.BOT_POLICY, help="How the bot draws a random empty cell")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    return ap


def apply_options(args: argparse.Namespace) -> None:
    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False
    config.BOT_POLICY = args.policy


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    apply_options(args)

    bot = RandomAgent(policy=args.policy, rng=random.Random(args.seed))
    logger.debug("bot policy=%s seed=%s", args.policy, args.seed)

    try:
        human = choose_mark()
        run_game(bot, human)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
