# src/tictactoe/config.py

from __future__ import annotations

SIZE = 3  # the board is always 3x3

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# How the bot draws a random empty cell: "reject" or "enumerate"
BOT_POLICY = "reject"
