# src/dropfour/config.py

from __future__ import annotations
import os

WIDTH = 7
HEIGHT = 7  # includes the indicator row
MIN_WIDTH = 4
MIN_HEIGHT = 5
CONNECT_N = 4
FIRST_PLAYABLE_ROW = 1

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True
AI_MOVE_DELAY_SEC = 0.5  # short pause so AI moves aren’t instant

# Logging
LOG_LEVEL = os.environ.get("DROPFOUR_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Self-play
SELFPLAY_GAMES = 100
RESULTS_DIR = "data/results"
