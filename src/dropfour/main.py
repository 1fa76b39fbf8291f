from __future__ import annotations

import argparse
import logging
import random
import sys

from dropfour import config
from dropfour.ai.advisor import MoveAdvisor
from dropfour.core.board import Grid
from dropfour.errors import DimensionError, InvalidInput
from dropfour.game.controller import finish_round, play_round
from dropfour.game.players import ActivePlayer, Players
from dropfour.log import configure_logging
from dropfour.ui.prompts import SESSION_HELP, Command, parse_input

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="dropfour", description="Play four-in-a-row in the terminal.")
    ap.add_argument("--width", type=int, default=config.WIDTH, help="Number of columns (>= 4)")
    ap.add_argument("--height", type=int, default=config.HEIGHT, help="Number of rows including the cursor row (>= 5)")
    ap.add_argument("--ai", action="store_true", help="Start with the computer opponent enabled")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the computer opponent's tie-breaks")
    ap.add_argument("--log-level", type=str, default=None, help="Logging level (default from DROPFOUR_LOG_LEVEL)")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    return ap


def run_session(grid: Grid, advisor: MoveAdvisor, *, ai_enabled: bool = False, read_input=input) -> Players:
    players = Players()

    while True:
        raw = read_input('Start new round? [Y/n]\t(type "help" for help page) ')
        try:
            inp = parse_input(raw)
        except InvalidInput:
            print("Invalid")
            continue

        if inp.command in (Command.ENTER, Command.YES):
            play_round(grid, players, advisor, ai_enabled=ai_enabled, read_input=read_input)
            if not ai_enabled:
                print(f"\n{players.scoreline()}")
            finish_round(grid, players, ai_enabled=ai_enabled)
        elif inp.command in (Command.NO, Command.QUIT):
            return players
        elif inp.command is Command.TOGGLE_AI:
            ai_enabled = not ai_enabled
            print(f"Toggling AI {'on' if ai_enabled else 'off'}")
            players.set_active(ActivePlayer.PLAYER1)
        elif inp.command is Command.HELP:
            print(SESSION_HELP)
        else:
            print("Invalid")


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    configure_logging(args.log_level)
    if args.no_color:
        config.USE_COLOR = False

    try:
        grid = Grid(args.width, args.height)
    except DimensionError as e:
        print(e, file=sys.stderr)
        return 2

    advisor = MoveAdvisor(grid.width, grid.height, rng=random.Random(args.seed))
    logger.debug("session on %dx%d grid", grid.width, grid.height)

    try:
        run_session(grid, advisor, ai_enabled=args.ai)
    except (KeyboardInterrupt, EOFError):
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
