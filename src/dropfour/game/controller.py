from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from dropfour import config
from dropfour.ai.advisor import MoveAdvisor
from dropfour.core.board import Grid
from dropfour.core.rules import Draw, Winner
from dropfour.errors import GameError
from dropfour.game.players import ActivePlayer, Player, Players
from dropfour.types import Coord, Tile
from dropfour.ui.prompts import ROUND_HELP, Command, parse_input
from dropfour.ui.render import render

logger = logging.getLogger(__name__)

Renderer = Callable[..., None]
Reader = Callable[[str], str]


@dataclass(slots=True)
class RoundResult:
    winner: Optional[Player] = None
    line: List[Coord] = field(default_factory=list)
    draw: bool = False
    quit: bool = False
    moves: int = 0

    @property
    def winner_tile(self) -> Tile:
        return self.winner.tile if self.winner else Tile.EMPTY


def _status(players: Players, extra: str = "") -> str:
    header = f"{players.current().name}'s turn."
    if extra:
        return f"{extra}\n{header}"
    return header


def _human_turn(grid: Grid, player: Player, read_input: Reader, show: Renderer, players: Players) -> bool:
    """
    Read input until the human places a tile.
    Returns False when the round should be abandoned.
    """
    status = ""
    while True:
        show(grid, _status(players, status))
        raw = read_input(f"{player.name} move: ")
        try:
            inp = parse_input(raw, grid.width)
            if inp.command is Command.COLUMN:
                grid.place(inp.column, player.tile)
                return True
            if inp.command is Command.ENTER:
                grid.place_at_selection()
                return True
            if inp.command is Command.LEFT:
                grid.move_selection_left()
                status = ""
            elif inp.command is Command.RIGHT:
                grid.move_selection_right()
                status = ""
            elif inp.command is Command.QUIT:
                return False
            elif inp.command is Command.HELP:
                status = ROUND_HELP.format(width=grid.width)
            else:
                status = f"Enter a column between 1 and {grid.width}."
        except GameError as e:
            status = str(e)


def play_round(
    grid: Grid,
    players: Players,
    advisor: Optional[MoveAdvisor] = None,
    *,
    ai_enabled: bool = False,
    read_input: Reader = input,
    show: Renderer = render,
    ai_delay_sec: float = config.AI_MOVE_DELAY_SEC,
) -> RoundResult:
    """
    Play one round on `grid` until a win, a draw or a quit.
    The grid is left as it ended so the caller can show the final position;
    finish_round() resets it.
    """
    if ai_enabled and advisor is None:
        advisor = MoveAdvisor(grid.width, grid.height, tile=players.ai.tile, opponent=players.player1.tile)

    result = RoundResult()
    grid.set_active_tile(players.current().tile)
    last = ""

    while True:
        player = players.current()

        if players.active is ActivePlayer.AI:
            show(grid, _status(players, last))
            if ai_delay_sec > 0:
                time.sleep(ai_delay_sec)
            col = advisor.recommend_move(grid)
            grid.place(col, player.tile)
            last = f"{player.name} placed in column {col}"
            logger.info("%s placed in column %d (%s)", player.name, col, advisor.last_info.get("reason"))
        else:
            if not _human_turn(grid, player, read_input, show, players):
                result.quit = True
                logger.info("round quit after %d moves", result.moves)
                return result
            last = ""

        result.moves += 1
        outcome = grid.check_four()

        if isinstance(outcome, Winner):
            players.scored()
            result.winner = player
            result.line = list(outcome.cells)
            grid.clear_active_tile()
            show(grid, f"{player.name} wins", highlight=result.line)
            logger.info("%s wins after %d moves", player.name, result.moves)
            return result

        if isinstance(outcome, Draw):
            result.draw = True
            grid.clear_active_tile()
            show(grid, "Draw")
            logger.info("draw after %d moves", result.moves)
            return result

        players.swap(ai_enabled)
        grid.set_active_tile(players.current().tile)


def finish_round(grid: Grid, players: Players, *, ai_enabled: bool) -> None:
    """Prepare seats and grid for the next round."""
    if ai_enabled:
        players.set_active(ActivePlayer.PLAYER1)
    else:
        players.swap()
    grid.reset()
    grid.set_active_tile(players.current().tile)
