from __future__ import annotations
from typing import Iterable, List, Optional, Set

from dropfour import config
from dropfour.core.board import Grid
from dropfour.types import Coord, Tile

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"
FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

_TILE_COLOR = {Tile.PLAYER1: FG_RED, Tile.PLAYER2: FG_YELLOW}


def paint(s: str, *codes: str) -> str:
    if not config.USE_COLOR or not codes:
        return s
    return "".join(codes) + s + RESET


def _piece(tile: Tile, highlighted: bool = False, empty: str = "·") -> str:
    if tile is Tile.EMPTY:
        return paint(empty, FG_GRAY)
    if highlighted:
        if not config.USE_COLOR:
            return tile.value.upper()
        return paint(tile.value, REVERSE, _TILE_COLOR[tile])
    return paint(tile.value, _TILE_COLOR[tile])


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render_lines(grid: Grid, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> List[str]:
    """
    Text frame for the grid. Winning cells are shown reversed
    (upper-case when color is off). The indicator row is drawn as a cursor
    line above the column numbers.
    """
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [paint("CONNECT 4", BOLD), paint(status, FG_CYAN) if status else ""]
    lines.append("   " + " ".join(_piece(grid.get(x, 0), empty=" ") for x in range(grid.width)))
    lines.append(paint("   " + " ".join(str((x + 1) % 10) for x in range(grid.width)), DIM))

    for y in range(config.FIRST_PLAYABLE_ROW, grid.height):
        parts = [_piece(grid.get(x, y), (x, y) in hl) for x in range(grid.width)]
        lines.append(" | " + " ".join(parts) + " |")

    lines.append(paint("   " + "—" * (2 * grid.width - 1), DIM))
    lines.append(paint(f"   Enter 1-{grid.width} to drop. Enter q to quit, h for help.", DIM))
    return lines


def render(grid: Grid, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()
    print("\n".join(render_lines(grid, status, highlight)))
