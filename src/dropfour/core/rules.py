from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from dropfour.config import CONNECT_N, FIRST_PLAYABLE_ROW
from dropfour.types import Coord, Tile


@dataclass(frozen=True, slots=True)
class Winner:
    tile: Tile
    cells: Tuple[Coord, ...]  # (x, y), starting at the scanned cell


@dataclass(frozen=True, slots=True)
class Draw:
    pass


DRAW = Draw()

# right, up, up-right, up-left as (dx, dr); rows grow downward
_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, -1), (1, -1), (-1, -1))


def _line(cells: Sequence[Sequence[Tile]], r: int, x: int, dx: int, dr: int) -> bool:
    width = len(cells[0])
    tile = cells[r][x]
    for i in range(1, CONNECT_N):
        xi = x + dx * i
        ri = r + dr * i
        if xi < 0 or xi >= width or ri < 0:
            return False
        if cells[ri][xi] is not tile:
            return False
    return True


def check_four(cells: Sequence[Sequence[Tile]]) -> Union[Winner, Draw, None]:
    """
    Scan playable rows top to bottom, columns left to right.
    For every occupied cell test right, then (when enough rows sit above it)
    up, up-right and up-left. The first line found wins, which fixes the
    tie-break when a move completes several lines at once.
    """
    full = True
    for r, row in enumerate(cells):
        for x, tile in enumerate(row):
            if tile is Tile.EMPTY:
                full = False
                continue
            for dx, dr in _DIRECTIONS:
                if dr and r < CONNECT_N - 1:
                    break
                if _line(cells, r, x, dx, dr):
                    line = tuple(
                        (x + dx * i, r + dr * i + FIRST_PLAYABLE_ROW) for i in range(CONNECT_N)
                    )
                    return Winner(tile, line)
    if full:
        return DRAW
    return None

