from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

from typing import Iterable, Sequence, Tuple

import pytest

from dropfour.core.board import Grid
from dropfour.types import Tile

X = Tile.PLAYER1
O = Tile.PLAYER2
_ = Tile.EMPTY


def drop_all(grid: Grid, moves: Iterable[Tuple[int, Tile]]) -> Grid:
    for col, tile in moves:
        grid.place(col, tile)
    return grid


def from_rows(rows: Sequence[str]) -> Grid:
    """
    Build a grid from playable rows written top to bottom, e.g. "x.o.".
    Tiles are dropped bottom-up so the grid is always physically valid.
    """
    width = len(rows[0])
    grid = Grid(width, len(rows) + 1)
    lookup = {"x": X, "o": O}
    for y in range(len(rows) - 1, -1, -1):
        for x, ch in enumerate(rows[y]):
            if ch in lookup:
                grid.place(x + 1, lookup[ch])
    grid.last_move = None
    return grid


@pytest.fixture
def grid() -> Grid:
    return Grid(7, 7)
