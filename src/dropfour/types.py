# src/dropfour/types.py

from __future__ import annotations
from enum import Enum
from typing import NewType, Tuple

Column = NewType("Column", int)   # 1..width, as seen by every caller
Coord = Tuple[int, int]           # (x, y), 0-indexed, y == 0 is the indicator row


class Tile(Enum):
    PLAYER1 = "x"
    PLAYER2 = "o"
    EMPTY = "."

    def __str__(self) -> str:
        return self.value

    @property
    def opponent(self) -> "Tile":
        if self is Tile.PLAYER1:
            return Tile.PLAYER2
        if self is Tile.PLAYER2:
            return Tile.PLAYER1
        return Tile.EMPTY
