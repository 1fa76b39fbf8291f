from __future__ import annotations
from dataclasses import dataclass

from dropfour.core.board import Grid
from dropfour.types import Tile


@dataclass(slots=True)
class GameState:
    grid: Grid
    current: Tile
    last_status: str = ""
