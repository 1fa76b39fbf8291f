from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, Tuple

from dropfour.ai.advisor import MoveAdvisor
from dropfour.game.state import GameState
from dropfour.types import Column, Tile


@dataclass(slots=True)
class AdvisorAgent:
    """
    Agent wrapper around MoveAdvisor.
    Keeps one advisor per (tile, width, height) so scratch grids are reused.
    """
    name: str = "Advisor"
    seed: int | None = None
    rng: random.Random = field(init=False)
    last_info: dict = field(default_factory=dict)
    _advisors: Dict[Tuple[Tile, int, int], MoveAdvisor] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def advisor_for(self, tile: Tile, width: int, height: int) -> MoveAdvisor:
        key = (tile, width, height)
        adv = self._advisors.get(key)
        if adv is None:
            adv = MoveAdvisor(width, height, tile=tile, opponent=tile.opponent, rng=self.rng)
            self._advisors[key] = adv
        return adv

    def choose_move(self, state: GameState) -> Column:
        grid = state.grid
        adv = self.advisor_for(state.current, grid.width, grid.height)
        col = adv.recommend_move(grid)
        self.last_info = dict(adv.last_info)
        return col
