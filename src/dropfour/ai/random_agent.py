from __future__ import annotations
import random
from dataclasses import dataclass, field

from dropfour.errors import NoLegalMove
from dropfour.game.state import GameState
from dropfour.types import Column


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)

    def choose_move(self, state: GameState) -> Column:
        moves = state.grid.valid_columns()
        if not moves:
            raise NoLegalMove()
        return self.rng.choice(moves)
