from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional, Union

from dropfour.config import WIDTH, HEIGHT
from dropfour.core.board import Grid
from dropfour.core.rules import Winner
from dropfour.errors import ColumnFull as ColumnFullError, NoLegalMove
from dropfour.types import Column, Tile

logger = logging.getLogger(__name__)


# ----- ranking outcomes, best first -----
@dataclass(frozen=True, slots=True)
class WinChance:
    column: int


@dataclass(frozen=True, slots=True)
class Neutral:
    column: int


@dataclass(frozen=True, slots=True)
class OpponentWin:
    column: int


@dataclass(frozen=True, slots=True)
class ColumnFull:
    column: int


@dataclass(frozen=True, slots=True)
class NoOptions:
    pass


Ranking = Union[WinChance, Neutral, OpponentWin, ColumnFull, NoOptions]


@dataclass(slots=True)
class MoveAdvisor:
    """
    Two-ply local heuristic, not a game-tree search:
      1) complete four-in-a-row if possible
      2) block the opponent's immediate four
      3) walk a shuffled column list and keep the first column that sets up a
         follow-up win, or failing that one that hands the opponent no
         immediate reply; a column that does is only kept as a last resort

    Every candidate is ranked against the current board. `scratch` is reset
    from `reference` before each one.
    """
    width: int = WIDTH
    height: int = HEIGHT
    tile: Tile = Tile.PLAYER2
    opponent: Tile = Tile.PLAYER1
    rng: random.Random = field(default_factory=random.Random)

    reference: Grid = field(init=False)
    scratch: Grid = field(init=False)
    last_info: dict = field(default_factory=dict)
    _probes: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if self.tile is Tile.EMPTY or self.opponent is Tile.EMPTY or self.tile is self.opponent:
            raise ValueError("Advisor and opponent need two distinct player tiles.")
        self.reference = Grid(self.width, self.height)
        self.scratch = Grid(self.width, self.height)

    def recommend_move(self, grid: Grid) -> Column:
        """Return the 1-indexed column the advisor wants to play on `grid`."""
        t0 = time.perf_counter()
        self._probes = 0

        if grid.is_full():
            raise NoLegalMove()

        self.reference.copy_from(grid)
        self.scratch.copy_from(grid)

        col = self.winning_column(self.tile)
        if col is not None:
            logger.debug("making four at column %d", col)
            return self._done(col, "win", t0)

        col = self.winning_column(self.opponent)
        if col is not None:
            logger.debug("blocking four at column %d", col)
            return self._done(col, "block", t0)

        candidates = list(range(1, self.width + 1))
        self.rng.shuffle(candidates)

        ranking = self.rank(candidates)
        if isinstance(ranking, WinChance):
            logger.debug("setting up a win at column %d", ranking.column)
            return self._done(ranking.column, "win_chance", t0)
        if isinstance(ranking, Neutral):
            logger.debug("placing neutral at column %d", ranking.column)
            return self._done(ranking.column, "neutral", t0)
        if isinstance(ranking, OpponentWin):
            logger.debug("opponent can win after column %d", ranking.column)
            return self._done(ranking.column, "opponent_win", t0)

        raise NoLegalMove()

    def winning_column(self, tile: Tile) -> Optional[Column]:
        """
        Probe columns left to right on top of the current scratch state.
        Returns the first column where `tile` completes four, or None.
        The scratch grid is left as it was.
        """
        for col in range(1, self.width + 1):
            try:
                self.scratch.place(Column(col), tile)
            except ColumnFullError:
                continue
            self._probes += 1
            result = self.scratch.check_four()
            self.scratch.undo_last()
            if isinstance(result, Winner) and result.tile is tile:
                return Column(col)
        return None

    def rank(self, candidates: List[int]) -> Ranking:
        """
        Rank the last candidate against `reference`, recursing into the rest
        when it is full or exposes an immediate reply. Consumes `candidates`.
        """
        self.scratch.copy_from(self.reference)

        if not candidates:
            logger.debug("candidate list empty")
            return NoOptions()
        column = candidates.pop()

        try:
            self.scratch.place(Column(column), self.tile)
        except ColumnFullError:
            nested = self.rank(candidates)
            if isinstance(nested, (WinChance, Neutral, OpponentWin)):
                return nested
            return ColumnFull(column)

        if self.winning_column(self.tile) is not None:
            logger.debug("chance to win after column %d", column)
            return WinChance(column)

        if self.winning_column(self.opponent) is not None:
            nested = self.rank(candidates)
            if isinstance(nested, Neutral):
                return nested
            return OpponentWin(column)

        return Neutral(column)

    def _done(self, col: int, reason: str, t0: float) -> Column:
        self.last_info = {
            "depth": 2,
            "nodes": self._probes,
            "reason": reason,
            "move_col": int(col),
            "time_ms": max(1, int((time.perf_counter() - t0) * 1000)),
        }
        return Column(col)
