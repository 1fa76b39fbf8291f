# src/dropfour/core/board.py

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Union

from dropfour.config import WIDTH, HEIGHT, MIN_WIDTH, MIN_HEIGHT, FIRST_PLAYABLE_ROW
from dropfour.core.rules import Draw, Winner, check_four
from dropfour.errors import ColumnFull, DimensionError, InvalidColumn, InvalidTile, NoUndo
from dropfour.types import Column, Tile

logger = logging.getLogger(__name__)


class UndoRecord(NamedTuple):
    x: int
    y: int
    previous: Tile


@dataclass(slots=True)
class Grid:
    """
    Playing surface of width x height cells.

    Row 0 is the indicator row: it only shows the selection cursor and is kept
    in its own list. Playable rows are 1..height-1, bottom row is height-1.
    `cells[r]` holds row y = r + FIRST_PLAYABLE_ROW.
    """
    width: int = WIDTH
    height: int = HEIGHT
    cells: List[List[Tile]] = field(default_factory=list)
    indicator: List[Tile] = field(default_factory=list)
    last_move: Optional[UndoRecord] = None
    selected_column: int = 0
    active_tile: Tile = Tile.EMPTY

    def __post_init__(self) -> None:
        if self.width < MIN_WIDTH or self.height < MIN_HEIGHT:
            raise DimensionError(
                f"Grid must be at least {MIN_WIDTH}x{MIN_HEIGHT}, got {self.width}x{self.height}."
            )
        if not self.cells:
            self.cells = [[Tile.EMPTY] * self.width for _ in range(self.height - FIRST_PLAYABLE_ROW)]
        if not self.indicator:
            self.indicator = [Tile.EMPTY] * self.width

    def copy(self) -> "Grid":
        g = Grid(self.width, self.height)
        g.copy_from(self)
        return g

    def copy_from(self, other: "Grid") -> None:
        """Overwrite this grid with the state of `other` (same dimensions), reusing its lists."""
        if other.width != self.width or other.height != self.height:
            raise DimensionError(
                f"Cannot copy a {other.width}x{other.height} grid into {self.width}x{self.height}."
            )
        for dst, src in zip(self.cells, other.cells):
            dst[:] = src
        self.indicator[:] = other.indicator
        self.last_move = other.last_move
        self.selected_column = other.selected_column
        self.active_tile = other.active_tile

    # ----- game rules -----
    def place(self, column: Column, tile: Tile) -> int:
        """
        Drop `tile` into a 1-indexed column.
        Returns the row (y) it landed on.
        """
        col = int(column)
        if col < 1 or col > self.width:
            raise InvalidColumn(col, self.width)
        if tile is Tile.EMPTY:
            raise InvalidTile(tile)

        x = col - 1
        for r in range(len(self.cells) - 1, -1, -1):
            if self.cells[r][x] is Tile.EMPTY:
                y = r + FIRST_PLAYABLE_ROW
                self.last_move = UndoRecord(x, y, self.cells[r][x])
                self.cells[r][x] = tile
                return y

        raise ColumnFull(col)

    def undo_last(self) -> None:
        if self.last_move is None:
            raise NoUndo()
        x, y, previous = self.last_move
        self.cells[y - FIRST_PLAYABLE_ROW][x] = previous
        self.last_move = None

    def check_four(self) -> Union[Winner, Draw, None]:
        return check_four(self.cells)

    def get(self, x: int, y: int) -> Tile:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            raise DimensionError(f"Position ({x}, {y}) is outside the {self.width}x{self.height} grid.")
        if y < FIRST_PLAYABLE_ROW:
            return self.indicator[x]
        return self.cells[y - FIRST_PLAYABLE_ROW][x]

    def reset(self) -> None:
        for row in self.cells:
            row[:] = [Tile.EMPTY] * self.width
        self.indicator[:] = [Tile.EMPTY] * self.width
        self.last_move = None

    def is_full(self) -> bool:
        return all(t is not Tile.EMPTY for t in self.cells[0])

    def valid_columns(self) -> List[Column]:
        return [Column(x + 1) for x in range(self.width) if self.cells[0][x] is Tile.EMPTY]

    # ----- indicator row -----
    def move_selection_left(self) -> None:
        logger.debug("moving selection left")
        self._unpaint()
        self.selected_column = (self.selected_column - 1) % self.width
        self._paint()

    def move_selection_right(self) -> None:
        logger.debug("moving selection right")
        self._unpaint()
        self.selected_column = (self.selected_column + 1) % self.width
        self._paint()

    def place_at_selection(self) -> int:
        logger.debug("placing at selection %d", self.selected_column + 1)
        return self.place(Column(self.selected_column + 1), self.active_tile)

    def set_active_tile(self, tile: Tile) -> None:
        self.active_tile = tile
        self._paint()

    def clear_active_tile(self) -> None:
        self._unpaint()
        self.active_tile = Tile.EMPTY

    def _paint(self) -> None:
        self.indicator[self.selected_column] = self.active_tile

    def _unpaint(self) -> None:
        self.indicator[self.selected_column] = Tile.EMPTY

    def __str__(self) -> str:
        header = "#"
        for n in range(1, self.width + 1):
            if n < 10:
                header += f"-{n}-"
            elif n < 100:
                header += f"{n}-"
            else:
                header += str(n)
        lines = [header + "#"]
        for row in self.cells:
            lines.append("|" + "".join(f" {t} " for t in row) + "|")
        lines.append("#" + "---" * self.width + "#")
        return "\n".join(lines) + "\n"
