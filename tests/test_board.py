from __future__ import annotations

import pytest

from dropfour.core.board import Grid, UndoRecord
from dropfour.errors import ColumnFull, DimensionError, GameError, InvalidColumn, InvalidTile, NoUndo
from dropfour.types import Tile

from conftest import O, X, drop_all


@pytest.mark.parametrize("width,height", [(3, 7), (7, 4), (0, 0), (3, 4)])
def test_rejects_small_dimensions(width, height):
    with pytest.raises(DimensionError):
        Grid(width, height)


def test_minimum_dimensions_are_allowed():
    g = Grid(4, 5)
    assert g.width == 4
    assert g.height == 5
    assert len(g.cells) == 4


def test_errors_are_value_errors():
    assert issubclass(GameError, ValueError)
    assert issubclass(ColumnFull, GameError)


@pytest.mark.parametrize("col", range(1, 8))
def test_column_fills_bottom_up(grid, col):
    for k in range(1, grid.height):
        y = grid.place(col, X)
        assert y == grid.height - 1 - (k - 1)
        assert grid.get(col - 1, y) is X
    with pytest.raises(ColumnFull):
        grid.place(col, X)


def test_place_records_undo(grid):
    grid.place(3, O)
    assert grid.last_move == UndoRecord(2, 6, Tile.EMPTY)
    grid.place(3, X)
    assert grid.last_move == UndoRecord(2, 5, Tile.EMPTY)


@pytest.mark.parametrize("col", [0, -1, 8, 100])
def test_invalid_column(grid, col):
    with pytest.raises(InvalidColumn):
        grid.place(col, X)


def test_invalid_tile(grid):
    with pytest.raises(InvalidTile):
        grid.place(1, Tile.EMPTY)


def test_rejected_placement_leaves_state(grid):
    drop_all(grid, [(2, X)])
    before = [row[:] for row in grid.cells]
    record = grid.last_move
    for col, tile in [(0, X), (9, O), (2, Tile.EMPTY)]:
        with pytest.raises(GameError):
            grid.place(col, tile)
    assert grid.cells == before
    assert grid.last_move == record


def test_place_then_undo_restores(grid):
    drop_all(grid, [(1, X), (2, O), (2, X)])
    before = [row[:] for row in grid.cells]

    y = grid.place(2, O)
    assert y == 4
    assert grid.get(1, y) is O
    grid.undo_last()

    assert grid.cells == before
    assert grid.get(1, y) is Tile.EMPTY
    assert grid.last_move is None
    with pytest.raises(NoUndo):
        grid.undo_last()


def test_undo_on_fresh_grid(grid):
    with pytest.raises(NoUndo):
        grid.undo_last()


def test_get_bounds(grid):
    assert grid.get(0, 0) is Tile.EMPTY
    assert grid.get(6, 6) is Tile.EMPTY
    for x, y in [(7, 0), (0, 7), (-1, 3), (3, -1)]:
        with pytest.raises(DimensionError):
            grid.get(x, y)


def test_reset_clears_cells_and_indicator(grid):
    grid.set_active_tile(X)
    drop_all(grid, [(1, X), (4, O), (4, X)])
    grid.reset()

    assert all(grid.get(x, y) is Tile.EMPTY for x in range(7) for y in range(7))
    assert grid.last_move is None
    # cursor state survives, only the paint is gone
    assert grid.active_tile is X
    assert grid.selected_column == 0


def test_copy_is_independent(grid):
    drop_all(grid, [(1, X), (2, O)])
    clone = grid.copy()
    clone.place(1, O)
    clone.set_active_tile(O)

    assert grid.get(0, 5) is Tile.EMPTY
    assert clone.get(0, 5) is O
    assert grid.get(0, 0) is Tile.EMPTY


def test_copy_from_requires_same_size(grid):
    with pytest.raises(DimensionError):
        grid.copy_from(Grid(5, 6))


def test_copy_from_reuses_rows(grid):
    rows = grid.cells
    other = drop_all(Grid(7, 7), [(5, O)])
    grid.copy_from(other)
    assert grid.cells is rows
    assert grid.get(4, 6) is O


def test_valid_columns_and_full():
    g = Grid(4, 5)
    assert g.valid_columns() == [1, 2, 3, 4]
    for _ in range(4):
        g.place(2, X)
    assert g.valid_columns() == [1, 3, 4]
    assert not g.is_full()
    for col in (1, 3, 4):
        for _ in range(4):
            g.place(col, O)
    assert g.is_full()
    assert g.valid_columns() == []


def test_selection_wraps_and_paints(grid):
    grid.set_active_tile(X)
    assert grid.get(0, 0) is X

    grid.move_selection_left()
    assert grid.selected_column == 6
    assert grid.get(6, 0) is X
    assert grid.get(0, 0) is Tile.EMPTY

    grid.move_selection_right()
    grid.move_selection_right()
    assert grid.selected_column == 1
    assert [grid.get(x, 0) for x in range(7)].count(X) == 1


def test_place_at_selection(grid):
    grid.set_active_tile(O)
    grid.move_selection_right()
    grid.move_selection_right()
    y = grid.place_at_selection()
    assert (y, grid.get(2, 6)) == (6, O)


def test_indicator_is_not_playable(grid):
    grid.set_active_tile(X)
    for _ in range(6):
        grid.place(1, O)
    with pytest.raises(ColumnFull):
        grid.place(1, O)
    assert grid.get(0, 0) is X


def test_clear_active_tile(grid):
    grid.set_active_tile(X)
    grid.clear_active_tile()
    assert grid.get(0, 0) is Tile.EMPTY
    with pytest.raises(InvalidTile):
        grid.place_at_selection()


def test_str():
    g = drop_all(Grid(4, 5), [(1, X), (4, O)])
    assert str(g) == (
        "#-1--2--3--4-#\n"
        "| .  .  .  . |\n"
        "| .  .  .  . |\n"
        "| .  .  .  . |\n"
        "| x  .  .  o |\n"
        "#------------#\n"
    )
