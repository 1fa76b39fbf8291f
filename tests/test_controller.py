from __future__ import annotations

import itertools
import random

from dropfour.ai.advisor import MoveAdvisor
from dropfour.core.board import Grid
from dropfour.game.controller import finish_round, play_round
from dropfour.game.players import ActivePlayer, Players
from dropfour.types import Tile

from conftest import O, X


class Script:
    def __init__(self, *lines):
        self.lines = iter(lines)
        self.prompts = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return next(self.lines)


class Frames:
    def __init__(self):
        self.calls = []

    def __call__(self, grid, status="", highlight=None):
        self.calls.append((status, highlight))


def test_two_player_vertical_win():
    grid, players, frames = Grid(), Players(), Frames()
    res = play_round(grid, players, read_input=Script("1", "2", "1", "2", "1", "2", "1"), show=frames)

    assert res.winner is players.player1
    assert res.winner_tile is X
    assert res.moves == 7
    assert res.line == [(0, 6), (0, 5), (0, 4), (0, 3)]
    assert players.player1.score == 1
    assert players.player2.score == 0
    assert frames.calls[-1] == ("a wins", res.line)


def test_bad_input_is_retried():
    grid, players, frames = Grid(4, 5), Players(), Frames()
    script = Script("x", "9", "1", "1", "1", "1", "1", "h", "q")
    res = play_round(grid, players, read_input=script, show=frames)

    assert res.quit
    assert res.moves == 4
    statuses = [s for s, _ in frames.calls]
    assert any("Invalid input" in s for s in statuses)
    assert any("Column 9 does not exist" in s for s in statuses)
    assert any("Column 1 is already full" in s for s in statuses)
    assert any("Place a piece" in s for s in statuses)


def test_quit_leaves_grid_for_caller():
    grid, players = Grid(), Players()
    res = play_round(grid, players, read_input=Script("3", "q"), show=Frames())
    assert res.quit
    assert res.winner is None
    assert grid.get(2, 6) is X


def test_cursor_and_enter():
    grid, players = Grid(), Players()
    play_round(grid, players, read_input=Script(">", ">", "<", "", "q"), show=Frames())
    assert grid.get(1, 6) is X
    # after the swap the cursor shows the second player's tile
    assert grid.get(1, 0) is O


def test_round_against_ai_finishes():
    grid, players = Grid(), Players()
    advisor = MoveAdvisor(grid.width, grid.height, rng=random.Random(3))
    human = itertools.cycle(["1", "2", "3", "4", "5", "6", "7"])

    res = play_round(
        grid, players, advisor,
        ai_enabled=True,
        read_input=lambda prompt: next(human),
        show=Frames(),
        ai_delay_sec=0,
    )

    assert not res.quit
    assert res.draw or res.winner in (players.player1, players.ai)
    assert players.player2.score == 0
    placed = sum(1 for y in range(1, 7) for x in range(7) if grid.get(x, y) is not Tile.EMPTY)
    assert placed == res.moves


def test_ai_blocks_in_round():
    grid, players = Grid(), Players()
    for col, tile in [(1, X), (2, X), (3, X), (7, O), (7, O)]:
        grid.place(col, tile)
    players.set_active(ActivePlayer.AI)
    advisor = MoveAdvisor(grid.width, grid.height, rng=random.Random(0))

    res = play_round(grid, players, advisor, ai_enabled=True, read_input=Script("q"), show=Frames(), ai_delay_sec=0)

    assert res.quit
    assert res.moves == 1
    assert grid.get(3, 6) is O


def test_finish_round():
    grid, players = Grid(), Players()
    play_round(grid, players, read_input=Script("1", "2", "q"), show=Frames())

    finish_round(grid, players, ai_enabled=False)
    assert players.active is ActivePlayer.PLAYER2
    assert grid.get(0, 6) is Tile.EMPTY
    assert grid.get(0, 0) is O

    finish_round(grid, players, ai_enabled=True)
    assert players.active is ActivePlayer.PLAYER1
    assert grid.get(0, 0) is X


def test_superscript_digit_is_retried():
    grid, players, frames = Grid(), Players(), Frames()
    res = play_round(grid, players, read_input=Script("³", "q"), show=frames)

    assert res.quit
    assert res.moves == 0
    assert any("Invalid input: '³'" in s for s, _ in frames.calls)
