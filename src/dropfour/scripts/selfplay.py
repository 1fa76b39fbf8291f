from __future__ import annotations

import argparse
import csv
import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from dropfour import config
from dropfour.ai.advisor_agent import AdvisorAgent
from dropfour.ai.base import Agent
from dropfour.ai.random_agent import RandomAgent
from dropfour.core.board import Grid
from dropfour.core.rules import Draw, Winner
from dropfour.game.state import GameState
from dropfour.log import configure_logging
from dropfour.types import Tile

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["game", "x_agent", "o_agent", "winner", "winner_name", "moves", "x_ms", "o_ms"]


@dataclass(slots=True)
class GameRecord:
    game: int
    x_agent: str
    o_agent: str
    winner: str  # "x", "o" or "draw"
    moves: int
    x_ms: int
    o_ms: int

    @property
    def winner_name(self) -> str:
        if self.winner == Tile.PLAYER1.value:
            return self.x_agent
        if self.winner == Tile.PLAYER2.value:
            return self.o_agent
        return ""

    def row(self) -> list:
        return [self.game, self.x_agent, self.o_agent, self.winner, self.winner_name, self.moves, self.x_ms, self.o_ms]


def play_game(agent_x: Agent, agent_o: Agent, width: int = config.WIDTH, height: int = config.HEIGHT, game: int = 0) -> GameRecord:
    """Play one headless game, x moves first."""
    state = GameState(grid=Grid(width, height), current=Tile.PLAYER1)
    ms = {Tile.PLAYER1: 0, Tile.PLAYER2: 0}
    moves = 0

    while True:
        agent = agent_x if state.current is Tile.PLAYER1 else agent_o
        t0 = time.perf_counter()
        col = agent.choose_move(state)
        ms[state.current] += int((time.perf_counter() - t0) * 1000)

        state.grid.place(col, state.current)
        moves += 1

        outcome = state.grid.check_four()
        if isinstance(outcome, Winner):
            winner = outcome.tile.value
            break
        if isinstance(outcome, Draw):
            winner = "draw"
            break
        state.current = state.current.opponent

    return GameRecord(
        game=game,
        x_agent=agent_x.name,
        o_agent=agent_o.name,
        winner=winner,
        moves=moves,
        x_ms=ms[Tile.PLAYER1],
        o_ms=ms[Tile.PLAYER2],
    )


def run_selfplay(agent_a: Agent, agent_b: Agent, games: int, width: int = config.WIDTH, height: int = config.HEIGHT) -> List[GameRecord]:
    """Alternate who moves first so both agents get the opening."""
    records = []
    for g in range(games):
        if g % 2 == 0:
            rec = play_game(agent_a, agent_b, width, height, game=g)
        else:
            rec = play_game(agent_b, agent_a, width, height, game=g)
        logger.debug("game %d: %s vs %s -> %s in %d moves", g, rec.x_agent, rec.o_agent, rec.winner, rec.moves)
        records.append(rec)
    return records


def export_csv(records: Iterable[GameRecord], results_dir: Path) -> Path:
    results_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = results_dir / f"selfplay_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for rec in records:
            w.writerow(rec.row())
    return out_path


def make_agent(kind: str, seed: Optional[int], label: str) -> Agent:
    if kind == "advisor":
        return AdvisorAgent(name=f"Advisor {label}", seed=seed)
    return RandomAgent(name=f"Random {label}", rng=random.Random(seed))


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="dropfour-selfplay", description="Headless games between two agents.")
    ap.add_argument("--games", type=int, default=config.SELFPLAY_GAMES)
    ap.add_argument("--a", choices=["advisor", "random"], default="advisor", help="First agent")
    ap.add_argument("--b", choices=["advisor", "random"], default="random", help="Second agent")
    ap.add_argument("--width", type=int, default=config.WIDTH)
    ap.add_argument("--height", type=int, default=config.HEIGHT)
    ap.add_argument("--seed", type=int, default=1234)
    ap.add_argument("--results-dir", type=str, default=config.RESULTS_DIR)
    ap.add_argument("--log-level", type=str, default=None)
    args = ap.parse_args(argv)

    configure_logging(args.log_level)

    agent_a = make_agent(args.a, args.seed, "A")
    agent_b = make_agent(args.b, args.seed + 1, "B")

    start = time.perf_counter()
    records = run_selfplay(agent_a, agent_b, args.games, args.width, args.height)
    elapsed = time.perf_counter() - start

    wins_a = sum(1 for r in records if r.winner_name == agent_a.name)
    wins_b = sum(1 for r in records if r.winner_name == agent_b.name)
    draws = sum(1 for r in records if r.winner == "draw")
    print(f"{agent_a.name}: {wins_a}  {agent_b.name}: {wins_b}  draws: {draws}  ({elapsed:.2f}s)")

    out_path = export_csv(records, Path(args.results_dir))
    print(f"Wrote CSV: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
