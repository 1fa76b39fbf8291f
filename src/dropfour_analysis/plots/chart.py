from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_win_rates(table: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if table.empty or "win_rate" not in table.columns:
        return None

    fig = plt.figure(figsize=(8, 4))
    plt.bar(table["name"].astype(str), table["win_rate"].astype(float))
    plt.title("Win rate by agent")
    plt.xlabel("agent")
    plt.ylabel("win rate")
    plt.ylim(0, 1)
    plt.xticks(rotation=30, ha="right")
    return _finish(fig, outdir, "win_rate.png", show=show)


def plot_outcomes(counts: pd.Series, outdir: Path, *, show: bool) -> Path | None:
    if counts.sum() == 0:
        return None

    fig = plt.figure()
    plt.bar(["x wins", "o wins", "draws"], counts.astype(int).tolist())
    plt.title("Outcomes by side")
    plt.ylabel("games")
    return _finish(fig, outdir, "outcomes.png", show=show)


def plot_game_lengths(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if "moves" not in df.columns or df["moves"].dropna().empty:
        return None

    fig = plt.figure()
    plt.hist(df["moves"].dropna(), bins=30)
    plt.title("Histogram: moves per game")
    plt.xlabel("moves")
    plt.ylabel("count")
    return _finish(fig, outdir, "hist_moves.png", show=show)
