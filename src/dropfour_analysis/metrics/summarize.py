from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


MetricKey = Literal["win_rate", "wins", "games", "avg_moves", "avg_ms"]


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "win_rate"
    min_games: int = 0


def per_side(df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per (game, agent): which side the agent played, its result,
    the game length and the time it spent.
    """
    x = pd.DataFrame({
        "game": df["game"],
        "name": df["x_agent"],
        "side": "x",
        "moves": df["moves"],
        "ms": df["x_ms"],
    })
    o = pd.DataFrame({
        "game": df["game"],
        "name": df["o_agent"],
        "side": "o",
        "moves": df["moves"],
        "ms": df["o_ms"],
    })
    out = pd.concat([x, o], ignore_index=True)

    winner = pd.concat([df["winner"], df["winner"]], ignore_index=True)
    out["result"] = "loss"
    out.loc[winner == "draw", "result"] = "draw"
    out.loc[winner == out["side"], "result"] = "win"
    return out


def agent_table(df: pd.DataFrame, cfg: SummaryConfig | None = None) -> pd.DataFrame:
    cfg = cfg or SummaryConfig()
    sides = per_side(df)

    g = sides.groupby("name")
    out = pd.DataFrame({
        "games": g.size(),
        "wins": g["result"].apply(lambda s: int((s == "win").sum())),
        "draws": g["result"].apply(lambda s: int((s == "draw").sum())),
        "losses": g["result"].apply(lambda s: int((s == "loss").sum())),
        "first_wins": sides[sides["side"] == "x"].groupby("name")["result"].apply(lambda s: int((s == "win").sum())),
        "avg_moves": g["moves"].mean(),
        "avg_ms": g["ms"].mean(),
    }).reset_index()
    out["first_wins"] = out["first_wins"].fillna(0).astype(int)
    out["win_rate"] = out["wins"] / out["games"]

    if cfg.min_games > 0:
        out = out[out["games"] >= cfg.min_games]

    out = out.sort_values(cfg.metric, ascending=(cfg.metric == "avg_ms")).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def outcome_counts(df: pd.DataFrame) -> pd.Series:
    return df["winner"].value_counts().reindex(["x", "o", "draw"], fill_value=0)


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number").drop(columns=["game"], errors="ignore")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
