from __future__ import annotations

import argparse
import logging
from pathlib import Path

from dropfour.log import configure_logging

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import SummaryConfig, agent_table, numeric_summary, outcome_counts
from ..plots.chart import plot_game_lengths, plot_outcomes, plot_win_rates

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="dropfour_analysis", description="Analyze self-play CSV results.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing selfplay_results_*.csv")
    ap.add_argument("--pattern", type=str, default="selfplay_results_*.csv", help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Only print tables")

    ap.add_argument("--metric", type=str, default="win_rate", help="Ranking metric (win_rate, wins, avg_moves, avg_ms)")
    ap.add_argument("--min-games", type=int, default=0, help="Filter out agents with fewer than this many games")
    ap.add_argument("--log-level", type=str, default=None)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    configure_logging(args.log_level)

    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_results(LoadSpec(csv_path=csv_path))
    logger.info("loaded %d games from %s", len(df), csv_path)

    print(f"\nLoaded: {csv_path}")
    print(f"Games: {len(df):,}")

    cfg = SummaryConfig(metric=args.metric, min_games=args.min_games)  # type: ignore[arg-type]
    table = agent_table(df, cfg)
    print("\n=== Agents ===")
    print(table.to_string(index=False))

    counts = outcome_counts(df)
    print("\n=== Outcomes ===")
    print(counts.to_string())

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    plot_win_rates(table, outdir, show=args.show)
    plot_outcomes(counts, outdir, show=args.show)
    plot_game_lengths(df, outdir, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
