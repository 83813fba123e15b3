"""Command line: simulate two teams and print the home win probability."""

import argparse
import logging
import sys

from config import DEFAULT_SEED, DEFAULT_SHARDS, DEFAULT_SIMS
from errors import SimulationError
from simulation.runner import simulate_matchup, simulate_sharded


def build_parser():
    parser = argparse.ArgumentParser(description="Simulate games between two teams from season stats.")
    parser.add_argument("away", help="team file of the visiting side")
    parser.add_argument("home", help="team file of the home side")
    parser.add_argument("--sims", type=int, default=DEFAULT_SIMS, help="number of games to simulate")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="random seed (default: fresh entropy)")
    parser.add_argument("--shards", type=int, default=DEFAULT_SHARDS, help="independent batches to merge")
    parser.add_argument("--csv", metavar="PATH", help="write the joint score distribution to a CSV file")
    parser.add_argument("--plot", action="store_true", help="show the joint score heatmap")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    if args.sims < 1:
        print("Error: --sims must be at least 1", file=sys.stderr)
        return 1

    try:
        if args.shards == 1:
            hist = simulate_matchup(args.away, args.home, args.sims, seed=args.seed)
        else:
            hist = simulate_sharded(args.away, args.home, args.sims, args.shards, seed=args.seed)
    except (SimulationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    summary = hist.summary()
    away_runs, home_runs = summary['most_probable_score']
    print(f"{summary['home_win_probability']:.4f}")
    print(f"[95% CI] {summary['ci_low']:.4f} - {summary['ci_high']:.4f}  ({summary['games']} games)")
    print(f"[Most probable] away {away_runs} - home {home_runs}")
    print(f"[Mean runs] away {summary['away_mean_runs']:.3f}  home {summary['home_mean_runs']:.3f}")

    if args.csv:
        try:
            hist.to_frame().to_csv(args.csv, index=False)
        except OSError as e:
            print(f"Error: cannot write {args.csv}: {e}", file=sys.stderr)
            return 1

    if args.plot:
        from viz.visualize import plot_heatmap, plot_marginals
        plot_heatmap(hist, show=False)
        plot_marginals(hist)
    return 0


if __name__ == "__main__":
    sys.exit(main())
