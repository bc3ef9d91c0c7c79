# main.py
import argparse
import logging
import sys

from benchmark import BenchmarkRunner
from config import load_config, merge_defaults, validate_config
from logging_config import setup_logging
from visualize import plot_hit_miss_rate, plot_steps_distribution

USAGE = "%(prog)s [N MIN MAX policy cache_size] [--config PATH] [--no-plots] [--quiet] [--verbose]"


def build_parser():
    parser = argparse.ArgumentParser(
        usage=USAGE,
        description="Collatz step counts for random samples, memoized with an LRU or LFU cache.",
    )
    parser.add_argument("run", nargs="*", metavar="N MIN MAX policy cache_size",
                        help="overrides for the config file, all five or none")
    parser.add_argument("--config", default=None,
                        help="JSON config file (default: config.json unless the five overrides are given)")
    parser.add_argument("--no-plots", action="store_true", help="skip writing plots")
    parser.add_argument("--quiet", action="store_true", help="do not print each sample")
    parser.add_argument("--verbose", action="store_true", help="debug logging (hits and evictions)")
    return parser


def apply_overrides(cfg, run_args):
    """Overlay the positional N MIN MAX policy cache_size onto cfg."""
    if len(run_args) != 5:
        raise ValueError("Expected exactly 5 positional arguments: N MIN MAX policy cache_size.")
    n, min_value, max_value, policy, cache_size = run_args
    try:
        cfg.setdefault("benchmark", {}).update(
            num_samples=int(n), min_value=int(min_value), max_value=int(max_value)
        )
        cfg.setdefault("cache", {}).update(policy=policy, capacity=int(cache_size))
    except ValueError:
        raise ValueError("N, MIN, MAX and cache_size must be integers.") from None
    return cfg


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.config is None and args.run:
            cfg = {}
        else:
            cfg = load_config(args.config or "config.json")
        if args.run:
            cfg = apply_overrides(merge_defaults(cfg), args.run)
        cfg = validate_config(cfg)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    runner = BenchmarkRunner(cfg)
    if not args.quiet:
        print("Starting benchmark with config:", cfg["benchmark"], cfg["cache"])

    def report(number, steps):
        if not args.quiet:
            print(f"Number: {number} -> Steps: {steps}")

    summary, records = runner.run(on_record=report)
    results_path = runner.save_results(summary, cfg["output"])
    print("Benchmark Summary:", summary)
    print("Results saved to:", results_path)

    if not args.no_plots:
        plot_steps_distribution(records, cfg["output"]["steps_plot"])
        plot_hit_miss_rate(summary["hit_rate"], cfg["output"]["hitmiss_plot"], policy=summary["policy"])
        print("Plots saved in", cfg["output"]["steps_plot"], "and", cfg["output"]["hitmiss_plot"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
