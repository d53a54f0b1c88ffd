"""Command-line interface for the Sudoku solver."""

import argparse
import logging
import sys

from .benchmark import Benchmark, load_catalog
from .benchmark.catalog import PUZZLES
from .benchmark.visualizer import Visualizer
from .config import STRATEGIES, SolverConfig
from .core.exceptions import InvalidConfiguration
from .io.puzzle import load_puzzle, parse_puzzle
from .io.renderer import render_grid
from .solvers import make_solver

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudokucell",
        description="Sudoku solver: constraint propagation plus backtracking search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle given inline
  sudokucell solve --puzzle "530070000600195000..."

  # Solve a puzzle file and watch the search
  sudokucell solve --file puzzle.txt --animate --delay 0.05

  # Benchmark both search strategies on the built-in puzzles
  sudokucell benchmark --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    source = solve_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--puzzle", "-p", type=str,
        help="Puzzle string (N*N chars, 0 or . for empty cells)"
    )
    source.add_argument(
        "--file", "-f", type=str,
        help="Path to a puzzle file"
    )
    solve_parser.add_argument(
        "--size", "-n", type=int, default=None,
        help="Board size (default: inferred from the puzzle)"
    )
    solve_parser.add_argument(
        "--config", "-c", type=str, default=None,
        help="JSON file with solver options"
    )
    solve_parser.add_argument(
        "--strategy", "-s", choices=STRATEGIES, default=None,
        help="Search strategy (default: recursive)"
    )
    solve_parser.add_argument(
        "--strict", action="store_true", default=None,
        help="Reject conflicting seeds instead of reporting no solution"
    )
    solve_parser.add_argument(
        "--animate", action="store_true", default=None,
        help="Redraw the board for every search step"
    )
    solve_parser.add_argument(
        "--delay", type=float, default=None,
        help="Seconds between animation frames (default: 0.01)"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Benchmark the search strategies")
    bench_parser.add_argument(
        "--puzzle", "-p", action="append", choices=sorted(PUZZLES), default=None,
        help="Catalog puzzle to include (repeatable, default: all)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s"
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        sys.exit(cmd_solve(args))
    elif args.command == "benchmark":
        sys.exit(cmd_benchmark(args))


def cmd_solve(args) -> int:
    """Handle the solve command."""
    try:
        config = SolverConfig.from_json(args.config) if args.config else SolverConfig()
        config = config.merged(
            strategy=args.strategy,
            validate_seeds=args.strict,
            animate=args.animate,
            delay=args.delay
        )
        if args.file:
            puzzle = load_puzzle(args.file, size=args.size)
        else:
            puzzle = parse_puzzle(args.puzzle, size=args.size)
    except (InvalidConfiguration, OSError) as e:
        print(f"Error reading input: {e}")
        return 1
    log.debug("Solver config: %s", config.to_dict())

    print("Input puzzle:")
    print(render_grid(puzzle.to_grid()))
    print()

    solver = make_solver(config)
    try:
        result, stats = solver.solve(puzzle)
    except InvalidConfiguration as e:
        print(f"Invalid puzzle: {e}")
        return 1

    if result.solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
    else:
        print("✗ No solution exists for this puzzle")
    print(f"  Naked singles: {stats.naked_singles:,}")
    print(f"  Trials: {stats.trials:,}")
    print(f"  Backtracks: {stats.backtracks:,}")
    print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
    if result.solved:
        print(render_grid(result.grid))

    return 0 if result.solved else 1


def cmd_benchmark(args) -> int:
    """Handle the benchmark command."""
    puzzles = load_catalog(args.puzzle)

    print("=" * 60)
    print("SUDOKU SEARCH BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {', '.join(puzzles)}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    benchmark = Benchmark(puzzles=puzzles)
    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\nBy Solver:")
    print("-" * 50)
    for algo, stats in summary["results_by_algorithm"].items():
        print(f"\n{algo}:")
        print(f"  Solved: {stats['total_solved']}/{stats['total_tested']}")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Total Trials: {stats['total_trials']:,}")

    benchmark.save_results(args.output)

    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        for chart in charts:
            print(f"  - {chart}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")
    return 0


if __name__ == "__main__":
    main()
