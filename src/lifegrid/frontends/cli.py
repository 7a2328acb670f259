"""``lifegrid-cli``: evolve a board from the command line and dump it as text."""

import argparse
import logging
import sys
import time
from typing import List, Optional

from ..core.game import Outcome, RunResult, Simulation
from ..core.grid import Grid
from ..core.patterns import Pattern, PatternLibrary

logger = logging.getLogger(__name__)

# Boards wider or taller than this are summarized instead of dumped
DUMP_LIMIT = 80

OUTCOME_TEXT = {
    Outcome.EXTINCT: "every cell died",
    Outcome.CYCLE: "repeats every {period} generation(s) from generation {start}",
    Outcome.LIMIT: "still changing when the generation limit was reached",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lifegrid-cli",
        description="Evolve a Game of Life board with a fixed dead border and print it as text.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  lifegrid-cli -c 60 -r 30 -p 0.25 --seed 7
  lifegrid-cli -c 12 -r 12 --pattern Glider --at 1 1 --show all -n 40
  lifegrid-cli --list-patterns
        """,
    )

    board = parser.add_argument_group("board")
    board.add_argument("-c", "--cols", type=int, default=40, help="columns (default: %(default)s)")
    board.add_argument("-r", "--rows", type=int, default=20, help="rows (default: %(default)s)")

    seeding = parser.add_argument_group("seeding")
    seeding.add_argument("--pattern", metavar="NAME", help="start from a built-in pattern")
    seeding.add_argument(
        "--at",
        nargs=2,
        type=int,
        metavar=("COL", "ROW"),
        help="top-left corner for --pattern (default: centered)",
    )
    seeding.add_argument(
        "-p", "--population", type=float, default=0.1, help="random fill rate without --pattern (default: %(default)s)"
    )
    seeding.add_argument("--seed", type=int, help="seed for the random fill")

    run = parser.add_argument_group("run")
    run.add_argument("-n", "--generations", type=int, default=1000, help="generation limit (default: %(default)s)")
    run.add_argument(
        "--show",
        choices=["summary", "ends", "all"],
        default="summary",
        help="what to dump: only the summary, first and last boards, or every board (default: %(default)s)",
    )

    parser.add_argument("--list-patterns", action="store_true", help="print the built-in patterns and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="add timing and bounding box to the summary")
    parser.add_argument(
        "--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="library log level"
    )
    return parser


def check_args(args: argparse.Namespace) -> List[str]:
    """Return one message per problem with the parsed arguments."""
    problems = []
    if args.cols <= 0 or args.rows <= 0:
        problems.append(f"board must be at least 1x1, got {args.cols}x{args.rows}")
    if not 0.0 <= args.population <= 1.0:
        problems.append(f"--population must be within [0, 1], got {args.population}")
    if args.generations <= 0:
        problems.append(f"--generations must be positive, got {args.generations}")
    if args.at is not None:
        col, row = args.at
        if args.pattern is None:
            problems.append("--at only applies together with --pattern")
        if not (0 <= col < args.cols and 0 <= row < args.rows):
            problems.append(f"--at {col} {row} lies outside the {args.cols}x{args.rows} board")
    return problems


def centered(pattern: Pattern, grid: Grid) -> List[int]:
    width, height = pattern.get_size()
    return [max(0, (grid.cols - width) // 2), max(0, (grid.rows - height) // 2)]


def seed_grid(args: argparse.Namespace, library: PatternLibrary) -> Grid:
    grid = Grid(args.cols, args.rows)
    if args.pattern is None:
        grid.randomize(args.population, seed=args.seed)
        return grid

    pattern = library.get_pattern(args.pattern)
    col, row = args.at if args.at is not None else centered(pattern, grid)
    pattern.apply_to_grid(grid, col, row)
    logger.info("Placed %s at (%d, %d)", pattern.name, col, row)
    return grid


def dump(grid: Grid, title: str) -> None:
    print(title)
    if grid.cols > DUMP_LIMIT or grid.rows > DUMP_LIMIT:
        print(f"({grid.cols}x{grid.rows} board not shown)")
    else:
        grid.print()


def describe(result: RunResult) -> str:
    """One-line explanation of why a run stopped."""
    cycle = result.cycle
    return OUTCOME_TEXT[result.outcome].format(
        start=cycle.start if cycle else 0,
        period=cycle.period if cycle else 0,
    )


def report(result: RunResult, elapsed: float, verbose: bool = False) -> None:
    print(f"Generation {result.generation}: {describe(result)}")
    print(f"Population {result.initial_population} -> {result.population}")
    if not verbose:
        return

    if result.bounding_box is not None:
        min_col, min_row, max_col, max_row = result.bounding_box
        print(f"Live cells within ({min_col}, {min_row})..({max_col}, {max_row})")
    rate = result.generation / elapsed if elapsed > 0 else 0.0
    print(f"{elapsed:.3f}s, {rate:.0f} generations/s")


def list_patterns(library: PatternLibrary) -> None:
    for category, names in library.get_patterns_by_category().items():
        print(f"{category}:")
        for name in names:
            pattern = library.get_pattern(name)
            width, height = pattern.get_size()
            line = f"  {name} ({width}x{height}, {len(pattern.cells)} cells)"
            if pattern.description:
                line += f": {pattern.description}"
            print(line)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return its exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    library = PatternLibrary()
    if args.list_patterns:
        list_patterns(library)
        return 0

    problems = check_args(args)
    if args.pattern is not None and library.get_pattern(args.pattern) is None:
        problems.append(f"unknown pattern {args.pattern!r} (see --list-patterns)")
    if problems:
        for problem in problems:
            print(f"lifegrid-cli: {problem}", file=sys.stderr)
        return 1

    simulation = Simulation(seed_grid(args, library))
    on_step = None
    if args.show != "summary":
        dump(simulation.grid, "Generation 0")
    if args.show == "all":
        on_step = lambda sim: dump(sim.grid, f"Generation {sim.generation}")  # noqa: E731

    started = time.perf_counter()
    try:
        result = simulation.run(args.generations, on_step=on_step)
    except KeyboardInterrupt:
        print(f"lifegrid-cli: interrupted at generation {simulation.generation}", file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - started

    if args.show == "ends":
        dump(simulation.grid, f"Generation {result.generation}")
    report(result, elapsed, args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
