"""CLI entrypoint for solving one patrol puzzle input.

This module owns argument parsing, logging setup, and output formatting.
Simulation logic lives in ``guard_patrol.domain``.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from guard_patrol.config.constants import INPUT_DIR, INPUT_NAME, INPUT_YEAR
from guard_patrol.config.types import PatrolResult, RunConfig
from guard_patrol.domain.grid import parse_grid
from guard_patrol.domain.patrol import solve
from guard_patrol.errors import GuardPatrolError
from guard_patrol.io.paths import resolve_input_path
from guard_patrol.io.reader import read_input

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
"""Accepted ``--log-level`` values."""


def _parse_year(raw_year: str) -> int:
    """Parse a positive event year for argparse."""
    try:
        year = int(raw_year)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"year must be an integer, got {raw_year!r}") from exc
    if year < 1:
        raise argparse.ArgumentTypeError("year must be >= 1")
    return year


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Simulate the patrolling guard and count loop-causing obstructions"
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Puzzle input file (overrides --input-dir/--year/--name)",
    )
    parser.add_argument("--input-dir", type=Path, default=Path(INPUT_DIR))
    parser.add_argument("--year", type=_parse_year, default=INPUT_YEAR)
    parser.add_argument("--name", type=str, default=INPUT_NAME)
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
    )
    return parser


def format_result(result: PatrolResult) -> str:
    """Render both answers in the two-line puzzle output format."""
    return (
        f"Part 1 answer: {result.visited_count}\n"
        f"Part 2 answer: {result.loop_obstructions}"
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint: read, parse, simulate, print.

    An unreadable input file or a malformed grid ends the process with a
    diagnostic on stderr and a non-zero exit status.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = RunConfig(
            input_dir=args.input_dir,
            year=args.year,
            name=args.name,
            input_path=args.input,
        )
    except ValueError as exc:
        parser.error(str(exc))
    input_path = resolve_input_path(config)
    logger.info("Reading puzzle input from %s", input_path)

    try:
        lines = read_input(input_path)
        grid, start = parse_grid(lines)
        result = solve(grid, start)
    except FileNotFoundError:
        parser.error(f"Input file not found: {input_path}")
    except OSError as exc:
        parser.error(f"Cannot read input file {input_path}: {exc.strerror or exc}")
    except GuardPatrolError as exc:
        logger.debug("Failed to solve %s", input_path, exc_info=True)
        parser.exit(1, f"{parser.prog}: error: {input_path}: {exc}\n")

    print(format_result(result))


if __name__ == "__main__":
    main()
