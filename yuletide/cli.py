"""Command line entry point: solve a puzzle from an input file."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from types import ModuleType

from yuletide import (
    y2022_day01,
    y2022_day02,
    y2022_day03,
    y2022_day04,
    y2022_day05,
    y2022_day06,
    y2022_day25,
    y2025_day01,
    y2025_day02,
    y2025_day03,
    y2025_day04,
    y2025_day05,
    y2025_day06,
    y2025_day07,
    y2025_day08,
    y2025_day09,
    y2025_day10,
    y2025_day11,
    y2025_day12,
)

_PUZZLES: dict[tuple[int, int], ModuleType] = {
    (2022, 1): y2022_day01,
    (2022, 2): y2022_day02,
    (2022, 3): y2022_day03,
    (2022, 4): y2022_day04,
    (2022, 5): y2022_day05,
    (2022, 6): y2022_day06,
    (2022, 25): y2022_day25,
    (2025, 1): y2025_day01,
    (2025, 2): y2025_day02,
    (2025, 3): y2025_day03,
    (2025, 4): y2025_day04,
    (2025, 5): y2025_day05,
    (2025, 6): y2025_day06,
    (2025, 7): y2025_day07,
    (2025, 8): y2025_day08,
    (2025, 9): y2025_day09,
    (2025, 10): y2025_day10,
    (2025, 11): y2025_day11,
    (2025, 12): y2025_day12,
}

_PART_NAMES = {1: "part_one", 2: "part_two"}


def _solvers(module: ModuleType) -> dict[int, Callable[[str], object]]:
    return {
        part: getattr(module, name)
        for part, name in _PART_NAMES.items()
        if hasattr(module, name)
    }


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yuletide",
        description="Solve a puzzle from its input file.",
    )
    parser.add_argument("year", type=int, help="puzzle year")
    parser.add_argument("day", type=int, help="puzzle day")
    parser.add_argument(
        "part",
        type=int,
        nargs="?",
        choices=sorted(_PART_NAMES),
        help="part to solve; all parts when left out",
    )
    parser.add_argument(
        "-i",
        "--input",
        help="input file, '-' for standard input (default: DAY.txt)",
    )
    parser.add_argument(
        "-t",
        "--time",
        action="store_true",
        help="report the time taken, in seconds, on standard error",
    )
    return parser


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    module = _PUZZLES.get((args.year, args.day))
    if module is None:
        parser.error(f"no puzzle for {args.year} day {args.day}")
    solvers = _solvers(module)
    if args.part is not None:
        if args.part not in solvers:
            parser.error(f"{args.year} day {args.day} has no part {args.part}")
        solvers = {args.part: solvers[args.part]}

    source = args.input if args.input is not None else f"{args.day}.txt"
    try:
        text = _read_input(source)
    except OSError as error:
        print(f"yuletide: cannot read {source}: {error.strerror or error}", file=sys.stderr)
        return 1

    started = time.perf_counter()
    for part, solve in solvers.items():
        try:
            answer = solve(text)
        except ValueError as error:
            print(f"yuletide: part {part}: {error}", file=sys.stderr)
            return 1
        print(answer)
    if args.time:
        print(f"{time.perf_counter() - started:f}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())