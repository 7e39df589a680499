"""Laboratories: tachyon beams through a manifold of splitters."""

from __future__ import annotations

from collections import Counter


def _trace(text: str) -> tuple[int, Counter[int]]:
    """Follow the beams down the manifold.

    Returns the number of splits and the number of timelines per column at the end.
    """
    beams: Counter[int] = Counter()
    splits = 0
    for row, line in enumerate(text.splitlines()):
        if not line:
            continue
        arrived: Counter[int] = Counter()
        for column, count in beams.items():
            if not 0 <= column < len(line):
                raise ValueError(f"beam leaves the manifold at row {row}")
            if line[column] == "^":
                splits += 1
                for side in (column - 1, column + 1):
                    if not 0 <= side < len(line):
                        raise ValueError(f"beam leaves the manifold at row {row}")
                    arrived[side] += count
            else:
                arrived[column] += count
        for column, cell in enumerate(line):
            if cell == "S":
                arrived[column] = 1
        beams = arrived
    return splits, beams


def part_one(text: str) -> int:
    """Number of times a beam is split."""
    splits, _ = _trace(text)
    return splits


def part_two(text: str) -> int:
    """Number of timelines a single particle ends up in."""
    _, beams = _trace(text)
    return sum(beams.values())