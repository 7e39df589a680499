"""Cafeteria: fresh ingredient ID ranges."""

from __future__ import annotations

import re

_RANGE = re.compile(r"\s*(\d+)-(\d+)\s*")
_ID = re.compile(r"\s*(\d+)\s*")


def parse_database(text: str) -> tuple[list[tuple[int, int]], list[int]]:
    """Parse the fresh ranges and, after a blank line, the available IDs."""
    ranges: list[tuple[int, int]] = []
    ids: list[int] = []
    reading_ranges = True
    for line in text.splitlines():
        if not line.strip():
            reading_ranges = False
            continue
        if reading_ranges:
            match = _RANGE.fullmatch(line)
            if match is None:
                raise ValueError(f"malformed range: {line!r}")
            first, last = map(int, match.groups())
            ranges.append((first, last))
        else:
            match = _ID.fullmatch(line)
            if match is None:
                raise ValueError(f"malformed ingredient ID: {line!r}")
            ids.append(int(match.group(1)))
    return ranges, ids


def part_one(text: str) -> int:
    """Number of available IDs that fall in some fresh range."""
    ranges, ids = parse_database(text)
    return sum(any(first <= i <= last for first, last in ranges) for i in ids)


def part_two(text: str) -> int:
    """Number of distinct IDs covered by the fresh ranges."""
    ranges, _ = parse_database(text)
    total = 0
    covered_to: int | None = None
    for first, last in sorted(ranges):
        if covered_to is not None:
            first = max(first, covered_to + 1)
        if first <= last:
            total += last - first + 1
            covered_to = last
    return total