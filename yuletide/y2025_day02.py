"""Gift shop: product IDs made of repeated digit sequences."""

from __future__ import annotations

import re

_RANGE = re.compile(r"\s*(\d+)-(\d+)\s*")


def parse_ranges(text: str) -> list[tuple[int, int]]:
    """Parse comma separated ``first-last`` ranges, over one or more lines."""
    ranges = []
    for item in text.replace("\n", ",").split(","):
        if not item.strip():
            continue
        match = _RANGE.fullmatch(item)
        if match is None:
            raise ValueError(f"malformed range: {item!r}")
        first, last = map(int, match.groups())
        ranges.append((first, last))
    return ranges


def is_doubled(number: int) -> bool:
    """Whether the decimal digits are one sequence written twice."""
    digits = str(number)
    half, odd = divmod(len(digits), 2)
    return not odd and digits[:half] == digits[half:]


def is_repeated(number: int) -> bool:
    """Whether the decimal digits are one sequence written at least twice."""
    digits = str(number)
    return digits in (digits + digits)[1:-1]


def _ids(text: str):
    for first, last in parse_ranges(text):
        yield from range(first, last + 1)


def part_one(text: str) -> int:
    """Sum of the IDs in the ranges that are a sequence written twice."""
    return sum(number for number in _ids(text) if is_doubled(number))


def part_two(text: str) -> int:
    """Sum of the IDs in the ranges that are a sequence repeated."""
    return sum(number for number in _ids(text) if is_repeated(number))