"""Camp cleanup: overlapping section assignments."""

from __future__ import annotations

import re

_PAIR = re.compile(r"\s*(\d+)-(\d+),(\d+)-(\d+)\s*")

Range = tuple[int, int]


def parse_pairs(text: str) -> list[tuple[Range, Range]]:
    """Parse lines of the form ``a-b,c-d`` into pairs of ranges."""
    pairs = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _PAIR.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed assignment pair: {line!r}")
        a, b, c, d = map(int, match.groups())
        pairs.append(((a, b), (c, d)))
    return pairs


def part_one(text: str) -> int:
    """Number of pairs where one range fully contains the other."""
    return sum(
        (c <= a and b <= d) or (a <= c and d <= b)
        for (a, b), (c, d) in parse_pairs(text)
    )


def part_two(text: str) -> int:
    """Number of pairs whose ranges overlap at all."""
    return sum(not (b < c or d < a) for (a, b), (c, d) in parse_pairs(text))