"""Rock paper scissors strategy guide scoring."""

from __future__ import annotations

from collections.abc import Iterator


def _rounds(text: str) -> Iterator[tuple[int, int]]:
    for line in text.splitlines():
        if not line.strip():
            continue
        if len(line) < 3 or line[0] not in "ABC" or line[2] not in "XYZ":
            raise ValueError(f"malformed round: {line!r}")
        yield ord(line[0]) - ord("A"), ord(line[2]) - ord("X")


def part_one(text: str) -> int:
    """Total score when the second column is the shape to play."""
    total = 0
    for opponent, shape in _rounds(text):
        if (shape - opponent) % 3 == 1:
            outcome = 6
        elif shape == opponent:
            outcome = 3
        else:
            outcome = 0
        total += outcome + shape + 1
    return total


def part_two(text: str) -> int:
    """Total score when the second column is the required outcome."""
    total = 0
    for opponent, result in _rounds(text):
        shape = (opponent + result - 1) % 3
        total += shape + 1 + 3 * result
    return total