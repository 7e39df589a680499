"""Tuning trouble: locating markers in a datastream."""

from __future__ import annotations


def find_marker(stream: str, width: int) -> int:
    """Number of characters read when the last ``width`` were all distinct."""
    if width < 1:
        raise ValueError("marker width must be positive")
    for end in range(width, len(stream) + 1):
        if len(set(stream[end - width : end])) == width:
            return end
    raise ValueError(f"no marker of width {width} in stream")


def part_one(text: str) -> int:
    """Position of the first start-of-packet marker."""
    return find_marker(text.strip(), 4)


def part_two(text: str) -> int:
    """Position of the first start-of-message marker."""
    return find_marker(text.strip(), 14)