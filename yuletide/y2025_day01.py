"""Secret entrance: counting how often a safe dial points at zero."""

from __future__ import annotations

import re

_ROTATION = re.compile(r"\s*([LR])(\d+)\s*")
_START = 50
_SIZE = 100


def parse_rotations(text: str) -> list[int]:
    """Signed click counts, one per line: left turns negative, right positive."""
    turns = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _ROTATION.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed rotation: {line!r}")
        direction, clicks = match.groups()
        turns.append(-int(clicks) if direction == "L" else int(clicks))
    return turns


def part_one(text: str) -> int:
    """Number of rotations that leave the dial pointing at zero."""
    position = _START
    hits = 0
    for turn in parse_rotations(text):
        position = (position + turn) % _SIZE
        hits += position == 0
    return hits


def part_two(text: str) -> int:
    """Number of clicks, during any rotation, that land the dial on zero."""
    position = _START
    hits = 0
    for turn in parse_rotations(text):
        moved = position + turn
        if position != 0 and moved < 0:
            hits += 1
        if abs(moved) >= _SIZE:
            hits += abs(moved) // _SIZE
        elif moved == 0:
            hits += 1
        position = moved % _SIZE
    return hits