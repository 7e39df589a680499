"""Printing department: paper rolls reachable by forklift."""

from __future__ import annotations

Position = tuple[int, int]

_NEIGHBOURS = [
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
]


def parse_grid(text: str) -> set[Position]:
    """Positions ``(row, column)`` of the paper rolls ``@`` in the grid."""
    rolls = set()
    for row, line in enumerate(text.splitlines()):
        for column, cell in enumerate(line):
            if cell == "@":
                rolls.add((row, column))
            elif cell != ".":
                raise ValueError(f"unexpected cell {cell!r} at row {row}")
    return rolls


def accessible_rolls(rolls: set[Position]) -> set[Position]:
    """Rolls with fewer than four rolls among their eight neighbours."""
    return {
        (row, column)
        for row, column in rolls
        if sum((row + dr, column + dc) in rolls for dr, dc in _NEIGHBOURS) < 4
    }


def part_one(text: str) -> int:
    """Number of rolls the forklifts can reach right away."""
    return len(accessible_rolls(parse_grid(text)))


def part_two(text: str) -> int:
    """Number of rolls removed when reachable rolls are taken until none are left."""
    rolls = parse_grid(text)
    removed = 0
    while accessible := accessible_rolls(rolls):
        rolls = rolls - accessible
        removed += len(accessible)
    return removed