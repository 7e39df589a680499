"""Calorie counting: find the elves carrying the most food."""

from __future__ import annotations

import heapq


def elf_totals(text: str) -> list[int]:
    """Return the calorie total of each elf, in input order.

    Elves are separated by blank lines; each other line holds one item's calories.
    """
    totals: list[int] = []
    current: int | None = None
    for line in text.splitlines():
        line = line.strip()
        if not line:
            if current is not None:
                totals.append(current)
            current = None
            continue
        try:
            calories = int(line)
        except ValueError:
            raise ValueError(f"not a calorie count: {line!r}") from None
        current = calories if current is None else current + calories
    if current is not None:
        totals.append(current)
    return totals


def part_one(text: str) -> int:
    """Calories carried by the elf carrying the most."""
    return max(elf_totals(text), default=0)


def part_two(text: str) -> int:
    """Calories carried by the three elves carrying the most."""
    return sum(heapq.nlargest(3, elf_totals(text)))