"""Lobby: picking the largest joltage from each battery bank."""

from __future__ import annotations

import re

_BANK = re.compile(r"[0-9]+")


def max_joltage(bank: str, digits: int) -> int:
    """Largest number formed by ``digits`` batteries taken in order from ``bank``."""
    bank = bank.strip()
    if not _BANK.fullmatch(bank):
        raise ValueError(f"not a battery bank: {bank!r}")
    if not 1 <= digits <= len(bank):
        raise ValueError(f"cannot pick {digits} batteries from a bank of {len(bank)}")
    chosen = []
    start = 0
    for remaining in range(digits, 0, -1):
        window = bank[start : len(bank) - remaining + 1]
        best = max(window)
        start += window.index(best) + 1
        chosen.append(best)
    return int("".join(chosen))


def _total(text: str, digits: int) -> int:
    return sum(max_joltage(line, digits) for line in text.splitlines() if line.strip())


def part_one(text: str) -> int:
    """Total joltage when two batteries are turned on in each bank."""
    return _total(text, 2)


def part_two(text: str) -> int:
    """Total joltage when twelve batteries are turned on in each bank."""
    return _total(text, 12)