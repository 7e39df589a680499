"""Rucksack reorganisation: items shared between compartments and groups."""

from __future__ import annotations


def priority(item: str) -> int:
    """Priority of an item: a-z are 1-26, A-Z are 27-52."""
    if "a" <= item <= "z" and len(item) == 1:
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z" and len(item) == 1:
        return ord(item) - ord("A") + 27
    raise ValueError(f"not an item: {item!r}")


def shared_item(rucksack: str) -> str:
    """The first item of the first compartment also found in the second."""
    rucksack = rucksack.rstrip("\n")
    half = len(rucksack) // 2
    second = set(rucksack[half : 2 * half])
    for item in rucksack[:half]:
        if item in second:
            return item
    raise ValueError(f"no item shared between compartments: {rucksack!r}")


def shared_badge(first: str, second: str, third: str) -> str:
    """The first item of the first rucksack also carried by the other two."""
    others = set(second.rstrip("\n")) & set(third.rstrip("\n"))
    for item in first.rstrip("\n"):
        if item in others:
            return item
    raise ValueError("no badge shared by the group")


def _rucksacks(text: str) -> list[str]:
    return [line for line in text.splitlines() if line]


def part_one(text: str) -> int:
    """Sum of priorities of the items shared by each rucksack's compartments."""
    return sum(priority(shared_item(r)) for r in _rucksacks(text))


def part_two(text: str) -> int:
    """Sum of priorities of the badges of each group of three elves."""
    rucksacks = _rucksacks(text)
    if len(rucksacks) % 3:
        raise ValueError("rucksacks do not form groups of three")
    groups = zip(*[iter(rucksacks)] * 3)
    return sum(priority(shared_badge(*group)) for group in groups)