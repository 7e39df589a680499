"""Supply stacks: rearranging crates with a crane."""

from __future__ import annotations

import re
from dataclasses import dataclass

_MOVE = re.compile(r"\s*move (\d+) from (\d+) to (\d+)\s*")


@dataclass(frozen=True)
class Move:
    """Move ``count`` crates from stack ``source`` to stack ``target`` (1-based)."""

    count: int
    source: int
    target: int

    @classmethod
    def parse(cls, line: str) -> Move:
        match = _MOVE.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed move: {line!r}")
        return cls(*map(int, match.groups()))


def parse_input(text: str) -> tuple[list[list[str]], list[Move]]:
    """Parse the crate drawing and the procedure.

    Stacks are returned bottom to top.
    """
    drawing, separator, procedure = text.partition("\n\n")
    if not separator:
        raise ValueError("missing blank line between drawing and procedure")
    rows = drawing.split("\n")
    labels = rows[-1].split()
    if not labels:
        raise ValueError("drawing has no stack labels")
    stacks: list[list[str]] = [[] for _ in labels]
    for row in reversed(rows[:-1]):
        for index, stack in enumerate(stacks):
            position = 4 * index + 1
            if position < len(row) and row[position] != " ":
                stack.append(row[position])
    moves = [Move.parse(line) for line in procedure.splitlines() if line.strip()]
    return stacks, moves


def _stack(stacks: list[list[str]], number: int) -> list[str]:
    if not 1 <= number <= len(stacks):
        raise ValueError(f"no stack {number}")
    return stacks[number - 1]


def _rearrange(text: str, keep_order: bool) -> str:
    stacks, moves = parse_input(text)
    for move in moves:
        source = _stack(stacks, move.source)
        target = _stack(stacks, move.target)
        if move.count > len(source):
            raise ValueError(f"stack {move.source} holds fewer than {move.count} crates")
        split = len(source) - move.count
        crates = source[split:]
        del source[split:]
        target.extend(crates if keep_order else reversed(crates))
    return "".join(stack[-1] for stack in stacks if stack)


def part_one(text: str) -> str:
    """Top crates when the crane moves one crate at a time."""
    return _rearrange(text, keep_order=False)


def part_two(text: str) -> str:
    """Top crates when the crane moves several crates at once."""
    return _rearrange(text, keep_order=True)