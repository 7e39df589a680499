"""Factory: configuring machines by pressing buttons as few times as possible."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import reduce
from itertools import combinations
from operator import xor

from yuletide.lp import integer_optimum

_MACHINE = re.compile(r"\s*\[([.#]*)\]((?:\s*\([\d,\s]*\))*)\s*\{([\d,\s]*)\}\s*")
_BUTTON = re.compile(r"\(([\d,\s]*)\)")


@dataclass(frozen=True)
class Machine:
    """Indicator lights wanted, the buttons' wiring and the joltage requirements."""

    lights: tuple[bool, ...]
    buttons: tuple[tuple[int, ...], ...]
    joltages: tuple[int, ...]


def _numbers(text: str) -> tuple[int, ...]:
    return tuple(int(token) for token in text.split(",") if token.strip())


def parse_machine(line: str) -> Machine:
    """Parse a line such as ``[.##.] (3) (1,3) {3,5,4,7}``."""
    match = _MACHINE.fullmatch(line)
    if match is None:
        raise ValueError(f"malformed machine: {line!r}")
    diagram, wiring, requirements = match.groups()
    lights = tuple(cell == "#" for cell in diagram)
    buttons = tuple(_numbers(group) for group in _BUTTON.findall(wiring))
    joltages = _numbers(requirements)
    for button in buttons:
        for index in button:
            if index >= len(lights):
                raise ValueError(f"button wired to missing light {index}")
    if len(joltages) != len(lights):
        raise ValueError(f"{len(joltages)} joltage requirements for {len(lights)} lights")
    return Machine(lights, buttons, joltages)


def fewest_toggle_presses(machine: Machine) -> int:
    """Fewest presses that switch on exactly the wanted lights."""
    target = sum(1 << i for i, lit in enumerate(machine.lights) if lit)
    masks = [sum(1 << i for i in set(button)) for button in machine.buttons]
    for presses in range(len(masks) + 1):
        for chosen in combinations(masks, presses):
            if reduce(xor, chosen, 0) == target:
                return presses
    raise ValueError("the lights cannot be reached with these buttons")


def fewest_counter_presses(machine: Machine) -> int:
    """Fewest presses that raise every counter to its joltage requirement."""
    rows = [
        [1.0 if counter in button else 0.0 for button in machine.buttons]
        for counter in range(len(machine.joltages))
    ]
    a = rows + [[-v for v in row] for row in rows]
    b = [float(j) for j in machine.joltages] + [-float(j) for j in machine.joltages]
    c = [-1.0] * len(machine.buttons)
    value, _ = integer_optimum(a, b, c)
    return round(-value)


def _machines(text: str) -> list[Machine]:
    return [parse_machine(line) for line in text.splitlines() if line.strip()]


def part_one(text: str) -> int:
    """Total fewest presses to set the indicator lights of every machine."""
    return sum(fewest_toggle_presses(m) for m in _machines(text))


def part_two(text: str) -> int:
    """Total fewest presses to meet the joltage requirements of every machine."""
    return sum(fewest_counter_presses(m) for m in _machines(text))