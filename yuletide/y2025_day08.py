"""Playground: wiring junction boxes into circuits, closest pairs first."""

from __future__ import annotations

import math
import re
from itertools import combinations

Box = tuple[int, int, int]

_BOX = re.compile(r"\s*(-?\d+),(-?\d+),(-?\d+)\s*")


def parse_boxes(text: str) -> list[Box]:
    """Parse ``x,y,z`` positions of the junction boxes, one per line."""
    boxes = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _BOX.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed junction box: {line!r}")
        x, y, z = map(int, match.groups())
        boxes.append((x, y, z))
    return boxes


class _Circuits:
    """Disjoint sets of box indices."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._size = [1] * size
        self.count = size

    def find(self, item: int) -> int:
        parent = self._parent
        while parent[item] != item:
            parent[item] = parent[parent[item]]
            item = parent[item]
        return item

    def union(self, a: int, b: int) -> bool:
        """Join the circuits of ``a`` and ``b``; return whether they were apart."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        self.count -= 1
        return True

    def sizes(self) -> list[int]:
        return [
            self._size[item]
            for item, parent in enumerate(self._parent)
            if item == parent
        ]


def _distance(a: Box, b: Box) -> int:
    return sum((p - q) ** 2 for p, q in zip(a, b))


def _closest_pairs(boxes: list[Box]) -> list[tuple[int, int]]:
    """Index pairs ordered by distance; ties keep the order of the input."""
    return sorted(
        combinations(range(len(boxes)), 2),
        key=lambda pair: _distance(boxes[pair[0]], boxes[pair[1]]),
    )


def part_one(text: str, connections: int = 1000) -> int:
    """Product of the three largest circuit sizes after the closest connections."""
    boxes = parse_boxes(text)
    if len(boxes) < 3:
        raise ValueError("at least three junction boxes are needed")
    pairs = _closest_pairs(boxes)
    if not 0 <= connections <= len(pairs):
        raise ValueError(f"cannot make {connections} connections between {len(boxes)} boxes")
    circuits = _Circuits(len(boxes))
    for a, b in pairs[:connections]:
        circuits.union(a, b)
    sizes = sorted(circuits.sizes(), reverse=True) + [0, 0]
    return math.prod(sizes[:3])


def part_two(text: str) -> int:
    """Product of the X coordinates of the pair that joins everything into one circuit."""
    boxes = parse_boxes(text)
    if len(boxes) < 2:
        raise ValueError("at least two junction boxes are needed")
    circuits = _Circuits(len(boxes))
    for a, b in _closest_pairs(boxes):
        if circuits.union(a, b) and circuits.count == 1:
            return boxes[a][0] * boxes[b][0]
    raise ValueError("junction boxes never form a single circuit")