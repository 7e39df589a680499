"""Movie theater: largest rectangles between red tiles."""

from __future__ import annotations

import re
from collections.abc import Iterator
from itertools import combinations

Tile = tuple[int, int]

_TILE = re.compile(r"\s*(\d+),(\d+)\s*")


def parse_tiles(text: str) -> list[Tile]:
    """Parse ``x,y`` coordinates of the red tiles, one per line."""
    tiles = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _TILE.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed tile: {line!r}")
        x, y = map(int, match.groups())
        tiles.append((x, y))
    return tiles


def _area(a: Tile, b: Tile) -> int:
    return (abs(a[0] - b[0]) + 1) * (abs(a[1] - b[1]) + 1)


def part_one(text: str) -> int:
    """Largest rectangle with red tiles at two opposite corners."""
    tiles = parse_tiles(text)
    return max((_area(a, b) for a, b in combinations(tiles, 2)), default=0)


def _edges(tiles: list[Tile]) -> Iterator[tuple[Tile, Tile]]:
    for a, b in zip(tiles, tiles[1:] + tiles[:1]):
        if a[0] != b[0] and a[1] != b[1]:
            raise ValueError(f"tiles {a} and {b} are not in a row or column")
        yield a, b


def _enters_interior(edge: tuple[Tile, Tile], low: Tile, high: Tile) -> bool:
    """Whether any tile of the edge lies strictly inside the rectangle."""
    (ax, ay), (bx, by) = edge
    x_from, x_to = sorted((ax, bx))
    y_from, y_to = sorted((ay, by))
    return max(x_from, low[0] + 1) <= min(x_to, high[0] - 1) and max(
        y_from, low[1] + 1
    ) <= min(y_to, high[1] - 1)


def part_two(text: str) -> int:
    """Largest such rectangle that no part of the tile loop passes through."""
    tiles = parse_tiles(text)
    edges = list(_edges(tiles))
    best = 0
    for a, b in combinations(tiles, 2):
        area = _area(a, b)
        if area <= best:
            continue
        low = (min(a[0], b[0]), min(a[1], b[1]))
        high = (max(a[0], b[0]), max(a[1], b[1]))
        if any(_enters_interior(edge, low, high) for edge in edges):
            continue
        best = area
    return best