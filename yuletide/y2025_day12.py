"""Christmas tree farm: packing presents under the trees."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

Cell = tuple[int, int]
Region = tuple[int, int, tuple[int, ...]]

_HEADER = re.compile(r"\s*(\d+):\s*")
_REGION = re.compile(r"\s*(\d+)x(\d+):((?:\s+\d+)*)\s*")
_SIZE = 3


@dataclass(frozen=True)
class Present:
    """A present shape: the filled cells ``(row, column)`` of a 3x3 frame."""

    index: int
    shape: frozenset[Cell]

    @property
    def area(self) -> int:
        return len(self.shape)


def _parse_present(lines: list[str]) -> Present:
    header = _HEADER.fullmatch(lines[0])
    if header is None:
        raise ValueError(f"malformed present header: {lines[0]!r}")
    rows = [line.strip() for line in lines[1:]]
    if len(rows) != _SIZE or any(
        len(row) != _SIZE or set(row) - {".", "#"} for row in rows
    ):
        raise ValueError(f"present {header.group(1)} is not a 3x3 shape")
    shape = frozenset(
        (r, c) for r, row in enumerate(rows) for c, cell in enumerate(row) if cell == "#"
    )
    return Present(int(header.group(1)), shape)


def parse_input(text: str) -> tuple[list[Present], list[Region]]:
    """Parse the present shapes and the regions ``(width, height, counts)``."""
    presents: list[Present] = []
    regions: list[Region] = []
    for block in re.split(r"\n\s*\n", text.strip()):
        lines = [line for line in block.splitlines() if line.strip()]
        if not lines:
            continue
        if _HEADER.fullmatch(lines[0]):
            presents.append(_parse_present(lines))
            continue
        for line in lines:
            match = _REGION.fullmatch(line)
            if match is None:
                raise ValueError(f"malformed region: {line!r}")
            width, height = int(match.group(1)), int(match.group(2))
            counts = tuple(int(count) for count in match.group(3).split())
            regions.append((width, height, counts))
    return presents, regions


def orientations(shape: frozenset[Cell]) -> list[frozenset[Cell]]:
    """The distinct rotations and reflections of a shape within its 3x3 frame.

    The shape itself comes first.
    """
    last = _SIZE - 1
    transforms = (
        lambda r, c: (r, c),
        lambda r, c: (last - c, last - r),
        lambda r, c: (r, last - c),
        lambda r, c: (last - r, c),
        lambda r, c: (last - r, last - c),
        lambda r, c: (c, r),
        lambda r, c: (c, last - r),
        lambda r, c: (last - c, r),
    )
    result: list[frozenset[Cell]] = []
    for transform in transforms:
        image = frozenset(transform(r, c) for r, c in shape)
        if image not in result:
            result.append(image)
    return result


def _placements(shape: frozenset[Cell], width: int, height: int) -> list[int]:
    masks: dict[int, None] = {}
    for orientation in orientations(shape):
        for y in range(height - _SIZE + 1):
            for x in range(width - _SIZE + 1):
                mask = sum(1 << ((y + r) * width + x + c) for r, c in orientation)
                masks.setdefault(mask)
    return list(masks)


def fits(width: int, height: int, presents: Sequence[Present], counts: Sequence[int]) -> bool:
    """Whether the given numbers of each present fit in the region without overlap."""
    if len(counts) != len(presents):
        raise ValueError(f"{len(counts)} counts given for {len(presents)} presents")
    if any(count < 0 for count in counts):
        raise ValueError("present counts must not be negative")
    if sum(p.area * n for p, n in zip(presents, counts)) > width * height:
        return False
    width, height = max(width, height), min(width, height)
    placements = [_placements(p.shape, width, height) for p in presents]
    pieces = [kind for kind, count in enumerate(counts) for _ in range(count)]

    def search(position: int, board: int, previous: int) -> bool:
        if position == len(pieces):
            return True
        kind = pieces[position]
        # Identical presents are placed in increasing placement order.
        start = previous if position and pieces[position - 1] == kind else 0
        options = placements[kind]
        for index in range(start, len(options)):
            mask = options[index]
            if board & mask:
                continue
            if search(position + 1, board | mask, index):
                return True
        return False

    return search(0, 0, 0)


def part_one(text: str) -> int:
    """Number of regions that can hold all of their presents."""
    presents, regions = parse_input(text)
    return sum(fits(width, height, presents, counts) for width, height, counts in regions)