"""Reactor: counting the paths through a network of devices."""

from __future__ import annotations

from collections.abc import Iterable

Graph = dict[str, tuple[str, ...]]


def parse_graph(text: str) -> Graph:
    """Parse lines of the form ``name: child child ...``.

    Devices that never appear before a colon are ends of the network.
    """
    graph: Graph = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        name, separator, rest = line.partition(":")
        name = name.strip()
        if not separator or not name or len(name.split()) != 1:
            raise ValueError(f"malformed device line: {line!r}")
        if name in graph:
            raise ValueError(f"device {name!r} is defined twice")
        graph[name] = tuple(rest.split())
    return graph


def count_paths_through(graph: Graph, start: str, required: Iterable[str]) -> int:
    """Number of paths from ``start`` to an end that visit every required device."""
    if start not in graph:
        raise ValueError(f"unknown start device {start!r}")
    wanted = frozenset(required)
    memo: dict[tuple[str, frozenset[str]], int] = {}
    active: set[tuple[str, frozenset[str]]] = set()

    def walk(node: str, seen: frozenset[str]) -> int:
        if node not in graph:
            return int(seen == wanted)
        if node in wanted:
            seen = seen | {node}
        key = (node, seen)
        if key in memo:
            return memo[key]
        if key in active:
            raise ValueError(f"the network loops through {node!r}")
        active.add(key)
        total = 0
        for child in graph[node]:
            total += walk(child, seen)
        active.discard(key)
        memo[key] = total
        return total

    return walk(start, frozenset())


def count_paths(graph: Graph, start: str) -> int:
    """Number of paths from ``start`` to an end of the network."""
    return count_paths_through(graph, start, ())


def part_one(text: str) -> int:
    """Number of paths leading from ``you`` out of the network."""
    return count_paths(parse_graph(text), "you")


def part_two(text: str) -> int:
    """Number of paths from ``svr`` out that pass both ``fft`` and ``dac``."""
    return count_paths_through(parse_graph(text), "svr", ("fft", "dac"))