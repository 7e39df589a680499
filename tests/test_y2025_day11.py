import pytest

from yuletide.y2025_day11 import (
    count_paths,
    count_paths_through,
    parse_graph,
    part_one,
    part_two,
)

EXAMPLE = """\
aaa: you hhh
you: bbb ccc
bbb: ddd eee
ccc: ddd eee fff
ddd: ggg
eee: out
fff: out
ggg: out
hhh: ccc fff iii
iii: out
"""

THROUGH = """\
svr: aaa fft
aaa: fft
fft: dac out
dac: out
"""


def test_parse_graph():
    graph = parse_graph("aaa: bbb ccc\nbbb: out\n")
    assert graph == {"aaa": ("bbb", "ccc"), "bbb": ("out",)}


def test_parse_graph_rejects_missing_colon():
    with pytest.raises(ValueError):
        parse_graph("aaa bbb\n")


def test_parse_graph_rejects_duplicates():
    with pytest.raises(ValueError):
        parse_graph("aaa: bbb\naaa: ccc\n")


def test_part_one_example():
    assert part_one(EXAMPLE) == 5


def test_count_paths_from_a_leaf_parent():
    graph = parse_graph(EXAMPLE)
    assert count_paths(graph, "eee") == 1


def test_count_paths_is_sum_over_children():
    graph = parse_graph(EXAMPLE)
    assert count_paths(graph, "you") == sum(
        count_paths(graph, child) for child in graph["you"]
    )


def test_no_requirement_matches_plain_count():
    graph = parse_graph(EXAMPLE)
    assert count_paths_through(graph, "aaa", []) == count_paths(graph, "aaa")


def test_requirements_never_add_paths():
    graph = parse_graph(EXAMPLE)
    assert count_paths_through(graph, "aaa", ["ddd"]) <= count_paths(graph, "aaa")


def test_part_two_requires_both_devices():
    assert part_two(THROUGH) == 2


def test_unreachable_requirement_gives_zero():
    graph = parse_graph(THROUGH)
    assert count_paths_through(graph, "dac", ["fft"]) == 0


def test_cycle_is_rejected():
    with pytest.raises(ValueError):
        count_paths(parse_graph("you: aaa\naaa: you out\n"), "you")


def test_unknown_start_is_rejected():
    with pytest.raises(ValueError):
        count_paths(parse_graph(EXAMPLE), "zzz")