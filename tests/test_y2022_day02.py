import itertools

import pytest

from yuletide.y2022_day02 import part_one, part_two

EXAMPLE = "A Y\nB X\nC Z\n"

ALL_ROUNDS = "".join(f"{a} {b}\n" for a, b in itertools.product("ABC", "XYZ"))


def test_example_part_one():
    assert part_one(EXAMPLE) == 15


def test_example_part_two():
    assert part_two(EXAMPLE) == 12


@pytest.mark.parametrize("a,b", list(itertools.product("ABC", "XYZ")))
def test_single_round_scores_in_range(a, b):
    line = f"{a} {b}\n"
    assert 1 <= part_one(line) <= 9
    assert 1 <= part_two(line) <= 9


def test_all_rounds_totals_agree():
    assert part_one(ALL_ROUNDS) == part_two(ALL_ROUNDS)


def test_scores_are_additive():
    assert part_one(EXAMPLE + ALL_ROUNDS) == part_one(EXAMPLE) + part_one(ALL_ROUNDS)


def test_draw_scores_shape_plus_three():
    assert part_one("A X\n") + 1 == part_one("B Y\n")
    assert part_one("B Y\n") + 1 == part_one("C Z\n")


def test_blank_lines_ignored():
    assert part_one("\n" + EXAMPLE + "\n") == part_one(EXAMPLE)


def test_empty_input_scores_nothing():
    assert part_two("") == 0


def test_rejects_bad_round():
    with pytest.raises(ValueError):
        part_one("D X\n")