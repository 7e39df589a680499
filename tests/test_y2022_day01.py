import pytest

from yuletide.y2022_day01 import elf_totals, part_one, part_two

EXAMPLE = """1000
2000
3000

4000

5000
6000

7000
8000
9000

10000
"""


def test_example_part_one():
    assert part_one(EXAMPLE) == 24000


def test_example_part_two():
    assert part_two(EXAMPLE) == 45000


def test_totals_count_one_per_elf():
    assert len(elf_totals(EXAMPLE)) == 5


def test_part_one_is_largest_total():
    assert part_one(EXAMPLE) == max(elf_totals(EXAMPLE))


def test_part_two_is_sum_of_top_three():
    totals = sorted(elf_totals(EXAMPLE), reverse=True)
    assert part_two(EXAMPLE) == sum(totals[:3])


def test_part_two_not_less_than_part_one():
    assert part_two(EXAMPLE) >= part_one(EXAMPLE)


def test_single_item_elf():
    assert elf_totals("42\n") == [42]


def test_last_elf_without_trailing_blank_line_is_counted():
    assert elf_totals("7\n\n9") == [7, 9]


def test_fewer_than_three_elves():
    assert part_two("5\n\n8\n") == part_one("5\n") + part_one("8\n")


def test_empty_input():
    assert elf_totals("") == []


def test_rejects_garbage():
    with pytest.raises(ValueError):
        elf_totals("12\nabc\n")