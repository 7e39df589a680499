import pytest

from yuletide.y2025_day09 import parse_tiles, part_one, part_two

EXAMPLE = "7,1\n11,1\n11,7\n9,7\n9,5\n2,5\n2,3\n7,3\n"


def test_parse_tiles():
    assert parse_tiles("7,1\n11,1\n") == [(7, 1), (11, 1)]


def test_example_part_one():
    assert part_one(EXAMPLE) == 50


def test_example_part_two():
    assert part_two(EXAMPLE) == 24


def test_part_two_never_exceeds_part_one():
    assert part_two(EXAMPLE) <= part_one(EXAMPLE)


def test_square_loop_whole_square_fits():
    text = "0,0\n4,0\n4,4\n0,4\n"
    assert part_two(text) == part_one(text)


def test_single_tile_has_no_rectangle():
    assert part_one("5,5") == part_two("5,5") == len(parse_tiles(""))


def test_diagonal_neighbours_raise():
    with pytest.raises(ValueError):
        part_two("0,0\n3,4\n")


@pytest.mark.parametrize("bad", ["1;2", "1,", "a,b"])
def test_malformed_tile_raises(bad):
    with pytest.raises(ValueError):
        parse_tiles(bad)