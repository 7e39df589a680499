import pytest

from yuletide.y2025_day12 import Present, fits, orientations, parse_input, part_one

TEXT = """\
0:
###
###
###

1:
#..
#..
###

3x3: 1 0
6x3: 2 0
3x3: 0 2
"""

SQUARE = Present(0, frozenset((r, c) for r in range(3) for c in range(3)))
L_SHAPE = Present(1, frozenset({(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)}))


def test_parse_input_presents():
    presents, _ = parse_input(TEXT)
    assert presents == [SQUARE, L_SHAPE]


def test_parse_input_regions():
    _, regions = parse_input(TEXT)
    assert regions == [(3, 3, (1, 0)), (6, 3, (2, 0)), (3, 3, (0, 2))]


def test_parse_input_rejects_bad_shape():
    with pytest.raises(ValueError):
        parse_input("0:\n##\n##\n\n2x2: 1\n")


def test_parse_input_rejects_bad_region():
    with pytest.raises(ValueError):
        parse_input("0:\n###\n###\n###\n\n3by3: 1\n")


def test_area():
    assert L_SHAPE.area == len(L_SHAPE.shape)


def test_square_has_one_orientation():
    assert orientations(SQUARE.shape) == [SQUARE.shape]


def test_orientations_are_distinct_and_start_with_shape():
    images = orientations(L_SHAPE.shape)
    assert images[0] == L_SHAPE.shape
    assert len(set(images)) == len(images) <= 8
    assert all(len(image) == L_SHAPE.area for image in images)


def test_orientations_closed_under_transpose():
    images = orientations(L_SHAPE.shape)
    for image in images:
        assert frozenset((c, r) for r, c in image) in images


def test_fits_single_square():
    assert fits(3, 3, [SQUARE], [1]) is True


def test_fits_too_much_area():
    assert fits(3, 3, [SQUARE], [2]) is False


def test_fits_side_by_side_either_way_round():
    assert fits(6, 3, [SQUARE], [2]) is True
    assert fits(3, 6, [SQUARE], [2]) is True


def test_fits_nothing_to_place():
    assert fits(2, 2, [SQUARE], [0]) is True


def test_fits_region_smaller_than_frame():
    assert fits(2, 2, [SQUARE], [1]) is False


def test_fits_count_mismatch():
    with pytest.raises(ValueError):
        fits(3, 3, [SQUARE, L_SHAPE], [1])


def test_fits_negative_count():
    with pytest.raises(ValueError):
        fits(3, 3, [SQUARE], [-1])


def test_part_one_counts_fitting_regions():
    assert part_one(TEXT) == 2