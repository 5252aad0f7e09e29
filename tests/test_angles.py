import pytest

from grahamscan.geometry.angles import REGIONS, compare_angle, region_index
from grahamscan.geometry.coord import Coord2D


ORIGIN = Coord2D(0, 0)


def test_regions_are_indexed_counter_clockwise():
    assert [region_index(*r) for r in REGIONS] == list(range(9))
    assert region_index(7, 0) == 1
    assert region_index(-3, -8) == 6
    assert region_index(0, 0) == 0


@pytest.mark.parametrize("smaller, larger", [
    ((1, 0), (0, 1)),
    ((1, 1), (-1, 1)),
    ((-1, 0), (0, -1)),
    ((-1, -1), (1, -1)),
    ((3, 1), (1, 3)),
    ((-1, 3), (-3, 1)),
    ((1, -3), (3, -1)),
])
def test_counter_clockwise_order(smaller, larger):
    assert compare_angle(ORIGIN, smaller, ORIGIN, larger) == -1
    assert compare_angle(ORIGIN, larger, ORIGIN, smaller) == 1


def test_same_direction_compares_equal():
    assert compare_angle(ORIGIN, (1, 1), ORIGIN, (3, 3)) == 0
    assert compare_angle(ORIGIN, (0, 2), ORIGIN, (0, 9)) == 0


def test_zero_vector_sorts_first():
    assert compare_angle((5, 5), (5, 5), ORIGIN, (1, 0)) == -1
    assert compare_angle((5, 5), (5, 5), (2, 2), (2, 2)) == 0


def test_segments_with_different_bases():
    assert compare_angle((1, 1), (2, 1), (5, 5), (5, 6)) == -1
    assert compare_angle((10, 0), (10, 10), (0, 0), (10, 10)) == 1
