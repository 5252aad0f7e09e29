import pytest

from grahamscan.viewer.point_set import PointSet


def test_toggle_adds_then_removes():
    points = PointSet()
    assert points.toggle((3, 4)) is True
    assert (3, 4) in points
    assert points.toggle((3, 4)) is False
    assert (3, 4) not in points
    assert len(points) == 0


def test_insertion_order_and_distinct():
    points = PointSet([(1, 1), (0, 0), (1, 1)])
    points.add((5, 2))
    points.add((0, 0))
    assert points.snapshot() == [(1, 1), (0, 0), (5, 2)]


def test_toggle_removes_only_the_exact_point():
    points = PointSet([(1, 1), (1, 2), (2, 1)])
    points.toggle((1, 2))
    assert list(points) == [(1, 1), (2, 1)]


def test_snapshot_is_a_copy():
    points = PointSet([(1, 1)])
    snapshot = points.snapshot()
    snapshot.append((9, 9))
    assert len(points) == 1


def test_remove_missing_point():
    points = PointSet([(1, 1)])
    points.remove((1, 1))
    with pytest.raises(ValueError):
        points.remove((1, 1))


def test_reset():
    points = PointSet([(1, 1), (2, 2)])
    points.reset()
    assert points.snapshot() == []
