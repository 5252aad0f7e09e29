from functools import cmp_to_key

from grahamscan.geometry.angles import cmp, compare_angle
from grahamscan.geometry.coord import as_coords


def find_pivot(points):
    """Lowest point, ties broken by the smallest x-coordinate."""
    return min(points, key=lambda p: (p.y, p.x))


def angular_sort(points, pivot):
    '''
    Sorts points by counter-clockwise angle around the pivot.
    Points at the same angle are ordered nearer first.
    '''
    def squared_distance(p):
        return (p.x - pivot.x) ** 2 + (p.y - pivot.y) ** 2

    def compare(p, q):
        return compare_angle(pivot, p, pivot, q) or cmp(squared_distance(p), squared_distance(q))

    return sorted(points, key=cmp_to_key(compare))


def find_convex_hull(points):
    '''
    Returns points on convex hull in CCW order according to Graham's scan algorithm,
    starting from the lowest (then leftmost) point. Collinear points are not kept.

    :param points: iterable of (x, y) pairs, duplicates allowed
    :return: list of Coord2D
    '''
    points = as_coords(points)
    if not points:
        return []

    pivot = find_pivot(points)

    hull = [pivot]
    for coord in angular_sort(points, pivot):
        if coord.same(hull[-1]):
            continue
        while len(hull) >= 2 and compare_angle(hull[-1], coord, hull[-2], coord) <= 0:
            hull.pop()
        hull.append(coord)
    return hull
