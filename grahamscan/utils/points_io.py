import numpy as np

from grahamscan.geometry.coord import Coord2D


def load_points(path):
    """Reads `x y` integer pairs, one per line. Lines starting with # are ignored."""
    data = np.loadtxt(path, dtype=int, ndmin=2)
    if data.size == 0:
        return []
    if data.shape[1] != 2:
        raise ValueError(f"expected 2 columns in {path}, got {data.shape[1]}")
    return [Coord2D(int(x), int(y)) for x, y in data]


def random_points(n, width, height, np_random=np.random):
    """
    Uniform random grid points in [0, width) x [0, height).
    Duplicates are collapsed, so fewer than n points may be returned.

    :param n: number of points to draw
    :param width: grid width
    :param height: grid height
    :param np_random: source of randomness
    :return: list of distinct Coord2D in draw order
    """
    xs = np_random.randint(0, width, size=n)
    ys = np_random.randint(0, height, size=n)
    points = []
    seen = set()
    for x, y in zip(xs, ys):
        coord = Coord2D(int(x), int(y))
        if coord not in seen:
            seen.add(coord)
            points.append(coord)
    return points
