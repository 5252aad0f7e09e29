from collections import namedtuple


class Coord2D(namedtuple('Coord2D', ('x', 'y'))):
    """Two-dimensional coordinates on the grid. Immutable, compared by value."""
    __slots__ = ()

    def same(self, other):
        return self.x == other[0] and self.y == other[1]

    def __sub__(self, other):
        return Coord2D(self.x - other[0], self.y - other[1])


def as_coords(points):
    """Converts an iterable of (x, y) pairs into a list of Coord2D."""
    return [p if isinstance(p, Coord2D) else Coord2D(*p) for p in points]
