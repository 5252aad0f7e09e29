from grahamscan.geometry.coord import Coord2D


class PointSet:
    """Distinct points in insertion order, toggled by clicks."""
    def __init__(self, points=()):
        self.points = []
        for point in points:
            self.add(point)

    def add(self, point):
        point = Coord2D(*point)
        if point not in self.points:
            self.points.append(point)
        return point

    def remove(self, point):
        self.points.remove(Coord2D(*point))

    def toggle(self, point):
        """Adds the point if absent, removes it otherwise. Returns True when it was added."""
        point = Coord2D(*point)
        if point in self.points:
            self.points.remove(point)
            return False
        self.points.append(point)
        return True

    def reset(self):
        self.points = []

    def snapshot(self):
        return list(self.points)

    def __contains__(self, point):
        return tuple(point) in self.points

    def __iter__(self):
        return iter(self.snapshot())

    def __len__(self):
        return len(self.points)
