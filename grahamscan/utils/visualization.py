import matplotlib.pyplot as plt

from grahamscan.viewer.base_renderer import BaseRenderer
from grahamscan.viewer.grid import grid_to_canvas
from grahamscan.utils.configuration import Configurable, default_grid_config


def hull_edges(hull):
    """Consecutive hull edges, closed only when the hull is a polygon."""
    edges = list(zip(hull[:-1], hull[1:]))
    if len(hull) >= 3:
        edges.append((hull[-1], hull[0]))
    return edges


def plot_convex_hull(points, hull, ax=None, title=None):
    """
    Plot points and their convex hull in grid coordinates.

    Args:
        points (list): [(x, y)] input points
        hull (list): [(x, y)] hull vertices in CCW order
        ax (Axes, optional): axes to draw on, a new figure is created otherwise
        title (str, optional): plot title, e.g. the coverage message
    """
    if ax is None:
        _, ax = plt.subplots()

    # Plot all points
    if points:
        xs, ys = zip(*points)
        ax.scatter(xs, ys, color="blue", label="Points")

    # Plot convex hull polygon
    if hull:
        hx, hy = zip(*hull)
        ax.scatter(hx, hy, color="red", label="Hull vertices")
        for (x1, y1), (x2, y2) in hull_edges(hull):
            ax.plot([x1, x2], [y1, y2], color="red")

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_aspect("equal", adjustable="box")
    ax.set_title(title or "Convex Hull")
    if points:
        ax.legend()
    return ax


class MatplotlibRenderer(BaseRenderer, Configurable):
    """Draws the point set and its hull on a matplotlib axes laid out like the grid canvas."""
    def __init__(self, ax, config=None):
        BaseRenderer.__init__(self)
        Configurable.__init__(self, config)
        self.ax = ax

    @classmethod
    def default_config(cls):
        return default_grid_config()

    def reset_canvas(self):
        canvas = self.config["canvas"]
        self.ax.clear()
        self.ax.set_facecolor(canvas["color"])
        self.ax.set_xlim(0, canvas["width"])
        self.ax.set_ylim(0, canvas["height"])
        self.ax.set_xticks([])
        self.ax.set_yticks([])
        self.ax.set_aspect("equal", adjustable="box")

    def draw_points(self, coords, color):
        if not coords:
            return
        xs, ys = zip(*(grid_to_canvas(c, self.config) for c in coords))
        self.ax.scatter(xs, ys, s=(2 * self.config["point"]["radius"]) ** 2 / 2, color=color, zorder=3)

    def draw_line(self, coord1, coord2):
        (x1, y1), (x2, y2) = grid_to_canvas(coord1, self.config), grid_to_canvas(coord2, self.config)
        self.ax.plot([x1, x2], [y1, y2], color=self.config["line"]["color"], zorder=2)

    def draw(self, points, hull, message):
        self.reset_canvas()
        self.draw_points(points, self.config["point"]["color"])
        self.draw_points(hull, self.config["point"]["hull_color"])
        for coord1, coord2 in hull_edges(hull):
            self.draw_line(coord1, coord2)
        self.ax.set_title(message)
        self.ax.figure.canvas.draw_idle()
