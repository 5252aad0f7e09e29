from matplotlib.widgets import Button

from grahamscan.hull.coverage import coverage_message, hull_coverage
from grahamscan.hull.graham import find_convex_hull
from grahamscan.utils.configuration import Configurable, default_grid_config
from grahamscan.viewer.grid import canvas_to_grid
from grahamscan.viewer.point_set import PointSet


class HullViewer(Configurable):
    """
        Keeps the clicked points, recomputes their convex hull on every change
        and hands the result to a renderer.
    """
    def __init__(self, renderer, config=None, point_set=None, logger=None, tb_logger=None):
        super().__init__(config)
        self.renderer = renderer
        self.point_set = point_set if point_set is not None else PointSet()
        self.logger = logger
        self.tb_logger = tb_logger
        self.hull = []
        self.message = ""
        self.n_updates = 0
        self._widgets = []

    @classmethod
    def default_config(cls):
        return default_grid_config()

    def redraw(self):
        points = self.point_set.snapshot()
        self.hull = find_convex_hull(points)
        coverage = hull_coverage(points, self.hull)
        self.message = coverage_message(coverage)

        self.renderer.draw(points, self.hull, self.message)

        if self.logger:
            self.logger.info(self.message)
        if self.tb_logger:
            self.tb_logger.log_coverage(coverage, self.n_updates)
        self.n_updates += 1
        return self.hull

    def click(self, canvas_x, canvas_y):
        """Toggles the grid point under a canvas position. Returns the point, or None if outside."""
        coord = canvas_to_grid(canvas_x, canvas_y, self.config)
        if coord is None:
            if self.logger:
                self.logger.debug(f"Ignored click outside the grid at ({canvas_x}, {canvas_y})")
            return None

        added = self.point_set.toggle(coord)
        if self.logger:
            self.logger.debug(f"{'Added' if added else 'Removed'} point ({coord.x}, {coord.y})")
        self.redraw()
        return coord

    def reset(self):
        self.point_set.reset()
        self.redraw()

    def set_grid(self, width, height):
        """Changes the number of grid cells used for clicks and drawing, then redraws."""
        update = {"grid": {"width": width, "height": height}}
        self.update_config(update)
        if isinstance(self.renderer, Configurable):
            self.renderer.update_config(update)
        return self.redraw()

    # matplotlib wiring
    def on_press(self, event):
        target = self.renderer.ax
        if target is not None and event.inaxes is not target:
            return
        self.click(event.xdata, event.ydata)

    def connect(self, figure, reset_ax=None):
        figure.canvas.mpl_connect('button_press_event', self.on_press)
        if reset_ax is not None:
            button = Button(reset_ax, "Reset")
            button.on_clicked(lambda _event: self.reset())
            # widgets stop responding once garbage collected
            self._widgets.append(button)
        self.redraw()
