import math

from grahamscan.geometry.coord import Coord2D


def _scale(config):
    canvas, grid = config["canvas"], config["grid"]
    scale_x = (canvas["width"] - 2 * canvas["padding"]) / grid["width"]
    scale_y = (canvas["height"] - 2 * canvas["padding"]) / grid["height"]
    return scale_x, scale_y


def grid_to_canvas(coord, config):
    """Centre of the grid cell in canvas coordinates."""
    scale_x, scale_y = _scale(config)
    padding = config["canvas"]["padding"]
    return ((coord[0] + 0.5) * scale_x + padding,
            (coord[1] + 0.5) * scale_y + padding)


def canvas_to_grid(canvas_x, canvas_y, config):
    '''
    Converts a click position on the canvas to the grid cell under it.

    :return: Coord2D, or None when the position lies outside the canvas
    '''
    canvas, grid = config["canvas"], config["grid"]
    padding = canvas["padding"]
    if canvas_x is None or canvas_y is None:
        return None
    if (canvas_x < padding or canvas_x >= padding + canvas["width"]
            or canvas_y < padding or canvas_y >= padding + canvas["height"]):
        return None

    scale_x, scale_y = _scale(config)
    x = min(math.floor((canvas_x - padding) / scale_x), grid["width"] - 1)
    y = min(math.floor((canvas_y - padding) / scale_y), grid["height"] - 1)
    return Coord2D(x, y)
