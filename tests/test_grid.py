import pytest

from grahamscan.utils.configuration import default_grid_config
from grahamscan.viewer.grid import canvas_to_grid, grid_to_canvas


@pytest.fixture
def config():
    return default_grid_config()


def test_grid_to_canvas_is_cell_centre(config):
    # (640 - 2 * 5) / 100 = 6.3 pixels per cell
    assert grid_to_canvas((0, 0), config) == pytest.approx((8.15, 8.15))
    assert grid_to_canvas((99, 0), config) == pytest.approx((631.85, 8.15))


@pytest.mark.parametrize("coord", [(0, 0), (37, 52), (99, 99), (12, 80)])
def test_cell_centre_maps_back_to_cell(config, coord):
    assert canvas_to_grid(*grid_to_canvas(coord, config), config) == coord


@pytest.mark.parametrize("x, y", [(4.9, 100), (100, 4.9), (645, 10), (10, 645), (None, 10)])
def test_outside_canvas(config, x, y):
    assert canvas_to_grid(x, y, config) is None


def test_right_margin_is_clamped_to_last_cell(config):
    assert canvas_to_grid(644.9, 644.9, config) == (99, 99)


def test_custom_grid_size(config):
    config["grid"] = {"width": 10, "height": 20}
    assert canvas_to_grid(5, 5, config) == (0, 0)
    assert canvas_to_grid(635, 635, config) == (9, 19)
