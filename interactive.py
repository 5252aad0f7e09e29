# interactive.py

# Python imports
import argparse
import numpy as np
import matplotlib.pyplot as plt

# Local imports
from grahamscan.utils.configuration import default_grid_config
from grahamscan.utils.logger import configure_logger, TensorBoardLogger
from grahamscan.utils.points_io import random_points
from grahamscan.utils.visualization import MatplotlibRenderer
from grahamscan.viewer.hull_viewer import HullViewer
from grahamscan.viewer.point_set import PointSet


def main():
    parser = argparse.ArgumentParser(description="Click on the grid to add or remove points and watch the convex hull")
    parser.add_argument("--width", type=int, default=100, help="Number of grid cells along x.")
    parser.add_argument("--height", type=int, default=100, help="Number of grid cells along y.")
    parser.add_argument("--random", type=int, default=0, help="Start with this many random points.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for --random.")
    parser.add_argument("--log-dir", type=str, default="logs", help="Directory for the log file.")
    parser.add_argument("--tensorboard", action="store_true", help="Also write hull statistics to TensorBoard.")
    args = parser.parse_args()

    #  setup & config
    logger = configure_logger('hull_viewer', log_dir=args.log_dir)
    tb_logger = TensorBoardLogger(log_dir=f"{args.log_dir}/tensorboard") if args.tensorboard else None

    config = default_grid_config()
    config["grid"] = {"width": args.width, "height": args.height}
    canvas = config["canvas"]

    dpi = 100
    fig = plt.figure(figsize=(canvas["width"] / dpi, (canvas["height"] + 60) / dpi), dpi=dpi)
    ax = fig.add_axes([0.02, 0.1, 0.96, 0.84])
    reset_ax = fig.add_axes([0.42, 0.01, 0.16, 0.06])

    point_set = PointSet()
    if args.random:
        point_set = PointSet(random_points(args.random, args.width, args.height, np.random.RandomState(args.seed)))
        logger.info(f"Starting with {len(point_set)} random points (seed={args.seed})")

    viewer = HullViewer(MatplotlibRenderer(ax, config), config, point_set=point_set,
                        logger=logger, tb_logger=tb_logger)
    viewer.connect(fig, reset_ax=reset_ax)

    plt.show()

    if tb_logger:
        tb_logger.close()


if __name__ == "__main__":
    main()
