# compute_hull.py

# Python imports
import argparse
import numpy as np
import matplotlib.pyplot as plt

# Local imports
from grahamscan.hull.graham import find_convex_hull
from grahamscan.hull.coverage import hull_coverage, coverage_message
from grahamscan.utils.logger import configure_logger
from grahamscan.utils.points_io import load_points, random_points
from grahamscan.utils.visualization import plot_convex_hull


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compute the convex hull of grid points with Graham's scan")
    parser.add_argument("points_file", nargs="?", help="Text file with one 'x y' pair per line.")
    parser.add_argument("--random", type=int, default=None, help="Generate this many random grid points instead.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for --random.")
    parser.add_argument("--width", type=int, default=100, help="Grid width for --random.")
    parser.add_argument("--height", type=int, default=100, help="Grid height for --random.")
    parser.add_argument("--plot", action="store_true", help="Show the hull in a matplotlib window.")
    parser.add_argument("--save", type=str, default=None, help="Save the hull plot to this path.")
    parser.add_argument("--log-dir", type=str, default="logs", help="Directory for the log file.")
    args = parser.parse_args(argv)

    if (args.points_file is None) == (args.random is None):
        parser.error("give either a points file or --random N")

    logger = configure_logger('compute_hull', log_dir=args.log_dir)

    if args.random is not None:
        points = random_points(args.random, args.width, args.height, np.random.RandomState(args.seed))
        logger.info(f"Generated {len(points)} distinct points (seed={args.seed})")
    else:
        try:
            points = load_points(args.points_file)
        except (OSError, ValueError) as e:
            parser.error(f"cannot read {args.points_file}: {e}")
        logger.info(f"Loaded {len(points)} points from {args.points_file}")

    hull = find_convex_hull(points)
    message = coverage_message(hull_coverage(points, hull))

    for coord in hull:
        print(coord.x, coord.y)
    logger.info(message)

    if args.plot or args.save:
        plot_convex_hull(points, hull, title=message)
        if args.save:
            plt.savefig(args.save)
            logger.info(f"Plot saved to {args.save}")
        if args.plot:
            plt.show()

    return hull


if __name__ == "__main__":
    main()
