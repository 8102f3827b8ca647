"""Command-line front end: read a file of points, print the vertices
of its convex hull and how long it took to find them.

    brute-hull points.txt --plot hull.png

"""

import argparse
import logging
import sys
import time

from brute_hull import hull, io
from brute_hull.base import HullError

logger = logging.getLogger(__name__)

USAGE_DETAILS = """\
  infile - file containing points

It is assumed that each line of <infile> contains
a point of form x y where x and y are real numbers."""

def build_parser():
    parser = argparse.ArgumentParser(
        prog="brute-hull",
        description="Find the convex hull of a set of points in the plane.",
        epilog=USAGE_DETAILS,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    # checked by hand so we can print our own message
    parser.add_argument("infile", nargs="*", help="file containing points")
    parser.add_argument("--plot", metavar="FILE", default=None,
                        help="also save a drawing of the points and hull to FILE")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="print debugging information")
    return parser

def timed_hull(points):
    """Compute the convex hull of points, returning the vertices and
    the elapsed time in microseconds.

    """
    start = time.perf_counter_ns()
    vertices = hull.compute_hull(points)
    elapsed_us = (time.perf_counter_ns() - start) // 1000
    return vertices, elapsed_us

def save_plot(points, vertices, filename):
    # matplotlib is slow to import, so only do it if we need it
    import matplotlib
    matplotlib.use("Agg")
    from brute_hull import drawtools

    drawing = drawtools.HullDrawing()
    drawing.draw_points(points)
    drawing.draw_hull(vertices, facecolor="lightblue", alpha=0.5)
    try:
        drawing.save(filename)
    finally:
        drawing.close()
    logger.info("saved drawing to %s", filename)

def main(args=None):
    parser = build_parser()
    parsed_args = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.INFO,
        format="%(name)s: %(message)s"
    )
    # basicConfig does nothing if the root logger is already set up
    logging.getLogger("brute_hull").setLevel(
        logging.DEBUG if parsed_args.verbose else logging.INFO
    )

    if len(parsed_args.infile) != 1:
        print("Invalid number of arguments.\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 2

    infile = parsed_args.infile[0]
    try:
        points = io.read_points(infile)
        vertices, elapsed_us = timed_hull(points)
    except HullError as err:
        print(err, file=sys.stderr)
        return 1

    logger.debug("%d of %d points are on the hull", len(vertices), len(points))
    print(io.format_report(vertices, elapsed_us))

    if parsed_args.plot is not None:
        try:
            save_plot(points, vertices, parsed_args.plot)
        except OSError as err:
            print("{}: {}".format(parsed_args.plot, err.strerror), file=sys.stderr)
            return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
