"""Read sets of points from text, and write points and hulls back out
as text.

A point file is a sequence of whitespace-separated real numbers, read
in pairs as "x y". Usually each line holds one point.

"""

import logging
import math
import warnings

from brute_hull.base import PointFileError
from brute_hull.points import Point, unique_points

logger = logging.getLogger(__name__)

def parse_points(text, source="<string>"):
    """Parse points from a string.

    Duplicate points are dropped, and the remaining points are
    returned in sorted order. A single coordinate left over at the end
    of the input is ignored (with a warning).

    Raises PointFileError if some token isn't a finite real number.

    """
    tokens = text.split()
    coords = []
    for token in tokens:
        try:
            value = float(token)
        except ValueError:
            raise PointFileError("{}: error reading point".format(source))

        # float() also takes nan, inf and 1_000, which aren't coordinates
        if "_" in token or not math.isfinite(value):
            raise PointFileError("{}: error reading point".format(source))
        coords.append(value)

    if len(coords) % 2 != 0:
        warnings.warn("{}: ignoring unpaired coordinate {}".format(
            source, tokens[-1]))
        coords = coords[:-1]

    points = [Point(x, y) for x, y in zip(coords[::2], coords[1::2])]
    unique = unique_points(points)

    logger.debug("%s: read %d points (%d duplicates dropped)",
                 source, len(points), len(points) - len(unique))
    return unique

def read_points(filename):
    """Read a file of points. See `parse_points`."""
    try:
        with open(filename, "r") as point_file:
            text = point_file.read()
    except OSError as err:
        raise PointFileError("{}: {}".format(filename, err.strerror)) from err
    except UnicodeDecodeError as err:
        raise PointFileError("{}: error reading point".format(filename)) from err

    return parse_points(text, source=filename)

def _format_coord(value):
    return "{:g}".format(value)

def point_to_string(point):
    return "({},{})".format(_format_coord(point[0]), _format_coord(point[1]))

def sequence_to_string(points):
    """Format a sequence of points, one per line."""
    return "\n".join(point_to_string(pt) for pt in points)

def format_report(hull, elapsed_us):
    """Format the vertices of a hull, together with the time (in
    microseconds) it took to compute them.

    """
    lines = ["Convex Hull ({} Points):".format(len(hull))]
    if len(hull) > 0:
        lines.append(sequence_to_string(hull))
    lines.append("Elapsed Time (microseconds): {}".format(int(elapsed_us)))
    return "\n".join(lines)
