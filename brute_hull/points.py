"""Points in the plane.

A `Point` is just a named pair of floats. Since it is a tuple, two
points are equal exactly when their coordinates are equal, and points
are ordered lexicographically (by x, then by y). Both of these
properties are relied on by `brute_hull.hull`.

"""

from collections import namedtuple

import numpy as np

from brute_hull.base import InvalidInput

Point = namedtuple("Point", ["x", "y"])
Point.__doc__ = "An immutable point (x, y) in the plane."

def as_point(obj):
    """Coerce a pair of numbers (or an existing Point) to a Point with
    float coordinates. Strings are rejected, even numeric ones.

    """
    try:
        arr = np.asarray(obj)
    except (TypeError, ValueError) as err:
        raise InvalidInput("can't interpret {!r} as a point".format(obj)) from err

    # no strings, even ones that look like numbers
    if arr.dtype.kind not in "iuf":
        raise InvalidInput("can't interpret {!r} as a point".format(obj))

    coords = tuple(float(c) for c in arr.ravel())

    if len(coords) != 2:
        raise InvalidInput(
            "a point needs exactly 2 coordinates, got {}".format(len(coords))
        )
    return Point(*coords)

def as_points(objs):
    """Coerce an iterable of pairs, or an (n, 2) array, to a list of
    Points.

    """
    if isinstance(objs, np.ndarray):
        if objs.size == 0:
            return []
        if objs.ndim != 2 or objs.shape[-1] != 2:
            raise InvalidInput(
                "expected an array of shape (n, 2), got array of shape {}".format(
                    objs.shape)
            )
    return [as_point(obj) for obj in objs]

def unique_points(points):
    """Remove duplicate points, returning the survivors in sorted order.

    Duplicates are found by exact equality of coordinates.
    """
    return sorted(set(as_points(points)))

def point_array(points):
    """Get an (n, 2) float array holding the coordinates of the given
    points.

    """
    pts = as_points(points)
    if len(pts) == 0:
        return np.zeros((0, 2))
    return np.array(pts, dtype=float)
