"""Compute convex hulls of finite sets of points in the plane, by brute
force.

The algorithm here is the exhaustive one: every pair of points is a
candidate edge of the hull, and a pair is accepted if every point in
the set lies (weakly) on one side of the line through the pair. The
vertices of the hull are then the endpoints of the accepted edges.

```python
from brute_hull import hull

hull.compute_hull([(0, 0), (0, 2), (2, 0), (2, 2), (1, 1)])
```
    [Point(x=0.0, y=0.0), Point(x=0.0, y=2.0), Point(x=2.0, y=0.0), Point(x=2.0, y=2.0)]

This takes time O(n^3) for n points: there are n choose 2 candidate
edges, and each one is tested against every point. Points lying on
the boundary of the hull between two vertices are not distinguished
from vertices, so they show up in the output too.

"""

from collections import namedtuple
from itertools import combinations

import numpy as np

from brute_hull.base import InvalidInput
from brute_hull.points import as_points, point_array

def edge_line(p, q):
    """Get coefficients (a, b, c) for the line a*x + b*y = c through
    the points p and q.

    """
    a = q[1] - p[1]
    b = p[0] - q[0]
    c = (q[1] * p[0]) - (p[1] * q[0])
    return (a, b, c)

def signed_values(line, coords):
    """Evaluate a*x + b*y - c at each row of an (n, 2) coordinate array.

    The sign of each entry says which side of the line the
    corresponding point is on. Points on the line give 0.
    """
    a, b, c = line
    return (a * coords[..., 0]) + (b * coords[..., 1]) - c

def _one_sided(values):
    has_negative = np.any(values < 0)
    has_positive = np.any(values > 0)
    return not (has_negative and has_positive)

def is_hull_edge(p, q, points):
    """Determine whether the segment pq is an edge of the convex hull
    of the given points, i.e. whether every point is on the same
    closed side of the line through p and q.

    """
    return _one_sided(signed_values(edge_line(p, q), point_array(points)))

def hull_edges(points):
    """Find every pair of points spanning an edge of the convex hull.

    Parameters
    ----------
    points : sequence of pairs
        at least two distinct points in the plane.

    Return
    ------
    list of (Point, Point) pairs, in the order the candidate pairs
    were generated (pairs (i, j) with i < j, in input order). Points
    collinear with a hull edge make additional, overlapping edges.

    """
    pts = as_points(points)
    if len(pts) < 2:
        raise InvalidInput(
            "at least two points are required to find hull edges, got {}".format(
                len(pts))
        )

    coords = point_array(pts)
    edges = []
    for p, q in combinations(pts, 2):
        if _one_sided(signed_values(edge_line(p, q), coords)):
            edges.append((p, q))
    return edges

def hull_vertices(edges):
    """Get the distinct endpoints of a collection of edges, in
    lexicographic order.

    """
    vertices = set()
    for origin, destination in edges:
        vertices.add(origin)
        vertices.add(destination)
    return sorted(vertices)

def compute_hull(points):
    """Find the vertices of the convex hull of a set of points.

    The input should not contain duplicate points. The return value is
    a list of Points sorted by x and then by y (not in the order they
    appear around the boundary of the hull).

    Raises InvalidInput if there are no points.

    """
    pts = as_points(points)
    if len(pts) == 0:
        raise InvalidInput("at least one point required")

    # the convex hull of a single point is the point itself
    if len(pts) == 1:
        return pts

    return hull_vertices(hull_edges(pts))


class HullResult(namedtuple("HullResult", ["vertices", "error"])):
    """Outcome of a convex hull computation: either a list of vertices,
    or the error which prevented computing them.

    """
    __slots__ = ()

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.vertices

def try_compute_hull(points):
    """Like `compute_hull`, but return a `HullResult` instead of raising
    InvalidInput.

    """
    try:
        return HullResult(compute_hull(points), None)
    except InvalidInput as err:
        return HullResult([], err)
