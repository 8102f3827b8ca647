"""Order the vertices of a convex polygon around its boundary.

`brute_hull.hull.compute_hull` returns hull vertices in lexicographic
order, which is not the order you want when drawing the hull as a
polygon.

"""

import numpy as np

from brute_hull.points import as_points, point_array

def cyclic_order(vertices):
    """Get the vertices of a convex polygon in counterclockwise order
    around the boundary.

    Vertices are sorted by the angle (in (-pi, pi]) they make with
    the centroid. Ties (which only happen if all
    the vertices are collinear) are broken by distance from the
    centroid.

    Return: a list of Points. Fewer than three vertices are returned
    unchanged.

    """
    pts = as_points(vertices)
    if len(pts) < 3:
        return pts

    coords = point_array(pts)
    offsets = coords - np.mean(coords, axis=0)
    angles = np.arctan2(offsets[:, 1], offsets[:, 0])
    radii = np.linalg.norm(offsets, axis=-1)

    # lexsort uses the last key as the primary one
    order = np.lexsort((radii, angles))
    return [pts[index] for index in order]

def signed_area(vertices):
    """Get the signed area of a polygon with the given vertices (in
    order). The area is positive if the vertices go counterclockwise.

    """
    coords = point_array(vertices)
    if len(coords) < 3:
        return 0.
    x, y = coords.T
    return (np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))) / 2
