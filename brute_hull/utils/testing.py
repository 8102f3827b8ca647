import numpy as np

from brute_hull.hull import edge_line, signed_values
from brute_hull.points import point_array

def assert_strictly_sorted(points):
    for p, q in zip(points, points[1:]):
        assert (p[0], p[1]) < (q[0], q[1])

def assert_edges_one_sided(edges, points):
    coords = point_array(points)
    for p, q in edges:
        values = signed_values(edge_line(p, q), coords)
        assert not (np.any(values < 0) and np.any(values > 0))

def assert_same_points(pts1, pts2):
    assert set(map(tuple, pts1)) == set(map(tuple, pts2))
