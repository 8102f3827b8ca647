import pytest

from brute_hull import convexity, hull

@pytest.fixture
def hexagon_points():
    return [(2, 0), (1, 2), (-1, 2), (-2, 0), (-1, -2), (1, -2), (0, 0)]

def test_cyclic_order(hexagon_points):
    vertices = hull.compute_hull(hexagon_points)
    ordered = convexity.cyclic_order(vertices)

    assert sorted(ordered) == vertices
    assert ordered == [(-1, -2), (1, -2), (2, 0), (1, 2), (-1, 2), (-2, 0)]
    assert convexity.signed_area(ordered) > 0

def test_signed_area():
    square = [(0, 0), (2, 0), (2, 2), (0, 2)]
    assert convexity.signed_area(square) == pytest.approx(4.)
    assert convexity.signed_area(square[::-1]) == pytest.approx(-4.)
    assert convexity.signed_area(square[:2]) == 0.

def test_short_order():
    assert convexity.cyclic_order([(1, 1), (0, 0)]) == [(1, 1), (0, 0)]
