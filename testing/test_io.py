import pytest

from brute_hull import io
from brute_hull import PointFileError
from brute_hull.points import Point

@pytest.fixture
def point_file(tmp_path):
    filename = tmp_path / "points.txt"
    filename.write_text("2 2\n0 0\n0 2\n2 0\n1 1\n0 0\n")
    return filename

def test_read_points(point_file):
    pts = io.read_points(str(point_file))
    assert pts == [(0., 0.), (0., 2.), (1., 1.), (2., 0.), (2., 2.)]

def test_parse_any_whitespace():
    pts = io.parse_points("1.5 -2\t3e2\n\n  4   ")
    assert pts == [(1.5, -2.), (300., 4.)]

def test_parse_error():
    with pytest.raises(PointFileError, match="pts.txt: error reading point"):
        io.parse_points("1 2\n3 x\n", source="pts.txt")

    for bad_line in ["1 nan", "inf 0", "-infinity 2", "1_0 3"]:
        with pytest.raises(PointFileError, match="error reading point"):
            io.parse_points("0 0\n" + bad_line + "\n")

def test_unpaired_coordinate():
    with pytest.warns(UserWarning):
        pts = io.parse_points("1 2\n3")
    assert pts == [(1., 2.)]

def test_missing_file(tmp_path):
    missing = tmp_path / "nothing.txt"
    with pytest.raises(PointFileError, match="nothing.txt"):
        io.read_points(str(missing))

def test_empty_file(tmp_path):
    filename = tmp_path / "empty.txt"
    filename.write_text("")
    assert io.read_points(str(filename)) == []

def test_point_to_string():
    assert io.point_to_string(Point(1., 2.5)) == "(1,2.5)"
    assert io.point_to_string((-0.25, 1e7)) == "(-0.25,1e+07)"

def test_sequence_to_string():
    pts = [Point(0., 0.), Point(0., 2.)]
    assert io.sequence_to_string(pts) == "(0,0)\n(0,2)"
    assert io.sequence_to_string([]) == ""

def test_format_report():
    report = io.format_report([Point(0., 0.), Point(1., 1.)], 42)
    assert report.splitlines() == [
        "Convex Hull (2 Points):",
        "(0,0)",
        "(1,1)",
        "Elapsed Time (microseconds): 42"
    ]
