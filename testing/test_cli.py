import logging

import pytest

from brute_hull import cli

@pytest.fixture
def point_file(tmp_path):
    filename = tmp_path / "points.txt"
    filename.write_text("0 0\n0 2\n2 0\n2 2\n1 1\n")
    return filename

def test_report(point_file, capsys):
    assert cli.main([str(point_file)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[:5] == [
        "Convex Hull (4 Points):",
        "(0,0)",
        "(0,2)",
        "(2,0)",
        "(2,2)"
    ]
    assert lines[5].startswith("Elapsed Time (microseconds): ")
    assert int(lines[5].split(": ")[1]) >= 0

def test_wrong_arguments(point_file, capsys):
    assert cli.main([]) == 2
    assert "Invalid number of arguments." in capsys.readouterr().err

    assert cli.main([str(point_file), str(point_file)]) == 2

def test_empty_file(tmp_path, capsys):
    filename = tmp_path / "empty.txt"
    filename.write_text("\n")

    assert cli.main([str(filename)]) == 1
    assert "at least one point required" in capsys.readouterr().err

def test_missing_file(tmp_path, capsys):
    assert cli.main([str(tmp_path / "missing.txt")]) == 1
    assert "missing.txt" in capsys.readouterr().err

def test_plot(point_file, tmp_path):
    plot_file = tmp_path / "hull.png"
    assert cli.main([str(point_file), "--plot", str(plot_file)]) == 0
    assert plot_file.exists()

def test_timed_hull():
    vertices, elapsed = cli.timed_hull([(0, 0), (1, 1)])
    assert vertices == [(0, 0), (1, 1)]
    assert elapsed >= 0

def test_plot_unwritable(point_file, tmp_path, capsys):
    plot_file = tmp_path / "nodir" / "hull.png"
    assert cli.main([str(point_file), "--plot", str(plot_file)]) == 1
    assert not plot_file.exists()
    assert "hull.png" in capsys.readouterr().err

def test_verbose(point_file, caplog):
    caplog.set_level(logging.DEBUG)
    assert cli.main(["-v", str(point_file)]) == 0
    assert "4 of 5 points are on the hull" in caplog.text

def test_quiet(point_file, caplog):
    caplog.set_level(logging.DEBUG)
    assert cli.main([str(point_file)]) == 0
    assert "points are on the hull" not in caplog.text
