r"""
brute_hull
==========

`brute_hull` finds the convex hull of a finite set of points in the
plane, using the exhaustive (brute-force) edge test.

The package is built on top of [numpy](https://numpy.org) and
[matplotlib](https://matplotlib.org), and provides modules to:

- compute the vertices of the convex hull of a set of points
  (`brute_hull.hull`)

- read point files and format points as text (`brute_hull.io`)

- draw points and their hull (`brute_hull.drawtools`)

The algorithm takes cubic time, so it's only meant for small inputs.

## Example usage

```python
from brute_hull import hull

points = [(0, 0), (0, 2), (2, 0), (2, 2), (1, 1)]
hull.compute_hull(points)
```
    [Point(x=0.0, y=0.0), Point(x=0.0, y=2.0), Point(x=2.0, y=0.0), Point(x=2.0, y=2.0)]

From the command line:

    brute-hull points.txt

"""

from .base import HullError, InvalidInput, PointFileError
from .points import Point
from .hull import compute_hull, try_compute_hull, HullResult
