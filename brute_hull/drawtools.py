"""This submodule provides an interface between `brute_hull.hull` and
[matplotlib](https://matplotlib.org/).

To draw a set of points together with its convex hull, instantiate
`HullDrawing` and use the provided methods to add things to the
drawing.

```python
from brute_hull import hull, drawtools

points = [(0, 0), (0, 2), (2, 0), (2, 2), (1, 1)]
vertices = hull.compute_hull(points)

drawing = drawtools.HullDrawing()
drawing.draw_points(points)
drawing.draw_hull(vertices, facecolor="lightblue")

drawing.show()
```

    """

import numpy as np

import matplotlib.pyplot as plt
from matplotlib.patches import Polygon

from brute_hull import convexity
from brute_hull.points import point_array

#how much room to leave around the points, as a fraction of the
#width/height of their bounding box
DRAW_NEIGHBORHOOD = 0.1

#polygons with smaller area than this get drawn as line segments
AREA_THRESHOLD = 1e-12

def _merge_kwargs(defaults, kwargs):
    merged = dict(defaults)
    for key, value in kwargs.items():
        merged[key] = value
    return merged

class HullDrawing:
    def __init__(self, figsize=8, ax=None, fig=None):
        if ax is None or fig is None:
            fig, ax = plt.subplots(figsize=(figsize, figsize))

        self.ax, self.fig = ax, fig
        self.ax.set_aspect("equal")

    def _expand_limits(self, coords):
        if len(coords) == 0:
            return

        lower = np.min(coords, axis=0)
        upper = np.max(coords, axis=0)
        room = np.maximum((upper - lower) * DRAW_NEIGHBORHOOD, 1.0)

        self.ax.update_datalim(np.array([lower - room, upper + room]))
        self.ax.autoscale_view()

    def draw_points(self, points, **kwargs):
        coords = point_array(points)
        default_kwargs = {
            "color": "black",
            "marker": "o",
            "markersize": 3,
            "linestyle": "none"
        }
        x, y = coords.T
        self.ax.plot(x, y, **_merge_kwargs(default_kwargs, kwargs))
        self._expand_limits(coords)

    def draw_hull(self, vertices, draw_vertices=True, **kwargs):
        """Draw the convex polygon with the given vertices.

        The vertices can be given in any order (e.g. the lexicographic
        order returned by `brute_hull.hull.compute_hull`).

        """
        ordered = convexity.cyclic_order(vertices)
        coords = point_array(ordered)
        if len(coords) == 0:
            return

        default_kwargs = {
            "facecolor": "none",
            "edgecolor": "royalblue",
            "linewidth": 1.5
        }
        poly_kwargs = _merge_kwargs(default_kwargs, kwargs)

        if abs(convexity.signed_area(ordered)) > AREA_THRESHOLD:
            self.ax.add_patch(Polygon(coords, closed=True, **poly_kwargs))
        else:
            # degenerate hull: a point or a segment
            x, y = coords.T
            self.ax.plot(x, y, color=poly_kwargs["edgecolor"],
                         linewidth=poly_kwargs["linewidth"])

        if draw_vertices:
            self.draw_points(ordered, color=poly_kwargs["edgecolor"],
                             markersize=5)

        self._expand_limits(coords)

    def save(self, filename, **kwargs):
        self.fig.savefig(filename, **kwargs)

    def show(self):
        plt.show()

    def close(self):
        plt.close(self.fig)
