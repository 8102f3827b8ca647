class HullError(Exception):
    """Base class for errors raised by this package."""
    pass

class InvalidInput(HullError, ValueError):
    """Thrown if we try to compute a convex hull from point data that
    doesn't make sense, e.g. an empty point set.

    """
    pass

class PointFileError(HullError):
    """Thrown if a file of points can't be read or contains something
    that isn't a point.

    """
    pass
