"""
contains.py

Boundary membership: does a point lie exactly on a linear shape?

Only vertices and the interiors of horizontal or vertical segments are
detected. A point strictly inside a diagonal segment is reported as not
contained; callers needing that case must measure the distance instead.

Public functions:
- `points_equal(p1, p2, epsilon=None, dtype=None)`
- `linestring_contains_point(linestring, point, epsilon=None, dtype=None)`
"""
from geomeasure import config
from geomeasure.numeric import approx_zero, fmax, fmin, hypot, lt
from geomeasure.shapes import LineString, as_coordinate, coordinates_equal


def points_equal(p1, p2, epsilon=None, dtype=None) -> bool:
    """True if the distance between `p1` and `p2` is approximately zero.

    The distance is cast to `dtype` (default `config.POINT_EQUALITY_DTYPE`,
    single precision) and compared against `epsilon` (default
    `config.POINT_EQUALITY_EPSILON`) whatever the coordinate type. NaN or
    infinite distances never compare equal.
    """
    if epsilon is None:
        epsilon = config.POINT_EQUALITY_EPSILON
    if dtype is None:
        dtype = config.POINT_EQUALITY_DTYPE
    a = as_coordinate(p1)
    b = as_coordinate(p2)
    return approx_zero(hypot(b.x - a.x, b.y - a.y), epsilon, dtype)


def linestring_contains_point(linestring: LineString, point, epsilon=None, dtype=None) -> bool:
    """Return True if `point` lies on `linestring`.

    Rules, in order:
    1. empty linestring -> False
    2. single coordinate -> `points_equal` against it (tolerance applies)
    3. exact match with any vertex -> True
    4. strictly inside a horizontal or vertical segment (exact comparisons) -> True
    Anything else, including the interior of a diagonal segment, is False.
    NaN components never match a vertex or a segment.
    """
    coords = linestring.coords
    if len(coords) == 0:
        return False
    p = as_coordinate(point)
    if len(coords) == 1:
        return points_equal(coords[0], p, epsilon=epsilon, dtype=dtype)
    if any(coordinates_equal(c, p) for c in coords):
        return True

    for line in linestring.lines():
        s, e = line.start, line.end
        if s.y == e.y and s.y == p.y and lt(fmin(s.x, e.x), p.x) and lt(p.x, fmax(s.x, e.x)):
            return True
        if s.x == e.x and s.x == p.x and lt(fmin(s.y, e.y), p.y) and lt(p.y, fmax(s.y, e.y)):
            return True
    return False
