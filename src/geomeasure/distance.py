"""
distance.py

Euclidean point-to-segment and point-to-linestring distances.

These are the metrics index and nearest-point code build on, so they stay
scalar and allocation free. Points may be given as `Point`, `Coordinate` or
any (x, y) pair.

Public functions:
- `segment_distance(point, start, end)`
- `segment_length(line)`
- `point_to_linestring_distance(point, linestring)`
- `point_to_line_distance(point, line)`
"""
from geomeasure.contains import linestring_contains_point
from geomeasure.numeric import MAX_VALUE, fmin, ge, hypot, le, zero
from geomeasure.shapes import Line, LineString, as_coordinate, coordinates_equal


def segment_distance(point, start, end):
    """Distance from `point` to the closed segment `start`-`end`.

    The point is projected onto the infinite line through the segment with
    r = ((p - start) . (end - start)) / |end - start|**2. r <= 0 snaps to
    `start`, r >= 1 snaps to `end`, anything in between uses the
    perpendicular distance. A zero-length segment is just the distance to
    `start`. NaN coordinates give a NaN distance rather than raising.
    """
    p = as_coordinate(point)
    s = as_coordinate(start)
    e = as_coordinate(end)
    dx = e.x - s.x
    dy = e.y - s.y
    len_sq = dx * dx + dy * dy
    # len_sq can underflow to 0 for distinct but very close endpoints
    if coordinates_equal(s, e) or len_sq == 0:
        return hypot(s.x - p.x, s.y - p.y)

    r = ((p.x - s.x) * dx + (p.y - s.y) * dy) / len_sq
    if le(r, 0):
        return hypot(s.x - p.x, s.y - p.y)
    if ge(r, 1):
        return hypot(e.x - p.x, e.y - p.y)
    # signed perpendicular offset in units of |end - start|
    offset = ((s.y - p.y) * dx - (s.x - p.x) * dy) / len_sq
    return abs(offset) * hypot(dx, dy)


def segment_length(line: Line):
    """Euclidean length of a single segment."""
    return hypot(line.dx(), line.dy())


def point_to_linestring_distance(point, linestring: LineString):
    """Minimum distance from `point` to any segment of `linestring`.

    Returns 0 for an empty linestring and for points found on it by
    `linestring_contains_point`. A single-coordinate linestring is treated
    as one zero-length segment, so a distant point gets the distance to that
    coordinate. Folding over its (zero) segments would return the fold seed
    `MAX_VALUE` instead; that result is deliberately not reproduced.
    """
    p = as_coordinate(point)
    if len(linestring) == 0 or linestring_contains_point(linestring, p):
        return zero(p.x)
    coords = linestring.coords
    if len(coords) == 1:
        return segment_distance(p, coords[0], coords[0])

    best = MAX_VALUE
    for line in linestring.lines():
        best = fmin(best, segment_distance(p, line.start, line.end))
    return best


def point_to_line_distance(point, line: Line):
    return segment_distance(point, line.start, line.end)
