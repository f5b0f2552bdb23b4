"""
area.py

Signed planar area for every shape kind in `GeometryKind`.

Sign convention: counter-clockwise exterior rings are positive, reversing a
ring negates its area. `Rect` area is width * height and carries no winding.
Composite shapes are summed member by member, in sequence order, each member
going back through `to_variant`.

Public functions:
- `area(shape)` -> signed area of any convertible shape
- `ring_area(ring)` -> signed area enclosed by a single ring
"""
from geomeasure.numeric import zero
from geomeasure.shapes import (
    GeometryCollection,
    LineString,
    MultiPolygon,
    Polygon,
    Rect,
    Triangle,
)
from geomeasure.variant import GeometryKind, check_exhaustive, dispatch, to_variant
from geomeasure.winding import twice_signed_ring_area


def ring_area(ring: LineString):
    """Signed area of a polygon without holes whose boundary is `ring`."""
    return twice_signed_ring_area(ring) / 2


def _area_polygon(polygon: Polygon):
    total = ring_area(polygon.exterior)
    for interior in polygon.interiors:
        total = total - ring_area(interior)
    return total


def _area_multi_polygon(multi_polygon: MultiPolygon):
    return sum(area(p) for p in multi_polygon)


def _area_geometry_collection(collection: GeometryCollection):
    return sum(area(g) for g in collection)


def _area_rect(rect: Rect):
    return rect.width() * rect.height()


def _area_triangle(triangle: Triangle):
    return sum(line.determinant() for line in triangle.to_lines()) / 2


def _no_area(shape):
    # points and lines enclose nothing
    if hasattr(shape, 'x'):
        return zero(shape.x)
    return 0


_AREA_HANDLERS = {
    GeometryKind.POINT: _no_area,
    GeometryKind.LINE: _no_area,
    GeometryKind.LINE_STRING: _no_area,
    GeometryKind.POLYGON: _area_polygon,
    GeometryKind.MULTI_POINT: _no_area,
    GeometryKind.MULTI_LINE_STRING: _no_area,
    GeometryKind.MULTI_POLYGON: _area_multi_polygon,
    GeometryKind.GEOMETRY_COLLECTION: _area_geometry_collection,
    GeometryKind.RECT: _area_rect,
    GeometryKind.TRIANGLE: _area_triangle,
}
check_exhaustive(_AREA_HANDLERS, 'area')


def area(shape):
    """Return the signed planar area of `shape`.

    `shape` may be any geomeasure shape, a `GeometryVariant`, an ``(x, y)``
    scalar pair, a shapely geometry, or any type registered with
    `to_variant`. Never raises for degenerate or invalid rings; those give
    a well-defined (possibly meaningless) number.

    The result keeps the coordinate type where no division is involved
    (`Rect` of ints gives an int), but Polygon and Triangle areas are halved
    with true division, so integer coordinates give a float there.

    Example:
        >>> area(Polygon([(0, 0), (5, 0), (5, 6), (0, 6), (0, 0)]))
        30.0
    """
    return dispatch(to_variant(shape), _AREA_HANDLERS)
