"""
geomeasure
==========

Planar measurement primitives: signed area over a closed set of shape kinds,
point-to-segment / point-to-linestring distance, and exact boundary
membership.

Usage:

    from geomeasure import Polygon, area, point_to_linestring_distance

    square = Polygon([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)])
    area(square)                      # 100.0
    point_to_linestring_distance((5, 12), square.exterior)   # 2.0
"""
from geomeasure.shapes import (
    Coordinate,
    GeometryCollection,
    Line,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Rect,
    Triangle,
)
from geomeasure.variant import GeometryKind, GeometryVariant, to_variant
from geomeasure.area import area, ring_area
from geomeasure.winding import WindingOrder, twice_signed_ring_area, winding_order
from geomeasure.contains import linestring_contains_point, points_equal
from geomeasure.distance import (
    point_to_line_distance,
    point_to_linestring_distance,
    segment_distance,
    segment_length,
)
from geomeasure.errors import GeometryError, InvalidShapeError, UnsupportedGeometryError

__all__ = [
    # Shapes
    "Coordinate",
    "Point",
    "Line",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "Rect",
    "Triangle",
    "GeometryCollection",
    # Dispatch
    "GeometryKind",
    "GeometryVariant",
    "to_variant",
    # Area
    "area",
    "ring_area",
    "twice_signed_ring_area",
    "winding_order",
    "WindingOrder",
    # Distance / membership
    "segment_distance",
    "segment_length",
    "point_to_linestring_distance",
    "point_to_line_distance",
    "points_equal",
    "linestring_contains_point",
    # Errors
    "GeometryError",
    "InvalidShapeError",
    "UnsupportedGeometryError",
]

__version__ = "0.1.0"
