"""Exceptions raised by geomeasure.

The measurement functions themselves never raise for degenerate geometry;
these are only used at the edges (shape construction and dispatch).
"""


class GeometryError(Exception):
    """Base exception for geomeasure."""

    pass


class UnsupportedGeometryError(GeometryError, TypeError):
    """Object cannot be converted into a GeometryVariant."""

    pass


class InvalidShapeError(GeometryError, ValueError):
    """Shape container is malformed (wrong array shape, vertex count)."""

    pass
