"""
variant.py

Closed tagged union used to dispatch measurements over shape kinds.

Every algorithm keys a handler table on `GeometryKind` and passes it through
`dispatch`, which refuses tables that do not cover every kind. Adding a new
kind therefore breaks every algorithm until it is handled explicitly.

`to_variant` is a ``functools.singledispatch`` generic: shapes defined here
are wrapped as borrowed values, while inputs that have to be turned into a
shape first (a bare ``(x, y)`` pair, a shapely geometry) become owned values.
Downstream code can make its own types measurable with
``to_variant.register``.

Public names:
- `GeometryKind`, `GeometryVariant`
- `to_variant(obj)` -> GeometryVariant
- `dispatch(variant, handlers)` -> handler result
- `check_exhaustive(handlers, name)`
"""
from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from enum import Enum
from functools import singledispatch
from typing import Any, Callable, Mapping

from shapely.geometry.base import BaseGeometry

from geomeasure.errors import UnsupportedGeometryError
from geomeasure.shapes import (
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

logger = logging.getLogger(__name__)


class GeometryKind(Enum):
    POINT = "Point"
    LINE = "Line"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"
    RECT = "Rect"
    TRIANGLE = "Triangle"


_KIND_BY_TYPE = {
    Point: GeometryKind.POINT,
    Line: GeometryKind.LINE,
    LineString: GeometryKind.LINE_STRING,
    Polygon: GeometryKind.POLYGON,
    MultiPoint: GeometryKind.MULTI_POINT,
    MultiLineString: GeometryKind.MULTI_LINE_STRING,
    MultiPolygon: GeometryKind.MULTI_POLYGON,
    GeometryCollection: GeometryKind.GEOMETRY_COLLECTION,
    Rect: GeometryKind.RECT,
    Triangle: GeometryKind.TRIANGLE,
}


@dataclass(frozen=True)
class GeometryVariant:
    """One shape tagged with its kind.

    Attributes:
        kind: which member of the union this is
        geometry: the wrapped shape instance
        owned: False when `geometry` is the caller's own object, True when it
            was built during conversion
    """

    kind: GeometryKind
    geometry: Any
    owned: bool = False

    @classmethod
    def borrowed(cls, geometry) -> GeometryVariant:
        return cls(_kind_of(geometry), geometry, owned=False)

    @classmethod
    def from_owned(cls, geometry) -> GeometryVariant:
        return cls(_kind_of(geometry), geometry, owned=True)


def _kind_of(geometry) -> GeometryKind:
    kind = _KIND_BY_TYPE.get(type(geometry))
    if kind is None:
        raise UnsupportedGeometryError(f"{type(geometry).__name__} is not a geomeasure shape")
    return kind


@singledispatch
def to_variant(obj) -> GeometryVariant:
    """Wrap `obj` in a GeometryVariant.

    Raises:
        UnsupportedGeometryError: if no conversion is registered for the type
    """
    raise UnsupportedGeometryError(f"cannot measure object of type {type(obj).__name__}")


@to_variant.register(GeometryVariant)
def _(obj) -> GeometryVariant:
    return obj


for _shape_type in _KIND_BY_TYPE:
    to_variant.register(_shape_type, GeometryVariant.borrowed)


@to_variant.register(tuple)
def _(obj) -> GeometryVariant:
    # (x, y) scalars -> owned Point; Coordinate lands here as well
    if len(obj) == 2 and all(isinstance(v, numbers.Number) for v in obj):
        logger.debug('materialising Point from scalar pair %r', obj)
        return GeometryVariant.from_owned(Point(obj[0], obj[1]))
    raise UnsupportedGeometryError(f"tuple of length {len(obj)} is not an (x, y) pair")


@to_variant.register(BaseGeometry)
def _(obj) -> GeometryVariant:
    logger.debug('converting shapely %s', obj.geom_type)
    return GeometryVariant.from_owned(from_shapely(obj))


def _shapely_coords(coords):
    return [(c[0], c[1]) for c in coords]


def from_shapely(geom: BaseGeometry):
    """Convert a shapely geometry into the equivalent geomeasure shape.

    Z values are dropped. Empty points have no planar counterpart and raise.
    """
    gtype = geom.geom_type
    if gtype == 'Point':
        if geom.is_empty:
            raise UnsupportedGeometryError("empty shapely Point has no coordinate")
        x, y = geom.coords[0][:2]
        return Point(x, y)
    if gtype in ('LineString', 'LinearRing'):
        return LineString(_shapely_coords(geom.coords))
    if gtype == 'Polygon':
        if geom.is_empty:
            return Polygon()
        return Polygon(
            LineString(_shapely_coords(geom.exterior.coords)),
            tuple(LineString(_shapely_coords(r.coords)) for r in geom.interiors),
        )
    if gtype == 'MultiPoint':
        return MultiPoint(tuple(from_shapely(g) for g in geom.geoms))
    if gtype == 'MultiLineString':
        return MultiLineString(tuple(from_shapely(g) for g in geom.geoms))
    if gtype == 'MultiPolygon':
        return MultiPolygon(tuple(from_shapely(g) for g in geom.geoms))
    if gtype == 'GeometryCollection':
        return GeometryCollection(tuple(from_shapely(g) for g in geom.geoms))
    raise UnsupportedGeometryError(f"unsupported shapely geometry type {gtype}")


def check_exhaustive(handlers: Mapping[GeometryKind, Callable], name: str) -> None:
    """Raise if `handlers` does not cover exactly the members of GeometryKind."""
    missing = set(GeometryKind) - set(handlers)
    extra = set(handlers) - set(GeometryKind)
    if missing or extra:
        raise TypeError(
            f"{name}: handler table must cover every GeometryKind "
            f"(missing={sorted(k.name for k in missing)}, extra={sorted(map(str, extra))})"
        )


def dispatch(variant: GeometryVariant, handlers: Mapping[GeometryKind, Callable]):
    """Call the handler registered for `variant.kind` with the wrapped shape."""
    return handlers[variant.kind](variant.geometry)


__all__ = [
    "GeometryKind",
    "GeometryVariant",
    "to_variant",
    "from_shapely",
    "dispatch",
    "check_exhaustive",
]
