"""
shapes.py

Immutable planar geometry value types consumed by the measurement modules.

Design:
- Frozen dataclasses, coordinates normalised to tuples at construction
- Structural checks only (array shape, vertex count); rings are neither
  closed nor validated, so degenerate input flows through to the formulas
- No measurement logic lives here beyond trivial accessors

Types:
- `Coordinate`, `Point`, `Line`, `LineString`, `Polygon`, `Rect`, `Triangle`
- `MultiPoint`, `MultiLineString`, `MultiPolygon`, `GeometryCollection`
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, NamedTuple, Tuple

import numpy as np

from geomeasure.errors import InvalidShapeError


class Coordinate(NamedTuple):
    """A bare (x, y) pair."""

    x: Any
    y: Any


def as_coordinate(value) -> Coordinate:
    """Coerce a Coordinate, Point or 2-sequence into a Coordinate."""
    if isinstance(value, Coordinate):
        return value
    if isinstance(value, Point):
        return value.coord
    try:
        if len(value) != 2:
            raise InvalidShapeError(f"coordinate must have 2 components, got {len(value)}")
        return Coordinate(value[0], value[1])
    except TypeError as exc:
        raise InvalidShapeError(f"cannot interpret {value!r} as a coordinate") from exc


def coordinates_equal(a, b) -> bool:
    """Component-wise ==, so NaN never matches even when the same object is reused."""
    return a.x == b.x and a.y == b.y


def _as_coordinates(values) -> Tuple[Coordinate, ...]:
    if isinstance(values, np.ndarray):
        if values.size == 0:
            return ()
        if values.ndim != 2 or values.shape[1] != 2:
            raise InvalidShapeError(f"coordinates must be Nx2 array, got shape {values.shape}")
        return tuple(Coordinate(row[0], row[1]) for row in values)
    return tuple(as_coordinate(v) for v in values)


@dataclass(frozen=True)
class Point:
    x: Any
    y: Any

    @property
    def coord(self) -> Coordinate:
        return Coordinate(self.x, self.y)

    @classmethod
    def from_coordinate(cls, coord) -> Point:
        c = as_coordinate(coord)
        return cls(c.x, c.y)


@dataclass(frozen=True)
class Line:
    """A single segment from `start` to `end`; may be degenerate."""

    start: Coordinate
    end: Coordinate

    def __post_init__(self):
        object.__setattr__(self, 'start', as_coordinate(self.start))
        object.__setattr__(self, 'end', as_coordinate(self.end))

    def dx(self):
        return self.end.x - self.start.x

    def dy(self):
        return self.end.y - self.start.y

    def determinant(self):
        """2x2 determinant of start and end (twice the signed area swept from the origin)."""
        return self.start.x * self.end.y - self.start.y * self.end.x

    def start_point(self) -> Point:
        return Point(self.start.x, self.start.y)

    def end_point(self) -> Point:
        return Point(self.end.x, self.end.y)


@dataclass(frozen=True)
class LineString:
    """Ordered coordinate sequence. Accepts any iterable of pairs or an Nx2 array."""

    coords: Tuple[Coordinate, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'coords', _as_coordinates(self.coords))

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.coords)

    def lines(self) -> Iterator[Line]:
        """Yield each consecutive segment."""
        for start, end in zip(self.coords[:-1], self.coords[1:]):
            yield Line(start, end)

    def is_closed(self) -> bool:
        return len(self.coords) > 0 and self.coords[0] == self.coords[-1]


def _as_linestring(value) -> LineString:
    if isinstance(value, LineString):
        return value
    return LineString(value)


@dataclass(frozen=True)
class Polygon:
    """Exterior ring plus zero or more interior rings (holes)."""

    exterior: LineString = LineString()
    interiors: Tuple[LineString, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'exterior', _as_linestring(self.exterior))
        object.__setattr__(self, 'interiors', tuple(_as_linestring(r) for r in self.interiors))


@dataclass(frozen=True)
class MultiPoint:
    points: Tuple[Point, ...] = ()

    def __post_init__(self):
        pts = tuple(p if isinstance(p, Point) else Point.from_coordinate(p) for p in self.points)
        object.__setattr__(self, 'points', pts)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class MultiLineString:
    line_strings: Tuple[LineString, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'line_strings', tuple(_as_linestring(ls) for ls in self.line_strings))

    def __iter__(self) -> Iterator[LineString]:
        return iter(self.line_strings)

    def __len__(self) -> int:
        return len(self.line_strings)


@dataclass(frozen=True)
class MultiPolygon:
    """Independent polygons; they may overlap."""

    polygons: Tuple[Polygon, ...] = ()

    def __post_init__(self):
        for p in self.polygons:
            if not isinstance(p, Polygon):
                raise InvalidShapeError(f"MultiPolygon members must be Polygon, got {type(p).__name__}")
        object.__setattr__(self, 'polygons', tuple(self.polygons))

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self.polygons)

    def __len__(self) -> int:
        return len(self.polygons)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box. `min` <= `max` is assumed, not enforced."""

    min: Coordinate
    max: Coordinate

    def __post_init__(self):
        object.__setattr__(self, 'min', as_coordinate(self.min))
        object.__setattr__(self, 'max', as_coordinate(self.max))

    def width(self):
        return self.max.x - self.min.x

    def height(self):
        return self.max.y - self.min.y


@dataclass(frozen=True)
class Triangle:
    v0: Coordinate
    v1: Coordinate
    v2: Coordinate

    def __post_init__(self):
        for name in ('v0', 'v1', 'v2'):
            object.__setattr__(self, name, as_coordinate(getattr(self, name)))

    @classmethod
    def from_vertices(cls, vertices: Iterable) -> Triangle:
        vs = _as_coordinates(vertices if isinstance(vertices, np.ndarray) else list(vertices))
        if len(vs) != 3:
            raise InvalidShapeError(f"Triangle needs exactly 3 vertices, got {len(vs)}")
        return cls(*vs)

    def to_array(self) -> Tuple[Coordinate, Coordinate, Coordinate]:
        return (self.v0, self.v1, self.v2)

    def to_lines(self) -> Tuple[Line, Line, Line]:
        return (Line(self.v0, self.v1), Line(self.v1, self.v2), Line(self.v2, self.v0))


@dataclass(frozen=True)
class GeometryCollection:
    """Heterogeneous, possibly nested, sequence of shapes."""

    geometries: Tuple[Any, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'geometries', tuple(self.geometries))

    def __iter__(self) -> Iterator[Any]:
        return iter(self.geometries)

    def __len__(self) -> int:
        return len(self.geometries)
