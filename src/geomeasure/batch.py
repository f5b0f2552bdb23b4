"""
batch.py

numpy front end for measuring many geometries at once.

Each entry is computed with the scalar function, in input order, so results
match single calls exactly. The measurement functions are pure, so callers
may also split inputs across threads or processes without coordination.

Public functions:
- `areas(shapes)` -> (N,) float array
- `distances_to_linestring(points, linestring)` -> (N,) float array
"""
import logging
from typing import Iterable

import numpy as np

from geomeasure.area import area
from geomeasure.distance import point_to_linestring_distance
from geomeasure.errors import InvalidShapeError
from geomeasure.shapes import LineString

logger = logging.getLogger(__name__)


def areas(shapes: Iterable) -> np.ndarray:
    """Signed area of each shape as a float array."""
    out = np.array([float(area(s)) for s in shapes], dtype=float)
    logger.debug('computed %d areas', out.size)
    return out


def distances_to_linestring(points, linestring: LineString) -> np.ndarray:
    """Distance from each point to `linestring`.

    Parameters:
    - points: Nx2 array-like of (x, y) pairs, or an iterable of Points
    - linestring: target LineString (or anything LineString accepts)

    Returns: (N,) float array.
    """
    if not isinstance(linestring, LineString):
        linestring = LineString(linestring)
    if isinstance(points, np.ndarray):
        if points.size == 0:
            return np.zeros(0, dtype=float)
        if points.ndim != 2 or points.shape[1] != 2:
            raise InvalidShapeError(f"points must be Nx2 array, got shape {points.shape}")
    out = np.array(
        [float(point_to_linestring_distance(p, linestring)) for p in points],
        dtype=float,
    )
    logger.debug('computed %d distances against %d-vertex linestring', out.size, len(linestring))
    return out
