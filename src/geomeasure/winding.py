"""
winding.py

Ring orientation helpers built on the shoelace sum.

Public functions:
- `twice_signed_ring_area(ring)` -> sum of segment determinants
- `winding_order(ring)` -> WindingOrder or None
"""
from enum import Enum
from typing import Optional

from geomeasure.numeric import gt, lt
from geomeasure.shapes import LineString


class WindingOrder(Enum):
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"


def twice_signed_ring_area(ring: LineString):
    """Return twice the signed area enclosed by `ring`.

    Sums x_i * y_(i+1) - x_(i+1) * y_i over consecutive coordinates in ring
    order. Counter-clockwise rings are positive. The ring is assumed closed;
    an open ring is summed as given. Fewer than two coordinates give 0.
    """
    return sum(line.determinant() for line in ring.lines())


def winding_order(ring: LineString) -> Optional[WindingOrder]:
    """Orientation of `ring`, or None when its signed area is zero (or NaN)."""
    shoelace = twice_signed_ring_area(ring)
    if gt(shoelace, 0):
        return WindingOrder.COUNTER_CLOCKWISE
    if lt(shoelace, 0):
        return WindingOrder.CLOCKWISE
    return None
