import dataclasses

import numpy as np
import pytest

from geomeasure.errors import InvalidShapeError
from geomeasure.shapes import Coordinate, Line, LineString, Polygon, Rect, Triangle


def test_linestring_from_array():
    arr = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0]])
    ls = LineString(arr)
    assert len(ls) == 3
    assert ls.coords[2] == Coordinate(1.0, 1.0)


def test_linestring_rejects_bad_array_shape():
    with pytest.raises(InvalidShapeError):
        LineString(np.zeros((3, 3)))
    # still a ValueError for generic handlers
    with pytest.raises(ValueError):
        LineString([(0.0, 0.0, 0.0)])


def test_linestring_lines_are_consecutive_pairs():
    ls = LineString([(0, 0), (1, 0), (1, 1)])
    lines = list(ls.lines())
    assert lines == [Line((0, 0), (1, 0)), Line((1, 0), (1, 1))]
    assert list(LineString([(0, 0)]).lines()) == []


def test_linestring_is_closed():
    assert LineString([(0, 0), (1, 0), (0, 1), (0, 0)]).is_closed()
    assert not LineString([(0, 0), (1, 0)]).is_closed()
    assert not LineString().is_closed()


def test_polygon_rings_are_not_closed_automatically():
    poly = Polygon([(0, 0), (1, 0), (1, 1)])
    assert len(poly.exterior) == 3
    assert poly.interiors == ()


def test_line_accessors():
    line = Line((1.0, 2.0), (4.0, 6.0))
    assert line.dx() == 3.0
    assert line.dy() == 4.0
    assert line.determinant() == 1.0 * 6.0 - 2.0 * 4.0


def test_rect_width_height():
    rect = Rect((10, 30), (20, 45))
    assert rect.width() == 10
    assert rect.height() == 15


def test_triangle_from_vertices():
    tri = Triangle.from_vertices([(0, 0), (1, 0), (0, 1)])
    assert tri.to_array() == (Coordinate(0, 0), Coordinate(1, 0), Coordinate(0, 1))
    with pytest.raises(InvalidShapeError):
        Triangle.from_vertices([(0, 0), (1, 0)])


def test_shapes_are_frozen():
    ls = LineString([(0, 0), (1, 1)])
    with pytest.raises(dataclasses.FrozenInstanceError):
        ls.coords = ()
