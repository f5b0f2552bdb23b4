from fractions import Fraction

from geomeasure.area import area, ring_area
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
from geomeasure.variant import to_variant


def test_area_empty_polygon():
    assert area(Polygon()) == 0.0


def test_area_one_point_polygon():
    assert area(Polygon([(1.0, 0.0)])) == 0.0


def test_area_polygon():
    poly = Polygon([(0.0, 0.0), (5.0, 0.0), (5.0, 6.0), (0.0, 6.0), (0.0, 0.0)])
    assert area(poly) == 30.0


def test_area_reversed_exterior_negates():
    rings = [
        [(0.0, 0.0), (5.0, 0.0), (5.0, 6.0), (0.0, 6.0), (0.0, 0.0)],
        [(1.0, 1.0), (4.0, 2.0), (3.5, 5.0), (0.5, 3.0), (1.0, 1.0)],
        [(-2.0, -1.0), (3.0, -4.0), (6.0, 2.5), (-2.0, -1.0)],
    ]
    for coords in rings:
        forward = area(Polygon(coords))
        backward = area(Polygon(list(reversed(coords))))
        assert forward != 0.0
        assert backward == -forward


def test_area_square(square_10):
    assert area(square_10) == 100.0


def test_area_polygon_with_holes(square_10_with_holes):
    assert area(square_10_with_holes) == 98.0


def test_area_multipolygon(square_10, unit_square_a, unit_square_b):
    mpoly = MultiPolygon([square_10, unit_square_a, unit_square_b])
    assert area(mpoly) == 102.0
    # no hidden state between calls
    assert area(mpoly) == 102.0


def test_area_empty_multipolygon():
    assert area(MultiPolygon()) == 0


def test_area_rect_float():
    rect = Rect((10.0, 30.0), (20.0, 40.0))
    assert area(rect) == 100.0


def test_area_rect_int_stays_int():
    rect = Rect((10, 30), (20, 40))
    result = area(rect)
    assert result == 100
    assert isinstance(result, int)


def test_area_rect_inverted_corners_is_negative():
    rect = Rect((20.0, 30.0), (10.0, 40.0))
    assert area(rect) == -100.0


def test_area_triangle_sign_follows_order():
    ccw = Triangle((0.0, 0.0), (1.0, 0.0), (0.0, 1.0))
    cw = Triangle((0.0, 0.0), (0.0, 1.0), (1.0, 0.0))
    assert area(ccw) == 0.5
    assert area(cw) == -0.5


def test_area_triangle_exact_fraction():
    tri = Triangle((Fraction(0), Fraction(0)), (Fraction(1), Fraction(0)), (Fraction(0), Fraction(1)))
    assert area(tri) == Fraction(1, 2)


def test_area_zero_for_non_areal_shapes():
    assert area(Point(1.0, 1.0)) == 0.0
    assert area(Line((0.0, 0.0), (1.0, 1.0))) == 0.0
    assert area(LineString([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 0.0)])) == 0.0
    assert area(MultiPoint([(0.0, 0.0), (1.0, 1.0)])) == 0.0
    assert area(MultiLineString([[(0.0, 0.0), (1.0, 1.0)]])) == 0.0


def test_area_point_zero_matches_coordinate_type():
    assert isinstance(area(Point(1.5, 2.0)), float)
    assert area(Point(Fraction(1), Fraction(2))) == Fraction(0)


def test_area_geometry_collection_mixed_and_nested(square_10, unit_square_a):
    collection = GeometryCollection([
        square_10,
        Rect((0.0, 0.0), (2.0, 3.0)),
        Triangle((0.0, 0.0), (1.0, 0.0), (0.0, 1.0)),
        Point(4.0, 4.0),
        GeometryCollection([unit_square_a, Line((0.0, 0.0), (3.0, 3.0))]),
    ])
    assert area(collection) == 107.5


def test_area_scalar_pair_is_owned_point():
    pair = (1.0, 1.0)
    assert area(pair) == 0.0
    assert area(pair) == 0.0
    assert to_variant(pair).owned


def test_ring_area_matches_polygon_without_holes(square_10):
    assert ring_area(square_10.exterior) == area(square_10)


def test_area_integer_polygon_and_triangle_are_float():
    poly = Polygon([(0, 0), (5, 0), (5, 6), (0, 6), (0, 0)])
    tri = Triangle((0, 0), (3, 0), (0, 3))
    assert isinstance(area(poly), float) and area(poly) == 30.0
    assert isinstance(area(tri), float) and area(tri) == 4.5
