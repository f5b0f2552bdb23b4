import pytest

from geomeasure.shapes import LineString, Polygon


def square_ring(x0, y0, size):
    """Closed counter-clockwise square ring with lower-left corner (x0, y0)."""
    return LineString([
        (x0, y0),
        (x0 + size, y0),
        (x0 + size, y0 + size),
        (x0, y0 + size),
        (x0, y0),
    ])


@pytest.fixture
def square_10():
    return Polygon(square_ring(0.0, 0.0, 10.0))


@pytest.fixture
def unit_square_a():
    return Polygon(square_ring(1.0, 1.0, 1.0))


@pytest.fixture
def unit_square_b():
    return Polygon(square_ring(5.0, 5.0, 1.0))


@pytest.fixture
def square_10_with_holes():
    return Polygon(
        square_ring(0.0, 0.0, 10.0),
        [square_ring(1.0, 1.0, 1.0), square_ring(5.0, 5.0, 1.0)],
    )


@pytest.fixture
def staircase():
    """Open linestring with horizontal, vertical and diagonal segments."""
    return LineString([(0.0, 0.0), (4.0, 0.0), (4.0, 3.0), (7.0, 7.0)])
