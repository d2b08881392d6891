import math

import numpy as np
import pytest

from graphpick.geometry import Polygon, Rectangle, as_point, segment_distance_sq, squared_distance


def test_squared_distance():
    assert squared_distance(0.0, 0.0, 3.0, 4.0) == 25.0
    assert squared_distance(1.0, 1.0, 1.0, 1.0) == 0.0


@pytest.mark.parametrize(
    "query, expected",
    [
        ((5.0, 3.0), 9.0),
        ((-5.0, 0.0), 25.0),
        ((13.0, 4.0), 25.0),
        ((0.0, 0.0), 0.0),
        ((7.5, -2.0), 4.0),
    ],
)
def test_segment_distance_sq(query, expected):
    qx, qy = query
    assert segment_distance_sq(qx, qy, 0.0, 0.0, 10.0, 0.0) == pytest.approx(expected)


def test_segment_distance_is_symmetric_in_endpoints():
    forward = segment_distance_sq(2.0, 7.0, -1.0, 3.0, 6.0, 9.0)
    backward = segment_distance_sq(2.0, 7.0, 6.0, 9.0, -1.0, 3.0)
    assert forward == pytest.approx(backward)


def test_segment_distance_degenerate_segment():
    assert segment_distance_sq(0.0, 0.0, 3.0, 3.0, 3.0, 3.0) is None


def test_as_point_accepts_arrays():
    point = as_point(np.array([1, 2]))
    assert point == (1.0, 2.0)
    assert all(type(c) is float for c in point)
    with pytest.raises(ValueError):
        as_point((1.0, 2.0, 3.0))


def test_rectangle_is_half_open():
    rect = Rectangle(0.0, 0.0, 6.0, 6.0)
    assert rect.contains(0.0, 0.0)
    assert rect.contains(5.999, 5.999)
    assert not rect.contains(6.0, 3.0)
    assert not rect.contains(3.0, 6.0)
    assert not rect.contains(-0.001, 3.0)


def test_rectangle_from_corners_normalises():
    rect = Rectangle.from_corners(6.0, 8.0, 2.0, 1.0)
    assert rect == Rectangle(2.0, 1.0, 4.0, 7.0)
    assert rect.max_x == 6.0
    assert rect.max_y == 8.0


def test_empty_rectangle_contains_nothing():
    assert Rectangle(0.0, 0.0, 0.0, 5.0).is_empty
    assert not Rectangle(0.0, 0.0, 0.0, 5.0).contains(0.0, 1.0)
    assert not Rectangle(0.0, 0.0, -2.0, 5.0).contains(-1.0, 1.0)


def test_polygon_square():
    square = Polygon([(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0)])
    assert square.contains(2.0, 2.0)
    assert not square.contains(5.0, 2.0)
    assert not square.contains(2.0, -1.0)


def test_polygon_concave_notch():
    # U shape opening upward
    shape = Polygon(
        [(0.0, 0.0), (6.0, 0.0), (6.0, 6.0), (4.0, 6.0), (4.0, 2.0), (2.0, 2.0), (2.0, 6.0), (0.0, 6.0)]
    )
    assert shape.contains(1.0, 5.0)
    assert shape.contains(5.0, 5.0)
    assert shape.contains(3.0, 1.0)
    assert not shape.contains(3.0, 4.0)


def test_polygon_self_intersecting_uses_even_odd():
    # pentagram: the central pentagon is crossed twice and lies outside
    outer = [
        (math.cos(math.pi / 2 + k * 4 * math.pi / 5), math.sin(math.pi / 2 + k * 4 * math.pi / 5))
        for k in range(5)
    ]
    star = Polygon(outer)
    assert not star.contains(0.0, 0.0)
    assert star.contains(0.0, 0.8)


def test_polygon_contains_points_vectorised():
    square = Polygon([(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0)])
    result = square.contains_points([(1.0, 1.0), (5.0, 5.0), (3.0, 0.5)])
    assert result.dtype == bool
    assert result.tolist() == [True, False, True]


@pytest.mark.parametrize(
    "vertices",
    [
        [(0.0, 0.0), (1.0, 1.0)],
        [0.0, 1.0, 2.0],
        [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)],
    ],
)
def test_polygon_rejects_bad_vertices(vertices):
    with pytest.raises(ValueError):
        Polygon(vertices)
