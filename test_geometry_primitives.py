"""
Geometry Primitive Tests
========================

Point, Rect and the signed-area orientation test.

Usage:
    pytest test_geometry_primitives.py
"""

import math

import numpy as np
import pytest

from meridian_region import AREA_TOLERANCE, Point, Rect, area_sign, boundary_orientation


# ---------------------------------------------------------------------------
# Point
# ---------------------------------------------------------------------------

def test_point_subtraction_and_equality():
    assert Point(3, 4) - Point(1, 1) == Point(2, 3)
    assert Point(1, 2) == Point(1.0, 2.0)
    assert Point(1, 2) != Point(2, 1)


def test_point_is_immutable():
    pt = Point(1, 2)
    with pytest.raises(AttributeError):
        pt.x = 5


def test_point_coerce():
    assert Point.coerce((1, 2)) == Point(1, 2)
    assert Point.coerce([1.5, 2.5], int) == Point(1, 2)
    assert type(Point.coerce(np.array([3, 4]), float).x) is float

    original = Point(1, 2)
    assert Point.coerce(original) is original

    with pytest.raises(ValueError):
        Point.coerce((1, 2, 3))
    with pytest.raises(TypeError):
        Point.coerce(7)


# ---------------------------------------------------------------------------
# Rect
# ---------------------------------------------------------------------------

def test_empty_rect_contains_nothing():
    rect = Rect.empty()

    assert rect.is_empty
    assert rect.contains_point((0, 0)) is False
    assert rect.width == 0 and rect.height == 0
    assert rect.to_dict() == {"min_x": None, "min_y": None, "max_x": None, "max_y": None}


def test_rect_extend_returns_new_rect():
    empty = Rect.empty()
    rect = empty.extend((2, 3))

    assert empty.is_empty
    assert rect == Rect(2, 3, 2, 3)
    assert rect.contains_point((2, 3))


def test_rect_contains_point_is_inclusive():
    rect = Rect.from_points([(0, 0), (10, 5)])

    assert rect.contains_point((0, 0))
    assert rect.contains_point((10, 5))
    assert rect.contains_point((10, 2))
    assert not rect.contains_point((10.001, 2))
    assert not rect.contains_point((5, -1))


def test_rect_from_points_matches_fold():
    points = [(4, -1), (-3, 2), (0, 9), (1, 1)]
    folded = Rect.empty()
    for pt in reversed(points):
        folded = folded.extend(pt)

    assert Rect.from_points(points) == folded == Rect(-3, -1, 4, 9)


def test_rect_dimensions():
    rect = Rect.from_points([(0, 0), (4, 2)])

    assert rect.width == 4
    assert rect.height == 2
    assert rect.center == Point(2.0, 1.0)
    assert str(rect) == "[0, 0] - [4, 2]"

    with pytest.raises(ValueError):
        Rect.empty().center


def test_rect_intersects():
    rect = Rect(0, 0, 10, 10)

    assert rect.intersects(Rect(5, 5, 15, 15))
    assert rect.intersects(Rect(10, 10, 20, 20))  # touching corner
    assert not rect.intersects(Rect(11, 0, 20, 10))
    assert not rect.intersects(Rect.empty())


# ---------------------------------------------------------------------------
# Orientation
# ---------------------------------------------------------------------------

def test_area_sign_left_right_collinear():
    assert area_sign((0, 0), (1, 0), (0, 1)) == 1
    assert area_sign((0, 0), (1, 0), (0, -1)) == -1
    assert area_sign((0, 0), (1, 0), (2, 0)) == 0


def test_area_sign_tolerance_band():
    # Area 0.4 lies inside the default +/-0.5 band
    assert AREA_TOLERANCE == 0.5
    assert area_sign((0, 0), (1, 0), (0, 0.4)) == 0
    assert area_sign((0, 0), (1, 0), (0, -0.5)) == 0
    assert area_sign((0, 0), (1, 0), (0, 0.6)) == 1
    assert area_sign((0, 0), (1, 0), (0, 0.4), tolerance=0.1) == 1


def test_area_sign_large_int_coordinates():
    big = 2 ** 40
    assert area_sign(Point(0, 0), Point(big, 0), Point(0, big)) == 1
    assert area_sign(Point(0, 0), Point(big, big), Point(2 * big, 2 * big)) == 0


def test_boundary_orientation():
    ccw = [(0, 0), (10, 0), (10, 10), (0, 10)]

    assert boundary_orientation(ccw) == 1
    assert boundary_orientation(list(reversed(ccw))) == -1
    # Duplicated pivot vertex is skipped
    assert boundary_orientation([(0, 0), (0, 0), (10, 0), (10, 10), (0, 10)]) == 1
    assert boundary_orientation([(0, 0), (0, 0), (0, 0)]) == 0
    assert boundary_orientation([(0, 0), (1, 1)]) == 0


def test_boundary_orientation_small_scale_needs_tolerance():
    # Degree-scale ring: turn area at the pivot is far below 0.5
    ring = [(0.0, 0.0), (0.01, 0.0), (0.01, 0.01), (0.0, 0.01)]

    assert boundary_orientation(ring) == 0
    assert boundary_orientation(ring, tolerance=1e-9) == 1
    assert math.isclose(AREA_TOLERANCE, 0.5)
