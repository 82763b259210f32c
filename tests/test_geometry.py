# tests/test_geometry.py
import math

import numpy as np
import pytest

from vietoris_rips.geometry import (
    InvalidInputError,
    as_point_array,
    balls_intersect,
    check_radius,
    distance_squared,
    linear_map,
)


def test_distance_squared_scalar():
    assert distance_squared(0.0, 0.0, 3.0, 4.0) == 25.0
    assert distance_squared(1.5, -2.0, 1.5, -2.0) == 0.0


def test_distance_squared_broadcasts_over_arrays():
    bx = np.array([1.0, 0.0, 3.0])
    by = np.array([0.0, 2.0, 4.0])
    out = distance_squared(0.0, 0.0, bx, by)
    assert np.array_equal(out, np.array([1.0, 4.0, 25.0]))


def test_tangent_balls_intersect():
    # distance 2 == r0 + r1 exactly
    assert balls_intersect(0.0, 0.0, 1.0, 2.0, 0.0, 1.0)
    assert not balls_intersect(0.0, 0.0, 1.0, 2.0 + 1e-9, 0.0, 1.0)


def test_unequal_radii_and_zero_radius():
    assert balls_intersect(0.0, 0.0, 0.5, 2.0, 0.0, 1.5)
    assert not balls_intersect(0.0, 0.0, 0.5, 2.0, 0.0, 1.4)
    # coincident centers meet even with zero radius
    assert balls_intersect(1.0, 1.0, 0.0, 1.0, 1.0, 0.0)
    assert not balls_intersect(1.0, 1.0, 0.0, 1.0, 1.5, 0.0)


def test_balls_intersect_elementwise():
    bx = np.array([1.0, 2.0, 3.0])
    by = np.zeros(3)
    hits = balls_intersect(0.0, 0.0, 1.0, bx, by, 1.0)
    assert hits.tolist() == [True, True, False]


def test_as_point_array_accepts_pairs_and_empty():
    pts = as_point_array([(0, 0), (1, 2)])
    assert pts.shape == (2, 2)
    assert pts.dtype == float
    assert as_point_array([]).shape == (0, 2)
    assert as_point_array(np.zeros((0, 2))).shape == (0, 2)


@pytest.mark.parametrize(
    "points",
    [
        [(0.0, math.nan)],
        [(0.0, 0.0), (math.inf, 1.0)],
        [(0.0, 0.0, 0.0)],
        [1.0, 2.0],
        [(0.0, 0.0), (1.0,)],
        [("a", 0.0)],
        [(None, 0.0)],
    ],
)
def test_as_point_array_rejects_bad_points(points):
    with pytest.raises(InvalidInputError):
        as_point_array(points)


def test_check_radius():
    assert check_radius(0) == 0.0
    assert check_radius(2.5) == 2.5
    for bad in (-1e-12, -3.0, math.nan, math.inf, "wide", None):
        with pytest.raises(InvalidInputError):
            check_radius(bad)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        check_radius(-1.0)


def test_linear_map():
    assert linear_map(0.0, 0.0, 1.0, 10.0, 100.0) == 10.0
    assert linear_map(1.0, 0.0, 1.0, 10.0, 100.0) == 100.0
    assert linear_map(0.5, 0.0, 1.0, 10.0, 100.0) == pytest.approx(55.0)
    assert linear_map(0.0, -1.0, 1.0, 2.0, 4.0) == pytest.approx(3.0)
