from __future__ import annotations

import math

import numpy as np


class InvalidInputError(ValueError):
    """Raised when points or radius violate the input contract."""


def distance_squared(ax, ay, bx, by):
    """Squared Euclidean distance; elementwise when given numpy arrays."""
    dx = ax - bx
    dy = ay - by
    return dx * dx + dy * dy


def balls_intersect(ax, ay, r0, bx, by, r1):
    """True iff the balls (a, r0) and (b, r1) intersect.

    The comparison is closed: tangent balls count as intersecting, so two
    points at distance exactly r0 + r1 are neighbors.
    """
    reach = r0 + r1
    return distance_squared(ax, ay, bx, by) <= reach * reach


def as_point_array(points) -> np.ndarray:
    """Return the points as a float (n, 2) array, rejecting bad input early."""
    try:
        pts = np.asarray(points, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"points must be (x, y) pairs of reals: {exc}") from exc

    if pts.ndim == 1 and pts.size == 0:
        return np.zeros((0, 2), dtype=float)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise InvalidInputError(f"points must have shape (n, 2), got {pts.shape}")

    bad = ~np.isfinite(pts).all(axis=1)
    if bad.any():
        first = int(np.flatnonzero(bad)[0])
        raise InvalidInputError(f"point {first} has non-finite coordinates: {pts[first].tolist()}")

    return pts


def check_radius(radius) -> float:
    try:
        r = float(radius)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"radius must be a real number, got {radius!r}") from exc
    if not math.isfinite(r) or r < 0.0:
        raise InvalidInputError(f"radius must be finite and non-negative, got {radius!r}")
    return r


def linear_map(value, x0: float, x1: float, y0: float, y1: float):
    """Map a value in [x0, x1] to the interval [y0, y1]."""
    return (value - x0) / (x1 - x0) * (y1 - y0) + y0
