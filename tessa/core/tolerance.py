"""Fuzzy comparisons and the canonical point order used by sweep algorithms."""
from __future__ import annotations

import numpy as np

from .constants import EPS_FUZZY
from .vectors import as_point, as_int_point, as_points

__all__ = [
    'fuzzy_eq_scalar', 'fuzzy_eq_point', 'is_below', 'is_below_int',
    'below_key', 'sweep_order',
]


def fuzzy_eq_scalar(a, b) -> bool:
    return bool(abs(np.float32(a) - np.float32(b)) <= EPS_FUZZY)


def fuzzy_eq_point(a, b) -> bool:
    a = as_point(a); b = as_point(b)
    return fuzzy_eq_scalar(a[0], b[0]) and fuzzy_eq_scalar(a[1], b[1])


def is_below(a, b) -> bool:
    """Return True if point a comes after point b in sweep order.

    Points are ordered by increasing y (y grows downward), ties broken by
    increasing x. The relation is a strict weak order: irreflexive and
    transitive, with equal points unordered.
    """
    a = as_point(a); b = as_point(b)
    return bool(a[1] > b[1] or (a[1] == b[1] and a[0] > b[0]))


def is_below_int(a, b) -> bool:
    """Integer-coordinate version of is_below(), compared exactly."""
    a = as_int_point(a); b = as_int_point(b)
    return bool(a[1] > b[1] or (a[1] == b[1] and a[0] > b[0]))


def below_key(p):
    """Sort key placing points in sweep order (for ``sorted``/``min``)."""
    return (p[1], p[0])


def sweep_order(points) -> np.ndarray:
    """Stable index permutation visiting ``points`` (N, 2) in sweep order.

    ``points[order[j]]`` is below ``points[order[i]]`` for every i < j unless
    the two points are equal.
    """
    pts = as_points(points, dtype=None)
    if pts.shape[0] == 0:
        return np.empty((0,), dtype=np.intp)
    # lexsort uses the last key as primary
    return np.lexsort((pts[:, 0], pts[:, 1]))
