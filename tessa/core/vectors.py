"""Point coercion and small vector algebra shared by the geometry primitives.

Floating points are ``(2,)`` float32 arrays and integer points ``(2,)`` int32
arrays. The algebra helpers index the last axis, so the same function serves a
single point and an ``(M, 2)`` batch with identical float32 arithmetic.
"""
from __future__ import annotations

import numpy as np

__all__ = [
    'vec2', 'int_vec2', 'as_point', 'as_int_point', 'as_points',
    'cross', 'dot', 'square_length', 'length',
]


def vec2(x, y) -> np.ndarray:
    return np.array([x, y], dtype=np.float32)


def int_vec2(x, y) -> np.ndarray:
    return np.array([x, y], dtype=np.int32)


def _coerce(p, dtype) -> np.ndarray:
    arr = np.asarray(p, dtype=dtype)
    if arr.shape != (2,):
        raise ValueError(f"point must have shape (2,), got shape {arr.shape}")
    return arr


def as_point(p) -> np.ndarray:
    """Coerce an array-like of two numbers to a float32 point."""
    return _coerce(p, np.float32)


def as_int_point(p) -> np.ndarray:
    """Coerce an array-like of two integers to an int32 point."""
    return _coerce(p, np.int32)


def as_points(pts, dtype=np.float32) -> np.ndarray:
    """Coerce an array-like of points to an (M, 2) array.

    ``dtype=None`` keeps the input dtype. An empty sequence yields an empty
    (0, 2) array.
    """
    arr = np.asarray(pts, dtype=dtype)
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"points must be (M, 2), got shape {arr.shape}")
    return arr


def cross(a, b):
    """2D cross product (z component), positive when b is counter-clockwise from a."""
    return a[..., 0] * b[..., 1] - a[..., 1] * b[..., 0]


def dot(a, b):
    return a[..., 0] * b[..., 0] + a[..., 1] * b[..., 1]


def square_length(v):
    return dot(v, v)


def length(v):
    return np.sqrt(square_length(v))
