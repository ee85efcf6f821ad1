"""Angle and vector utilities.

All results are float32. Zero-length input vectors are a caller error and are
not guarded: numpy returns NaN/inf and emits a RuntimeWarning.
"""
from __future__ import annotations

import numpy as np

from .constants import TWO_PI
from .vectors import as_point, cross, dot, length

__all__ = [
    'directed_angle', 'directed_angle_about_center', 'angle_between', 'tangent',
    'ellipse_center_to_point', 'ellipse_point_from_angle',
]


def directed_angle(a, b) -> np.float32:
    """Angle from vector a to vector b, in [0, 2*pi).

    The angle is oriented clockwise assuming y points downwards, e.g.::

        directed_angle([0, 1], [1, 0])   == 3/2 pi
        directed_angle([0, -1], [1, 0])  == 1/2 pi
    """
    a = as_point(a); b = as_point(b)
    angle = np.arctan2(b[1], b[0]) - np.arctan2(a[1], a[0])
    if angle < 0:
        angle = angle + TWO_PI
        # a tiny negative difference rounds up to exactly 2*pi in float32
        if angle >= TWO_PI:
            angle = np.float32(0.0)
    return angle


def directed_angle_about_center(center, a, b) -> np.float32:
    """directed_angle() of points a and b seen from center."""
    center = as_point(center)
    return directed_angle(as_point(a) - center, as_point(b) - center)


def angle_between(u, v) -> np.float32:
    """Signed angle in [-pi, pi] from u to v; positive when v is counter-clockwise from u."""
    u = as_point(u); v = as_point(v)
    cos_angle = dot(u, v) / (length(u) * length(v))
    result = np.arccos(np.clip(cos_angle, np.float32(-1.0), np.float32(1.0)))
    if cross(u, v) < 0:
        result = -result
    return result


def tangent(v) -> np.ndarray:
    """Unit vector perpendicular to v (v rotated by 90 degrees)."""
    v = as_point(v)
    norm = length(v)
    return np.array([-v[1] / norm, v[0] / norm], dtype=np.float32)


def ellipse_center_to_point(center, ellipse_point, radii) -> np.ndarray:
    """Map a point of an axis-aligned ellipse to the unit circle.

    The returned vector is ``(cos(theta), sin(theta))`` for the ellipse
    parameter theta of ``ellipse_point``; see ellipse_point_from_angle().
    """
    return (as_point(ellipse_point) - as_point(center)) / as_point(radii)


def ellipse_point_from_angle(center, radii, angle) -> np.ndarray:
    angle = np.float32(angle)
    return as_point(center) + as_point(radii) * np.array([np.cos(angle), np.sin(angle)], dtype=np.float32)
