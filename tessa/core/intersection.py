"""Line, segment and scanline intersection primitives.

Segment intersection reports crossings strictly interior to both segments:
shared vertices and endpoint touches are not intersections. Sweep algorithms
rely on that to tell "edges cross" apart from "edges meet at a vertex".

The floating-point and integer segment variants share one implementation,
parameterized by an IntersectionPolicy (see ``config.py``) that carries their
documented differences: acceptance band, zero-length test and shared-vertex
rejection.
"""
from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from .config import IntersectionPolicy, FLOAT_POLICY, INT_POLICY
from .constants import EPS_FUZZY, EPS_PARALLEL
from .logging_utils import get_logger
from .tolerance import fuzzy_eq_scalar
from .vectors import as_point, as_int_point, as_points, cross, dot, square_length

__all__ = [
    'line_intersection', 'segment_intersection', 'segment_intersection_int',
    'line_horizontal_intersection', 'line_horizontal_intersection_int',
    'segment_intersections', 'line_horizontal_intersections',
]

logger = get_logger('tessa.intersection')

_INT32_HALF = 1 << 31


def line_intersection(a1, a2, b1, b2) -> Optional[np.ndarray]:
    """Intersection of the infinite lines (a1, a2) and (b1, b2).

    Returns None when the lines are (nearly) parallel. The result is not
    restricted to the segments between the given points.
    """
    a1 = as_point(a1); a2 = as_point(a2); b1 = as_point(b1); b2 = as_point(b2)
    det = (a1[0] - a2[0]) * (b1[1] - b2[1]) - (a1[1] - a2[1]) * (b1[0] - b2[0])
    if abs(det) <= EPS_PARALLEL:
        return None
    inv_det = np.float32(1.0) / det
    a = a1[0] * a2[1] - a1[1] * a2[0]
    b = b1[0] * b2[1] - b1[1] * b2[0]
    return np.array([
        (a * (b1[0] - b2[0]) - b * (a1[0] - a2[0])) * inv_det,
        (a * (b1[1] - b2[1]) - b * (a1[1] - a2[1])) * inv_det,
    ], dtype=np.float32)


def _is_zero_length(v, policy: IntersectionPolicy) -> bool:
    if policy.fuzzy_degenerate:
        return fuzzy_eq_scalar(v[0], 0.0) and fuzzy_eq_scalar(v[1], 0.0)
    return not v.any()


def _collinear_overlap_point(a1, b1, a2, b2, v1, v2):
    """First endpoint lying strictly inside the other segment, or None.

    Checked in order: a2 and b2 against [a1, b1], then a1 and b1 against
    [a2, b2]. Only one point of the overlap is ever reported.
    """
    v1_sqr_len = square_length(v1)
    for p, origin in ((a2, a1), (b2, a1)):
        d = dot(v1, p - origin)
        if d > 0 and d < v1_sqr_len:
            return p
    v2_sqr_len = square_length(v2)
    for p, origin in ((a1, a2), (b1, a2)):
        d = dot(v2, p - origin)
        if d > 0 and d < v2_sqr_len:
            return p
    return None


def _to_policy_dtype(p, policy: IntersectionPolicy) -> np.ndarray:
    """Convert a float32 point to the policy dtype, truncating toward zero.

    Integer results saturate at the dtype bounds. Coordinates near INT32_MAX
    round up to 2**31 in float32, which a bare cast would wrap to INT32_MIN.
    """
    if not np.issubdtype(policy.dtype, np.integer):
        return p.astype(policy.dtype)
    info = np.iinfo(policy.dtype)
    # float64 holds both int32 bounds exactly
    return np.clip(p.astype(np.float64), info.min, info.max).astype(policy.dtype)


def _segment_intersection(a1, b1, a2, b2, policy: IntersectionPolicy) -> Optional[np.ndarray]:
    if policy.reject_shared_vertices and (
            np.array_equal(a1, a2) or np.array_equal(a1, b1)
            or np.array_equal(b1, a2) or np.array_equal(b1, b2)):
        return None
    a1 = a1.astype(np.float32); b1 = b1.astype(np.float32)
    a2 = a2.astype(np.float32); b2 = b2.astype(np.float32)

    v1 = b1 - a1
    v2 = b2 - a2
    if _is_zero_length(v2, policy):
        return None

    v1_cross_v2 = cross(v1, v2)
    a2_a1 = a2 - a1
    a2_a1_cross_v1 = cross(a2_a1, v1)

    if v1_cross_v2 == 0:
        if a2_a1_cross_v1 != 0:
            # parallel, not collinear
            return None
        p = _collinear_overlap_point(a1, b1, a2, b2, v1, v2)
        return None if p is None else _to_policy_dtype(p, policy)

    t = cross(a2_a1, v2) / v1_cross_v2
    u = a2_a1_cross_v1 / v1_cross_v2
    if policy.t_min < t < policy.t_max and policy.t_min < u < policy.t_max:
        return _to_policy_dtype(a1 + v1 * t, policy)
    return None


def segment_intersection(a1, b1, a2, b2) -> Optional[np.ndarray]:
    """Intersection point of segments [a1, b1] and [a2, b2], or None.

    - A (fuzzy) zero-length second segment never intersects.
    - Parallel segments never intersect. Collinear segments return one
      endpoint lying strictly inside the other segment, if any.
    - Crossing segments intersect only when the crossing parameter on both
      segments lies in (SEGMENT_T_MIN, SEGMENT_T_MAX), which excludes
      endpoint touches and near-endpoint touches.
    """
    return _segment_intersection(as_point(a1), as_point(b1), as_point(a2), as_point(b2), FLOAT_POLICY)


def segment_intersection_int(a1, b1, a2, b2) -> Optional[np.ndarray]:
    """Integer-coordinate segment intersection.

    Same algorithm as segment_intersection(), computed in float32 and
    truncated toward zero, with these differences:

    - segments sharing a vertex (a1==a2, a1==b1, b1==a2, b1==b2) never
      intersect;
    - the zero-length test on the second segment is exact;
    - crossing parameters are accepted in the open interval (0, 1).
    """
    return _segment_intersection(as_int_point(a1), as_int_point(b1),
                                 as_int_point(a2), as_int_point(b2), INT_POLICY)


def line_horizontal_intersection(a, b, y) -> np.float32:
    """x coordinate where the line through a and b crosses the horizontal line at y.

    For a horizontal segment the right-most endpoint's x is returned whatever
    y is. y-monotone decomposition depends on this tie-break.
    """
    a = as_point(a); b = as_point(b)
    vx = b[0] - a[0]
    vy = b[1] - a[1]
    if vy == 0:
        return max(a[0], b[0])
    return a[0] + (np.float32(y) - a[1]) * vx / vy


def _trunc_div(n: int, d: int) -> int:
    q = n // d
    # floor division rounds negative inexact quotients down; move toward zero
    if q < 0 and q * d != n:
        q += 1
    return q


def line_horizontal_intersection_int(a, b, y) -> int:
    """Integer version of line_horizontal_intersection().

    The product is computed with unbounded Python integers, the division
    truncates toward zero and the result is narrowed back to int32 with
    two's complement wrap-around.
    """
    a = as_int_point(a); b = as_int_point(b)
    ax, ay = int(a[0]), int(a[1])
    vx = int(b[0]) - ax
    vy = int(b[1]) - ay
    if vy == 0:
        return max(ax, int(b[0]))
    wide = ax + _trunc_div((int(y) - ay) * vx, vy)
    return (wide + _INT32_HALF) % (2 * _INT32_HALF) - _INT32_HALF


def _check_same_shape(*arrays) -> None:
    shapes = {arr.shape for arr in arrays}
    if len(shapes) != 1:
        raise ValueError(f"segment endpoint arrays must share one shape, got {sorted(shapes)}")


def segment_intersections(a1s, b1s, a2s, b2s) -> Tuple[np.ndarray, np.ndarray]:
    """Row-wise segment_intersection() over (M, 2) endpoint arrays.

    Returns
    -------
    mask : (M,) bool array
        True where segment [a1s[i], b1s[i]] intersects [a2s[i], b2s[i]].
    points : (M, 2) float32 array
        Intersection points; NaN rows where mask is False.
    """
    a1 = as_points(a1s); b1 = as_points(b1s); a2 = as_points(a2s); b2 = as_points(b2s)
    _check_same_shape(a1, b1, a2, b2)
    m = a1.shape[0]
    points = np.full((m, 2), np.nan, dtype=np.float32)
    if m == 0:
        return np.zeros((0,), dtype=bool), points

    v1 = b1 - a1
    v2 = b2 - a2
    degenerate = (np.abs(v2[:, 0]) <= EPS_FUZZY) & (np.abs(v2[:, 1]) <= EPS_FUZZY)

    v1_cross_v2 = cross(v1, v2)
    a2_a1 = a2 - a1
    a2_a1_cross_v1 = cross(a2_a1, v1)
    parallel = v1_cross_v2 == 0
    collinear = parallel & (a2_a1_cross_v1 == 0) & ~degenerate

    # parallel rows divide by zero; they are masked out below
    with np.errstate(divide='ignore', invalid='ignore'):
        t = cross(a2_a1, v2) / v1_cross_v2
        u = a2_a1_cross_v1 / v1_cross_v2
    crossing = (~parallel & ~degenerate
                & (t > FLOAT_POLICY.t_min) & (t < FLOAT_POLICY.t_max)
                & (u > FLOAT_POLICY.t_min) & (u < FLOAT_POLICY.t_max))
    points[crossing] = a1[crossing] + v1[crossing] * t[crossing, None]

    v1_sqr_len = square_length(v1)
    v2_sqr_len = square_length(v2)
    resolved = np.zeros((m,), dtype=bool)
    for p, origin, v, sqr_len in ((a2, a1, v1, v1_sqr_len), (b2, a1, v1, v1_sqr_len),
                                  (a1, a2, v2, v2_sqr_len), (b1, a2, v2, v2_sqr_len)):
        d = dot(v, p - origin)
        take = collinear & ~resolved & (d > 0) & (d < sqr_len)
        points[take] = p[take]
        resolved |= take

    mask = crossing | resolved
    logger.debug("segment_intersections: pairs=%d crossing=%d collinear_overlap=%d degenerate=%d",
                 m, int(crossing.sum()), int(resolved.sum()), int(degenerate.sum()))
    return mask, points


def line_horizontal_intersections(a_pts, b_pts, y) -> np.ndarray:
    """Row-wise line_horizontal_intersection() of (M, 2) edges against one scanline."""
    a = as_points(a_pts); b = as_points(b_pts)
    _check_same_shape(a, b)
    if a.shape[0] == 0:
        return np.empty((0,), dtype=np.float32)
    vx = b[:, 0] - a[:, 0]
    vy = b[:, 1] - a[:, 1]
    horizontal = vy == 0
    with np.errstate(divide='ignore', invalid='ignore'):
        xs = a[:, 0] + (np.float32(y) - a[:, 1]) * vx / vy
    xs = np.where(horizontal, np.maximum(a[:, 0], b[:, 0]), xs)
    logger.debug("line_horizontal_intersections: edges=%d horizontal=%d", a.shape[0], int(horizontal.sum()))
    return xs.astype(np.float32)
