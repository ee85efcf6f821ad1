"""Numeric policies for the segment intersection primitives.

The floating-point and integer segment intersections share one algorithm;
everything that legitimately differs between them is recorded here as data.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .constants import SEGMENT_T_MIN, SEGMENT_T_MAX


@dataclass(frozen=True)
class IntersectionPolicy:
    """Parameters of the shared segment intersection algorithm.

    Attributes
    ----------
    name : str
        Label shown in the repr of the policy.
    dtype : numpy dtype
        Coordinate type of the returned point. Float results are truncated
        toward zero for integer dtypes, saturating at the dtype bounds.
    t_min, t_max : float
        Open interval the segment parameters ``t`` and ``u`` must fall in for
        a crossing to be accepted.
    fuzzy_degenerate : bool
        Test the second segment for zero length with fuzzy equality (True)
        or exact equality (False).
    reject_shared_vertices : bool
        Return no intersection when a1==a2, a1==b1, b1==a2 or b1==b2.
    """
    name: str
    dtype: type
    t_min: float
    t_max: float
    fuzzy_degenerate: bool
    reject_shared_vertices: bool


FLOAT_POLICY = IntersectionPolicy(
    name='float',
    dtype=np.float32,
    t_min=SEGMENT_T_MIN,
    t_max=SEGMENT_T_MAX,
    fuzzy_degenerate=True,
    reject_shared_vertices=False,
)

INT_POLICY = IntersectionPolicy(
    name='int',
    dtype=np.int32,
    t_min=np.float32(0.0),
    t_max=np.float32(1.0),
    fuzzy_degenerate=False,
    reject_shared_vertices=True,
)

__all__ = ['IntersectionPolicy', 'FLOAT_POLICY', 'INT_POLICY']
