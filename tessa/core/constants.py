"""Central numerical tolerances and small geometry constants.

This module centralizes the fixed thresholds used by the intersection and
comparison primitives so they are referenced by name rather than scattered as
literals. All values are float32, matching the coordinate type of the
floating-point primitives.
"""
from __future__ import annotations

import numpy as np

# Comparison tolerances
EPS_FUZZY = np.float32(1e-6)       # absolute tolerance of fuzzy scalar/point equality
EPS_PARALLEL = np.float32(1e-6)    # |det| below which two infinite lines are parallel

# Open parameter band accepted by the floating-point segment intersection.
# The integer variant accepts the plain open interval (0, 1) instead.
SEGMENT_T_MIN = np.float32(1e-5)
SEGMENT_T_MAX = np.float32(0.9999)

TWO_PI = np.float32(2.0 * np.pi)

__all__ = [
    'EPS_FUZZY',
    'EPS_PARALLEL',
    'SEGMENT_T_MIN',
    'SEGMENT_T_MAX',
    'TWO_PI',
]
