"""Public package API for the tessa 2D geometry primitives.

This facade provides a stable, flat import surface on top of the internal
implementation package ``tessa.core``.

Example
-------
    from tessa import segment_intersection, is_below, directed_angle

The deeper modules (``tessa.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
import logging as _logging

try:
    __version__ = _pkg_version("tessa-geom")  # populated when installed
except _NotFound:  # pragma: no cover - source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_const = _imp('tessa.core.constants')
_conf = _imp('tessa.core.config')
_vec = _imp('tessa.core.vectors')
_tol = _imp('tessa.core.tolerance')
_ang = _imp('tessa.core.angles')
_isect = _imp('tessa.core.intersection')
_log = _imp('tessa.core.logging_utils')

# Tolerance and ordering
fuzzy_eq_scalar = _tol.fuzzy_eq_scalar
fuzzy_eq_point = _tol.fuzzy_eq_point
is_below = _tol.is_below
is_below_int = _tol.is_below_int
below_key = _tol.below_key
sweep_order = _tol.sweep_order

# Angles and vectors
directed_angle = _ang.directed_angle
directed_angle_about_center = _ang.directed_angle_about_center
angle_between = _ang.angle_between
tangent = _ang.tangent
ellipse_center_to_point = _ang.ellipse_center_to_point
ellipse_point_from_angle = _ang.ellipse_point_from_angle
vec2 = _vec.vec2
int_vec2 = _vec.int_vec2

# Intersections
line_intersection = _isect.line_intersection
segment_intersection = _isect.segment_intersection
segment_intersection_int = _isect.segment_intersection_int
line_horizontal_intersection = _isect.line_horizontal_intersection
line_horizontal_intersection_int = _isect.line_horizontal_intersection_int
segment_intersections = _isect.segment_intersections
line_horizontal_intersections = _isect.line_horizontal_intersections

# Policies and tolerances
IntersectionPolicy = _conf.IntersectionPolicy
FLOAT_POLICY = _conf.FLOAT_POLICY
INT_POLICY = _conf.INT_POLICY
EPS_FUZZY = _const.EPS_FUZZY
EPS_PARALLEL = _const.EPS_PARALLEL

# Logging
configure_logging = _log.configure_logging
get_logger = _log.get_logger

# Namespace submodules for exploratory users
constants = _const
config = _conf
vectors = _vec
tolerance = _tol
angles = _ang
intersection = _isect

__all__ = [
    '__version__',
    # tolerance and ordering
    'fuzzy_eq_scalar', 'fuzzy_eq_point', 'is_below', 'is_below_int', 'below_key', 'sweep_order',
    # angles and vectors
    'directed_angle', 'directed_angle_about_center', 'angle_between', 'tangent',
    'ellipse_center_to_point', 'ellipse_point_from_angle', 'vec2', 'int_vec2',
    # intersections
    'line_intersection', 'segment_intersection', 'segment_intersection_int',
    'line_horizontal_intersection', 'line_horizontal_intersection_int',
    'segment_intersections', 'line_horizontal_intersections',
    # policies and tolerances
    'IntersectionPolicy', 'FLOAT_POLICY', 'INT_POLICY', 'EPS_FUZZY', 'EPS_PARALLEL',
    # logging
    'configure_logging', 'get_logger',
    # submodules / namespaces
    'constants', 'config', 'vectors', 'tolerance', 'angles', 'intersection',
]
