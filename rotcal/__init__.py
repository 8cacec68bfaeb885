from .primitives import (
    Point,
    Polygon,
    Extremes,
    ExtremePoint,
    extremes,
    ensure_ccw,
    euclidean_distance,
    point_segment_distance,
)
from .kernel import Orientation, OrientationKernel, RobustKernel, ExactKernel, FloatKernel, get_kernel
from .config import CaliperConfig, get_caliper_config, set_caliper_config
from .unit_vector import unit_vector, unit_perp_vector
from .angles import angle_to_next_feature
from .calipers import (
    Alignment,
    Advance,
    CaliperState,
    CaliperStateError,
    CaliperStep,
    nextpoints,
    computemin,
    iter_caliper_steps,
    min_convex_poly_dist,
)
from .validate import validate_polygon, validate_polygon_pair, ValidationError
from .hull import convex_hull
from .brute_force import brute_force_distance

__all__ = [
    'Point',
    'Polygon',
    'Extremes',
    'ExtremePoint',
    'extremes',
    'ensure_ccw',
    'euclidean_distance',
    'point_segment_distance',
    'Orientation',
    'OrientationKernel',
    'RobustKernel',
    'ExactKernel',
    'FloatKernel',
    'get_kernel',
    'CaliperConfig',
    'get_caliper_config',
    'set_caliper_config',
    'unit_vector',
    'unit_perp_vector',
    'angle_to_next_feature',
    'Alignment',
    'Advance',
    'CaliperState',
    'CaliperStateError',
    'CaliperStep',
    'nextpoints',
    'computemin',
    'iter_caliper_steps',
    'min_convex_poly_dist',
    'validate_polygon',
    'validate_polygon_pair',
    'ValidationError',
    'convex_hull',
    'brute_force_distance',
]
