"""Rotating-calipers sweep for the distance between two convex polygons.

Two parallel support lines start horizontal, one under the lowest vertex of
``poly1`` and one over the highest vertex of ``poly2``.  Each step rotates
both by the smaller of the two angles needed to reach the next edge, walks
the caliper(s) that hit an edge onto the following vertex, and scores the
vertex/edge pairs exposed by that alignment.  After
``len(poly1.exterior) + len(poly2.exterior) + 1`` steps every antipodal pair
has been seen at least once.

Background: H. Pirzadeh, "Computational geometry with the rotating
calipers", McGill University, 1999, pp. 30-32.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

from .angles import angle_to_next_feature
from .config import CaliperConfig, resolve_config
from .kernel import Orientation, OrientationKernel
from .logging_utils import debug_log_call
from .primitives import (
    Point,
    Polygon,
    ensure_ccw,
    euclidean_distance,
    extremes,
    next_vertex,
    point_segment_distance,
)
from .unit_vector import line_direction, unit_perp_vector
from .validate import validate_polygon_pair

logger = logging.getLogger(__name__)


class CaliperStateError(RuntimeError):
    """Raised when the sweep reaches a state convex, disjoint inputs cannot produce."""


class Alignment(enum.Enum):
    # poly1's caliper lies on an edge, poly2's touches a vertex
    VERTEX_P = "vertex_p"
    # poly2's caliper lies on an edge, poly1's touches a vertex
    VERTEX_Q = "vertex_q"
    # both calipers lie on (parallel) edges
    EDGE = "edge"


@dataclass(frozen=True)
class Advance:
    """Which calipers moved to a new vertex during one rotation step."""

    advanced_p1: bool
    advanced_q2: bool

    @property
    def alignment(self) -> Optional[Alignment]:
        if self.advanced_p1 and self.advanced_q2:
            return Alignment.EDGE
        if self.advanced_p1:
            return Alignment.VERTEX_P
        if self.advanced_q2:
            return Alignment.VERTEX_Q
        return None


@dataclass
class CaliperState:
    poly1: Polygon
    poly2: Polygon
    kernel: OrientationKernel
    config: CaliperConfig
    p1_idx: int
    q2_idx: int
    p1: Point
    q2: Point
    p1prev: Point
    q2prev: Point
    p1next: Point
    q2next: Point
    slope: float = 0.0
    vertical: bool = False
    alignment: Optional[Alignment] = None
    angle: float = 0.0
    dist: float = math.inf
    max_iterations: int = field(init=False)

    def __post_init__(self) -> None:
        # one rotation per ring coordinate, closing vertices included
        self.max_iterations = len(self.poly1.exterior) + len(self.poly2.exterior)

    @classmethod
    def start(
        cls,
        poly1: Polygon,
        poly2: Polygon,
        kernel: OrientationKernel,
        config: CaliperConfig,
    ) -> "CaliperState":
        """Horizontal calipers under poly1's lowest and over poly2's highest vertex."""

        ymin1 = extremes(poly1).y_min
        ymax2 = extremes(poly2).y_max
        return cls(
            poly1=poly1,
            poly2=poly2,
            kernel=kernel,
            config=config,
            p1_idx=ymin1.index,
            q2_idx=ymax2.index,
            p1=ymin1.coord,
            q2=ymax2.coord,
            p1prev=ymin1.coord,
            q2prev=ymax2.coord,
            p1next=ymin1.coord,
            q2next=ymax2.coord,
        )


@dataclass(frozen=True)
class CaliperStep:
    index: int
    alignment: Alignment
    p1_idx: int
    q2_idx: int
    p1: Point
    q2: Point
    slope: float
    vertical: bool
    angle: float
    dist: float


def _edge_slope(start: Point, end: Point) -> Tuple[float, bool]:
    if start.x == end.x:
        return 0.0, True
    return (end.y - start.y) / (end.x - start.x), False


def nextpoints(state: CaliperState) -> Advance:
    """Rotate both calipers onto the next edge and advance the caliper(s) that reached it."""

    length = state.config.unit_length
    ap1 = angle_to_next_feature(
        state.poly1,
        state.p1,
        state.slope,
        state.vertical,
        state.p1_idx,
        kernel=state.kernel,
        length=length,
    )
    aq2 = angle_to_next_feature(
        state.poly2,
        state.q2,
        state.slope,
        state.vertical,
        state.q2_idx,
        kernel=state.kernel,
        length=length,
    )
    minangle = min(ap1, aq2)
    state.angle += minangle
    state.p1prev = state.p1
    state.p1next = state.p1
    state.q2prev = state.q2
    state.q2next = state.q2

    eps = state.config.angle_epsilon
    advanced_p1 = abs(ap1 - minangle) < eps
    advanced_q2 = abs(aq2 - minangle) < eps
    if advanced_p1:
        state.p1_idx = next_vertex(state.poly1, state.p1_idx)
        state.p1next = state.poly1.exterior[state.p1_idx]
    if advanced_q2:
        state.q2_idx = next_vertex(state.poly2, state.q2_idx)
        state.q2next = state.poly2.exterior[state.q2_idx]

    advance = Advance(advanced_p1, advanced_q2)
    state.alignment = advance.alignment

    # On a tie both edges are parallel; poly1's edge sets the shared slope.
    if advanced_p1 and state.p1 != state.p1next:
        state.slope, state.vertical = _edge_slope(state.p1, state.p1next)
    elif advanced_q2 and state.q2 != state.q2next:
        state.slope, state.vertical = _edge_slope(state.q2, state.q2next)

    state.p1 = state.p1next
    state.q2 = state.q2next
    return advance


def _support_perpendicular(state: CaliperState, point: Point) -> Point:
    """Helper point on the line through ``point`` perpendicular to the calipers."""

    length = state.config.unit_length
    cos, sin = line_direction(state.slope, state.vertical)
    along = Point(point.x + length * cos, point.y + length * sin)
    return unit_perp_vector(point, along, length=length)


def _foot_on_segment(state: CaliperState, point: Point, a: Point, b: Point) -> bool:
    """True when ``a`` and ``b`` lie strictly on opposite sides of the perpendicular at ``point``."""

    perp = _support_perpendicular(state, point)
    side_a = state.kernel.orient(perp, point, a)
    side_b = state.kernel.orient(perp, point, b)
    return (
        side_a is not side_b
        and side_a is not Orientation.COLLINEAR
        and side_b is not Orientation.COLLINEAR
    )


def _keep(state: CaliperState, candidate: float) -> None:
    if candidate <= state.dist:
        state.dist = candidate


def computemin(state: CaliperState) -> float:
    """Score the vertex/edge pairs exposed by the current alignment; returns the running minimum."""

    _keep(state, euclidean_distance(state.p1, state.q2))

    if state.alignment is Alignment.VERTEX_P:
        if _foot_on_segment(state, state.q2, state.p1prev, state.p1):
            _keep(state, point_segment_distance(state.q2, state.p1prev, state.p1))
    elif state.alignment is Alignment.VERTEX_Q:
        if _foot_on_segment(state, state.p1, state.q2prev, state.q2):
            _keep(state, point_segment_distance(state.p1, state.q2prev, state.q2))
    elif state.alignment is Alignment.EDGE:
        _keep(state, euclidean_distance(state.p1, state.q2prev))
        _keep(state, euclidean_distance(state.p1prev, state.q2))
        _keep(state, euclidean_distance(state.p1prev, state.q2prev))
        for end in (state.p1prev, state.p1):
            if _foot_on_segment(state, end, state.q2prev, state.q2):
                _keep(state, point_segment_distance(end, state.q2prev, state.q2))
        for end in (state.q2prev, state.q2):
            if _foot_on_segment(state, end, state.p1prev, state.p1):
                _keep(state, point_segment_distance(end, state.p1prev, state.p1))
    else:
        raise CaliperStateError(
            f"no caliper advanced at p1[{state.p1_idx}]={state.p1}, q2[{state.q2_idx}]={state.q2}"
        )
    return state.dist


def _prepare(
    poly1: Polygon, poly2: Polygon, config: CaliperConfig, kernel: OrientationKernel
) -> Tuple[Polygon, Polygon]:
    if config.validate_inputs:
        validate_polygon_pair(poly1, poly2, kernel)
    # both calipers must turn the same way around their polygon
    return ensure_ccw(poly1), ensure_ccw(poly2)


def iter_caliper_steps(
    poly1: Polygon,
    poly2: Polygon,
    *,
    kernel: Optional[OrientationKernel] = None,
    config: Optional[CaliperConfig] = None,
) -> Iterator[CaliperStep]:
    """Run the sweep, yielding a snapshot after every rotation step."""

    config = resolve_config(config)
    kernel = kernel or config.make_kernel()
    poly1, poly2 = _prepare(poly1, poly2, config, kernel)
    state = CaliperState.start(poly1, poly2, kernel, config)
    logger.debug(
        "Starting sweep: p1[%d]=%s q2[%d]=%s, %d rotation steps",
        state.p1_idx,
        state.p1,
        state.q2_idx,
        state.q2,
        state.max_iterations + 1,
    )

    for index in range(state.max_iterations + 1):
        nextpoints(state)
        computemin(state)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Step %d: %s p1[%d]=%s q2[%d]=%s slope=%s angle=%.6f dist=%.6g",
                index,
                state.alignment.name,
                state.p1_idx,
                state.p1,
                state.q2_idx,
                state.q2,
                "vertical" if state.vertical else f"{state.slope:.6g}",
                state.angle,
                state.dist,
            )
        yield CaliperStep(
            index=index,
            alignment=state.alignment,
            p1_idx=state.p1_idx,
            q2_idx=state.q2_idx,
            p1=state.p1,
            q2=state.q2,
            slope=state.slope,
            vertical=state.vertical,
            angle=state.angle,
            dist=state.dist,
        )

    if state.angle < 2.0 * math.pi:
        logger.debug("Sweep covered %.6f rad, less than a full turn", state.angle)


@debug_log_call(logger)
def min_convex_poly_dist(
    poly1: Polygon,
    poly2: Polygon,
    *,
    kernel: Optional[OrientationKernel] = None,
    config: Optional[CaliperConfig] = None,
) -> float:
    """Minimum distance between two disjoint convex polygons.

    The polygons must be convex and must not touch or overlap; this is not
    checked unless ``config.validate_inputs`` is set, and violating it yields
    a meaningless distance rather than an error.
    """

    dist = math.inf
    for step in iter_caliper_steps(poly1, poly2, kernel=kernel, config=config):
        dist = step.dist
    return dist


__all__ = [
    "Alignment",
    "Advance",
    "CaliperState",
    "CaliperStateError",
    "CaliperStep",
    "nextpoints",
    "computemin",
    "iter_caliper_steps",
    "min_convex_poly_dist",
]
