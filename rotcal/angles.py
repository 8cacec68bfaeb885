"""Rotation needed for a caliper to reach the next polygon edge."""

from __future__ import annotations

import logging
import math
from typing import Optional

from .kernel import DEFAULT_KERNEL, Orientation, OrientationKernel, is_clockwise
from .logging_utils import apply_debug_logging
from .primitives import (
    Point,
    Polygon,
    euclidean_distance,
    next_vertex,
    prev_vertex,
    triangle_signed_area,
)
from .unit_vector import unit_perp_vector, unit_vector

logger = logging.getLogger(__name__)


def angle_to_next_feature(
    polygon: Polygon,
    vertex: Point,
    slope: float,
    vertical: bool,
    vertex_index: int,
    *,
    kernel: Optional[OrientationKernel] = None,
    length: float = 100.0,
) -> float:
    """Angle (radians, ``[0, pi]``) between the caliper at ``vertex`` and the edge leaving it.

    The sine comes from the signed area of (vertex, caliper point, successor);
    whether the angle is acute or obtuse is read off the side of the successor
    relative to the caliper's perpendicular.
    """

    kernel = kernel or DEFAULT_KERNEL
    ring = polygon.exterior
    pnext = ring[next_vertex(polygon, vertex_index)]
    pprev = ring[prev_vertex(polygon, vertex_index)]
    edgelen = euclidean_distance(vertex, pnext)
    if edgelen == 0.0:
        # repeated vertex: the caliper already lies on the (empty) edge
        return 0.0
    clockwise = is_clockwise(kernel, pprev, vertex, pnext)

    punit = unit_vector(
        slope,
        polygon,
        vertex,
        vertex_index,
        vertical=vertical,
        kernel=kernel,
        length=length,
    )
    triarea = triangle_signed_area(vertex, punit, pnext)
    sine = triarea / (0.5 * length * edgelen)
    sine = min(max(sine, -1.0), 1.0)
    if clockwise:
        sine = -sine

    perpunit = unit_perp_vector(vertex, punit, length=length)
    side = kernel.orient(vertex, perpunit, pnext)
    if side is Orientation.COLLINEAR:
        return math.pi / 2.0
    if side is Orientation.CLOCKWISE:
        return math.pi - math.asin(sine)
    return math.asin(sine)


apply_debug_logging(globals(), logger=logger)

__all__ = ["angle_to_next_feature"]
