"""Helper points along caliper lines and their perpendiculars.

A caliper is stored as a bare slope (plus a vertical flag), which fixes the
line but not which way along it the caliper currently runs.  At a polygon
vertex the caliper runs forward along the boundary: its direction sits in the
cone between the incoming edge ``pprev -> p`` and the outgoing edge
``p -> pnext``.  :func:`unit_vector` recovers that direction and returns the
point ``length`` units along it.
"""

from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

from .kernel import DEFAULT_KERNEL, Orientation, OrientationKernel
from .primitives import Point, Polygon, line_slope, next_vertex, prev_vertex

Direction = Tuple[float, float]

# Used only when the edge bisector cannot decide (the cone is a half-plane):
# (local winding, side of the successor relative to the line) -> sign.
_WINDING_SIDE_SIGN: Dict[Tuple[Orientation, Orientation], int] = {
    (Orientation.COUNTER_CLOCKWISE, Orientation.COUNTER_CLOCKWISE): 1,
    (Orientation.COUNTER_CLOCKWISE, Orientation.CLOCKWISE): -1,
    (Orientation.CLOCKWISE, Orientation.CLOCKWISE): 1,
    (Orientation.CLOCKWISE, Orientation.COUNTER_CLOCKWISE): -1,
}


def _normalized(dx: float, dy: float) -> Direction:
    norm = math.hypot(dx, dy)
    if norm == 0.0:
        return 0.0, 0.0
    return dx / norm, dy / norm


def line_direction(slope: float, vertical: bool = False) -> Direction:
    """Unit direction of a line with ``slope``, pointing towards increasing x."""

    if vertical:
        return 0.0, 1.0
    cossq = 1.0 / (1.0 + slope * slope)
    cos = math.sqrt(cossq)
    sin = math.sqrt(max(1.0 - cossq, 0.0))
    if slope < 0:
        sin = -sin
    return cos, sin


def local_winding(kernel: OrientationKernel, pprev: Point, p: Point, pnext: Point) -> Orientation:
    """Winding of ``pprev -> p -> pnext``; a straight vertex counts as counter-clockwise."""

    winding = kernel.orient(pprev, p, pnext)
    if winding is Orientation.COLLINEAR:
        return Orientation.COUNTER_CLOCKWISE
    return winding


def _direction_sign(
    kernel: OrientationKernel,
    direction: Direction,
    pprev: Point,
    p: Point,
    pnext: Point,
) -> int:
    cos, sin = direction
    in_x, in_y = _normalized(p.x - pprev.x, p.y - pprev.y)
    out_x, out_y = _normalized(pnext.x - p.x, pnext.y - p.y)
    along = cos * (in_x + out_x) + sin * (in_y + out_y)
    if along > 0.0:
        return 1
    if along < 0.0:
        return -1

    winding = local_winding(kernel, pprev, p, pnext)
    side = kernel.orient(p, (p.x + cos, p.y + sin), pnext)
    if side is Orientation.COLLINEAR:
        ahead = (pnext.x - p.x) * cos + (pnext.y - p.y) * sin
        if ahead == 0.0:
            ahead = (p.x - pprev.x) * cos + (p.y - pprev.y) * sin
        return 1 if ahead >= 0.0 else -1
    return _WINDING_SIDE_SIGN[(winding, side)]


def unit_vector(
    slope: float,
    polygon: Polygon,
    vertex: Point,
    vertex_index: int,
    *,
    vertical: bool = False,
    kernel: Optional[OrientationKernel] = None,
    length: float = 100.0,
) -> Point:
    """Point ``length`` units from ``vertex`` along the caliper of ``slope``.

    Of the two points on the line, the one in the boundary's forward
    direction at ``vertex_index`` is returned.
    """

    if len(polygon) < 3:
        raise ValueError("unit_vector needs a polygon with at least 3 vertices")
    kernel = kernel or DEFAULT_KERNEL
    ring = polygon.exterior
    pnext = ring[next_vertex(polygon, vertex_index)]
    pprev = ring[prev_vertex(polygon, vertex_index)]
    cos, sin = line_direction(slope, vertical)
    sign = _direction_sign(kernel, (cos, sin), pprev, vertex, pnext)
    return Point(vertex.x + length * sign * cos, vertex.y + length * sign * sin)


def unit_perp_vector(vertex: Point, target: Point, *, length: float = 100.0) -> Point:
    """Point ``length`` units from ``vertex`` perpendicular to ``vertex -> target``.

    The perpendicular is the segment direction turned clockwise.
    """

    vertical = vertex.x == target.x
    if vertical:
        if target.y > vertex.y:
            return Point(vertex.x + length, vertex.y)
        return Point(vertex.x - length, vertex.y)
    if vertex.y == target.y:
        if target.x > vertex.x:
            return Point(vertex.x, vertex.y - length)
        return Point(vertex.x, vertex.y + length)

    slope = line_slope(vertex, target)
    sperp = -1.0 / slope
    cossq = 1.0 / (1.0 + sperp * sperp)
    cos = math.sqrt(cossq)
    sin = math.sqrt(max(1.0 - cossq, 0.0))
    if target.x > vertex.x:
        sin = -sin
        if slope < 0:
            cos = -cos
    elif slope > 0:
        cos = -cos
    return Point(vertex.x + length * cos, vertex.y + length * sin)


__all__ = [
    "line_direction",
    "local_winding",
    "unit_vector",
    "unit_perp_vector",
]
