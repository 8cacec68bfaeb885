"""Point and polygon value types with the elementary operations the calipers use."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, NamedTuple, Sequence, Tuple

import numpy as np


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class Polygon:
    """Closed ring of vertices, ``exterior[0] == exterior[-1]``."""

    exterior: Tuple[Point, ...]

    def __post_init__(self) -> None:
        ring = tuple(Point(float(x), float(y)) for x, y in self.exterior)
        if len(ring) < 2 or ring[0] != ring[-1]:
            raise ValueError("polygon ring must be closed (first point == last point)")
        if len(set(ring[:-1])) < 3:
            raise ValueError("polygon needs at least 3 distinct vertices")
        object.__setattr__(self, "exterior", ring)

    @classmethod
    def from_coords(cls, coords: Iterable[Sequence[float]]) -> "Polygon":
        """Build a polygon from ``(x, y)`` pairs, closing the ring when needed."""

        ring = []
        for coord in coords:
            if len(coord) != 2:
                raise ValueError(f"coordinate must be length-2, got {coord!r}")
            ring.append(Point(float(coord[0]), float(coord[1])))
        if ring and ring[0] != ring[-1]:
            ring.append(ring[0])
        return cls(tuple(ring))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Polygon":
        arr = np.asarray(array, dtype=float)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"expected an (n, 2) array, got shape {arr.shape}")
        return cls.from_coords(arr.tolist())

    @property
    def vertices(self) -> Tuple[Point, ...]:
        return self.exterior[:-1]

    def __len__(self) -> int:
        return len(self.exterior) - 1

    def as_array(self) -> np.ndarray:
        return np.asarray(self.exterior, dtype=float)

    def reversed(self) -> "Polygon":
        return Polygon(tuple(reversed(self.exterior)))


class ExtremePoint(NamedTuple):
    index: int
    coord: Point


class Extremes(NamedTuple):
    x_min: ExtremePoint
    y_min: ExtremePoint
    x_max: ExtremePoint
    y_max: ExtremePoint


def extremes(polygon: Polygon) -> Extremes:
    """Indices of the min/max-x and min/max-y vertices; ties go to the lowest index."""

    verts = polygon.vertices
    x_min = min(range(len(verts)), key=lambda i: verts[i].x)
    x_max = max(range(len(verts)), key=lambda i: verts[i].x)
    y_min = min(range(len(verts)), key=lambda i: verts[i].y)
    y_max = max(range(len(verts)), key=lambda i: verts[i].y)
    return Extremes(
        x_min=ExtremePoint(x_min, verts[x_min]),
        y_min=ExtremePoint(y_min, verts[y_min]),
        x_max=ExtremePoint(x_max, verts[x_max]),
        y_max=ExtremePoint(y_max, verts[y_max]),
    )


def next_vertex(polygon: Polygon, index: int) -> int:
    """Wrap-around successor index (the closing vertex is skipped)."""

    return (index + 1) % len(polygon)


def prev_vertex(polygon: Polygon, index: int) -> int:
    """Wrap-around predecessor index (the closing vertex is skipped)."""

    n = len(polygon)
    return (index + n - 1) % n


def euclidean_distance(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def point_segment_distance(
    point: Tuple[float, float], a: Tuple[float, float], b: Tuple[float, float]
) -> float:
    """Distance from ``point`` to the closed segment ``a``-``b``."""

    dx = b[0] - a[0]
    dy = b[1] - a[1]
    denom = dx * dx + dy * dy
    if denom == 0.0:
        return euclidean_distance(point, a)
    t = ((point[0] - a[0]) * dx + (point[1] - a[1]) * dy) / denom
    t = min(max(t, 0.0), 1.0)
    return math.hypot(point[0] - (a[0] + t * dx), point[1] - (a[1] + t * dy))


def line_slope(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    """Slope of the line through ``a`` and ``b``; callers handle vertical lines."""

    return (b[1] - a[1]) / (b[0] - a[0])


def triangle_signed_area(
    a: Tuple[float, float], b: Tuple[float, float], c: Tuple[float, float]
) -> float:
    """Signed area of ``a``-``b``-``c`` (positive = CCW)."""

    return 0.5 * ((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0]))


def ring_signed_area(polygon: Polygon) -> float:
    """Signed area via shoelace formula (positive = CCW)."""

    area = 0.0
    ring = polygon.exterior
    for (x0, y0), (x1, y1) in zip(ring[:-1], ring[1:]):
        area += x0 * y1 - x1 * y0
    return area / 2.0


def ensure_ccw(polygon: Polygon) -> Polygon:
    """Return ``polygon`` with counter-clockwise winding."""

    if ring_signed_area(polygon) < 0:
        return polygon.reversed()
    return polygon


__all__ = [
    "Point",
    "Polygon",
    "ExtremePoint",
    "Extremes",
    "extremes",
    "next_vertex",
    "prev_vertex",
    "euclidean_distance",
    "point_segment_distance",
    "line_slope",
    "triangle_signed_area",
    "ring_signed_area",
    "ensure_ccw",
]
