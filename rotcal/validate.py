"""Optional precondition checks for the distance sweep."""

from __future__ import annotations

import math

import numpy as np

from .kernel import DEFAULT_KERNEL, Orientation, OrientationKernel
from .primitives import Polygon


class ValidationError(Exception):
    pass


def _turn_angles(ring: np.ndarray) -> np.ndarray:
    edges = np.diff(ring, axis=0)
    following = np.roll(edges, -1, axis=0)
    cross = edges[:, 0] * following[:, 1] - edges[:, 1] * following[:, 0]
    dot = np.einsum("ij,ij->i", edges, following)
    return np.arctan2(cross, dot)


def validate_polygon(
    polygon: Polygon, name: str = "polygon", kernel: OrientationKernel = DEFAULT_KERNEL
) -> None:
    verts = polygon.vertices
    for x, y in verts:
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValidationError(f"{name} has a non-finite coordinate ({x}, {y})")
    if len(set(verts)) < 3:
        raise ValidationError(f"{name} needs at least 3 distinct vertices")
    for idx, (a, b) in enumerate(zip(polygon.exterior[:-1], polygon.exterior[1:])):
        if a == b:
            raise ValidationError(f"{name} repeats vertex {idx} ({a.x}, {a.y})")

    n = len(verts)
    turns = set()
    for idx in range(n):
        o = kernel.orient(verts[idx - 1], verts[idx], verts[(idx + 1) % n])
        if o is not Orientation.COLLINEAR:
            turns.add(o)
    if len(turns) > 1:
        raise ValidationError(f"{name} is not convex")
    if not turns:
        raise ValidationError(f"{name} is degenerate (all vertices collinear)")

    # a star polygon turns the same way at every vertex but winds more than once
    total = float(np.sum(_turn_angles(polygon.as_array())))
    if abs(abs(total) - 2.0 * math.pi) > 1e-6:
        raise ValidationError(f"{name} is self-intersecting (winds {total / (2.0 * math.pi):.2f} times)")


def _separated_along_edges(a: np.ndarray, b: np.ndarray) -> bool:
    edges = np.diff(a, axis=0)
    normals = np.stack([-edges[:, 1], edges[:, 0]], axis=1)
    proj_a = a[:-1] @ normals.T
    proj_b = b[:-1] @ normals.T
    gap_ab = proj_b.min(axis=0) > proj_a.max(axis=0)
    gap_ba = proj_a.min(axis=0) > proj_b.max(axis=0)
    return bool(np.any(gap_ab | gap_ba))


def validate_polygon_pair(
    poly1: Polygon, poly2: Polygon, kernel: OrientationKernel = DEFAULT_KERNEL
) -> None:
    """Raise :class:`ValidationError` unless both polygons are convex and strictly apart."""

    validate_polygon(poly1, "poly1", kernel)
    validate_polygon(poly2, "poly2", kernel)
    a = poly1.as_array()
    b = poly2.as_array()
    if not (_separated_along_edges(a, b) or _separated_along_edges(b, a)):
        raise ValidationError("poly1 and poly2 intersect or touch")


__all__ = ["ValidationError", "validate_polygon", "validate_polygon_pair"]
