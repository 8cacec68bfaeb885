"""O(n*m) reference distance between two polygon boundaries."""

from __future__ import annotations

import numpy as np

from .primitives import Polygon


def _points_to_segments(points: np.ndarray, starts: np.ndarray, ends: np.ndarray) -> np.ndarray:
    """Distance matrix, shape ``(len(points), len(starts))``."""

    seg = ends - starts
    denom = np.einsum("ij,ij->i", seg, seg)
    rel = points[:, None, :] - starts[None, :, :]
    with np.errstate(invalid="ignore", divide="ignore"):
        t = np.einsum("pij,ij->pi", rel, seg) / denom
    t = np.where(denom > 0.0, np.clip(t, 0.0, 1.0), 0.0)
    foot = starts[None, :, :] + t[:, :, None] * seg[None, :, :]
    return np.linalg.norm(points[:, None, :] - foot, axis=2)


def brute_force_distance(poly1: Polygon, poly2: Polygon) -> float:
    """Minimum over every vertex of one polygon against every edge of the other.

    For boundaries that do not cross this equals the true minimum distance.
    """

    a = poly1.as_array()
    b = poly2.as_array()
    d_ab = _points_to_segments(a[:-1], b[:-1], b[1:])
    d_ba = _points_to_segments(b[:-1], a[:-1], a[1:])
    return float(min(d_ab.min(), d_ba.min()))


__all__ = ["brute_force_distance"]
