"""Convex hulls of planar point sets."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from .primitives import Polygon
from .validate import ValidationError

logger = logging.getLogger(__name__)


def convex_hull(points: Iterable[Sequence[float]]) -> Polygon:
    """Counter-clockwise hull of ``points`` as a closed ring.

    The ring starts at the lowest vertex (the rightmost one on ties);
    points on the hull boundary between corners are dropped.
    """

    arr = np.unique(np.asarray(list(points), dtype=float).reshape(-1, 2), axis=0)
    if len(arr) < 3:
        raise ValidationError(f"convex hull needs at least 3 distinct points, got {len(arr)}")
    try:
        hull = ConvexHull(arr)
    except QhullError as exc:
        raise ValidationError(f"convex hull is degenerate: {exc}") from exc

    # scipy lists 2-D hull vertices counter-clockwise
    ring = arr[hull.vertices]
    start = int(np.lexsort((-ring[:, 0], ring[:, 1]))[0])
    ring = np.roll(ring, -start, axis=0)
    logger.debug("Hull of %d point(s) has %d vertices", len(arr), len(ring))
    return Polygon.from_array(ring)


__all__ = ["convex_hull"]
