"""Orientation predicates for point triples.

The calipers only ask one question of the number system: does ``a -> b -> c``
turn clockwise, counter-clockwise, or not at all?  That question is answered
by an :class:`OrientationKernel`, passed in by the caller so alternative
backends can be swapped without touching the geometry.

``RobustKernel`` evaluates the determinant in floating point and accepts the
sign when it clears a static error bound; otherwise it recomputes exactly
with :class:`fractions.Fraction`.  ``ExactKernel`` always takes the exact
path, ``FloatKernel`` never does.
"""

from __future__ import annotations

import enum
import sys
from fractions import Fraction
from typing import Dict, Protocol, Tuple

Coord = Tuple[float, float]


class Orientation(enum.Enum):
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"
    COLLINEAR = "collinear"


class OrientationKernel(Protocol):
    def orient(self, a: Coord, b: Coord, c: Coord) -> Orientation:
        ...


def _from_sign(value) -> Orientation:
    if value > 0:
        return Orientation.COUNTER_CLOCKWISE
    if value < 0:
        return Orientation.CLOCKWISE
    return Orientation.COLLINEAR


def _exact_det(a: Coord, b: Coord, c: Coord) -> Fraction:
    ax, ay = Fraction(a[0]), Fraction(a[1])
    bx, by = Fraction(b[0]), Fraction(b[1])
    cx, cy = Fraction(c[0]), Fraction(c[1])
    return (ax - cx) * (by - cy) - (ay - cy) * (bx - cx)


# Shewchuk's ccwerrboundA for round-to-nearest doubles.
_HALF_EPS = sys.float_info.epsilon / 2.0
_CCW_ERR_BOUND = (3.0 + 16.0 * _HALF_EPS) * _HALF_EPS


class FloatKernel:
    """Plain floating-point determinant sign."""

    name = "float"

    def orient(self, a: Coord, b: Coord, c: Coord) -> Orientation:
        det = (a[0] - c[0]) * (b[1] - c[1]) - (a[1] - c[1]) * (b[0] - c[0])
        return _from_sign(det)


class ExactKernel:
    """Rational arithmetic on the exact binary values of the inputs."""

    name = "exact"

    def orient(self, a: Coord, b: Coord, c: Coord) -> Orientation:
        return _from_sign(_exact_det(a, b, c))


class RobustKernel:
    """Filtered floating-point determinant with an exact fallback."""

    name = "robust"

    def orient(self, a: Coord, b: Coord, c: Coord) -> Orientation:
        detleft = (a[0] - c[0]) * (b[1] - c[1])
        detright = (a[1] - c[1]) * (b[0] - c[0])
        det = detleft - detright

        if detleft > 0.0:
            if detright <= 0.0:
                return _from_sign(det)
            detsum = detleft + detright
        elif detleft < 0.0:
            if detright >= 0.0:
                return _from_sign(det)
            detsum = -detleft - detright
        else:
            return _from_sign(det)

        errbound = _CCW_ERR_BOUND * detsum
        if det >= errbound or -det >= errbound:
            return _from_sign(det)
        return _from_sign(_exact_det(a, b, c))


_KERNELS: Dict[str, type] = {
    "robust": RobustKernel,
    "exact": ExactKernel,
    "float": FloatKernel,
}

DEFAULT_KERNEL: OrientationKernel = RobustKernel()


def get_kernel(name: str) -> OrientationKernel:
    """Instantiate the kernel registered under ``name``."""

    try:
        return _KERNELS[name]()
    except KeyError:
        raise ValueError(
            f"unknown orientation kernel {name!r}; expected one of {sorted(_KERNELS)}"
        ) from None


def is_clockwise(kernel: OrientationKernel, a: Coord, b: Coord, c: Coord) -> bool:
    return kernel.orient(a, b, c) is Orientation.CLOCKWISE


__all__ = [
    "Orientation",
    "OrientationKernel",
    "FloatKernel",
    "ExactKernel",
    "RobustKernel",
    "DEFAULT_KERNEL",
    "get_kernel",
    "is_clockwise",
]
