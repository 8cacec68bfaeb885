import math

import pytest

from rotcal.calipers import (
    Advance,
    Alignment,
    CaliperState,
    CaliperStateError,
    computemin,
    nextpoints,
)
from rotcal.config import CaliperConfig
from rotcal.kernel import RobustKernel
from rotcal.primitives import Point, Polygon

SQUARE_A = Polygon.from_coords([(0, 0), (1, 0), (1, 1), (0, 1)])
SQUARE_B = Polygon.from_coords([(2, 0), (3, 0), (3, 1), (2, 1)])
TRIANGLE_A = Polygon.from_coords([(0, 0), (2, 0), (1, 10)])
TRIANGLE_B = Polygon.from_coords([(3, 0), (5, 0), (4, 10)])


def _state(poly1, poly2):
    return CaliperState.start(poly1, poly2, RobustKernel(), CaliperConfig())


@pytest.mark.parametrize(
    'advanced_p1, advanced_q2, expected',
    [
        (True, False, Alignment.VERTEX_P),
        (False, True, Alignment.VERTEX_Q),
        (True, True, Alignment.EDGE),
        (False, False, None),
    ],
)
def test_advance_alignment(advanced_p1, advanced_q2, expected):
    assert Advance(advanced_p1, advanced_q2).alignment is expected


def test_start_state_uses_extreme_vertices():
    state = _state(SQUARE_A, SQUARE_B)

    assert state.p1_idx == 0
    assert state.q2_idx == 2
    assert state.p1 == Point(0.0, 0.0)
    assert state.q2 == Point(3.0, 1.0)
    assert state.slope == 0.0
    assert not state.vertical
    assert state.dist == math.inf
    assert state.max_iterations == 10


def test_squares_first_steps_are_edge_aligned():
    state = _state(SQUARE_A, SQUARE_B)

    advance = nextpoints(state)

    assert advance == Advance(True, True)
    assert state.alignment is Alignment.EDGE
    assert (state.p1_idx, state.q2_idx) == (1, 3)
    assert state.p1prev == Point(0.0, 0.0)
    assert state.q2prev == Point(3.0, 1.0)
    assert state.slope == 0.0 and not state.vertical
    assert state.angle == pytest.approx(0.0, abs=1e-12)
    assert computemin(state) == pytest.approx(math.sqrt(2.0))

    nextpoints(state)

    assert state.alignment is Alignment.EDGE
    assert state.vertical
    assert state.angle == pytest.approx(math.pi / 2)
    # (1, 1) against the previous q2 (2, 1)
    assert computemin(state) == pytest.approx(1.0)


def test_triangles_advance_one_caliper_at_a_time():
    state = _state(TRIANGLE_A, TRIANGLE_B)

    assert nextpoints(state) == Advance(True, False)
    assert state.alignment is Alignment.VERTEX_P
    assert state.p1 == Point(2.0, 0.0)
    assert computemin(state) == pytest.approx(math.hypot(2.0, 10.0))

    assert nextpoints(state) == Advance(False, True)
    assert state.alignment is Alignment.VERTEX_Q
    assert state.q2 == Point(3.0, 0.0)
    assert state.slope == pytest.approx(10.0)
    assert state.angle == pytest.approx(math.atan(10.0))
    assert computemin(state) == pytest.approx(1.0)


def test_vertex_p_scores_perpendicular_foot_on_edge():
    poly1 = Polygon.from_coords([(0, 0), (4, 0), (4, 1), (0, 1)])
    poly2 = Polygon.from_coords([(1, -5), (3, -5), (2, -3)])
    state = _state(poly1, poly2)
    state.p1prev = Point(0.0, 0.0)
    state.p1 = Point(4.0, 0.0)
    state.q2 = Point(2.0, -3.0)
    state.alignment = Alignment.VERTEX_P

    assert computemin(state) == pytest.approx(3.0)


def test_vertex_q_ignores_edge_without_perpendicular_foot():
    poly1 = Polygon.from_coords([(10, 0), (12, 0), (11, 2)])
    poly2 = Polygon.from_coords([(0, -3), (4, -3), (2, -6)])
    state = _state(poly1, poly2)
    state.p1 = Point(10.0, 0.0)
    state.q2prev = Point(0.0, -3.0)
    state.q2 = Point(4.0, -3.0)
    state.alignment = Alignment.VERTEX_Q

    assert computemin(state) == pytest.approx(math.hypot(6.0, 3.0))


def test_edge_alignment_scores_overlapping_parallel_edges():
    poly1 = Polygon.from_coords([(0, 0), (1, -2), (2, 0)])
    poly2 = Polygon.from_coords([(1, 1), (3, 1), (2, 3)])
    state = _state(poly1, poly2)
    state.p1prev = Point(2.0, 0.0)
    state.p1 = Point(0.0, 0.0)
    state.q2prev = Point(1.0, 1.0)
    state.q2 = Point(3.0, 1.0)
    state.alignment = Alignment.EDGE

    assert computemin(state) == pytest.approx(1.0)


def test_dist_never_increases():
    state = _state(SQUARE_A, SQUARE_B)
    state.dist = 0.5
    nextpoints(state)

    assert computemin(state) == 0.5


def test_missing_alignment_is_an_internal_error():
    state = _state(SQUARE_A, SQUARE_B)
    state.alignment = None

    with pytest.raises(CaliperStateError):
        computemin(state)
