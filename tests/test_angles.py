import logging
import math

import pytest

from rotcal.angles import angle_to_next_feature
from rotcal.kernel import ExactKernel
from rotcal.primitives import Polygon, line_slope

SQUARE_CCW = Polygon.from_coords([(0, 0), (1, 0), (1, 1), (0, 1)])


def _regular_polygon(n, radius=1.0, clockwise=False):
    step = -2.0 * math.pi / n if clockwise else 2.0 * math.pi / n
    return Polygon.from_coords(
        [(radius * math.cos(k * step), radius * math.sin(k * step)) for k in range(n)]
    )


def test_caliper_already_on_outgoing_edge_needs_no_rotation():
    angle = angle_to_next_feature(SQUARE_CCW, SQUARE_CCW.exterior[0], 0.0, False, 0)

    assert angle == pytest.approx(0.0, abs=1e-12)


def test_square_corner_needs_quarter_turn():
    angle = angle_to_next_feature(SQUARE_CCW, SQUARE_CCW.exterior[1], 0.0, False, 1)

    assert angle == pytest.approx(math.pi / 2)


def test_vertical_caliper_at_square_corner_needs_quarter_turn():
    angle = angle_to_next_feature(SQUARE_CCW, SQUARE_CCW.exterior[2], 0.0, True, 2)

    assert angle == pytest.approx(math.pi / 2)


def test_obtuse_rotation_on_ccw_triangle():
    tri = Polygon.from_coords([(0, 0), (2, 0), (1, 10)])

    angle = angle_to_next_feature(tri, tri.exterior[1], 0.0, False, 1)

    assert angle == pytest.approx(math.atan2(10.0, -1.0))
    assert angle > math.pi / 2


def test_obtuse_rotation_on_cw_triangle():
    tri = Polygon.from_coords([(0, 0), (1, 10), (2, 0)])

    angle = angle_to_next_feature(tri, tri.exterior[0], 0.0, False, 0)

    assert angle == pytest.approx(math.pi - math.atan(10.0))


def test_acute_rotation_on_ccw_triangle():
    tri = Polygon.from_coords([(0, 0), (2, 0), (1, 10)])

    angle = angle_to_next_feature(tri, tri.exterior[0], 0.0, False, 0, kernel=ExactKernel())

    assert angle == pytest.approx(0.0, abs=1e-12)
    tri_up = Polygon.from_coords([(0, 0), (2, 1), (1, 10)])
    assert angle_to_next_feature(tri_up, tri_up.exterior[0], 0.0, False, 0) == pytest.approx(
        math.atan2(1.0, 2.0)
    )


@pytest.mark.parametrize('n', [3, 5, 6, 11])
@pytest.mark.parametrize('clockwise', [False, True])
def test_regular_polygon_exterior_angles(n, clockwise):
    poly = _regular_polygon(n, clockwise=clockwise)
    ring = poly.exterior
    for idx in range(n):
        prev = ring[idx - 1] if idx else ring[n - 1]
        vertex = ring[idx]
        vertical = prev.x == vertex.x
        slope = 0.0 if vertical else line_slope(prev, vertex)

        angle = angle_to_next_feature(poly, vertex, slope, vertical, idx)

        assert angle == pytest.approx(2.0 * math.pi / n, rel=1e-9)


def test_angle_is_logged_at_debug_level(caplog):
    caplog.set_level(logging.DEBUG, logger='rotcal.angles')

    angle_to_next_feature(SQUARE_CCW, SQUARE_CCW.exterior[1], 0.0, False, 1)

    messages = [record.getMessage() for record in caplog.records if record.name == 'rotcal.angles']
    assert any(message.startswith('Entering angle_to_next_feature') for message in messages)
    assert any(message.startswith('Exiting angle_to_next_feature') for message in messages)


def test_repeated_vertex_is_a_zero_length_edge():
    poly = Polygon.from_coords([(0, 0), (1, 0), (1, 0), (1, 1), (0, 1)])

    assert angle_to_next_feature(poly, poly.exterior[1], 0.0, False, 1) == 0.0
