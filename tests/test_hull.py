import numpy as np
import pytest

from rotcal import Point, ValidationError, convex_hull


def test_hull_of_diamond_with_center():
    hull = convex_hull([(0, -10), (10, 0), (0, 10), (-10, 0), (0, 0)])

    assert hull.exterior == (
        Point(0.0, -10.0),
        Point(10.0, 0.0),
        Point(0.0, 10.0),
        Point(-10.0, 0.0),
        Point(0.0, -10.0),
    )


def test_hull_starts_at_rightmost_lowest_vertex():
    hull = convex_hull([(0, 0), (1, 10), (2, 0), (3, 1), (1, 5)])

    assert hull.vertices == (Point(2.0, 0.0), Point(3.0, 1.0), Point(1.0, 10.0), Point(0.0, 0.0))


def test_hull_of_two_triangles():
    points = [(0, 0), (1, 10), (2, 0), (3, 0), (4, 10), (5, 0)]

    hull = convex_hull(points)

    assert hull.vertices == (Point(5.0, 0.0), Point(4.0, 10.0), Point(1.0, 10.0), Point(0.0, 0.0))


def test_hull_accepts_arrays_and_drops_duplicates():
    pts = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0], [0.0, 0.0], [0.2, 0.2]])

    hull = convex_hull(pts)

    assert len(hull) == 3
    assert hull.exterior[0] == hull.exterior[-1]


@pytest.mark.parametrize(
    'points',
    [
        [(0, 0), (1, 1)],
        [(0, 0), (0, 0), (1, 1)],
        [(0, 0), (1, 1), (2, 2), (3, 3)],
    ],
    ids=['two-points', 'duplicates', 'collinear'],
)
def test_degenerate_point_sets_are_rejected(points):
    with pytest.raises(ValidationError):
        convex_hull(points)
