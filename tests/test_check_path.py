"""Unit tests for the check mark geometry and its partial paths."""

# Standard Library
import math

# Third Party
import numpy as np
import pytest

# Local repo modules
from checkview.model.check_path import CheckPathBuilder, PartialPath
from checkview.model.geometry_primitives import Point, Rect
from checkview.model.geometry_utils import PolylineMeasure


MINOR_100 = math.sqrt(17.6 ** 2 + 16.0 ** 2)
MAJOR_100 = math.sqrt(32.4 ** 2 + 36.0 ** 2)


#============================================
@pytest.fixture
def geom(square_rect):
    return CheckPathBuilder.build(square_rect)


#============================================
def _drawn_length(path: PartialPath) -> float:
    if len(path) < 2:
        return 0.0
    return PolylineMeasure(path.points).length


#============================================
# build
#============================================

#============================================
def test_anchor_points_square(geom):
    assert geom.start.is_close(Point(25.0, 50.0))
    assert geom.pivot.is_close(Point(42.6, 66.0))
    assert geom.end.is_close(Point(75.0, 30.0))


#============================================
def test_leg_lengths_square(geom):
    assert geom.minor_length == pytest.approx(MINOR_100)
    assert geom.major_length == pytest.approx(MAJOR_100)
    assert geom.pivot_fraction == pytest.approx(MINOR_100 / (MINOR_100 + MAJOR_100))


#============================================
def test_anchor_points_offset_rect():
    # anchors are relative to the top-left corner of the drawing rect
    geom = CheckPathBuilder.build(Rect(10.0, 20.0, 110.0, 120.0))
    assert geom.start.is_close(Point(35.0, 70.0))
    assert geom.end.is_close(Point(85.0, 50.0))


#============================================
@pytest.mark.parametrize("rect", [
    Rect(0.0, 0.0, 100.0, 100.0),
    Rect(0.0, 0.0, 1.0, 1.0),
    Rect(-50.0, -50.0, 50.0, 50.0),
    Rect(0.0, 0.0, 300.0, 100.0),
])
def test_leg_lengths_positive(rect):
    geom = CheckPathBuilder.build(rect)
    assert geom.minor_length > 0.0
    assert geom.major_length > 0.0


#============================================
@pytest.mark.parametrize("rect", [
    Rect(10.0, 10.0, 10.0, 10.0),
    Rect(0.0, 0.0, 0.0, 100.0),
    Rect(0.0, 0.0, 100.0, 0.0),
    Rect(0.0, 0.0, -40.0, 60.0),
    Rect(100.0, 100.0, 0.0, 0.0),
], ids=["point", "zero-width", "zero-height", "negative-width", "inverted"])
def test_empty_rect_has_zero_legs(rect):
    geom = CheckPathBuilder.build(rect)
    assert geom.minor_length == 0.0
    assert geom.major_length == 0.0
    assert geom.is_degenerate()
    assert geom.pivot_fraction == 0.0
    # nothing is drawn at any fraction
    for fraction in (0.0, 0.2, 0.5, 1.0):
        assert CheckPathBuilder.partial_path(geom, fraction).is_empty()


#============================================
def test_non_square_rect_still_builds():
    geom = CheckPathBuilder.build(Rect(0.0, 0.0, 200.0, 100.0))
    assert geom.pivot.is_close(Point(85.2, 66.0))


#============================================
# partial_path
#============================================

#============================================
def test_fraction_zero_is_start_only(geom):
    path = CheckPathBuilder.partial_path(geom, 0.0)
    assert path.points == (geom.start,)


#============================================
def test_fraction_one_is_full_path(geom):
    path = CheckPathBuilder.partial_path(geom, 1.0)
    assert path.points == (geom.start, geom.pivot, geom.end)
    assert path == CheckPathBuilder.full_path(geom)


#============================================
def test_fraction_at_pivot_is_exact(geom):
    path = CheckPathBuilder.partial_path(geom, geom.pivot_fraction)
    assert path.points == (geom.start, geom.pivot)


#============================================
def test_fraction_just_below_pivot(geom):
    path = CheckPathBuilder.partial_path(geom, geom.pivot_fraction - 1e-9)
    assert len(path) == 2
    assert path.points[0] == geom.start
    assert path.last_point.is_close(geom.pivot, tol=1e-4)


#============================================
def test_fraction_just_above_pivot(geom):
    path = CheckPathBuilder.partial_path(geom, geom.pivot_fraction + 1e-9)
    assert len(path) == 3
    assert path.points[:2] == (geom.start, geom.pivot)
    assert path.last_point.is_close(geom.pivot, tol=1e-4)


#============================================
def test_first_leg_is_monotonic(geom):
    fractions = np.linspace(0.0, geom.pivot_fraction, 50)[1:-1]
    distances = [
        geom.start.distance_to(CheckPathBuilder.partial_path(geom, f).last_point)
        for f in fractions
    ]
    assert all(b > a for a, b in zip(distances, distances[1:]))


#============================================
def test_first_leg_point_lies_on_segment(geom):
    f = geom.pivot_fraction / 2
    path = CheckPathBuilder.partial_path(geom, f)
    assert len(path) == 2
    mid = Point((geom.start.x + geom.pivot.x) / 2, (geom.start.y + geom.pivot.y) / 2)
    assert path.last_point.is_close(mid)


#============================================
def test_half_way_point_on_major_leg(geom):
    path = CheckPathBuilder.partial_path(geom, 0.5)
    assert len(path) == 3
    assert path.points[:2] == (geom.start, geom.pivot)

    expected_dist = geom.total_length * (0.5 - geom.pivot_fraction)
    direction = (geom.end - geom.pivot).normalize()
    expected = geom.pivot + direction * expected_dist
    assert path.last_point.is_close(expected)
    assert geom.pivot.distance_to(path.last_point) == pytest.approx(expected_dist)


#============================================
@pytest.mark.parametrize("fraction", [0.1, 0.25, 0.5, 0.75, 0.9, 0.999])
def test_drawn_length_is_proportional(geom, fraction):
    # the stroke covers fraction * total arc length on either leg
    path = CheckPathBuilder.partial_path(geom, fraction)
    assert _drawn_length(path) == pytest.approx(geom.total_length * fraction)


#============================================
def test_same_input_same_output(geom):
    a = CheckPathBuilder.partial_path(geom, 0.6180339)
    b = CheckPathBuilder.partial_path(geom, 0.6180339)
    assert a == b
    assert a.points[-1].x == b.points[-1].x
    assert a.points[-1].y == b.points[-1].y


#============================================
def test_out_of_range_fractions_are_clamped(geom):
    assert CheckPathBuilder.partial_path(geom, -0.5) == CheckPathBuilder.partial_path(geom, 0.0)
    assert CheckPathBuilder.partial_path(geom, 1.5) == CheckPathBuilder.partial_path(geom, 1.0)


#============================================
def test_nan_fraction_rejected(geom):
    with pytest.raises(ValueError):
        CheckPathBuilder.partial_path(geom, float("nan"))


#============================================
@pytest.mark.parametrize("fraction", [0.0, 0.3, 1.0])
def test_degenerate_geometry_draws_nothing(fraction):
    geom = CheckPathBuilder.build(Rect(0.0, 0.0, 0.0, 0.0))
    path = CheckPathBuilder.partial_path(geom, fraction)
    assert path.is_empty()
    assert path.last_point is None
