"""Unit tests for the ring geometry and its partial arcs."""

# Standard Library
import math

# Third Party
import pytest

# Local repo modules
from checkview.model.geometry_primitives import Point, Rect
from checkview.model.ring_path import RingPathBuilder


#============================================
@pytest.fixture
def ring(square_rect):
    return RingPathBuilder.build(square_rect, stroke_width=8.0)


#============================================
def test_rect_inset_by_half_stroke(ring):
    assert ring.rect == Rect(4.0, 4.0, 96.0, 96.0)


#============================================
def test_start_point(ring):
    # rightmost edge, half of the inset rect height
    assert ring.start == Point(96.0, 46.0)


#============================================
def test_negative_stroke_rejected(square_rect):
    with pytest.raises(ValueError):
        RingPathBuilder.build(square_rect, stroke_width=-1.0)


#============================================
@pytest.mark.parametrize("fraction, expected", [
    (0.0, 0.0),
    (0.25, 89.75),
    (0.5, 179.5),
    (1.0, 359.0),
    (-1.0, 0.0),
    (2.0, 359.0),
])
def test_sweep_angle(fraction, expected):
    assert RingPathBuilder.sweep_angle(fraction) == pytest.approx(expected)


#============================================
def test_full_fraction_never_closes(ring):
    arc = RingPathBuilder.partial_path(ring, 1.0)
    assert arc.sweep_angle == 359.0
    assert arc.sweep_angle != 360.0


#============================================
def test_partial_arc_descriptor(ring):
    arc = RingPathBuilder.partial_path(ring, 0.5)
    assert arc.rect == ring.rect
    assert arc.start == ring.start
    assert arc.start_angle == 0.0
    assert arc.sweep_angle == pytest.approx(179.5)


#============================================
def test_zero_fraction_is_empty(ring):
    arc = RingPathBuilder.partial_path(ring, 0.0)
    assert arc.is_empty()
    assert arc.length == 0.0


#============================================
def test_sweep_moves_clockwise(ring):
    pts = RingPathBuilder.partial_path(ring, 90.0 / 359.0).to_polyline()
    # a quarter turn clockwise on screen ends at the bottom
    assert pts[-1] == pytest.approx([50.0, 96.0])


#============================================
def test_full_arc_leaves_one_degree_gap(ring):
    end = Point.from_array(RingPathBuilder.partial_path(ring, 1.0).to_polyline()[-1])
    rightmost = Point(96.0, 50.0)
    gap = end.distance_to(rightmost)
    assert gap == pytest.approx(2 * 46.0 * math.sin(math.radians(0.5)), rel=1e-6)
    assert 0.0 < gap < 1.0


#============================================
def test_arc_length(ring):
    arc = RingPathBuilder.partial_path(ring, 1.0)
    assert arc.length == pytest.approx(2 * math.pi * 46.0 * 359.0 / 360.0, rel=1e-3)


#============================================
def test_circumference(ring):
    assert ring.circumference == pytest.approx(2 * math.pi * 46.0, rel=1e-3)


#============================================
def test_to_polyline_default_resolution(ring):
    pts = RingPathBuilder.partial_path(ring, 0.5).to_polyline()
    # about one segment per degree
    assert pts.shape == (181, 2)
    assert pts[0] == pytest.approx([96.0, 50.0])
