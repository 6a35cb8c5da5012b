"""
Ring Path
=========
Geometry of the circle drawn around the check mark.

The ring starts at its rightmost point and sweeps clockwise (on screen)
as the fraction grows. It never closes: a full fraction sweeps 359 degrees.
"""
from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from checkview import config
from checkview.model.geometry_primitives import Point, Rect
from checkview.model.geometry_utils import PolylineMeasure, ellipse_to_polyline
from checkview.utils import clamp_fraction


@dataclass(frozen=True)
class RingGeometry:
    """Drawable area of the ring for one layout."""
    rect: Rect  # already inset by half the stroke width
    start: Point

    @property
    def circumference(self) -> float:
        """Arc length of the full ellipse inscribed in `rect`, measured by sampling."""
        return ArcDescriptor(self.rect, self.start, 0.0, 360.0).length


@dataclass(frozen=True)
class ArcDescriptor:
    """
    Arc of the ring visible at one fraction.

    Angles are in degrees; 0 is the rightmost point and positive sweeps run
    clockwise on screen. Renderers with a y-up angle convention (e.g. Qt's
    QPainterPath.arcTo) must negate the angles.
    """
    rect: Rect
    start: Point
    start_angle: float
    sweep_angle: float

    def is_empty(self) -> bool:
        return self.sweep_angle == 0.0 or self.rect.is_empty()

    def to_polyline(self, n_segments: int | None = None) -> np.ndarray:
        """Sample the arc into an (N, 2) polyline, about one segment per degree by default."""
        if n_segments is None:
            n_segments = max(1, math.ceil(abs(self.sweep_angle)))
        return ellipse_to_polyline(self.rect, self.start_angle, self.sweep_angle, n_segments)

    @property
    def length(self) -> float:
        """Arc length of the swept part."""
        if self.is_empty():
            return 0.0
        return PolylineMeasure(self.to_polyline()).length


class RingPathBuilder:
    """Builds ring geometry and its partial arcs. Stateless."""

    @staticmethod
    def build(rect: Rect, stroke_width: float) -> RingGeometry:
        """
        Inset `rect` by half the stroke width so the stroke stays inside it.

        Raises:
            ValueError: If the stroke width is negative.
        """
        if stroke_width < 0.0:
            raise ValueError(f"Stroke width must be non-negative, got {stroke_width}.")

        half = stroke_width / 2
        inset = rect.inset(half, half)
        return RingGeometry(rect=inset, start=Point(inset.right, inset.height / 2))

    @staticmethod
    def sweep_angle(fraction: float) -> float:
        return config.RING_MAX_SWEEP_DEGREES * clamp_fraction(fraction)

    @staticmethod
    def partial_path(geom: RingGeometry, fraction: float) -> ArcDescriptor:
        return ArcDescriptor(
            rect=geom.rect,
            start=geom.start,
            start_angle=0.0,
            sweep_angle=RingPathBuilder.sweep_angle(fraction),
        )
