"""
Check Mark Path
===============
Geometry of the check mark and its partial paths.

The check mark is a two leg polyline: a short (minor) leg from `start` down
to the `pivot`, then a long (major) leg up to `end`. A partial path is the
part of that polyline drawn after a given fraction of its total arc length,
so the stroke advances at a constant visual speed across both legs.
"""
from __future__ import annotations

from dataclasses import dataclass

from checkview import config
from checkview.model.geometry_primitives import Point, Rect
from checkview.model.geometry_utils import PolylineMeasure, distance
from checkview.utils import clamp_fraction


@dataclass(frozen=True)
class CheckGeometry:
    """
    Anchor points of the check mark for one layout.

    Rebuilt by the layout callback whenever the drawing rect changes.
    """
    start: Point
    pivot: Point
    end: Point
    minor_length: float  # start -> pivot
    major_length: float  # pivot -> end

    @property
    def total_length(self) -> float:
        return self.minor_length + self.major_length

    @property
    def pivot_fraction(self) -> float:
        """Fraction of the total length at which the stroke reaches the pivot (0 if degenerate)."""
        total = self.total_length
        if total == 0.0:
            return 0.0
        return self.minor_length / total

    def is_degenerate(self) -> bool:
        return self.total_length == 0.0


@dataclass(frozen=True)
class PartialPath:
    """The visible polyline of a stroke at one fraction. Empty means nothing to draw."""
    points: tuple[Point, ...]

    def __len__(self) -> int:
        return len(self.points)

    def is_empty(self) -> bool:
        return len(self.points) == 0

    @property
    def last_point(self) -> Point | None:
        return self.points[-1] if self.points else None


class CheckPathBuilder:
    """Builds check mark geometry and its partial paths. Stateless."""

    @staticmethod
    def build(rect: Rect) -> CheckGeometry:
        """
        Place the anchors inside `rect` and measure both legs.

        An empty rect (zero or negative width or height) gets zero-length
        legs, so its partial paths draw nothing.
        """
        start = rect.point_at(*config.CHECK_START_FRACTION)
        pivot = rect.point_at(*config.CHECK_PIVOT_FRACTION)
        end = rect.point_at(*config.CHECK_END_FRACTION)

        if rect.is_empty():
            return CheckGeometry(start=start, pivot=pivot, end=end, minor_length=0.0, major_length=0.0)

        return CheckGeometry(
            start=start,
            pivot=pivot,
            end=end,
            minor_length=distance(start.x, start.y, pivot.x, pivot.y),
            major_length=distance(pivot.x, pivot.y, end.x, end.y),
        )

    @staticmethod
    def full_path(geom: CheckGeometry) -> PartialPath:
        """What does the check mark path look like at its full length?"""
        return PartialPath((geom.start, geom.pivot, geom.end))

    @staticmethod
    def partial_path(geom: CheckGeometry, fraction: float) -> PartialPath:
        """
        What does the check mark path look like at `fraction` of its total length?

        Args:
            geom: Check mark geometry of the current layout.
            fraction: Completion in [0, 1]; values outside are clamped.

        Returns:
            The visible polyline: [start] at 0, [start, P] on the minor leg,
            [start, pivot] exactly at the pivot, [start, pivot, P] on the major leg.
            Empty for degenerate geometry.
        """
        fraction = clamp_fraction(fraction)

        if geom.is_degenerate():
            return PartialPath(())
        if fraction == 0.0:
            return PartialPath((geom.start,))
        if fraction == 1.0:
            return CheckPathBuilder.full_path(geom)

        total_length = geom.total_length
        pivot_fraction = geom.pivot_fraction

        if fraction == pivot_fraction:
            return PartialPath((geom.start, geom.pivot))

        if fraction < pivot_fraction:
            minor_fraction = fraction / pivot_fraction
            dist = geom.minor_length * minor_fraction
            point = PolylineMeasure((geom.start, geom.pivot)).point_at(dist)
            return PartialPath((geom.start, point))

        # The remainder is scaled by the combined length, not by the major leg alone.
        remainder = fraction - pivot_fraction
        dist = total_length * remainder
        point = PolylineMeasure((geom.pivot, geom.end)).point_at(dist)
        return PartialPath((geom.start, geom.pivot, point))
