from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from math import sqrt, pi
import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

from checkview.model.geometry_primitives import Point, Rect

def deg2rad(degrees: float) -> float:
    return degrees * pi / 180

def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between (x1, y1) and (x2, y2)."""
    x_abs = abs(x1 - x2)
    y_abs = abs(y1 - y2)
    return sqrt(y_abs * y_abs + x_abs * x_abs)

def ellipse_to_polyline(
    rect: Rect,
    start_angle: float,
    sweep_angle: float,
    n_segments: int
) -> np.ndarray:
    """
    Discretize the arc of the ellipse inscribed in `rect` into an (N+1, 2) polyline.

    Angles are in degrees, 0 at the rightmost point, positive sweeps run
    clockwise on screen (y axis points down).

    Args:
        rect: Bounding rectangle of the ellipse.
        start_angle: Angle of the first point, in degrees.
        sweep_angle: Angular extent of the arc, in degrees.
        n_segments: Number of segments to use for discretization.

    Returns:
        An array of shape (n_segments + 1, 2) with the (x, y) coordinates along the arc.
    """
    if n_segments < 1:
        raise ValueError(f"n_segments must be positive, got {n_segments}.")

    center = rect.center
    a = rect.width / 2
    b = rect.height / 2
    theta = np.linspace(deg2rad(start_angle), deg2rad(start_angle + sweep_angle), n_segments + 1)
    return np.c_[center.x + a * np.cos(theta), center.y + b * np.sin(theta)]


class PolylineMeasure:
    """
    Arc-length measurement of a path made of straight segments.

    The path is measured once on construction; `point_at` then samples the
    point at any arc-length offset along it.
    """

    def __init__(self, points: Sequence[Point] | npt.NDArray[np.float64]) -> None:
        if len(points) and isinstance(points[0], Point):
            points = [p.to_array() for p in points]
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)

        if pts.shape[0] == 0:
            raise ValueError("Cannot measure an empty path.")

        self._points = pts
        seg_lengths = np.linalg.norm(np.diff(pts, axis=0), axis=1)
        # cumulative arc length at every vertex, starting at 0
        self._cumulative = np.concatenate(([0.0], np.cumsum(seg_lengths)))

    @property
    def length(self) -> float:
        return float(self._cumulative[-1])

    def point_at(self, dist: float) -> Point:
        """
        Locate the point at arc-length `dist` from the start of the path.

        Distances outside [0, length] are clamped to the first/last point.
        """
        if dist <= 0.0 or self._points.shape[0] == 1:
            return Point.from_array(self._points[0])
        if dist >= self.length:
            return Point.from_array(self._points[-1])

        # first vertex whose cumulative length reaches dist closes the segment
        i = int(np.searchsorted(self._cumulative, dist, side="left"))
        seg_start = self._cumulative[i - 1]
        seg_len = self._cumulative[i] - seg_start
        if seg_len == 0.0:
            return Point.from_array(self._points[i])

        t = (dist - seg_start) / seg_len
        p = self._points[i - 1] + (self._points[i] - self._points[i - 1]) * t
        return Point.from_array(p)
