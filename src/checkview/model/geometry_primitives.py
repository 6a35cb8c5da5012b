"""
Geometric Primitives for the check mark and ring paths.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt

@dataclass(frozen=True)
class Vector:
    """
    A vector in the drawing plane representing direction and magnitude.
    """
    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2)

    def normalize(self) -> Vector:
        mag = self.magnitude
        if mag == 0.0: return Vector(0.0, 0.0)
        return self / mag


@dataclass(frozen=True)
class Point:
    """A point in drawing space (y grows downwards, like the screen)."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Vector or Point from a Point.")

    def distance_to(self, other: Point) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def is_close(self, other: Point, tol: float = 1e-4) -> bool:
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])

    @classmethod
    def from_array(cls, a: npt.NDArray[np.float64]) -> Point:
        return cls(float(a[0]), float(a[1]))


@dataclass(frozen=True)
class Rect:
    """
    Axis aligned rectangle given by its edges, in drawing space.

    Edges are not normalized: a rect with right < left has a negative width
    and is treated as empty.
    """
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Point:
        return Point((self.left + self.right) / 2, (self.top + self.bottom) / 2)

    def is_empty(self) -> bool:
        return self.width <= 0.0 or self.height <= 0.0

    def is_square(self, tol: float = 1e-6) -> bool:
        return abs(self.width - self.height) <= tol

    def inset(self, dx: float, dy: float) -> Rect:
        """Shrink the rect by dx on the left/right and dy on the top/bottom."""
        return Rect(self.left + dx, self.top + dy, self.right - dx, self.bottom - dy)

    def point_at(self, fx: float, fy: float) -> Point:
        """Point at fractional offsets (fx, fy) from the top-left corner."""
        return Point(self.left + self.width * fx, self.top + self.height * fy)
