from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

import numpy as np

from planekit.geometry.errors import IllegalParameters
from planekit.geometry.tolerance import PI_X2, eq, eq_0

if TYPE_CHECKING:
    from planekit.geometry.point import Point


@dataclass(frozen=True, eq=False)
class Vector:
    """Free 2D vector: a direction and magnitude not bound to a location."""

    x: float = 0.0
    y: float = 0.0

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def between(cls, start: "Point", end: "Point") -> "Vector":
        """Vector pointing from ``start`` to ``end``."""
        return cls(end.x - start.x, end.y - start.y)

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector":
        return Vector(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector":
        return Vector(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equal_to(other)

    def equal_to(self, other: "Vector") -> bool:
        return eq(self.x, other.x) and eq(self.y, other.y)

    def clone(self) -> "Vector":
        return Vector(self.x, self.y)

    def dot(self, other: "Vector") -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector") -> float:
        """Z component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def is_zero(self) -> bool:
        return eq_0(self.x) and eq_0(self.y)

    def normalize(self) -> "Vector":
        """Return unit vector."""
        if self.is_zero():
            raise IllegalParameters("zero vector cannot be normalized")
        L = self.length
        return Vector(self.x / L, self.y / L)

    def rotate90ccw(self) -> "Vector":
        return Vector(-self.y, self.x)

    def rotate90cw(self) -> "Vector":
        return Vector(self.y, -self.x)

    def rotate(self, angle: float) -> "Vector":
        c, s = math.cos(angle), math.sin(angle)
        return Vector(self.x * c - self.y * s, self.x * s + self.y * c)

    def invert(self) -> "Vector":
        return -self

    @property
    def slope(self) -> float:
        """Angle from the positive x axis, in ``[0, 2*pi)``."""
        angle = math.atan2(self.y, self.x)
        if angle < 0.0:
            angle += PI_X2
        return angle

    def angle_to(self, other: "Vector") -> float:
        """Counter-clockwise angle from this vector to ``other``, in ``[0, 2*pi)``."""
        a = other.slope - self.slope
        if a < 0.0:
            a += PI_X2
        return a

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "name": "vector"}
