from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Tuple, Union, overload

import numpy as np

from planekit.geometry.tolerance import eq, eq_0, gt
from planekit.geometry.vector import Vector

if TYPE_CHECKING:
    from planekit.geometry.box import Box
    from planekit.geometry.line import Line
    from planekit.geometry.segment import Segment


@dataclass(frozen=True, eq=False)
class Point:
    """Position in the plane. Equality is tolerance based."""

    x: float = 0.0
    y: float = 0.0

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.equal_to(other)

    @overload
    def __sub__(self, other: "Point") -> Vector: ...

    @overload
    def __sub__(self, other: Vector) -> "Point": ...

    def __sub__(self, other: Union["Point", Vector]) -> Union[Vector, "Point"]:
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        return Point(self.x - other.x, self.y - other.y)

    def __add__(self, other: Vector) -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def equal_to(self, other: "Point") -> bool:
        return eq(self.x, other.x) and eq(self.y, other.y)

    def clone(self) -> "Point":
        return Point(self.x, self.y)

    def translate(self, dx: Union[Vector, float], dy: Optional[float] = None) -> "Point":
        if isinstance(dx, Vector):
            return Point(self.x + dx.x, self.y + dx.y)
        return Point(self.x + float(dx), self.y + float(dy or 0.0))

    def projection_on(self, line: "Line") -> "Point":
        if self.equal_to(line.pt):
            return self.clone()
        vec = Vector.between(self, line.pt)
        if eq_0(vec.cross(line.norm)):
            return line.pt.clone()
        return self.translate(line.norm * vec.dot(line.norm))

    def left_to(self, line: "Line") -> bool:
        """True when the point is strictly on the side ``line.norm`` points to."""
        return gt(Vector.between(line.pt, self).dot(line.norm), 0.0)

    def on(self, shape: object) -> bool:
        return bool(shape.contains(self))  # type: ignore[attr-defined]

    def contains(self, other: "Point") -> bool:
        return self.equal_to(other)

    def intersect(self, shape: object) -> List["Point"]:
        from planekit.geometry.intersections import intersect

        return intersect(self, shape)

    def distance_to(self, shape: object) -> Tuple[float, "Segment"]:
        from planekit.geometry.distance import distance

        return distance(self, shape)

    @property
    def box(self) -> "Box":
        from planekit.geometry.box import Box

        return Box(self.x, self.y, self.x, self.y)

    def svg(self, attrs: Optional[Mapping[str, Any]] = None) -> str:
        from planekit.geometry.svg import point_svg

        return point_svg(self, attrs)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "name": "point"}
