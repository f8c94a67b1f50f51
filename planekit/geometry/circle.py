from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Tuple

from planekit.geometry.errors import IllegalParameters
from planekit.geometry.point import Point
from planekit.geometry.tolerance import le
from planekit.geometry.vector import Vector

if TYPE_CHECKING:
    from planekit.geometry.arc import Arc
    from planekit.geometry.box import Box
    from planekit.geometry.segment import Segment


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        r = float(self.radius)
        if not r > 0.0:
            raise IllegalParameters(f"circle radius must be positive, got {self.radius!r}")
        object.__setattr__(self, "radius", r)

    def clone(self) -> "Circle":
        return Circle(self.center.clone(), self.radius)

    @property
    def start(self) -> Point:
        # Same start as the full-circle arc returned by to_arc().
        return Point(self.center.x - self.radius, self.center.y)

    @property
    def area(self) -> float:
        return math.pi * self.radius * self.radius

    @property
    def box(self) -> "Box":
        from planekit.geometry.box import Box

        c, r = self.center, self.radius
        return Box(c.x - r, c.y - r, c.x + r, c.y + r)

    def to_arc(self, counter_clockwise: bool = True) -> "Arc":
        from planekit.geometry.arc import Arc

        return Arc(self.center, self.radius, math.pi, -math.pi, counter_clockwise)

    def contains(self, pt: Point) -> bool:
        """Closed-disk membership."""
        return le(Vector.between(self.center, pt).length, self.radius)

    def intersect(self, shape: object) -> List[Point]:
        from planekit.geometry.intersections import intersect

        return intersect(self, shape)

    def distance_to(self, shape: object) -> Tuple[float, "Segment"]:
        from planekit.geometry.distance import distance

        return distance(self, shape)

    def svg(self, attrs: Optional[Mapping[str, Any]] = None) -> str:
        from planekit.geometry.svg import circle_svg

        return circle_svg(self, attrs)

    def to_dict(self) -> dict:
        return {"center": self.center.to_dict(), "radius": self.radius, "name": "circle"}
