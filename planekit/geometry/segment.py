from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Tuple

from planekit.geometry.point import Point
from planekit.geometry.tolerance import eq_0
from planekit.geometry.vector import Vector

if TYPE_CHECKING:
    from planekit.geometry.box import Box


@dataclass(frozen=True)
class Segment:
    start: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)

    __hash__ = None  # type: ignore[assignment]

    def clone(self) -> "Segment":
        return Segment(self.start.clone(), self.end.clone())

    @property
    def length(self) -> float:
        return Vector.between(self.start, self.end).length

    def is_zero_length(self) -> bool:
        return self.start.equal_to(self.end)

    def reverse(self) -> "Segment":
        return Segment(self.end, self.start)

    def tangent_in_start(self) -> Vector:
        return Vector.between(self.start, self.end).normalize()

    def tangent_in_end(self) -> Vector:
        return Vector.between(self.end, self.start).normalize()

    def middle(self) -> Point:
        return self.point_at(0.5)

    def point_at(self, t: float) -> Point:
        tt = min(1.0, max(0.0, float(t)))
        return Point(
            self.start.x + (self.end.x - self.start.x) * tt,
            self.start.y + (self.end.y - self.start.y) * tt,
        )

    @property
    def box(self) -> "Box":
        from planekit.geometry.box import Box

        return Box.from_points([self.start, self.end])

    def contains(self, pt: Point) -> bool:
        from planekit.geometry.distance import point_to_segment

        return eq_0(point_to_segment(pt, self)[0])

    def intersect(self, shape: object) -> List[Point]:
        from planekit.geometry.intersections import intersect

        return intersect(self, shape)

    def distance_to(self, shape: object) -> Tuple[float, "Segment"]:
        from planekit.geometry.distance import distance

        return distance(self, shape)

    def svg(self, attrs: Optional[Mapping[str, Any]] = None) -> str:
        from planekit.geometry.svg import segment_svg

        return segment_svg(self, attrs)

    def to_dict(self) -> dict:
        return {"start": self.start.to_dict(), "end": self.end.to_dict(), "name": "segment"}
