from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

import numpy as np

from planekit.geometry.errors import IllegalParameters
from planekit.geometry.point import Point
from planekit.geometry.segment import Segment
from planekit.geometry.tolerance import ge, gt, le, lt


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle, used for clipping and quick rejection."""

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def __post_init__(self) -> None:
        vals = [float(v) for v in (self.xmin, self.ymin, self.xmax, self.ymax)]
        if vals[0] > vals[2] or vals[1] > vals[3]:
            raise IllegalParameters(f"inverted box: {vals}")
        for name, v in zip(("xmin", "ymin", "xmax", "ymax"), vals):
            object.__setattr__(self, name, v)

    @staticmethod
    def from_points(points: Iterable[Point]) -> "Box":
        arr = np.array([[p.x, p.y] for p in points], dtype=float)
        if arr.size == 0:
            raise IllegalParameters("cannot build a box from no points")
        lo = arr.min(axis=0)
        hi = arr.max(axis=0)
        return Box(float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))

    @property
    def low(self) -> Point:
        return Point(self.xmin, self.ymin)

    @property
    def high(self) -> Point:
        return Point(self.xmax, self.ymax)

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def center(self) -> Point:
        return Point((self.xmin + self.xmax) * 0.5, (self.ymin + self.ymax) * 0.5)

    def merge(self, other: "Box") -> "Box":
        return Box(
            min(self.xmin, other.xmin),
            min(self.ymin, other.ymin),
            max(self.xmax, other.xmax),
            max(self.ymax, other.ymax),
        )

    def not_intersect(self, other: "Box") -> bool:
        return (
            lt(self.xmax, other.xmin)
            or gt(self.xmin, other.xmax)
            or lt(self.ymax, other.ymin)
            or gt(self.ymin, other.ymax)
        )

    def intersect(self, other: "Box") -> bool:
        return not self.not_intersect(other)

    def contains(self, pt: Point) -> bool:
        return ge(pt.x, self.xmin) and le(pt.x, self.xmax) and ge(pt.y, self.ymin) and le(pt.y, self.ymax)

    def to_points(self) -> List[Point]:
        return [
            Point(self.xmin, self.ymin),
            Point(self.xmax, self.ymin),
            Point(self.xmax, self.ymax),
            Point(self.xmin, self.ymax),
        ]

    def to_segments(self) -> List[Segment]:
        pts = self.to_points()
        return [Segment(pts[i], pts[(i + 1) % len(pts)]) for i in range(len(pts))]

    def svg(self, attrs: Optional[Mapping[str, Any]] = None) -> str:
        from planekit.geometry.svg import box_svg

        return box_svg(self, attrs)

    def to_dict(self) -> dict:
        return {"xmin": self.xmin, "ymin": self.ymin, "xmax": self.xmax, "ymax": self.ymax, "name": "box"}
