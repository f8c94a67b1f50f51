from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Tuple

from planekit.geometry.errors import IllegalParameters
from planekit.geometry.point import Point
from planekit.geometry.tolerance import EPS_POS, PI_X2, eq, le, lt
from planekit.geometry.vector import Vector

if TYPE_CHECKING:
    from planekit.geometry.box import Box
    from planekit.geometry.circle import Circle
    from planekit.geometry.segment import Segment


def norm_angle(a: float) -> float:
    out = float(a) % PI_X2
    if out < 0.0:
        out += PI_X2
    return out


def ccw_delta(a0: float, a1: float) -> float:
    """Counter-clockwise angular distance from ``a0`` to ``a1``, in ``[0, 2*pi)``."""
    d = norm_angle(a1) - norm_angle(a0)
    if d < 0.0:
        d += PI_X2
    return d


@dataclass(frozen=True)
class Arc:
    """Circular arc from ``start_angle`` to ``end_angle`` (radians).

    ``counter_clockwise`` selects the direction of travel from start to end.
    Angles are not normalised on construction, so a full circle may be given
    as any pair of angles ``2*pi`` apart.
    """

    center: Point
    radius: float
    start_angle: float = 0.0
    end_angle: float = PI_X2
    counter_clockwise: bool = True

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        r = float(self.radius)
        if not r > 0.0:
            raise IllegalParameters(f"arc radius must be positive, got {self.radius!r}")
        object.__setattr__(self, "radius", r)
        object.__setattr__(self, "start_angle", float(self.start_angle))
        object.__setattr__(self, "end_angle", float(self.end_angle))
        object.__setattr__(self, "counter_clockwise", bool(self.counter_clockwise))

    def clone(self) -> "Arc":
        return Arc(self.center.clone(), self.radius, self.start_angle, self.end_angle, self.counter_clockwise)

    def _at_angle(self, a: float) -> Point:
        return Point(
            self.center.x + self.radius * math.cos(a),
            self.center.y + self.radius * math.sin(a),
        )

    @property
    def start(self) -> Point:
        return self._at_angle(self.start_angle)

    @property
    def end(self) -> Point:
        return self._at_angle(self.end_angle)

    @property
    def sweep(self) -> float:
        if eq(self.start_angle, self.end_angle):
            return 0.0
        if eq(abs(self.start_angle - self.end_angle), PI_X2):
            return PI_X2
        if self.counter_clockwise:
            return ccw_delta(self.start_angle, self.end_angle)
        return ccw_delta(self.end_angle, self.start_angle)

    @property
    def length(self) -> float:
        return self.radius * self.sweep

    def is_full_circle(self) -> bool:
        return eq(self.sweep, PI_X2)

    def delta_from_start(self, a: float) -> float:
        """Angular distance travelled from the start to angle ``a``."""
        if self.counter_clockwise:
            return ccw_delta(self.start_angle, a)
        return ccw_delta(a, self.start_angle)

    def contains_angle(self, a: float) -> bool:
        if self.is_full_circle():
            return True
        d = self.delta_from_start(a)
        # A hair before the start wraps to just under 2*pi.
        return le(d, self.sweep) or eq(d, PI_X2)

    def contains(self, pt: Point) -> bool:
        v = Vector.between(self.center, pt)
        if not eq(v.length, self.radius):
            return False
        if pt.equal_to(self.start) or pt.equal_to(self.end):
            return True
        return self.contains_angle(v.slope)

    def point_at(self, t: float) -> Point:
        tt = min(1.0, max(0.0, float(t)))
        sw = self.sweep * tt
        a = self.start_angle + sw if self.counter_clockwise else self.start_angle - sw
        return self._at_angle(a)

    def middle(self) -> Point:
        return self.point_at(0.5)

    def reverse(self) -> "Arc":
        return Arc(self.center, self.radius, self.end_angle, self.start_angle, not self.counter_clockwise)

    def to_circle(self) -> "Circle":
        from planekit.geometry.circle import Circle

        return Circle(self.center, self.radius)

    @property
    def box(self) -> "Box":
        from planekit.geometry.box import Box

        pts = [self.start, self.end]
        for k in range(4):
            a = k * math.pi * 0.5
            if self.contains_angle(a):
                pts.append(self._at_angle(a))
        return Box.from_points(pts)

    def nearest_point(self, p: Point) -> Point:
        v = Vector.between(self.center, p)
        if v.length <= EPS_POS:
            return self.start
        ang = v.slope
        if self.contains_angle(ang):
            return self._at_angle(ang)
        ds = Vector.between(p, self.start).length
        de = Vector.between(p, self.end).length
        return self.start if not lt(de, ds) else self.end

    def intersect(self, shape: object) -> List[Point]:
        from planekit.geometry.intersections import intersect

        return intersect(self, shape)

    def distance_to(self, shape: object) -> Tuple[float, "Segment"]:
        from planekit.geometry.distance import distance

        return distance(self, shape)

    def svg(self, attrs: Optional[Mapping[str, Any]] = None) -> str:
        from planekit.geometry.svg import arc_svg

        return arc_svg(self, attrs)

    def to_dict(self) -> dict:
        return {
            "center": self.center.to_dict(),
            "radius": self.radius,
            "start_angle": self.start_angle,
            "end_angle": self.end_angle,
            "counter_clockwise": self.counter_clockwise,
            "name": "arc",
        }
