from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Sequence, Tuple

from planekit.geometry.errors import IllegalParameters
from planekit.geometry.point import Point
from planekit.geometry.tolerance import eq_0
from planekit.geometry.vector import Vector

if TYPE_CHECKING:
    from planekit.geometry.box import Box
    from planekit.geometry.segment import Segment


def _default_norm() -> Vector:
    return Vector(0.0, 1.0)


def _xy(value: Any, what: str) -> Tuple[float, float]:
    if isinstance(value, (Point, Vector)):
        return (value.x, value.y)
    if isinstance(value, Mapping):
        try:
            return (float(value["x"]), float(value["y"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise IllegalParameters(f"line descriptor field {what!r} needs numeric x and y") from exc
    if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
        try:
            return (float(value[0]), float(value[1]))
        except (TypeError, ValueError) as exc:
            raise IllegalParameters(f"line descriptor field {what!r} must be numeric") from exc
    raise IllegalParameters(f"line descriptor field {what!r} is malformed: {value!r}")


@dataclass(frozen=True)
class Line:
    """Infinite line: the points ``P`` with ``norm . (P - pt) == 0``.

    ``norm`` is kept at unit length; a zero normal is rejected. The default
    line passes through the origin with normal ``(0, 1)``, i.e. the x axis.
    """

    pt: Point = field(default_factory=Point)
    norm: Vector = field(default_factory=_default_norm)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.pt, Point) or not isinstance(self.norm, Vector):
            raise IllegalParameters("line needs a Point and a normal Vector")
        if self.norm.is_zero():
            raise IllegalParameters("line normal cannot be the zero vector")
        object.__setattr__(self, "norm", self.norm.normalize())

    @staticmethod
    def points2norm(pt1: Point, pt2: Point) -> Vector:
        """Unit normal of the line through two points: the direction rotated 90 deg ccw."""
        if not isinstance(pt1, Point) or not isinstance(pt2, Point):
            raise IllegalParameters("line through two points needs two Points")
        if pt1.equal_to(pt2):
            raise IllegalParameters("line through two points needs distinct points")
        return Vector.between(pt1, pt2).normalize().rotate90ccw()

    @classmethod
    def from_two_points(cls, pt1: Point, pt2: Point) -> "Line":
        return cls(pt1, cls.points2norm(pt1, pt2))

    @classmethod
    def from_point_and_normal(cls, pt: Point, norm: Vector) -> "Line":
        if not isinstance(pt, Point) or not isinstance(norm, Vector):
            raise IllegalParameters("line needs a Point and a normal Vector")
        if norm.is_zero():
            raise IllegalParameters("line normal cannot be the zero vector")
        return cls(pt.clone(), norm.normalize())

    @classmethod
    def from_descriptor(cls, descriptor: Mapping[str, Any]) -> "Line":
        if not isinstance(descriptor, Mapping) or descriptor.get("name") != "line":
            raise IllegalParameters("line descriptor must be a mapping with name == 'line'")
        if "pt" not in descriptor or "norm" not in descriptor:
            raise IllegalParameters("line descriptor needs 'pt' and 'norm'")
        pt = Point(*_xy(descriptor["pt"], "pt"))
        norm = Vector(*_xy(descriptor["norm"], "norm"))
        return cls(pt, norm)

    def clone(self) -> "Line":
        return Line(self.pt.clone(), self.norm.clone())

    @property
    def slope(self) -> float:
        """Angle of the line direction from the x axis, in ``[0, 2*pi)``."""
        return Vector(self.norm.y, -self.norm.x).slope

    @property
    def standard(self) -> Tuple[float, float, float]:
        """Coefficients ``(A, B, C)`` of ``Ax + By = C``."""
        A = self.norm.x
        B = self.norm.y
        C = self.norm.dot(Vector(self.pt.x, self.pt.y))
        return (A, B, C)

    def parallel_to(self, other: "Line") -> bool:
        """True for parallel and for coincident lines."""
        return eq_0(self.norm.cross(other.norm))

    def incident_to(self, other: "Line") -> bool:
        return self.parallel_to(other) and other.contains(self.pt)

    def contains(self, pt: Point) -> bool:
        if self.pt.equal_to(pt):
            return True
        # Orthogonal to the normal means along the line.
        return eq_0(self.norm.dot(Vector.between(self.pt, pt)))

    def intersect(self, shape: object) -> List[Point]:
        from planekit.geometry.intersections import intersect

        return intersect(self, shape)

    def distance_to(self, shape: object) -> Tuple[float, "Segment"]:
        """Distance and shortest segment, the segment starting on this line."""
        from planekit.geometry.distance import distance

        return distance(self, shape)

    def svg(self, box: "Box", attrs: Optional[Mapping[str, Any]] = None) -> str:
        from planekit.geometry.svg import line_svg

        return line_svg(self, box, attrs)

    def to_dict(self) -> dict:
        return {"pt": self.pt.to_dict(), "norm": self.norm.to_dict(), "name": "line"}


def line(*args: Any) -> Line:
    """Build a line from any of the accepted argument shapes.

    ``line()``, ``line(descriptor)``, ``line(p1, p2)``, ``line(pt, norm)`` and
    ``line(norm, pt)``. Anything else raises :class:`IllegalParameters`.
    """
    if not args:
        return Line()
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0].get("name") == "line":
        return Line.from_descriptor(args[0])
    if len(args) == 2:
        a1, a2 = args
        if isinstance(a1, Point) and isinstance(a2, Point):
            return Line.from_two_points(a1, a2)
        if isinstance(a1, Point) and isinstance(a2, Vector):
            return Line.from_point_and_normal(a1, a2)
        if isinstance(a1, Vector) and isinstance(a2, Point):
            return Line.from_point_and_normal(a2, a1)
    raise IllegalParameters(f"cannot build a line from {tuple(type(a).__name__ for a in args)}")
