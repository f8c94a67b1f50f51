from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from planekit.geometry.arc import Arc
from planekit.geometry.box import Box
from planekit.geometry.errors import IllegalParameters
from planekit.geometry.point import Point
from planekit.geometry.segment import Segment
from planekit.geometry.tolerance import EPS_POS

Edge = Union[Segment, Arc]


@dataclass(frozen=True)
class Face:
    """Closed chain of segment and arc edges."""

    edges: Tuple[Edge, ...]

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        edges = tuple(self.edges)
        if not edges:
            raise IllegalParameters("face needs at least one edge")
        for e in edges:
            if not isinstance(e, (Segment, Arc)):
                raise IllegalParameters(f"face edge must be a Segment or Arc, got {type(e).__name__}")
        for i, e in enumerate(edges):
            nxt = edges[(i + 1) % len(edges)]
            if not e.end.equal_to(nxt.start):
                raise IllegalParameters(f"face edge {i} does not connect to edge {(i + 1) % len(edges)}")
        object.__setattr__(self, "edges", edges)

    @staticmethod
    def from_points(points: Sequence[Point]) -> "Face":
        pts = list(points)
        if len(pts) > 1 and pts[0].equal_to(pts[-1]):
            pts = pts[:-1]
        if len(pts) < 3:
            raise IllegalParameters("polygonal face requires at least 3 points")
        return Face(tuple(Segment(pts[i], pts[(i + 1) % len(pts)]) for i in range(len(pts))))

    @property
    def vertices(self) -> List[Point]:
        return [e.start for e in self.edges]

    @property
    def box(self) -> Box:
        out = self.edges[0].box
        for e in self.edges[1:]:
            out = out.merge(e.box)
        return out

    def to_dict(self) -> List[dict]:
        return [e.to_dict() for e in self.edges]


def _segment_crossing(seg: Segment, pt: Point) -> int:
    x1, y1 = seg.start.x, seg.start.y
    x2, y2 = seg.end.x, seg.end.y
    if ((y1 > pt.y) != (y2 > pt.y)) and (pt.x < (x2 - x1) * (pt.y - y1) / (y2 - y1) + x1):
        return 1
    return 0


def _arc_crossings(arc: Arc, pt: Point) -> int:
    # Split at the top and bottom of the circle so every piece is y-monotone.
    sweep = arc.sweep
    ts = [0.0, 1.0]
    for a in (0.5 * math.pi, 1.5 * math.pi):
        d = arc.delta_from_start(a)
        if EPS_POS < d < sweep - EPS_POS:
            ts.append(d / sweep)
    ts.sort()

    cx, cy, r = arc.center.x, arc.center.y, arc.radius
    count = 0
    for t0, t1 in zip(ts, ts[1:]):
        p0 = arc.point_at(t0)
        p1 = arc.point_at(t1)
        if (p0.y > pt.y) == (p1.y > pt.y):
            continue
        side = 1.0 if arc.point_at((t0 + t1) * 0.5).x >= cx else -1.0
        dy = pt.y - cy
        x = cx + side * math.sqrt(max(r * r - dy * dy, 0.0))
        if pt.x < x:
            count += 1
    return count


@dataclass(frozen=True)
class Polygon:
    """Set of closed faces. Nested faces act as holes (even-odd rule)."""

    faces: Tuple[Face, ...] = field(default_factory=tuple)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "faces", tuple(self.faces))

    @staticmethod
    def from_points(points: Sequence[Point]) -> "Polygon":
        return Polygon((Face.from_points(points),))

    def add_face(self, face: Union[Face, Sequence[Point]]) -> "Polygon":
        f = face if isinstance(face, Face) else Face.from_points(face)
        return Polygon(self.faces + (f,))

    def clone(self) -> "Polygon":
        return Polygon(self.faces)

    def is_empty(self) -> bool:
        return not self.faces

    @property
    def edges(self) -> List[Edge]:
        return [e for f in self.faces for e in f.edges]

    @property
    def vertices(self) -> List[Point]:
        return [v for f in self.faces for v in f.vertices]

    @property
    def box(self) -> Box:
        if self.is_empty():
            raise IllegalParameters("empty polygon has no bounding box")
        out = self.faces[0].box
        for f in self.faces[1:]:
            out = out.merge(f.box)
        return out

    def contains(self, pt: Point) -> bool:
        """Point-in-polygon, boundary included."""
        if self.is_empty():
            return False
        if any(e.contains(pt) for e in self.edges):
            return True
        crossings = 0
        for e in self.edges:
            if isinstance(e, Segment):
                crossings += _segment_crossing(e, pt)
            else:
                crossings += _arc_crossings(e, pt)
        return crossings % 2 == 1

    def intersect(self, shape: object) -> List[Point]:
        from planekit.geometry.intersections import intersect

        return intersect(self, shape)

    def distance_to(self, shape: object) -> Tuple[float, Segment]:
        from planekit.geometry.distance import distance

        return distance(self, shape)

    def svg(self, attrs: Optional[Mapping[str, Any]] = None) -> str:
        from planekit.geometry.svg import polygon_svg

        return polygon_svg(self, attrs)

    def to_dict(self) -> dict:
        return {"faces": [f.to_dict() for f in self.faces], "name": "polygon"}
