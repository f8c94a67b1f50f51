from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, Iterable, List, Tuple

import numpy as np

from planekit.geometry.arc import Arc
from planekit.geometry.box import Box
from planekit.geometry.circle import Circle
from planekit.geometry.errors import UnsupportedShape
from planekit.geometry.line import Line
from planekit.geometry.point import Point
from planekit.geometry.polygon import Polygon
from planekit.geometry.segment import Segment
from planekit.geometry.shapes import ShapeKind, shape_kind
from planekit.geometry.tolerance import eq, eq_0, gt, lt
from planekit.geometry.vector import Vector

logger = logging.getLogger(__name__)

Intersector = Callable[[Any, Any], List[Point]]


def unique_points(points: Iterable[Point]) -> List[Point]:
    """Drop tolerance-equal duplicates, keeping first-seen order."""
    out: List[Point] = []
    for p in points:
        if not any(p.equal_to(q) for q in out):
            out.append(p)
    return out


def intersect_point_shape(pt: Point, shape: Any) -> List[Point]:
    return [pt] if shape.contains(pt) else []


def intersect_line_line(line1: Line, line2: Line) -> List[Point]:
    A1, B1, C1 = line1.standard
    A2, B2, C2 = line2.standard
    det = A1 * B2 - B1 * A2
    if eq_0(det):
        # Coincident lines land here too: no unique intersection point.
        logger.debug("parallel lines, no intersection: %s %s", line1, line2)
        return []
    # Axis-aligned lines give exact coordinates directly.
    if B1 == 0.0:
        x = C1 / A1
        y = (C2 - A2 * x) / B2
    elif B2 == 0.0:
        x = C2 / A2
        y = (C1 - A1 * x) / B1
    elif A1 == 0.0:
        y = C1 / B1
        x = (C2 - B2 * y) / A2
    elif A2 == 0.0:
        y = C2 / B2
        x = (C1 - B1 * y) / A1
    else:
        sol = np.linalg.solve(np.array([[A1, B1], [A2, B2]]), np.array([C1, C2]))
        x, y = float(sol[0]), float(sol[1])
    return [Point(x, y)]


def intersect_line_circle(line: Line, circle: Circle) -> List[Point]:
    prj = circle.center.projection_on(line)
    dist = Vector.between(circle.center, prj).length
    r = circle.radius
    if eq(dist, r):
        return [prj]
    if lt(dist, r):
        delta = math.sqrt(r * r - dist * dist)
        return [
            prj.translate(line.norm.rotate90ccw() * delta),
            prj.translate(line.norm.rotate90cw() * delta),
        ]
    return []


def intersect_segment_line(seg: Segment, line: Line) -> List[Point]:
    ip: List[Point] = []
    if line.contains(seg.start):
        ip.append(seg.start)
    # A segment lying on the line reports both of its endpoints.
    if line.contains(seg.end) and not seg.is_zero_length():
        ip.append(seg.end)
    if ip:
        return ip
    if seg.is_zero_length():
        return ip
    if seg.start.left_to(line) == seg.end.left_to(line):
        return ip
    return intersect_line_line(Line.from_two_points(seg.start, seg.end), line)


def intersect_line_arc(line: Line, arc: Arc) -> List[Point]:
    return [p for p in intersect_line_circle(line, arc.to_circle()) if arc.contains(p)]


def intersect_line_box(line: Line, box: Box) -> List[Point]:
    """Up to two distinct points where the line crosses the box boundary."""
    ips: List[Point] = []
    for seg in box.to_segments():
        ips = unique_points(ips + intersect_segment_line(seg, line))
        if len(ips) >= 2:
            return ips[:2]
    return ips


def intersect_segment_segment(seg1: Segment, seg2: Segment) -> List[Point]:
    if seg1.box.not_intersect(seg2.box):
        return []
    if seg1.is_zero_length():
        return [seg1.start] if seg2.contains(seg1.start) else []
    if seg2.is_zero_length():
        return [seg2.start] if seg1.contains(seg2.start) else []

    line1 = Line.from_two_points(seg1.start, seg1.end)
    line2 = Line.from_two_points(seg2.start, seg2.end)
    if line1.incident_to(line2):
        # Collinear overlap: report the overlap's endpoints.
        cands = [p for p in (seg1.start, seg1.end) if seg2.contains(p)]
        cands += [p for p in (seg2.start, seg2.end) if seg1.contains(p)]
        return unique_points(cands)
    if line1.parallel_to(line2):
        return []
    return [p for p in intersect_line_line(line1, line2) if seg1.contains(p) and seg2.contains(p)]


def intersect_segment_circle(seg: Segment, circle: Circle) -> List[Point]:
    if seg.box.not_intersect(circle.box):
        return []
    if seg.is_zero_length():
        on = eq(Vector.between(circle.center, seg.start).length, circle.radius)
        return [seg.start] if on else []
    line = Line.from_two_points(seg.start, seg.end)
    return [p for p in intersect_line_circle(line, circle) if seg.contains(p)]


def intersect_segment_arc(seg: Segment, arc: Arc) -> List[Point]:
    if seg.box.not_intersect(arc.box):
        return []
    if seg.is_zero_length():
        return [seg.start] if arc.contains(seg.start) else []
    line = Line.from_two_points(seg.start, seg.end)
    return [p for p in intersect_line_circle(line, arc.to_circle()) if seg.contains(p) and arc.contains(p)]


def intersect_circle_circle(circle1: Circle, circle2: Circle) -> List[Point]:
    if circle1.box.not_intersect(circle2.box):
        return []
    vec = Vector.between(circle1.center, circle2.center)
    d = vec.length
    r1, r2 = circle1.radius, circle2.radius
    if eq_0(d) and eq(r1, r2):
        logger.debug("coincident circles, no intersection: %s", circle1)
        return []
    if gt(d, r1 + r2) or lt(d, abs(r1 - r2)):
        return []

    u = vec / d
    if eq(d, r1 + r2):
        return [circle1.center.translate(u * r1)]
    if eq(d, abs(r1 - r2)):
        # Internal tangency: the point lies away from the smaller circle's centre.
        return [circle1.center.translate(u * (r1 if r1 > r2 else -r1))]

    a = (r1 * r1 - r2 * r2 + d * d) / (2.0 * d)
    h = math.sqrt(max(r1 * r1 - a * a, 0.0))
    mid = circle1.center.translate(u * a)
    return [mid.translate(u.rotate90ccw() * h), mid.translate(u.rotate90cw() * h)]


def _same_circle(c1: Point, r1: float, c2: Point, r2: float) -> bool:
    return c1.equal_to(c2) and eq(r1, r2)


def intersect_circle_arc(circle: Circle, arc: Arc) -> List[Point]:
    if _same_circle(circle.center, circle.radius, arc.center, arc.radius):
        return unique_points([arc.start, arc.end])
    return [p for p in intersect_circle_circle(circle, arc.to_circle()) if arc.contains(p)]


def intersect_arc_arc(arc1: Arc, arc2: Arc) -> List[Point]:
    if arc1.box.not_intersect(arc2.box):
        return []
    if _same_circle(arc1.center, arc1.radius, arc2.center, arc2.radius):
        cands = [p for p in (arc1.start, arc1.end) if arc2.contains(p)]
        cands += [p for p in (arc2.start, arc2.end) if arc1.contains(p)]
        return unique_points(cands)
    ips = intersect_circle_circle(arc1.to_circle(), arc2.to_circle())
    return [p for p in ips if arc1.contains(p) and arc2.contains(p)]


def intersect_shape_polygon(shape: Any, polygon: Polygon) -> List[Point]:
    out: List[Point] = []
    for edge in polygon.edges:
        out = unique_points(out + intersect(shape, edge))
    return out


def intersect_line_polygon(line: Line, polygon: Polygon) -> List[Point]:
    return intersect_shape_polygon(line, polygon)


def intersect_polygon_polygon(polygon1: Polygon, polygon2: Polygon) -> List[Point]:
    out: List[Point] = []
    for edge in polygon1.edges:
        out = unique_points(out + intersect_shape_polygon(edge, polygon2))
    return out


_TABLE: Dict[Tuple[ShapeKind, ShapeKind], Intersector] = {}


def _register(ka: ShapeKind, kb: ShapeKind, fn: Intersector) -> None:
    _TABLE[(ka, kb)] = fn
    if ka is not kb:
        _TABLE[(kb, ka)] = lambda b, a: fn(a, b)


for _kind in ShapeKind:
    _register(ShapeKind.POINT, _kind, intersect_point_shape)

_register(ShapeKind.LINE, ShapeKind.LINE, intersect_line_line)
_register(ShapeKind.LINE, ShapeKind.CIRCLE, intersect_line_circle)
_register(ShapeKind.LINE, ShapeKind.SEGMENT, lambda ln, seg: intersect_segment_line(seg, ln))
_register(ShapeKind.LINE, ShapeKind.ARC, intersect_line_arc)
_register(ShapeKind.LINE, ShapeKind.POLYGON, intersect_line_polygon)
_register(ShapeKind.SEGMENT, ShapeKind.SEGMENT, intersect_segment_segment)
_register(ShapeKind.SEGMENT, ShapeKind.CIRCLE, intersect_segment_circle)
_register(ShapeKind.SEGMENT, ShapeKind.ARC, intersect_segment_arc)
_register(ShapeKind.SEGMENT, ShapeKind.POLYGON, intersect_shape_polygon)
_register(ShapeKind.CIRCLE, ShapeKind.CIRCLE, intersect_circle_circle)
_register(ShapeKind.CIRCLE, ShapeKind.ARC, intersect_circle_arc)
_register(ShapeKind.CIRCLE, ShapeKind.POLYGON, intersect_shape_polygon)
_register(ShapeKind.ARC, ShapeKind.ARC, intersect_arc_arc)
_register(ShapeKind.ARC, ShapeKind.POLYGON, intersect_shape_polygon)
_register(ShapeKind.POLYGON, ShapeKind.POLYGON, intersect_polygon_polygon)


def registered_pairs() -> List[Tuple[ShapeKind, ShapeKind]]:
    return sorted(_TABLE, key=lambda k: (k[0].value, k[1].value))


def intersect(a: Any, b: Any) -> List[Point]:
    """Intersection points of two shapes, deduplicated.

    Raises :class:`UnsupportedShape` when either argument is not one of the
    kernel's shape kinds.
    """
    try:
        key = (shape_kind(a), shape_kind(b))
    except UnsupportedShape:
        logger.debug("intersect: unsupported pair %s, %s", type(a).__name__, type(b).__name__)
        raise UnsupportedShape(a, b) from None
    fn = _TABLE.get(key)
    if fn is None:
        raise UnsupportedShape(a, b)
    return unique_points(fn(a, b))
