from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from planekit.geometry.arc import Arc
from planekit.geometry.circle import Circle
from planekit.geometry.errors import UnsupportedShape
from planekit.geometry.intersections import (
    intersect,
    intersect_line_arc,
    intersect_line_circle,
    intersect_line_line,
    intersect_segment_circle,
    intersect_segment_line,
)
from planekit.geometry.line import Line
from planekit.geometry.point import Point
from planekit.geometry.polygon import Polygon
from planekit.geometry.segment import Segment
from planekit.geometry.shapes import ShapeKind, shape_kind
from planekit.geometry.tolerance import eq, eq_0, ge
from planekit.geometry.vector import Vector

logger = logging.getLogger(__name__)

# Distance plus the shortest segment, which starts on the first shape.
DistanceResult = Tuple[float, Segment]
Measurer = Callable[[Any, Any], DistanceResult]


def _touch(pt: Point) -> DistanceResult:
    return 0.0, Segment(pt, pt)


def _reverse(res: DistanceResult) -> DistanceResult:
    return res[0], res[1].reverse()


def _closest(cands: Sequence[DistanceResult]) -> DistanceResult:
    return min(cands, key=lambda r: r[0])


def _unit_or(v: Vector, fallback: Vector) -> Vector:
    L = v.length
    if eq_0(L):
        return fallback
    return v / L


def point_to_point(pt1: Point, pt2: Point) -> DistanceResult:
    return Vector.between(pt1, pt2).length, Segment(pt1, pt2)


def point_to_line(pt: Point, line: Line) -> DistanceResult:
    closest = pt.projection_on(line)
    return Vector.between(pt, closest).length, Segment(pt, closest)


def point_to_circle(pt: Point, circle: Circle) -> DistanceResult:
    v = Vector.between(circle.center, pt)
    d = v.length
    if eq_0(d):
        return circle.radius, Segment(pt, circle.start)
    closest = circle.center.translate(v * (circle.radius / d))
    return abs(d - circle.radius), Segment(pt, closest)


def point_to_segment(pt: Point, seg: Segment) -> DistanceResult:
    if seg.is_zero_length():
        return point_to_point(pt, seg.start)
    v_seg = Vector.between(seg.start, seg.end)
    v_ps = Vector.between(seg.start, pt)
    v_pe = Vector.between(seg.end, pt)
    start_sp = v_seg.dot(v_ps)
    end_sp = -v_seg.dot(v_pe)
    if ge(start_sp, 0.0) and ge(end_sp, 0.0):
        u = v_seg / v_seg.length
        closest = seg.start.translate(u * u.dot(v_ps))
        return abs(u.cross(v_ps)), Segment(pt, closest)
    if start_sp < 0.0:
        return point_to_point(pt, seg.start)
    return point_to_point(pt, seg.end)


def point_to_arc(pt: Point, arc: Arc) -> DistanceResult:
    cands = [point_to_point(pt, arc.start), point_to_point(pt, arc.end)]
    d, seg = point_to_circle(pt, arc.to_circle())
    if arc.contains(seg.end):
        cands.insert(0, (d, seg))
    return _closest(cands)


def point_to_polygon(pt: Point, polygon: Polygon) -> DistanceResult:
    if polygon.contains(pt):
        return _touch(pt)
    if polygon.is_empty():
        return math.inf, Segment(pt, pt)
    return _closest([distance(pt, e) for e in polygon.edges])


def line_to_line(line1: Line, line2: Line) -> DistanceResult:
    ips = intersect_line_line(line1, line2)
    if ips:
        return _touch(ips[0])
    # Parallel or coincident: measure from the second line's reference point.
    return _reverse(point_to_line(line2.pt, line1))


def segment_to_line(seg: Segment, line: Line) -> DistanceResult:
    ips = intersect_segment_line(seg, line)
    if ips:
        return _touch(ips[0])
    return _closest([point_to_line(seg.start, line), point_to_line(seg.end, line)])


def circle_to_line(circle: Circle, line: Line) -> DistanceResult:
    ips = intersect_line_circle(line, circle)
    if ips:
        return _touch(ips[0])
    _, from_center = point_to_line(circle.center, line)
    return _reverse(point_to_circle(from_center.end, circle))


def arc_to_line(arc: Arc, line: Line) -> DistanceResult:
    ips = intersect_line_arc(line, arc)
    if ips:
        return _touch(ips[0])
    cands = [point_to_line(arc.start, line), point_to_line(arc.end, line)]
    # Interior candidates: where the arc's tangent is parallel to the line.
    for sign in (1.0, -1.0):
        p = arc.center.translate(line.norm * (sign * arc.radius))
        if arc.contains(p):
            cands.append(point_to_line(p, line))
    return _closest(cands)


def segment_to_segment(seg1: Segment, seg2: Segment) -> DistanceResult:
    ips = intersect(seg1, seg2)
    if ips:
        return _touch(ips[0])
    return _closest(
        [
            point_to_segment(seg1.start, seg2),
            point_to_segment(seg1.end, seg2),
            _reverse(point_to_segment(seg2.start, seg1)),
            _reverse(point_to_segment(seg2.end, seg1)),
        ]
    )


def segment_to_circle(seg: Segment, circle: Circle) -> DistanceResult:
    ips = intersect_segment_circle(seg, circle)
    if ips:
        return _touch(ips[0])
    if circle.contains(seg.start) and circle.contains(seg.end):
        # Inside the disk the endpoint farthest from the centre is closest to the rim.
        return _closest([point_to_circle(seg.start, circle), point_to_circle(seg.end, circle)])
    _, from_center = point_to_segment(circle.center, seg)
    return point_to_circle(from_center.end, circle)


def _segment_normal(seg: Segment) -> Vector:
    return Vector.between(seg.start, seg.end).rotate90ccw()


def segment_to_arc(seg: Segment, arc: Arc) -> DistanceResult:
    ips = intersect(seg, arc)
    if ips:
        return _touch(ips[0])
    cands = [
        point_to_arc(seg.start, arc),
        point_to_arc(seg.end, arc),
        _reverse(point_to_segment(arc.start, seg)),
        _reverse(point_to_segment(arc.end, seg)),
    ]
    if not seg.is_zero_length():
        # Interior-interior candidates lie on the perpendicular from the centre.
        _, from_center = point_to_segment(arc.center, seg)
        foot = from_center.end
        u = _unit_or(Vector.between(arc.center, foot), _segment_normal(seg).normalize())
        for sign in (1.0, -1.0):
            p = arc.center.translate(u * (sign * arc.radius))
            if arc.contains(p):
                cands.append(_reverse(point_to_segment(p, seg)))
    return _closest(cands)


def _center_line_candidates(c1: Point, r1: float, c2: Point, r2: float) -> List[Tuple[Point, Point]]:
    u = _unit_or(Vector.between(c1, c2), Vector(-1.0, 0.0))
    out: List[Tuple[Point, Point]] = []
    for s1 in (1.0, -1.0):
        for s2 in (1.0, -1.0):
            out.append((c1.translate(u * (s1 * r1)), c2.translate(u * (s2 * r2))))
    return out


def circle_to_circle(circle1: Circle, circle2: Circle) -> DistanceResult:
    if circle1.center.equal_to(circle2.center) and eq(circle1.radius, circle2.radius):
        return _touch(circle1.start)
    ips = intersect(circle1, circle2)
    if ips:
        return _touch(ips[0])
    pairs = _center_line_candidates(circle1.center, circle1.radius, circle2.center, circle2.radius)
    return _closest([point_to_point(p1, p2) for p1, p2 in pairs])


def circle_to_arc(circle: Circle, arc: Arc) -> DistanceResult:
    ips = intersect(circle, arc)
    if ips:
        return _touch(ips[0])
    cands = [
        _reverse(point_to_circle(arc.start, circle)),
        _reverse(point_to_circle(arc.end, circle)),
    ]
    for p1, p2 in _center_line_candidates(circle.center, circle.radius, arc.center, arc.radius):
        if arc.contains(p2):
            cands.append(point_to_point(p1, p2))
    return _closest(cands)


def arc_to_arc(arc1: Arc, arc2: Arc) -> DistanceResult:
    ips = intersect(arc1, arc2)
    if ips:
        return _touch(ips[0])
    cands = [
        point_to_arc(arc1.start, arc2),
        point_to_arc(arc1.end, arc2),
        _reverse(point_to_arc(arc2.start, arc1)),
        _reverse(point_to_arc(arc2.end, arc1)),
    ]
    if not arc1.center.equal_to(arc2.center):
        for p1, p2 in _center_line_candidates(arc1.center, arc1.radius, arc2.center, arc2.radius):
            if arc1.contains(p1) and arc2.contains(p2):
                cands.append(point_to_point(p1, p2))
    return _closest(cands)


def _sample_point(shape: Any) -> Optional[Point]:
    if isinstance(shape, (Segment, Arc, Circle)):
        return shape.start
    return None


def shape_to_polygon(shape: Any, polygon: Polygon) -> DistanceResult:
    """Distance from a curve or line to a polygon's region (zero inside)."""
    ips = intersect(shape, polygon)
    if ips:
        return _touch(ips[0])
    sample = _sample_point(shape)
    if sample is not None and polygon.contains(sample):
        return _touch(sample)
    if polygon.is_empty():
        logger.debug("distance to an empty polygon is infinite")
        start = sample if sample is not None else Point()
        return math.inf, Segment(start, start)
    return _closest([distance(shape, e) for e in polygon.edges])


def polygon_to_polygon(polygon1: Polygon, polygon2: Polygon) -> DistanceResult:
    ips = intersect(polygon1, polygon2)
    if ips:
        return _touch(ips[0])
    for v in polygon2.vertices:
        if polygon1.contains(v):
            return _touch(v)
    for v in polygon1.vertices:
        if polygon2.contains(v):
            return _touch(v)
    if polygon1.is_empty() or polygon2.is_empty():
        return math.inf, Segment()
    return _closest([distance(e1, e2) for e1 in polygon1.edges for e2 in polygon2.edges])


_TABLE: Dict[Tuple[ShapeKind, ShapeKind], Measurer] = {}


def _register(ka: ShapeKind, kb: ShapeKind, fn: Measurer) -> None:
    _TABLE[(ka, kb)] = fn
    if ka is not kb:
        _TABLE[(kb, ka)] = lambda b, a: _reverse(fn(a, b))


_register(ShapeKind.POINT, ShapeKind.POINT, point_to_point)
_register(ShapeKind.POINT, ShapeKind.LINE, point_to_line)
_register(ShapeKind.POINT, ShapeKind.CIRCLE, point_to_circle)
_register(ShapeKind.POINT, ShapeKind.SEGMENT, point_to_segment)
_register(ShapeKind.POINT, ShapeKind.ARC, point_to_arc)
_register(ShapeKind.POINT, ShapeKind.POLYGON, point_to_polygon)
_register(ShapeKind.LINE, ShapeKind.LINE, line_to_line)
_register(ShapeKind.SEGMENT, ShapeKind.LINE, segment_to_line)
_register(ShapeKind.CIRCLE, ShapeKind.LINE, circle_to_line)
_register(ShapeKind.ARC, ShapeKind.LINE, arc_to_line)
_register(ShapeKind.LINE, ShapeKind.POLYGON, shape_to_polygon)
_register(ShapeKind.SEGMENT, ShapeKind.SEGMENT, segment_to_segment)
_register(ShapeKind.SEGMENT, ShapeKind.CIRCLE, segment_to_circle)
_register(ShapeKind.SEGMENT, ShapeKind.ARC, segment_to_arc)
_register(ShapeKind.SEGMENT, ShapeKind.POLYGON, shape_to_polygon)
_register(ShapeKind.CIRCLE, ShapeKind.CIRCLE, circle_to_circle)
_register(ShapeKind.CIRCLE, ShapeKind.ARC, circle_to_arc)
_register(ShapeKind.CIRCLE, ShapeKind.POLYGON, shape_to_polygon)
_register(ShapeKind.ARC, ShapeKind.ARC, arc_to_arc)
_register(ShapeKind.ARC, ShapeKind.POLYGON, shape_to_polygon)
_register(ShapeKind.POLYGON, ShapeKind.POLYGON, polygon_to_polygon)


def registered_pairs() -> List[Tuple[ShapeKind, ShapeKind]]:
    return sorted(_TABLE, key=lambda k: (k[0].value, k[1].value))


def distance(a: Any, b: Any) -> DistanceResult:
    """Distance between two shapes and the shortest segment from ``a`` to ``b``."""
    try:
        key = (shape_kind(a), shape_kind(b))
    except UnsupportedShape:
        logger.debug("distance: unsupported pair %s, %s", type(a).__name__, type(b).__name__)
        raise UnsupportedShape(a, b) from None
    fn = _TABLE.get(key)
    if fn is None:
        raise UnsupportedShape(a, b)
    return fn(a, b)
