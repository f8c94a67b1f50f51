from __future__ import annotations

import logging
import math

import pytest

from planekit.geometry import (
    Arc,
    Box,
    Circle,
    Line,
    Point,
    Polygon,
    Segment,
    UnsupportedShape,
    Vector,
)
from planekit.geometry.intersections import intersect_line_box


def _x_axis() -> Line:
    return Line(Point(0.0, 0.0), Vector(0.0, 1.0))


def _horizontal(y: float) -> Line:
    return Line.from_two_points(Point(0.0, y), Point(1.0, y))


def _square(x0: float, y0: float, size: float) -> Polygon:
    return Polygon.from_points(
        [Point(x0, y0), Point(x0 + size, y0), Point(x0 + size, y0 + size), Point(x0, y0 + size)]
    )


def test_line_point() -> None:
    assert _x_axis().intersect(Point(5.0, 0.0)) == [Point(5.0, 0.0)]
    assert _x_axis().intersect(Point(5.0, 1.0)) == []
    assert Point(-2.0, 0.0).intersect(_x_axis()) == [Point(-2.0, 0.0)]


def test_line_line_axes_cross_at_origin() -> None:
    y_axis = Line(Point(0.0, 0.0), Vector(1.0, 0.0))
    assert y_axis.intersect(_x_axis()) == [Point(0.0, 0.0)]


def test_line_line_general_position() -> None:
    l1 = Line.from_two_points(Point(0.0, 0.0), Point(1.0, 1.0))
    l2 = Line.from_two_points(Point(0.0, 2.0), Point(2.0, 0.0))
    assert l1.intersect(l2) == [Point(1.0, 1.0)]
    assert l2.intersect(l1) == [Point(1.0, 1.0)]


def test_line_line_parallel_and_coincident_give_no_points(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="planekit.geometry.intersections")
    assert _x_axis().intersect(_horizontal(3.0)) == []
    coincident = Line.from_two_points(Point(7.0, 0.0), Point(-3.0, 0.0))
    assert _x_axis().intersect(coincident) == []
    assert "parallel lines" in caplog.text


def test_line_circle_secant_order() -> None:
    ips = _x_axis().intersect(Circle(Point(0.0, 0.0), 1.0))
    assert ips == [Point(-1.0, 0.0), Point(1.0, 0.0)]


def test_line_circle_tangent_and_miss() -> None:
    unit = Circle(Point(0.0, 0.0), 1.0)
    assert _horizontal(1.0).intersect(unit) == [Point(0.0, 1.0)]
    assert _horizontal(2.0).intersect(unit) == []
    assert unit.intersect(_horizontal(1.0)) == [Point(0.0, 1.0)]


@pytest.mark.parametrize("offset, count", [(0.0, 2), (0.5, 2), (0.999, 2), (1.0, 1), (1.5, 0)])
def test_line_circle_points_lie_on_both(offset: float, count: int) -> None:
    circle = Circle(Point(0.0, 0.0), 1.0)
    ln = _horizontal(offset)
    ips = ln.intersect(circle)
    assert len(ips) == count
    for p in ips:
        assert ln.contains(p)
        assert math.hypot(p.x, p.y) == pytest.approx(1.0)


def test_line_segment_crossing() -> None:
    seg = Segment(Point(0.0, -1.0), Point(0.0, 1.0))
    assert _x_axis().intersect(seg) == [Point(0.0, 0.0)]
    assert seg.intersect(_x_axis()) == [Point(0.0, 0.0)]


def test_line_segment_boundary_cases() -> None:
    ln = _x_axis()
    assert ln.intersect(Segment(Point(0.0, 1.0), Point(0.0, 2.0))) == []
    assert ln.intersect(Segment(Point(1.0, 0.0), Point(3.0, 0.0))) == [Point(1.0, 0.0), Point(3.0, 0.0)]
    assert ln.intersect(Segment(Point(2.0, 0.0), Point(2.0, 5.0))) == [Point(2.0, 0.0)]
    assert ln.intersect(Segment(Point(1.0, 0.0), Point(1.0, 0.0))) == [Point(1.0, 0.0)]
    assert ln.intersect(Segment(Point(1.0, 1.0), Point(1.0, 1.0))) == []


def test_line_arc() -> None:
    upper = Arc(Point(0.0, 0.0), 1.0, 0.0, math.pi)
    lower = Arc(Point(0.0, 0.0), 1.0, math.pi, 2.0 * math.pi)
    quarter = Arc(Point(0.0, 0.0), 1.0, 0.0, 0.5 * math.pi)
    assert _x_axis().intersect(upper) == [Point(-1.0, 0.0), Point(1.0, 0.0)]
    assert len(_horizontal(0.5).intersect(upper)) == 2
    assert _horizontal(0.5).intersect(lower) == []
    assert _horizontal(0.5).intersect(quarter) == [Point(math.sqrt(0.75), 0.5)]


def test_line_polygon() -> None:
    square = _square(0.0, 0.0, 4.0)
    assert _horizontal(2.0).intersect(square) == [Point(4.0, 2.0), Point(0.0, 2.0)]
    assert _horizontal(5.0).intersect(square) == []
    diagonal = Line.from_two_points(Point(0.0, 0.0), Point(1.0, 1.0))
    assert diagonal.intersect(square) == [Point(0.0, 0.0), Point(4.0, 4.0)]
    along_edge = _x_axis().intersect(square)
    assert along_edge == [Point(0.0, 0.0), Point(4.0, 0.0)]


def test_line_box_clip_points() -> None:
    box = Box(-5.0, -5.0, 5.0, 5.0)
    assert intersect_line_box(_x_axis(), box) == [Point(5.0, 0.0), Point(-5.0, 0.0)]
    corner = Line.from_two_points(Point(10.0, 0.0), Point(0.0, 10.0))
    assert intersect_line_box(corner, Box(0.0, 0.0, 5.0, 5.0)) == [Point(5.0, 5.0)]
    assert intersect_line_box(_horizontal(9.0), box) == []


@pytest.mark.parametrize("other", [Box(0.0, 0.0, 1.0, 1.0), Vector(1.0, 0.0), "line", None])
def test_line_intersect_rejects_unsupported_shapes(other: object) -> None:
    with pytest.raises(UnsupportedShape) as err:
        _x_axis().intersect(other)
    assert err.value.shapes[0] == _x_axis()
    assert isinstance(err.value, TypeError)


def _vertical(x: float) -> Line:
    return Line(Point(x, 0.0), Vector(1.0, 0.0))


def test_line_arc_wrapping_through_zero_angle() -> None:
    h = math.sqrt(1.0 - 0.81)
    right = Arc(Point(0.0, 0.0), 1.0, 1.75 * math.pi, 0.25 * math.pi)
    assert right.sweep == pytest.approx(0.5 * math.pi)
    assert _vertical(0.9).intersect(right) == [Point(0.9, h), Point(0.9, -h)]
    assert _vertical(0.5).intersect(right) == []

    left = Arc(Point(0.0, 0.0), 1.0, 1.75 * math.pi, 0.25 * math.pi, False)
    assert left.sweep == pytest.approx(1.5 * math.pi)
    assert _vertical(0.9).intersect(left) == []
    assert _vertical(0.5).intersect(left) == [Point(0.5, math.sqrt(0.75)), Point(0.5, -math.sqrt(0.75))]
