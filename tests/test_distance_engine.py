from __future__ import annotations

import math

import pytest

from planekit.geometry import Arc, Circle, Point, Polygon, Segment, distance


def _square(x0: float, y0: float, size: float) -> Polygon:
    return Polygon.from_points(
        [Point(x0, y0), Point(x0 + size, y0), Point(x0 + size, y0 + size), Point(x0, y0 + size)]
    )


def test_point_to_segment() -> None:
    seg = Segment(Point(0.0, 0.0), Point(2.0, 0.0))
    d, s = distance(Point(1.0, 1.0), seg)
    assert d == pytest.approx(1.0)
    assert s.end == Point(1.0, 0.0)
    d, s = distance(Point(3.0, 1.0), seg)
    assert d == pytest.approx(math.sqrt(2.0))
    assert s.end == Point(2.0, 0.0)


def test_point_to_circle() -> None:
    c = Circle(Point(0.0, 0.0), 2.0)
    d, s = distance(Point(5.0, 0.0), c)
    assert d == pytest.approx(3.0)
    assert s.end == Point(2.0, 0.0)
    d, s = distance(Point(0.5, 0.0), c)
    assert d == pytest.approx(1.5)
    d, s = distance(Point(0.0, 0.0), c)
    assert d == pytest.approx(2.0)
    assert s.end == c.start


def test_point_to_arc_falls_back_to_endpoints() -> None:
    upper = Arc(Point(0.0, 0.0), 1.0, 0.0, math.pi)
    d, s = distance(Point(0.0, 3.0), upper)
    assert d == pytest.approx(2.0)
    assert s.end == Point(0.0, 1.0)
    d, _ = distance(Point(0.0, -2.0), upper)
    assert d == pytest.approx(math.sqrt(5.0))


def test_segment_to_segment() -> None:
    a = Segment(Point(0.0, 0.0), Point(2.0, 0.0))
    d, s = distance(a, Segment(Point(0.0, 1.0), Point(2.0, 1.0)))
    assert d == pytest.approx(1.0)
    assert a.contains(s.start)
    d, s = distance(a, Segment(Point(3.0, 1.0), Point(5.0, 3.0)))
    assert d == pytest.approx(math.sqrt(2.0))
    assert s.start == Point(2.0, 0.0)
    assert s.end == Point(3.0, 1.0)


def test_segment_to_circle() -> None:
    unit = Circle(Point(0.0, 0.0), 1.0)
    d, s = distance(Segment(Point(3.0, -1.0), Point(3.0, 1.0)), unit)
    assert d == pytest.approx(2.0)
    assert s.start == Point(3.0, 0.0)
    assert s.end == Point(1.0, 0.0)
    d, s = distance(Segment(Point(-0.5, 0.0), Point(0.5, 0.0)), unit)
    assert d == pytest.approx(0.5)
    assert abs(s.start.x) == pytest.approx(0.5)


def test_segment_to_arc_interior() -> None:
    upper = Arc(Point(0.0, 0.0), 1.0, 0.0, math.pi)
    seg = Segment(Point(-2.0, 3.0), Point(2.0, 3.0))
    d, s = distance(seg, upper)
    assert d == pytest.approx(2.0)
    assert s.start == Point(0.0, 3.0)
    assert s.end == Point(0.0, 1.0)


def test_circle_to_circle() -> None:
    c1 = Circle(Point(0.0, 0.0), 1.0)
    d, s = distance(c1, Circle(Point(5.0, 0.0), 1.0))
    assert d == pytest.approx(3.0)
    assert s.start == Point(1.0, 0.0)
    assert s.end == Point(4.0, 0.0)

    big = Circle(Point(0.0, 0.0), 5.0)
    d, s = distance(big, Circle(Point(1.0, 0.0), 1.0))
    assert d == pytest.approx(3.0)
    assert s.start == Point(5.0, 0.0)
    assert s.end == Point(2.0, 0.0)

    assert distance(c1, Circle(Point(0.0, 0.0), 3.0))[0] == pytest.approx(2.0)
    assert distance(c1, Circle(Point(0.0, 0.0), 1.0))[0] == 0.0


def test_circle_to_arc_and_arc_to_arc() -> None:
    a1 = Arc(Point(0.0, 0.0), 1.0, 0.0, math.pi)
    a2 = Arc(Point(0.0, 5.0), 1.0, math.pi, 2.0 * math.pi)
    d, s = distance(a1, a2)
    assert d == pytest.approx(3.0)
    assert s.start == Point(0.0, 1.0)
    assert s.end == Point(0.0, 4.0)

    d, s = distance(Circle(Point(0.0, 0.0), 1.0), a2)
    assert d == pytest.approx(3.0)
    assert s.end == Point(0.0, 4.0)


def test_point_and_shapes_inside_polygon_have_zero_distance() -> None:
    square = _square(0.0, 0.0, 4.0)
    assert distance(Point(2.0, 2.0), square)[0] == 0.0
    assert distance(Segment(Point(1.0, 1.0), Point(2.0, 2.0)), square)[0] == 0.0
    assert distance(Circle(Point(2.0, 2.0), 1.0), square)[0] == 0.0
    assert distance(_square(1.0, 1.0, 1.0), square)[0] == 0.0


def test_point_to_polygon_outside() -> None:
    d, s = distance(Point(5.0, 1.0), _square(0.0, 0.0, 2.0))
    assert d == pytest.approx(3.0)
    assert s.end == Point(2.0, 1.0)


def test_polygon_to_polygon_disjoint() -> None:
    d, s = distance(_square(0.0, 0.0, 1.0), _square(3.0, 0.0, 1.0))
    assert d == pytest.approx(2.0)
    assert s.start.x == pytest.approx(1.0)
    assert s.end.x == pytest.approx(3.0)


def test_distance_to_empty_polygon_is_infinite() -> None:
    assert distance(Point(1.0, 1.0), Polygon())[0] == math.inf
    assert distance(Segment(Point(), Point(1.0, 0.0)), Polygon())[0] == math.inf


@pytest.mark.parametrize(
    "a, b",
    [
        (Point(0.0, 5.0), Segment(Point(-1.0, 0.0), Point(1.0, 0.0))),
        (Segment(Point(0.0, 3.0), Point(1.0, 4.0)), Circle(Point(0.0, 0.0), 1.0)),
        (Circle(Point(6.0, 0.0), 1.0), Arc(Point(0.0, 0.0), 1.0, -0.5 * math.pi, 0.5 * math.pi)),
        (Arc(Point(0.0, 0.0), 1.0, 0.0, math.pi), _square(5.0, 5.0, 1.0)),
    ],
)
def test_swapping_arguments_reverses_the_segment(a: object, b: object) -> None:
    d1, s1 = distance(a, b)
    d2, s2 = distance(b, a)
    assert d1 == pytest.approx(d2)
    assert s1.start == s2.end
    assert s1.end == s2.start
    assert s1.length == pytest.approx(d1)
