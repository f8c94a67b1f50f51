"""SVG markup for kernel shapes.

Each renderer returns a single SVG element as a string. ``attrs`` holds
presentation attributes merged over the renderer's defaults; snake_case keys
are written kebab-case (``stroke_width`` -> ``stroke-width``) and ``None``
values drop the attribute.
"""

from __future__ import annotations

import html
import math
from typing import Any, Dict, Mapping, Optional

from planekit.geometry.arc import Arc
from planekit.geometry.box import Box
from planekit.geometry.circle import Circle
from planekit.geometry.intersections import intersect_line_box
from planekit.geometry.line import Line
from planekit.geometry.point import Point
from planekit.geometry.polygon import Polygon
from planekit.geometry.segment import Segment
from planekit.geometry.tolerance import eq_0

_STROKE = {"stroke": "black", "stroke-width": 1}


def _fmt(v: float) -> str:
    return f"{float(v):.10g}"


def _merge(defaults: Mapping[str, Any], attrs: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    merged: Dict[str, Any] = dict(defaults)
    for k, v in (attrs or {}).items():
        key = "class" if k in ("class_name", "className") else str(k).replace("_", "-")
        merged[key] = v
    return merged


def _markup(attrs: Mapping[str, Any]) -> str:
    parts = []
    for k, v in attrs.items():
        if v is None:
            continue
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            val = _fmt(v)
        else:
            val = str(v)
        parts.append(f'{k}="{html.escape(val, quote=True)}"')
    return " ".join(parts)


def segment_svg(seg: Segment, attrs: Optional[Mapping[str, Any]] = None) -> str:
    a = _markup(_merge(_STROKE, attrs))
    return (
        f'<line x1="{_fmt(seg.start.x)}" y1="{_fmt(seg.start.y)}" '
        f'x2="{_fmt(seg.end.x)}" y2="{_fmt(seg.end.y)}" {a} />'
    )


def line_svg(line: Line, box: Box, attrs: Optional[Mapping[str, Any]] = None) -> str:
    """Render the chord of ``line`` inside ``box``; empty when they miss."""
    ip = intersect_line_box(line, box)
    if not ip:
        return ""
    ps = ip[0]
    pe = ip[1] if len(ip) > 1 else ps
    return segment_svg(Segment(ps, pe), attrs)


def point_svg(pt: Point, attrs: Optional[Mapping[str, Any]] = None) -> str:
    merged = _merge({"r": 3, "stroke": "black", "stroke-width": 1, "fill": "red"}, attrs)
    r = merged.pop("r")
    return f'<circle cx="{_fmt(pt.x)}" cy="{_fmt(pt.y)}" r="{_fmt(r)}" {_markup(merged)} />'


def circle_svg(circle: Circle, attrs: Optional[Mapping[str, Any]] = None) -> str:
    a = _markup(_merge({**_STROKE, "fill": "none"}, attrs))
    c = circle.center
    return f'<circle cx="{_fmt(c.x)}" cy="{_fmt(c.y)}" r="{_fmt(circle.radius)}" {a} />'


def _arc_to(arc: Arc) -> str:
    large = "1" if arc.sweep > math.pi else "0"
    sweep_flag = "1" if arc.counter_clockwise else "0"
    r = _fmt(arc.radius)
    return f"A{r},{r} 0 {large},{sweep_flag} {_fmt(arc.end.x)},{_fmt(arc.end.y)}"


def arc_svg(arc: Arc, attrs: Optional[Mapping[str, Any]] = None) -> str:
    if eq_0(arc.sweep):
        return ""
    if arc.is_full_circle():
        return circle_svg(arc.to_circle(), attrs)
    a = _markup(_merge({**_STROKE, "fill": "none"}, attrs))
    s = arc.start
    return f'<path d="M{_fmt(s.x)},{_fmt(s.y)} {_arc_to(arc)}" {a} />'


def box_svg(box: Box, attrs: Optional[Mapping[str, Any]] = None) -> str:
    a = _markup(_merge({**_STROKE, "fill": "none"}, attrs))
    return (
        f'<rect x="{_fmt(box.xmin)}" y="{_fmt(box.ymin)}" '
        f'width="{_fmt(box.width)}" height="{_fmt(box.height)}" {a} />'
    )


def _edge_to(edge: Any) -> str:
    if isinstance(edge, Arc):
        if edge.is_full_circle():
            # A single path arc cannot close on itself; go through the middle.
            return f"{_arc_to(_half(edge, first=True))} {_arc_to(_half(edge, first=False))}"
        return _arc_to(edge)
    return f"L{_fmt(edge.end.x)},{_fmt(edge.end.y)}"


def _half(arc: Arc, *, first: bool) -> Arc:
    step = math.pi if arc.counter_clockwise else -math.pi
    a0 = arc.start_angle if first else arc.start_angle + step
    return Arc(arc.center, arc.radius, a0, a0 + step, arc.counter_clockwise)


def polygon_svg(polygon: Polygon, attrs: Optional[Mapping[str, Any]] = None) -> str:
    defaults = {**_STROKE, "fill": "lightcyan", "fill-rule": "evenodd", "fill-opacity": 1}
    a = _markup(_merge(defaults, attrs))
    d = []
    for face in polygon.faces:
        s = face.edges[0].start
        d.append(f"M{_fmt(s.x)},{_fmt(s.y)}")
        d.extend(_edge_to(e) for e in face.edges)
        d.append("z")
    return f'<path d="{" ".join(d)}" {a} />'
