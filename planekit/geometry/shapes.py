from __future__ import annotations

from enum import Enum
from typing import Union

from planekit.geometry.arc import Arc
from planekit.geometry.circle import Circle
from planekit.geometry.errors import UnsupportedShape
from planekit.geometry.line import Line
from planekit.geometry.point import Point
from planekit.geometry.polygon import Polygon
from planekit.geometry.segment import Segment


class ShapeKind(Enum):
    POINT = "point"
    LINE = "line"
    CIRCLE = "circle"
    SEGMENT = "segment"
    ARC = "arc"
    POLYGON = "polygon"


Shape = Union[Point, Line, Circle, Segment, Arc, Polygon]

_KINDS = (
    (Point, ShapeKind.POINT),
    (Line, ShapeKind.LINE),
    (Circle, ShapeKind.CIRCLE),
    (Segment, ShapeKind.SEGMENT),
    (Arc, ShapeKind.ARC),
    (Polygon, ShapeKind.POLYGON),
)


def shape_kind(shape: object) -> ShapeKind:
    for cls, kind in _KINDS:
        if isinstance(shape, cls):
            return kind
    raise UnsupportedShape(shape)
