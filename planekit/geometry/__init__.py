"""
planekit geometry

Immutable 2D shapes (point, vector, line, segment, circle, arc, box, polygon)
and the engines computing intersections and distances between any two of them.
"""

from planekit.geometry.arc import Arc
from planekit.geometry.box import Box
from planekit.geometry.circle import Circle
from planekit.geometry.distance import distance
from planekit.geometry.errors import IllegalParameters, UnsupportedShape
from planekit.geometry.intersections import intersect
from planekit.geometry.line import Line, line
from planekit.geometry.point import Point
from planekit.geometry.polygon import Face, Polygon
from planekit.geometry.segment import Segment
from planekit.geometry.shapes import Shape, ShapeKind, shape_kind
from planekit.geometry.tolerance import get_tolerance, set_tolerance, tolerance
from planekit.geometry.vector import Vector

__all__ = [
    "Arc",
    "Box",
    "Circle",
    "Face",
    "IllegalParameters",
    "Line",
    "Point",
    "Polygon",
    "Segment",
    "Shape",
    "ShapeKind",
    "UnsupportedShape",
    "Vector",
    "distance",
    "get_tolerance",
    "intersect",
    "line",
    "set_tolerance",
    "shape_kind",
    "tolerance",
]
