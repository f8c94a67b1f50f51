"""planekit: planar geometry kernel."""

from planekit.geometry import (
    Arc,
    Box,
    Circle,
    Face,
    IllegalParameters,
    Line,
    Point,
    Polygon,
    Segment,
    UnsupportedShape,
    Vector,
    distance,
    intersect,
    line,
)

__version__ = "0.1.0"

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
    "UnsupportedShape",
    "Vector",
    "distance",
    "intersect",
    "line",
    "__version__",
]
