from __future__ import annotations


class IllegalParameters(ValueError):
    """Malformed or geometrically degenerate construction arguments."""


class UnsupportedShape(TypeError):
    """A shape pair has no intersection or distance routine."""

    def __init__(self, *shapes: object) -> None:
        names = ", ".join(type(s).__name__ for s in shapes)
        super().__init__(f"unsupported shape(s): {names}")
        self.shapes = shapes
