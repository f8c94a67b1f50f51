from __future__ import annotations

import itertools

import pytest

from planekit.geometry import Box, Circle, Point, ShapeKind, UnsupportedShape, Vector, distance, intersect, shape_kind
from planekit.geometry.distance import registered_pairs as distance_pairs
from planekit.geometry.intersections import registered_pairs as intersection_pairs


def test_every_kind_pair_has_an_intersection_routine() -> None:
    pairs = set(intersection_pairs())
    assert pairs == set(itertools.product(ShapeKind, ShapeKind))


def test_every_kind_pair_has_a_distance_routine() -> None:
    pairs = set(distance_pairs())
    assert pairs == set(itertools.product(ShapeKind, ShapeKind))


def test_shape_kind_classifies_kernel_shapes() -> None:
    assert shape_kind(Point()) is ShapeKind.POINT
    assert shape_kind(Circle(Point(), 1.0)) is ShapeKind.CIRCLE
    with pytest.raises(UnsupportedShape):
        shape_kind(Box(0.0, 0.0, 1.0, 1.0))


@pytest.mark.parametrize("other", [Box(0.0, 0.0, 1.0, 1.0), Vector(1.0, 0.0), 42])
def test_unsupported_shapes_raise_type_errors(other: object) -> None:
    with pytest.raises(UnsupportedShape) as err:
        intersect(Point(), other)
    assert "unsupported shape(s)" in str(err.value)
    with pytest.raises(TypeError):
        distance(other, Point())
