from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping

from planekit.geometry.arc import Arc
from planekit.geometry.box import Box
from planekit.geometry.circle import Circle
from planekit.geometry.errors import IllegalParameters
from planekit.geometry.line import Line
from planekit.geometry.point import Point
from planekit.geometry.polygon import Face, Polygon
from planekit.geometry.segment import Segment
from planekit.geometry.vector import Vector


def _get(d: Mapping[str, Any], *keys: str) -> Any:
    # Accept the camelCase keys written by other planar-geometry libraries.
    for k in keys:
        if k in d:
            return d[k]
    raise IllegalParameters(f"{d.get('name', 'shape')} descriptor is missing {keys[0]!r}")


def _float(v: Any, what: str) -> float:
    try:
        return float(v)
    except (TypeError, ValueError) as exc:
        raise IllegalParameters(f"{what} must be a number, got {v!r}") from exc


def _bool(v: Any, what: str) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, int) and v in (0, 1):
        return bool(v)
    raise IllegalParameters(f"{what} must be a boolean, got {v!r}")


def _point_from_dict(d: Any) -> Point:
    if isinstance(d, Mapping):
        return Point(_float(_get(d, "x"), "x"), _float(_get(d, "y"), "y"))
    if isinstance(d, (list, tuple)) and len(d) == 2:
        return Point(_float(d[0], "x"), _float(d[1], "y"))
    raise IllegalParameters(f"malformed point descriptor: {d!r}")


def _vector_from_dict(d: Any) -> Vector:
    p = _point_from_dict(d)
    return Vector(p.x, p.y)


def _segment_from_dict(d: Mapping[str, Any]) -> Segment:
    return Segment(_point_from_dict(_get(d, "start", "ps")), _point_from_dict(_get(d, "end", "pe")))


def _circle_from_dict(d: Mapping[str, Any]) -> Circle:
    return Circle(_point_from_dict(_get(d, "center", "pc")), _float(_get(d, "radius", "r"), "radius"))


def _arc_from_dict(d: Mapping[str, Any]) -> Arc:
    ccw = d.get("counter_clockwise", d.get("counterClockwise", True))
    return Arc(
        _point_from_dict(_get(d, "center", "pc")),
        _float(_get(d, "radius", "r"), "radius"),
        _float(_get(d, "start_angle", "startAngle"), "start_angle"),
        _float(_get(d, "end_angle", "endAngle"), "end_angle"),
        _bool(ccw, "counter_clockwise"),
    )


def _box_from_dict(d: Mapping[str, Any]) -> Box:
    return Box(*(_float(_get(d, k), k) for k in ("xmin", "ymin", "xmax", "ymax")))


def _edge_from_dict(d: Any) -> Segment | Arc:
    if not isinstance(d, Mapping):
        raise IllegalParameters(f"malformed polygon edge: {d!r}")
    if d.get("name") == "arc":
        return _arc_from_dict(d)
    return _segment_from_dict(d)


def _polygon_from_dict(d: Mapping[str, Any]) -> Polygon:
    faces = _get(d, "faces")
    if not isinstance(faces, list):
        raise IllegalParameters("polygon faces must be a list")
    out = []
    for face in faces:
        if not isinstance(face, list):
            raise IllegalParameters("polygon face must be a list of edges")
        out.append(Face(tuple(_edge_from_dict(e) for e in face)))
    return Polygon(tuple(out))


_READERS: Dict[str, Callable[[Mapping[str, Any]], Any]] = {
    "point": _point_from_dict,
    "vector": _vector_from_dict,
    "line": Line.from_descriptor,
    "segment": _segment_from_dict,
    "circle": _circle_from_dict,
    "arc": _arc_from_dict,
    "box": _box_from_dict,
    "polygon": _polygon_from_dict,
}


def shape_from_dict(d: Mapping[str, Any]) -> Any:
    """Rebuild a shape from a descriptor produced by ``to_dict()``."""
    if not isinstance(d, Mapping):
        raise IllegalParameters(f"shape descriptor must be an object, got {type(d).__name__}")
    name = d.get("name")
    reader = _READERS.get(str(name))
    if reader is None:
        raise IllegalParameters(f"unknown shape name: {name!r}")
    return reader(d)


def dumps(shapes: Iterable[Any], *, indent: int | None = None) -> str:
    return json.dumps([s.to_dict() for s in shapes], indent=indent)


def loads(text: str) -> List[Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise IllegalParameters(f"invalid shape JSON: {exc}") from exc
    if isinstance(data, Mapping):
        data = [data]
    if not isinstance(data, list):
        raise IllegalParameters("shape JSON must be an object or a list of objects")
    return [shape_from_dict(d) for d in data]


def save_shapes(shapes: Iterable[Any], path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps(shapes, indent=2), encoding="utf-8")


def load_shapes(path: Path) -> List[Any]:
    return loads(Path(path).read_text(encoding="utf-8"))
