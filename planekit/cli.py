from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict

from planekit.config import configure_logging, env_eps
from planekit.geometry.box import Box
from planekit.geometry.distance import distance
from planekit.geometry.errors import IllegalParameters, UnsupportedShape
from planekit.geometry.intersections import intersect
from planekit.geometry.line import Line
from planekit.geometry.tolerance import get_tolerance, tolerance
from planekit.io.json_shapes import shape_from_dict

logger = logging.getLogger(__name__)


def _read_shape(arg: str) -> Any:
    """Parse a shape descriptor given inline or as ``@path.json``."""
    if arg.startswith("@"):
        path = Path(arg[1:]).expanduser()
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise IllegalParameters(f"cannot read {path}: {exc}") from exc
    else:
        text = arg
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise IllegalParameters(f"invalid JSON: {exc}") from exc
    return shape_from_dict(data)


def _cmd_intersect(args: argparse.Namespace) -> int:
    a = _read_shape(args.a)
    b = _read_shape(args.b)
    pts = intersect(a, b)
    logger.info("%s x %s: %d point(s)", type(a).__name__, type(b).__name__, len(pts))
    print(json.dumps([p.to_dict() for p in pts]))
    return 0


def _cmd_distance(args: argparse.Namespace) -> int:
    a = _read_shape(args.a)
    b = _read_shape(args.b)
    d, seg = distance(a, b)
    out: Dict[str, Any] = {"distance": d, "segment": seg.to_dict()}
    print(json.dumps(out))
    return 0


def _cmd_svg(args: argparse.Namespace) -> int:
    shape = _read_shape(args.shape)
    attrs: Dict[str, Any] = {"stroke": args.stroke, "stroke_width": args.stroke_width}
    if isinstance(shape, Line):
        if args.box is None:
            print("[ERROR] Rendering a line needs --box XMIN YMIN XMAX YMAX.")
            return 2
        print(shape.svg(Box(*args.box), attrs))
        return 0
    render = getattr(shape, "svg", None)
    if render is None:
        raise UnsupportedShape(shape)
    print(render(attrs))
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="planekit")
    p.add_argument("--log-level", default=None, help="Logging level (default: PLANEKIT_LOG_LEVEL or WARNING)")
    p.add_argument("--eps", type=float, default=None, help="Comparison tolerance (default: PLANEKIT_EPS or 1e-6)")
    sub = p.add_subparsers(dest="cmd", required=True)

    i = sub.add_parser("intersect", help="Print the intersection points of two shapes as JSON.")
    i.add_argument("a", help="Shape descriptor JSON, or @file.json")
    i.add_argument("b", help="Shape descriptor JSON, or @file.json")
    i.set_defaults(func=_cmd_intersect)

    d = sub.add_parser("distance", help="Print the distance and shortest segment between two shapes.")
    d.add_argument("a", help="Shape descriptor JSON, or @file.json")
    d.add_argument("b", help="Shape descriptor JSON, or @file.json")
    d.set_defaults(func=_cmd_distance)

    s = sub.add_parser("svg", help="Render a shape as an SVG element.")
    s.add_argument("shape", help="Shape descriptor JSON, or @file.json")
    s.add_argument("--box", type=float, nargs=4, metavar=("XMIN", "YMIN", "XMAX", "YMAX"), help="Clip box for lines")
    s.add_argument("--stroke", default="black", help="Stroke colour")
    s.add_argument("--stroke-width", type=float, default=1.0, help="Stroke width")
    s.set_defaults(func=_cmd_svg)

    args = p.parse_args(argv)
    configure_logging(args.log_level)
    try:
        eps = args.eps if args.eps is not None else env_eps()
        with tolerance(get_tolerance().eps if eps is None else eps):
            return int(args.func(args))
    except UnsupportedShape as exc:
        print(f"[ERROR] {exc}")
        return 3
    except ValueError as exc:
        print(f"[ERROR] {exc}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
