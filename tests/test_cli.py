from __future__ import annotations

import json
from pathlib import Path

import pytest

from planekit.cli import main
from planekit.config import EPS_ENV
from planekit.geometry.tolerance import EPS_DEFAULT, get_tolerance, tolerance

X_AXIS = '{"name": "line", "pt": {"x": 0, "y": 0}, "norm": {"x": 0, "y": 1}}'
UNIT_CIRCLE = '{"name": "circle", "center": {"x": 0, "y": 0}, "radius": 1}'


def test_cli_intersect(capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["intersect", X_AXIS, UNIT_CIRCLE])
    assert rc == 0
    pts = json.loads(capsys.readouterr().out)
    assert [(p["x"], p["y"]) for p in pts] == [(-1.0, 0.0), (1.0, 0.0)]


def test_cli_distance_from_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    shape = tmp_path / "circle.json"
    shape.write_text('{"name": "circle", "center": {"x": 0, "y": 5}, "radius": 2}', encoding="utf-8")
    rc = main(["distance", X_AXIS, f"@{shape}"])
    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out["distance"] == pytest.approx(3.0)
    assert out["segment"]["start"]["y"] == pytest.approx(0.0)
    assert out["segment"]["end"]["y"] == pytest.approx(3.0)


def test_cli_svg_line_needs_a_box(capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["svg", X_AXIS])
    assert rc == 2
    assert "[ERROR]" in capsys.readouterr().out
    rc = main(["svg", X_AXIS, "--box", "-5", "-5", "5", "5", "--stroke", "blue"])
    assert rc == 0
    out = capsys.readouterr().out
    assert out.startswith("<line ")
    assert 'stroke="blue"' in out


def test_cli_svg_other_shapes(capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["svg", UNIT_CIRCLE])
    assert rc == 0
    assert capsys.readouterr().out.startswith("<circle ")


def test_cli_bad_input_returns_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["intersect", "{broken", UNIT_CIRCLE]) == 2
    assert main(["intersect", f"@{tmp_path / 'missing.json'}", UNIT_CIRCLE]) == 2
    assert main(["intersect", '{"name": "line", "pt": {"x": 0, "y": 0}, "norm": {"x": 0, "y": 0}}', UNIT_CIRCLE]) == 2
    assert "[ERROR]" in capsys.readouterr().out


def test_cli_unsupported_shape_returns_3(capsys: pytest.CaptureFixture[str]) -> None:
    box = '{"name": "box", "xmin": 0, "ymin": 0, "xmax": 1, "ymax": 1}'
    assert main(["intersect", X_AXIS, box]) == 3
    assert "unsupported shape(s)" in capsys.readouterr().out


def test_cli_eps_option_applies_only_during_the_run(capsys: pytest.CaptureFixture[str]) -> None:
    near = '{"name": "point", "x": 0, "y": 0.05}'
    assert main(["--eps", "0.1", "intersect", X_AXIS, near]) == 0
    assert len(json.loads(capsys.readouterr().out)) == 1
    assert get_tolerance().eps == EPS_DEFAULT
    assert main(["intersect", X_AXIS, near]) == 0
    assert json.loads(capsys.readouterr().out) == []
    assert main(["--eps", "0", "intersect", X_AXIS, near]) == 2
    assert get_tolerance().eps == EPS_DEFAULT


def test_cli_environment_tolerance_is_restored(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    near = '{"name": "point", "x": 0, "y": 0.05}'
    monkeypatch.setenv(EPS_ENV, "0.1")
    with tolerance(0.001):
        assert main(["intersect", X_AXIS, near]) == 0
        assert len(json.loads(capsys.readouterr().out)) == 1
        assert get_tolerance().eps == 0.001
    monkeypatch.setenv(EPS_ENV, "tiny")
    assert main(["intersect", X_AXIS, near]) == 2
    assert get_tolerance().eps == EPS_DEFAULT
