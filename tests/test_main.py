"""Tests for the command-line entry point."""

from __future__ import annotations

import shutil

import pytest

from tests.conftest import LINE_SVG, VECTOR_DRAWABLE_XML, WIDE_SVG

from icongen.config import Settings
from icongen.engine import pipeline as pipeline_mod
from icongen.engine.config import PipelineConfig
from icongen import main as main_mod
from icongen.main import main
from icongen.svg.transform import TransformMode, transform_paths_for_slot


def test_transform_command(tmp_path, capsys):
    svg = tmp_path / "line.svg"
    svg.write_text(LINE_SVG)

    assert main(["transform", str(svg), "--slot", "0"]) == 0
    assert capsys.readouterr().out.strip() == transform_paths_for_slot(LINE_SVG, 0)


def test_transform_command_uses_configured_mode(tmp_path, capsys, monkeypatch):
    svg = tmp_path / "wide.svg"
    svg.write_text(WIDE_SVG)
    monkeypatch.setattr(main_mod.settings, "transform_mode", TransformMode.GEOMETRIC)

    assert main(["transform", str(svg), "--slot", "2"]) == 0
    assert capsys.readouterr().out.strip() == transform_paths_for_slot(WIDE_SVG, 2, TransformMode.GEOMETRIC)

    assert main(["transform", str(svg), "--slot", "2", "--mode", "positional"]) == 0
    assert capsys.readouterr().out.strip() == transform_paths_for_slot(WIDE_SVG, 2)


def test_transform_command_unknown_slot(tmp_path):
    svg = tmp_path / "line.svg"
    svg.write_text(LINE_SVG)
    assert main(["transform", str(svg), "--slot", "7"]) == 1


def test_build_missing_icons_dir(tmp_path):
    assert main(["build", "--icons-dir", str(tmp_path / "missing"), "--output-dir", str(tmp_path / "out")]) == 1


def test_build_runs_pipeline(tmp_path, monkeypatch):
    icons = tmp_path / "icons"
    icons.mkdir()
    (icons / "line.svg").write_text(LINE_SVG)

    def fake_fix(source, destination_dir, command):
        fixed = destination_dir / source.name
        shutil.copyfile(source, fixed)
        return fixed

    def fake_convert(source, output, command):
        output.write_text(VECTOR_DRAWABLE_XML)
        return output

    monkeypatch.setattr(pipeline_mod, "fix_svg", fake_fix)
    monkeypatch.setattr(pipeline_mod, "convert_to_vector_drawable", fake_convert)

    out = tmp_path / "out"
    assert main(["build", "--icons-dir", str(icons), "--output-dir", str(out), "--mode", "geometric"]) == 0
    assert (out / "android" / "ic_line.xml").exists()
    assert (out / "ios" / "Icons.xcassets" / "line.symbolset" / "line.svg").exists()


def test_install_missing_source(tmp_path):
    assert main(["install", str(tmp_path), "--skip-ios"]) == 1


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert "icongen" in capsys.readouterr().out


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("ICONGEN_ICONS_DIR", "./svg")
    monkeypatch.setenv("ICONGEN_TRANSFORM_MODE", "geometric")
    monkeypatch.setenv("ICONGEN_FIXER_COMMAND", "oslllo-svg-fixer")

    config = PipelineConfig.from_settings(Settings())

    assert str(config.icons_dir) == "svg"
    assert config.transform_mode is TransformMode.GEOMETRIC
    assert config.fixer_command == "oslllo-svg-fixer"
    assert config.catalog_dir.name == "Icons.xcassets"
