from __future__ import annotations

import json

from typer.testing import CliRunner

from latheform.cli import _next_available_path, app

runner = CliRunner()


def test_export_stl(tmp_path, profile_file):
    output = tmp_path / "vase.stl"
    result = runner.invoke(app, ["export", str(profile_file), "-o", str(output), "--cycles", "8", "--closure-base"])
    assert result.exit_code == 0, result.output
    text = output.read_text()
    assert text.startswith("solid exported")
    assert text.count("facet normal") == 8 * 2 + 8


def test_export_obj_with_hole(tmp_path, profile_file):
    output = tmp_path / "vase.obj"
    result = runner.invoke(
        app,
        ["export", str(profile_file), "--format", "obj", "-o", str(output), "--closure-base", "--hole-radius", "10"],
    )
    assert result.exit_code == 0, result.output
    assert output.read_text().startswith("# Exported OBJ")


def test_export_does_not_overwrite(tmp_path, profile_file):
    output = tmp_path / "model.stl"
    output.write_text("keep me")
    result = runner.invoke(app, ["export", str(profile_file), "-o", str(output), "--cycles", "4"])
    assert result.exit_code == 0, result.output
    assert output.read_text() == "keep me"
    assert (tmp_path / "model (1).stl").exists()


def test_export_overwrite(tmp_path, profile_file):
    output = tmp_path / "model.stl"
    output.write_text("old")
    result = runner.invoke(app, ["export", str(profile_file), "-o", str(output), "--overwrite", "--cycles", "4"])
    assert result.exit_code == 0, result.output
    assert output.read_text().startswith("solid exported")


def test_export_needs_two_points(tmp_path):
    profile = tmp_path / "dot.json"
    profile.write_text(json.dumps([{"x": 1, "y": 1}]))
    result = runner.invoke(app, ["export", str(profile), "-o", str(tmp_path / "out.stl")])
    assert result.exit_code == 1
    assert not (tmp_path / "out.stl").exists()


def test_export_missing_profile(tmp_path):
    result = runner.invoke(app, ["export", str(tmp_path / "missing.json")])
    assert result.exit_code != 0


def test_info(profile_file):
    result = runner.invoke(app, ["info", str(profile_file), "--cycles", "4", "--closure-top"])
    assert result.exit_code == 0, result.output
    assert "Meshes" in result.output
    assert "Height: 100.00 mm" in result.output


def test_next_available_path(tmp_path):
    target = tmp_path / "model.obj"
    assert _next_available_path(target) == target
    target.write_text("")
    (tmp_path / "model (1).obj").write_text("")
    assert _next_available_path(target) == tmp_path / "model (2).obj"


def test_info_with_lip_insert(profile_file):
    result = runner.invoke(app, ["info", str(profile_file), "--cycles", "8", "--closure-base", "--hole-radius", "5"])
    assert result.exit_code == 0, result.output
    assert "lip insert" in result.output
    assert "total" in result.output


def test_info_reports_open_edges(profile_file):
    result = runner.invoke(app, ["info", str(profile_file), "--cycles", "4", "--no-closure-top", "--no-closure-base"])
    assert result.exit_code == 0, result.output
    assert "main: 8 boundary edges" in result.output


def test_info_reports_issues_per_mesh(profile_file):
    result = runner.invoke(app, ["info", str(profile_file), "--cycles", "8", "--closure-base", "--hole-radius", "5"])
    assert result.exit_code == 0, result.output
    assert "lip insert: " in result.output
    assert "main: " in result.output
