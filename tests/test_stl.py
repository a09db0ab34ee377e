from __future__ import annotations

import numpy as np

from latheform import RevolutionConfig, build_revolution
from latheform.io import stl_text, write_stl
from latheform.io._text import format_number
from latheform.mesh import Mesh


def _triangle_with_normals() -> Mesh:
    mesh = Mesh([[1.0, 2.0, 3.0], [0.0, 0.0, 0.0], [1.0, 0.0, 0.0]], [[0, 1, 2]])
    mesh.normals = np.array([[0.0, 1.0, 0.0], [1.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
    return mesh


def test_stl_header_trailer_and_facets(straight_profile):
    result = build_revolution(straight_profile, RevolutionConfig(cycles=12, closure_top=True, closure_base=True))
    text = stl_text(result.meshes)
    lines = text.splitlines()
    assert lines[0] == "solid exported"
    assert lines[-1] == "endsolid exported"
    assert text.count("facet normal") == result.main.n_faces
    assert text.count("endfacet") == result.main.n_faces
    assert text.count("vertex ") == 3 * result.main.n_faces


def test_stl_includes_insert(straight_profile):
    config = RevolutionConfig(cycles=8, closure_base=True, use_custom_radius=True, custom_radius=5.0)
    result = build_revolution(straight_profile, config)
    text = stl_text(result.meshes)
    assert text.count("facet normal") == result.main.n_faces + result.insert.n_faces


def test_stl_empty_mesh_is_empty_solid():
    assert stl_text(Mesh.empty()) == "solid exported\nendsolid exported\n"


def test_stl_mesh_without_normals_is_skipped():
    mesh = Mesh([[0, 0, 0], [1, 0, 0], [0, 1, 0]], [[0, 1, 2]])
    assert stl_text([mesh]) == "solid exported\nendsolid exported\n"


def test_stl_rotates_to_z_up_and_uses_first_vertex_normal():
    text = stl_text(_triangle_with_normals())
    lines = [line.strip() for line in text.splitlines()]
    # (x, y, z) -> (x, -z, y)
    assert lines[1] == "facet normal 0 0 1"
    assert lines[3] == "vertex 1 -3 2"
    assert lines[4] == "vertex 0 0 0"


def test_stl_does_not_modify_input():
    mesh = _triangle_with_normals()
    stl_text(mesh)
    assert np.allclose(mesh.vertices[0], [1.0, 2.0, 3.0])


def test_write_stl(tmp_path):
    path = tmp_path / "model.stl"
    write_stl([_triangle_with_normals()], path)
    assert path.read_text().startswith("solid exported")


def test_format_number():
    assert format_number(50.0) == "50"
    assert format_number(-0.0) == "0"
    assert format_number(0.25) == "0.25"
    assert format_number(-12.5) == "-12.5"
