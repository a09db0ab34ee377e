from __future__ import annotations

import numpy as np
import pytest

from latheform.modeling import make_lip_insert
from latheform.modeling.primitives import LIP_HEIGHT, LIP_SEGMENTS
from latheform.validation import ValidationError
from tests.helpers import face_normals


def test_lip_insert_counts():
    mesh = make_lip_insert(10.0)
    assert mesh.n_vertices == 3 * LIP_SEGMENTS + 1
    assert mesh.n_faces == 3 * LIP_SEGMENTS


def test_lip_insert_stands_on_base_plane():
    mesh = make_lip_insert(10.0)
    xmin, xmax, ymin, ymax, zmin, zmax = mesh.bounds
    assert ymin == pytest.approx(0.0)
    assert ymax == pytest.approx(LIP_HEIGHT)
    assert xmax == pytest.approx(10.0)
    assert xmin == pytest.approx(-10.0)


def test_lip_insert_is_open_at_the_bottom():
    mesh = make_lip_insert(10.0)
    heights = mesh.vertices[mesh.faces][:, :, 1]
    assert not np.any(np.all(np.isclose(heights, 0.0), axis=1))
    assert np.count_nonzero(np.all(np.isclose(heights, LIP_HEIGHT), axis=1)) == LIP_SEGMENTS


def test_lip_insert_normals():
    mesh = make_lip_insert(5.0)
    assert mesh.normals is not None
    cap_center = mesh.normals[-1]
    assert np.allclose(cap_center, [0.0, 1.0, 0.0])
    walls = face_normals(mesh, mesh.faces[: 2 * LIP_SEGMENTS])
    centers = mesh.vertices[mesh.faces[: 2 * LIP_SEGMENTS]].mean(axis=1)
    centers[:, 1] = 0.0
    assert np.all(np.einsum("ij,ij->i", walls, centers) > 0)


def test_lip_insert_rejects_bad_radius():
    with pytest.raises(ValidationError):
        make_lip_insert(0.0)
