from __future__ import annotations

import numpy as np
import pytest

from latheform.modeling import revolve_profile
from latheform.validation import ValidationError
from tests.helpers import face_normals


@pytest.mark.parametrize("cycles,points", [(4, 2), (12, 5), (180, 3)])
def test_revolve_counts(cycles, points):
    samples = np.column_stack([np.full(points, 20.0), np.linspace(0.0, 30.0, points)])
    mesh = revolve_profile(samples, cycles)
    assert mesh.n_vertices == cycles * points
    assert mesh.n_faces == cycles * (points - 1) * 2


def test_revolve_straight_profile_scenario(straight_profile):
    mesh = revolve_profile(straight_profile, 4)
    assert mesh.n_vertices == 8
    assert mesh.n_faces == 8
    assert mesh.faces.max() < mesh.n_vertices


def test_rings_rotate_about_y():
    mesh = revolve_profile([(50.0, 0.0), (50.0, 100.0)], 4)
    assert np.allclose(mesh.vertices[0], [50.0, 0.0, 0.0])
    assert np.allclose(mesh.vertices[2], [0.0, 0.0, 50.0], atol=1e-9)
    assert np.allclose(mesh.vertices[5], [-50.0, 100.0, 0.0], atol=1e-9)


def test_last_ring_wraps_to_first():
    mesh = revolve_profile([(50.0, 0.0), (50.0, 100.0)], 4)
    last_ring = {6, 7}
    first_ring = {0, 1}
    stitched = [set(tri) for tri in mesh.faces.tolist() if set(tri) & last_ring and set(tri) & first_ring]
    assert len(stitched) == 2


def test_walls_face_outward_for_upward_profile():
    mesh = revolve_profile([(30.0, 0.0), (40.0, 10.0), (35.0, 20.0)], 16)
    normals = face_normals(mesh)
    centers = mesh.vertices[mesh.faces].mean(axis=1)
    radial = centers.copy()
    radial[:, 1] = 0.0
    assert np.all(np.einsum("ij,ij->i", normals, radial) > 0)


def test_revolve_needs_two_points():
    assert revolve_profile([(10.0, 0.0)], 8).is_empty


def test_revolve_rejects_nonpositive_cycles():
    with pytest.raises(ValidationError):
        revolve_profile([(10.0, 0.0), (10.0, 5.0)], 0)
