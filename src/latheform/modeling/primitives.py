from __future__ import annotations

import numpy as np

from latheform.mesh import Mesh
from latheform.validation import validate_positive

LIP_HEIGHT = 3.0
LIP_SEGMENTS = 32


def _capped_tube_mesh(radius: float, height: float, resolution: int) -> Mesh:
    y_bottom = -height / 2.0
    y_top = height / 2.0
    angles = np.linspace(0, 2 * np.pi, resolution, endpoint=False)

    def ring_points(y: float) -> np.ndarray:
        return np.column_stack(
            [
                radius * np.cos(angles),
                np.full_like(angles, y),
                radius * np.sin(angles),
            ]
        )

    bottom_indices = np.arange(resolution)
    top_indices = bottom_indices + resolution
    # The cap gets its own ring so its normals stay flat.
    cap_indices = top_indices + resolution
    center = 3 * resolution

    points = np.vstack([ring_points(y_bottom), ring_points(y_top), ring_points(y_top), [[0.0, y_top, 0.0]]])

    faces = []
    for i in range(resolution):
        j = (i + 1) % resolution
        faces.append([bottom_indices[i], top_indices[i], bottom_indices[j]])
        faces.append([top_indices[i], top_indices[j], bottom_indices[j]])
    for i in range(resolution):
        j = (i + 1) % resolution
        faces.append([cap_indices[i], center, cap_indices[j]])

    return Mesh(points, np.asarray(faces, dtype=int))


def make_lip_insert(radius: float, height: float = LIP_HEIGHT, resolution: int = LIP_SEGMENTS) -> Mesh:
    """Open-bottomed tube with a closed top, standing on y=0.

    Models the lip around a bored base hole. The tube is built centred on the
    origin and lifted by half its height so the open end sits on the base plane.
    """

    validate_positive("radius", radius)
    validate_positive("height", height)
    mesh = _capped_tube_mesh(float(radius), float(height), int(resolution))
    mesh.translate((0.0, height / 2.0, 0.0))
    mesh.compute_vertex_normals()
    return mesh


__all__ = ["LIP_HEIGHT", "LIP_SEGMENTS", "make_lip_insert"]
