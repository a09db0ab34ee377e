from __future__ import annotations

import numpy as np

from latheform.mesh import Mesh


def face_normals(mesh: Mesh, faces: np.ndarray | None = None) -> np.ndarray:
    tri = mesh.faces if faces is None else faces
    v0 = mesh.vertices[tri[:, 0]]
    v1 = mesh.vertices[tri[:, 1]]
    v2 = mesh.vertices[tri[:, 2]]
    return np.cross(v1 - v0, v2 - v0)
