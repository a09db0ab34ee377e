from __future__ import annotations

from typing import Iterable

import numpy as np

from latheform.mesh import Mesh

# +90 degrees about X: modeling space is Y-up, exported files are Z-up.
Y_UP_TO_Z_UP = np.array(
    [
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 0.0, -1.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ],
    dtype=float,
)


def as_mesh_list(meshes: Mesh | Iterable[Mesh | None]) -> list[Mesh]:
    if isinstance(meshes, Mesh):
        return [meshes]
    return [mesh for mesh in meshes if mesh is not None]


def reoriented(mesh: Mesh) -> Mesh:
    return mesh.transform(Y_UP_TO_Z_UP, inplace=False)


def format_number(value: float) -> str:
    """Shortest round-trip decimal, integral values without a trailing '.0'."""

    value = float(value)
    if value == 0.0:
        return "0"
    text = repr(value)
    if text.endswith(".0"):
        return text[:-2]
    return text


def format_vector(values: Iterable[float]) -> str:
    return " ".join(format_number(v) for v in values)
