from __future__ import annotations

import logging

import numpy as np

from latheform.mesh import Mesh
from latheform.profile import LAYER_TOLERANCE

logger = logging.getLogger(__name__)

HOLE_SEGMENTS = 32


def _ring_at_height(mesh: Mesh, layer_height: float, search_limit: int | None) -> np.ndarray:
    heights = mesh.vertices[:search_limit, 1]
    return np.flatnonzero(np.abs(heights - layer_height) < LAYER_TOLERANCE)


def _fan_faces(ring: np.ndarray, center: int, is_top: bool) -> np.ndarray:
    current = ring
    following = np.roll(ring, -1)
    centers = np.full_like(ring, center)
    if is_top:
        return np.column_stack([current, centers, following])
    return np.column_stack([following, centers, current])


def _annulus_faces(ring: np.ndarray, hole_start: int) -> np.ndarray:
    outer_count = len(ring)
    step = outer_count / HOLE_SEGMENTS
    faces = []
    for k in range(HOLE_SEGMENTS):
        # Index-proportional pairing with the outer ring, not nearest point.
        o0 = ring[int(k * step) % outer_count]
        o1 = ring[int((k + 1) * step) % outer_count]
        h0 = hole_start + k
        h1 = hole_start + (k + 1) % HOLE_SEGMENTS
        faces.append([o1, h0, o0])
        faces.append([o1, h1, h0])
    return np.asarray(faces, dtype=int)


def cap_cross_section(
    mesh: Mesh,
    layer_height: float,
    is_top: bool,
    hole_radius: float | None = None,
    search_limit: int | None = None,
) -> bool:
    """Close the horizontal cross-section of ``mesh`` at ``layer_height``.

    The ring is every vertex within tolerance of the height, in buffer order,
    limited to the first ``search_limit`` vertices when given. A top cap faces
    +Y and a bottom cap faces -Y. A bottom cap with ``hole_radius`` becomes an
    annulus around a 32-segment hole centred on the ring's centroid.

    Returns False, leaving the mesh untouched, when fewer than three vertices
    lie on the layer.
    """

    ring = _ring_at_height(mesh, layer_height, search_limit)
    if len(ring) < 3:
        logger.debug("Skipping cap at y=%.4f: only %d vertices on the layer", layer_height, len(ring))
        return False

    avg_x = float(mesh.vertices[ring, 0].mean())
    avg_z = float(mesh.vertices[ring, 2].mean())

    if hole_radius is None or is_top:
        center = mesh.add_vertices([avg_x, layer_height, avg_z])
        mesh.add_faces(_fan_faces(ring, center, is_top))
        return True

    angles = np.arange(HOLE_SEGMENTS) * (2.0 * np.pi / HOLE_SEGMENTS)
    hole = np.column_stack(
        [
            avg_x + hole_radius * np.cos(angles),
            np.full(HOLE_SEGMENTS, layer_height),
            avg_z + hole_radius * np.sin(angles),
        ]
    )
    hole_start = mesh.add_vertices(hole)
    mesh.add_faces(_annulus_faces(ring, hole_start))
    return True


__all__ = ["HOLE_SEGMENTS", "cap_cross_section"]
