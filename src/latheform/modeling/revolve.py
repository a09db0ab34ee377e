from __future__ import annotations

from typing import Sequence

import numpy as np

from latheform.mesh import Mesh
from latheform.validation import ValidationError, validate_profile_points


def _ring_vertices(samples: np.ndarray, angle: float) -> np.ndarray:
    cos_a = np.cos(angle)
    sin_a = np.sin(angle)
    return np.column_stack([samples[:, 0] * cos_a, samples[:, 1], samples[:, 0] * sin_a])


def revolve_profile(samples: Sequence[Sequence[float]] | np.ndarray, cycles: int) -> Mesh:
    """Lathe a sample set a full turn around the Y axis.

    Produces ``cycles`` rings of vertices and the side walls between them; the
    last ring is stitched back to the first. No caps are added.
    """

    if cycles <= 0:
        raise ValidationError("cycles must be positive.")
    samples = validate_profile_points(samples)
    ring_size = samples.shape[0]
    if ring_size < 2:
        return Mesh.empty()

    angles = np.arange(cycles) * (2.0 * np.pi / cycles)
    vertices = np.vstack([_ring_vertices(samples, angle) for angle in angles])

    faces = []
    for ring in range(cycles):
        next_ring = (ring + 1) % cycles
        ring_offset = ring * ring_size
        next_offset = next_ring * ring_size
        for j in range(ring_size - 1):
            b0 = ring_offset + j
            b1 = b0 + 1
            t0 = next_offset + j
            t1 = t0 + 1
            faces.append([b0, b1, t0])
            faces.append([b1, t1, t0])

    return Mesh(vertices, np.asarray(faces, dtype=int))


__all__ = ["revolve_profile"]
