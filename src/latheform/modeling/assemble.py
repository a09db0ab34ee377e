from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from latheform._config import RevolutionConfig
from latheform.mesh import Mesh
from latheform.profile import resample_profile
from latheform.validation import validate_profile_points

from .caps import cap_cross_section
from .primitives import make_lip_insert
from .revolve import revolve_profile

logger = logging.getLogger(__name__)


@dataclass
class RevolutionResult:
    """Meshes produced for one profile: the lathe body and the optional hole lip."""

    main: Mesh
    insert: Mesh | None = None
    samples: np.ndarray | None = None

    @property
    def meshes(self) -> list[Mesh]:
        return [mesh for mesh in (self.main, self.insert) if mesh is not None and not mesh.is_empty]

    @property
    def is_empty(self) -> bool:
        return not self.meshes


def _add_septum(mesh: Mesh, config: RevolutionConfig, min_y: float, max_y: float, ring_limit: int) -> None:
    layer_height = min_y + (config.layer_value - 1) * config.wf_height
    if layer_height > max_y:
        logger.debug("Septum layer %d at y=%.4f is above the profile; skipped", config.layer_value, layer_height)
        return
    # Two coincident caps facing opposite ways.
    cap_cross_section(mesh, layer_height, is_top=True, search_limit=ring_limit)
    cap_cross_section(mesh, layer_height, is_top=False, search_limit=ring_limit)


def build_revolution(
    points: Sequence[Sequence[float]] | np.ndarray,
    config: RevolutionConfig | None = None,
) -> RevolutionResult:
    """Build the lathe mesh for ``points`` with the closures requested in ``config``.

    An input with fewer than two points, or one that revolves into less than a
    triangle, yields an empty main mesh and no insert.
    """

    config = config or RevolutionConfig()
    profile = validate_profile_points(points)
    if len(profile) < 2:
        logger.warning("Profile has %d points; at least 2 are needed for a revolution.", len(profile))
        return RevolutionResult(main=Mesh.empty())

    samples = resample_profile(profile, config.wf_height)
    mesh = revolve_profile(samples, config.cycles)
    if mesh.n_vertices < 3 or mesh.faces.size < 3:
        logger.warning("Revolution produced no usable geometry.")
        return RevolutionResult(main=Mesh.empty(), samples=samples)

    ring_limit = mesh.n_vertices
    min_y = float(profile[:, 1].min())
    max_y = float(profile[:, 1].max())

    if config.double_closure and config.wf_height > 0:
        _add_septum(mesh, config, min_y, max_y, ring_limit)

    if config.closure_top:
        top_y = float(mesh.vertices[:ring_limit, 1].max())
        cap_cross_section(mesh, top_y, is_top=True, search_limit=ring_limit)

    if config.closure_base:
        base_y = float(mesh.vertices[:ring_limit, 1].min())
        cap_cross_section(mesh, base_y, is_top=False, hole_radius=config.hole_radius, search_limit=ring_limit)

    mesh.compute_vertex_normals()

    insert = None
    if config.hole_radius is not None:
        insert = make_lip_insert(config.hole_radius)

    logger.debug(
        "Built revolution: %d samples, %d vertices, %d triangles%s",
        len(samples),
        mesh.n_vertices,
        mesh.n_faces,
        " plus lip insert" if insert is not None else "",
    )
    return RevolutionResult(main=mesh, insert=insert, samples=samples)


__all__ = ["RevolutionResult", "build_revolution"]
