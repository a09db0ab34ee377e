from __future__ import annotations

from pathlib import Path
from typing import Iterable

from latheform.mesh import Mesh

from ._text import as_mesh_list, format_vector, reoriented

SOLID_NAME = "exported"


def _facet_lines(mesh: Mesh) -> list[str]:
    if mesh.normals is None or mesh.n_faces == 0:
        return []
    mesh = reoriented(mesh)
    vertices = mesh.vertices
    normals = mesh.normals

    lines = []
    for tri in mesh.faces:
        # Facet normal is the first vertex's normal, not a face normal.
        lines.append(f"  facet normal {format_vector(normals[tri[0]])}")
        lines.append("    outer loop")
        for vidx in tri:
            lines.append(f"      vertex {format_vector(vertices[vidx])}")
        lines.append("    endloop")
        lines.append("  endfacet")
    return lines


def stl_text(meshes: Mesh | Iterable[Mesh | None]) -> str:
    """Serialize one or more meshes into a single ASCII STL solid."""

    lines = [f"solid {SOLID_NAME}"]
    for mesh in as_mesh_list(meshes):
        lines.extend(_facet_lines(mesh))
    lines.append(f"endsolid {SOLID_NAME}")
    return "\n".join(lines) + "\n"


def write_stl(meshes: Mesh | Iterable[Mesh | None], path: Path) -> None:
    path = Path(path)
    path.write_text(stl_text(meshes))
