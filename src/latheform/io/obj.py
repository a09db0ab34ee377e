from __future__ import annotations

from pathlib import Path
from typing import Iterable

from latheform.mesh import Mesh

from ._text import as_mesh_list, format_vector, reoriented

HEADER = "# Exported OBJ"


def obj_text(meshes: Mesh | Iterable[Mesh | None]) -> str:
    """Serialize meshes into one OBJ document.

    Each mesh writes its ``v``, ``vn`` and ``f`` lines in turn; face indices
    are 1-based and shifted past the vertices of the meshes written before it.
    Meshes without vertices, normals or faces are left out.
    """

    lines = [HEADER]
    vertex_count = 0
    for mesh in as_mesh_list(meshes):
        if mesh.n_vertices == 0 or mesh.normals is None or mesh.n_faces == 0:
            continue
        mesh = reoriented(mesh)
        lines.extend(f"v {format_vector(v)}" for v in mesh.vertices)
        lines.extend(f"vn {format_vector(n)}" for n in mesh.normals)
        for tri in mesh.faces + vertex_count + 1:
            a, b, c = (int(i) for i in tri)
            lines.append(f"f {a}//{a} {b}//{b} {c}//{c}")
        vertex_count += mesh.n_vertices
    return "\n".join(lines) + "\n"


def write_obj(meshes: Mesh | Iterable[Mesh | None], path: Path) -> None:
    path = Path(path)
    path.write_text(obj_text(meshes))
