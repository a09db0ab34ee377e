from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np


@dataclass
class MeshAnalysis:
    n_vertices: int
    n_faces: int
    degenerate_faces: int
    boundary_edges: int
    nonmanifold_edges: int
    invalid_vertices: int

    def issues(self) -> list[str]:
        issues: list[str] = []
        if self.invalid_vertices > 0:
            issues.append(f"{self.invalid_vertices} invalid vertices (NaN/inf)")
        if self.degenerate_faces > 0:
            issues.append(f"{self.degenerate_faces} degenerate faces")
        if self.boundary_edges > 0:
            issues.append(f"{self.boundary_edges} boundary edges")
        if self.nonmanifold_edges > 0:
            issues.append(f"{self.nonmanifold_edges} non-manifold edges")
        return issues


@dataclass
class Mesh:
    """Indexed triangle mesh that only grows while it is being built.

    ``vertices`` is ``(V, 3)``, ``faces`` is ``(F, 3)`` with indices into
    ``vertices``. ``normals`` holds per-vertex normals once
    :meth:`compute_vertex_normals` has run and is reset by any append.
    """

    vertices: np.ndarray
    faces: np.ndarray
    normals: np.ndarray | None = None

    def __post_init__(self) -> None:
        self.vertices = np.asarray(self.vertices, dtype=float).reshape(-1, 3).copy()
        self.faces = np.asarray(self.faces, dtype=int).reshape(-1, 3).copy()
        if self.normals is not None:
            self.normals = np.asarray(self.normals, dtype=float).reshape(-1, 3).copy()

    @classmethod
    def empty(cls) -> "Mesh":
        return cls(np.zeros((0, 3), dtype=float), np.zeros((0, 3), dtype=int))

    def copy(self) -> "Mesh":
        return Mesh(
            vertices=self.vertices.copy(),
            faces=self.faces.copy(),
            normals=None if self.normals is None else self.normals.copy(),
        )

    @property
    def n_vertices(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def n_faces(self) -> int:
        return int(self.faces.shape[0])

    @property
    def is_empty(self) -> bool:
        return self.n_vertices == 0 or self.n_faces == 0

    @property
    def bounds(self) -> tuple[float, float, float, float, float, float]:
        if self.n_vertices == 0:
            return (0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
        mins = self.vertices.min(axis=0)
        maxs = self.vertices.max(axis=0)
        return (float(mins[0]), float(maxs[0]), float(mins[1]), float(maxs[1]), float(mins[2]), float(maxs[2]))

    def add_vertices(self, points: Sequence[Sequence[float]] | np.ndarray) -> int:
        """Append vertices and return the index of the first one."""

        block = np.asarray(points, dtype=float).reshape(-1, 3)
        start = self.n_vertices
        self.vertices = np.vstack([self.vertices, block])
        self.normals = None
        return start

    def add_faces(self, triangles: Sequence[Sequence[int]] | np.ndarray) -> None:
        block = np.asarray(triangles, dtype=int).reshape(-1, 3)
        if block.size and (block.min() < 0 or block.max() >= self.n_vertices):
            raise IndexError("Face index out of range for mesh vertices.")
        self.faces = np.vstack([self.faces, block])
        self.normals = None

    def compute_vertex_normals(self) -> np.ndarray:
        """Area-weighted vertex normals accumulated from incident faces."""

        normals = np.zeros_like(self.vertices)
        if self.n_faces:
            v0 = self.vertices[self.faces[:, 0]]
            v1 = self.vertices[self.faces[:, 1]]
            v2 = self.vertices[self.faces[:, 2]]
            face_normals = np.cross(v1 - v0, v2 - v0)
            for column in range(3):
                np.add.at(normals, self.faces[:, column], face_normals)
        lengths = np.linalg.norm(normals, axis=1)
        nonzero = lengths > 0
        normals[nonzero] = normals[nonzero] / lengths[nonzero, np.newaxis]
        self.normals = normals
        return normals

    def transform(self, matrix: np.ndarray, inplace: bool = True) -> "Mesh":
        """Apply a 4x4 affine matrix; normals follow the linear part."""

        matrix = np.asarray(matrix, dtype=float).reshape(4, 4)
        target = self if inplace else self.copy()
        verts = np.hstack([target.vertices, np.ones((target.n_vertices, 1), dtype=float)])
        target.vertices = (matrix @ verts.T).T[:, :3]
        if target.normals is not None:
            linear = matrix[:3, :3]
            if not np.allclose(linear @ linear.T, np.eye(3)):
                linear = np.linalg.inv(linear).T
            normals = (linear @ target.normals.T).T
            lengths = np.linalg.norm(normals, axis=1)
            nonzero = lengths > 0
            normals[nonzero] = normals[nonzero] / lengths[nonzero, np.newaxis]
            target.normals = normals
        return target

    def translate(self, offset: Sequence[float], inplace: bool = True) -> "Mesh":
        vec = np.asarray(offset, dtype=float).reshape(3)
        target = self if inplace else self.copy()
        target.vertices = target.vertices + vec
        return target


def combine_meshes(meshes: Iterable[Mesh]) -> Mesh:
    meshes_list = list(meshes)
    if not meshes_list:
        raise ValueError("combine_meshes requires at least one mesh.")

    vertices = []
    faces = []
    normals: list[np.ndarray | None] = []
    offset = 0
    for mesh in meshes_list:
        vertices.append(mesh.vertices)
        faces.append(mesh.faces + offset)
        offset += mesh.n_vertices
        normals.append(mesh.normals)

    combined = Mesh(vertices=np.vstack(vertices), faces=np.vstack(faces))
    if all(block is not None for block in normals):
        combined.normals = np.vstack(normals)
    return combined


def analyze_mesh(mesh: Mesh, area_epsilon: float = 1e-12) -> MeshAnalysis:
    verts = mesh.vertices
    faces = mesh.faces
    invalid_vertices = int(np.count_nonzero(~np.isfinite(verts)))

    degenerate_faces = 0
    if faces.size > 0:
        v0 = verts[faces[:, 0]]
        v1 = verts[faces[:, 1]]
        v2 = verts[faces[:, 2]]
        cross = np.cross(v1 - v0, v2 - v0)
        areas = np.linalg.norm(cross, axis=1) * 0.5
        degenerate_faces = int(np.count_nonzero(areas <= area_epsilon))

    edge_counts: dict[tuple[int, int], int] = {}
    for tri in faces:
        edges = [(tri[0], tri[1]), (tri[1], tri[2]), (tri[2], tri[0])]
        for a, b in edges:
            key = (int(a), int(b)) if a < b else (int(b), int(a))
            edge_counts[key] = edge_counts.get(key, 0) + 1

    boundary_edges = sum(1 for count in edge_counts.values() if count == 1)
    nonmanifold_edges = sum(1 for count in edge_counts.values() if count > 2)

    return MeshAnalysis(
        n_vertices=mesh.n_vertices,
        n_faces=mesh.n_faces,
        degenerate_faces=degenerate_faces,
        boundary_edges=boundary_edges,
        nonmanifold_edges=nonmanifold_edges,
        invalid_vertices=invalid_vertices,
    )


def mesh_to_pyvista(mesh: Mesh):
    import pyvista as pv

    if mesh.n_faces == 0:
        return pv.PolyData(mesh.vertices, deep=True)
    faces = np.hstack([np.array([3, *tri], dtype=np.int64) for tri in mesh.faces])
    poly = pv.PolyData(mesh.vertices, faces, deep=True)
    return poly
