from __future__ import annotations

from pathlib import Path
from typing import Iterable

from rich.console import Console

from latheform.io._text import reoriented
from latheform.mesh import Mesh, mesh_to_pyvista

MESH_COLOR = "#ff8c00"
GRID_SIZE = 400.0


class PreviewBackendError(RuntimeError):
    """Raised when a preview backend cannot run."""


class PyVistaPreviewer:
    """Render revolution meshes in a PyVista window, Z-up like the exported files."""

    def __init__(self, console: Console | None = None):
        self.console = console
        self._pv = None

    def show(
        self,
        meshes: Iterable[Mesh],
        wireframe: bool = False,
        screenshot_path: Path | None = None,
    ) -> None:
        pv = self._ensure_backend()
        datasets = self.to_datasets(meshes)
        if not datasets:
            raise PreviewBackendError("Nothing to preview: the revolution produced no geometry.")

        plotter = pv.Plotter(window_size=(1280, 800), off_screen=screenshot_path is not None)
        plotter.add_axes(interactive=True)
        for index, dataset in enumerate(datasets):
            plotter.add_mesh(
                dataset,
                name=f"mesh-{index}",
                color=MESH_COLOR,
                opacity=0.4 if wireframe else 1.0,
                show_edges=wireframe,
                edge_color="black",
                smooth_shading=True,
                specular=0.1,
            )
        plotter.show_grid(bounds=(-GRID_SIZE / 2, GRID_SIZE / 2, -GRID_SIZE / 2, GRID_SIZE / 2, 0.0, 0.0))
        plotter.reset_camera()

        if screenshot_path is not None:
            screenshot_path.parent.mkdir(parents=True, exist_ok=True)
            plotter.show(title="latheform preview", auto_close=True, screenshot=str(screenshot_path))
            if self.console is not None:
                self.console.print(f"[green]Saved screenshot to {screenshot_path}[/green]")
        else:
            plotter.show(title="latheform preview")
        plotter.close()

    def to_datasets(self, meshes: Iterable[Mesh]) -> list[object]:
        self._ensure_backend()
        return [mesh_to_pyvista(reoriented(mesh)) for mesh in meshes if not mesh.is_empty]

    def _ensure_backend(self):
        if self._pv is None:
            try:
                import pyvista as pv
            except ImportError as exc:  # pragma: no cover - runtime dep
                raise PreviewBackendError(
                    "PyVista is required for previewing. Install latheform with `pip install -e .`."
                ) from exc
            pv.set_plot_theme("document")
            self._pv = pv
        return self._pv
