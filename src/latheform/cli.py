from __future__ import annotations

import logging
import pathlib
from dataclasses import replace
from enum import Enum

import numpy as np
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from latheform._config import RevolutionConfig, load_revolution_defaults
from latheform.io import export_obj, export_stl
from latheform.logging_config import setup_logging
from latheform.mesh import analyze_mesh, combine_meshes
from latheform.modeling import build_revolution
from latheform.preview import PreviewBackendError, PyVistaPreviewer
from latheform.profile import load_profile, profile_height
from latheform.validation import ValidationError

console = Console()
app = typer.Typer(help="Revolve a drawn profile into a lathe mesh and export it.")


class ExportFormat(str, Enum):
    stl = "stl"
    obj = "obj"


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging.")) -> None:
    setup_logging(logging.DEBUG if verbose else logging.INFO, console=console)


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


def _load_points(profile: pathlib.Path) -> np.ndarray:
    if not profile.exists():
        raise typer.BadParameter(f"Profile path {profile} does not exist.")
    try:
        return load_profile(profile)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _resolve_config(
    cycles: int | None,
    wf_height: float | None,
    closure_top: bool | None,
    closure_base: bool | None,
    double_closure: bool | None,
    layer: int | None,
    hole_radius: float | None,
) -> RevolutionConfig:
    overrides: dict[str, object] = {}
    if cycles is not None:
        overrides["cycles"] = cycles
    if wf_height is not None:
        overrides["wf_height"] = wf_height
    if closure_top is not None:
        overrides["closure_top"] = closure_top
    if closure_base is not None:
        overrides["closure_base"] = closure_base
    if double_closure is not None:
        overrides["double_closure"] = double_closure
    if layer is not None:
        overrides["layer_value"] = layer
    if hole_radius is not None:
        overrides["use_custom_radius"] = hole_radius > 0
        if hole_radius > 0:
            overrides["custom_radius"] = hole_radius
    try:
        return replace(load_revolution_defaults(), **overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


CyclesOption = typer.Option(None, "--cycles", min=1, help="Number of rings around the axis.")
WfHeightOption = typer.Option(None, "--wf-height", min=0.0, help="Layer spacing in mm; 0 keeps the raw profile.")
TopOption = typer.Option(None, "--closure-top/--no-closure-top", help="Cap the top cross-section.")
BaseOption = typer.Option(None, "--closure-base/--no-closure-base", help="Cap the base cross-section.")
DoubleOption = typer.Option(
    None, "--double-closure/--no-double-closure", help="Add an internal septum at --layer (needs --wf-height)."
)
LayerOption = typer.Option(None, "--layer", min=1, help="1-based layer index of the septum.")
HoleOption = typer.Option(
    None, "--hole-radius", min=0.0, help="Bore a hole of this radius in the base cap; 0 disables it."
)


@app.command()
def export(
    profile: pathlib.Path = typer.Argument(..., help="JSON file with the profile points."),
    fmt: ExportFormat = typer.Option(ExportFormat.stl, "--format", "-f", help="Output format."),
    output: pathlib.Path | None = typer.Option(
        None, "--output", "-o", help="Destination file; defaults to model.stl or model.obj."
    ),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing file."),
    cycles: int | None = CyclesOption,
    wf_height: float | None = WfHeightOption,
    closure_top: bool | None = TopOption,
    closure_base: bool | None = BaseOption,
    double_closure: bool | None = DoubleOption,
    layer: int | None = LayerOption,
    hole_radius: float | None = HoleOption,
) -> None:
    """
    Revolve the profile and save it as an ASCII STL or OBJ file.
    """

    points = _load_points(profile)
    config = _resolve_config(cycles, wf_height, closure_top, closure_base, double_closure, layer, hole_radius)

    exporter = export_stl if fmt is ExportFormat.stl else export_obj
    document = exporter(points, config)
    if document is None:
        console.print("[red]Nothing exported: draw at least two profile points.[/red]")
        raise typer.Exit(code=1)

    target = output if output is not None else pathlib.Path(document.filename)
    final_output = target
    if target.exists() and not overwrite:
        final_output = _next_available_path(target)
        console.print(f"[yellow]Output {target} exists; writing to {final_output} instead.[/yellow]")

    document.write(final_output)
    console.print(
        Panel(
            f"Wrote {fmt.value.upper()} to [green]{final_output}[/green]. Units: millimeters.",
            title="Export complete",
            border_style="green",
        )
    )


@app.command()
def info(
    profile: pathlib.Path = typer.Argument(..., help="JSON file with the profile points."),
    cycles: int | None = CyclesOption,
    wf_height: float | None = WfHeightOption,
    closure_top: bool | None = TopOption,
    closure_base: bool | None = BaseOption,
    double_closure: bool | None = DoubleOption,
    layer: int | None = LayerOption,
    hole_radius: float | None = HoleOption,
) -> None:
    """
    Summarize the revolution a profile would produce.
    """

    points = _load_points(profile)
    config = _resolve_config(cycles, wf_height, closure_top, closure_base, double_closure, layer, hole_radius)
    result = build_revolution(points, config)

    console.print(f"Profile [green]{profile}[/green]: {len(points)} points")
    console.print(f"Height: {profile_height(points):.2f} mm")
    if result.samples is not None:
        console.print(f"Samples after resampling: {len(result.samples)}")

    table = Table(title="Meshes")
    table.add_column("Mesh")
    table.add_column("Vertices", justify="right")
    table.add_column("Triangles", justify="right")
    table.add_column("Open edges", justify="right")
    for name, mesh in (("main", result.main), ("lip insert", result.insert)):
        if mesh is None:
            continue
        analysis = analyze_mesh(mesh)
        table.add_row(name, str(analysis.n_vertices), str(analysis.n_faces), str(analysis.boundary_edges))
    if len(result.meshes) > 1:
        total = analyze_mesh(combine_meshes(result.meshes))
        table.add_row("total", str(total.n_vertices), str(total.n_faces), str(total.boundary_edges))
    console.print(table)
    for name, mesh in (("main", result.main), ("lip insert", result.insert)):
        if mesh is None or mesh.is_empty:
            continue
        for issue in analyze_mesh(mesh).issues():
            console.print(f"[yellow]{name}: {issue}[/yellow]")
    if result.is_empty:
        console.print("[yellow]The revolution is empty; nothing would be exported.[/yellow]")


@app.command()
def preview(
    profile: pathlib.Path = typer.Argument(..., help="JSON file with the profile points."),
    wireframe: bool = typer.Option(False, "--wireframe/--solid", help="Draw translucent with triangle edges."),
    screenshot: pathlib.Path | None = typer.Option(
        None, "--screenshot", help="Save a screenshot instead of opening a window."
    ),
    cycles: int | None = CyclesOption,
    wf_height: float | None = WfHeightOption,
    closure_top: bool | None = TopOption,
    closure_base: bool | None = BaseOption,
    double_closure: bool | None = DoubleOption,
    layer: int | None = LayerOption,
    hole_radius: float | None = HoleOption,
) -> None:
    """
    Open an interactive PyVista view of the revolution.
    """

    points = _load_points(profile)
    config = _resolve_config(cycles, wf_height, closure_top, closure_base, double_closure, layer, hole_radius)
    result = build_revolution(points, config)

    console.rule("latheform preview")
    previewer = PyVistaPreviewer(console=console)
    try:
        previewer.show(result.meshes, wireframe=wireframe, screenshot_path=screenshot)
    except PreviewBackendError as exc:
        raise typer.BadParameter(str(exc)) from exc
