"""Export the sample vase with a bored base and an internal septum."""

from __future__ import annotations

from pathlib import Path

from latheform import RevolutionConfig, export_obj, export_stl
from latheform.profile import load_profile

HERE = Path(__file__).resolve().parent


def build() -> None:
    points = load_profile(HERE / "vase_profile.json")
    config = RevolutionConfig(
        cycles=96,
        wf_height=2.0,
        closure_base=True,
        double_closure=True,
        layer_value=20,
        use_custom_radius=True,
        custom_radius=8.0,
    )
    for exporter in (export_stl, export_obj):
        document = exporter(points, config)
        if document is not None:
            document.write(HERE)


if __name__ == "__main__":
    build()
