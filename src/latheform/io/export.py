"""Profile-to-document export: build the revolution, then serialize it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import numpy as np

from latheform._config import RevolutionConfig
from latheform.modeling.assemble import build_revolution

from .obj import obj_text
from .stl import stl_text

logger = logging.getLogger(__name__)

MIME_TYPE = "text/plain"


@dataclass(frozen=True)
class ExportDocument:
    text: str
    filename: str
    mime_type: str = MIME_TYPE

    def write(self, path: Path | None = None) -> Path:
        """Write the text to ``path`` (a file or a directory); defaults to ``filename`` in the cwd."""

        target = Path(self.filename) if path is None else Path(path)
        if target.is_dir():
            target = target / self.filename
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.text)
        logger.info("Wrote %s (%d bytes)", target, len(self.text))
        return target


def export_stl(
    points: Sequence[Sequence[float]] | np.ndarray,
    config: RevolutionConfig | None = None,
) -> ExportDocument | None:
    if len(points) < 2:
        logger.error("Not enough points to generate STL")
        return None
    result = build_revolution(points, config)
    return ExportDocument(text=stl_text(result.meshes), filename="model.stl")


def export_obj(
    points: Sequence[Sequence[float]] | np.ndarray,
    config: RevolutionConfig | None = None,
) -> ExportDocument | None:
    if len(points) < 2:
        logger.error("Not enough points to generate OBJ")
        return None
    try:
        result = build_revolution(points, config)
        text = obj_text(result.meshes)
    except Exception:
        logger.exception("OBJ export failed")
        return None
    return ExportDocument(text=text, filename="model.obj")


__all__ = ["ExportDocument", "MIME_TYPE", "export_obj", "export_stl"]
