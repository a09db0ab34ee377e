"""latheform – turn a drawn profile into a lathe mesh and export it as STL or OBJ."""

from __future__ import annotations

import logging

from ._config import RevolutionConfig
from .mesh import Mesh
from .modeling import RevolutionResult, build_revolution
from .io import ExportDocument, export_obj, export_stl

__all__ = [
    "__version__",
    "ExportDocument",
    "Mesh",
    "RevolutionConfig",
    "RevolutionResult",
    "build_revolution",
    "export_obj",
    "export_stl",
]

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
