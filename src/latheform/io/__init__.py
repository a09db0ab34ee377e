"""Text exporters for revolution meshes."""

from __future__ import annotations

from .export import ExportDocument, export_obj, export_stl
from .obj import obj_text, write_obj
from .stl import stl_text, write_stl

__all__ = ["ExportDocument", "export_obj", "export_stl", "obj_text", "write_obj", "stl_text", "write_stl"]
