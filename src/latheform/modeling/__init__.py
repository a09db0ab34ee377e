"""Modeling utilities: lathe revolution, caps, and the hole lip insert."""

from __future__ import annotations

from .revolve import revolve_profile
from .caps import HOLE_SEGMENTS, cap_cross_section
from .primitives import make_lip_insert
from .assemble import RevolutionResult, build_revolution

__all__ = [
    "revolve_profile",
    "cap_cross_section",
    "HOLE_SEGMENTS",
    "make_lip_insert",
    "RevolutionResult",
    "build_revolution",
]
