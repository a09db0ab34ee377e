from __future__ import annotations

from typing import Sequence

import numpy as np


class ValidationError(ValueError):
    """Raised when validation constraints are violated."""


def validate_profile_points(points: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    """Return the profile as an (N, 2) float array or raise ValidationError."""

    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return np.zeros((0, 2), dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValidationError("Profile points must be Nx2 points.")
    if np.any(~np.isfinite(arr)):
        raise ValidationError("Profile points contain invalid values.")
    if np.any(arr[:, 0] < 0.0):
        raise ValidationError("Profile x values are radii and must be >= 0.")
    return arr.copy()


def validate_positive(name: str, value: float) -> None:
    if not np.isfinite(value) or value <= 0:
        raise ValidationError(f"{name} must be positive, got {value!r}.")
