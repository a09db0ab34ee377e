"""Profile curves: loading, measuring and resampling at a fixed layer height."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Sequence

import numpy as np

from latheform.validation import ValidationError, validate_profile_points

logger = logging.getLogger(__name__)

Point2 = tuple[float, float]

LAYER_TOLERANCE = 0.001


def _coerce_point(item: Any) -> Point2:
    if isinstance(item, dict):
        try:
            return float(item["x"]), float(item["y"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid profile point {item!r}.") from exc
    if isinstance(item, (list, tuple)) and len(item) == 2:
        try:
            return float(item[0]), float(item[1])
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid profile point {item!r}.") from exc
    raise ValidationError(f"Invalid profile point {item!r}.")


def parse_profile(data: Any) -> np.ndarray:
    """Convert decoded JSON (``[{"x":..,"y":..}]``, ``[[x, y]]`` or ``{"points": ...}``)."""

    if isinstance(data, dict):
        if "points" not in data:
            raise ValidationError("Profile document must contain a 'points' list.")
        data = data["points"]
    if not isinstance(data, list):
        raise ValidationError("Profile points must be a list.")
    return validate_profile_points([_coerce_point(item) for item in data])


def load_profile(path: Path) -> np.ndarray:
    path = Path(path)
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ValidationError(f"{path} is not valid JSON: {exc}") from exc
    points = parse_profile(data)
    logger.debug("Loaded %d profile points from %s", len(points), path)
    return points


def profile_height(points: Sequence[Sequence[float]] | np.ndarray) -> float:
    arr = validate_profile_points(points)
    if len(arr) < 2:
        return 0.0
    return float(abs(arr[:, 1].max() - arr[:, 1].min()))


def _intersect_at(points: np.ndarray, y: float) -> float | None:
    # First segment in drawing order wins, even if a later one is closer.
    for p1, p2 in zip(points[:-1], points[1:]):
        lo, hi = min(p1[1], p2[1]), max(p1[1], p2[1])
        if lo <= y <= hi:
            if p2[1] == p1[1]:
                return float(p1[0])
            t = (y - p1[1]) / (p2[1] - p1[1])
            return float(p1[0] + t * (p2[0] - p1[0]))
    return None


def resample_profile(points: Sequence[Sequence[float]] | np.ndarray, wf_height: float) -> np.ndarray:
    """Resample a profile at evenly spaced heights ``wf_height`` apart.

    With ``wf_height <= 0`` the profile is returned unchanged. Heights with no
    crossing segment are skipped. The drawn end point is kept when it does not
    land on a layer so the top of the curve is preserved. If fewer than two
    samples survive, the original profile is returned.
    """

    arr = validate_profile_points(points)
    if wf_height <= 0 or len(arr) < 2:
        return arr

    min_y = float(arr[:, 1].min())
    max_y = float(arr[:, 1].max())
    # Same tolerance as the end-point check below, so an exact multiple keeps its top layer.
    segments = int(math.floor((max_y - min_y + LAYER_TOLERANCE) / wf_height))

    samples: list[Point2] = []
    for k in range(segments + 1):
        y = min(min_y + k * wf_height, max_y)
        x = _intersect_at(arr, y)
        if x is None:
            logger.debug("No profile segment crosses y=%.4f; sample skipped", y)
            continue
        samples.append((x, y))

    last_x, last_y = float(arr[-1, 0]), float(arr[-1, 1])
    remainder = math.fmod(last_y - min_y, wf_height)
    on_layer = remainder <= LAYER_TOLERANCE or wf_height - remainder <= LAYER_TOLERANCE
    if not on_layer and (not samples or last_y > samples[-1][1] + LAYER_TOLERANCE):
        samples.append((last_x, last_y))

    if len(samples) < 2:
        logger.debug("Resampling produced %d samples; using the raw profile", len(samples))
        return arr
    return np.asarray(samples, dtype=float)


__all__ = ["LAYER_TOLERANCE", "load_profile", "parse_profile", "profile_height", "resample_profile"]
