from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict

from latheform.validation import ValidationError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".latheform"
CONFIG_FILE = CONFIG_DIR / "latheform.cfg"
SUPPORTED_UNITS = "millimeters"


@dataclass(frozen=True)
class RevolutionConfig:
    """Everything that shapes a revolution mesh besides the profile itself."""

    cycles: int = 180
    wf_height: float = 0.0
    closure_top: bool = False
    closure_base: bool = False
    double_closure: bool = False
    layer_value: int = 1
    use_custom_radius: bool = False
    custom_radius: float = 10.0

    def __post_init__(self) -> None:
        if int(self.cycles) != self.cycles or self.cycles <= 0:
            raise ValidationError(f"cycles must be a positive integer, got {self.cycles!r}.")
        if self.wf_height < 0:
            raise ValidationError(f"wf_height must be >= 0, got {self.wf_height!r}.")
        if int(self.layer_value) != self.layer_value or self.layer_value < 1:
            raise ValidationError(f"layer_value must be an integer >= 1, got {self.layer_value!r}.")
        if self.custom_radius <= 0:
            raise ValidationError(f"custom_radius must be positive, got {self.custom_radius!r}.")

    @property
    def hole_radius(self) -> float | None:
        """Radius of the bored base hole, when one is requested."""

        if self.closure_base and self.use_custom_radius:
            return self.custom_radius
        return None


DEFAULT_CONFIG: Dict[str, Any] = {
    "_comment": "Lengths are millimeters. 'revolution' holds the default export parameters.",
    "units": SUPPORTED_UNITS,
    "revolution": asdict(RevolutionConfig()),
}


def ensure_user_config(path: Path | None = None) -> None:
    """Ensure the user config file exists with sane defaults."""

    target = Path(path) if path is not None else CONFIG_FILE
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    if target.exists():
        return

    try:
        target.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config(path: Path | None = None) -> Dict[str, Any]:
    target = Path(path) if path is not None else CONFIG_FILE
    ensure_user_config(target)
    try:
        loaded = json.loads(target.read_text())
    except (OSError, json.JSONDecodeError):
        return dict(DEFAULT_CONFIG)
    if not isinstance(loaded, dict):
        return dict(DEFAULT_CONFIG)
    return loaded


def load_revolution_defaults(path: Path | None = None) -> RevolutionConfig:
    """Return the user's default revolution parameters, falling back to built-ins."""

    raw_config = _load_user_config(path)
    units = str(raw_config.get("units", SUPPORTED_UNITS)).strip().lower()
    if units not in (SUPPORTED_UNITS, "millimeter", "mm"):
        logger.warning("Units %r are not supported; using millimeters.", units)

    section = raw_config.get("revolution", {})
    if not isinstance(section, dict):
        return RevolutionConfig()
    known = {f.name for f in fields(RevolutionConfig)}
    overrides = {key: value for key, value in section.items() if key in known}
    try:
        return replace(RevolutionConfig(), **overrides)
    except (TypeError, ValueError) as exc:
        logger.warning("Ignoring invalid revolution defaults in config: %s", exc)
        return RevolutionConfig()
