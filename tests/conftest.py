from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from latheform import _config

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def pytest_configure():
    os.environ.setdefault("PYVISTA_OFF_SCREEN", "true")
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def user_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep every test away from the real ~/.latheform directory."""
    config_file = tmp_path / "config" / "latheform.cfg"
    monkeypatch.setattr(_config, "CONFIG_FILE", config_file)
    return config_file


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def straight_profile() -> list[tuple[float, float]]:
    return [(50.0, 0.0), (50.0, 100.0)]


@pytest.fixture
def profile_file(tmp_path: Path, straight_profile) -> Path:
    path = tmp_path / "profile.json"
    path.write_text(json.dumps([{"x": x, "y": y} for x, y in straight_profile]))
    return path
