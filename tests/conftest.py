# tests/conftest.py
from pathlib import Path

import pytest

from korean_utils.services import keyboard
from korean_utils.services.settings_store import SETTINGS_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path: Path) -> Path:
    """Point the settings store at a temp file so tests never touch a real settings.yaml."""
    settings_path = tmp_path / "settings.yaml"
    monkeypatch.setenv(SETTINGS_ENV_VAR, str(settings_path))
    return settings_path


@pytest.fixture
def layout_path(monkeypatch, tmp_path: Path) -> Path:
    """Redirect the keyboard layout loader to a temp file and reset its cache."""
    path = tmp_path / "dubeolsik.yaml"
    monkeypatch.setattr(keyboard, "_layout_path", lambda: path)
    monkeypatch.setattr(keyboard, "_YAML_CACHE", None)
    monkeypatch.setattr(keyboard, "_YAML_CACHE_PATH", None)
    monkeypatch.setattr(keyboard, "_YAML_CACHE_MTIME_NS", None)
    return path
