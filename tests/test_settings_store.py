from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from korean_utils.services import settings_store
from korean_utils.services.settings_store import SETTINGS_ENV_VAR, SettingsStore


def test_path_resolution(monkeypatch, tmp_path: Path, isolated_settings: Path) -> None:
    assert SettingsStore().path == isolated_settings

    explicit = tmp_path / "other.yaml"
    assert SettingsStore(explicit).path == explicit

    monkeypatch.delenv(SETTINGS_ENV_VAR)
    package_dir = Path(settings_store.__file__).resolve().parents[1]
    assert SettingsStore().path == package_dir.parent / "settings.yaml"


def test_env_var_redirects_setters(monkeypatch, tmp_path: Path) -> None:
    target = tmp_path / "user" / "settings.yaml"
    monkeypatch.setenv(SETTINGS_ENV_VAR, str(target))

    SettingsStore().set_hangul_width(4)

    assert yaml.safe_load(target.read_text(encoding="utf-8")) == {"hangul_width": 4}


def test_save_and_load_roundtrip(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "nested" / "settings.yaml")
    payload = {"hangul_width": 3, "log_level": "DEBUG", "extra": {"a": 1}}

    store.save(payload)
    loaded = store.load()

    assert loaded == payload
    assert not (tmp_path / "nested" / "settings.yaml.tmp").exists()


def test_missing_or_malformed_file_reads_as_empty(isolated_settings: Path) -> None:
    store = SettingsStore()
    assert store.load() == {}

    isolated_settings.write_text("- just\n- a list\n", encoding="utf-8")
    assert store.load() == {}

    isolated_settings.write_text("hangul_width: [\n", encoding="utf-8")
    assert store.load() == {}
    assert store.get_hangul_width() == 2


def test_hangul_width(isolated_settings: Path) -> None:
    store = SettingsStore()
    assert store.get_hangul_width() == 2

    store.set_hangul_width(1)
    assert store.get_hangul_width() == 1
    assert yaml.safe_load(isolated_settings.read_text(encoding="utf-8")) == {"hangul_width": 1}

    with pytest.raises(ValueError):
        store.set_hangul_width(-1)

    isolated_settings.write_text("hangul_width: wide\n", encoding="utf-8")
    assert store.get_hangul_width() == 2


def test_log_level(isolated_settings: Path) -> None:
    store = SettingsStore()
    assert store.get_log_level() == "WARNING"

    store.set_log_level("debug")
    assert store.get_log_level() == "DEBUG"

    with pytest.raises(ValueError):
        store.set_log_level("chatty")

    isolated_settings.write_text("log_level: chatty\n", encoding="utf-8")
    assert store.get_log_level() == "WARNING"


def test_update_preserves_other_keys() -> None:
    store = SettingsStore()
    store.save({"hangul_width": 3, "theme": "hanji"})

    store.set_log_level("INFO")

    loaded = store.load()
    assert loaded["theme"] == "hanji"
    assert loaded["hangul_width"] == 3
    assert loaded["log_level"] == "INFO"
