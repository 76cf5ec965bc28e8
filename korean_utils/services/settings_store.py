from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Final

import yaml

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR: Final[str] = "KOREAN_UTILS_SETTINGS"

DEFAULT_HANGUL_WIDTH: Final[int] = 2
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

_LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the Hangul display width and the log level

    Notes:
      - Path resolution order: constructor argument, $KOREAN_UTILS_SETTINGS,
        <project_root>/settings.yaml.
      - A missing or malformed file reads as empty settings.
      - The last fallback is meant for a source checkout. In an installed package
        <project_root> is the site-packages directory, so set
        $KOREAN_UTILS_SETTINGS (or pass a path) before calling any setter.
    """

    def __init__(self, settings_path: str | os.PathLike[str] | None = None) -> None:
        if settings_path is None:
            settings_path = os.environ.get(SETTINGS_ENV_VAR) or None
        if settings_path is None:
            # korean_utils/services/settings_store.py -> <project_root>/settings.yaml
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        p = self._path
        if not p.exists():
            return {}
        try:
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", p, e)
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, data: dict[str, Any]) -> None:
        p = self._path
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_suffix(p.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
        os.replace(str(tmp), str(p))
        logger.debug("Saved settings to %s", p)

    def get_hangul_width(self) -> int:
        v = self.load().get("hangul_width", DEFAULT_HANGUL_WIDTH)
        if isinstance(v, bool) or not isinstance(v, (int, float)) or v < 0:
            logger.warning("Invalid hangul_width %r; using %d", v, DEFAULT_HANGUL_WIDTH)
            return DEFAULT_HANGUL_WIDTH
        return int(v)

    def set_hangul_width(self, value: int) -> None:
        width = int(value)
        if width < 0:
            raise ValueError("hangul_width must be non-negative, got %d" % width)
        s = self.load()
        s["hangul_width"] = width
        self.save(s)

    def get_log_level(self) -> str:
        v = self.load().get("log_level", DEFAULT_LOG_LEVEL)
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            logger.warning("Unknown log_level %r; using %s", v, DEFAULT_LOG_LEVEL)
            return DEFAULT_LOG_LEVEL
        return level

    def set_log_level(self, value: str) -> None:
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError("log_level must be one of %s, got %r" % (", ".join(_LOG_LEVELS), value))
        s = self.load()
        s["log_level"] = level
        self.save(s)
