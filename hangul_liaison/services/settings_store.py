from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Final

import yaml

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
_LOG_LEVELS: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the default ruleset and log level

    Notes:
      - Missing or malformed files read as empty settings.
    """

    def __init__(self, settings_path: str | os.PathLike[str] | None = None) -> None:
        if settings_path is None:
            # <project_root>/settings.yaml, next to main.py
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        try:
            p = self._path
            if not p.exists():
                return {}
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
                return data if isinstance(data, dict) else {}
        except (OSError, yaml.YAMLError) as e:
            logger.debug("Unreadable settings file %s: %s", self._path, e)
            return {}

    def save(self, data: dict[str, Any]) -> None:
        try:
            p = self._path
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_suffix(p.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except (OSError, yaml.YAMLError) as e:
            # Best-effort persistence; callers should not crash on save failures.
            logger.warning("Failed to save settings to %s: %s", self._path, e)

    def get_extended(self) -> bool:
        v = self.load().get("extended", False)
        if isinstance(v, bool):
            return v
        logger.debug("Invalid 'extended' setting %r; using default", v)
        return False

    def set_extended(self, value: bool) -> None:
        s = self.load()
        s["extended"] = bool(value)
        self.save(s)

    def get_log_level(self) -> str:
        v = self.load().get("log_level", DEFAULT_LOG_LEVEL)
        level = str(v).strip().upper()
        if level in _LOG_LEVELS:
            return level
        logger.debug("Invalid 'log_level' setting %r; using default", v)
        return DEFAULT_LOG_LEVEL
