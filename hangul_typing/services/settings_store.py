from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from hangul_typing.services.typing_session import TypingConfig

logger = logging.getLogger(__name__)

_TYPING_SECTION = "typing"
_BOOL_KEYS = ("show_cursor", "cursor_after_typing", "start_paused", "incremental")


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the typing session config

    Notes:
      - Only the `typing:` section is interpreted; other keys are preserved.
    """

    def __init__(self, settings_path: str | os.PathLike[str] | None = None) -> None:
        if settings_path is None:
            # Default to project root next to main.py.
            # This resolves to: <project_root>/settings.yaml
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
            logger.warning("Failed to read settings from %s: %s", self._path, e)
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
            logger.warning("Failed to write settings to %s: %s", self._path, e)

    def get_typing_config(self) -> TypingConfig:
        s = self.load()
        t = s.get(_TYPING_SECTION) or {}
        if not isinstance(t, dict):
            t = {}

        defaults = TypingConfig()

        def _bval(key: str) -> bool:
            v = t.get(key, getattr(defaults, key))
            if isinstance(v, bool):
                return v
            logger.debug("Ignoring non-boolean setting %s=%r", key, v)
            return bool(getattr(defaults, key))

        cursor = t.get("cursor", defaults.cursor)
        if not isinstance(cursor, str):
            cursor = defaults.cursor

        return TypingConfig(
            show_cursor=_bval("show_cursor"),
            cursor_after_typing=_bval("cursor_after_typing"),
            cursor=cursor,
            start_paused=_bval("start_paused"),
            incremental=_bval("incremental"),
        ).normalised()

    def set_typing_config(self, config: TypingConfig) -> None:
        c = config.normalised()
        s = self.load()
        t = s.get(_TYPING_SECTION) or {}
        if not isinstance(t, dict):
            t = {}
        for key in _BOOL_KEYS:
            t[key] = bool(getattr(c, key))
        t["cursor"] = c.cursor
        s[_TYPING_SECTION] = t
        self.save(s)


__all__ = ["SettingsStore"]
