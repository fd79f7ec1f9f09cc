from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_PASSTHROUGH: Final[str] = " \t\n.,!?"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
_LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ImeSettings:
    compound_double_chars: bool = False
    passthrough: str = DEFAULT_PASSTHROUGH
    keymap_path: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the input-method options

    Notes:
      - Unreadable or malformed files behave like an empty file.
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
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
            logger.warning("Failed to load settings %s: %s", self._path, e)
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
            logger.warning("Failed to save settings %s: %s", self._path, e)

    def _set(self, key: str, value: Any) -> None:
        s = self.load()
        s[key] = value
        self.save(s)

    def get_compound_double_chars(self) -> bool:
        v = self.load().get("compound_double_chars", False)
        return v if isinstance(v, bool) else False

    def set_compound_double_chars(self, enabled: bool) -> None:
        self._set("compound_double_chars", bool(enabled))

    def get_passthrough(self) -> str:
        v = self.load().get("passthrough")
        return v if isinstance(v, str) else DEFAULT_PASSTHROUGH

    def set_passthrough(self, chars: str) -> None:
        self._set("passthrough", str(chars))

    def get_keymap_path(self) -> Optional[str]:
        v = self.load().get("keymap_path")
        if isinstance(v, str) and v.strip():
            return v.strip()
        return None

    def get_log_level(self) -> str:
        v = self.load().get("log_level")
        if isinstance(v, str) and v.strip().upper() in _LOG_LEVELS:
            return v.strip().upper()
        return DEFAULT_LOG_LEVEL

    def get_ime_settings(self) -> ImeSettings:
        return ImeSettings(
            compound_double_chars=self.get_compound_double_chars(),
            passthrough=self.get_passthrough(),
            keymap_path=self.get_keymap_path(),
            log_level=self.get_log_level(),
        )
