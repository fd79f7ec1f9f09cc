from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final, Optional

import yaml

from hangul_ime.domain.classifier import classify
from hangul_ime.domain.enums import ControlTag, Event

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Defaults (used if YAML is missing or malformed)
# ---------------------------------------------------------------------

# One ASCII key per jamo. Uppercase gives the tense consonant or ㅐ.
_DEFAULT_KEYS: Final[dict[str, str]] = {
    # consonants
    "g": "ㄱ", "n": "ㄴ", "d": "ㄷ", "r": "ㄹ", "l": "ㄹ",
    "m": "ㅁ", "b": "ㅂ", "s": "ㅅ", "q": "ㅇ", "j": "ㅈ",
    "z": "ㅈ", "c": "ㅊ", "k": "ㅋ", "t": "ㅌ", "p": "ㅍ",
    "f": "ㅍ", "h": "ㅎ",
    "G": "ㄲ", "D": "ㄸ", "B": "ㅃ", "S": "ㅆ", "J": "ㅉ",
    # vowels
    "a": "ㅏ", "A": "ㅐ", "v": "ㅓ", "e": "ㅔ", "o": "ㅗ",
    "u": "ㅜ", "w": "ㅡ", "i": "ㅣ", "y": "ㅣ",
}

_DEFAULT_CONTROLS: Final[dict[str, ControlTag]] = {
    "'": ControlTag.SUPPRESS_AUTO_INITIAL,
    "`": ControlTag.RESET,
}

_CONTROL_NAMES: Final[dict[str, ControlTag]] = {
    "reset": ControlTag.RESET,
    "suppress_auto_initial": ControlTag.SUPPRESS_AUTO_INITIAL,
}


@dataclass(frozen=True)
class KeyMap:
    """Raw key -> classified event."""

    keys: dict[str, str] = field(default_factory=lambda: dict(_DEFAULT_KEYS))
    controls: dict[str, ControlTag] = field(default_factory=lambda: dict(_DEFAULT_CONTROLS))

    def lookup(self, key: str) -> Optional[Event]:
        """Return the event for `key`, or None if the key is outside the alphabet."""
        control = self.controls.get(key)
        if control is not None:
            return control
        jamo = self.keys.get(key)
        if jamo is None:
            return None
        return classify(jamo)

    def __contains__(self, key: object) -> bool:
        return key in self.controls or key in self.keys


# ---------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------

_YAML_CACHE: dict[str, Any] | None = None
_YAML_CACHE_PATH: Path | None = None
_YAML_CACHE_MTIME_NS: int | None = None


def _project_root() -> Path:
    # hangul_ime/domain/keymap.py -> hangul_ime/domain -> hangul_ime -> <project_root>
    return Path(__file__).resolve().parents[2]


def default_keymap_path() -> Path:
    return _project_root() / "data" / "keymap.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load key map YAML if present.

    Failure is non-fatal; defaults will be used.
    """
    global _YAML_CACHE, _YAML_CACHE_PATH, _YAML_CACHE_MTIME_NS

    try:
        if not path.exists():
            _YAML_CACHE = {}
            _YAML_CACHE_PATH = path
            _YAML_CACHE_MTIME_NS = None
            return {}

        mtime_ns = path.stat().st_mtime_ns
        if _YAML_CACHE is not None and _YAML_CACHE_PATH == path and _YAML_CACHE_MTIME_NS == mtime_ns:
            return dict(_YAML_CACHE)

        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
            parsed = data if isinstance(data, dict) else {}

        _YAML_CACHE = dict(parsed)
        _YAML_CACHE_PATH = path
        _YAML_CACHE_MTIME_NS = mtime_ns
        return dict(_YAML_CACHE)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to read key map %s: %s", path, e)
        return {}


def _parse_keys(raw: Any) -> dict[str, str]:
    out: dict[str, str] = {}
    if not isinstance(raw, dict):
        return out
    for key, jamo in raw.items():
        k = str(key)
        if len(k) != 1 or not isinstance(jamo, str) or classify(jamo) is None:
            logger.warning("Ignoring key map entry %r -> %r", key, jamo)
            continue
        out[k] = jamo.strip()
    return out


def _parse_controls(raw: Any) -> dict[str, ControlTag]:
    out: dict[str, ControlTag] = {}
    if not isinstance(raw, dict):
        return out
    for key, name in raw.items():
        k = str(key)
        tag = _CONTROL_NAMES.get(str(name).strip().lower())
        if len(k) != 1 or tag is None:
            logger.warning("Ignoring control entry %r -> %r", key, name)
            continue
        out[k] = tag
    return out


def load_keymap(path: str | Path | None = None) -> KeyMap:
    """Return the key map from YAML, falling back to the built-in layout.

    Expected file shape:
        keys:     {g: ㄱ, a: ㅏ, ...}
        controls: {"'": suppress_auto_initial, "`": reset}
    """
    p = Path(path) if path is not None else default_keymap_path()
    data = _load_yaml(p)

    keys = _parse_keys(data.get("keys"))
    controls = _parse_controls(data.get("controls"))

    if not keys:
        keys = dict(_DEFAULT_KEYS)
    if not controls and "controls" not in data:
        controls = dict(_DEFAULT_CONTROLS)

    # A key cannot be both a jamo and a control; controls win.
    for k in controls:
        keys.pop(k, None)

    return KeyMap(keys=keys, controls=controls)


# Public domain-data defaults (use load_keymap() for YAML-backed values)
DEFAULT_KEYS: Final[dict[str, str]] = _DEFAULT_KEYS
DEFAULT_CONTROLS: Final[dict[str, ControlTag]] = _DEFAULT_CONTROLS
