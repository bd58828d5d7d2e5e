"""Console settings persisted as JSON between runs."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from . import config


def _read_bool(payload: dict[str, Any], key: str, default: bool) -> bool:
    value = payload.get(key, default)
    # JSON true/false only; "false" or 0 typed by hand must not read as enabled.
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false (got {value!r})")
    return value


def _read_int(payload: dict[str, Any], key: str, default: int) -> int:
    value = payload.get(key, default)
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer (got {value!r})")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} must be an integer (got {value!r})") from exc


@dataclass
class ConsoleSettings:
    use_color: bool = config.DEFAULT_USE_COLOR
    fallback_columns: int = config.DEFAULT_FALLBACK_COLUMNS
    fallback_lines: int = config.DEFAULT_FALLBACK_LINES

    def to_json(self) -> dict[str, Any]:
        return {
            "use_color": self.use_color,
            "fallback_columns": self.fallback_columns,
            "fallback_lines": self.fallback_lines,
        }

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> "ConsoleSettings":
        return cls(
            use_color=_read_bool(payload, "use_color", config.DEFAULT_USE_COLOR),
            fallback_columns=_read_int(payload, "fallback_columns", config.DEFAULT_FALLBACK_COLUMNS),
            fallback_lines=_read_int(payload, "fallback_lines", config.DEFAULT_FALLBACK_LINES),
        )


def load_settings(path: Path | None = None) -> ConsoleSettings:
    """Read settings from ``path``; a missing or unreadable file gives defaults."""
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    try:
        payload = json.loads(settings_path.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return ConsoleSettings()
    if not isinstance(payload, dict):
        return ConsoleSettings()
    return ConsoleSettings.from_json(payload)


def save_settings(settings: ConsoleSettings, path: Path | None = None) -> Path:
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_text(json.dumps(settings.to_json(), indent=2, sort_keys=True) + "\n")
    return settings_path
