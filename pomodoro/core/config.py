from __future__ import annotations

"""Application settings loaded from an optional JSON file."""

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from pomodoro.core.timer import parse_time_text


logger = logging.getLogger(__name__)

DEFAULT_PRESETS = ("25:00", "15:00", "05:00")


class ConfigError(ValueError):
    """Raised when the settings file is unreadable or holds invalid values."""


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class AppConfig:
    presets: tuple[str, ...] = DEFAULT_PRESETS
    focus_label: str = "25:00"
    break_after_focus_index: int = 2
    tick_interval_ms: int = 100
    sound_path: str | None = None
    notification_title: str = "Pomodoro timer"
    notification_body: str = "Time's up!"
    focus_color: str = "#FF3B30"
    break_color: str = "#007AFF"
    ringtone_volume: float = 1.0

    @property
    def focus_seconds(self) -> int:
        return parse_time_text(self.focus_label)

    def validate(self) -> None:
        if not isinstance(self.presets, tuple) or not self.presets:
            raise ConfigError("At least one interval preset is required")
        for label in self.presets:
            if not isinstance(label, str) or parse_time_text(label) <= 0:
                raise ConfigError(f"Invalid interval preset {label!r}, expected MM:SS")
        if not isinstance(self.focus_label, str) or self.focus_seconds <= 0:
            raise ConfigError(f"Invalid focus interval {self.focus_label!r}")
        if not _is_int(self.break_after_focus_index) or not 0 <= self.break_after_focus_index < len(self.presets):
            raise ConfigError("break_after_focus_index is outside the preset list")
        if not _is_int(self.tick_interval_ms) or self.tick_interval_ms <= 0:
            raise ConfigError("tick_interval_ms must be positive")
        if self.sound_path is not None and not isinstance(self.sound_path, str):
            raise ConfigError("sound_path must be a string")
        for name in ("notification_title", "notification_body", "focus_color", "break_color"):
            if not isinstance(getattr(self, name), str):
                raise ConfigError(f"{name} must be a string")
        volume = self.ringtone_volume
        if isinstance(volume, bool) or not isinstance(volume, (int, float)) or not 0.0 <= volume <= 1.0:
            raise ConfigError("ringtone_volume must be a number between 0 and 1")


def default_config_path() -> Path:
    """Returns the settings file path in the current working directory."""
    return Path.cwd() / "pomodoro.json"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Reads settings, falling back to defaults for a missing file or keys."""
    config_path = Path(path) if path is not None else default_config_path()
    if not config_path.exists():
        logger.info("No settings file at %s, using defaults", config_path)
        return AppConfig()

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Cannot read settings from {config_path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Settings in {config_path} must be a JSON object")

    known = {f.name for f in fields(AppConfig)}
    overrides: dict[str, Any] = {}
    for key, value in raw.items():
        if key not in known:
            logger.warning("Ignoring unknown setting %r", key)
            continue
        overrides[key] = tuple(value) if key == "presets" and isinstance(value, list) else value

    try:
        config = replace(AppConfig(), **overrides)
    except TypeError as exc:
        raise ConfigError(str(exc)) from exc
    config.validate()
    logger.debug("Loaded settings from %s", config_path)
    return config
