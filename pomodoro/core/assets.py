from __future__ import annotations

"""Resolution of bundled resource files such as the completion ringtone."""

from pathlib import Path


ASSETS_DIR = Path(__file__).resolve().parents[2] / "assets"
RINGTONE = "ringtone-vfx.wav"


def get_asset_path(relative: str) -> Path:
    """Maps a path relative to `assets/` to an absolute path."""
    return ASSETS_DIR / relative


def asset_exists(relative: str) -> bool:
    return get_asset_path(relative).exists()


def resolve_sound_path(configured: str | None) -> Path:
    """Returns the configured ringtone path, or the bundled one."""
    if configured:
        return Path(configured).expanduser()
    return get_asset_path(RINGTONE)
