import json

import pytest

from pomodoro.core.config import AppConfig, ConfigError, load_config


def test_missing_file_gives_defaults(tmp_path) -> None:
    config = load_config(tmp_path / "missing.json")
    assert config == AppConfig()
    assert config.presets == ("25:00", "15:00", "05:00")
    assert config.focus_seconds == 1500
    assert config.tick_interval_ms == 100


def test_overrides_and_unknown_keys(tmp_path) -> None:
    path = tmp_path / "pomodoro.json"
    path.write_text(
        json.dumps({"presets": ["50:00", "10:00"], "focus_label": "50:00", "break_after_focus_index": 1, "theme": "x"}),
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.presets == ("50:00", "10:00")
    assert config.focus_seconds == 3000
    assert config.break_after_focus_index == 1


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        "[1, 2]",
        json.dumps({"presets": []}),
        json.dumps({"presets": ["25:00", "soon"]}),
        json.dumps({"break_after_focus_index": 7}),
        json.dumps({"tick_interval_ms": 0}),
        json.dumps({"focus_label": "never"}),
        json.dumps({"presets": 5}),
        json.dumps({"sound_path": 5}),
        json.dumps({"notification_title": 7}),
        json.dumps({"notification_body": None}),
        json.dumps({"focus_color": ["red"]}),
        json.dumps({"break_color": 1}),
        json.dumps({"break_after_focus_index": True}),
        json.dumps({"tick_interval_ms": True}),
        json.dumps({"ringtone_volume": 1.5}),
        json.dumps({"ringtone_volume": "loud"}),
    ],
)
def test_invalid_settings_raise(tmp_path, payload) -> None:
    path = tmp_path / "pomodoro.json"
    path.write_text(payload, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_ringtone_volume_and_sound_path(tmp_path) -> None:
    path = tmp_path / "pomodoro.json"
    path.write_text(json.dumps({"ringtone_volume": 0.4, "sound_path": "~/bell.wav"}), encoding="utf-8")

    config = load_config(path)

    assert config.ringtone_volume == 0.4
    assert config.sound_path == "~/bell.wav"
