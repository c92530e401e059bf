import pytest

from pomodoro.core.app_state import AppState
from pomodoro.core.config import AppConfig


def test_select_preset_emits_interval_and_focus_flag() -> None:
    state = AppState()
    seen = []
    state.interval_changed.connect(lambda label, seconds, is_focus: seen.append((label, seconds, is_focus)))

    state.select_preset(0)
    state.select_preset(1)

    assert seen == [("25:00", 1500, True), ("15:00", 900, False)]
    assert state.accent_color == "#007AFF"


def test_focus_interval_uses_focus_color() -> None:
    state = AppState()
    state.select_label("25:00")
    assert state.is_focus is True
    assert state.accent_color == "#FF3B30"


def test_invalid_preset_index_raises() -> None:
    state = AppState()
    with pytest.raises(IndexError):
        state.select_preset(3)


def test_complete_focus_counts_and_selects_break() -> None:
    state = AppState()
    counts = []
    state.session_count_changed.connect(counts.append)
    state.select_preset(0)

    was_focus = state.complete_interval()

    assert was_focus is True
    assert state.session_count == 1
    assert counts == [1]
    assert state.selected_label == "05:00"
    assert state.session_markers() == [0]


def test_complete_break_returns_to_focus_without_counting() -> None:
    state = AppState()
    state.select_preset(2)

    was_focus = state.complete_interval()

    assert was_focus is False
    assert state.session_count == 0
    assert state.selected_label == "25:00"
    assert state.session_markers() == []


def test_custom_break_after_focus_index() -> None:
    state = AppState(AppConfig(presets=("50:00", "10:00"), focus_label="50:00", break_after_focus_index=1))
    state.select_preset(0)
    state.complete_interval()
    assert state.selected_seconds == 600
