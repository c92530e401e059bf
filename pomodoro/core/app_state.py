from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from pomodoro.core.config import AppConfig
from pomodoro.core.timer import parse_time_text


logger = logging.getLogger(__name__)

FOCUS_PRESET_INDEX = 0


class AppState(QObject):
    """Selected interval and completed focus sessions for the current run."""

    interval_changed = pyqtSignal(str, int, bool)
    session_count_changed = pyqtSignal(int)

    def __init__(self, config: AppConfig | None = None) -> None:
        super().__init__()
        self.config = config or AppConfig()
        self.presets: tuple[str, ...] = tuple(self.config.presets)
        self.focus_seconds: int = self.config.focus_seconds
        self.selected_label: str = ""
        self.selected_seconds: int = 0
        self.session_count: int = 0

    @property
    def is_focus(self) -> bool:
        return self.selected_seconds == self.focus_seconds

    @property
    def accent_color(self) -> str:
        return self.config.focus_color if self.is_focus else self.config.break_color

    def select_preset(self, index: int) -> None:
        if not 0 <= index < len(self.presets):
            raise IndexError(f"No interval preset at index {index}")
        self.select_label(self.presets[index])

    def select_label(self, label: str) -> None:
        self.selected_label = label.strip()
        self.selected_seconds = parse_time_text(label)
        logger.debug("Selected interval %s (%ss)", self.selected_label, self.selected_seconds)
        self.interval_changed.emit(self.selected_label, self.selected_seconds, self.is_focus)

    def complete_interval(self) -> bool:
        """Counts a finished focus interval and moves on to the next preset.

        Returns True when the finished interval was a focus interval.
        """
        was_focus = self.is_focus
        if was_focus:
            self.session_count += 1
            logger.info("Focus session completed, total %d", self.session_count)
            self.session_count_changed.emit(self.session_count)
            self.select_preset(self.config.break_after_focus_index)
        else:
            self.select_preset(FOCUS_PRESET_INDEX)
        return was_focus

    def session_markers(self) -> list[int]:
        return list(range(self.session_count))
