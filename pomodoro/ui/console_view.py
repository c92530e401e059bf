from __future__ import annotations

"""Headless view that reports timer state through logging."""

import logging
from typing import Callable

from PyQt6.QtCore import QTimer


logger = logging.getLogger(__name__)


class ConsoleView:
    """Logs title changes once per second and dismisses completion alerts itself."""

    def __init__(self, on_acknowledge: Callable[[], None] | None = None) -> None:
        self.on_acknowledge = on_acknowledge
        self.title = ""
        self.accent_color = ""
        self.button_title = ""
        self.session_count = 0
        self._last_logged = ""

    def set_interval_title(self, text: str) -> None:
        self.title = text
        if text != self._last_logged:
            self._last_logged = text
            logger.info("Remaining %s", text)

    def set_accent_color(self, color: str) -> None:
        self.accent_color = color
        logger.debug("Accent color %s", color)

    def set_button_title(self, text: str) -> None:
        self.button_title = text
        logger.debug("Button %s", text)

    def set_session_count(self, count: int) -> None:
        self.session_count = count
        logger.info("Completed sessions: %s", "●" * count or "-")

    def show_completion(self, title: str, message: str) -> None:
        logger.warning("%s: %s", title, message)
        if self.on_acknowledge is not None:
            QTimer.singleShot(0, self.on_acknowledge)
