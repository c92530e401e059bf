from __future__ import annotations

import logging
import time
from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from pomodoro.core.app_state import AppState
from pomodoro.core.timer import Countdown, TimerState, button_title, format_time
from pomodoro.services.notifications import NotificationCenter


logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 100


class TimerView(Protocol):
    def set_interval_title(self, text: str) -> None: ...

    def set_accent_color(self, color: str) -> None: ...

    def set_button_title(self, text: str) -> None: ...

    def set_session_count(self, count: int) -> None: ...

    def show_completion(self, title: str, message: str) -> None: ...


class Ringtone(Protocol):
    def play(self) -> None: ...


class TimerController(QObject):
    """Drives the countdown from a repeating ticker and pushes state to the view."""

    completed = pyqtSignal(bool)
    state_changed = pyqtSignal(str)

    def __init__(
        self,
        view: TimerView,
        app_state: AppState,
        notifications: NotificationCenter,
        ringtone: Ringtone | None = None,
        clock: Callable[[], float] = time.monotonic,
        tick_interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__()
        self.view = view
        self.app_state = app_state
        self.notifications = notifications
        self.ringtone = ringtone
        self.clock = clock
        self.countdown = Countdown()
        self._awaiting_ack = False

        self.ticker = QTimer(self)
        self.ticker.setInterval(tick_interval_ms)
        self.ticker.timeout.connect(self.refresh)

        self.app_state.interval_changed.connect(self._on_interval_changed)
        self.app_state.session_count_changed.connect(self.view.set_session_count)

        self.view.set_session_count(self.app_state.session_count)
        self.app_state.select_preset(0)

    @property
    def state(self) -> TimerState:
        return self.countdown.state

    def toggle(self) -> None:
        """Start/pause button handler."""
        if self.ticker.isActive():
            self.pause()
        else:
            self.start()

    def start(self) -> None:
        if self.countdown.state not in {TimerState.IDLE, TimerState.PAUSED}:
            return
        now = self.clock()
        self.countdown.start(now)
        self.ticker.start()
        self.notifications.schedule(self.countdown.remaining(now))
        self._sync_button()
        logger.info("Timer started, %s remaining", format_time(self.countdown.remaining(now)))

    def pause(self) -> None:
        if self.countdown.state != TimerState.RUNNING:
            return
        self.ticker.stop()
        now = self.clock()
        self.countdown.pause(now)
        self.notifications.unschedule_all()
        self._sync_button()
        logger.info("Timer paused, %s remaining", format_time(self.countdown.remaining(now)))

    def select_interval(self, choice: int | str) -> None:
        """Interval menu handler: accepts a preset index or a ``MM:SS`` label."""
        if isinstance(choice, int):
            self.app_state.select_preset(choice)
        else:
            self.app_state.select_label(choice)

    def refresh(self) -> None:
        snapshot = self.countdown.tick(self.clock())
        if snapshot.state == TimerState.RUNNING:
            self.view.set_interval_title(format_time(snapshot.remaining_seconds))
            return
        if not snapshot.completed:
            return

        self.view.set_interval_title(format_time(0))
        self.ticker.stop()
        self._sync_button()
        self._alert()

    def acknowledge_completion(self) -> None:
        """Dismissal of the completion alert: count the session and load the next interval."""
        if not self._awaiting_ack:
            return
        self._awaiting_ack = False
        was_focus = self.app_state.complete_interval()
        self.completed.emit(was_focus)

    def _alert(self) -> None:
        logger.info("Interval %s finished", self.app_state.selected_label)
        self._awaiting_ack = True
        if self.ringtone is not None:
            self.ringtone.play()
        self.view.show_completion(self.notifications.title, self.notifications.body)

    def _on_interval_changed(self, label: str, seconds: int, is_focus: bool) -> None:
        self.ticker.stop()
        self.notifications.unschedule_all()
        self._awaiting_ack = False
        self.countdown.select(seconds)
        self.view.set_interval_title(label)
        self.view.set_accent_color(self.app_state.accent_color)
        self._sync_button()

    def _sync_button(self) -> None:
        self.view.set_button_title(button_title(self.countdown.state))
        self.state_changed.emit(self.countdown.state.value)
