from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from enum import Enum


logger = logging.getLogger(__name__)


class TimerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    FINISHED = "finished"


BUTTON_TITLES = {
    TimerState.IDLE: "Start",
    TimerState.RUNNING: "Pause",
    TimerState.PAUSED: "Continue",
    TimerState.FINISHED: "Start",
}


@dataclass(frozen=True)
class TimerSnapshot:
    total_seconds: int
    remaining_seconds: float
    state: TimerState
    completed: bool = False


def parse_time_text(text: str) -> int:
    """Converts a ``MM:SS`` menu label into seconds, 0 when it cannot be parsed."""
    parts = text.strip().split(":")
    if len(parts) != 2:
        logger.debug("Unparsable interval label %r", text)
        return 0
    try:
        minutes, seconds = int(parts[0]), int(parts[1])
    except ValueError:
        logger.debug("Unparsable interval label %r", text)
        return 0
    if minutes < 0 or seconds < 0:
        return 0
    return minutes * 60 + seconds


def format_time(seconds: float) -> str:
    """Renders remaining time as ``MM:SS``, rounding partial seconds up."""
    whole = max(0, int(math.ceil(seconds)))
    return f"{whole // 60:02d}:{whole % 60:02d}"


def button_title(state: TimerState) -> str:
    return BUTTON_TITLES[state]


class Countdown:
    """Single countdown against a target timestamp, independent of any UI toolkit."""

    def __init__(self, total_seconds: int = 0) -> None:
        self._total_sec = 0
        self._remaining_sec = 0.0
        self._end_at: float | None = None
        self._state = TimerState.IDLE
        self.select(total_seconds)

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == TimerState.RUNNING

    @property
    def total_seconds(self) -> int:
        return self._total_sec

    def select(self, total_seconds: int) -> None:
        if total_seconds < 0:
            raise ValueError("Duration must not be negative")
        self._total_sec = int(total_seconds)
        self._remaining_sec = float(total_seconds)
        self._end_at = None
        self._state = TimerState.IDLE

    def start(self, now: float | None = None) -> None:
        if self._state not in {TimerState.IDLE, TimerState.PAUSED}:
            return
        if now is None:
            now = time.monotonic()
        self._end_at = now + self._remaining_sec
        self._state = TimerState.RUNNING

    def pause(self, now: float | None = None) -> None:
        if self._state != TimerState.RUNNING:
            return
        if now is None:
            now = time.monotonic()
        self._remaining_sec = self._remaining_at(now)
        self._end_at = None
        self._state = TimerState.PAUSED

    def remaining(self, now: float | None = None) -> float:
        if now is None:
            now = time.monotonic()
        return self._remaining_at(now)

    def tick(self, now: float | None = None) -> TimerSnapshot:
        if now is None:
            now = time.monotonic()
        if self._state != TimerState.RUNNING:
            return self.snapshot(now)

        remaining = self._remaining_at(now)
        if remaining > 0:
            return self.snapshot(now)

        self._remaining_sec = 0.0
        self._end_at = None
        self._state = TimerState.FINISHED
        return TimerSnapshot(
            total_seconds=self._total_sec,
            remaining_seconds=0.0,
            state=self._state,
            completed=True,
        )

    def snapshot(self, now: float | None = None) -> TimerSnapshot:
        if now is None:
            now = time.monotonic()
        return TimerSnapshot(
            total_seconds=self._total_sec,
            remaining_seconds=self._remaining_at(now),
            state=self._state,
        )

    def _remaining_at(self, now: float) -> float:
        if self._end_at is None:
            return self._remaining_sec
        return max(0.0, self._end_at - now)
