from __future__ import annotations

"""Local notification scheduling through the system tray."""

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal
from PyQt6.QtGui import QColor, QIcon, QPixmap
from PyQt6.QtWidgets import QSystemTrayIcon


logger = logging.getLogger(__name__)

NOTIFICATION_ID = "pomodoro"
MESSAGE_TIMEOUT_MS = 5000
# QTimer intervals are signed 32-bit milliseconds.
MAX_DELAY_MS = 2**31 - 1


def create_tray_icon(color: str, parent: QObject | None = None) -> QSystemTrayIcon | None:
    """Creates a visible tray icon, or None when the platform has no tray."""
    if not QSystemTrayIcon.isSystemTrayAvailable():
        logger.warning("System tray is not available, notifications will only be logged")
        return None
    pixmap = QPixmap(32, 32)
    pixmap.fill(QColor(color))
    tray = QSystemTrayIcon(QIcon(pixmap), parent)
    tray.setToolTip("Pomodoro timer")
    tray.show()
    return tray


class NotificationCenter(QObject):
    """Holds at most one pending notification, identified by ``NOTIFICATION_ID``."""

    delivered = pyqtSignal(str, str)

    def __init__(
        self,
        title: str = "Pomodoro timer",
        body: str = "Time's up!",
        tray: QSystemTrayIcon | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.title = title
        self.body = body
        self._tray = tray
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._deliver)
        self._pending_id: str | None = None

    @property
    def pending_id(self) -> str | None:
        return self._pending_id

    @property
    def pending_delay_ms(self) -> int | None:
        if self._pending_id is None:
            return None
        return self._timer.interval()

    def schedule(self, seconds: float, identifier: str = NOTIFICATION_ID) -> bool:
        """Replaces any pending request; failures are logged, never raised."""
        self.unschedule_all()
        delay_ms = int(round(seconds * 1000))
        if not 0 < delay_ms <= MAX_DELAY_MS:
            logger.error("Error: cannot schedule notification %r with delay %.3fs", identifier, seconds)
            return False
        self._pending_id = identifier
        self._timer.start(delay_ms)
        logger.debug("Scheduled notification %r in %d ms", identifier, delay_ms)
        return True

    def unschedule_all(self) -> None:
        if self._pending_id is not None:
            logger.debug("Removed pending notification %r", self._pending_id)
        self._timer.stop()
        self._pending_id = None

    def _deliver(self) -> None:
        identifier = self._pending_id
        self._pending_id = None
        if identifier is None:
            return
        if self._tray is None:
            logger.error("Error: no notification backend for %r: %s - %s", identifier, self.title, self.body)
        else:
            self._tray.showMessage(
                self.title, self.body, QSystemTrayIcon.MessageIcon.Information, MESSAGE_TIMEOUT_MS
            )
        self.delivered.emit(self.title, self.body)
