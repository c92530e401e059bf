import time

from PyQt6.QtCore import QCoreApplication

from pomodoro.services.notifications import MAX_DELAY_MS, NOTIFICATION_ID, NotificationCenter


class RecordingTray:
    def __init__(self) -> None:
        self.messages = []

    def showMessage(self, title, body, icon, timeout_ms) -> None:  # noqa: N802
        self.messages.append((title, body, timeout_ms))


def wait_for(condition, timeout_s: float = 2.0) -> None:
    deadline = time.monotonic() + timeout_s
    while not condition() and time.monotonic() < deadline:
        QCoreApplication.processEvents()
        time.sleep(0.01)


def test_schedule_replaces_pending_request() -> None:
    center = NotificationCenter()

    assert center.schedule(10) is True
    assert center.schedule(2.5) is True

    assert center.pending_id == NOTIFICATION_ID
    assert center.pending_delay_ms == 2500


def test_unschedule_all_clears_pending() -> None:
    center = NotificationCenter()
    center.schedule(10)
    center.unschedule_all()
    assert center.pending_id is None
    assert center.pending_delay_ms is None


def test_non_positive_delay_is_logged_not_raised(caplog) -> None:
    center = NotificationCenter()
    assert center.schedule(0) is False
    assert center.pending_id is None
    assert "cannot schedule notification" in caplog.text


def test_delay_beyond_timer_range_is_logged_not_raised(caplog) -> None:
    center = NotificationCenter()
    center.schedule(10)

    assert center.schedule(40000 * 60) is False
    assert center.pending_id is None
    assert "cannot schedule notification" in caplog.text
    assert center.schedule(MAX_DELAY_MS / 1000) is True


def test_delivery_without_tray_logs_and_emits(caplog) -> None:
    center = NotificationCenter(title="Pomodoro timer", body="Time's up!")
    delivered = []
    center.delivered.connect(lambda title, body: delivered.append((title, body)))

    center.schedule(1)
    center._deliver()  # noqa: SLF001 - fire the pending request without waiting
    center._deliver()  # noqa: SLF001

    assert delivered == [("Pomodoro timer", "Time's up!")]
    assert center.pending_id is None
    assert "no notification backend" in caplog.text


def test_rescheduled_request_is_delivered_once_through_tray() -> None:
    tray = RecordingTray()
    center = NotificationCenter(title="Pomodoro timer", body="Time's up!", tray=tray)

    center.schedule(0.2)
    center.schedule(0.05)
    assert center.pending_delay_ms == 50

    wait_for(lambda: tray.messages)
    wait_for(lambda: len(tray.messages) > 1, timeout_s=0.4)

    assert tray.messages == [("Pomodoro timer", "Time's up!", 5000)]
    assert center.pending_id is None
