from __future__ import annotations

"""Entry point of the Pomodoro timer.

Sets up logging and settings, wires the controller to the notification and
ringtone services and runs the Qt event loop.
"""

import logging
import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QApplication

from pomodoro.core.app_state import AppState
from pomodoro.core.assets import resolve_sound_path
from pomodoro.core.config import AppConfig, ConfigError, default_config_path, load_config
from pomodoro.core.timer import parse_time_text
from pomodoro.services.notifications import NotificationCenter, create_tray_icon
from pomodoro.services.sound import AlarmSound
from pomodoro.ui.console_view import ConsoleView
from pomodoro.ui.controller import TimerController
from pomodoro.utils.logging_config import setup_logging


logger = logging.getLogger(__name__)

# Lets the ringtone finish before the event loop exits.
QUIT_DELAY_MS = 2000


def create_argument_parser() -> ArgumentParser:
    parser = ArgumentParser(
        description="Pomodoro focus timer",
        formatter_class=RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                      # One 25:00 focus interval
  %(prog)s --interval 2         # Start from the third menu entry
  %(prog)s --sessions 4 -v      # Alternate focus and breaks until 4 focus sessions are done
""",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (use -v for info, -vv for debug)",
    )
    parser.add_argument("--log-file", type=str, help="Log to file (in addition to console)")
    parser.add_argument("--config", type=str, default=None, help=f"Settings file (default: {default_config_path()})")
    parser.add_argument(
        "--interval",
        type=str,
        default="0",
        help="Interval to start with: a menu index or an MM:SS label (default: 0)",
    )
    parser.add_argument(
        "--sessions",
        type=int,
        default=1,
        help="Quit after this many completed focus sessions (default: 1)",
    )
    return parser


def parse_interval_choice(text: str, config: AppConfig) -> int | str | None:
    """Maps --interval to a preset index or an MM:SS label, None when unusable."""
    text = text.strip()
    if text.isdigit():
        index = int(text)
        return index if index < len(config.presets) else None
    return text if parse_time_text(text) > 0 else None


def main(argv: list[str] | None = None) -> int:
    """Builds the application dependencies and runs the event loop."""
    args = create_argument_parser().parse_args(argv)
    setup_logging(verbosity=args.verbose, log_file=args.log_file)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        logger.error("Invalid settings: %s", exc)
        return 2

    interval = parse_interval_choice(args.interval, config)
    if interval is None:
        logger.error("Invalid interval %r, expected a menu index below %d or MM:SS", args.interval, len(config.presets))
        return 2

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Pomodoro")
    app.setQuitOnLastWindowClosed(False)

    app_state = AppState(config)
    notifications = NotificationCenter(
        title=config.notification_title,
        body=config.notification_body,
        tray=create_tray_icon(config.focus_color, app),
    )
    ringtone = AlarmSound(resolve_sound_path(config.sound_path), volume=config.ringtone_volume)

    view = ConsoleView()
    controller = TimerController(
        view=view,
        app_state=app_state,
        notifications=notifications,
        ringtone=ringtone,
        tick_interval_ms=config.tick_interval_ms,
    )

    def on_acknowledge() -> None:
        controller.acknowledge_completion()
        if app_state.session_count >= args.sessions:
            QTimer.singleShot(QUIT_DELAY_MS, app.quit)
        else:
            controller.start()

    view.on_acknowledge = on_acknowledge

    controller.select_interval(interval)
    controller.start()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
