"""Logging configuration for the Pomodoro timer.

This module configures the root logger once for the whole application.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _get_logging_level(verbosity: int) -> int:
    """Get logging level based on verbosity."""
    if verbosity == 1:
        return logging.INFO
    elif verbosity >= 2:
        return logging.DEBUG
    else:
        return logging.WARNING


def setup_logging(verbosity: int = 0, log_file: Optional[str] = None, log_to_console: bool = True) -> None:
    """Setup logging configuration for the application.

    Args:
        verbosity: Logging verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        log_file: Optional path to log file. If None, no file logging.
        log_to_console: Whether to log to console (default: True)
    """
    logging_level = _get_logging_level(verbosity)
    handlers: list[logging.Handler] = []

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging_level)
        console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        handlers.append(console_handler)

    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
            handlers.append(file_handler)
        except OSError as e:
            print(f"Warning: Could not setup file logging to {log_file}: {e}", file=sys.stderr)

    logging.basicConfig(
        level=logging.DEBUG if log_file else logging_level,
        handlers=handlers,
        force=True,
    )
    logging.captureWarnings(capture=True)

    # Reduce noise from PyQt6
    logging.getLogger("PyQt6").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured - Level: {logging.getLevelName(logging_level)}")
    if log_file:
        logger.info(f"File logging enabled: {log_file}")
