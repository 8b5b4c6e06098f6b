"""
Logging configuration for the Public Health Statistics Dashboard.

All dashboard modules log under the ``health_dashboard`` logger namespace.
Output goes to stdout and, when enabled in config/dashboard.toml, to a
timestamped file under the configured log directory.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(threadName)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "health_dashboard"

# HTTP libraries that log every request at DEBUG/INFO
NOISY_LOGGERS = ("urllib3", "werkzeug")


def _resolve_level(level: Union[int, str]) -> int:
    """Accept an int or a level name like "debug"; unknown names mean INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_dir: Optional[Path] = None,
    console: bool = True,
    file_logging: bool = False,
) -> logging.Logger:
    """
    Configure dashboard logging.

    Args:
        level: Logging level, as an int or a name such as "DEBUG" (default: INFO)
        log_dir: Directory for log files (default: ./logs/)
        console: Whether to log to stdout (default: True)
        file_logging: Whether to also write dashboard_<timestamp>.log (default: False)

    Returns:
        The ``health_dashboard`` logger

    Usage:
        logger = setup_logging()
        logger = setup_logging(level="DEBUG", file_logging=True)
    """
    level = _resolve_level(level)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Re-running setup (e.g. the Dash reloader) must not stack handlers
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(_formatter())
        root_logger.addHandler(console_handler)

    if file_logging:
        log_dir = log_dir or Path("./logs")
        log_dir.mkdir(parents=True, exist_ok=True)

        log_path = log_dir / f"dashboard_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(_formatter())
        root_logger.addHandler(file_handler)

    # Request-level chatter only when debugging the dashboard itself
    noisy_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance that is a child of the ``health_dashboard`` logger
    """
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
