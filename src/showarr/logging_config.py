"""Logging configuration for the showarr CLI."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

VALID_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def parse_log_level(level: str) -> int:
    """Convert a level name such as "info" or "DEBUG" to a logging constant.

    Raises:
        ValueError: If the name is not a known level
    """
    name = level.strip().lower()
    if name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level '{level}'. Choose from: {', '.join(VALID_LOG_LEVELS)}"
        )
    level_value: int = getattr(logging, name.upper())
    return level_value


def configure_logging(level: str) -> None:
    """Send log records to stderr at the given level.

    httpx and httpcore are kept at WARNING unless running at DEBUG, since they
    log every request at INFO.

    Args:
        level: Logging level string (e.g., "info", "debug", "warning")
    """
    numeric_level = parse_log_level(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    # Clear any existing handlers to avoid duplicate output
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    transport_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(transport_level)
