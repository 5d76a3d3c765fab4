"""Logging setup helpers.

The library only ever logs through ``logging.getLogger(__name__)`` loggers
below ``laakhay.slack`` and attaches a ``NullHandler`` to that root, so it is
silent unless the application configures logging. ``configure_logging`` is a
convenience for scripts and examples:

    configure_logging(level="DEBUG")

Structured fields passed through ``extra=`` are appended to each line.
"""

from __future__ import annotations

import logging

LIBRARY_LOGGER = "laakhay.slack"

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# LogRecord attributes that are not user-supplied ``extra`` fields
_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class ExtraFieldsFormatter(logging.Formatter):
    """Formatter that renders ``extra`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {
            key: value for key, value in vars(record).items() if key not in _RESERVED
        }
        if not extras:
            return base
        rendered = " ".join(f"{key}={value}" for key, value in sorted(extras.items()))
        return f"{base} {rendered}"


def configure_logging(
    level: str = "INFO",
    fmt: str = DEFAULT_FORMAT,
    logger_name: str = LIBRARY_LOGGER,
) -> logging.Logger:
    """Attach a stream handler to the library logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: ``logging`` format string for the message prefix
        logger_name: Logger to configure (defaults to the library root)

    Returns:
        The configured logger

    Raises:
        ValueError: If the level is not a valid log level
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. Valid: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(ExtraFieldsFormatter(fmt))

    logger = logging.getLogger(logger_name)
    logger.setLevel(level_upper)
    # Replace previously configured stream handlers to avoid duplicate lines
    logger.handlers = [h for h in logger.handlers if isinstance(h, logging.NullHandler)]
    logger.addHandler(handler)
    return logger

