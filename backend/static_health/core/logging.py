"""Logging setup for the package logger."""

from __future__ import annotations

import logging

LOGGER_NAME = "static_health"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
_HANDLER_NAME = "static_health.console"


def get_logger(name: str | None = None) -> logging.Logger:
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the package logger once and set its level."""
    logger = logging.getLogger(LOGGER_NAME)
    resolved = logging.getLevelName(level.upper())
    logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)

    if not any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.set_name(_HANDLER_NAME)
        stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(stream_handler)

    return logger
