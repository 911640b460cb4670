"""
Logging setup for hosts embedding the calculator.

The library only creates loggers under the ``deskcalc`` namespace; handlers
are installed here, on request, never on import.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

from deskcalc.config import Settings

LOGGER_NAME = "deskcalc"
PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_logging_configured = False


class JSONFormatter(logging.Formatter):
    """Formatter that writes one JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(settings: Settings | None = None, force: bool = False) -> logging.Logger:
    """
    Configure the ``deskcalc`` logger.

    Args:
        settings: Settings to apply (default: loaded from the environment)
        force: Reconfigure even if logging was already set up

    Returns:
        The package logger
    """
    global _logging_configured

    logger = logging.getLogger(LOGGER_NAME)
    if _logging_configured and not force:
        return logger

    if settings is None:
        settings = Settings.from_env()

    formatter: logging.Formatter
    if settings.log_json:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.WARNING))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _logging_configured = True
    return logger
