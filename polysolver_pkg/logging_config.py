"""Logging for Polysolver.

Every module logs through a child of the ``polysolver`` logger
(``polysolver.parser``, ``polysolver.solver``, ...). Nothing is emitted by
the package itself until :func:`setup_logging` attaches handlers; the CLI
does so from ``--log-level``/``--log-file`` (default ``POLYSOLVER_LOG_LEVEL``).
"""

import logging
import sys
from datetime import datetime
from typing import Optional

PACKAGE_LOGGER = "polysolver"


class StructuredFormatter(logging.Formatter):
    """``<iso timestamp> [LEVEL] polysolver.<module>: message``, then any traceback."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        line = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(
    level: str = "WARNING", log_file: Optional[str] = None
) -> logging.Logger:
    """Send package log records to stderr and, optionally, to *log_file*.

    Handlers from an earlier call are closed and replaced, so the CLI and
    tests can call this repeatedly. Unknown level names mean WARNING.

    Returns:
        The ``polysolver`` package logger
    """
    reset_logging()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    handlers: list = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
    return logger


def reset_logging() -> None:
    """Close the handlers installed by :func:`setup_logging` and clear the level."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def get_logger(name: str) -> logging.Logger:
    """Logger for one package module, e.g. ``get_logger("parser")``."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
