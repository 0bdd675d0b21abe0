"""Logging setup for lalurecf.

Modules log through ``logging.getLogger(__name__)``, which places them under
the ``lalurecf`` logger configured here.
"""

__all__ = [
    "LOGGER_NAME",
    "configure_logging",
    "parse_log_level",
    "reset_logging",
]

import logging
import sys
import threading
from typing import Any

LOGGER_NAME = "lalurecf"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None
_lock = threading.Lock()


def parse_log_level(level: str | int) -> int:
    """Turn a level name such as "info" or a number into a logging level."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: '{level}'")
    return value


def configure_logging(
    *,
    level: str | int = logging.WARNING,
    stream: Any = None,
    handler: logging.Handler | None = None,
) -> None:
    """Install a single handler on the lalurecf logger.

    Calling again replaces the previously installed handler, so repeated CLI
    invocations in one process do not duplicate output.
    """
    global _handler
    app_logger = logging.getLogger(LOGGER_NAME)
    with _lock:
        if _handler is not None:
            app_logger.removeHandler(_handler)

        h = handler if handler is not None else logging.StreamHandler(stream or sys.stderr)
        h.setFormatter(logging.Formatter(LOG_FORMAT))
        app_logger.addHandler(h)
        app_logger.setLevel(parse_log_level(level))
        _handler = h


def reset_logging() -> None:
    """Remove the installed handler. FOR TESTING ONLY."""
    global _handler
    app_logger = logging.getLogger(LOGGER_NAME)
    with _lock:
        if _handler is not None:
            app_logger.removeHandler(_handler)
            _handler = None
    app_logger.setLevel(logging.NOTSET)
