"""Logging configuration for the zoo allocator."""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

_HANDLER_NAME = "recintos"

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_JSON_FORMAT = '{"time":"%(asctime)s","level":"%(levelname)s","name":"%(name)s","message":"%(message)s"}'


def setup_logging(
    level: str = "INFO",
    format_json: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """
    Configure the root logger for applications embedding the allocator.

    Calling it again replaces the handler installed by a previous call
    instead of stacking a second one.

    Args:
        level: The logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Emit one JSON object per line instead of plain text
        stream: Where to write records, stdout by default

    Returns:
        The installed handler
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(_HANDLER_NAME)
    if format_json:
        handler.setFormatter(logging.Formatter(_JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.setLevel(log_level)
    root.addHandler(handler)
    return handler


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The logger name (usually __name__)

    Returns:
        A logger instance
    """
    return logging.getLogger(name)


__all__ = ["get_logger", "setup_logging"]
