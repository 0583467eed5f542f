"""Logging configuration for the tic-tac-toe simulator and agents."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FORMAT = '{"time":"%(asctime)s","level":"%(levelname)s","name":"%(name)s","message":"%(message)s"}'

# Marks handlers installed here so repeated setup calls replace them.
_HANDLER_NAME = "tictactoe"


def setup_logging(level: str | int = "INFO", format_json: bool = False, stream: TextIO | None = None) -> None:
    """
    Configure the root logger for scripts and matches.

    Args:
        level: Logging level name (DEBUG, INFO, ...) or numeric level
        format_json: Emit one JSON object per line instead of plain text
        stream: Destination stream, stdout when omitted
    """
    if isinstance(level, str):
        log_level = getattr(logging, level.upper(), logging.INFO)
    else:
        log_level = level

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(_HANDLER_NAME)
    if format_json:
        handler.setFormatter(logging.Formatter(JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.setLevel(log_level)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (usually ``__name__``)."""
    return logging.getLogger(name)


__all__ = ["JSON_FORMAT", "TEXT_FORMAT", "get_logger", "setup_logging"]
