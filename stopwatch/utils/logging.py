"""Logging utilities built on top of :mod:`loguru`.

The ``stopwatch`` package disables its own loguru records on import; nothing is
emitted until :func:`setup_logging` is called.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logging(log_file: Optional[Path] = None, level: str = "INFO") -> None:
    """Configure the global loguru logger and switch on stopwatch records.

    Stdout is left alone: it carries the stopwatch status notices and reports.

    Args:
        log_file: Optional file path for log sink.
        level: Minimum log level (string understood by loguru).
    """

    logger.remove()
    logger.add(lambda msg: print(msg, end="", file=sys.stderr), level=level)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=level, rotation="10 MB", retention="7 days")
    logger.enable("stopwatch")


def silence_logging() -> None:
    """Stop emitting stopwatch records, restoring the library default."""

    logger.disable("stopwatch")


__all__ = ["setup_logging", "silence_logging", "logger"]
