"""Logging helpers to mirror console output into a persistent log file."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

from loguru import logger

LOG_ROTATION = "5 MB"
LOG_RETENTION = 5


def configure_logging(logs_dir: Path, level: str = "INFO") -> Path | None:
    """
    Route loguru output to stderr (when the process has one) and a rolling file in ``logs_dir``.

    Windowed launches (``pythonw``, frozen builds) have no stderr; only the
    file sink is installed then.

    Returns the file path in use when file logging is available, otherwise None.
    """
    logger.remove()
    if sys.stderr is not None:
        logger.add(sys.stderr, level=level, backtrace=True, diagnose=True, enqueue=True)

    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning(f"File logging disabled; unable to create {logs_dir}: {exc}")
        return None

    log_file = logs_dir / f"match_viewer_{datetime.now():%Y%m%d_%H%M%S}.log"
    logger.add(
        log_file,
        level=level,
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        backtrace=True,
        diagnose=True,
        enqueue=True,
    )
    logger.debug("Logging configured at level {}", level)
    return log_file


__all__ = ["configure_logging"]
