"""Application configuration loaded from ``config/config.json``."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger

from utils.constants import (
    BACKEND_PATH_ENV,
    CONFIG_FILE,
    DEFAULT_BACKEND_TIMEOUT_SECONDS,
    IMAGE_CACHE_DIR,
)

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class AppConfig:
    backend_path: str | None = None
    backend_timeout: float = DEFAULT_BACKEND_TIMEOUT_SECONDS
    image_cache_dir: Path = IMAGE_CACHE_DIR
    log_level: str = "INFO"


def _load_json_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as exc:
        logger.warning(f"Invalid JSON at {path}: {exc}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring config at {path}: expected an object")
        return {}
    return data


def _coerce_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return DEFAULT_BACKEND_TIMEOUT_SECONDS
    return timeout if timeout > 0 else DEFAULT_BACKEND_TIMEOUT_SECONDS


def load_app_config(path: Path = CONFIG_FILE) -> AppConfig:
    """
    Read the application config, falling back to defaults for missing or invalid values.

    The ``MATCH_VIEWER_BACKEND`` environment variable takes precedence over the
    ``backend_path`` entry.
    """
    data = _load_json_file(path)

    backend_path = os.getenv(BACKEND_PATH_ENV) or data.get("backend_path") or None

    level = str(data.get("log_level", "INFO")).upper()
    if level not in _LOG_LEVELS:
        logger.warning(f"Unknown log level '{level}' in config; using INFO")
        level = "INFO"

    raw_cache_dir = data.get("image_cache_dir")
    image_cache_dir = Path(raw_cache_dir).expanduser() if raw_cache_dir else IMAGE_CACHE_DIR

    return AppConfig(
        backend_path=backend_path,
        backend_timeout=_coerce_timeout(data.get("backend_timeout", DEFAULT_BACKEND_TIMEOUT_SECONDS)),
        image_cache_dir=image_cache_dir,
        log_level=level,
    )


__all__ = ["AppConfig", "load_app_config"]
