"""Constants file."""

import os
import sys
from pathlib import Path

APP_NAME = "MTGA Match Viewer"
BACKEND_PATH_ENV = "MATCH_VIEWER_BACKEND"


def _default_base_dir() -> Path:
    """Return the writable base directory for config/cache/logging."""
    if getattr(sys, "frozen", False):
        local_appdata = os.getenv("LOCALAPPDATA")
        if local_appdata:
            return Path(local_appdata) / APP_NAME
        return Path.home() / ".mtga_match_viewer"
    return Path(__file__).resolve().parent.parent


SUBDUED_TEXT = (185, 191, 202)
DARK_BG = (20, 22, 27)
DARK_PANEL = (34, 39, 46)
DARK_ALT = (40, 46, 54)
LIGHT_TEXT = (236, 236, 236)

BASE_DATA_DIR = _default_base_dir()
CONFIG_DIR = BASE_DATA_DIR / "config"
CACHE_DIR = BASE_DATA_DIR / "cache"
LOGS_DIR = BASE_DATA_DIR / "logs"
IMAGE_CACHE_DIR = CACHE_DIR / "card_images"
CONFIG_FILE = CONFIG_DIR / "config.json"


def ensure_base_dirs() -> None:
    """Ensure base config/cache/log directories exist without importing side effects."""
    BASE_DATA_DIR.mkdir(parents=True, exist_ok=True)
    for path in (CONFIG_DIR, CACHE_DIR, LOGS_DIR, IMAGE_CACHE_DIR):
        path.mkdir(parents=True, exist_ok=True)


# Backend command names
MATCH_DETAILS_COMMAND = "match-details"
MATCHES_COMMAND = "matches"
CLEAR_IMAGE_CACHE_COMMAND = "clear-image-cache"
DEFAULT_BACKEND_TIMEOUT_SECONDS = 30.0

# Query parameter carrying the match id when navigating to the details view
MATCH_ID_QUERY_PARAM = "id"
MATCH_DETAILS_ROUTE = "/match-details"

# A best-of-3 match always gets three mulligan columns
DEFAULT_MULLIGAN_GROUPS = 3

# Hover preview placement relative to the hovered row
PREVIEW_OFFSET_X = 10
PREVIEW_OFFSET_Y = 10
PREVIEW_MAX_WIDTH = 200
PREVIEW_MAX_HEIGHT = 300
PREVIEW_TAG_PREFIX = "hover-image-"

MATCH_DATE_FORMAT = "%b %d, %Y, %I:%M %p"

__all__ = [
    "APP_NAME",
    "BACKEND_PATH_ENV",
    "SUBDUED_TEXT",
    "DARK_BG",
    "DARK_PANEL",
    "DARK_ALT",
    "LIGHT_TEXT",
    "BASE_DATA_DIR",
    "CONFIG_DIR",
    "CACHE_DIR",
    "LOGS_DIR",
    "IMAGE_CACHE_DIR",
    "CONFIG_FILE",
    "ensure_base_dirs",
    "MATCH_DETAILS_COMMAND",
    "MATCHES_COMMAND",
    "CLEAR_IMAGE_CACHE_COMMAND",
    "DEFAULT_BACKEND_TIMEOUT_SECONDS",
    "MATCH_ID_QUERY_PARAM",
    "MATCH_DETAILS_ROUTE",
    "DEFAULT_MULLIGAN_GROUPS",
    "PREVIEW_OFFSET_X",
    "PREVIEW_OFFSET_Y",
    "PREVIEW_MAX_WIDTH",
    "PREVIEW_MAX_HEIGHT",
    "PREVIEW_TAG_PREFIX",
    "MATCH_DATE_FORMAT",
]
