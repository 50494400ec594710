"""Resolve card ``image_uri`` values to files already present in the local image cache.

Images are never downloaded here. The backend (or a separate sync job) drops
files into the cache directory named after the last path segment of their URI,
optionally below a size folder such as ``normal/``.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import unquote, urlsplit

from utils.constants import IMAGE_CACHE_DIR

IMAGE_SIZE_FOLDERS = ("normal", "large", "small", "png")


def cache_filename_for(image_uri: str) -> str | None:
    """Return the cache file name for ``image_uri`` (query string dropped)."""
    if not image_uri:
        return None
    path = unquote(urlsplit(image_uri).path)
    name = path.rstrip("/").rsplit("/", 1)[-1]
    return name or None


def resolve_local_image(image_uri: str | None, cache_dir: Path = IMAGE_CACHE_DIR) -> Path | None:
    """
    Find a local file for ``image_uri``.

    ``file://`` URIs and plain filesystem paths are used as-is when they exist.
    Remote URIs are looked up by file name in ``cache_dir`` and its size folders.
    """
    if not image_uri:
        return None

    parts = urlsplit(image_uri)
    if parts.scheme in ("", "file"):
        direct = Path(unquote(parts.path)) if parts.scheme == "file" else Path(image_uri)
        if direct.is_file():
            return direct

    filename = cache_filename_for(image_uri)
    if filename is None:
        return None
    for folder in (cache_dir, *(cache_dir / size for size in IMAGE_SIZE_FOLDERS)):
        candidate = folder / filename
        if candidate.is_file():
            return candidate
    return None


def scale_to_fit(width: int, height: int, max_width: int, max_height: int) -> tuple[int, int]:
    """Scale ``width`` x ``height`` down (never up) to fit the bounding box, keeping aspect."""
    if width <= 0 or height <= 0:
        return (0, 0)
    ratio = min(max_width / width, max_height / height, 1.0)
    return (max(1, int(width * ratio)), max(1, int(height * ratio)))


__all__ = ["cache_filename_for", "resolve_local_image", "scale_to_fit"]
