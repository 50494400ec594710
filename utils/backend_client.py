"""Helpers for invoking the match backend command-line executable.

The backend owns log ingestion, the match database and decklist computation.
This module only runs ``<backend> <command> [args...]`` and decodes the JSON
document it prints on stdout:

* ``match-details <id>`` - one ``MatchDetails`` object
* ``matches`` - list of match summaries, newest first
* ``clear-image-cache`` - drops the backend's cached card image metadata
"""

from __future__ import annotations

import json
import os
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from loguru import logger

from utils.constants import BACKEND_PATH_ENV, DEFAULT_BACKEND_TIMEOUT_SECONDS

# Default build locations we will probe for the backend executable
_DEFAULT_BACKEND_CANDIDATES = [
    Path("backend/target/release/match-backend"),
    Path("backend/target/release/match-backend.exe"),
    Path("backend/target/debug/match-backend"),
    Path("backend/target/debug/match-backend.exe"),
]


class BackendCommandError(RuntimeError):
    """Raised when a backend command fails or produces unusable output."""


def _resolve_backend_path(explicit: str | os.PathLike[str] | None = None) -> Path | None:
    if explicit:
        candidate = Path(explicit)
        if candidate.exists():
            return candidate
        return None

    env_path = os.getenv(BACKEND_PATH_ENV)
    if env_path:
        candidate = Path(env_path)
        if candidate.exists():
            return candidate

    for candidate in _DEFAULT_BACKEND_CANDIDATES:
        if candidate.exists():
            return candidate
    return None


def _require_backend_path(explicit: str | os.PathLike[str] | None = None) -> Path:
    resolved = _resolve_backend_path(explicit)
    if resolved is None:
        raise FileNotFoundError(
            f"Match backend executable not found. Set {BACKEND_PATH_ENV} or configure backend_path."
        )
    return resolved


def _sanitize_json_payload(raw: str) -> Any:
    payload = raw.strip()
    if not payload:
        raise BackendCommandError("Backend produced no output.")
    # Handle UTF-8 BOM if present.
    payload = payload.lstrip("\ufeff")
    try:
        return json.loads(payload)
    except json.JSONDecodeError as exc:
        raise BackendCommandError(f"Invalid JSON payload from backend: {exc}") from exc


def run_backend_command(
    command: str,
    *,
    backend_path: str | os.PathLike[str] | None = None,
    extra_args: Sequence[str] | None = None,
    timeout: float | None = DEFAULT_BACKEND_TIMEOUT_SECONDS,
    expect_output: bool = True,
) -> Any:
    """
    Run ``<backend> <command> [extra_args]`` and return its decoded JSON output.

    Args:
        command: Backend sub-command name
        backend_path: Explicit executable path; falls back to env/default candidates
        extra_args: Additional positional arguments
        timeout: Seconds to wait before giving up
        expect_output: When False, an empty stdout is accepted and ``None`` returned

    Raises:
        FileNotFoundError: If no backend executable could be resolved
        BackendCommandError: On non-zero exit, timeout or unparsable output
    """
    executable = _require_backend_path(backend_path)
    args = [str(executable), command, *(extra_args or [])]
    logger.debug("Running backend command: {}", args)
    try:
        completed = subprocess.run(
            args,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as exc:
        raise BackendCommandError(f"Backend command '{command}' timed out after {timeout}s") from exc

    if completed.returncode != 0:
        raise BackendCommandError(
            f"Backend exited with code {completed.returncode}: {completed.stderr.strip()}"
        )
    if not expect_output and not completed.stdout.strip():
        return None
    return _sanitize_json_payload(completed.stdout)


__all__ = ["BackendCommandError", "run_backend_command"]
