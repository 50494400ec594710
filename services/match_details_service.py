"""
Match details service - typed access to the match backend commands.

The service is the single seam between the UI layer and the backend
executable: it runs the command, then parses the JSON into model records.
Callers run it off the UI thread (see ``utils.background_worker``).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from loguru import logger

from models.match_details import MatchDetails, MatchSummary
from utils.backend_client import run_backend_command
from utils.config import AppConfig, load_app_config
from utils.constants import (
    CLEAR_IMAGE_CACHE_COMMAND,
    MATCH_DETAILS_COMMAND,
    MATCHES_COMMAND,
)

CommandRunner = Callable[..., Any]


class MatchDetailsService:
    """Service that fetches match listings and match details from the backend."""

    def __init__(
        self,
        config: AppConfig | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.config = config or load_app_config()
        self._runner = runner or run_backend_command

    # ------------------------------------------------------------------ Public API ---------------------------------------------------------
    def fetch_match_details(self, match_id: str) -> MatchDetails:
        """
        Fetch one match by id.

        Raises:
            BackendCommandError: If the backend fails or prints invalid JSON
            FileNotFoundError: If the backend executable is not available
            ValueError: If the payload does not have the MatchDetails shape
        """
        logger.info("Getting match details for match_id: {}", match_id)
        payload = self._run(MATCH_DETAILS_COMMAND, [str(match_id)])
        return MatchDetails.from_dict(payload)

    def list_matches(self) -> list[MatchSummary]:
        """Return all recorded matches, newest first as ordered by the backend."""
        payload = self._run(MATCHES_COMMAND)
        if not isinstance(payload, list):
            raise ValueError(f"Expected a list of matches, got {type(payload).__name__}")
        matches = [MatchSummary.from_dict(item) for item in payload]
        logger.debug("Loaded {} matches from backend", len(matches))
        return matches

    def clear_image_cache(self) -> None:
        """Ask the backend to drop its cached card image metadata."""
        logger.info("Clearing backend card image cache")
        self._run(CLEAR_IMAGE_CACHE_COMMAND, expect_output=False)

    # ------------------------------------------------------------------ Internal helpers ---------------------------------------------------
    def _run(self, command: str, args: Sequence[str] | None = None, **kwargs: Any) -> Any:
        return self._runner(
            command,
            backend_path=self.config.backend_path,
            extra_args=list(args or []),
            timeout=self.config.backend_timeout,
            **kwargs,
        )


_default_match_details_service: MatchDetailsService | None = None


def get_match_details_service() -> MatchDetailsService:
    """Return a shared MatchDetailsService instance."""
    global _default_match_details_service
    if _default_match_details_service is None:
        _default_match_details_service = MatchDetailsService()
    return _default_match_details_service


def reset_match_details_service() -> None:
    """Reset the cached MatchDetailsService instance (used in tests)."""
    global _default_match_details_service
    _default_match_details_service = None


__all__ = [
    "MatchDetailsService",
    "get_match_details_service",
    "reset_match_details_service",
]
