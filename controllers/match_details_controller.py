"""
Match Details Controller - view model behind the match details window.

Activation takes a match id from navigation state and drives the
fetch -> normalize -> group pipeline. Only the response for the most recent
activation is allowed to update the view; anything older is dropped.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from loguru import logger

from models.match_details import MatchDetails, Mulligan, PrimaryDecklist
from services.card_list_builder import (
    CardListBlock,
    MulliganBlock,
    SideboardChangeBlock,
    build_decklist_columns,
    build_mulligan_blocks,
    build_sideboard_change_blocks,
)
from services.decklist_normalizer import normalize_decklist
from services.match_details_service import MatchDetailsService, get_match_details_service
from services.mulligan_grouper import group_mulligans
from utils.background_worker import BackgroundWorker
from utils.navigation import parse_match_id


@dataclass(frozen=True)
class MatchDetailsView:
    """Render-ready match: normalized decklist, grouped mulligans and built blocks."""

    match: MatchDetails
    decklist: PrimaryDecklist | None
    mulligan_groups: list[list[Mulligan]]
    decklist_columns: list[list[CardListBlock]]
    sideboard_changes: list[SideboardChangeBlock]
    mulligan_blocks: list[list[MulliganBlock]]
    is_placeholder: bool = False


def compose_match_view(match: MatchDetails, is_placeholder: bool = False) -> MatchDetailsView:
    """Run the normalizer and grouper over a fetched record and build its blocks."""
    decklist = normalize_decklist(match.primary_decklist)
    mulligan_groups = group_mulligans(match.mulligans)
    return MatchDetailsView(
        match=match,
        decklist=decklist,
        mulligan_groups=mulligan_groups,
        decklist_columns=build_decklist_columns(decklist),
        sideboard_changes=build_sideboard_change_blocks(match.differences),
        mulligan_blocks=build_mulligan_blocks(mulligan_groups),
        is_placeholder=is_placeholder,
    )


ViewListener = Callable[[MatchDetailsView | None], None]


class MatchDetailsViewModel:
    """Owns the state of one match details screen."""

    def __init__(
        self,
        service: MatchDetailsService | None = None,
        worker: BackgroundWorker | None = None,
    ) -> None:
        self.service = service or get_match_details_service()
        self._owns_worker = worker is None
        self.worker = worker or BackgroundWorker()
        self.view: MatchDetailsView | None = None
        self.loading = False
        self.last_error: Exception | None = None
        self.match_id: str | None = None
        self._request_token = 0
        self._listeners: list[ViewListener] = []

    # ------------------------------------------------------------------ Public API ---------------------------------------------------------
    def subscribe(self, listener: ViewListener) -> None:
        self._listeners.append(listener)

    def activate_from_query(self, query: str | Mapping[str, str | Sequence[str]] | None) -> None:
        self.activate(parse_match_id(query))

    def activate(self, match_id: str | None) -> None:
        """
        Load the screen for ``match_id``.

        Without an id the zero-valued placeholder is shown and no fetch is
        issued. With an id exactly one fetch is dispatched; until it resolves
        the view is unset.
        """
        self._request_token += 1
        token = self._request_token
        self.match_id = match_id or None
        self.view = None
        self.last_error = None

        if self.match_id is None:
            logger.debug("No match id supplied; showing placeholder match")
            self.loading = False
            self.view = compose_match_view(MatchDetails.placeholder(), is_placeholder=True)
            self._notify()
            return

        self.loading = True
        self._notify()
        requested_id = self.match_id
        self.worker.submit(
            self.service.fetch_match_details,
            requested_id,
            on_success=lambda match: self._on_loaded(token, requested_id, match),
            on_error=lambda exc: self._on_failed(token, requested_id, exc),
        )

    def deactivate(self) -> None:
        """Forget the current screen; in-flight responses will be discarded."""
        self._request_token += 1
        self.match_id = None
        self.view = None
        self.loading = False
        self.last_error = None

    def close(self) -> None:
        """Deactivate for good; a worker created by this view model is shut down."""
        self.deactivate()
        if self._owns_worker:
            self.worker.shutdown(timeout=1.0)

    # ------------------------------------------------------------------ Callbacks ----------------------------------------------------------
    def _is_current(self, token: int, match_id: str) -> bool:
        if token != self._request_token:
            logger.debug("Discarding stale match details response for {}", match_id)
            return False
        return True

    def _on_loaded(self, token: int, match_id: str, match: MatchDetails) -> None:
        if not self._is_current(token, match_id):
            return
        try:
            view = compose_match_view(match)
        except (IndexError, ValueError) as exc:
            logger.error(f"Match {match_id} violates the backend contract: {exc}")
            self._fail(exc)
            raise
        except Exception as exc:
            logger.opt(exception=exc).error(f"Could not build the view for match {match_id}: {exc}")
            self._fail(exc)
            raise
        self.loading = False
        self.view = view
        self._notify()

    def _on_failed(self, token: int, match_id: str, exc: Exception) -> None:
        if not self._is_current(token, match_id):
            return
        logger.opt(exception=exc).error(f"Failed to load match details for {match_id}: {exc}")
        self._fail(exc)

    def _fail(self, exc: Exception) -> None:
        self.loading = False
        self.view = None
        self.last_error = exc
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.view)


__all__ = ["MatchDetailsView", "MatchDetailsViewModel", "compose_match_view"]
