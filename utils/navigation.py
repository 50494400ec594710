"""Routes between the match list and the match details view."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from urllib.parse import parse_qs, urlencode, urlsplit

from utils.constants import MATCH_DETAILS_ROUTE, MATCH_ID_QUERY_PARAM


def build_match_details_route(match_id: int | str) -> str:
    """Return the details route for a match, e.g. ``/match-details?id=42``."""
    return f"{MATCH_DETAILS_ROUTE}?{urlencode({MATCH_ID_QUERY_PARAM: match_id})}"


def parse_match_id(query: str | Mapping[str, str | Sequence[str]] | None) -> str | None:
    """
    Extract the match id from query state.

    Accepts a route/query string (``"/match-details?id=42"``, ``"?id=42"``,
    ``"id=42"``) or an already-parsed mapping. Returns ``None`` when the
    parameter is absent or blank.
    """
    if not query:
        return None

    if isinstance(query, str):
        query_string = urlsplit(query).query if "?" in query else query
        values = parse_qs(query_string).get(MATCH_ID_QUERY_PARAM, [])
    else:
        raw = query.get(MATCH_ID_QUERY_PARAM)
        if raw is None:
            values = []
        elif isinstance(raw, str):
            values = [raw]
        else:
            values = list(raw)

    for value in values:
        candidate = str(value).strip()
        if candidate:
            return candidate
    return None


__all__ = ["build_match_details_route", "parse_match_id"]
