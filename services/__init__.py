"""Services package - match data access and the pure transforms applied before rendering."""

from services.decklist_normalizer import normalize_decklist
from services.match_details_service import (
    MatchDetailsService,
    get_match_details_service,
    reset_match_details_service,
)
from services.mulligan_grouper import group_mulligans

__all__ = [
    "MatchDetailsService",
    "get_match_details_service",
    "group_mulligans",
    "normalize_decklist",
    "reset_match_details_service",
]
