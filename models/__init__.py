"""Models package - typed records exchanged with the match backend."""

from models.match_details import (
    Card,
    CardCategory,
    DeckDifference,
    DeckSnapshot,
    GameResult,
    MatchDetails,
    MatchId,
    MatchSummary,
    Mulligan,
    PrimaryDecklist,
    parse_cards,
    parse_match_id_value,
)

__all__ = [
    "Card",
    "CardCategory",
    "DeckDifference",
    "DeckSnapshot",
    "GameResult",
    "MatchId",
    "MatchDetails",
    "MatchSummary",
    "Mulligan",
    "PrimaryDecklist",
    "parse_cards",
    "parse_match_id_value",
]
