"""Display formatting for match timestamps and result lines."""

from __future__ import annotations

from datetime import datetime

from models.match_details import GameResult
from utils.constants import MATCH_DATE_FORMAT


def parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        if value.endswith("Z"):
            value = value.replace("Z", "+00:00")
        return datetime.fromisoformat(value)
    except ValueError:
        try:
            return datetime.strptime(value[:19], "%Y-%m-%d %H:%M:%S")
        except ValueError:
            return None


def format_match_date(value: str | None) -> str:
    """Format a backend timestamp like ``Jan 05, 2024, 03:30 PM``; unparsable input is echoed."""
    timestamp = parse_timestamp(value)
    if timestamp is None:
        return value or ""
    return timestamp.strftime(MATCH_DATE_FORMAT)


def format_game_result(result: GameResult) -> str:
    return f"Game {result.game_number}: {result.winning_player}"


__all__ = ["format_game_result", "format_match_date", "parse_timestamp"]
