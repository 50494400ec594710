from models.match_details import GameResult
from utils.formatting import format_game_result, format_match_date


def test_format_match_date() -> None:
    assert format_match_date("2024-01-05T15:30:00") == "Jan 05, 2024, 03:30 PM"
    assert format_match_date("2024-01-05T15:30:00Z") == "Jan 05, 2024, 03:30 PM"


def test_unparsable_dates_are_echoed() -> None:
    assert format_match_date("yesterday") == "yesterday"
    assert format_match_date(None) == ""


def test_format_game_result() -> None:
    assert format_game_result(GameResult(game_number=2, winning_player="Bob")) == "Game 2: Bob"
