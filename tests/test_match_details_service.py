"""Tests for the match details service against a fake backend runner."""

from __future__ import annotations

from pathlib import Path

import pytest

from models.match_details import MatchSummary
from services.match_details_service import (
    MatchDetailsService,
    get_match_details_service,
    reset_match_details_service,
)
from utils.backend_client import BackendCommandError
from utils.config import AppConfig


class RecordingRunner:
    def __init__(self, responses: dict[str, object]) -> None:
        self.responses = responses
        self.calls: list[tuple[str, dict]] = []

    def __call__(self, command: str, **kwargs):
        self.calls.append((command, kwargs))
        response = self.responses[command]
        if isinstance(response, Exception):
            raise response
        return response


def _service(responses: dict[str, object]) -> tuple[MatchDetailsService, RecordingRunner]:
    runner = RecordingRunner(responses)
    config = AppConfig(backend_path="/opt/match-backend", backend_timeout=12.0, image_cache_dir=Path("."))
    return MatchDetailsService(config=config, runner=runner), runner


def test_fetch_match_details_passes_id_and_config() -> None:
    service, runner = _service(
        {"match-details": {"id": 42, "controller_player_name": "Alice", "opponent_player_name": "Bob"}}
    )

    match = service.fetch_match_details("42")

    assert match.id == 42
    assert match.opponent_player_name == "Bob"
    command, kwargs = runner.calls[0]
    assert command == "match-details"
    assert kwargs["extra_args"] == ["42"]
    assert kwargs["backend_path"] == "/opt/match-backend"
    assert kwargs["timeout"] == 12.0


def test_fetch_match_details_propagates_backend_errors() -> None:
    service, _ = _service({"match-details": BackendCommandError("boom")})

    with pytest.raises(BackendCommandError):
        service.fetch_match_details("1")


def test_fetch_match_details_rejects_malformed_payload() -> None:
    service, _ = _service({"match-details": ["not", "an", "object"]})

    with pytest.raises(ValueError):
        service.fetch_match_details("1")


def test_list_matches_parses_summaries() -> None:
    service, runner = _service(
        {
            "matches": [
                {"id": 2, "controller_player_name": "Alice", "opponent_player_name": "Carol", "created_at": "x"},
                {"id": 1, "controller_player_name": "Alice", "opponent_player_name": "Bob", "created_at": "y"},
            ]
        }
    )

    matches = service.list_matches()

    assert [match.id for match in matches] == [2, 1]
    assert all(isinstance(match, MatchSummary) for match in matches)
    assert runner.calls[0][1]["extra_args"] == []


def test_list_matches_requires_a_list() -> None:
    service, _ = _service({"matches": {"id": 1}})

    with pytest.raises(ValueError):
        service.list_matches()


def test_clear_image_cache_accepts_empty_output() -> None:
    service, runner = _service({"clear-image-cache": None})

    service.clear_image_cache()

    command, kwargs = runner.calls[0]
    assert command == "clear-image-cache"
    assert kwargs["expect_output"] is False


def test_shared_service_is_cached_until_reset(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(
        "services.match_details_service.load_app_config", lambda: AppConfig(image_cache_dir=tmp_path)
    )

    first = get_match_details_service()
    assert get_match_details_service() is first

    reset_match_details_service()
    assert get_match_details_service() is not first


def test_list_matches_and_fetch_accept_guid_ids() -> None:
    guid = "4f1c7e1a-2b3d-4c5e-8f90-1a2b3c4d5e6f"
    service, runner = _service(
        {
            "matches": [
                {"id": guid, "controller_player_name": "Alice", "opponent_player_name": "Bob", "created_at": "x"},
                {"id": 3, "controller_player_name": "Alice", "opponent_player_name": "Carol", "created_at": "y"},
            ],
            "match-details": {"id": guid, "opponent_player_name": "Bob"},
        }
    )

    assert [match.id for match in service.list_matches()] == [guid, 3]
    assert service.fetch_match_details(guid).id == guid
    assert runner.calls[-1][1]["extra_args"] == [guid]
