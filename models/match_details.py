"""
Match detail records - typed views of the backend ``match-details`` payload.

The backend delivers plain JSON. Every record here is a frozen dataclass built
through ``from_dict`` so that parsing never touches the caller's mapping.
Nullable sections (``primary_decklist``, ``differences``) stay ``None`` when
the backend omits them; filling them in is the normalizer's job.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CardCategory(Enum):
    """Card types a primary decklist is bucketed by."""

    CREATURE = "Creature"
    INSTANT = "Instant"
    SORCERY = "Sorcery"
    ENCHANTMENT = "Enchantment"
    ARTIFACT = "Artifact"
    PLANESWALKER = "Planeswalker"
    LAND = "Land"
    UNKNOWN = "Unknown"

    @classmethod
    def from_label(cls, label: str | None) -> CardCategory:
        """Map a backend type label to a category, falling back to ``UNKNOWN``."""
        if isinstance(label, CardCategory):
            return label
        for category in cls:
            if category.value == label:
                return category
        return cls.UNKNOWN


@dataclass(frozen=True)
class Card:
    name: str
    quantity: int = 1
    mana_value: int = 0
    image_uri: str | None = None
    card_type: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Card:
        if not isinstance(data, Mapping):
            raise ValueError(f"Card entry must be an object, got {type(data).__name__}")
        return cls(
            name=str(data.get("name") or "Unknown"),
            quantity=int(data.get("quantity") or 1),
            mana_value=int(data.get("mana_value") or 0),
            image_uri=data.get("image_uri") or None,
            card_type=data.get("card_type"),
        )


def parse_cards(entries: Iterable[Any] | None) -> list[Card]:
    """Parse a list of card payloads; ``None`` yields an empty list."""
    if entries is None:
        return []
    return [entry if isinstance(entry, Card) else Card.from_dict(entry) for entry in entries]


@dataclass(frozen=True)
class PrimaryDecklist:
    """Decklist of the first game, main deck bucketed by card category."""

    archetype: str
    main_deck: dict[CardCategory, list[Card]] = field(default_factory=dict)
    sideboard: list[Card] = field(default_factory=list)

    def cards_in(self, category: CardCategory) -> list[Card]:
        return self.main_deck[category]


@dataclass(frozen=True)
class DeckDifference:
    """Cards added and removed going into a post-game-1 game."""

    added: list[Card] = field(default_factory=list)
    removed: list[Card] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DeckDifference:
        return cls(added=parse_cards(data.get("added")), removed=parse_cards(data.get("removed")))


@dataclass(frozen=True)
class GameResult:
    game_number: int
    winning_player: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GameResult:
        return cls(
            game_number=int(data.get("game_number") or 0),
            winning_player=str(data.get("winning_player") or ""),
        )


@dataclass(frozen=True)
class Mulligan:
    """One keep/mulligan decision taken before a game."""

    hand: list[Card]
    opponent_identity: str
    game_number: int
    number_to_keep: int
    play_draw: str
    decision: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Mulligan:
        return cls(
            hand=parse_cards(data.get("hand")),
            opponent_identity=str(data.get("opponent_identity") or ""),
            game_number=int(data.get("game_number") or 0),
            number_to_keep=int(data.get("number_to_keep") or 0),
            play_draw=str(data.get("play_draw") or ""),
            decision=str(data.get("decision") or ""),
        )


@dataclass(frozen=True)
class DeckSnapshot:
    """Legacy per-game deck snapshot (arena card ids, one entry per copy)."""

    game_number: int
    deck: list[int] = field(default_factory=list)
    sideboard: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DeckSnapshot:
        return cls(
            game_number=int(data.get("game_number") or 0),
            deck=[int(card_id) for card_id in data.get("deck") or []],
            sideboard=[int(card_id) for card_id in data.get("sideboard") or []],
        )


MatchId = int | str


def parse_match_id_value(value: Any) -> MatchId:
    """
    Normalize a backend match id.

    Integers and numeric strings become ``int``; any other non-empty value
    (MTG Arena ids are usually GUIDs) is kept as a stripped string. A missing
    id is ``0``, the placeholder id.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return 0
    if text.isdigit():
        return int(text)
    return text


@dataclass(frozen=True)
class MatchDetails:
    """Aggregate root for a single match as delivered by the backend."""

    id: MatchId
    did_controller_win: bool
    controller_player_name: str
    opponent_player_name: str
    created_at: str
    primary_decklist: Mapping[str, Any] | PrimaryDecklist | None
    game_results: list[GameResult]
    differences: list[DeckDifference] | None
    decklists: list[DeckSnapshot]
    mulligans: list[Mulligan]

    @property
    def winner_name(self) -> str:
        if self.did_controller_win:
            return self.controller_player_name
        return self.opponent_player_name

    @classmethod
    def placeholder(cls) -> MatchDetails:
        """Zero-valued record shown when no match id was supplied."""
        return cls(
            id=0,
            did_controller_win=False,
            controller_player_name="",
            opponent_player_name="",
            created_at="",
            primary_decklist=None,
            game_results=[],
            differences=None,
            decklists=[],
            mulligans=[],
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MatchDetails:
        """
        Build a record from the backend payload.

        The primary decklist is kept as received (a mapping or ``None``) so the
        normalizer sees exactly which category buckets the backend omitted.

        Raises:
            ValueError: If the payload is not a JSON object.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Match details payload must be an object, got {type(data).__name__}")

        raw_differences = data.get("differences")
        return cls(
            id=parse_match_id_value(data.get("id")),
            did_controller_win=bool(data.get("did_controller_win")),
            controller_player_name=str(data.get("controller_player_name") or ""),
            opponent_player_name=str(data.get("opponent_player_name") or ""),
            created_at=str(data.get("created_at") or ""),
            primary_decklist=data.get("primary_decklist"),
            game_results=[GameResult.from_dict(item) for item in data.get("game_results") or []],
            differences=(
                None
                if raw_differences is None
                else [DeckDifference.from_dict(item) for item in raw_differences]
            ),
            decklists=[DeckSnapshot.from_dict(item) for item in data.get("decklists") or []],
            mulligans=[Mulligan.from_dict(item) for item in data.get("mulligans") or []],
        )


@dataclass(frozen=True)
class MatchSummary:
    """Row of the match listing."""

    id: MatchId
    controller_player_name: str
    opponent_player_name: str
    created_at: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MatchSummary:
        return cls(
            id=parse_match_id_value(data.get("id")),
            controller_player_name=str(data.get("controller_player_name") or ""),
            opponent_player_name=str(data.get("opponent_player_name") or ""),
            created_at=str(data.get("created_at") or ""),
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
