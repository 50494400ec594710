"""
Decklist Normalizer - guarantees every category bucket of a primary decklist exists.

The backend drops category keys that have no cards and may send ``null`` for
others. Rendering code reads ``main_deck[category]`` for all eight categories,
so this module fills the gaps once, up front, producing a fresh
``PrimaryDecklist`` and leaving the backend record untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger

from models.match_details import Card, CardCategory, PrimaryDecklist, parse_cards


def _card_list(value: Any, where: str) -> list[Card]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"Expected a list of cards for {where}, got {type(value).__name__}")
    return parse_cards(value)


def _bucket_by_category(main_deck: Any) -> dict[CardCategory, list[Card]]:
    buckets: dict[CardCategory, list[Card]] = {category: [] for category in CardCategory}
    if main_deck is None:
        return buckets
    if not isinstance(main_deck, Mapping):
        raise ValueError(f"main_deck must map card types to cards, got {type(main_deck).__name__}")

    for label, cards in main_deck.items():
        category = CardCategory.from_label(label)
        if category is CardCategory.UNKNOWN and label not in ("Unknown", CardCategory.UNKNOWN):
            logger.debug("Folding unrecognised card type '{}' into Unknown", label)
        buckets[category].extend(_card_list(cards, f"main_deck[{label!r}]"))
    return buckets


def normalize_decklist(
    decklist: PrimaryDecklist | Mapping[str, Any] | None,
) -> PrimaryDecklist | None:
    """
    Return a copy of ``decklist`` with all eight main deck categories and the sideboard present.

    Args:
        decklist: Backend decklist payload, an already-normalized decklist, or None

    Returns:
        None when there is no decklist to show, otherwise a new PrimaryDecklist
        whose ``main_deck`` has a list for every CardCategory.

    Raises:
        ValueError: If the payload, its ``main_deck`` or a card list has the wrong shape.
    """
    if decklist is None:
        return None

    if isinstance(decklist, PrimaryDecklist):
        archetype = decklist.archetype
        main_deck: Any = decklist.main_deck
        sideboard = decklist.sideboard
    elif isinstance(decklist, Mapping):
        archetype = decklist.get("archetype")
        main_deck = decklist.get("main_deck")
        sideboard = decklist.get("sideboard")
    else:
        raise ValueError(f"Unsupported decklist payload: {type(decklist).__name__}")

    return PrimaryDecklist(
        archetype=str(archetype or "Unknown"),
        main_deck=_bucket_by_category(main_deck),
        sideboard=_card_list(sideboard, "sideboard"),
    )


__all__ = ["normalize_decklist"]
