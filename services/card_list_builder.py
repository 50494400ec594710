"""
Card List Builder - turns card collections into render blocks.

A block is a header plus one row per card, in the order received. Rows carry a
stable identifier (``"{prefix}-{index}"``) the widgets use to locate the row
when positioning a hover preview.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from models.match_details import Card, CardCategory, DeckDifference, Mulligan, PrimaryDecklist


@dataclass(frozen=True)
class CardRow:
    identifier: str
    card: Card
    label: str


@dataclass(frozen=True)
class CardListBlock:
    header: str
    rows: list[CardRow] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.rows


@dataclass(frozen=True)
class SideboardChangeBlock:
    """Cards swapped in and out before ``game_number``."""

    game_number: int
    added: CardListBlock
    removed: CardListBlock


@dataclass(frozen=True)
class MulliganBlock:
    mulligan: Mulligan
    hand: CardListBlock


# (category, header, show mana value); display order of the primary decklist
DECKLIST_SECTIONS: tuple[tuple[CardCategory, str, bool], ...] = (
    (CardCategory.CREATURE, "Creatures", True),
    (CardCategory.INSTANT, "Instants", True),
    (CardCategory.SORCERY, "Sorceries", True),
    (CardCategory.ENCHANTMENT, "Enchantments", True),
    (CardCategory.ARTIFACT, "Artifacts", True),
    (CardCategory.PLANESWALKER, "Planeswalkers", True),
    (CardCategory.LAND, "Lands", False),
    (CardCategory.UNKNOWN, "Unknown", True),
)
# Headers rendered in the first decklist column; everything else goes to the second
FIRST_COLUMN_HEADERS = frozenset({"Creatures", "Instants", "Sorceries", "Enchantments", "Artifacts"})
SIDEBOARD_HEADER = "Sideboard"


def format_card_label(card: Card, include_mana_value: bool) -> str:
    label = f"{card.quantity} {card.name}"
    if include_mana_value:
        label += f" - {card.mana_value}"
    return label


def build_card_list(
    header: str,
    cards: Sequence[Card],
    include_mana_value: bool,
    identifier_prefix: str | None = None,
) -> CardListBlock:
    """
    Build a block with ``header`` followed by one row per card.

    An empty ``cards`` sequence still yields a header-only block; callers
    decide whether such a block is shown.
    """
    prefix = identifier_prefix or header
    rows = [
        CardRow(
            identifier=f"{prefix}-{index}",
            card=card,
            label=format_card_label(card, include_mana_value),
        )
        for index, card in enumerate(cards)
    ]
    return CardListBlock(header=header, rows=rows)


def build_decklist_blocks(decklist: PrimaryDecklist | None) -> list[CardListBlock]:
    """
    Build the primary decklist blocks in display order, sideboard last.

    Categories without cards are left out entirely.
    """
    if decklist is None:
        return []

    blocks = [
        build_card_list(header, decklist.cards_in(category), include_mana_value)
        for category, header, include_mana_value in DECKLIST_SECTIONS
        if decklist.cards_in(category)
    ]
    if decklist.sideboard:
        blocks.append(build_card_list(SIDEBOARD_HEADER, decklist.sideboard, True))
    return blocks


def build_decklist_columns(decklist: PrimaryDecklist | None) -> list[list[CardListBlock]]:
    """``build_decklist_blocks`` split into the two display columns."""
    if decklist is None:
        return []

    blocks = build_decklist_blocks(decklist)
    return [
        [block for block in blocks if block.header in FIRST_COLUMN_HEADERS],
        [block for block in blocks if block.header not in FIRST_COLUMN_HEADERS],
    ]


def build_sideboard_change_blocks(
    differences: Sequence[DeckDifference] | None,
) -> list[SideboardChangeBlock]:
    """One block per difference; ``differences[i]`` is the change going into game ``i + 2``."""
    if differences is None:
        return []
    return [
        SideboardChangeBlock(
            game_number=game_idx + 2,
            added=build_card_list(
                "Added", difference.added, False, identifier_prefix=f"Sideboard-added-{game_idx}"
            ),
            removed=build_card_list(
                "Removed",
                difference.removed,
                False,
                identifier_prefix=f"Sideboard-removed-{game_idx}",
            ),
        )
        for game_idx, difference in enumerate(differences)
    ]


def build_mulligan_blocks(groups: Sequence[Sequence[Mulligan]]) -> list[list[MulliganBlock]]:
    """Hand blocks for each grouped mulligan, keeping the group layout."""
    return [
        [
            MulliganBlock(
                mulligan=mulligan,
                hand=build_card_list(
                    "Hand",
                    mulligan.hand,
                    False,
                    identifier_prefix=f"mulligan-{game_idx}-{mulligan_idx}",
                ),
            )
            for mulligan_idx, mulligan in enumerate(group)
        ]
        for game_idx, group in enumerate(groups)
    ]


__all__ = [
    "CardListBlock",
    "CardRow",
    "DECKLIST_SECTIONS",
    "FIRST_COLUMN_HEADERS",
    "MulliganBlock",
    "SIDEBOARD_HEADER",
    "SideboardChangeBlock",
    "build_card_list",
    "build_decklist_blocks",
    "build_decklist_columns",
    "build_mulligan_blocks",
    "build_sideboard_change_blocks",
    "format_card_label",
]
