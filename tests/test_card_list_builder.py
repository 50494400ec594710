"""Tests for building card list render blocks."""

from models.match_details import Card, CardCategory, DeckDifference, Mulligan
from services.card_list_builder import (
    SIDEBOARD_HEADER,
    build_card_list,
    build_decklist_blocks,
    build_decklist_columns,
    build_mulligan_blocks,
    build_sideboard_change_blocks,
    format_card_label,
)
from services.decklist_normalizer import normalize_decklist


def test_rows_follow_input_order_with_stable_identifiers() -> None:
    cards = [Card(name="Lightning Bolt", quantity=4, mana_value=1), Card(name="Shock", quantity=2, mana_value=1)]

    block = build_card_list("Instants", cards, include_mana_value=True)

    assert block.header == "Instants"
    assert [row.identifier for row in block.rows] == ["Instants-0", "Instants-1"]
    assert [row.label for row in block.rows] == ["4 Lightning Bolt - 1", "2 Shock - 1"]
    assert [row.card for row in block.rows] == cards


def test_land_label_omits_mana_value() -> None:
    mountain = Card(name="Mountain", quantity=20, mana_value=0)

    assert format_card_label(mountain, include_mana_value=False) == "20 Mountain"
    assert format_card_label(mountain, include_mana_value=True) == "20 Mountain - 0"


def test_empty_card_list_still_has_header() -> None:
    block = build_card_list("Added", [], include_mana_value=False)

    assert block.header == "Added"
    assert block.is_empty


def test_decklist_columns_skip_empty_categories_and_end_with_sideboard() -> None:
    decklist = normalize_decklist(
        {
            "archetype": "Mono Red",
            "main_deck": {
                "Creature": [{"name": "Goblin Guide", "quantity": 4, "mana_value": 1}],
                "Land": [{"name": "Mountain", "quantity": 20}],
            },
            "sideboard": [{"name": "Smash to Smithereens", "quantity": 3, "mana_value": 2}],
        }
    )

    first, second = build_decklist_columns(decklist)

    assert [block.header for block in first] == ["Creatures"]
    assert [block.header for block in second] == ["Lands", SIDEBOARD_HEADER]
    assert second[0].rows[0].label == "20 Mountain"
    assert first[0].rows[0].label == "4 Goblin Guide - 1"
    assert second[1].rows[0].identifier == "Sideboard-0"


def test_unknown_category_is_rendered_when_it_has_cards() -> None:
    decklist = normalize_decklist(
        {"archetype": "Odd", "main_deck": {"Battle": [{"name": "Invasion of Zendikar", "mana_value": 4}]}}
    )

    headers = [block.header for block in build_decklist_blocks(decklist)]

    assert headers == ["Unknown"]
    assert decklist.cards_in(CardCategory.UNKNOWN)[0].name == "Invasion of Zendikar"


def test_no_decklist_yields_no_blocks() -> None:
    assert build_decklist_columns(None) == []
    assert build_decklist_blocks(None) == []


def test_sideboard_changes_start_at_game_two() -> None:
    differences = [
        DeckDifference(added=[Card(name="Smash", quantity=2)], removed=[Card(name="Shock", quantity=2)]),
        DeckDifference(added=[], removed=[]),
    ]

    changes = build_sideboard_change_blocks(differences)

    assert [change.game_number for change in changes] == [2, 3]
    assert changes[0].added.header == "Added"
    assert changes[0].added.rows[0].identifier == "Sideboard-added-0-0"
    assert changes[0].removed.rows[0].identifier == "Sideboard-removed-0-0"
    assert changes[0].added.rows[0].label == "2 Smash"
    assert changes[1].added.is_empty and changes[1].removed.is_empty


def test_missing_differences_yield_no_blocks() -> None:
    assert build_sideboard_change_blocks(None) == []
    assert build_sideboard_change_blocks([]) == []


def test_mulligan_blocks_keep_group_layout() -> None:
    keep = Mulligan(
        hand=[Card(name="Mountain"), Card(name="Goblin Guide", mana_value=1)],
        opponent_identity="U",
        game_number=2,
        number_to_keep=7,
        play_draw="Draw",
        decision="Keep",
    )

    blocks = build_mulligan_blocks([[], [keep], []])

    assert [len(group) for group in blocks] == [0, 1, 0]
    hand = blocks[1][0].hand
    assert hand.header == "Hand"
    assert [row.identifier for row in hand.rows] == ["mulligan-1-0-0", "mulligan-1-0-1"]
    assert [row.label for row in hand.rows] == ["1 Mountain", "1 Goblin Guide"]
    assert blocks[1][0].mulligan is keep


def test_decklist_without_lands_renders_every_other_category() -> None:
    decklist = normalize_decklist(
        {
            "archetype": "Landless",
            "main_deck": {
                "Creature": [{"name": "Goblin Guide", "quantity": 4, "mana_value": 1}],
                "Instant": [{"name": "Lightning Bolt", "quantity": 4, "mana_value": 1}],
                "Sorcery": [{"name": "Lava Spike", "quantity": 4, "mana_value": 1}],
                "Enchantment": [{"name": "Sulfuric Vortex", "quantity": 2, "mana_value": 3}],
                "Artifact": [{"name": "Shadowspear", "quantity": 1, "mana_value": 1}],
                "Planeswalker": [{"name": "Chandra", "quantity": 1, "mana_value": 4}],
                "Unknown": [{"name": "Invasion of Regatha", "quantity": 1, "mana_value": 3}],
            },
            "sideboard": [],
        }
    )

    first, second = build_decklist_columns(decklist)
    headers = [block.header for block in first + second]

    assert "Lands" not in headers
    assert headers == [
        "Creatures",
        "Instants",
        "Sorceries",
        "Enchantments",
        "Artifacts",
        "Planeswalkers",
        "Unknown",
    ]
    assert [block.header for block in first] == headers[:5]
    creature_rows = first[0].rows
    assert all(row.label.endswith(f" - {row.card.mana_value}") for row in creature_rows)
    assert creature_rows[0].label == "4 Goblin Guide - 1"
