"""Mulligan Grouper - buckets mulligan decisions by the game they were taken in."""

from __future__ import annotations

from collections.abc import Iterable

from models.match_details import Mulligan
from utils.constants import DEFAULT_MULLIGAN_GROUPS


def group_mulligans(
    mulligans: Iterable[Mulligan] | None,
    min_groups: int = DEFAULT_MULLIGAN_GROUPS,
) -> list[list[Mulligan]]:
    """
    Group mulligans so that ``groups[i]`` holds every decision for game ``i + 1``.

    The result always has at least ``min_groups`` entries and grows when a
    mulligan belongs to a later game. Relative input order is preserved inside
    each group.

    Raises:
        IndexError: If a mulligan carries a game number below 1. The backend is
            expected to number games from 1; clamping would attach the hand to
            the wrong game.
    """
    groups: list[list[Mulligan]] = [[] for _ in range(min_groups)]
    for mulligan in mulligans or ():
        index = mulligan.game_number - 1
        if index < 0:
            raise IndexError(f"Mulligan game number out of range: {mulligan.game_number}")
        while index >= len(groups):
            groups.append([])
        groups[index].append(mulligan)
    return groups


__all__ = ["group_mulligans"]
