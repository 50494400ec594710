"""
Card preview controller - positions and tracks hover image overlays.

The controller never touches widgets directly. It talks to a ``PreviewSurface``
that knows how to find a rendered row and how to show or hide an overlay, so
placement and lifecycle rules stay independent of wx.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from loguru import logger

from models.match_details import Card
from utils.constants import (
    PREVIEW_MAX_HEIGHT,
    PREVIEW_MAX_WIDTH,
    PREVIEW_OFFSET_X,
    PREVIEW_OFFSET_Y,
    PREVIEW_TAG_PREFIX,
)


@dataclass(frozen=True)
class PreviewRect:
    """Screen-space bounding rectangle of a rendered card row."""

    left: int
    top: int
    right: int
    bottom: int


class PreviewSurface(Protocol):
    def anchor_rect_for(self, row_id: str) -> PreviewRect | None: ...

    def show_preview(
        self, card: Card, tag: str, position: tuple[int, int], max_size: tuple[int, int]
    ) -> None: ...

    def hide_preview(self, tag: str) -> None: ...


def preview_tag(card: Card) -> str:
    return f"{PREVIEW_TAG_PREFIX}{card.name}"


class CardPreviewController:
    """Keeps at most one preview overlay per card name alive on a surface."""

    def __init__(
        self,
        surface: PreviewSurface,
        offset: tuple[int, int] = (PREVIEW_OFFSET_X, PREVIEW_OFFSET_Y),
        max_size: tuple[int, int] = (PREVIEW_MAX_WIDTH, PREVIEW_MAX_HEIGHT),
    ) -> None:
        self.surface = surface
        self.offset = offset
        self.max_size = max_size
        self._active: dict[str, str] = {}

    @property
    def active_tags(self) -> list[str]:
        return list(self._active)

    def on_pointer_enter(self, row_id: str, card: Card) -> bool:
        """
        Show the preview for ``card`` next to row ``row_id``.

        Returns False when the row cannot be located; nothing is shown then.
        A preview already showing for the same card name is replaced.
        """
        rect = self.surface.anchor_rect_for(row_id)
        if rect is None:
            logger.debug("No anchor for row {}; skipping preview", row_id)
            return False

        tag = preview_tag(card)
        if tag in self._active:
            self.surface.hide_preview(tag)
            del self._active[tag]

        position = (rect.right + self.offset[0], rect.top + self.offset[1])
        self.surface.show_preview(card, tag, position, self.max_size)
        self._active[tag] = row_id
        return True

    def on_pointer_leave(self, card: Card) -> None:
        tag = preview_tag(card)
        if self._active.pop(tag, None) is not None:
            self.surface.hide_preview(tag)

    def teardown(self) -> None:
        """Remove every live preview (frame close, view rebuild)."""
        while self._active:
            tag, _row_id = self._active.popitem()
            self.surface.hide_preview(tag)

    def __enter__(self) -> CardPreviewController:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.teardown()


__all__ = ["CardPreviewController", "PreviewRect", "PreviewSurface", "preview_tag"]
