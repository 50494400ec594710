"""wxPython preview surface: floating card images next to hovered rows."""

from __future__ import annotations

from pathlib import Path

import wx
from loguru import logger

from controllers.card_preview_controller import PreviewRect
from models.match_details import Card
from utils.card_image_cache import resolve_local_image, scale_to_fit
from utils.constants import DARK_PANEL, IMAGE_CACHE_DIR, LIGHT_TEXT


class WxPreviewSurface:
    """``PreviewSurface`` backed by ``wx.PopupWindow`` overlays.

    Card rows register themselves under their row identifier so the
    controller can ask for their on-screen rectangle.
    """

    def __init__(self, parent: wx.Window, image_cache_dir: Path = IMAGE_CACHE_DIR) -> None:
        self.parent = parent
        self.image_cache_dir = image_cache_dir
        self._rows: dict[str, wx.Window] = {}
        self._popups: dict[str, wx.PopupWindow] = {}

    # ------------------------------------------------------------------ row registry -------------------------------------------------------
    def register_row(self, row_id: str, window: wx.Window) -> None:
        self._rows[row_id] = window

    def clear_rows(self) -> None:
        self._rows.clear()

    # ------------------------------------------------------------------ PreviewSurface -----------------------------------------------------
    def anchor_rect_for(self, row_id: str) -> PreviewRect | None:
        window = self._rows.get(row_id)
        if window is None or not window:
            return None
        rect = window.GetScreenRect()
        return PreviewRect(
            left=rect.GetLeft(),
            top=rect.GetTop(),
            right=rect.GetRight(),
            bottom=rect.GetBottom(),
        )

    def show_preview(
        self, card: Card, tag: str, position: tuple[int, int], max_size: tuple[int, int]
    ) -> None:
        self.hide_preview(tag)
        popup = wx.PopupWindow(self.parent)
        popup.SetName(tag)
        popup.SetBackgroundColour(DARK_PANEL)
        sizer = wx.BoxSizer(wx.VERTICAL)
        popup.SetSizer(sizer)

        bitmap = self._load_bitmap(card, max_size)
        if bitmap is not None:
            sizer.Add(wx.StaticBitmap(popup, bitmap=bitmap), 0)
        else:
            label = wx.StaticText(popup, label=card.name)
            label.SetForegroundColour(LIGHT_TEXT)
            label.Wrap(max_size[0] - 12)
            sizer.Add(label, 0, wx.ALL, 6)

        popup.Fit()
        popup.Position(wx.Point(*position), wx.Size(0, 0))
        popup.Show()
        self._popups[tag] = popup

    def hide_preview(self, tag: str) -> None:
        popup = self._popups.pop(tag, None)
        if popup is not None and popup:
            popup.Destroy()

    # ------------------------------------------------------------------ helpers ------------------------------------------------------------
    def _load_bitmap(self, card: Card, max_size: tuple[int, int]) -> wx.Bitmap | None:
        path = resolve_local_image(card.image_uri, self.image_cache_dir)
        if path is None:
            return None
        image = wx.Image(str(path))
        if not image.IsOk():
            logger.debug(f"Unreadable card image for {card.name}: {path}")
            return None
        width, height = scale_to_fit(image.GetWidth(), image.GetHeight(), *max_size)
        return wx.Bitmap(image.Scale(width, height, wx.IMAGE_QUALITY_HIGH))


__all__ = ["WxPreviewSurface"]
