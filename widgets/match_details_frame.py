"""wxPython window rendering a single match: decklist, sideboarding and mulligans."""

from __future__ import annotations

import wx
from loguru import logger

from controllers.card_preview_controller import CardPreviewController
from controllers.match_details_controller import MatchDetailsView, MatchDetailsViewModel
from services.card_list_builder import CardListBlock
from utils.config import AppConfig
from utils.constants import DARK_BG, DARK_PANEL, IMAGE_CACHE_DIR, LIGHT_TEXT, SUBDUED_TEXT
from utils.formatting import format_game_result, format_match_date
from widgets.card_preview_popup import WxPreviewSurface
from widgets.panels.card_list_panel import CardListPanel


class MatchDetailsFrame(wx.Frame):
    """Window showing one match; loads itself through a MatchDetailsViewModel."""

    def __init__(
        self,
        parent: wx.Window | None = None,
        view_model: MatchDetailsViewModel | None = None,
        config: AppConfig | None = None,
    ) -> None:
        super().__init__(parent, title="Match Details", size=(1000, 720))
        self.view_model = view_model or MatchDetailsViewModel()
        image_cache_dir = config.image_cache_dir if config else IMAGE_CACHE_DIR
        self.surface = WxPreviewSurface(self, image_cache_dir=image_cache_dir)
        self.preview = CardPreviewController(self.surface)

        self._build_ui()
        self.Centre(wx.BOTH)

        self.view_model.subscribe(self._on_view_changed)
        self.Bind(wx.EVT_CLOSE, self.on_close)

    # ------------------------------------------------------------------ UI ------------------------------------------------------------------
    def _build_ui(self) -> None:
        outer = wx.Panel(self)
        outer.SetBackgroundColour(DARK_BG)
        outer_sizer = wx.BoxSizer(wx.VERTICAL)
        outer.SetSizer(outer_sizer)

        self.status_label = wx.StaticText(outer, label="Ready")
        self.status_label.SetForegroundColour(SUBDUED_TEXT)
        outer_sizer.Add(self.status_label, 0, wx.ALL, 8)

        self.content = wx.ScrolledWindow(outer, style=wx.VSCROLL)
        self.content.SetBackgroundColour(DARK_BG)
        self.content.SetScrollRate(5, 5)
        self.content_sizer = wx.BoxSizer(wx.VERTICAL)
        self.content.SetSizer(self.content_sizer)
        outer_sizer.Add(self.content, 1, wx.EXPAND | wx.LEFT | wx.RIGHT | wx.BOTTOM, 8)

    def _label(
        self, parent: wx.Window, text: str, *, size_delta: int = 0, bold: bool = False
    ) -> wx.StaticText:
        label = wx.StaticText(parent, label=text)
        label.SetForegroundColour(LIGHT_TEXT)
        if size_delta or bold:
            font = label.GetFont()
            if size_delta:
                font.SetPointSize(font.GetPointSize() + size_delta)
            if bold:
                font.MakeBold()
            label.SetFont(font)
        return label

    def _card_list(self, parent: wx.Window, block: CardListBlock, header_level: int = 1) -> wx.Panel:
        return CardListPanel(parent, block, self.preview, self.surface, header_level=header_level)

    # ------------------------------------------------------------------ Data loading ---------------------------------------------------------
    def load_match(self, match_id: str | None) -> None:
        self.view_model.activate(match_id)

    def load_from_query(self, query: str) -> None:
        self.view_model.activate_from_query(query)

    def _on_view_changed(self, view: MatchDetailsView | None) -> None:
        if not self:
            return
        if view is not None:
            self._render(view)
            self.status_label.SetLabel("Placeholder match" if view.is_placeholder else "Loaded")
            return
        self._clear_content()
        if self.view_model.loading:
            self.status_label.SetLabel(f"Loading match {self.view_model.match_id}…")
        elif self.view_model.last_error is not None:
            self.status_label.SetLabel("Failed to load match details.")
        else:
            self.status_label.SetLabel("Ready")

    def _clear_content(self) -> None:
        self.preview.teardown()
        self.surface.clear_rows()
        self.content.Freeze()
        try:
            self.content_sizer.Clear(delete_windows=True)
        finally:
            self.content.Thaw()

    # ------------------------------------------------------------------ Rendering ------------------------------------------------------------
    def _render(self, view: MatchDetailsView) -> None:
        self._clear_content()
        self.content.Freeze()
        try:
            self._render_summary(view)
            self._render_decklist(view)
            self._render_mulligans(view)
            self.content_sizer.Layout()
            self.content.FitInside()
        finally:
            self.content.Thaw()
        logger.debug("Rendered match {}", view.match.id)

    def _render_summary(self, view: MatchDetailsView) -> None:
        match = view.match
        parent = self.content
        self.SetTitle(f"VS. {match.opponent_player_name}")

        title_row = wx.BoxSizer(wx.HORIZONTAL)
        title_row.Add(self._label(parent, f"VS. {match.opponent_player_name}", size_delta=6), 1)
        title_row.Add(self._label(parent, str(match.id)), 0, wx.ALIGN_TOP)
        self.content_sizer.Add(title_row, 0, wx.EXPAND | wx.BOTTOM, 6)

        for text in (
            format_match_date(match.created_at),
            f"Controller: {match.controller_player_name}",
            f"Opponent: {match.opponent_player_name}",
            f"Winner: {match.winner_name}",
        ):
            self.content_sizer.Add(self._label(parent, text), 0, wx.BOTTOM, 2)
        for result in match.game_results:
            self.content_sizer.Add(self._label(parent, format_game_result(result)), 0, wx.BOTTOM, 2)

    def _render_decklist(self, view: MatchDetailsView) -> None:
        parent = self.content
        self.content_sizer.Add(
            self._label(parent, "Primary Decklist", size_delta=2, bold=True), 0, wx.TOP | wx.BOTTOM, 8
        )
        grid = wx.GridSizer(0, 3, 8, 16)
        self.content_sizer.Add(grid, 0, wx.EXPAND)

        if view.decklist is not None:
            first, second = (view.decklist_columns + [[], []])[:2]

            main_col = wx.BoxSizer(wx.VERTICAL)
            main_col.Add(self._label(parent, f"Archetype: {view.decklist.archetype}"), 0)
            main_col.Add(self._label(parent, "Main Deck", bold=True), 0, wx.TOP | wx.BOTTOM, 4)
            for block in first:
                main_col.Add(self._card_list(parent, block), 0, wx.EXPAND | wx.ALL, 4)
            grid.Add(main_col, 0, wx.EXPAND)

            side_col = wx.BoxSizer(wx.VERTICAL)
            for block in second:
                side_col.Add(self._card_list(parent, block), 0, wx.EXPAND | wx.ALL, 4)
            grid.Add(side_col, 0, wx.EXPAND)

        if view.match.differences is not None:
            changes_col = wx.BoxSizer(wx.VERTICAL)
            changes_col.Add(self._label(parent, "Sideboard Decisions", bold=True), 0, wx.BOTTOM, 4)
            for change in view.sideboard_changes:
                changes_col.Add(self._label(parent, f"Game {change.game_number}", bold=True), 0)
                changes_col.Add(self._card_list(parent, change.added, header_level=2), 0, wx.EXPAND)
                changes_col.Add(self._card_list(parent, change.removed, header_level=2), 0, wx.EXPAND)
            grid.Add(changes_col, 0, wx.EXPAND)

    def _render_mulligans(self, view: MatchDetailsView) -> None:
        parent = self.content
        self.content_sizer.Add(
            self._label(parent, "Mulligans", size_delta=3, bold=True), 0, wx.TOP | wx.BOTTOM, 8
        )
        grid = wx.GridSizer(0, 3, 8, 16)
        self.content_sizer.Add(grid, 0, wx.EXPAND)

        for group in view.mulligan_blocks:
            column = wx.BoxSizer(wx.VERTICAL)
            for entry in group:
                mulligan = entry.mulligan
                box = wx.Panel(parent)
                box.SetBackgroundColour(DARK_PANEL)
                box_sizer = wx.BoxSizer(wx.VERTICAL)
                box.SetSizer(box_sizer)
                box_sizer.Add(self._label(box, f"Game {mulligan.game_number}", bold=True), 0, wx.ALL, 4)
                box_sizer.Add(self._card_list(box, entry.hand, header_level=2), 0, wx.EXPAND | wx.ALL, 4)
                for text in (
                    f"Opponent Identity: {mulligan.opponent_identity}",
                    f"Number to Keep: {mulligan.number_to_keep}",
                    f"Play/Draw: {mulligan.play_draw}",
                    f"Decision: {mulligan.decision}",
                ):
                    box_sizer.Add(self._label(box, text), 0, wx.LEFT | wx.RIGHT, 4)
                column.Add(box, 0, wx.EXPAND | wx.BOTTOM, 6)
            grid.Add(column, 0, wx.EXPAND)

    # ------------------------------------------------------------------ Lifecycle -------------------------------------------------------------
    def on_close(self, event: wx.CloseEvent) -> None:
        self.preview.teardown()
        self.surface.clear_rows()
        self.view_model.close()
        event.Skip()


__all__ = ["MatchDetailsFrame"]
