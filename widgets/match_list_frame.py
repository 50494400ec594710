"""wxPython match listing: every recorded match, double-click to open its details."""

from __future__ import annotations

import wx
import wx.dataview as dv
from loguru import logger

from controllers.match_details_controller import MatchDetailsViewModel
from models.match_details import MatchSummary
from services.match_details_service import MatchDetailsService, get_match_details_service
from utils.background_worker import BackgroundWorker
from utils.config import AppConfig
from utils.constants import DARK_ALT, DARK_BG, DARK_PANEL, LIGHT_TEXT, SUBDUED_TEXT
from utils.formatting import format_match_date
from utils.navigation import build_match_details_route
from widgets.match_details_frame import MatchDetailsFrame


class MatchListFrame(wx.Frame):
    """Window listing recorded matches."""

    def __init__(
        self,
        parent: wx.Window | None = None,
        service: MatchDetailsService | None = None,
        config: AppConfig | None = None,
    ) -> None:
        super().__init__(parent, title="Matches", size=(760, 460))

        self.service = service or get_match_details_service()
        self.config = config
        self.worker = BackgroundWorker()
        self.matches: list[MatchSummary] = []

        self._build_ui()
        self.Centre(wx.BOTH)

        self.Bind(wx.EVT_CLOSE, self.on_close)
        wx.CallAfter(self.refresh_matches)

    # ------------------------------------------------------------------ UI ------------------------------------------------------------------
    def _build_ui(self) -> None:
        panel = wx.Panel(self)
        panel.SetBackgroundColour(DARK_BG)
        sizer = wx.BoxSizer(wx.VERTICAL)
        panel.SetSizer(sizer)

        toolbar = wx.BoxSizer(wx.HORIZONTAL)
        sizer.Add(toolbar, 0, wx.ALL | wx.EXPAND, 10)

        self.refresh_button = wx.Button(panel, label="Refresh")
        self._stylize_button(self.refresh_button)
        self.refresh_button.Bind(wx.EVT_BUTTON, lambda _evt: self.refresh_matches())
        toolbar.Add(self.refresh_button, 0, wx.RIGHT, 6)

        self.clear_cache_button = wx.Button(panel, label="Reset Card Image Cache")
        self._stylize_button(self.clear_cache_button)
        self.clear_cache_button.Bind(wx.EVT_BUTTON, lambda _evt: self.clear_image_cache())
        toolbar.Add(self.clear_cache_button, 0)

        toolbar.AddStretchSpacer(1)

        self.status_label = wx.StaticText(panel, label="Ready")
        self.status_label.SetForegroundColour(SUBDUED_TEXT)
        toolbar.Add(self.status_label, 0, wx.ALIGN_CENTER_VERTICAL)

        self.tree = dv.TreeListCtrl(panel, style=dv.TL_DEFAULT_STYLE | dv.TL_SINGLE)
        self.tree.SetBackgroundColour(DARK_ALT)
        self.tree.AppendColumn("Controller", width=220)
        self.tree.AppendColumn("Opponent", width=220)
        self.tree.AppendColumn("Created At", width=220)
        self.tree.Bind(dv.EVT_TREELIST_ITEM_ACTIVATED, self.on_item_activated)
        sizer.Add(self.tree, 1, wx.LEFT | wx.RIGHT | wx.BOTTOM | wx.EXPAND, 10)

    def _stylize_button(self, button: wx.Button) -> None:
        button.SetBackgroundColour(DARK_PANEL)
        button.SetForegroundColour(LIGHT_TEXT)
        font = button.GetFont()
        font.MakeBold()
        button.SetFont(font)

    # ------------------------------------------------------------------ Data loading ---------------------------------------------------------
    def refresh_matches(self) -> None:
        if not self or not self.IsShown():
            return
        self._set_busy(True, "Loading matches…")
        self.worker.submit(
            self.service.list_matches,
            on_success=self._populate_matches,
            on_error=self._handle_list_error,
        )

    def _handle_list_error(self, exc: Exception) -> None:
        logger.opt(exception=exc).error(f"Failed to load matches: {exc}")
        if not self:
            return
        self._set_busy(False, "Failed to load matches.")

    def _populate_matches(self, matches: list[MatchSummary]) -> None:
        if not self:
            return

        self.tree.DeleteAllItems()
        root = self.tree.GetRootItem()
        self.matches = matches

        if not matches:
            self._set_busy(False, "No matches recorded yet.")
            return

        for match in matches:
            item = self.tree.AppendItem(root, match.controller_player_name)
            self.tree.SetItemText(item, 1, match.opponent_player_name)
            self.tree.SetItemText(item, 2, format_match_date(match.created_at))
            self.tree.SetItemData(item, match)

        self._set_busy(False, f"Loaded {len(matches)} matches")

    def on_item_activated(self, event: dv.TreeListEvent) -> None:
        """Open the details window for the double-clicked match."""
        item = event.GetItem()
        if not item.IsOk():
            return
        match = self.tree.GetItemData(item)
        if not match:
            return
        self.open_match(build_match_details_route(match.id))

    def open_match(self, route: str) -> MatchDetailsFrame:
        logger.debug("Navigating to {}", route)
        frame = MatchDetailsFrame(
            self,
            view_model=MatchDetailsViewModel(service=self.service, worker=self.worker),
            config=self.config,
        )
        frame.Show()
        frame.load_from_query(route)
        return frame

    # ------------------------------------------------------------------ Image cache -----------------------------------------------------------
    def clear_image_cache(self) -> None:
        self._set_busy(True, "Clearing card image cache…")
        self.worker.submit(
            self.service.clear_image_cache,
            on_success=lambda _result: self._set_busy(False, "Card image cache cleared."),
            on_error=self._handle_clear_error,
        )

    def _handle_clear_error(self, exc: Exception) -> None:
        logger.opt(exception=exc).error(f"Failed to clear card image cache: {exc}")
        if not self:
            return
        self._set_busy(False, "Failed to clear card image cache.")

    def _set_busy(self, busy: bool, message: str | None = None) -> None:
        if not self:
            return
        self.refresh_button.Enable(not busy)
        self.clear_cache_button.Enable(not busy)
        if message:
            self.status_label.SetLabel(message)
        elif busy:
            self.status_label.SetLabel("Loading…")
        else:
            self.status_label.SetLabel("Ready")

    # ------------------------------------------------------------------ Lifecycle -------------------------------------------------------------
    def on_close(self, event: wx.CloseEvent) -> None:
        self.worker.shutdown(timeout=1.0)
        event.Skip()


__all__ = ["MatchListFrame"]
