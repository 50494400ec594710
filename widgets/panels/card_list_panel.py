import wx

from controllers.card_preview_controller import CardPreviewController
from services.card_list_builder import CardListBlock, CardRow
from utils.constants import DARK_PANEL, LIGHT_TEXT
from widgets.card_preview_popup import WxPreviewSurface


class CardListPanel(wx.Panel):
    def __init__(
        self,
        parent: wx.Window,
        block: CardListBlock,
        preview: CardPreviewController,
        surface: WxPreviewSurface,
        header_level: int = 1,
    ) -> None:
        super().__init__(parent)
        self.block = block
        self._preview = preview
        self._surface = surface
        self.row_labels: dict[str, wx.StaticText] = {}

        self.SetBackgroundColour(DARK_PANEL)
        sizer = wx.BoxSizer(wx.VERTICAL)
        self.SetSizer(sizer)

        header = wx.StaticText(self, label=block.header)
        header.SetForegroundColour(LIGHT_TEXT)
        font = header.GetFont()
        font.MakeBold()
        if header_level == 1:
            font.SetPointSize(font.GetPointSize() + 1)
        header.SetFont(font)
        sizer.Add(header, 0, wx.BOTTOM, 2)

        for row in block.rows:
            label = wx.StaticText(self, label=row.label)
            label.SetForegroundColour(LIGHT_TEXT)
            label.SetCursor(wx.Cursor(wx.CURSOR_HAND))
            label.Bind(wx.EVT_ENTER_WINDOW, lambda evt, r=row: self._handle_enter(evt, r))
            label.Bind(wx.EVT_LEAVE_WINDOW, lambda evt, r=row: self._handle_leave(evt, r))
            surface.register_row(row.identifier, label)
            self.row_labels[row.identifier] = label
            sizer.Add(label, 0, wx.LEFT, 4)

    def _handle_enter(self, event: wx.MouseEvent, row: CardRow) -> None:
        self._preview.on_pointer_enter(row.identifier, row.card)
        event.Skip()

    def _handle_leave(self, event: wx.MouseEvent, row: CardRow) -> None:
        self._preview.on_pointer_leave(row.card)
        event.Skip()
