"""Reusable UI panels for the match viewer windows."""

from widgets.panels.card_list_panel import CardListPanel

__all__ = ["CardListPanel"]
