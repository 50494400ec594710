"""Controllers module - View models and UI-independent coordinators."""

from controllers.card_preview_controller import CardPreviewController, PreviewRect, PreviewSurface
from controllers.match_details_controller import (
    MatchDetailsView,
    MatchDetailsViewModel,
    compose_match_view,
)

__all__ = [
    "CardPreviewController",
    "MatchDetailsView",
    "MatchDetailsViewModel",
    "PreviewRect",
    "PreviewSurface",
    "compose_match_view",
]
