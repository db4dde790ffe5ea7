from .models import HIGHLIGHT_COLORS, Highlight, HighlightColor

__all__ = [
    "HIGHLIGHT_COLORS",
    "Highlight",
    "HighlightColor",
]
