"""
Terminal surface and UI helpers.
"""

from .surface import DrawCallback, Frame, Rect, RichTerminalSurface, TerminalSurface
from .theme import THEME

__all__ = [
    "DrawCallback",
    "Frame",
    "Rect",
    "RichTerminalSurface",
    "THEME",
    "TerminalSurface",
]
