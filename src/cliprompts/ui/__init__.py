"""Styling: glyphs, colors and line rendering."""

from .styles import Palette, detect_color_system
from .symbols import Symbols, detect_unicode_support, get_symbol
from .theme import Theme

__all__ = [
    "Palette",
    "Symbols",
    "Theme",
    "detect_color_system",
    "detect_unicode_support",
    "get_symbol",
]
