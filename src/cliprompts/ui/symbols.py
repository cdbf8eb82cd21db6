"""Prompt glyphs with ASCII fallbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from rich.console import Console


def get_symbol(glyph: str, fallback: str, unicode_support: bool) -> str:
    """Return glyph when the terminal can draw it, fallback otherwise."""
    return glyph if unicode_support else fallback


def detect_unicode_support(stream: TextIO | None = None) -> bool:
    """Check whether the stream's encoding can carry box-drawing glyphs."""
    encoding = Console(file=stream).encoding
    return encoding.replace("-", "").startswith("utf")


@dataclass(frozen=True)
class Symbols:
    """Every marker drawn by the prompts."""

    bar_start: str
    bar: str
    bar_h: str
    bar_end: str
    radio_active: str
    radio_inactive: str
    step_submit: str
    info: str
    success: str
    warn: str
    error: str
    corner_top_right: str
    corner_bottom_right: str
    connect_left: str
    checkbox_active: str
    checkbox_inactive: str
    spinner_frames: tuple[str, ...]

    @classmethod
    def resolve(cls, unicode_support: bool) -> Symbols:
        def s(glyph: str, fallback: str) -> str:
            return get_symbol(glyph, fallback, unicode_support)

        return cls(
            bar_start=s("┌", "T"),
            bar=s("│", "|"),
            bar_h=s("─", "-"),
            bar_end=s("└", "—"),
            radio_active=s("●", ">"),
            radio_inactive=s("○", " "),
            step_submit=s("◇", "o"),
            info=s("●", "•"),
            success=s("◆", "*"),
            warn=s("▲", "!"),
            error=s("■", "x"),
            corner_top_right=s("╮", "+"),
            corner_bottom_right=s("╯", "+"),
            connect_left=s("├", "+"),
            checkbox_active=s("◼", "[+]"),
            checkbox_inactive=s("◻", "[ ]"),
            spinner_frames=(s("◒", "•"), s("◐", "o"), s("◓", "O"), s("◑", "0")),
        )
