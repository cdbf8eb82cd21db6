"""Color helpers that turn plain strings into ANSI-styled strings.

Methods suffixed with ``_bg`` change the background color.
"""

from __future__ import annotations

from typing import TextIO

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style


def detect_color_system(stream: TextIO | None = None) -> ColorSystem | None:
    """Standard colors when the stream is a color terminal, else None.

    Follows rich's detection, so ``NO_COLOR`` and ``FORCE_COLOR`` apply and
    pipes and files get plain text.
    """
    console = Console(file=stream)
    if console.color_system is None or console.no_color:
        return None
    return ColorSystem.STANDARD


class Palette:
    """Renders styles for one color system.

    ``Palette(None)`` returns every string unchanged, which keeps output
    readable when colors are disabled or piped.
    """

    def __init__(self, color_system: ColorSystem | None = ColorSystem.STANDARD):
        self.color_system = color_system

    @property
    def enabled(self) -> bool:
        return self.color_system is not None

    def style(self, text: str, style: str | Style) -> str:
        """Apply a rich style definition, e.g. ``"bold red"``."""
        if isinstance(style, str):
            style = Style.parse(style)
        return style.render(text, color_system=self.color_system)

    def black(self, text: str) -> str:
        return self.style(text, "black")

    def red(self, text: str) -> str:
        return self.style(text, "red")

    def green(self, text: str) -> str:
        return self.style(text, "green")

    def yellow(self, text: str) -> str:
        return self.style(text, "yellow")

    def blue(self, text: str) -> str:
        return self.style(text, "blue")

    def magenta(self, text: str) -> str:
        return self.style(text, "magenta")

    def cyan(self, text: str) -> str:
        return self.style(text, "cyan")

    def white(self, text: str) -> str:
        return self.style(text, "white")

    def color256(self, text: str, color: int) -> str:
        return self.style(text, f"color({color})")

    def black_bg(self, text: str) -> str:
        return self.style(text, "on black")

    def red_bg(self, text: str) -> str:
        return self.style(text, "on red")

    def green_bg(self, text: str) -> str:
        return self.style(text, "on green")

    def yellow_bg(self, text: str) -> str:
        return self.style(text, "on yellow")

    def blue_bg(self, text: str) -> str:
        return self.style(text, "on blue")

    def magenta_bg(self, text: str) -> str:
        return self.style(text, "on magenta")

    def cyan_bg(self, text: str) -> str:
        return self.style(text, "on cyan")

    def white_bg(self, text: str) -> str:
        return self.style(text, "on white")

    def color256_bg(self, text: str, color: int) -> str:
        return self.style(text, f"on color({color})")
