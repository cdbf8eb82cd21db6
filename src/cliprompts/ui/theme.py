"""Theme resolution: symbols and palette picked once per prompt session."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TextIO

from cliprompts.ui.styles import Palette, detect_color_system
from cliprompts.ui.symbols import Symbols, detect_unicode_support

if TYPE_CHECKING:
    from cliprompts.config import Config

logger = logging.getLogger("cliprompts.ui.theme")


@dataclass(frozen=True)
class Theme:
    """Immutable styling passed into every render call."""

    symbols: Symbols
    palette: Palette = field(default_factory=Palette)

    @classmethod
    def plain(cls, unicode_support: bool = True) -> Theme:
        """Theme without colors, handy for tests and piped output."""
        return cls(Symbols.resolve(unicode_support), Palette(None))

    @classmethod
    def resolve(cls, config: Config, stream: TextIO | None = None) -> Theme:
        """Build a theme from config and the stream prompts are drawn on.

        ``stream=None`` means output that is not a real terminal, such as
        ``TerminalBuffer``: unicode glyphs (unless ``unicode = never``) and
        no colors. Otherwise ``unicode = auto`` probes the stream encoding
        and ``color = true`` only colors a terminal that supports it.
        """
        mode = config.unicode_mode
        if mode != "auto":
            unicode_support = mode == "always"
        elif stream is None:
            unicode_support = True
        else:
            unicode_support = detect_unicode_support(stream)

        color_system = None
        if config.color and stream is not None:
            color_system = detect_color_system(stream)

        logger.debug("Resolved theme (unicode=%s, color=%s)", unicode_support, color_system)
        return cls(Symbols.resolve(unicode_support), Palette(color_system))
