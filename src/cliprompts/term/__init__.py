"""Terminal backends."""

from .base import Terminal
from .buffer import TerminalBuffer
from .console import ConsoleTerminal
from .keys import Key, translate_key

__all__ = [
    "ConsoleTerminal",
    "Key",
    "Terminal",
    "TerminalBuffer",
    "translate_key",
]
