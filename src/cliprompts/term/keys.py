"""Abstract key events and translation from raw readchar keys."""

from enum import Enum

import readchar


class Key(Enum):
    """Key event as seen by the prompt drivers.

    The values double as the names accepted by ``TerminalBuffer.push_key``.
    """

    UNKNOWN = "unknown"
    ARROW_LEFT = "arrow left"
    ARROW_RIGHT = "arrow right"
    ARROW_UP = "arrow up"
    ARROW_DOWN = "arrow down"
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    HOME = "home"
    END = "end"
    TAB = "tab"
    BACK_TAB = "back tab"
    DEL = "del"
    INSERT = "insert"
    PAGE_UP = "page up"
    PAGE_DOWN = "page down"

    @classmethod
    def parse(cls, name: str) -> "Key":
        """Map a key name to a Key. Unrecognized names become UNKNOWN."""
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


# readchar attribute name -> Key. Attributes differ between platforms and
# readchar releases, so missing ones are skipped.
_READCHAR_NAMES: dict[str, Key] = {
    "UP": Key.ARROW_UP,
    "DOWN": Key.ARROW_DOWN,
    "LEFT": Key.ARROW_LEFT,
    "RIGHT": Key.ARROW_RIGHT,
    "ENTER": Key.ENTER,
    "ESC": Key.ESCAPE,
    "BACKSPACE": Key.BACKSPACE,
    "HOME": Key.HOME,
    "END": Key.END,
    "TAB": Key.TAB,
    "SHIFT_TAB": Key.BACK_TAB,
    "DELETE": Key.DEL,
    "SUPR": Key.DEL,
    "INSERT": Key.INSERT,
    "PAGE_UP": Key.PAGE_UP,
    "PAGE_DOWN": Key.PAGE_DOWN,
}


def _build_raw_key_map() -> dict[str, Key]:
    raw_map: dict[str, Key] = {
        "\r": Key.ENTER,
        "\n": Key.ENTER,
        "\x08": Key.BACKSPACE,
        "\x7f": Key.BACKSPACE,
    }
    for attr, key in _READCHAR_NAMES.items():
        raw = getattr(readchar.key, attr, None)
        if raw:
            raw_map.setdefault(raw, key)
    return raw_map


RAW_KEY_MAP = _build_raw_key_map()


def translate_key(raw: str) -> Key:
    """Translate a string returned by ``readchar.readkey`` into a Key."""
    return RAW_KEY_MAP.get(raw, Key.UNKNOWN)
