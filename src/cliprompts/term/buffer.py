"""In-memory terminal model.

``TerminalBuffer`` keeps rendered rows plus a (row, column) cursor and applies
writes the way a real terminal does under carriage returns and relative
cursor movement: text is overwritten in place, rows are never truncated by a
write, and short rows are padded with spaces when the cursor sits past their
end. Prompts drive it through the same calls they make on a real screen, so
the materialized output can be asserted exactly.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from cliprompts.term.keys import Key


class TerminalBuffer:
    """Virtual terminal with scripted input.

    Example:
        term = TerminalBuffer()
        term.push_key("arrow down")
        term.write_line("hello")
        term.materialize()  # "hello\\n"
    """

    def __init__(
        self,
        lines: Iterable[str] | None = None,
        cursor: tuple[int, int] = (0, 0),
        input_text: str = "",
    ):
        self._lines: list[str] = list(lines or [])
        row, col = cursor
        if row < 0 or col < 0 or row > len(self._lines):
            raise ValueError(f"Cursor {cursor} is outside of {len(self._lines)} lines")
        self._row = row
        self._col = col
        self._cursor_hidden = False
        self.input = input_text
        self.keys: deque[Key] = deque()

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def cursor(self) -> tuple[int, int]:
        return self._row, self._col

    @property
    def cursor_hidden(self) -> bool:
        return self._cursor_hidden

    # --- Scripting helpers ---

    def push_key(self, key: Key | str) -> None:
        """Queue a key event. Strings are parsed with ``Key.parse``."""
        self.keys.append(key if isinstance(key, Key) else Key.parse(key))

    def set_input(self, text: str) -> None:
        self.input = text

    def reset(self) -> None:
        """Drop all rendered rows and move the cursor home."""
        self._lines.clear()
        self._row = 0
        self._col = 0

    # --- Output ---

    def write(self, data: str | bytes) -> int:
        text = data.decode("utf-8") if isinstance(data, bytes) else data
        segments = text.split("\n")
        last = len(segments) - 1

        for index, segment in enumerate(segments):
            if segment.startswith("\r"):
                self._col = 0
                segment = segment[1:]
            if index < last and segment.endswith("\r"):
                segment = segment[:-1]

            self._put(segment)

            if index < last:
                self._row += 1
                self._col = 0
            else:
                self._col += len(segment)

        return len(data)

    def _put(self, segment: str) -> None:
        if self._row >= len(self._lines):
            self._lines.append(segment)
            # A fresh row starts at column 0, whatever the cursor column was
            self._col = 0
            return

        line = self._lines[self._row]
        if self._col >= len(line):
            line = line + " " * (self._col - len(line)) + segment
        else:
            end = self._col + len(segment)
            line = line[: self._col] + segment + line[end:]
        self._lines[self._row] = line

    def write_line(self, text: str) -> None:
        self.write(text)
        self._row += 1
        self._col = 0

    def flush(self) -> None:
        pass

    # --- Input ---

    def read_line(self) -> str:
        return self.input

    def read_key(self) -> Key:
        if not self.keys:
            return Key.ENTER
        return self.keys.popleft()

    # --- Cursor ---

    def move_cursor_up(self, n: int) -> None:
        self._row = max(0, self._row - n)

    def move_cursor_down(self, n: int) -> None:
        self._row = min(len(self._lines), self._row + n)

    def show_cursor(self) -> None:
        self._cursor_hidden = False

    def hide_cursor(self) -> None:
        self._cursor_hidden = True

    def clear_line(self) -> None:
        if self._row < len(self._lines):
            self._lines[self._row] = ""
        self._col = 0

    def clear_chars(self, n: int) -> None:
        self._col = max(0, self._col - n)
        if self._row < len(self._lines):
            self._lines[self._row] = self._lines[self._row][: self._col]

    # --- Inspection ---

    def materialize(self) -> str:
        """Join rows with newlines.

        A trailing empty segment is added when the cursor sits on the row
        after the last one, so a final ``write_line`` shows up as ``"\\n"``.
        """
        parts = list(self._lines)
        if self._row == len(self._lines):
            parts.append("")
        return "\n".join(parts)

    def __str__(self) -> str:
        return self.materialize()
