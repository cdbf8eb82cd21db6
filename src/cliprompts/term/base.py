"""Terminal protocol shared by the real screen and the in-memory model."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from cliprompts.term.keys import Key


@runtime_checkable
class Terminal(Protocol):
    """Capability interface the prompt drivers render through.

    Implementations are chosen at construction time: ``ConsoleTerminal`` for
    a real screen, ``TerminalBuffer`` for tests.
    """

    def write(self, data: str | bytes) -> int:
        """Write at the cursor without an implicit newline. Returns len(data)."""
        ...

    def write_line(self, text: str) -> None:
        """Write text, then move to column 0 of the next row."""
        ...

    def read_line(self) -> str:
        """Read one line of input (blocking)."""
        ...

    def read_key(self) -> Key:
        """Read one key event (blocking)."""
        ...

    def move_cursor_up(self, n: int) -> None: ...

    def move_cursor_down(self, n: int) -> None: ...

    def show_cursor(self) -> None: ...

    def hide_cursor(self) -> None: ...

    def flush(self) -> None: ...

    def clear_line(self) -> None:
        """Erase the current row and return to column 0."""
        ...

    def clear_chars(self, n: int) -> None:
        """Move back n columns and erase to the end of the row."""
        ...
