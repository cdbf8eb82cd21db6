"""Real terminal backed by a text stream and readchar."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

import readchar
from rich.console import Console
from rich.control import Control
from rich.segment import ControlType

from cliprompts.errors import IOFailure
from cliprompts.term.keys import Key, translate_key


@contextmanager
def _io_errors(action: str) -> Iterator[None]:
    """Re-raise stream failures as IOFailure."""
    try:
        yield
    except (OSError, EOFError) as e:
        raise IOFailure(f"Terminal {action} failed: {e}") from e


class ConsoleTerminal:
    """Terminal that writes to a real screen.

    Cursor motion and visibility use VT100 control sequences, which every
    terminal supported by rich understands. Keys come from ``readchar``.
    """

    def __init__(self, file: TextIO | None = None, stdin: TextIO | None = None):
        self._file = file or sys.stdout
        self._stdin = stdin
        self.console = Console(file=self._file)

    @property
    def encoding(self) -> str:
        return self.console.encoding

    def _emit(self, control: Control) -> None:
        text = str(control)
        if text:
            with _io_errors("write"):
                self._file.write(text)

    def write(self, data: str | bytes) -> int:
        text = data.decode("utf-8") if isinstance(data, bytes) else data
        with _io_errors("write"):
            self._file.write(text)
        return len(data)

    def write_line(self, text: str) -> None:
        self.write(f"{text}\n")

    def flush(self) -> None:
        with _io_errors("flush"):
            self._file.flush()

    def read_line(self) -> str:
        with _io_errors("read"):
            line = self.console.input(stream=self._stdin)
        return line.rstrip("\r\n")

    def read_key(self) -> Key:
        with _io_errors("read"):
            raw = readchar.readkey()
        return translate_key(raw)

    def move_cursor_up(self, n: int) -> None:
        if n > 0:
            self._emit(Control.move(y=-n))

    def move_cursor_down(self, n: int) -> None:
        if n > 0:
            self._emit(Control.move(y=n))

    def show_cursor(self) -> None:
        self._emit(Control.show_cursor(True))

    def hide_cursor(self) -> None:
        self._emit(Control.show_cursor(False))

    def clear_line(self) -> None:
        self._emit(Control(ControlType.CARRIAGE_RETURN, (ControlType.ERASE_IN_LINE, 2)))

    def clear_chars(self, n: int) -> None:
        if n > 0:
            self._emit(Control((ControlType.CURSOR_BACKWARD, n), (ControlType.ERASE_IN_LINE, 0)))
