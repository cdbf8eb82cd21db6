"""Prompt state machines.

Each machine consumes abstract key events and reports whether the prompt is
finished. They perform no I/O; ``CliPrompt`` renders after every key.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cliprompts.term.keys import Key


@dataclass
class ConfirmState:
    """Two-state yes/no toggle. Starts on Yes."""

    is_yes: bool = True
    done: bool = False

    def handle(self, key: Key) -> bool:
        """Apply a key. Returns True when the state changed or finished."""
        if key is Key.ARROW_LEFT:
            self.is_yes = True
        elif key is Key.ARROW_RIGHT:
            self.is_yes = False
        elif key is Key.ENTER:
            self.done = True
        else:
            return False
        return True


@dataclass
class SelectState:
    """Ring over ``size`` options. Up/down wrap around."""

    size: int
    current_index: int = 0
    done: bool = False

    def handle(self, key: Key) -> bool:
        if key is Key.ARROW_UP:
            self.current_index = (self.current_index - 1) % self.size
        elif key is Key.ARROW_DOWN:
            self.current_index = (self.current_index + 1) % self.size
        elif key is Key.ENTER:
            self.done = True
        else:
            return False
        return True


@dataclass
class SelectionState:
    """Multi-select state: a ring over the options plus a trailing confirm entry.

    Toggling an option on past ``max_choice_num`` is silently ignored.
    """

    max_choice_num: int
    is_selected: list[bool] = field(default_factory=list)
    current_index: int = 0
    selected_count: int = 0
    done: bool = False

    @classmethod
    def for_options(cls, size: int, max_choice_num: int) -> SelectionState:
        return cls(max_choice_num=max_choice_num, is_selected=[False] * size)

    @property
    def confirm_index(self) -> int:
        return len(self.is_selected)

    @property
    def on_confirm(self) -> bool:
        return self.current_index == self.confirm_index

    def toggle(self, index: int) -> bool:
        """Flip one option. Returns False when the cap rejected the toggle."""
        if self.is_selected[index]:
            self.is_selected[index] = False
            self.selected_count -= 1
            return True
        if self.selected_count >= self.max_choice_num:
            return False
        self.is_selected[index] = True
        self.selected_count += 1
        return True

    def handle(self, key: Key) -> bool:
        positions = self.confirm_index + 1
        if key is Key.ARROW_UP:
            self.current_index = (self.current_index - 1) % positions
        elif key is Key.ARROW_DOWN:
            self.current_index = (self.current_index + 1) % positions
        elif key is Key.ENTER:
            if self.on_confirm:
                self.done = True
            else:
                self.toggle(self.current_index)
        else:
            return False
        return True

    def selected_indices(self) -> list[int]:
        return [i for i, selected in enumerate(self.is_selected) if selected]
