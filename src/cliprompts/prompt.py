"""Prompt functions that render through a Terminal.

Example:
    prompt = CliPrompt()
    prompt.intro("example app")
    name = prompt.prompt_text("Enter your name")
    if not prompt.prompt_confirm("Are you sure?"):
        prompt.cancel("Operation cancelled")
    prompt.outro("Good Bye")
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, TypeVar

from cliprompts.errors import EmptyOptionsError, InvalidMaxChoiceError, TaskTimedOut
from cliprompts.models import LogType, PromptOption
from cliprompts.state import ConfirmState, SelectionState, SelectState
from cliprompts.task import BackgroundTask
from cliprompts.ui import formatting
from cliprompts.ui.theme import Theme

if TYPE_CHECKING:
    from cliprompts.config import Config
    from cliprompts.term.base import Terminal

T = TypeVar("T")

logger = logging.getLogger("cliprompts.prompt")


class CliPrompt:
    """Collection of prompts sharing one terminal and one theme.

    The terminal and theme are injected; by default a ``ConsoleTerminal`` on
    stdout and a theme resolved from ``Config.load()``.
    """

    def __init__(
        self,
        terminal: Terminal | None = None,
        theme: Theme | None = None,
        config: Config | None = None,
    ):
        if config is None:
            from cliprompts.config import Config

            config = Config.load()
        if terminal is None:
            from cliprompts.term.console import ConsoleTerminal

            terminal = ConsoleTerminal()
        if theme is None:
            # Terminals without a console (TerminalBuffer) get no colors
            console = getattr(terminal, "console", None)
            theme = Theme.resolve(config, console.file if console is not None else None)
        self.config = config
        self.term = terminal
        self.theme = theme

    # --- Messages ---

    def intro(self, message: str) -> None:
        """Print the intro line. Use at the beginning of an app."""
        self.term.write_line(f"{self.theme.symbols.bar_start} {message}")
        self._print_empty_line()

    def outro(self, message: str) -> None:
        """Print the outro line. Use at the end of an app."""
        self.term.write_line(f"{self.theme.symbols.bar_end} {message}")

    def cancel(self, message: str) -> None:
        """Print a red cancel line."""
        self.term.write_line(f"{self.theme.symbols.bar_end} {self.theme.palette.red(message)}")

    def log(self, message: str, log_type: LogType = LogType.INFO) -> None:
        """Print a message with the symbol and color of its log type.

        - INFO: blue ● prefix
        - WARN: yellow ▲ prefix, yellow message
        - ERROR: red ■ prefix, red message
        """
        self.term.write_line(formatting.log_line(self.theme, message, log_type))
        self._print_empty_line()

    def print_note(self, message: str) -> None:
        """Print a message wrapped in a box."""
        for line in formatting.note_lines(self.theme, message):
            self.term.write_line(line)
        self._print_empty_line()

    # --- Prompts ---

    def prompt_text(self, message: str) -> str:
        """Ask a question and return the stripped line the user typed."""
        self.term.write_line(formatting.format_question(self.theme, message))
        self.term.write(f"{self.theme.symbols.bar} ")

        line = self.term.read_line()
        self._print_empty_line()

        return line.strip()

    def prompt_confirm(self, message: str = "") -> bool:
        """Yes/no choice with left/right arrows, Enter accepts. Defaults to Yes."""
        state = ConfirmState()
        self.term.hide_cursor()
        self.term.write_line(
            formatting.format_question(self.theme, message or self.config.confirm_message)
        )
        self.term.write(formatting.confirm_line(self.theme, state.is_yes))

        while not state.done:
            key = self.term.read_key()
            if not state.handle(key) or state.done:
                continue
            self.term.write(formatting.confirm_line(self.theme, state.is_yes))
            self.term.flush()

        self.term.show_cursor()
        self.term.write_line("")
        self._print_empty_line()

        return state.is_yes

    def prompt_select(self, message: str, options: Sequence[PromptOption]) -> PromptOption:
        """Pick one option with up/down arrows, Enter accepts.

        Raises:
            EmptyOptionsError: If options is empty
        """
        options = list(options)
        if not options:
            raise EmptyOptionsError("options is empty")

        state = SelectState(size=len(options))
        self.term.hide_cursor()
        self.term.write_line(formatting.format_question(self.theme, message))
        self._redraw(formatting.select_lines(self.theme, options, state.current_index))

        while not state.done:
            key = self.term.read_key()
            if not state.handle(key) or state.done:
                continue
            self._redraw(formatting.select_lines(self.theme, options, state.current_index))

        self._finish_block(len(options))
        return options[state.current_index]

    def prompt_multi_select(
        self, message: str, options: Sequence[PromptOption]
    ) -> list[PromptOption]:
        """Pick any number of options. Same as capping at len(options)."""
        options = list(options)
        return self.prompt_multi_select_with_max_choice_num(message, options, len(options))

    def prompt_multi_select_with_max_choice_num(
        self,
        message: str,
        options: Sequence[PromptOption],
        max_choice_num: int,
    ) -> list[PromptOption]:
        """Pick up to max_choice_num options.

        Enter toggles the highlighted option; Enter on the trailing "confirm"
        row accepts. Toggling on past the cap is ignored.

        Raises:
            EmptyOptionsError: If options is empty
            InvalidMaxChoiceError: If max_choice_num is 0 or above len(options)
        """
        options = list(options)
        if not options:
            raise EmptyOptionsError("options is empty")
        if max_choice_num > len(options):
            raise InvalidMaxChoiceError("max_choice_num must be less or equal than options length")
        if max_choice_num <= 0:
            raise InvalidMaxChoiceError("max_choice_num must be greater than 0")

        state = SelectionState.for_options(len(options), max_choice_num)
        self.term.hide_cursor()
        self.term.write_line(formatting.format_question(self.theme, message))
        self._redraw(self._multi_lines(options, state))

        while not state.done:
            key = self.term.read_key()
            if not state.handle(key) or state.done:
                continue
            self._redraw(self._multi_lines(options, state))

        self._finish_block(len(options) + 1)
        return [options[i] for i in state.selected_indices()]

    # --- Spinner ---

    def run_with_spinner(
        self,
        loading_message: str,
        finish_message: str,
        timeout_ms: int,
        task: Callable[[], T],
    ) -> T | None:
        """Animate a spinner while task runs on a worker thread.

        Only the calling thread writes to the terminal. Returns the task's
        result.

        Raises:
            TaskTimedOut: If task has not finished after timeout_ms
            TaskJoinFailed: If task raised
        """
        interval = self.config.spinner_interval
        worker = BackgroundTask(task).start()
        started = time.monotonic()
        frame = 0

        while not worker.done():
            if time.monotonic() - started >= timeout_ms / 1000:
                logger.debug("Spinner task exceeded %dms", timeout_ms)
                raise TaskTimedOut(f"task did not finish within {timeout_ms}ms")

            self.term.write(formatting.spinner_frame(self.theme, frame, loading_message))
            self.term.flush()
            frame += 1
            worker.wait(interval)

        self.term.clear_line()
        self.term.write_line(
            f"{self.theme.palette.green(self.theme.symbols.success)} {finish_message}"
        )
        self._print_empty_line()

        return worker.join()

    # --- Rendering ---

    def _multi_lines(self, options: list[PromptOption], state: SelectionState) -> list[str]:
        return formatting.multi_select_lines(
            self.theme, options, state.is_selected, state.current_index
        )

    def _redraw(self, lines: list[str]) -> None:
        """Write a block of rows, then park the cursor on its first row."""
        for line in lines:
            self.term.write_line(line)
        self.term.flush()
        self.term.move_cursor_up(len(lines))

    def _finish_block(self, line_count: int) -> None:
        self.term.move_cursor_down(line_count)
        self.term.show_cursor()
        self._print_empty_line()

    def _print_empty_line(self) -> None:
        self.term.write_line(self.theme.symbols.bar)
