"""Render helpers that build prompt lines from a theme.

Every function is a pure string transform; prompts hand the results to the
terminal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.cells import cell_len

from cliprompts.models import LogType

if TYPE_CHECKING:
    from cliprompts.models import PromptOption
    from cliprompts.ui.theme import Theme

CONFIRM_LABEL = "confirm"
SPINNER_DOTS_WIDTH = 8  # ". " * 4


def format_question(theme: Theme, message: str) -> str:
    return f"{theme.palette.magenta(theme.symbols.step_submit)} {message}"


def format_option(theme: Theme, message: str) -> str:
    """Option rows start with a carriage return so redraws overwrite in place."""
    return f"\r{theme.symbols.bar} {message}"


def radio(theme: Theme, active: bool) -> str:
    if active:
        return theme.palette.green(theme.symbols.radio_active)
    return theme.symbols.radio_inactive


def checkbox(theme: Theme, selected: bool) -> str:
    if selected:
        return theme.palette.blue(theme.symbols.checkbox_active)
    return theme.symbols.checkbox_inactive


def confirm_line(theme: Theme, is_yes: bool) -> str:
    return format_option(theme, f"{radio(theme, is_yes)} Yes / {radio(theme, not is_yes)} No")


def select_lines(theme: Theme, options: list[PromptOption], current: int) -> list[str]:
    return [
        format_option(theme, f"{radio(theme, i == current)} {option.label}")
        for i, option in enumerate(options)
    ]


def multi_select_lines(
    theme: Theme,
    options: list[PromptOption],
    is_selected: list[bool],
    current: int,
) -> list[str]:
    """Option rows followed by the confirm row (index ``len(options)``)."""
    lines = [
        format_option(
            theme, f"{radio(theme, i == current)} {checkbox(theme, is_selected[i])} {option.label}"
        )
        for i, option in enumerate(options)
    ]
    lines.append(format_option(theme, f"{radio(theme, current == len(options))} {CONFIRM_LABEL}"))
    return lines


def log_line(theme: Theme, message: str, log_type: LogType) -> str:
    palette = theme.palette
    if log_type is LogType.WARN:
        return f"{palette.yellow(theme.symbols.warn)} {palette.yellow(message)}"
    if log_type is LogType.ERROR:
        return f"{palette.red(theme.symbols.error)} {palette.red(message)}"
    return f"{palette.blue(theme.symbols.info)} {message}"


def note_lines(theme: Theme, message: str) -> list[str]:
    """Box a (possibly multi-line) message.

    Widths are measured in terminal cells so wide characters stay aligned.
    """
    s = theme.symbols
    rows = message.split("\n")
    width = max(cell_len(row) for row in rows)
    border = s.bar_h * (width + 2)

    lines = [f"{s.connect_left}{border}{s.corner_top_right}"]
    for row in rows:
        lines.append(f"{s.bar} {row}{' ' * (width - cell_len(row) + 1)}{s.bar}")
    lines.append(f"{s.connect_left}{border}{s.corner_bottom_right}")
    return lines


def spinner_frame(theme: Theme, index: int, message: str) -> str:
    """One animation frame; dots are padded so shorter frames erase longer ones."""
    frames = theme.symbols.spinner_frames
    frame = theme.palette.magenta(frames[index % len(frames)])
    dots = (". " * (index % len(frames) + 1)).ljust(SPINNER_DOTS_WIDTH)
    return f"\r{frame} {message}{dots}"
