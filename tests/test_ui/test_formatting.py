"""Tests for line rendering helpers."""

from cliprompts.models import PromptOption
from cliprompts.ui import formatting
from cliprompts.ui.theme import Theme


def test_format_question(theme):
    assert formatting.format_question(theme, "test message") == "◇ test message"


def test_format_option_starts_with_carriage_return(theme):
    assert formatting.format_option(theme, "test message") == "\r│ test message"


def test_confirm_line(theme):
    assert formatting.confirm_line(theme, True) == "\r│ ● Yes / ○ No"
    assert formatting.confirm_line(theme, False) == "\r│ ○ Yes / ● No"


def test_multi_select_lines_end_with_confirm(theme):
    options = [PromptOption("a", "A"), PromptOption("b", "B")]

    lines = formatting.multi_select_lines(theme, options, [False, True], 1)

    assert lines == ["\r│ ○ ◻ A", "\r│ ● ◼ B", "\r│ ○ confirm"]


def test_note_lines_measure_cells(theme):
    lines = formatting.note_lines(theme, "日本\nab")

    # Wide characters take two cells each
    assert lines[1] == "│ 日本 │"
    assert lines[2] == "│ ab   │"
    assert lines[0] == "├──────╮"


def test_spinner_frames_share_width(theme):
    frames = [formatting.spinner_frame(theme, i, "working") for i in range(5)]

    assert frames[0] == "\r◒ working.       "
    assert frames[3] == "\r◑ working. . . . "
    assert frames[4] == frames[0]
    assert len({len(frame) for frame in frames}) == 1


def test_colored_radio():
    theme = Theme.plain()
    colored = Theme(theme.symbols)

    assert formatting.radio(colored, True) == colored.palette.green("●")
    assert formatting.radio(colored, False) == "○"
