"""Tests for glyph selection and theme resolution."""

import io

from cliprompts.config import Config
from cliprompts.ui import Symbols, Theme, detect_unicode_support, get_symbol


def test_get_symbol():
    assert get_symbol("c", "fallback", True) == "c"
    assert get_symbol("c", "fallback", False) == "fallback"


def test_unicode_symbols():
    s = Symbols.resolve(True)

    assert s.bar == "│"
    assert s.radio_active == "●"
    assert s.checkbox_inactive == "◻"
    assert s.spinner_frames == ("◒", "◐", "◓", "◑")


def test_ascii_symbols():
    s = Symbols.resolve(False)

    assert s.bar_start == "T"
    assert s.bar == "|"
    assert s.radio_active == ">"
    assert s.radio_inactive == " "
    assert s.checkbox_active == "[+]"
    assert s.checkbox_inactive == "[ ]"
    assert s.spinner_frames == ("•", "o", "O", "0")


def test_radio_and_checkbox_pairs_have_equal_width():
    # In-place redraws rely on active/inactive markers taking the same columns
    for unicode_support in (True, False):
        s = Symbols.resolve(unicode_support)
        assert len(s.radio_active) == len(s.radio_inactive)
        assert len(s.checkbox_active) == len(s.checkbox_inactive)


def test_detect_unicode_support():
    utf8 = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
    latin = io.TextIOWrapper(io.BytesIO(), encoding="latin-1")

    assert detect_unicode_support(utf8) is True
    assert detect_unicode_support(latin) is False


def test_theme_plain_has_no_colors():
    theme = Theme.plain()

    assert theme.palette.enabled is False
    assert theme.symbols == Symbols.resolve(True)


def test_theme_resolve_forced_modes(monkeypatch):
    monkeypatch.setenv("CLIPROMPTS_UNICODE", "always")
    latin = io.TextIOWrapper(io.BytesIO(), encoding="latin-1")

    theme = Theme.resolve(Config.load(), latin)

    assert theme.symbols.bar == "│"


def test_theme_resolve_auto_probes_stream():
    latin = io.TextIOWrapper(io.BytesIO(), encoding="latin-1")

    theme = Theme.resolve(Config.load(), latin)

    assert theme.symbols.bar == "|"


def test_theme_resolve_without_stream_is_plain_unicode():
    theme = Theme.resolve(Config.load())

    assert theme.symbols == Symbols.resolve(True)
    assert theme.palette.enabled is False


def test_theme_resolve_without_stream_honours_never(monkeypatch):
    monkeypatch.setenv("CLIPROMPTS_UNICODE", "never")
    assert Theme.resolve(Config.load()).symbols.bar == "|"
