"""Pytest fixtures for cliprompts tests."""

import pytest

from cliprompts.config import Config
from cliprompts.term import TerminalBuffer
from cliprompts.ui import Theme


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config at an empty directory and clear the cache around each test."""
    from cliprompts.config import clear_config_cache

    for key in Config.DEFAULTS:
        monkeypatch.delenv(f"CLIPROMPTS_{key.upper()}", raising=False)
    monkeypatch.setenv("CLIPROMPTS_CONFIG_DIR", str(tmp_path / "config"))
    clear_config_cache()

    yield

    clear_config_cache()


@pytest.fixture
def term():
    return TerminalBuffer()


@pytest.fixture
def theme():
    """Unicode glyphs, no colors."""
    return Theme.plain(unicode_support=True)


@pytest.fixture
def prompt(term, theme):
    from cliprompts.prompt import CliPrompt

    return CliPrompt(terminal=term, theme=theme, config=Config.load())
