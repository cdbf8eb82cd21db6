"""Tests for CLI commands."""

import pytest
from typer.testing import CliRunner

from cliprompts.cli import app
from cliprompts.config import Config
from cliprompts.prompt import CliPrompt
from cliprompts.term import TerminalBuffer
from cliprompts.ui import Theme

runner = CliRunner()


@pytest.fixture
def scripted(monkeypatch):
    """Route CLI prompts to an in-memory terminal."""
    term = TerminalBuffer()

    def make_prompt(config: Config) -> CliPrompt:
        return CliPrompt(terminal=term, theme=Theme.plain(), config=config)

    monkeypatch.setattr("cliprompts.cli._make_prompt", make_prompt)
    return term


def test_help():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0, result.output
    assert "demo" in result.stdout
    assert "spinner" in result.stdout


def test_config_command():
    result = runner.invoke(app, ["config"])

    assert result.exit_code == 0, result.output
    assert "confirm_message" in result.stdout
    assert "spinner_interval_ms" in result.stdout


def test_demo_runs_flow(scripted):
    scripted.set_input("Ash")
    scripted.push_key("enter")  # confirm: yes
    scripted.push_key("arrow down")
    scripted.push_key("enter")  # select Charmander

    result = runner.invoke(app, ["demo"])

    assert result.exit_code == 0, result.output
    output = scripted.materialize()
    assert output.startswith("┌ example app\n")
    assert "● option2 <Charmander>" in output
    assert output.endswith("└ Good Bye\n")


def test_demo_cancel(scripted):
    scripted.push_key("arrow right")
    scripted.push_key("enter")

    result = runner.invoke(app, ["demo"])

    assert result.exit_code == 0
    assert scripted.materialize().endswith("└ Operation cancelled\n")


def test_spinner_command(scripted, monkeypatch):
    monkeypatch.setenv("CLIPROMPTS_SPINNER_INTERVAL_MS", "1")

    result = runner.invoke(app, ["spinner", "--seconds", "0"])

    assert result.exit_code == 0, result.output
    output = scripted.materialize()
    assert "◆ Done!" in output
    assert output.endswith("└ Good Bye\n")


def test_spinner_timeout_exits_nonzero(scripted, monkeypatch):
    monkeypatch.setenv("CLIPROMPTS_SPINNER_INTERVAL_MS", "1")

    result = runner.invoke(app, ["spinner", "--seconds", "1", "--timeout-ms", "10"])

    assert result.exit_code == 1
    assert "did not finish" in scripted.materialize()
