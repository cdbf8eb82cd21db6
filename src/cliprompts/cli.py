"""CLI commands: runnable demos of the prompts."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console

if TYPE_CHECKING:
    from cliprompts.config import Config
    from cliprompts.prompt import CliPrompt

app = typer.Typer(
    name="cliprompts",
    help="Styled command-line prompts - try them out.",
    no_args_is_help=True,
)
console = Console()


def _get_config() -> Config:
    """Lazy import and load config."""
    from cliprompts.config import Config

    return Config.load()


def _make_prompt(config: Config) -> CliPrompt:
    """Prompt on the real terminal."""
    from cliprompts.prompt import CliPrompt

    return CliPrompt(config=config)


@app.command()
def demo():
    """Walk through text, confirm and select prompts."""
    from cliprompts.models import LogType, PromptOption

    prompt = _make_prompt(_get_config())
    prompt.intro("example app")

    prompt.prompt_text("Enter your name")

    if not prompt.prompt_confirm("Are you sure?"):
        prompt.cancel("Operation cancelled")
        raise typer.Exit(0)

    options = [
        PromptOption("option1", "Pikachu"),
        PromptOption("option2", "Charmander"),
        PromptOption("option3", "Squirtle"),
    ]
    selected = prompt.prompt_select("Which one do you prefer?", options)

    prompt.log(str(selected), LogType.INFO)
    prompt.outro("Good Bye")


@app.command()
def spinner(
    seconds: Annotated[float, typer.Option("--seconds", "-s", help="How long the task runs")] = 5.0,
    timeout_ms: Annotated[
        int, typer.Option("--timeout-ms", "-t", help="Give up after this many milliseconds")
    ] = 10000,
):
    """Show the spinner while a background task sleeps."""
    from cliprompts.errors import SpinnerError

    prompt = _make_prompt(_get_config())
    prompt.intro("spinner example")
    prompt.print_note("This example shows how to use spinner feature")

    try:
        prompt.run_with_spinner("working", "Done!", timeout_ms, lambda: time.sleep(seconds))
    except SpinnerError as e:
        prompt.term.write_line("")
        prompt.cancel(str(e))
        raise typer.Exit(1)

    prompt.outro("Good Bye")


@app.command("config")
def show_config():
    """Show effective configuration values."""
    from cliprompts.config import ConfigMeta

    cfg = _get_config()
    console.print(f"[dim]{cfg.config_dir / 'config.json'}[/dim]")
    for key, value in cfg.items():
        desc = ConfigMeta.SETTINGS.get(key, "")
        console.print(f"  [cyan]{key}[/cyan] = {value!r}  [dim]{desc}[/dim]")
