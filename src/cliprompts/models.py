"""Data models for cliprompts."""

from dataclasses import dataclass
from enum import Enum


class LogType(Enum):
    """Kind of message printed by ``CliPrompt.log``."""

    INFO = "info"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class PromptOption:
    """Immutable option for select prompts.

    ``value`` is a stable identifier, ``label`` is what gets displayed.
    """

    value: str
    label: str

    def __str__(self) -> str:
        return f"{self.value} <{self.label}>"
