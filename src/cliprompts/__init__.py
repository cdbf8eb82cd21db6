"""
cliprompts - styled prompts for command-line apps.
"""

from .errors import (  # noqa
    CliPromptError,
    EmptyOptionsError,
    InvalidMaxChoiceError,
    IOFailure,
    SpinnerError,
    TaskJoinFailed,
    TaskTimedOut,
)
from .models import LogType, PromptOption  # noqa
from .prompt import CliPrompt  # noqa
from .term import ConsoleTerminal, Key, Terminal, TerminalBuffer  # noqa

__version__ = "0.1.0"
