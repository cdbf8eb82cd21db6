"""Exceptions raised by prompts and terminals."""


class CliPromptError(Exception):
    """Base class for every error raised by cliprompts."""

    pass


class IOFailure(CliPromptError):
    """Raised when the terminal's input or output stream fails.

    The original exception is always chained as ``__cause__``.
    """

    pass


class EmptyOptionsError(CliPromptError, ValueError):
    """Raised by select prompts when no options are given."""

    pass


class InvalidMaxChoiceError(CliPromptError, ValueError):
    """Raised when a multi-select cap is outside ``[1, len(options)]``."""

    pass


class SpinnerError(CliPromptError):
    """Base class for background task failures."""

    pass


class TaskTimedOut(SpinnerError):
    """Raised when a spinner task does not finish within its timeout."""

    pass


class TaskJoinFailed(SpinnerError):
    """Raised when a spinner task finished by raising an exception."""

    pass
