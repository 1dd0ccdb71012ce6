"""CLI-level errors. Every one of them ends the command with a non-zero exit."""

from typing import Optional


class SquidCliError(Exception):
    """Unrecoverable command failure with a user-facing message."""

    def __init__(self, message: str, code: int = 1):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(SquidCliError):
    """Bad user input, reported before any remote call."""


class EnvParseError(SquidCliError):
    """An ``--env`` flag did not parse into any variable."""


class GitSourceError(SquidCliError):
    """The local repository cannot be used as a deploy source."""


class PipelineFatalError(SquidCliError):
    """The deploy pipeline reached a state polling cannot recover from.

    Attributes:
        debug: Diagnostic dump for the failing pipeline, when verbose output
            was requested.
    """

    def __init__(self, message: str, debug: Optional[str] = None, code: int = 1):
        super().__init__(message, code=code)
        self.debug = debug


class PipelineNotFoundError(PipelineFatalError):
    """The API stopped reporting the pipeline while it was being watched."""
