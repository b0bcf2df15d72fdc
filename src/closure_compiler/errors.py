"""Exception hierarchy for the Closure Compiler wrapper."""

from __future__ import annotations


class ClosureCompilerError(Exception):
    """Base error for all wrapper failures.

    Parameters
    ----------
    message : str
        Human-readable error description.
    exit_code : int | None, default=None
        Process exit code the CLI should use for this error.
    """

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class ConfigurationError(ClosureCompilerError):
    """Raised for invalid paths, invalid options or a self-overwriting target."""


class ToolNotFoundError(ClosureCompilerError):
    """Raised when the Java runtime or ``compiler.jar`` cannot be located."""

    def __init__(self, message: str) -> None:
        super().__init__(message, exit_code=127)


class ReportError(ClosureCompilerError):
    """Raised when the debug report cannot be produced."""
