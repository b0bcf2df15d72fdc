"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass

from closure_compiler.errors import ConfigurationError


@dataclass(frozen=True)
class ProcessOutcome:
    """Exit status and merged stdout/stderr of one external process."""

    exit_code: int
    output: str

    @property
    def lines(self) -> list[str]:
        """Return the captured output split into lines."""
        return self.output.splitlines()


@dataclass(frozen=True)
class InvocationResult:
    """Structured outcome of a single compiler run."""

    exit_code: int
    output: str
    command: tuple[str, ...]
    target_path: str
    report_written: bool = False

    @property
    def succeeded(self) -> bool:
        """Whether the tool reported success."""
        return self.exit_code == 0


@dataclass(frozen=True)
class SetterResult:
    """Outcome of a non-raising configuration setter.

    Truthiness mirrors ``ok`` so callers may keep treating it as a boolean.
    """

    ok: bool
    error: ConfigurationError | None = None

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_error(self) -> None:
        """Raise the recorded error when the setter was rejected.

        Raises
        ------
        ConfigurationError
            If the setter did not accept its value.
        """
        if self.error is not None:
            raise self.error

    @classmethod
    def accepted(cls) -> SetterResult:
        return cls(ok=True)

    @classmethod
    def rejected(cls, message: str) -> SetterResult:
        return cls(ok=False, error=ConfigurationError(message))
