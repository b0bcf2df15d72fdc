"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from closure_compiler.application.options import CompilerConfig
from closure_compiler.application.results import ProcessOutcome


class ToolLocator(Protocol):
    """Resolve the command prefix that launches the external compiler."""

    def resolve(self) -> tuple[str, ...]:
        """Return the launch command, e.g. ``("/usr/bin/java", "-jar", jar)``."""


class ProcessRunner(Protocol):
    """Run an external process to completion."""

    def run(self, args: Sequence[str]) -> ProcessOutcome:
        """Run ``args`` and return exit code plus merged output."""


class DebugReporter(Protocol):
    """Append a diagnostic block to the compiled output."""

    def report(
        self,
        config: CompilerConfig,
        command: str,
        output_lines: Sequence[str],
    ) -> None:
        """Write the report; raise ``ReportError`` on failure."""
