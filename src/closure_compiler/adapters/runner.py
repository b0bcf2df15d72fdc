"""Subprocess adapter for running the external compiler."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from closure_compiler.application.results import ProcessOutcome
from closure_compiler.errors import ToolNotFoundError


class SubprocessRunner:
    """Run a command synchronously with stderr merged into stdout."""

    def run(self, args: Sequence[str]) -> ProcessOutcome:
        """Run ``args`` to completion.

        Parameters
        ----------
        args : Sequence[str]
            Executable followed by its arguments. No shell is involved.

        Returns
        -------
        ProcessOutcome
            Exit code and combined output with line endings normalized.
            Output is decoded as UTF-8; undecodable bytes become U+FFFD.

        Raises
        ------
        ToolNotFoundError
            If the executable disappeared between resolution and launch.
        """
        try:
            completed = subprocess.run(
                list(args),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                stdin=subprocess.DEVNULL,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except FileNotFoundError as exc:
            raise ToolNotFoundError(f"Could not launch '{args[0]}': {exc}") from exc
        return ProcessOutcome(
            exit_code=completed.returncode,
            output="\n".join(completed.stdout.splitlines()),
        )
