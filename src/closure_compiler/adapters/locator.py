"""Locate the Java runtime and Closure Compiler jar."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from closure_compiler.errors import ToolNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_JAVA_EXECUTABLE = "java"
# Resolved against the installed package, not the working directory.
DEFAULT_COMPILER_JAR = Path(__file__).resolve().parents[1] / "compiler-latest" / "compiler.jar"

JAVA_ENV_VAR = "CLOSURE_COMPILER_JAVA"
JAR_ENV_VAR = "CLOSURE_COMPILER_JAR"


def default_java_executable() -> str:
    """Return the runtime name looked up on ``PATH``."""
    return os.getenv(JAVA_ENV_VAR, DEFAULT_JAVA_EXECUTABLE)


def default_compiler_jar() -> Path:
    """Return the configured ``compiler.jar`` location."""
    return Path(os.getenv(JAR_ENV_VAR, str(DEFAULT_COMPILER_JAR)))


class JavaToolLocator:
    """Resolve ``<java> -jar <compiler.jar>`` once and cache it.

    Parameters
    ----------
    jar_path : Path | None, default=None
        Location of ``compiler.jar``. Defaults to ``$CLOSURE_COMPILER_JAR``
        or ``compiler-latest/compiler.jar`` inside the ``closure_compiler``
        package directory.
    java_executable : str | None, default=None
        Runtime name or path. Defaults to ``$CLOSURE_COMPILER_JAVA`` or
        ``java``.
    """

    def __init__(
        self,
        jar_path: Path | None = None,
        java_executable: str | None = None,
    ) -> None:
        self.jar_path = jar_path or default_compiler_jar()
        self.java_executable = java_executable or default_java_executable()
        self._command: tuple[str, ...] | None = None

    def resolve(self) -> tuple[str, ...]:
        """Return the cached launch command, resolving it on first use.

        Raises
        ------
        ToolNotFoundError
            If the runtime is not on ``PATH`` or the jar does not exist.
        """
        if self._command is None:
            java = shutil.which(self.java_executable)
            if not java:
                raise ToolNotFoundError(
                    f"{self.java_executable} could not be found in PATH."
                )
            jar = self.jar_path.resolve()
            if not jar.is_file():
                raise ToolNotFoundError(f"Closure Compiler jar not found at '{jar}'.")
            self._command = (java, "-jar", str(jar))
            logger.debug("resolved compiler command prefix: %s", self._command)
        return self._command
