"""Stateful Closure Compiler wrapper.

Usage: set base dirs, add sources, name the target and compile::

    compiler = ClosureCompiler()
    compiler.set_source_base_dir("path/to/javascript-src/")
    compiler.set_target_base_dir("path/to/javascript/")
    compiler.set_source_files(["one.js", "two.js", "three.js"])
    compiler.set_target_file("minified.js")
    exit_code = compiler.compile()
"""

from __future__ import annotations

import os
import shlex
from collections.abc import Iterable

from closure_compiler.adapters.locator import JavaToolLocator
from closure_compiler.adapters.runner import SubprocessRunner
from closure_compiler.application.builder import CompilerConfigBuilder
from closure_compiler.application.options import CompilerConfig
from closure_compiler.application.ports import (
    DebugReporter,
    ProcessRunner,
    ToolLocator,
)
from closure_compiler.application.results import InvocationResult, SetterResult
from closure_compiler.application.use_cases import compile_sources
from closure_compiler.infrastructure.reporting import DebugReportWriter


class ClosureCompiler:
    """Configure and run Google's Closure Compiler.

    Parameters
    ----------
    locator : ToolLocator | None, default=None
        Resolves the launch command; resolved once per instance.
    runner : ProcessRunner | None, default=None
        Executes the compiler process.
    reporter : DebugReporter | None, default=None
        Writes the debug report when debug mode is enabled.
    config : CompilerConfig | None, default=None
        Initial configuration; defaults apply when omitted.
    """

    def __init__(
        self,
        *,
        locator: ToolLocator | None = None,
        runner: ProcessRunner | None = None,
        reporter: DebugReporter | None = None,
        config: CompilerConfig | None = None,
    ) -> None:
        self._builder = CompilerConfigBuilder(config)
        self._locator = locator or JavaToolLocator()
        self._runner = runner or SubprocessRunner()
        self._reporter = reporter or DebugReportWriter()
        self._last_result: InvocationResult | None = None

    def get_binary(self) -> str:
        """Return the command line that launches the compiler."""
        return shlex.join(self._locator.resolve())

    def get_config(self) -> CompilerConfig:
        """Return an immutable snapshot of the current configuration."""
        return self._builder.build()

    def get_target_file_name(self) -> str:
        return self._builder.build().target_file_name

    def get_output(self) -> str:
        """Return the combined output of the last compile."""
        if self._last_result is None:
            return ""
        return self._last_result.output

    @property
    def last_result(self) -> InvocationResult | None:
        return self._last_result

    def set_source_base_dir(self, path: str | os.PathLike[str] = "") -> None:
        self._builder.set_source_base_dir(path)

    def set_target_base_dir(self, path: str | os.PathLike[str] = "") -> None:
        self._builder.set_target_base_dir(path)

    def clear_source_files(self) -> None:
        self._builder.clear_source_files()

    def add_source_file(self, name: str) -> None:
        self._builder.add_source_file(name)

    def set_source_files(self, names: Iterable[str], reset: bool = True) -> None:
        self._builder.set_source_files(names, reset=reset)

    def remove_source_file(self, name: str) -> None:
        self._builder.remove_source_file(name)

    def set_target_file(self, name: str) -> None:
        self._builder.set_target_file(name)

    def set_language_in(self, value: str) -> SetterResult:
        return self._builder.set_language_in(value)

    def set_compilation_level(self, value: str) -> SetterResult:
        return self._builder.set_compilation_level(value)

    def set_debug(self, value: object) -> SetterResult:
        return self._builder.set_debug(value)

    def compile_result(self) -> InvocationResult:
        """Run the compiler and return the full invocation result.

        Raises
        ------
        ConfigurationError
            If the resolved target is one of the sources.
        ToolNotFoundError
            If Java or the compiler jar cannot be located.
        """
        self._builder.resolve_target()
        self._last_result = compile_sources(
            config=self._builder.build(),
            locator=self._locator,
            runner=self._runner,
            reporter=self._reporter,
        )
        return self._last_result

    def compile(self) -> int:
        """Run the compiler and return its exit code unchanged."""
        return self.compile_result().exit_code
