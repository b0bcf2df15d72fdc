"""Public one-call compile API (delegates to the stateful wrapper)."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import ValidationError

from closure_compiler.application.ports import (
    DebugReporter,
    ProcessRunner,
    ToolLocator,
)
from closure_compiler.application.results import InvocationResult
from closure_compiler.compiler import ClosureCompiler
from closure_compiler.errors import ConfigurationError
from closure_compiler.schemas import CompileRequest


def compile_javascript(
    source_files: Iterable[str],
    *,
    source_base_dir: str = "",
    target_base_dir: str = "",
    target_file: str = "compiled.js",
    language_in: str = "ECMASCRIPT3",
    compilation_level: str = "WHITESPACE_ONLY",
    debug: bool = False,
    locator: ToolLocator | None = None,
    runner: ProcessRunner | None = None,
    reporter: DebugReporter | None = None,
) -> InvocationResult:
    """Validate all options up front, then compile in one step.

    Unlike the setter API, every invalid option raises ``ConfigurationError``.
    """
    try:
        request = CompileRequest(
            source_files=list(source_files),
            source_base_dir=source_base_dir,
            target_base_dir=target_base_dir,
            target_file=target_file,
            language_in=language_in,
            compilation_level=compilation_level,
            debug=debug,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid compile parameters: {exc}") from exc

    compiler = ClosureCompiler(locator=locator, runner=runner, reporter=reporter)
    compiler.set_source_base_dir(request.source_base_dir)
    compiler.set_target_base_dir(request.target_base_dir)
    compiler.set_source_files(request.source_files)
    compiler.set_target_file(request.target_file)
    compiler.set_language_in(request.language_in).raise_for_error()
    compiler.set_compilation_level(request.compilation_level).raise_for_error()
    compiler.set_debug(request.debug).raise_for_error()
    return compiler.compile_result()
