"""Python wrapper around Google's Closure Compiler."""

from __future__ import annotations

from collections.abc import Iterable

from closure_compiler.application.results import InvocationResult
from closure_compiler.compiler import ClosureCompiler
from closure_compiler.errors import (
    ClosureCompilerError,
    ConfigurationError,
    ReportError,
    ToolNotFoundError,
)

__version__ = "0.1.0"


def compile_javascript(
    source_files: Iterable[str],
    *,
    source_base_dir: str = "",
    target_base_dir: str = "",
    target_file: str = "compiled.js",
    language_in: str = "ECMASCRIPT3",
    compilation_level: str = "WHITESPACE_ONLY",
    debug: bool = False,
) -> InvocationResult:
    """Compile JavaScript sources into a single minified file.

    Parameters
    ----------
    source_files : Iterable[str]
        Source file names, resolved against ``source_base_dir``, in bundle
        order.
    source_base_dir : str, default=""
        Existing directory prepended to every source name.
    target_base_dir : str, default=""
        Existing directory prepended to ``target_file``.
    target_file : str, default="compiled.js"
        Output file name; it does not need to exist.
    language_in : str, default="ECMASCRIPT3"
        One of ``ECMASCRIPT3``, ``ECMASCRIPT5``, ``ECMASCRIPT5_STRICT``.
    compilation_level : str, default="WHITESPACE_ONLY"
        One of ``WHITESPACE_ONLY``, ``SIMPLE_OPTIMIZATIONS``,
        ``ADVANCED_OPTIMIZATIONS``.
    debug : bool, default=False
        Pretty-print the output and append a debug report to it.

    Returns
    -------
    InvocationResult
        Exit code and output of the compiler, passed through unchanged.

    Raises
    ------
    ConfigurationError
        If any option is invalid or the target would overwrite a source.
    ToolNotFoundError
        If Java or the compiler jar cannot be located.
    """
    from .api import compile_javascript as _impl

    return _impl(
        source_files,
        source_base_dir=source_base_dir,
        target_base_dir=target_base_dir,
        target_file=target_file,
        language_in=language_in,
        compilation_level=compilation_level,
        debug=debug,
    )


__all__ = [
    "ClosureCompiler",
    "ClosureCompilerError",
    "ConfigurationError",
    "InvocationResult",
    "ReportError",
    "ToolNotFoundError",
    "compile_javascript",
]
