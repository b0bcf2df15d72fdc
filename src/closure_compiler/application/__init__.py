"""Application-layer use-cases and option objects."""

from __future__ import annotations

from closure_compiler.application.builder import CompilerConfigBuilder
from closure_compiler.application.options import CompilerConfig
from closure_compiler.application.ports import (
    DebugReporter,
    ProcessRunner,
    ToolLocator,
)
from closure_compiler.application.results import (
    InvocationResult,
    ProcessOutcome,
    SetterResult,
)


def compile_sources(
    *,
    config: CompilerConfig,
    locator: ToolLocator | None = None,
    runner: ProcessRunner | None = None,
    reporter: DebugReporter | None = None,
) -> InvocationResult:
    """Run the compiler for one configuration via lazy use-case import."""
    from closure_compiler.application.use_cases import compile_sources as _impl

    return _impl(config=config, locator=locator, runner=runner, reporter=reporter)


__all__ = [
    "CompilerConfig",
    "CompilerConfigBuilder",
    "InvocationResult",
    "ProcessOutcome",
    "SetterResult",
    "compile_sources",
]
