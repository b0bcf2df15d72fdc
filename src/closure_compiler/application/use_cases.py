"""Application use-cases orchestrating compiler invocations."""

from __future__ import annotations

import dataclasses
import logging
import shlex

from closure_compiler.adapters.locator import JavaToolLocator
from closure_compiler.adapters.runner import SubprocessRunner
from closure_compiler.application.builder import resolve_target_file_name
from closure_compiler.application.options import CompilerConfig
from closure_compiler.application.ports import (
    DebugReporter,
    ProcessRunner,
    ToolLocator,
)
from closure_compiler.application.results import InvocationResult
from closure_compiler.errors import ConfigurationError, ReportError
from closure_compiler.infrastructure.reporting import DebugReportWriter
from closure_compiler.types import DEBUG_FLAGS

logger = logging.getLogger(__name__)


def ensure_target_not_in_sources(config: CompilerConfig) -> None:
    """Refuse to compile into one of the source files.

    Raises
    ------
    ConfigurationError
        If ``config.target_file_name`` is listed as a source.
    """
    if config.target_file_name in config.source_file_names:
        raise ConfigurationError(
            f"The target file '{config.target_file_name}' is one of the source "
            "files. A compile would cause undesired effects."
        )


def build_arguments(config: CompilerConfig) -> list[str]:
    """Build compiler flags in a fixed order.

    Level and language come first, then one ``--js`` per source in bundle
    order, then the output file and, in debug mode, the formatting flags.
    """
    args = [
        f"--compilation_level={config.compilation_level}",
        f"--language_in={config.language_in}",
    ]
    args.extend(f"--js={path}" for path in config.source_file_names)
    args.append(f"--js_output_file={config.target_file_name}")
    if config.debug:
        args.extend(DEBUG_FLAGS)
    return args


def compile_sources(
    *,
    config: CompilerConfig,
    locator: ToolLocator | None = None,
    runner: ProcessRunner | None = None,
    reporter: DebugReporter | None = None,
) -> InvocationResult:
    """Use-case: run the external compiler for one configuration.

    Parameters
    ----------
    config : CompilerConfig
        Snapshot of the configuration to compile.
    locator : ToolLocator | None, default=None
        Resolves the launch command. Defaults to :class:`JavaToolLocator`.
    runner : ProcessRunner | None, default=None
        Executes the command. Defaults to :class:`SubprocessRunner`.
    reporter : DebugReporter | None, default=None
        Used only when ``config.debug`` is set. Defaults to
        :class:`DebugReportWriter`.

    Returns
    -------
    InvocationResult
        Tool exit code and output, passed through unchanged.

    Raises
    ------
    ConfigurationError
        If the resolved target is one of the sources. No process is started.
    ToolNotFoundError
        If the launch command cannot be resolved.
    """
    config = dataclasses.replace(
        config, target_file_name=resolve_target_file_name(config)
    )
    ensure_target_not_in_sources(config)

    locator = locator or JavaToolLocator()
    runner = runner or SubprocessRunner()

    command = (*locator.resolve(), *build_arguments(config))
    command_line = shlex.join(command)
    logger.debug("running %s", command_line)
    outcome = runner.run(command)
    if outcome.exit_code != 0:
        logger.info("compiler exited with status %d", outcome.exit_code)

    report_written = False
    if config.debug:
        reporter = reporter or DebugReportWriter()
        try:
            reporter.report(config, command_line, outcome.lines)
            report_written = True
        except ReportError:
            logger.warning(
                "debug report for %s skipped",
                config.target_file_name,
                exc_info=True,
            )

    return InvocationResult(
        exit_code=outcome.exit_code,
        output=outcome.output,
        command=command,
        target_path=config.target_file_name,
        report_written=report_written,
    )
