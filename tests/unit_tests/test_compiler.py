"""Unit tests for the stateful ClosureCompiler wrapper."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

import pytest

from closure_compiler import ClosureCompiler
from closure_compiler.application.options import CompilerConfig
from closure_compiler.application.results import ProcessOutcome
from closure_compiler.errors import ConfigurationError


class _Locator:
    def __init__(self) -> None:
        self.calls = 0

    def resolve(self) -> tuple[str, ...]:
        self.calls += 1
        return ("java", "-jar", "compiler.jar")


class _Runner:
    def __init__(self, exit_code: int = 0, output: str = "") -> None:
        self.exit_code = exit_code
        self.output = output
        self.calls: list[tuple[str, ...]] = []

    def run(self, args: Sequence[str]) -> ProcessOutcome:
        self.calls.append(tuple(args))
        return ProcessOutcome(exit_code=self.exit_code, output=self.output)


class _Reporter:
    def __init__(self) -> None:
        self.calls = 0

    def report(
        self,
        config: CompilerConfig,
        command: str,
        output_lines: Sequence[str],
    ) -> None:
        del config, command, output_lines
        self.calls += 1


def _compiler(runner: _Runner | None = None) -> ClosureCompiler:
    return ClosureCompiler(
        locator=_Locator(),
        runner=runner or _Runner(),
        reporter=_Reporter(),
    )


def test_end_to_end_invocation_shape(source_dir: Path) -> None:
    """Sources in order, bare target with no target base dir, exit code unchanged."""
    runner = _Runner(exit_code=0, output="")
    compiler = _compiler(runner)
    compiler.set_source_base_dir(str(source_dir))
    compiler.add_source_file("a.js")
    compiler.add_source_file("b.js")
    compiler.set_target_file("out.js")

    assert compiler.compile() == 0
    base = str(source_dir) + os.sep
    (args,) = runner.calls
    assert args[3:] == (
        "--compilation_level=WHITESPACE_ONLY",
        "--language_in=ECMASCRIPT3",
        f"--js={base}a.js",
        f"--js={base}b.js",
        "--js_output_file=out.js",
    )


def test_non_zero_exit_code_is_returned_opaquely(source_dir: Path) -> None:
    compiler = _compiler(_Runner(exit_code=42, output="boom"))
    compiler.set_source_files([str(source_dir / "a.js")])
    assert compiler.compile() == 42
    assert compiler.get_output() == "boom"


def test_target_base_dir_resolution(target_dir: Path, source_dir: Path) -> None:
    """Target base plus a bare name resolves to base/name for the invocation."""
    runner = _Runner()
    compiler = _compiler(runner)
    compiler.set_source_base_dir(str(source_dir))
    compiler.add_source_file("a.js")
    compiler.set_target_base_dir(str(target_dir))
    compiler.set_target_file("app.js")
    expected = str(target_dir) + os.sep + "app.js"

    assert compiler.get_target_file_name() == expected
    compiler.compile()
    assert f"--js_output_file={expected}" in runner.calls[0]


def test_default_target_adopts_target_base_dir_on_compile(target_dir: Path) -> None:
    compiler = _compiler()
    compiler.set_target_base_dir(str(target_dir))
    result = compiler.compile_result()
    expected = str(target_dir) + os.sep + "compiled.js"
    assert result.target_path == expected
    assert compiler.get_target_file_name() == expected


def test_self_overwrite_guard(source_dir: Path) -> None:
    """Compiling onto a source raises before any process runs."""
    runner = _Runner()
    compiler = _compiler(runner)
    compiler.set_source_base_dir(str(source_dir))
    compiler.set_target_base_dir(str(source_dir))
    compiler.add_source_file("a.js")
    compiler.set_target_file("a.js")

    with pytest.raises(ConfigurationError, match="undesired effects"):
        compiler.compile()
    assert runner.calls == []
    assert compiler.last_result is None


def test_language_in_and_level_flow_into_command(source_dir: Path) -> None:
    runner = _Runner()
    compiler = _compiler(runner)
    compiler.set_source_files([str(source_dir / "a.js")])
    assert not compiler.set_language_in("INVALID")
    assert compiler.get_config().language_in == "ECMASCRIPT3"
    assert compiler.set_language_in("ECMASCRIPT5_STRICT")
    assert compiler.set_compilation_level("ADVANCED_OPTIMIZATIONS")
    compiler.compile()
    assert "--language_in=ECMASCRIPT5_STRICT" in runner.calls[0]
    assert "--compilation_level=ADVANCED_OPTIMIZATIONS" in runner.calls[0]


def test_debug_mode_adds_flags_and_reports(source_dir: Path) -> None:
    runner = _Runner()
    reporter = _Reporter()
    compiler = ClosureCompiler(locator=_Locator(), runner=runner, reporter=reporter)
    compiler.set_source_files([str(source_dir / "a.js")])
    assert compiler.set_debug(True)
    compiler.compile()
    assert runner.calls[0][-3:] == (
        "--debug",
        "--formatting=PRETTY_PRINT",
        "--formatting=PRINT_INPUT_DELIMITER",
    )
    assert reporter.calls == 1


def test_get_binary_and_compile_share_the_locator(source_dir: Path) -> None:
    locator = _Locator()
    compiler = ClosureCompiler(locator=locator, runner=_Runner(), reporter=_Reporter())
    compiler.set_source_files([str(source_dir / "a.js")])
    compiler.compile()
    compiler.compile()
    assert compiler.get_binary() == "java -jar compiler.jar"
    assert locator.calls == 3


def test_output_is_empty_before_first_compile() -> None:
    compiler = _compiler()
    assert compiler.get_output() == ""
    assert compiler.last_result is None


def test_output_is_replaced_by_next_compile(source_dir: Path) -> None:
    runner = _Runner(output="first")
    compiler = _compiler(runner)
    compiler.set_source_files([str(source_dir / "a.js")])
    compiler.compile()
    runner.output = "second"
    compiler.compile()
    assert compiler.get_output() == "second"


def test_initial_config_is_respected(source_dir: Path) -> None:
    config = CompilerConfig(
        source_file_names=(str(source_dir / "a.js"),),
        compilation_level="SIMPLE_OPTIMIZATIONS",
    )
    compiler = ClosureCompiler(
        locator=_Locator(), runner=_Runner(), reporter=_Reporter(), config=config
    )
    assert compiler.get_config() == config
