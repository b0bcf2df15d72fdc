"""Unit tests for the one-call compile API and its input validation."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

import pytest

import closure_compiler
from closure_compiler import api as api_module
from closure_compiler.application.results import InvocationResult, ProcessOutcome
from closure_compiler.errors import ConfigurationError


class _Locator:
    def resolve(self) -> tuple[str, ...]:
        return ("java", "-jar", "compiler.jar")


class _Runner:
    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []

    def run(self, args: Sequence[str]) -> ProcessOutcome:
        self.calls.append(tuple(args))
        return ProcessOutcome(exit_code=0, output="")


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("language_in", "ES2020"),
        ("compilation_level", "EXTREME"),
        ("target_file", "   "),
    ],
)
def test_invalid_options_raise(field: str, value: str, source_dir: Path) -> None:
    """Every invalid option raises instead of returning a flag."""
    runner = _Runner()
    with pytest.raises(ConfigurationError, match="Invalid compile parameters"):
        api_module.compile_javascript(
            ["a.js"],
            source_base_dir=str(source_dir),
            locator=_Locator(),
            runner=runner,
            **{field: value},
        )
    assert runner.calls == []


def test_empty_source_name_rejected(source_dir: Path) -> None:
    with pytest.raises(ConfigurationError):
        api_module.compile_javascript(
            ["a.js", ""],
            source_base_dir=str(source_dir),
            locator=_Locator(),
            runner=_Runner(),
        )


def test_missing_source_raises(source_dir: Path) -> None:
    with pytest.raises(ConfigurationError, match="does not seem to exist"):
        api_module.compile_javascript(
            ["missing.js"],
            source_base_dir=str(source_dir),
            locator=_Locator(),
            runner=_Runner(),
        )


def test_compile_javascript_builds_full_command(
    source_dir: Path, target_dir: Path
) -> None:
    runner = _Runner()
    result = api_module.compile_javascript(
        ["b.js", "a.js"],
        source_base_dir=str(source_dir),
        target_base_dir=str(target_dir),
        target_file="bundle.min.js",
        language_in="ECMASCRIPT5",
        compilation_level="SIMPLE_OPTIMIZATIONS",
        locator=_Locator(),
        runner=runner,
    )
    base = str(source_dir) + os.sep
    target = str(target_dir) + os.sep + "bundle.min.js"
    assert result.exit_code == 0
    assert result.target_path == target
    assert runner.calls == [
        (
            "java",
            "-jar",
            "compiler.jar",
            "--compilation_level=SIMPLE_OPTIMIZATIONS",
            "--language_in=ECMASCRIPT5",
            f"--js={base}b.js",
            f"--js={base}a.js",
            f"--js_output_file={target}",
        )
    ]


def test_package_level_wrapper_delegates(monkeypatch: pytest.MonkeyPatch) -> None:
    """The top-level function forwards every option to the API module."""
    seen: dict[str, object] = {}
    expected = InvocationResult(
        exit_code=0, output="", command=("java",), target_path="compiled.js"
    )

    def fake_compile(source_files: list[str], **kwargs: object) -> InvocationResult:
        seen["source_files"] = list(source_files)
        seen.update(kwargs)
        return expected

    monkeypatch.setattr(api_module, "compile_javascript", fake_compile)
    result = closure_compiler.compile_javascript(["a.js"], debug=True)

    assert result is expected
    assert seen == {
        "source_files": ["a.js"],
        "source_base_dir": "",
        "target_base_dir": "",
        "target_file": "compiled.js",
        "language_in": "ECMASCRIPT3",
        "compilation_level": "WHITESPACE_ONLY",
        "debug": True,
    }


def test_package_exports_version() -> None:
    assert closure_compiler.__version__
