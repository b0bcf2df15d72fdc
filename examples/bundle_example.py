#!/usr/bin/env python3
"""Example: bundle a small script set with the stateful wrapper and the one-call API."""

from __future__ import annotations

import tempfile
from pathlib import Path

from closure_compiler import ClosureCompiler, compile_javascript
from closure_compiler.errors import ClosureCompilerError

SOURCES = {
    "util.js": "function add(a, b) {\n  return a + b;\n}\n",
    "main.js": "var total = add(1, 2);\nconsole.log('total', total);\n",
}


def _write_sources(root: Path) -> Path:
    src = root / "src"
    src.mkdir()
    for name, body in SOURCES.items():
        (src / name).write_text(body, encoding="utf-8")
    (root / "dist").mkdir()
    return src


def example_stateful(root: Path) -> None:
    """Configure step by step and append the debug report."""
    compiler = ClosureCompiler()
    compiler.set_source_base_dir(root / "src")
    compiler.set_target_base_dir(root / "dist")
    compiler.set_source_files(["util.js", "main.js"])
    compiler.set_target_file("app.min.js")
    if not compiler.set_compilation_level("SIMPLE_OPTIMIZATIONS"):
        raise SystemExit("FAIL: compilation level rejected.")
    compiler.set_debug(True)

    exit_code = compiler.compile()
    print(f"stateful exit code: {exit_code}")
    print(compiler.get_output())
    print(Path(compiler.get_target_file_name()).read_text(encoding="utf-8"))


def example_one_call(root: Path) -> None:
    """Validate everything up front and compile in one step."""
    result = compile_javascript(
        ["util.js", "main.js"],
        source_base_dir=str(root / "src"),
        target_base_dir=str(root / "dist"),
        target_file="app.es5.min.js",
        language_in="ECMASCRIPT5",
    )
    print(f"one-call exit code: {result.exit_code} -> {result.target_path}")


def main() -> None:
    with tempfile.TemporaryDirectory(prefix="closure-example-") as tmp:
        root = Path(tmp)
        _write_sources(root)
        try:
            example_stateful(root)
            example_one_call(root)
        except ClosureCompilerError as exc:
            raise SystemExit(f"FAIL: {exc}") from exc


if __name__ == "__main__":
    main()
