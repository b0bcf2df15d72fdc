#!/usr/bin/env python3
"""
closure_compiler.cli.cli

Typer-based CLI for bundling and minifying JavaScript with Closure Compiler.

The compiler itself is not bundled: a Java runtime must be on ``PATH`` and
``compiler.jar`` must be available (``$CLOSURE_COMPILER_JAR`` or
``compiler-latest/compiler.jar`` in the package directory).

Examples
--------
Minify two files into ``dist/app.min.js``:

    closure-compile compile a.js b.js --source-base-dir src \\
        --target-base-dir dist -o app.min.js

Check the toolchain:

    closure-compile doctor
"""

from __future__ import annotations

import logging
import sys
import traceback

import typer

from closure_compiler.errors import ClosureCompilerError
from closure_compiler.types import COMPILATION_LEVEL_VALUES, LANGUAGE_IN_VALUES

app = typer.Typer(
    name="closure-compile",
    help="Bundle and minify JavaScript with Google's Closure Compiler.",
    no_args_is_help=True,
)

LANGUAGE_IN_HELP = f"Input language mode: {', '.join(LANGUAGE_IN_VALUES)}."
COMPILATION_LEVEL_HELP = f"Optimization level: {', '.join(COMPILATION_LEVEL_VALUES)}."


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised while compiling.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"[red]✗ {type(exc).__name__}:[/red] {exc}", err=True)
    if debug:
        typer.echo("\n[dim]Traceback:[/dim]", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    verbose : bool, default=False
        Whether to log the compiler command and report diagnostics.
    """
    _configure_logging(verbose)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("compile")
def compile_cmd(
    ctx: typer.Context,
    sources: list[str] = typer.Argument(
        ...,
        help="Source files in bundle order, relative to --source-base-dir.",
    ),
    source_base_dir: str = typer.Option(
        "", "--source-base-dir", help="Directory the source names are resolved against."
    ),
    target_base_dir: str = typer.Option(
        "", "--target-base-dir", help="Directory the output name is resolved against."
    ),
    output: str = typer.Option(
        "compiled.js", "--output", "-o", help="Name of the compiled output file."
    ),
    language_in: str = typer.Option(
        "ECMASCRIPT3", "--language-in", help=LANGUAGE_IN_HELP
    ),
    compilation_level: str = typer.Option(
        "WHITESPACE_ONLY", "--compilation-level", help=COMPILATION_LEVEL_HELP
    ),
    debug_report: bool = typer.Option(
        False,
        "--debug-report",
        help="Pretty-print output and append a size/command report to it.",
    ),
) -> None:
    """Compile JavaScript sources into one minified file.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    sources : list[str]
        Source file names in bundle order.
    output : str, default="compiled.js"
        Output file name, resolved against ``--target-base-dir``.
    debug_report : bool, default=False
        Whether to append the debug report to the output.

    Notes
    -----
    - Exits with the compiler's own exit code.
    - Configuration and toolchain problems exit non-zero before the compiler runs.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from closure_compiler.api import compile_javascript

        result = compile_javascript(
            sources,
            source_base_dir=source_base_dir,
            target_base_dir=target_base_dir,
            target_file=output,
            language_in=language_in,
            compilation_level=compilation_level,
            debug=debug_report,
        )
    except ClosureCompilerError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_error(exc, debug))

    if result.output:
        typer.echo(result.output)
    if result.succeeded:
        typer.echo(f"[green]✓ Saved:[/green] {result.target_path}")
    else:
        typer.echo(
            f"[red]✗ Compiler exited with status {result.exit_code}[/red]", err=True
        )
    raise typer.Exit(code=result.exit_code)


@app.command("doctor")
def doctor_cmd() -> None:
    """Print Python version and the resolved compiler toolchain."""
    import shutil

    from closure_compiler.adapters.locator import (
        default_compiler_jar,
        default_java_executable,
    )

    typer.echo(f"Python: {sys.version.split()[0]}")
    java_name = default_java_executable()
    java = shutil.which(java_name)
    typer.echo(f"{java_name}: {java or '<not found in PATH>'}")
    jar = default_compiler_jar().resolve()
    status = "ok" if jar.is_file() else "<missing>"
    typer.echo(f"compiler.jar: {jar} ({status})")


if __name__ == "__main__":
    app()
