"""Formatting helpers for the debug report appended to compiled output."""

from __future__ import annotations

import os
from collections.abc import Sequence

SEPARATOR_WIDTH = 50
_MIN_SUFFIX = ".min.js"
_RAW_SUFFIX = ".raw.js"


def debug_line(text: str) -> str:
    """Format one line of the comment block."""
    return f" * {text}\n"


def debug_separator(size: int = SEPARATOR_WIDTH) -> str:
    """Format a dashed separator line."""
    return debug_line("- " * size)


def raw_file_name(target_file_name: str) -> str:
    """Return the path of the transient concatenated-sources file.

    ``app.min.js`` maps to ``app.raw.js``. Targets without a ``.min.js``
    suffix get ``.raw.js`` appended so the compiled file is never clobbered.
    """
    if target_file_name.endswith(_MIN_SUFFIX):
        return target_file_name[: -len(_MIN_SUFFIX)] + _RAW_SUFFIX
    return target_file_name + _RAW_SUFFIX


def saved_percent(raw_size: int, min_size: int) -> float:
    """Return the size reduction in percent; ``0.0`` for an empty input."""
    if raw_size <= 0:
        return 0.0
    return 100 - (min_size * 100) / raw_size


def format_files(source_file_names: Sequence[str]) -> str:
    """List the compiled source files."""
    block = debug_line(f"{len(source_file_names)} file(s):")
    for path in source_file_names:
        block += debug_line(f" - {os.path.basename(path)} - {path}")
    return block


def format_size_diff(raw_size: int, min_size: int) -> str:
    """Compare raw and compiled sizes."""
    return (
        debug_line(f"Original size: {raw_size}")
        + debug_line(f"Compiled size: {min_size}")
        + debug_line(f"Saved: {saved_percent(raw_size, min_size):.2f}%")
    )


def format_command(command: str, output_lines: Sequence[str]) -> str:
    """Echo the invoked command and the last line the tool printed."""
    last_line = output_lines[-1] if output_lines else ""
    return (
        debug_line("Closure Compiler command:")
        + debug_line(command)
        + debug_line("Output:")
        + debug_line(last_line)
    )


def format_settings(language_in: str, compilation_level: str) -> str:
    """Describe the active language and optimization settings."""
    return debug_line(f"Language in: {language_in}") + debug_line(
        f"Compilation level: {compilation_level}"
    )


def render_debug_report(
    *,
    source_file_names: Sequence[str],
    raw_size: int,
    min_size: int,
    command: str,
    output_lines: Sequence[str],
    language_in: str,
    compilation_level: str,
) -> str:
    """Render the full ``/* ... */`` debug block.

    Parameters
    ----------
    source_file_names : Sequence[str]
        Resolved source paths in bundle order.
    raw_size : int
        Size in bytes of the concatenated, uncompiled sources.
    min_size : int
        Size in bytes of the compiled output.
    command : str
        Command line that produced the output.
    output_lines : Sequence[str]
        Captured tool output, one entry per line.
    language_in : str
        Active input language mode.
    compilation_level : str
        Active optimization level.

    Returns
    -------
    str
        Comment block ready to be appended to a JavaScript file.
    """
    return (
        "/*\n"
        + format_files(source_file_names)
        + debug_separator()
        + format_size_diff(raw_size, min_size)
        + debug_separator()
        + format_command(command, output_lines)
        + debug_separator()
        + format_settings(language_in, compilation_level)
        + " */"
    )
