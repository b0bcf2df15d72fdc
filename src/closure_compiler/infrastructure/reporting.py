"""Debug report adapter: measures the bundle and appends a summary block."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from closure_compiler.application.options import CompilerConfig
from closure_compiler.errors import ReportError
from closure_compiler.report import raw_file_name, render_debug_report


def concatenate_sources(source_file_names: Sequence[str], raw_path: Path) -> None:
    """Concatenate raw sources into ``raw_path`` with ``cat``.

    An empty source list produces an empty file without running ``cat``.

    Raises
    ------
    ReportError
        If ``cat`` is unavailable or exits with a non-zero status.
    """
    cat = shutil.which("cat")
    if not cat:
        raise ReportError("cat could not be found in PATH.")
    if not source_file_names:
        raw_path.write_bytes(b"")
        return
    with raw_path.open("wb") as handle:
        completed = subprocess.run(
            [cat, *source_file_names],
            stdin=subprocess.DEVNULL,
            stdout=handle,
            stderr=subprocess.PIPE,
            check=False,
        )
    if completed.returncode != 0:
        raise ReportError(
            "Concatenating sources failed: "
            + completed.stderr.decode("utf-8", errors="replace").strip()
        )


class DebugReportWriter:
    """Default debug reporter appending to the compiled file."""

    def __init__(self, keep_raw_file: bool = False) -> None:
        self.keep_raw_file = keep_raw_file

    def report(
        self,
        config: CompilerConfig,
        command: str,
        output_lines: Sequence[str],
    ) -> None:
        """Append the debug block to ``config.target_file_name``.

        Parameters
        ----------
        config : CompilerConfig
            Configuration used for the run; the target must already be resolved.
        command : str
            Command line that was executed.
        output_lines : Sequence[str]
            Captured tool output.

        Raises
        ------
        ReportError
            If sizes cannot be measured or the target cannot be appended to.
        """
        target = Path(config.target_file_name)
        raw_path = Path(raw_file_name(config.target_file_name))
        try:
            concatenate_sources(config.source_file_names, raw_path)
            raw_size = raw_path.stat().st_size
            min_size = target.stat().st_size
            block = render_debug_report(
                source_file_names=config.source_file_names,
                raw_size=raw_size,
                min_size=min_size,
                command=command,
                output_lines=output_lines,
                language_in=config.language_in,
                compilation_level=config.compilation_level,
            )
            with target.open("a", encoding="utf-8") as handle:
                handle.write(block)
        except OSError as exc:
            raise ReportError(f"Could not write debug report: {exc}") from exc
        finally:
            if not self.keep_raw_file:
                raw_path.unlink(missing_ok=True)
