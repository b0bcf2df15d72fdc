"""Typed option objects shared across compile use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from closure_compiler.types import (
    DEFAULT_COMPILATION_LEVEL,
    DEFAULT_LANGUAGE_IN,
    DEFAULT_TARGET_FILE_NAME,
    CompilationLevel,
    LanguageIn,
)


@dataclass(frozen=True)
class CompilerConfig:
    """Immutable snapshot of one compiler invocation's configuration.

    Base directories are either empty or end with exactly one path separator.
    ``source_file_names`` holds resolved paths (base dir already applied) in
    bundle order, without duplicates.
    """

    source_base_dir: str = ""
    target_base_dir: str = ""
    debug: bool = False
    language_in: LanguageIn = DEFAULT_LANGUAGE_IN
    compilation_level: CompilationLevel = DEFAULT_COMPILATION_LEVEL
    source_file_names: tuple[str, ...] = ()
    target_file_name: str = DEFAULT_TARGET_FILE_NAME
