"""Mutable builder producing immutable compiler configurations."""

from __future__ import annotations

import os
from collections.abc import Iterable

from closure_compiler.application.options import CompilerConfig
from closure_compiler.application.results import SetterResult
from closure_compiler.errors import ConfigurationError
from closure_compiler.types import (
    COMPILATION_LEVEL_VALUES,
    LANGUAGE_IN_VALUES,
    CompilationLevel,
    LanguageIn,
)

_SEPARATORS = "/" + os.sep


def normalize_base_dir(path: str | os.PathLike[str]) -> str:
    """Validate a base directory and normalize its trailing separator.

    Parameters
    ----------
    path : str | os.PathLike[str]
        Directory path, or the empty string to clear the base dir.

    Returns
    -------
    str
        ``""`` for an empty path, otherwise the path ending with exactly one
        separator.

    Raises
    ------
    ConfigurationError
        If a non-empty path does not exist.
    """
    raw = os.fspath(path)
    if not raw:
        return ""
    if not os.path.exists(raw):
        raise ConfigurationError(f"The path '{raw}' does not seem to exist.")
    return raw.rstrip(_SEPARATORS) + os.sep


def resolve_target_file_name(config: CompilerConfig) -> str:
    """Apply the target base dir to a bare target filename.

    A target that already carries a directory component is returned as-is.
    """
    target = config.target_file_name
    if config.target_base_dir and os.path.basename(target) == target:
        return config.target_base_dir + target
    return target


class CompilerConfigBuilder:
    """Accumulate configuration through setters and snapshot it on demand.

    Path setters raise :class:`ConfigurationError`; option setters return a
    :class:`SetterResult` and leave the stored value unchanged on rejection.
    """

    def __init__(self, config: CompilerConfig | None = None) -> None:
        base = config or CompilerConfig()
        self._source_base_dir = base.source_base_dir
        self._target_base_dir = base.target_base_dir
        self._debug = base.debug
        self._language_in: LanguageIn = base.language_in
        self._compilation_level: CompilationLevel = base.compilation_level
        self._source_file_names: list[str] = list(base.source_file_names)
        self._target_file_name = base.target_file_name

    def build(self) -> CompilerConfig:
        """Return an immutable snapshot of the current configuration."""
        return CompilerConfig(
            source_base_dir=self._source_base_dir,
            target_base_dir=self._target_base_dir,
            debug=self._debug,
            language_in=self._language_in,
            compilation_level=self._compilation_level,
            source_file_names=tuple(self._source_file_names),
            target_file_name=self._target_file_name,
        )

    def set_source_base_dir(self, path: str | os.PathLike[str] = "") -> None:
        """Set the directory that source file names are resolved against."""
        self._source_base_dir = normalize_base_dir(path)

    def set_target_base_dir(self, path: str | os.PathLike[str] = "") -> None:
        """Set the directory that the target file name is resolved against."""
        self._target_base_dir = normalize_base_dir(path)

    def clear_source_files(self) -> None:
        """Delete all entries from the list of source files."""
        self._source_file_names.clear()

    def add_source_file(self, name: str) -> None:
        """Append ``source_base_dir + name`` unless it is already listed.

        Raises
        ------
        ConfigurationError
            If the resolved path does not exist.
        """
        path = self._source_base_dir + name
        if path in self._source_file_names:
            return
        if not os.path.exists(path):
            raise ConfigurationError(f"The path '{path}' does not seem to exist.")
        self._source_file_names.append(path)

    def set_source_files(self, names: Iterable[str], reset: bool = True) -> None:
        """Add several source files in order, optionally clearing the list first.

        Not atomic: a missing file leaves the entries before it in place.
        """
        if reset:
            self.clear_source_files()
        for name in names:
            self.add_source_file(name)

    def remove_source_file(self, name: str) -> None:
        """Remove ``source_base_dir + name`` if present."""
        path = self._source_base_dir + name
        if path in self._source_file_names:
            self._source_file_names.remove(path)

    def set_target_file(self, name: str) -> None:
        """Set the compiled output path; the file does not need to exist."""
        self._target_file_name = self._target_base_dir + name

    def resolve_target(self) -> str:
        """Apply the target base dir to a bare target name in place."""
        self._target_file_name = resolve_target_file_name(self.build())
        return self._target_file_name

    def set_language_in(self, value: str) -> SetterResult:
        """Set the input language mode if ``value`` is a supported one."""
        if value not in LANGUAGE_IN_VALUES:
            return SetterResult.rejected(
                f"Unsupported language_in '{value}'. "
                f"Expected one of: {', '.join(LANGUAGE_IN_VALUES)}"
            )
        self._language_in = value  # type: ignore[assignment]
        return SetterResult.accepted()

    def set_compilation_level(self, value: str) -> SetterResult:
        """Set the optimization level if ``value`` is a supported one."""
        if value not in COMPILATION_LEVEL_VALUES:
            return SetterResult.rejected(
                f"Unsupported compilation_level '{value}'. "
                f"Expected one of: {', '.join(COMPILATION_LEVEL_VALUES)}"
            )
        self._compilation_level = value  # type: ignore[assignment]
        return SetterResult.accepted()

    def set_debug(self, value: object) -> SetterResult:
        """Enable or disable debug output; only real booleans are accepted."""
        if not isinstance(value, bool):
            return SetterResult.rejected(
                f"debug must be a boolean, got {type(value).__name__}."
            )
        self._debug = value
        return SetterResult.accepted()
