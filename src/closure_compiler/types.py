"""Shared type aliases and option domains for the compiler wrapper."""

from __future__ import annotations

from typing import Literal

type LanguageIn = Literal["ECMASCRIPT3", "ECMASCRIPT5", "ECMASCRIPT5_STRICT"]
type CompilationLevel = Literal[
    "WHITESPACE_ONLY",
    "SIMPLE_OPTIMIZATIONS",
    "ADVANCED_OPTIMIZATIONS",
]

LANGUAGE_IN_VALUES: tuple[str, ...] = (
    "ECMASCRIPT3",
    "ECMASCRIPT5",
    "ECMASCRIPT5_STRICT",
)
COMPILATION_LEVEL_VALUES: tuple[str, ...] = (
    "WHITESPACE_ONLY",
    "SIMPLE_OPTIMIZATIONS",
    "ADVANCED_OPTIMIZATIONS",
)

DEFAULT_LANGUAGE_IN: LanguageIn = "ECMASCRIPT3"
DEFAULT_COMPILATION_LEVEL: CompilationLevel = "WHITESPACE_ONLY"
DEFAULT_TARGET_FILE_NAME = "compiled.js"

DEBUG_FLAGS: tuple[str, ...] = (
    "--debug",
    "--formatting=PRETTY_PRINT",
    "--formatting=PRINT_INPUT_DELIMITER",
)
