"""Pydantic schemas for runtime validation of compile requests."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from closure_compiler.types import (
    DEFAULT_COMPILATION_LEVEL,
    DEFAULT_LANGUAGE_IN,
    DEFAULT_TARGET_FILE_NAME,
    CompilationLevel,
    LanguageIn,
)


class CompileRequest(BaseModel):
    """Validated input for a one-shot compile."""

    model_config = ConfigDict(extra="forbid")

    source_files: list[str] = Field(default_factory=list)
    source_base_dir: str = ""
    target_base_dir: str = ""
    target_file: str = DEFAULT_TARGET_FILE_NAME
    language_in: LanguageIn = DEFAULT_LANGUAGE_IN
    compilation_level: CompilationLevel = DEFAULT_COMPILATION_LEVEL
    debug: bool = False

    @field_validator("source_files")
    @classmethod
    def _validate_source_files(cls, value: list[str]) -> list[str]:
        if any(not item.strip() for item in value):
            raise ValueError("source file names cannot be empty.")
        return value

    @field_validator("target_file")
    @classmethod
    def _validate_target_file(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("target_file cannot be empty.")
        return value
