"""Shared fixtures for unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Directory holding ``a.js``, ``b.js`` and ``c.js``."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.js").write_text("var a = 1;\n", encoding="utf-8")
    (src / "b.js").write_text("var b = 2;\n", encoding="utf-8")
    (src / "c.js").write_text("var c = 3;\n", encoding="utf-8")
    return src


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Empty output directory."""
    out = tmp_path / "out"
    out.mkdir()
    return out
