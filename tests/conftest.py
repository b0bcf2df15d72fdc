"""Shared pytest configuration and marker assignment."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

CONSOLE_SCRIPT = "closure-compile"


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path.

    End-to-end tests need the installed console script and are skipped when
    it is not on ``PATH``.
    """
    del config
    script_missing = shutil.which(CONSOLE_SCRIPT) is None
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
            if script_missing:
                item.add_marker(
                    pytest.mark.skip(reason=f"{CONSOLE_SCRIPT} is not installed")
                )
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)
