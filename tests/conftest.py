"""Shared fixtures for harness tests."""

from pathlib import Path
from typing import Protocol

import pytest

VALID_FRONTMATTER = """/*---
description: valid test
---*/
"""


class WriteFileFn(Protocol):
    """Protocol for test file creation function."""

    def __call__(self, relative_path: str, content: str = VALID_FRONTMATTER) -> Path:
        """Write a file below the test root and return its path."""


@pytest.fixture
def test_root(tmp_path: Path) -> Path:
    """Create an empty test root directory."""
    root = tmp_path / "test"
    root.mkdir()
    return root


@pytest.fixture
def write_file(test_root: Path) -> WriteFileFn:
    """Return a function to create files below the test root."""

    def _write(relative_path: str, content: str = VALID_FRONTMATTER) -> Path:
        path = test_root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
