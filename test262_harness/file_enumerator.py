"""Discover test files below a root directory."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from test262_harness.config import HarnessConfig
from test262_harness.errors import InitError

log = logging.getLogger(__name__)


def check_root(root: Path) -> None:
    """Ensure ``root`` is a directory that can be listed.

    Raises:
        InitError: If the root is missing, not a directory, or unreadable

    """
    if not root.is_dir():
        raise InitError(f"Test root is not a directory: {root}")
    try:
        with os.scandir(root):
            pass
    except OSError as e:
        raise InitError(f"Cannot open test root {root}: {e}") from e


def enumerate_test_files(
    root: Path, config: HarnessConfig | None = None
) -> Iterator[Path]:
    """Lazily yield every test file below ``root``.

    The root is checked immediately; the tree itself is only walked as the
    returned iterator is consumed. Subdirectories that cannot be listed are
    skipped with a warning. Yield order is not guaranteed.

    Args:
        root: Directory to search
        config: Naming conventions for test files (defaults apply when omitted)

    Returns:
        Iterator over paths of test files, fixtures excluded.

    Raises:
        InitError: If the root cannot be opened as a directory

    """
    check_root(root)
    return _walk(root, config or HarnessConfig())


def _walk(root: Path, config: HarnessConfig) -> Iterator[Path]:
    for dirpath, _dirnames, filenames in root.walk(on_error=_skip_directory):
        for filename in filenames:
            path = dirpath / filename
            # Symlinked directories are listed as files when not followed
            if config.is_test_file(filename) and not path.is_dir():
                yield path


def _skip_directory(error: OSError) -> None:
    log.warning("Skipping unreadable directory %s: %s", error.filename, error.strerror)
