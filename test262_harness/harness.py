"""Lazy loading of conformance tests from a test262-style directory tree."""

import logging
from collections.abc import Iterator
from pathlib import Path

from test262_harness.config import HarnessConfig
from test262_harness.errors import ExtractError, HarnessError, ParseError, ReadError
from test262_harness.extractor import extract_frontmatter
from test262_harness.file_enumerator import enumerate_test_files
from test262_harness.models.test import Test
from test262_harness.parser import parse_description

log = logging.getLogger(__name__)


class Harness:
    """Single-pass iterator over the tests found below a root directory.

    Each element is either a ``Test`` or the ``HarnessError`` describing why
    that file could not be loaded; a failing file never stops the iteration.
    Files are read one at a time as the iterator is consumed. Create a new
    ``Harness`` to iterate again.

    Example:
        for result in Harness("test262/test"):
            if isinstance(result, HarnessError):
                log.warning("%s", result)
                continue
            run(result)

    """

    def __init__(self, root: Path | str, config: HarnessConfig | None = None) -> None:
        """Open ``root`` for iteration.

        Raises:
            InitError: If ``root`` is not an accessible directory

        """
        self.root = Path(root)
        self.config = config or HarnessConfig()
        self._paths = enumerate_test_files(self.root, self.config)
        log.debug("Harness opened at %s", self.root)

    def __iter__(self) -> Iterator[Test | HarnessError]:
        return self

    def __next__(self) -> Test | HarnessError:
        path = next(self._paths)
        try:
            return self.load_test(path)
        except HarnessError as e:
            log.debug("Failed to load %s: %s", path, e)
            return e

    def tests(self) -> Iterator[Test]:
        """Yield only the tests that load successfully, logging the rest."""
        for result in self:
            if isinstance(result, HarnessError):
                log.warning("Skipping test: %s", result)
                continue
            yield result

    @staticmethod
    def load_test(path: Path) -> Test:
        """Read, extract and parse a single test file.

        Raises:
            ReadError: If the file cannot be read as UTF-8 text
            ExtractError: If the file has no well-formed frontmatter block
            ParseError: If the frontmatter does not match the descriptor schema

        """
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f"Cannot read test file: {e}", path=path) from e

        try:
            description = parse_description(extract_frontmatter(content))
        except (ExtractError, ParseError) as e:
            e.path = path
            raise

        log.debug("Loaded %s", path)
        return Test(path=path, content=content, description=description)
