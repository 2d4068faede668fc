"""Model for a discovered conformance test."""

from dataclasses import dataclass
from pathlib import Path

from test262_harness.models.description import TestDescription


@dataclass(frozen=True, kw_only=True)
class Test:
    """A single test file together with its parsed frontmatter."""

    __test__ = False

    path: Path
    content: str
    description: TestDescription
