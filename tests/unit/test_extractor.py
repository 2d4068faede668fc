"""Tests for frontmatter extraction."""

import pytest

from test262_harness.errors import (
    ExtractError,
    NoMetadataBlockError,
    UnterminatedMetadataBlockError,
)
from test262_harness.extractor import extract_frontmatter

LICENSED_TEST = """// Copyright (C) 2017 the V8 project authors. All rights reserved.
// This code is governed by the BSD license found in the LICENSE file.

/*---
esid: sec-let-and-const-declarations
description: let declarations are block scoped
---*/

let x = 1;
"""


class TestExtractFrontmatter:
    """Tests for extract_frontmatter."""

    def test_returns_block_body(self) -> None:
        """Returns the text strictly between the markers."""
        body = extract_frontmatter(LICENSED_TEST)

        assert body == (
            "\nesid: sec-let-and-const-declarations\n"
            "description: let declarations are block scoped\n"
        )

    def test_preserves_whitespace(self) -> None:
        """Leading and trailing whitespace inside the block is kept."""
        assert extract_frontmatter("/*---  \n a: b \n\n---*/") == "  \n a: b \n\n"

    def test_returns_empty_body(self) -> None:
        """An empty block yields an empty string."""
        assert extract_frontmatter("/*------*/") == ""

    def test_uses_first_block(self) -> None:
        """Only the first block is considered."""
        content = "/*---\nfirst: 1\n---*/\n/*---\nsecond: 2\n---*/\n"

        assert extract_frontmatter(content) == "\nfirst: 1\n"

    def test_ignores_end_marker_before_start(self) -> None:
        """An end marker preceding the start marker is not used."""
        content = "// ---*/\n/*---\nkey: value\n---*/\n"

        assert extract_frontmatter(content) == "\nkey: value\n"

    def test_raises_without_start_marker(self) -> None:
        """Raises NoMetadataBlockError when there is no start marker."""
        with pytest.raises(NoMetadataBlockError):
            extract_frontmatter("var x = 1;\n/* plain comment */\n")

    def test_raises_for_empty_content(self) -> None:
        """Raises NoMetadataBlockError for empty content."""
        with pytest.raises(NoMetadataBlockError):
            extract_frontmatter("")

    def test_raises_without_end_marker(self) -> None:
        """Raises UnterminatedMetadataBlockError when the block is never closed."""
        with pytest.raises(UnterminatedMetadataBlockError):
            extract_frontmatter("/*---\ndescription: oops\n*/\nvar x;\n")

    def test_raises_when_only_end_marker_precedes(self) -> None:
        """An end marker before the start marker does not close the block."""
        with pytest.raises(UnterminatedMetadataBlockError):
            extract_frontmatter("---*/\n/*---\ndescription: oops\n")

    def test_errors_share_base_class(self) -> None:
        """Both failures are ExtractError subclasses."""
        with pytest.raises(ExtractError):
            extract_frontmatter("no block")
