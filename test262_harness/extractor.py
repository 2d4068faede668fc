"""Locate the frontmatter block inside a test file."""

from test262_harness.errors import NoMetadataBlockError, UnterminatedMetadataBlockError

START_MARKER = "/*---"
END_MARKER = "---*/"


def extract_frontmatter(content: str) -> str:
    """Return the text between the first frontmatter start marker and its end.

    Only the first block is considered. Whitespace inside the block is kept
    as is.

    Raises:
        NoMetadataBlockError: If ``content`` has no start marker
        UnterminatedMetadataBlockError: If no end marker follows the start marker

    """
    start = content.find(START_MARKER)
    if start == -1:
        raise NoMetadataBlockError(f"No {START_MARKER!r} marker found")

    body_start = start + len(START_MARKER)
    end = content.find(END_MARKER, body_start)
    if end == -1:
        raise UnterminatedMetadataBlockError(
            f"No {END_MARKER!r} marker found after {START_MARKER!r}"
        )

    return content[body_start:end]
