"""Exceptions raised while discovering and loading test files."""

from pathlib import Path


class HarnessError(Exception):
    """Base class for all harness errors.

    ``path`` names the test file the error belongs to, when there is one.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is None:
            return message
        return f"{self.path}: {message}"


class InitError(HarnessError):
    """Raised when the test root is missing or is not a readable directory."""


class ReadError(HarnessError):
    """Raised when a discovered test file cannot be read."""


class ExtractError(HarnessError):
    """Raised when a file does not follow the frontmatter block convention."""


class NoMetadataBlockError(ExtractError):
    """Raised when a file has no frontmatter start marker."""


class UnterminatedMetadataBlockError(ExtractError):
    """Raised when a frontmatter block is opened but never closed."""


class ParseError(HarnessError):
    """Raised when frontmatter content does not match the descriptor schema."""


class MalformedDocumentError(ParseError):
    """Raised when frontmatter is not a valid YAML mapping of known shape."""


class UnknownFlagError(ParseError):
    """Raised when ``flags`` contains a token outside the known set."""

    def __init__(self, token: str, *, path: Path | None = None) -> None:
        super().__init__(f"Unknown flag: {token!r}", path=path)
        self.token = token


class UnknownPhaseError(ParseError):
    """Raised when ``negative.phase`` is not a known phase."""

    def __init__(self, token: str, *, path: Path | None = None) -> None:
        super().__init__(f"Unknown phase: {token!r}", path=path)
        self.token = token
