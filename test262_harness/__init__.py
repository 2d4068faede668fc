"""Discover test262-style conformance tests and parse their frontmatter."""

from test262_harness.config import HarnessConfig
from test262_harness.errors import (
    ExtractError,
    HarnessError,
    InitError,
    MalformedDocumentError,
    NoMetadataBlockError,
    ParseError,
    ReadError,
    UnknownFlagError,
    UnknownPhaseError,
    UnterminatedMetadataBlockError,
)
from test262_harness.extractor import extract_frontmatter
from test262_harness.file_enumerator import enumerate_test_files
from test262_harness.harness import Harness
from test262_harness.models.description import Flag, Negative, Phase, TestDescription
from test262_harness.models.test import Test
from test262_harness.parser import parse_description

__all__ = [
    "ExtractError",
    "Flag",
    "Harness",
    "HarnessConfig",
    "HarnessError",
    "InitError",
    "MalformedDocumentError",
    "Negative",
    "NoMetadataBlockError",
    "ParseError",
    "Phase",
    "ReadError",
    "Test",
    "TestDescription",
    "UnknownFlagError",
    "UnknownPhaseError",
    "UnterminatedMetadataBlockError",
    "enumerate_test_files",
    "extract_frontmatter",
    "parse_description",
]
