"""Parse frontmatter text into a TestDescription."""

from collections.abc import Mapping
from typing import Any

import yaml
from pydantic import ValidationError

from test262_harness.errors import (
    MalformedDocumentError,
    UnknownFlagError,
    UnknownPhaseError,
)
from test262_harness.models.description import Flag, Phase, TestDescription

FLAG_TOKENS: Mapping[str, Flag] = {
    **{flag.value: flag for flag in Flag},
    # Spellings found in older revisions of the test suite
    "canBlockIsFalse": Flag.CAN_BLOCK_IS_FALSE,
    "canBlockIsTrue": Flag.CAN_BLOCK_IS_TRUE,
    "nonDeterministic": Flag.NON_DETERMINISTIC,
}

PHASE_TOKENS: Mapping[str, Phase] = {phase.value: phase for phase in Phase}

_KEPT_RESOLVERS = {"tag:yaml.org,2002:null", "tag:yaml.org,2002:merge"}


class MetadataLoader(yaml.SafeLoader):
    """Safe loader that leaves plain scalars as strings.

    Identifiers such as ``es5id: 10.10`` or ``es6id: 2015`` must not become
    numbers; only ``null`` (and merge keys) are still resolved.
    """


MetadataLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp) for tag, regexp in resolvers if tag in _KEPT_RESOLVERS
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_description(frontmatter: str) -> TestDescription:
    """Parse the YAML body of a frontmatter block.

    Unknown top-level keys are ignored, but every flag and phase token must
    be known. Keys with a null value are treated as absent.

    Raises:
        MalformedDocumentError: If the text is not a YAML mapping of the
            expected shape
        UnknownFlagError: If ``flags`` contains an unknown token
        UnknownPhaseError: If ``negative.phase`` is not a known phase

    """
    document = load_document(frontmatter)
    fields = {key: value for key, value in document.items() if value is not None}

    if "flags" in fields:
        fields["flags"] = map_flags(fields["flags"])

    negative = fields.get("negative")
    if isinstance(negative, Mapping) and isinstance(negative.get("phase"), str):
        fields["negative"] = {**negative, "phase": map_phase(negative["phase"])}

    try:
        return TestDescription.model_validate(fields)
    except ValidationError as e:
        raise MalformedDocumentError(f"Invalid test description schema: {e}") from e


def load_document(frontmatter: str) -> Mapping[Any, Any]:
    """Load frontmatter text as a YAML mapping."""
    text = frontmatter.replace("\r\n", "\n").replace("\r", "\n")
    try:
        document = yaml.load(text, Loader=MetadataLoader)
    except yaml.YAMLError as e:
        raise MalformedDocumentError(f"Invalid YAML: {e}") from e
    # Constructors for explicit tags (e.g. `!!int abc`) raise plain exceptions
    except (ValueError, TypeError, AttributeError, RecursionError) as e:
        raise MalformedDocumentError(f"Invalid YAML: {e!r}") from e

    if document is None:
        raise MalformedDocumentError("Empty metadata block")
    if not isinstance(document, Mapping):
        raise MalformedDocumentError(
            f"Metadata block must be a mapping, got {type(document).__name__}"
        )
    return document


def map_flags(tokens: Any) -> frozenset[Flag]:
    """Map raw flag tokens onto Flag members, collapsing duplicates."""
    if not isinstance(tokens, list):
        raise MalformedDocumentError(
            f"'flags' must be a list, got {type(tokens).__name__}"
        )

    flags: set[Flag] = set()
    for token in tokens:
        if not isinstance(token, str):
            raise MalformedDocumentError(f"Flag must be a string, got {token!r}")
        if (flag := FLAG_TOKENS.get(token)) is None:
            raise UnknownFlagError(token)
        flags.add(flag)
    return frozenset(flags)


def map_phase(token: str) -> Phase:
    """Map a raw phase token onto a Phase member."""
    if (phase := PHASE_TOKENS.get(token)) is None:
        raise UnknownPhaseError(token)
    return phase
