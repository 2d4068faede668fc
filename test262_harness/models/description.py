"""Models for the metadata block at the top of each test file."""

from collections.abc import Sequence
from enum import StrEnum

from pydantic import Field

from test262_harness.models.base import Model


class Phase(StrEnum):
    """Stage at which a negative test is expected to fail."""

    PARSE = "parse"
    EARLY = "early"
    RESOLUTION = "resolution"
    RUNTIME = "runtime"


class Flag(StrEnum):
    """Execution-mode directive declared in the ``flags`` list."""

    ONLY_STRICT = "onlyStrict"
    NO_STRICT = "noStrict"
    MODULE = "module"
    RAW = "raw"
    ASYNC = "async"
    GENERATED = "generated"
    CAN_BLOCK_IS_FALSE = "CanBlockIsFalse"
    CAN_BLOCK_IS_TRUE = "CanBlockIsTrue"
    NON_DETERMINISTIC = "non-deterministic"


class Negative(Model):
    """How a test that is expected to fail should fail."""

    phase: Phase = Field(..., description="Stage at which the failure occurs")
    kind: str | None = Field(
        default=None,
        alias="type",
        description="Name of the expected error constructor (e.g. SyntaxError)",
    )


class TestDescription(Model):
    """Parsed frontmatter of a test file."""

    __test__ = False

    id: str | None = None
    esid: str | None = None
    es5id: str | None = None
    es6id: str | None = None
    description: str | None = Field(
        default=None, description="Short summary of what the test checks"
    )
    info: str | None = Field(default=None, description="Free-form notes")
    negative: Negative | None = Field(
        default=None, description="Present only when the test is expected to fail"
    )
    includes: Sequence[str] = Field(
        default_factory=list, description="Helper files from the harness directory"
    )
    flags: frozenset[Flag] = Field(default_factory=frozenset)
    features: Sequence[str] = Field(
        default_factory=list, description="Language features the test depends on"
    )
    locale: Sequence[str] = Field(
        default_factory=list, description="Locales the test expects to be available"
    )

    @property
    def is_negative(self) -> bool:
        """Whether the test is expected to fail."""
        return self.negative is not None

    @property
    def is_module(self) -> bool:
        """Whether the test must be evaluated as module code."""
        return Flag.MODULE in self.flags

    @property
    def is_async(self) -> bool:
        """Whether completion is signalled asynchronously."""
        return Flag.ASYNC in self.flags

    @property
    def is_raw(self) -> bool:
        """Whether the source must run unmodified, without any includes."""
        return Flag.RAW in self.flags

    @property
    def runs_strict(self) -> bool:
        """Whether the test should be run in strict mode.

        Module code is always strict. Conflicting flags are not rejected here:
        ``onlyStrict`` together with ``noStrict`` yields ``True`` for both
        ``runs_strict`` and ``runs_non_strict``.
        """
        if self.is_module or Flag.ONLY_STRICT in self.flags:
            return True
        return not (Flag.NO_STRICT in self.flags or self.is_raw)

    @property
    def runs_non_strict(self) -> bool:
        """Whether the test should be run in sloppy mode."""
        if Flag.NO_STRICT in self.flags or self.is_raw:
            return True
        return not (self.is_module or Flag.ONLY_STRICT in self.flags)
