from __future__ import annotations

from enum import StrEnum, auto
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, computed_field

EXTENSIONS: tuple[str, ...] = ("js", "ts", "jsx", "tsx")

IGNORE_PATTERNS: tuple[str, ...] = ("components/*.*", "*.svg")

TEST_FILE_MARKER = ".test."

LINE_THRESHOLD = 300

TRIM_MARKER = "..."


class PolicyMode(StrEnum):
    """Run-scoped state deciding whether long files trigger a prompt."""

    UNSET = auto()
    EXTRACT_ALL = auto()
    SKIP_ALL = auto()


class TriageAction(StrEnum):
    """Parsed meaning of an answer to the long-file prompt."""

    EXTRACT_ALL = auto()
    SKIP_ALL = auto()
    TRIM = auto()
    INVALID = auto()


class TriageResponse(BaseModel):
    """One answer to the long-file prompt.

    Attributes:
        action: What the answer asks for.
        lines: Number of raw lines to keep, only set for `TriageAction.TRIM`.
    """

    model_config = ConfigDict(frozen=True)

    action: TriageAction
    lines: int | None = Field(default=None, gt=0, description="Lines kept when trimming")


class TriagePolicy(BaseModel):
    """Mutable policy owned by a single triage run.

    The mode only ever leaves `PolicyMode.UNSET` once, towards one of the two
    terminal modes.
    """

    mode: PolicyMode = PolicyMode.UNSET


class FileCandidate(BaseModel):
    """A file found by the directory walk that passed the path filter.

    Attributes:
        path: Absolute path to the file on disk.
        rel: Path relative to the scan root, with POSIX separators.
        raw_line_count: Number of newline-separated lines before minimization.
        extension: File extension without the leading dot.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    path: Path = Field(..., description="Absolute file path")
    rel: str = Field(..., description="File path relative to the scan root")
    raw_line_count: int = Field(..., ge=1, description="Line count of the raw text")

    @computed_field
    @property
    def extension(self) -> str:
        """Extension of the file name, case preserved, without the dot."""
        return PurePosixPath(self.rel).suffix.removeprefix(".")


class ContentBlock(BaseModel):
    """One included file as it appears in the assembled output."""

    model_config = ConfigDict(frozen=True)

    rel: str
    text: str
