from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from prompt_extract.config import EXTENSIONS, IGNORE_PATTERNS, LINE_THRESHOLD

ENV_FILE = find_dotenv(usecwd=True)
LOG_FILE_ENV = "PROMPT_EXTRACT_LOG_FILE"

load_dotenv(ENV_FILE)


class Settings(BaseModel):
    """Configuration settings for the prompt_extract module."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    root: Path = Field(default_factory=Path.cwd, description="Directory to scan.")
    extensions: tuple[str, ...] = Field(
        default=EXTENSIONS,
        description="Accepted file extensions, without dot.",
    )
    ignore_patterns: tuple[str, ...] = Field(
        default=IGNORE_PATTERNS,
        description="Globs matched against the root-relative POSIX path.",
    )
    line_threshold: int = Field(
        default=LINE_THRESHOLD,
        gt=0,
        description="Files with more lines than this go through triage.",
    )
    log_file: str = Field(
        default_factory=lambda: os.environ.get(LOG_FILE_ENV, ""),
        description="Log file path.",
    )
