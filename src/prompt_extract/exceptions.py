from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PromptExtractError(Exception):
    """Base exception for errors in the prompt_extract module."""

    message: str = "prompt_extract failed."

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class MissingArgumentError(PromptExtractError):
    """Raised when no directory is given on the command line."""

    message: str = "Usage: prompt-extract <directory-path>"


@dataclass(frozen=True)
class InvalidDirectoryError(PromptExtractError):
    """Raised when the target path does not exist or is not a directory."""

    folder: Path = Path()
    message: str = "The specified path is not a directory."

    def __str__(self) -> str:
        return f"Invalid directory: {self.folder}"
