from __future__ import annotations

import os
import re
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from prompt_extract.config import EXTENSIONS, IGNORE_PATTERNS, TEST_FILE_MARKER, FileCandidate

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

_WHITESPACE_RUN = re.compile(r"\s+")


def relpath(path: Path, root: Path) -> str:
    """Send the relative path of path from root.

    Args:
        path (Path): the path to "relativise"
        root (Path): the root to relativise from

    Returns:
        str: the relative path from root to path, with POSIX separators.
    """
    return os.path.relpath(path, root).replace("\\", "/")


def file_extension(name: str) -> str:
    """Return the extension of a file name without its leading dot (case preserved)."""
    return PurePosixPath(name).suffix.removeprefix(".")


def has_valid_extension(name: str, extensions: Sequence[str] = EXTENSIONS) -> bool:
    """Check the extension allow-list for a file name.

    Test files (any name containing ".test.") are rejected whatever their extension.

    Args:
        name (str): the bare file name
        extensions (Sequence[str]): accepted extensions, without dot

    Returns:
        bool: True if the extension is accepted and the file is not a test file
    """
    return file_extension(name) in extensions and TEST_FILE_MARKER not in name


def match_any_glob(rel: str, globs: Sequence[str]) -> bool:
    """Check if a relative path matches any of the provided glob patterns.

    `*` never crosses a "/" so "*.svg" only matches at the top level,
    while "**" spans any number of directories.

    Args:
        rel (str): the relative POSIX path to check
        globs (Sequence[str]): the glob patterns to match against

    Returns:
        bool: True if `rel` matches any pattern in `globs`, False otherwise
    """
    candidate = PurePosixPath(rel)
    return any(candidate.full_match(g) for g in globs)


def is_ignored(path: Path, root: Path, patterns: Sequence[str] = IGNORE_PATTERNS) -> bool:
    """Check whether a file is excluded by one of the ignore globs.

    Args:
        path (Path): the file to check
        root (Path): the scan root the globs are relative to
        patterns (Sequence[str]): the ignore globs

    Returns:
        bool: True if the root-relative path matches an ignore glob
    """
    return match_any_glob(relpath(path, root), patterns)


def is_eligible(
    path: Path,
    root: Path,
    *,
    extensions: Sequence[str] = EXTENSIONS,
    ignore_patterns: Sequence[str] = IGNORE_PATTERNS,
) -> bool:
    """Decide whether a discovered file is extracted at all.

    Args:
        path (Path): the file to check
        root (Path): the scan root
        extensions (Sequence[str]): accepted extensions, without dot
        ignore_patterns (Sequence[str]): globs relative to `root` that exclude a file

    Returns:
        bool: True if the extension is accepted and no ignore glob matches
    """
    return has_valid_extension(path.name, extensions) and not is_ignored(path, root, ignore_patterns)


def walk_files(
    root: Path,
    *,
    extensions: Sequence[str] = EXTENSIONS,
    ignore_patterns: Sequence[str] = IGNORE_PATTERNS,
) -> Iterator[Path]:
    """Walk the directory tree rooted at `root` and yield eligible files.

    Entries are visited in the order the filesystem lists them, and each
    subdirectory is descended into where it appears in its parent's listing.
    Every subdirectory is visited; ignore globs only apply to files.

    Args:
        root (Path): the root directory to walk
        extensions (Sequence[str]): accepted extensions, without dot
        ignore_patterns (Sequence[str]): globs relative to `root` that exclude a file

    Yields:
        Iterator[Path]: eligible files in discovery order

    Raises:
        OSError: if a directory cannot be listed.
    """

    def walk(current: Path) -> Iterator[Path]:
        with os.scandir(current) as it:
            entries = list(it)
        for entry in entries:
            p = current / entry.name
            if entry.is_dir(follow_symlinks=False):
                yield from walk(p)
            elif is_eligible(p, root, extensions=extensions, ignore_patterns=ignore_patterns):
                yield p

    yield from walk(root)


def read_text(path: Path) -> str:
    """Read a source file as UTF-8, replacing undecodable bytes.

    Raises:
        OSError: if the file cannot be read.
    """
    return path.read_text(encoding="utf-8", errors="replace")


def split_raw_lines(text: str) -> list[str]:
    """Split raw text on newlines; a trailing newline yields a final empty line."""
    return text.split("\n")


def make_candidate(path: Path, root: Path, text: str) -> FileCandidate:
    """Build the FileCandidate for a file whose raw text is already loaded."""
    return FileCandidate(
        path=path,
        rel=relpath(path, root),
        raw_line_count=len(split_raw_lines(text)),
    )


def normalize_content(text: str) -> str:
    """Collapse a text into a single whitespace-normalized line.

    Args:
        text (str): the raw text

    Returns:
        str: the text with every whitespace run replaced by one space, stripped
    """
    return _WHITESPACE_RUN.sub(" ", text).strip()


def trim_lines(text: str, lines: int, marker: str) -> str:
    """Keep the first `lines` raw lines of a text and append `marker` as an extra line."""
    head = split_raw_lines(text)[:lines]
    return "\n".join(head) + "\n" + marker


def render_tree(dir_path: Path, prefix: str = "") -> str:
    """Build a visual tree of everything under a directory.

    Entries appear in filesystem listing order and nothing is filtered out.

    Args:
        dir_path (Path): the directory to render
        prefix (str): indentation inherited from the parent levels

    Returns:
        str: one line per entry, each terminated by a newline
    """
    with os.scandir(dir_path) as it:
        entries = list(it)

    lines: list[str] = []
    for idx, entry in enumerate(entries):
        last = idx == len(entries) - 1
        branch = "└── " if last else "├── "
        lines.append(prefix + branch + entry.name + "\n")
        if entry.is_dir(follow_symlinks=False):
            ext = "    " if last else "│   "
            lines.append(render_tree(dir_path / entry.name, prefix + ext))
    return "".join(lines)
