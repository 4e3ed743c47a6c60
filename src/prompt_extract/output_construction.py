from __future__ import annotations

import io
from typing import TYPE_CHECKING

from prompt_extract.config import EXTENSIONS, IGNORE_PATTERNS
from prompt_extract.file_manipulation import make_candidate, read_text, walk_files

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from prompt_extract.config import ContentBlock
    from prompt_extract.triage import TriageController


def extract_blocks(
    root: Path,
    controller: TriageController,
    *,
    extensions: Sequence[str] = EXTENSIONS,
    ignore_patterns: Sequence[str] = IGNORE_PATTERNS,
) -> list[ContentBlock]:
    """Walk `root` and collect one block per file kept by the triage controller.

    Blocks come out in walk-discovery order. Any filesystem error aborts the
    whole extraction.

    Args:
        root (Path): the scan root
        controller (TriageController): owner of the run's long-file policy
        extensions (Sequence[str]): accepted extensions, without dot
        ignore_patterns (Sequence[str]): globs relative to `root` that exclude a file

    Returns:
        list[ContentBlock]: the blocks of every included file
    """
    blocks: list[ContentBlock] = []
    for path in walk_files(root, extensions=extensions, ignore_patterns=ignore_patterns):
        text = read_text(path)
        block = controller.process(make_candidate(path, root, text), text)
        if block is not None:
            blocks.append(block)
    return blocks


def format_block(block: ContentBlock) -> str:
    """Render a block as its labeled header line followed by its content."""
    return f"** [{block.rel}] **\n{block.text}"


def build_output(tree: str, blocks: Sequence[ContentBlock]) -> str:
    """Assemble the final text: the project tree, then every file block.

    Args:
        tree (str): the rendered directory tree
        blocks (Sequence[ContentBlock]): the included files, in order

    Returns:
        str: the text handed to the clipboard
    """
    out = io.StringIO()
    out.write("Project Tree:\n\n")
    out.write(tree)
    out.write("\n\nExtracted Files:\n\n")
    out.write("\n\n".join(format_block(b) for b in blocks))
    return out.getvalue()
