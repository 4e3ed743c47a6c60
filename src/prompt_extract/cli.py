"""
prompt_extract: flatten a JavaScript/TypeScript project into one prompt-ready blob.

Overview
--------
The tool walks a directory, keeps `.js`, `.ts`, `.jsx` and `.tsx` files
(test files and a fixed list of ignore globs excluded), squeezes each file
into a single whitespace-normalized line and prints the result, prefixed by
a tree of the directory. The same text is copied to the clipboard.

Files longer than 300 lines trigger a question, once per file, until an
answer settles the run:

    - `y` extracts this file and every later long file,
    - `n` skips this file and every later long file,
    - a positive number keeps only that many lines of this file (asked again next time),
    - anything else skips this file only.

Usage
-----
    prompt-extract path/to/project
    python -m prompt_extract.cli path/to/project --log-file extract.log
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from prompt_extract import __version__
from prompt_extract.clipboard import copy_to_clipboard
from prompt_extract.exceptions import InvalidDirectoryError, MissingArgumentError, PromptExtractError
from prompt_extract.file_manipulation import render_tree
from prompt_extract.logging import logger, setup_logging
from prompt_extract.output_construction import build_output, extract_blocks
from prompt_extract.settings import Settings
from prompt_extract.triage import TriageController

if TYPE_CHECKING:
    from collections.abc import Sequence


def parse_args(argv: Sequence[str] | None = None) -> Settings:
    """Parse the command line into validated settings.

    Raises:
        MissingArgumentError: if no directory is given.
        InvalidDirectoryError: if the directory does not exist or is not a directory.
    """
    p = argparse.ArgumentParser(
        prog="prompt-extract",
        description="Copy a project's JS/TS sources to the clipboard as one LLM prompt.",
    )
    p.add_argument("directory", nargs="?", default=None, help="Directory to extract.")
    p.add_argument("--log-file", type=str, default=None, help="Log file path.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = p.parse_args(argv)

    if args.directory is None:
        raise MissingArgumentError
    root = Path(args.directory).resolve()
    if not root.is_dir():
        raise InvalidDirectoryError(folder=root)

    if args.log_file is None:
        return Settings(root=root)
    return Settings(root=root, log_file=args.log_file)


def run(settings: Settings, controller: TriageController) -> str:
    """Print the tree, extract every eligible file and return the assembled text.

    Args:
        settings (Settings): validated settings of the run
        controller (TriageController): owner of the run's long-file policy

    Returns:
        str: the assembled text
    """
    root = settings.root
    tree = render_tree(root)
    print("Project Tree:\n")
    print(tree)
    print("\n")

    blocks = extract_blocks(
        root,
        controller,
        extensions=settings.extensions,
        ignore_patterns=settings.ignore_patterns,
    )
    logger.info("extraction finished", root=str(root), files=len(blocks), prompts=controller.prompts)
    return build_output(tree, blocks)


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = parse_args(argv)
    except PromptExtractError as e:
        print(e, file=sys.stderr)
        return 1
    if settings.log_file:
        setup_logging(settings.log_file)

    controller = TriageController(threshold=settings.line_threshold)
    try:
        result = run(settings, controller)
    except Exception as e:
        logger.exception("extraction aborted")
        print(f"An error occurred: {e}", file=sys.stderr)
        return 1

    print(result)
    if copy_to_clipboard(result):
        print("Content copied to clipboard!")
    else:
        print("Failed to copy to clipboard. Please copy manually.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
