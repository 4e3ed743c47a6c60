from __future__ import annotations

import pyperclip

from prompt_extract.logging import logger


def copy_to_clipboard(text: str) -> bool:
    """Copy `text` to the system clipboard.

    Args:
        text (str): the content to copy

    Returns:
        bool: True on success, False when no clipboard mechanism is usable
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning("clipboard copy failed: %s", e)
        return False
    return True
