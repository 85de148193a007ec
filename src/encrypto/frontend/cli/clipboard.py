"""Clipboard helper for the encrypto command.

Results are often pasted straight into a chat field, so the command can
put them on the system clipboard via pyperclip.
"""

from __future__ import annotations

import logging

import pyperclip

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> bool:
    """Copy ``text`` to the system clipboard.

    Returns False, after logging a warning, when no clipboard mechanism is
    available (e.g. a headless session without xclip/xsel).
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        logger.warning("Could not copy to clipboard: %s", exc)
        return False
    return True
