"""
Clipboard helpers for generated passwords.
"""

import logging
import threading
import time
from typing import Optional

import pyperclip


logger = logging.getLogger(__name__)

DEFAULT_CLEAR_AFTER = 60


def copy_to_clipboard(value: str, clear_after: int = DEFAULT_CLEAR_AFTER) -> Optional[threading.Thread]:
    """
    Copy a value to the clipboard, optionally clearing it later.

    Args:
        value: Text to copy
        clear_after: Seconds before the clipboard is cleared (0 disables)

    Returns:
        The background thread that clears the clipboard, or None

    Raises:
        pyperclip.PyperclipException: If no clipboard mechanism is available
    """
    pyperclip.copy(value)

    if clear_after <= 0:
        return None

    def clear_clipboard() -> None:
        time.sleep(clear_after)
        try:
            # Leave the clipboard alone if the user copied something else
            if pyperclip.paste() == value:
                pyperclip.copy("")
                logger.debug("Clipboard cleared")
        except pyperclip.PyperclipException as e:
            logger.warning(f"Could not clear clipboard: {e}")

    clear_thread = threading.Thread(target=clear_clipboard, daemon=True)
    clear_thread.start()
    return clear_thread
