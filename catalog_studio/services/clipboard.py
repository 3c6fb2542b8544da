from __future__ import annotations
import pyperclip

from catalog_studio.utils.logging import logger

def copy(text: str) -> tuple[bool, str]:
    """Copy ``text`` to the system clipboard. Returns (ok, error message)."""
    try:
        pyperclip.copy(text)
        return True, ""
    except pyperclip.PyperclipException as e:
        logger.warning("clipboard copy failed: %s", e)
        return False, f"Failed to copy to clipboard: {e}"
