import logging
import time

import pyperclip
from PyQt5 import QtWidgets

from .errors import ClipboardError

logger = logging.getLogger(__name__)


def _qt_clipboard():
    app = QtWidgets.QApplication.instance()
    if app is None:
        return None
    return app.clipboard()


def set_clipboard_text(text, max_retries=3, retry_delay=0.02):
    """Put plain text on the system clipboard.

    Tries pyperclip a few times, then falls back to the Qt clipboard when a
    QApplication is running. Returns False if every method failed.
    """
    for attempt in range(max_retries):
        try:
            pyperclip.copy(text)
            logger.info(f"Copied text to clipboard (attempt {attempt + 1}): {text[:30]}...")
            return True
        except pyperclip.PyperclipException as e:
            logger.warning(f"Error setting clipboard (attempt {attempt + 1}): {e}")
        if attempt < max_retries - 1:
            time.sleep(retry_delay)

    logger.warning("pyperclip failed, falling back to Qt clipboard")
    clipboard = _qt_clipboard()
    if clipboard is not None:
        clipboard.setText(text)
        logger.info(f"Fallback: Copied text to Qt clipboard: {text[:30]}...")
        return True

    logger.error(f"Failed to set clipboard after {max_retries} attempts")
    return False


def copy_text(text):
    if not set_clipboard_text(text):
        raise ClipboardError("Could not copy the item to the clipboard")
