# -*- coding: utf-8 -*-
"""
clipboard.py - Clipboard access for Reply Clipboard
A single capability interface with a pyperclip backed implementation
and an in-process fallback, selected once at startup
"""

import logging
import threading
from abc import ABC, abstractmethod
import pyperclip

from .config import PLACEHOLDER
from .errors import ClipboardError

logger = logging.getLogger(__name__)


class ClipboardChannel(ABC):
    """Reads and writes a single string on the shared clipboard"""

    name = "clipboard"

    @abstractmethod
    def get(self) -> str:
        """Current clipboard text, empty string if there is none"""

    @abstractmethod
    def set(self, text: str):
        """Replace clipboard contents"""


class PyperclipChannel(ClipboardChannel):
    """System clipboard through pyperclip"""

    name = "system"

    def get(self) -> str:
        try:
            return pyperclip.paste() or ""
        except pyperclip.PyperclipException as e:
            logger.warning("Clipboard read failed: %s", e)
            return ""

    def set(self, text: str):
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Clipboard write failed: {e}") from e


class MemoryChannel(ClipboardChannel):
    """Process-local clipboard, used when no system clipboard is reachable"""

    name = "memory"

    def __init__(self, text: str = ""):
        self._text = text
        self._lock = threading.Lock()

    def get(self) -> str:
        with self._lock:
            return self._text

    def set(self, text: str):
        with self._lock:
            self._text = text


def create_channel() -> ClipboardChannel:
    """Pick the clipboard implementation for this machine"""
    try:
        pyperclip.paste()
    except pyperclip.PyperclipException as e:
        logger.warning("System clipboard unavailable, using in-memory clipboard: %s", e)
        return MemoryChannel()
    return PyperclipChannel()


def copy_to_clipboard(channel: ClipboardChannel, text: str) -> str:
    """
    Write text to the clipboard, substituting every placeholder with
    whatever the clipboard held before. Returns the text written.
    """
    clip_text = text or ""
    if PLACEHOLDER in clip_text:
        clip_text = clip_text.replace(PLACEHOLDER, channel.get() or "")
    channel.set(clip_text)
    return clip_text
