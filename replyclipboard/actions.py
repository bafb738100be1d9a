# -*- coding: utf-8 -*-
"""
actions.py - Snippet and backup actions behind the window and tray
Every action reports its outcome as a toast; failures never escape
to the UI toolkit
"""

import logging
from typing import Callable, Optional

from .errors import ReplyClipboardError, StoreError
from .store import Snippet, SnippetStore
from .clipboard import ClipboardChannel, copy_to_clipboard
from .backup import backup_to_clipboard, restore_from_clipboard
from .notifications import ToastStyle

logger = logging.getLogger(__name__)


class SnippetActions:
    """
    User actions on the snippet list.
    All of them are refused while a blocking notification is shown.
    """

    def __init__(
        self,
        store: SnippetStore,
        clipboard: ClipboardChannel,
        notify: Callable[[ToastStyle, str, str], None],
        on_changed: Optional[Callable[[], None]] = None,
        on_log: Optional[Callable[[str], None]] = None,
        is_blocked: Optional[Callable[[], bool]] = None
    ):
        self.store = store
        self.clipboard = clipboard
        self.notify = notify
        self.on_changed = on_changed or (lambda: None)
        self.on_log = on_log or (lambda x: None)
        self.is_blocked = is_blocked or (lambda: False)

    def _guard(self, title: str, action: Callable):
        """Run action, turning failures into an error toast. None on failure."""
        if self.is_blocked():
            self.on_log(f"{title} refused while a required update is pending")
            return None
        try:
            return action()
        except StoreError as e:
            logger.exception("%s: store failure", title)
            self.notify(ToastStyle.ERROR, title, str(e))
        except ReplyClipboardError as e:
            logger.warning("%s: %s", title, e)
            self.notify(ToastStyle.ERROR, title, str(e))
        except Exception as e:
            logger.exception("%s: unexpected failure", title)
            self.notify(ToastStyle.ERROR, title, f"Unexpected error: {e}")
        return None

    def add(self) -> Optional[Snippet]:
        snippet = self._guard("Add failed", self.store.create)
        if snippet is not None:
            self.on_changed()
            self.on_log(f"Added snippet {snippet.id}")
        return snippet

    def copy(self, snippet_id: str) -> Optional[str]:
        snippet = self._guard("Copy failed", lambda: self.store.get(snippet_id))
        if snippet is None:
            return None
        written = self._guard("Copy failed", lambda: copy_to_clipboard(self.clipboard, snippet.text))
        if written is not None:
            self.notify(ToastStyle.SUCCESS, "Copied", f"Copied '{snippet.name}' to the clipboard")
        return written

    def save(self, snippet_id: str, name: str, text: str) -> bool:
        snippet = Snippet(id=snippet_id, name=name, text=text)
        if not self._guard("Save failed", lambda: self.store.update(snippet)):
            return False
        self.on_changed()
        self.on_log(f"Saved snippet '{name}'")
        return True

    def delete(self, snippet_id: str) -> bool:
        if not self._guard("Delete failed", lambda: self.store.delete(snippet_id)):
            return False
        self.on_changed()
        self.on_log(f"Deleted snippet {snippet_id}")
        return True

    def backup(self) -> Optional[int]:
        count = self._guard("Backup failed", lambda: backup_to_clipboard(self.store, self.clipboard))
        if count is not None:
            self.notify(ToastStyle.SUCCESS, "Backed up", f"Copied {count} items to the clipboard as JSON")
        return count

    def restore(self) -> Optional[int]:
        count = self._guard("Failed to restore", lambda: restore_from_clipboard(self.store, self.clipboard))
        if count is None:
            return None
        if count == 0:
            self.notify(ToastStyle.INFO, "Nothing to restore", "The clipboard holds no snippets")
            return 0
        self.on_changed()
        self.notify(ToastStyle.SUCCESS, "Restored", f"Restored {count} items from the clipboard")
        return count
