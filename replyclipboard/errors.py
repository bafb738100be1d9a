# -*- coding: utf-8 -*-
"""
errors.py - Exception hierarchy for Reply Clipboard
"""

from typing import Optional


class ReplyClipboardError(Exception):
    """Base exception for Reply Clipboard."""


class ClipboardError(ReplyClipboardError):
    """Clipboard operation failed."""


class StoreError(ReplyClipboardError):
    """Snippet store operation failed."""


class VersionCheckError(ReplyClipboardError):
    """Version manifest could not be fetched or decoded."""


class BackupError(ReplyClipboardError):
    """
    Backup or restore failed.
    Carries the offending key (if any) and a human readable description.
    """

    kind = "backup error"

    def __init__(self, description: str = "", key: Optional[str] = None, path: str = ""):
        self.description = description
        self.key = key
        self.path = path
        super().__init__(self.message)

    @property
    def message(self) -> str:
        text = f"{self.kind}: {self.key}" if self.key else self.kind
        if self.description:
            text += f", {self.description}" if self.key else f": {self.description}"
        if self.path:
            text += f" (at {self.path})"
        return text


class CorruptedBackupError(BackupError):
    """Payload is not valid backup JSON."""

    kind = "corrupted data"


class MissingKeyError(BackupError):
    """A required key is absent from a record."""

    kind = "missing key"


class TypeMismatchError(BackupError):
    """A value has the wrong JSON type."""

    kind = "type mismatch"


class MissingValueError(BackupError):
    """A required key is present but null."""

    kind = "missing value"


class BackupEncodeError(BackupError):
    """Snippets could not be serialized."""

    kind = "encode error"
