# -*- coding: utf-8 -*-
"""
backup.py - Backup and restore of the snippet list through the clipboard
Snippets travel as a pretty-printed JSON array with sorted keys so the
same collection always produces the same text
"""

import json
import logging
from typing import Iterable, List

from .clipboard import ClipboardChannel
from .errors import (
    BackupEncodeError, CorruptedBackupError, MissingKeyError,
    MissingValueError, TypeMismatchError
)
from .store import Snippet, SnippetStore, new_id

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("name", "text")


def _check_encodable(value: str, key: str, path: str):
    """Lone surrogates survive json.loads but cannot be stored as UTF-8"""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise CorruptedBackupError(f"invalid unicode ({e.reason})", key=key, path=path) from e


def export_snippets(snippets: Iterable[Snippet]) -> str:
    """Serialize snippets, ordered by name, to backup JSON"""
    ordered = sorted(snippets, key=lambda s: s.name or "")
    try:
        return json.dumps(
            [s.to_dict() for s in ordered],
            indent=2,
            sort_keys=True,
            ensure_ascii=False
        )
    except (TypeError, ValueError) as e:
        raise BackupEncodeError(str(e)) from e


def _decode_record(index: int, record) -> Snippet:
    """Validate one array element and turn it into a Snippet"""
    path = f"[{index}]"
    if not isinstance(record, dict):
        raise TypeMismatchError(
            f"expected an object, found {type(record).__name__}", path=path
        )

    values = {}
    for key in REQUIRED_KEYS:
        if key not in record:
            raise MissingKeyError(key=key, path=path)
        value = record[key]
        if value is None:
            raise MissingValueError("expected a string, found null", key=key, path=path)
        if not isinstance(value, str):
            raise TypeMismatchError(
                f"expected a string, found {type(value).__name__}", key=key, path=path
            )
        _check_encodable(value, key, path)
        values[key] = value

    snippet_id = record.get("id")
    if snippet_id is not None and not isinstance(snippet_id, str):
        raise TypeMismatchError(
            f"expected a string, found {type(snippet_id).__name__}", key="id", path=path
        )
    if snippet_id:
        _check_encodable(snippet_id, "id", path)

    return Snippet(id=snippet_id or new_id(), name=values["name"], text=values["text"])


def import_snippets(payload: str) -> List[Snippet]:
    """
    Parse backup JSON into snippets.
    Raises a BackupError subclass describing the first problem found.
    """
    try:
        data = json.loads(payload)
    except ValueError as e:
        raise CorruptedBackupError(f"not valid JSON ({e})") from e

    if not isinstance(data, list):
        raise TypeMismatchError(f"expected an array, found {type(data).__name__}")

    snippets = [_decode_record(i, record) for i, record in enumerate(data)]

    seen = set()
    for i, snippet in enumerate(snippets):
        if snippet.id in seen:
            raise CorruptedBackupError(f"duplicate id {snippet.id}", path=f"[{i}]")
        seen.add(snippet.id)

    return snippets


def backup_to_clipboard(store: SnippetStore, channel: ClipboardChannel) -> int:
    """Copy the whole snippet list to the clipboard. Returns the count."""
    snippets = store.get_all()
    channel.set(export_snippets(snippets))
    logger.info("Backed up %d snippets to the clipboard", len(snippets))
    return len(snippets)


def restore_from_clipboard(store: SnippetStore, channel: ClipboardChannel) -> int:
    """
    Replace the snippet list with the backup on the clipboard.

    Returns the number of restored snippets; 0 means there was nothing to
    restore and the store was left alone. The store is only touched after
    the whole payload decoded.
    """
    payload = channel.get()
    if not payload or not payload.strip():
        logger.info("Clipboard is empty, nothing to restore")
        return 0

    snippets = import_snippets(payload)
    if not snippets:
        logger.info("Backup holds no snippets, nothing to restore")
        return 0

    count = store.replace_all(snippets)
    logger.info("Restored %d snippets from the clipboard", count)
    return count
