# -*- coding: utf-8 -*-
"""
store.py - Snippet persistence using SQLite
Provides lightweight, persistent storage for named text snippets
"""

import sqlite3
import threading
import uuid
from pathlib import Path
from typing import Iterable, List, Optional
from dataclasses import dataclass, field
from contextlib import contextmanager

from .config import DATA_DIR
from .errors import StoreError

DB_FILE = DATA_DIR / "snippets.db"
DEFAULT_NAME = "new item"


def new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Snippet:
    """A named piece of text that can be copied to the clipboard"""
    id: str = field(default_factory=new_id)
    name: str = ""
    text: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            'id': self.id,
            'name': self.name,
            'text': self.text
        }


class SnippetStore:
    """
    Manages snippets using SQLite database.
    Thread-safe, one connection per operation.
    """

    def __init__(self, db_file: Optional[Path] = None):
        self.db_file = Path(db_file) if db_file else DB_FILE
        self._lock = threading.Lock()
        self._init_db()

    def _init_db(self):
        """Initialize database schema"""
        self.db_file.parent.mkdir(parents=True, exist_ok=True)
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS snippets (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL DEFAULT '',
                    text TEXT NOT NULL DEFAULT ''
                )
            """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_name
                ON snippets(name)
            """)
            conn.commit()

    @contextmanager
    def _get_connection(self):
        """Get database connection with context manager"""
        try:
            conn = sqlite3.connect(str(self.db_file), timeout=10)
        except sqlite3.Error as e:
            raise StoreError(f"Cannot open {self.db_file}: {e}") from e
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError(str(e)) from e
        finally:
            conn.close()

    @staticmethod
    def _row_to_snippet(row) -> Snippet:
        """Convert database row to Snippet"""
        return Snippet(id=row['id'], name=row['name'] or '', text=row['text'] or '')

    @staticmethod
    def _values(snippet: Snippet) -> tuple:
        if not snippet.id:
            raise StoreError("Snippet has no id")
        return (snippet.id, snippet.name or '', snippet.text or '')

    def create(self, name: str = DEFAULT_NAME, text: str = "") -> Snippet:
        """Create and persist a new snippet"""
        snippet = Snippet(name=name, text=text)
        self.insert(snippet)
        return snippet

    def insert(self, snippet: Snippet):
        """Insert a snippet; its id must not already exist"""
        with self._lock:
            with self._get_connection() as conn:
                conn.execute(
                    "INSERT INTO snippets (id, name, text) VALUES (?, ?, ?)",
                    self._values(snippet)
                )
                conn.commit()

    def update(self, snippet: Snippet) -> bool:
        """Write name and text back. Returns False if the snippet is gone."""
        with self._lock:
            with self._get_connection() as conn:
                cursor = conn.execute(
                    "UPDATE snippets SET name = ?, text = ? WHERE id = ?",
                    (snippet.name or '', snippet.text or '', snippet.id)
                )
                conn.commit()
                return cursor.rowcount > 0

    def delete(self, snippet_id: str) -> bool:
        """Delete specific snippet by id"""
        with self._lock:
            with self._get_connection() as conn:
                cursor = conn.execute("DELETE FROM snippets WHERE id = ?", (snippet_id,))
                conn.commit()
                return cursor.rowcount > 0

    def delete_all(self):
        """Delete every snippet"""
        with self._lock:
            with self._get_connection() as conn:
                conn.execute("DELETE FROM snippets")
                conn.commit()

    def replace_all(self, snippets: Iterable[Snippet]) -> int:
        """
        Replace the whole collection in one transaction.
        On failure nothing is changed.
        """
        values = [self._values(s) for s in snippets]
        with self._lock:
            with self._get_connection() as conn:
                conn.execute("DELETE FROM snippets")
                conn.executemany(
                    "INSERT INTO snippets (id, name, text) VALUES (?, ?, ?)",
                    values
                )
                conn.commit()
        return len(values)

    def get(self, snippet_id: str) -> Optional[Snippet]:
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT id, name, text FROM snippets WHERE id = ?",
                (snippet_id,)
            ).fetchone()
            return self._row_to_snippet(row) if row else None

    def get_all(self) -> List[Snippet]:
        """Get all snippets ordered by name"""
        with self._get_connection() as conn:
            rows = conn.execute("""
                SELECT id, name, text
                FROM snippets
                ORDER BY name, id
            """).fetchall()

            return [self._row_to_snippet(row) for row in rows]

    def count(self) -> int:
        with self._get_connection() as conn:
            return conn.execute("SELECT COUNT(*) FROM snippets").fetchone()[0]
