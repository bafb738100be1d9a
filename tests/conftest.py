from pathlib import Path

import pytest

from replyclipboard.clipboard import MemoryChannel
from replyclipboard.store import Snippet, SnippetStore


@pytest.fixture()
def store(tmp_path: Path) -> SnippetStore:
    """Empty snippet store backed by a temporary database."""
    return SnippetStore(db_file=tmp_path / "snippets.db")


@pytest.fixture()
def clipboard() -> MemoryChannel:
    return MemoryChannel()


@pytest.fixture()
def filled_store(store: SnippetStore) -> SnippetStore:
    store.insert(Snippet(id="b-id", name="Bravo", text="second"))
    store.insert(Snippet(id="a-id", name="Alpha", text="first %%CLIP%%"))
    store.insert(Snippet(id="c-id", name="Charlie", text="ünïcode ✓"))
    return store
