import pytest

from replyclipboard.errors import StoreError
from replyclipboard.store import DEFAULT_NAME, Snippet


def test_create_defaults(store):
    snippet = store.create()
    assert snippet.id
    assert snippet.name == DEFAULT_NAME
    assert snippet.text == ""
    assert store.get(snippet.id) == snippet


def test_ids_are_unique(store):
    ids = {store.create().id for _ in range(20)}
    assert len(ids) == 20
    assert store.count() == 20


def test_get_all_is_sorted_by_name(filled_store):
    names = [s.name for s in filled_store.get_all()]
    assert names == ["Alpha", "Bravo", "Charlie"]


def test_update_keeps_id(store):
    snippet = store.create()
    snippet.name = "Greeting"
    snippet.text = "Hello"
    assert store.update(snippet)

    stored = store.get(snippet.id)
    assert stored.id == snippet.id
    assert (stored.name, stored.text) == ("Greeting", "Hello")


def test_update_missing_snippet(store):
    assert not store.update(Snippet(id="nope", name="x", text="y"))


def test_delete(filled_store):
    assert filled_store.delete("b-id")
    assert not filled_store.delete("b-id")
    assert [s.id for s in filled_store.get_all()] == ["a-id", "c-id"]


def test_delete_all(filled_store):
    filled_store.delete_all()
    assert filled_store.get_all() == []


def test_insert_duplicate_id(filled_store):
    with pytest.raises(StoreError):
        filled_store.insert(Snippet(id="a-id", name="dup", text=""))


def test_replace_all(filled_store):
    count = filled_store.replace_all([Snippet(id="z", name="Zulu", text="z")])
    assert count == 1
    assert filled_store.get_all() == [Snippet(id="z", name="Zulu", text="z")]


def test_replace_all_is_atomic(filled_store):
    before = filled_store.get_all()
    with pytest.raises(StoreError):
        filled_store.replace_all([
            Snippet(id="same", name="one", text=""),
            Snippet(id="same", name="two", text=""),
        ])
    assert filled_store.get_all() == before


def test_persists_across_instances(tmp_path):
    from replyclipboard.store import SnippetStore

    first = SnippetStore(db_file=tmp_path / "db.sqlite")
    snippet = first.create(name="kept", text="value")

    second = SnippetStore(db_file=tmp_path / "db.sqlite")
    assert second.get(snippet.id) == snippet
