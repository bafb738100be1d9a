import json

import pytest

from replyclipboard.backup import (
    backup_to_clipboard, export_snippets, import_snippets, restore_from_clipboard
)
from replyclipboard.errors import (
    BackupError, CorruptedBackupError, MissingKeyError, MissingValueError, TypeMismatchError
)
from replyclipboard.store import Snippet


def test_export_is_sorted_and_deterministic():
    snippets = [Snippet(id="2", name="b", text="y"), Snippet(id="1", name="a", text="x")]
    expected = (
        '[\n'
        '  {\n'
        '    "id": "1",\n'
        '    "name": "a",\n'
        '    "text": "x"\n'
        '  },\n'
        '  {\n'
        '    "id": "2",\n'
        '    "name": "b",\n'
        '    "text": "y"\n'
        '  }\n'
        ']'
    )
    assert export_snippets(snippets) == expected
    assert export_snippets(reversed(snippets)) == expected


def test_export_keeps_unicode():
    text = export_snippets([Snippet(id="1", name="é", text="✓")])
    assert "✓" in text
    assert "\\u" not in text


def test_backup_then_restore_roundtrip(filled_store, clipboard):
    before = filled_store.get_all()
    assert backup_to_clipboard(filled_store, clipboard) == 3

    assert restore_from_clipboard(filled_store, clipboard) == 3
    assert filled_store.get_all() == before


def test_restore_is_idempotent(filled_store, clipboard):
    clipboard.set('[{"name": "A", "text": "1"}, {"id": "k", "name": "B", "text": "2"}]')
    restore_from_clipboard(filled_store, clipboard)
    first = [(s.name, s.text) for s in filled_store.get_all()]
    restore_from_clipboard(filled_store, clipboard)
    assert [(s.name, s.text) for s in filled_store.get_all()] == first
    assert filled_store.get("k").text == "2"


def test_restore_replaces_everything(filled_store, clipboard):
    clipboard.set(json.dumps([{"id": "new", "name": "Only", "text": "one"}]))
    assert restore_from_clipboard(filled_store, clipboard) == 1
    assert filled_store.get_all() == [Snippet(id="new", name="Only", text="one")]


def test_empty_array_is_a_no_op(filled_store, clipboard):
    before = filled_store.get_all()
    clipboard.set("[]")
    assert restore_from_clipboard(filled_store, clipboard) == 0
    assert filled_store.get_all() == before


@pytest.mark.parametrize("payload", ["", "   \n"])
def test_empty_clipboard_is_nothing_to_restore(filled_store, clipboard, payload):
    before = filled_store.get_all()
    clipboard.set(payload)
    assert restore_from_clipboard(filled_store, clipboard) == 0
    assert filled_store.get_all() == before


def test_missing_id_gets_a_fresh_one(store, clipboard):
    clipboard.set('[{"name":"A","text":"B"}]')
    assert restore_from_clipboard(store, clipboard) == 1
    (snippet,) = store.get_all()
    assert (snippet.name, snippet.text) == ("A", "B")
    assert snippet.id


def test_null_id_gets_a_fresh_one():
    (snippet,) = import_snippets('[{"id": null, "name": "A", "text": "B"}]')
    assert snippet.id


def test_missing_text_leaves_store_unchanged(filled_store, clipboard):
    before = filled_store.get_all()
    clipboard.set('[{"name":"A"}]')
    with pytest.raises(MissingKeyError) as info:
        restore_from_clipboard(filled_store, clipboard)
    assert info.value.key == "text"
    assert str(info.value) == "missing key: text (at [0])"
    assert filled_store.get_all() == before


def test_error_in_later_element_leaves_store_unchanged(filled_store, clipboard):
    before = filled_store.get_all()
    clipboard.set('[{"name":"A","text":"B"},{"name":"C","text":5}]')
    with pytest.raises(TypeMismatchError) as info:
        restore_from_clipboard(filled_store, clipboard)
    assert info.value.key == "text"
    assert info.value.path == "[1]"
    assert filled_store.get_all() == before


@pytest.mark.parametrize("payload, error, key", [
    ("not json", CorruptedBackupError, None),
    ('{"name": "A", "text": "B"}', TypeMismatchError, None),
    ('["A"]', TypeMismatchError, None),
    ('[{"text": "B"}]', MissingKeyError, "name"),
    ('[{"name": null, "text": "B"}]', MissingValueError, "name"),
    ('[{"name": 1, "text": "B"}]', TypeMismatchError, "name"),
    ('[{"id": 7, "name": "A", "text": "B"}]', TypeMismatchError, "id"),
    ('[{"id": "x", "name": "A", "text": "B"}, {"id": "x", "name": "C", "text": "D"}]',
     CorruptedBackupError, None),
])
def test_decode_errors(payload, error, key):
    with pytest.raises(error) as info:
        import_snippets(payload)
    assert isinstance(info.value, BackupError)
    assert info.value.key == key
    assert str(info.value)


def test_extra_keys_are_ignored():
    (snippet,) = import_snippets('[{"id": "1", "name": "A", "text": "B", "extra": true}]')
    assert snippet == Snippet(id="1", name="A", text="B")


@pytest.mark.parametrize("payload, key", [
    ('[{"name": "A", "text": "\\ud800"}]', "text"),
    ('[{"name": "\\udfff x", "text": "B"}]', "name"),
    ('[{"id": "\\ud83d", "name": "A", "text": "B"}]', "id"),
])
def test_lone_surrogate_is_corrupted_data(filled_store, clipboard, payload, key):
    before = filled_store.get_all()
    clipboard.set(payload)
    with pytest.raises(CorruptedBackupError) as info:
        restore_from_clipboard(filled_store, clipboard)
    assert info.value.key == key
    assert info.value.path == "[0]"
    assert filled_store.get_all() == before


def test_surrogate_pair_is_fine():
    (snippet,) = import_snippets('[{"name": "A", "text": "\\ud83d\\ude00"}]')
    assert snippet.text == "\U0001F600"
