# tests/test_storage.py

import json
from pathlib import Path

import pytest

from todolist.schema import Store, Task
from todolist.storage import FileSlot, MemorySlot, TaskStorage, decode, encode


def test_encode_wire_format() -> None:
    store = Store(tasks={-1: Task(text="milk", checked=True)}, next_id=-2, draft_text="eg")
    data = json.loads(encode(store))
    assert data == {
        "tasks": {"-1": {"text": "milk", "checked": True}},
        "nextId": -2,
        "draftText": "eg",
    }


def test_decode_restores_int_ids() -> None:
    raw = '{"tasks": {"-2": {"text": "b", "checked": false}, "-1": {"text": "a", "checked": true}}, "nextId": -3, "draftText": ""}'
    store = decode(raw)
    assert set(store.tasks) == {-1, -2}
    assert store.tasks[-1].checked is True
    assert store.next_id == -3
    assert decode(encode(store)) == store


def test_decode_repairs_colliding_next_id() -> None:
    raw = '{"tasks": {"-5": {"text": "a", "checked": false}}, "nextId": 0, "draftText": ""}'
    assert decode(raw).next_id == -6


def test_load_empty_slot_gives_fresh_store(memory_storage: TaskStorage) -> None:
    assert memory_storage.load() == Store()


def test_load_corrupt_slot_gives_fresh_store() -> None:
    slot = MemorySlot({"todos": "{not json"})
    assert TaskStorage(slot).load() == Store()

    slot.set("todos", '{"tasks": {"x": {"text": 1}}}')
    assert TaskStorage(slot).load() == Store()


def test_file_slot_save_and_load(tmp_path: Path) -> None:
    storage = TaskStorage(FileSlot(tmp_path), key="mine")
    store = Store(tasks={-1: Task(text="persist me")}, next_id=-2)
    storage.save(store)

    assert (tmp_path / "mine.json").exists()
    assert not (tmp_path / "mine.json.tmp").exists()
    assert TaskStorage(FileSlot(tmp_path), key="mine").load() == store


def test_load_non_utf8_file_gives_fresh_store(tmp_path: Path) -> None:
    (tmp_path / "todos.json").write_bytes(b"\xff\xfe{garbage")
    assert TaskStorage(FileSlot(tmp_path)).load() == Store()


def test_failed_write_removes_temp_file(tmp_path: Path, monkeypatch) -> None:
    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("todolist.storage.os.replace", broken_replace)
    slot = FileSlot(tmp_path)

    with pytest.raises(OSError):
        slot.set("todos", "{}")

    assert not (tmp_path / "todos.json.tmp").exists()
    assert not (tmp_path / "todos.json").exists()
