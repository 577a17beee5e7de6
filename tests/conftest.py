# tests/conftest.py

from pathlib import Path

import pytest

from todolist.manager import TaskManager
from todolist.storage import FileSlot, MemorySlot, TaskStorage


@pytest.fixture()
def memory_storage() -> TaskStorage:
    return TaskStorage(MemorySlot())


@pytest.fixture()
def file_storage(tmp_path: Path) -> TaskStorage:
    return TaskStorage(FileSlot(tmp_path / "data"))


@pytest.fixture()
def manager(file_storage: TaskStorage) -> TaskManager:
    """Manager backed by a real FileSlot under tmp_path."""
    return TaskManager(storage=file_storage)
