"""
TODOLIST - Persistence Adapter
==============================
Mirrors the Store to a single key-value slot as JSON.

Wire format:
    {"tasks": {"-1": {"text": "...", "checked": false}}, "nextId": -2, "draftText": ""}
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import ValidationError

from .schema import Store

logger = logging.getLogger("todolist")

DEFAULT_DATA_DIR = ".todolist"
DEFAULT_SLOT_KEY = "todos"


class MemorySlot:
    """In-process key-value slots"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class FileSlot:
    """One {key}.json file per slot inside data_dir"""

    def __init__(self, data_dir: Union[str, Path] = DEFAULT_DATA_DIR):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _get_file(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        file_path = self._get_file(key)
        if not file_path.exists():
            return None
        return file_path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        file_path = self._get_file(key)
        tmp_path = file_path.with_suffix(".json.tmp")
        try:
            tmp_path.write_text(value, encoding="utf-8")
            os.replace(tmp_path, file_path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise


def encode(store: Store) -> str:
    return store.model_dump_json(by_alias=True)


def decode(raw: str) -> Store:
    """Parse stored JSON (raises ValueError / ValidationError on bad input)"""
    store = Store.model_validate_json(raw)
    if store.tasks and store.next_id >= min(store.tasks):
        repaired = min(store.tasks) - 1
        logger.warning(f"Stored nextId {store.next_id} collides with existing ids; using {repaired}")
        store = store.model_copy(update={"next_id": repaired})
    return store


class TaskStorage:
    """Loads and saves the Store through a slot"""

    def __init__(self, slot=None, key: str = DEFAULT_SLOT_KEY):
        self.slot = slot if slot is not None else FileSlot()
        self.key = key

    def load(self) -> Store:
        try:
            raw = self.slot.get(self.key)
            if raw is None:
                logger.info(f"No saved tasks under '{self.key}', starting empty")
                return Store()
            store = decode(raw)
        except (ValidationError, ValueError) as e:
            logger.warning(f"Unreadable task data under '{self.key}', starting empty: {e}")
            return Store()

        logger.info(f"Loaded {len(store.tasks)} tasks ({store.progress_pct}% done)")
        return store

    def save(self, store: Store) -> None:
        self.slot.set(self.key, encode(store))
        logger.debug(f"Saved {len(store.tasks)} tasks under '{self.key}'")
