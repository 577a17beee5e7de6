"""
TODOLIST - Task Manager
=======================
Holds the current Store, runs messages through the reducer and mirrors
every change to storage.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .reducer import update
from .schema import AddTask, CheckTask, Message, RemoveTask, Store, Task, UpdateDraft
from .storage import DEFAULT_SLOT_KEY, FileSlot, TaskStorage

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("todolist")

FILTERS = ("all", "active", "done")


class TaskManager:
    """
    Task list facade used by the presentation layer.

    Storage: {data_dir}/{slot_key}.json unless a TaskStorage is passed in.
    """

    def __init__(
        self,
        storage: Optional[TaskStorage] = None,
        data_dir: Optional[Union[str, Path]] = None,
        slot_key: str = DEFAULT_SLOT_KEY
    ):
        if storage is None:
            slot = FileSlot(data_dir) if data_dir is not None else FileSlot()
            storage = TaskStorage(slot, key=slot_key)
        self.storage = storage
        self.store: Store = self.storage.load()

    # ========================================
    # DISPATCH
    # ========================================

    def dispatch(self, message: Message) -> Store:
        """Apply a message; persist when the store changed"""
        new_store = update(self.store, message)
        if new_store != self.store:
            self.store = new_store
            self.storage.save(self.store)
        return self.store

    def update_draft(self, text: str) -> Store:
        logger.debug(f"Draft: {text!r}")
        return self.dispatch(UpdateDraft(text=text))

    def add_task(self, text: Optional[str] = None) -> Optional[Tuple[int, Task]]:
        """Add the draft (or the given text) as a new task"""
        if text is not None:
            if not text.strip():
                logger.warning("Nothing to add: task text is empty")
                return None
            self.update_draft(text)

        task_id = self.store.next_id
        self.dispatch(AddTask())

        task = self.store.tasks.get(task_id)
        if task is None:
            logger.warning("Nothing to add: draft is empty")
            return None

        logger.info(f"Added task [{task_id}] {task.text}")
        return task_id, task

    def check_task(self, task_id: int, checked: bool = True) -> Optional[Task]:
        """Mark a task done (or not done)"""
        if task_id not in self.store.tasks:
            logger.warning(f"Task not found: {task_id}")
            return None

        before = self.store
        self.dispatch(CheckTask(id=task_id, checked=checked))
        task = self.store.tasks[task_id]
        if self.store is not before:
            logger.info(f"{'Checked' if checked else 'Unchecked'} task [{task_id}] {task.text}")
        return task

    def remove_task(self, task_id: int) -> Optional[Task]:
        task = self.store.tasks.get(task_id)
        if task is None:
            logger.warning(f"Task not found: {task_id}")
            return None

        self.dispatch(RemoveTask(id=task_id))
        logger.info(f"Removed task [{task_id}] {task.text}")
        return task

    def clear_completed(self) -> int:
        """Remove every checked task; returns how many were removed"""
        done_ids = [task_id for task_id, task in self.store.tasks.items() if task.checked]
        for task_id in done_ids:
            self.dispatch(RemoveTask(id=task_id))

        if done_ids:
            logger.info(f"Cleared {len(done_ids)} completed tasks")
        return len(done_ids)

    # ========================================
    # QUERIES
    # ========================================

    def get_task(self, task_id: int) -> Optional[Task]:
        return self.store.tasks.get(task_id)

    def list_tasks(self, filter: str = "all") -> List[Tuple[int, Task]]:
        """Tasks newest first, optionally only active or done ones"""
        if filter not in FILTERS:
            raise ValueError(f"Unknown filter: {filter} (expected one of {', '.join(FILTERS)})")

        tasks = self.store.ordered_tasks()
        if filter == "active":
            return [(i, t) for i, t in tasks if not t.checked]
        if filter == "done":
            return [(i, t) for i, t in tasks if t.checked]
        return tasks

    # ========================================
    # REPORTING
    # ========================================

    def get_status_report(self) -> str:
        """Generate human-readable status report"""
        store = self.store
        pct = store.progress_pct
        summary = store.status_summary

        lines = [
            f"Progress: {'#' * (pct // 10)}{'.' * (10 - pct // 10)} {pct}%",
            f"Open: {summary['open']} | Done: {summary['done']}",
            "",
        ]

        if not store.tasks:
            lines.append("  (no tasks)")
        for task_id, task in store.ordered_tasks():
            mark = "x" if task.checked else " "
            lines.append(f"  [{mark}] {task_id:>4}  {task.text}")

        if store.draft_text:
            lines.extend(["", f"Draft: {store.draft_text}"])

        return "\n".join(lines)
