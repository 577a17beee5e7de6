"""
TODOLIST - Persistent Task List
===============================

Add text tasks, check them off, remove them. State survives restarts
through a JSON key-value slot.

Usage:
    from todolist import TaskManager

    manager = TaskManager()
    task_id, task = manager.add_task("Buy milk")
    manager.check_task(task_id)
    manager.remove_task(task_id)

    # Pure reducer, no storage involved
    from todolist import Store, UpdateDraft, AddTask, update
    store = update(Store(), UpdateDraft(text="Call mom"))
    store = update(store, AddTask())
"""

from .schema import (
    Task,
    Store,
    Message,
    UpdateDraft,
    AddTask,
    CheckTask,
    RemoveTask,
    parse_message
)

from .reducer import update
from .storage import TaskStorage, FileSlot, MemorySlot, encode, decode
from .manager import TaskManager

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "TaskStorage",
    "FileSlot",
    "MemorySlot",
    "Task",
    "Store",
    "Message",
    "UpdateDraft",
    "AddTask",
    "CheckTask",
    "RemoveTask",
    "parse_message",
    "update",
    "encode",
    "decode"
]
