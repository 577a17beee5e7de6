"""
TODOLIST - Task Store Schema
============================
Task, Store and the four reducer messages.

Ids come from Store.next_id, which counts down on each insert, so the
newest task always holds the smallest id.
"""

from typing import Annotated, Dict, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Task(BaseModel):
    """Individual to-do item"""
    text: str
    checked: bool = False


class Store(BaseModel):
    """Complete application state - what gets persisted"""
    model_config = ConfigDict(populate_by_name=True)

    tasks: Dict[int, Task] = Field(default_factory=dict)
    next_id: int = Field(default=-1, alias="nextId")
    draft_text: str = Field(default="", alias="draftText")

    def ordered_tasks(self) -> List[Tuple[int, Task]]:
        """Tasks newest first"""
        return sorted(self.tasks.items())

    @property
    def progress_pct(self) -> int:
        if not self.tasks:
            return 0
        done = sum(1 for t in self.tasks.values() if t.checked)
        return int((done / len(self.tasks)) * 100)

    @property
    def status_summary(self) -> Dict[str, int]:
        done = sum(1 for t in self.tasks.values() if t.checked)
        return {"open": len(self.tasks) - done, "done": done}


# ============================================================
# MESSAGES
# ============================================================

class UpdateDraft(BaseModel):
    """Replace the draft text"""
    kind: Literal["update_draft"] = "update_draft"
    text: str


class AddTask(BaseModel):
    """Turn the draft text into a new task"""
    kind: Literal["add_task"] = "add_task"


class CheckTask(BaseModel):
    """Set a task's done flag"""
    kind: Literal["check_task"] = "check_task"
    id: int
    checked: bool = True


class RemoveTask(BaseModel):
    """Delete a task"""
    kind: Literal["remove_task"] = "remove_task"
    id: int


Message = Annotated[
    Union[UpdateDraft, AddTask, CheckTask, RemoveTask],
    Field(discriminator="kind"),
]

_message_adapter = TypeAdapter(Message)


def parse_message(data: dict) -> Message:
    """Build a message from a raw dict (raises pydantic.ValidationError)"""
    return _message_adapter.validate_python(data)
