"""
TODOLIST - Reducer
==================
Pure state transitions: update(store, message) -> next store.
The input store is never mutated.
"""

from .schema import AddTask, CheckTask, Message, RemoveTask, Store, Task, UpdateDraft


def update(store: Store, message: Message) -> Store:
    """Apply one message and return the resulting store"""
    if isinstance(message, UpdateDraft):
        return store.model_copy(update={"draft_text": message.text}, deep=True)

    if isinstance(message, AddTask):
        text = store.draft_text.strip()
        if not text:
            return store
        tasks = {k: v.model_copy() for k, v in store.tasks.items()}
        tasks[store.next_id] = Task(text=text)
        return Store(tasks=tasks, next_id=store.next_id - 1, draft_text="")

    if isinstance(message, CheckTask):
        task = store.tasks.get(message.id)
        if task is None or task.checked == message.checked:
            return store
        tasks = {k: v.model_copy() for k, v in store.tasks.items()}
        tasks[message.id] = task.model_copy(update={"checked": message.checked})
        return store.model_copy(update={"tasks": tasks})

    if isinstance(message, RemoveTask):
        if message.id not in store.tasks:
            return store
        tasks = {k: v.model_copy() for k, v in store.tasks.items() if k != message.id}
        return store.model_copy(update={"tasks": tasks})

    raise TypeError(f"Unknown message: {message!r}")
