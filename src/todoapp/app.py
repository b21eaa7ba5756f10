"""The to-do list: an in-memory task list mirrored to key-value storage."""

import logging
from collections.abc import Callable

from todoapp.models import Task
from todoapp.render import TaskItem, render
from todoapp.serialization import dump_tasks, load_tasks
from todoapp.storage.base import KeyValueStorage

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "data"
EMPTY_LABEL_ALERT = "You must write something!"


def _log_alert(message: str) -> None:
    logger.warning(message)


class TodoApp:
    """Ordered task list whose full contents are stored after every change.

    Insertion order is display order is stored order. Every add, toggle and
    remove overwrites the stored value under ``key`` with the whole list.

    Args:
        storage: Where the list is persisted.
        key: Storage key holding the serialized list.
        alert: Called with a message when user input is rejected. Defaults
            to logging a warning.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        alert: Callable[[str], None] | None = None,
    ) -> None:
        self._storage = storage
        self._key = key
        self._alert = alert or _log_alert
        self.tasks: list[Task] = []
        self.input_value = ""

    def add_task(self, label: str) -> Task | None:
        """Append a new, not-done task.

        An empty label is rejected with an alert; nothing is added or stored.

        Returns:
            The new task, or None if the label was rejected.
        """
        if label == "":
            self._alert(EMPTY_LABEL_ALERT)
            return None
        task = Task(label=label)
        self.tasks.append(task)
        self.input_value = ""
        logger.debug("Added task %d: %r", len(self.tasks) - 1, label)
        self.persist()
        return task

    def submit(self) -> Task | None:
        """Add a task from the current input value."""
        return self.add_task(self.input_value)

    def toggle_task(self, index: int) -> Task:
        task = self.tasks[index]
        task.toggle()
        logger.debug("Toggled task %d to done=%s", index, task.done)
        self.persist()
        return task

    def remove_task(self, index: int) -> Task:
        task = self.tasks.pop(index)
        logger.debug("Removed task %d: %r", index, task.label)
        self.persist()
        return task

    def persist(self) -> None:
        """Overwrite the stored value with the full current list."""
        self._storage.set_item(self._key, dump_tasks(self.tasks))

    def restore(self) -> list[Task]:
        """Replace the in-memory list with the stored one."""
        self.tasks = load_tasks(self._storage.get_item(self._key))
        logger.debug("Restored %d tasks", len(self.tasks))
        return self.tasks

    def activate(self) -> list[TaskItem]:
        """Restore the stored list and return its rendering."""
        self.restore()
        return self.render()

    def render(self) -> list[TaskItem]:
        return render(self.tasks)
