"""Conversion between the task list and its persisted string form.

The stored value is a JSON array of ``{"label": ..., "done": ...}`` objects,
in display order.
"""

import json

from todoapp.errors import StoredDataError
from todoapp.models import Task


def dump_tasks(tasks: list[Task]) -> str:
    return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)


def load_tasks(blob: str | None) -> list[Task]:
    """Decode a stored task list.

    Args:
        blob: The stored string; None or empty means no tasks.

    Raises:
        StoredDataError: If the value is not a JSON array of task objects.
    """
    if not blob:
        return []
    try:
        data = json.loads(blob)
    except json.JSONDecodeError as e:
        raise StoredDataError(f"Stored task list is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise StoredDataError(f"Stored task list must be an array, got {type(data).__name__}")

    tasks: list[Task] = []
    for entry in data:
        if not isinstance(entry, dict) or not isinstance(entry.get("label"), str):
            raise StoredDataError(f"Malformed task entry: {entry!r}")
        tasks.append(Task.from_dict(entry))
    return tasks
