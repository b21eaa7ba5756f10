"""Pure rendering of the task list."""

from dataclasses import dataclass

from todoapp.models import Task

REMOVE_LABEL = "×"


@dataclass(frozen=True)
class TaskItem:
    """One rendered list entry; ``key`` is the task's position."""

    key: int
    label: str
    checked: bool
    remove_label: str = REMOVE_LABEL


def render(tasks: list[Task]) -> list[TaskItem]:
    return [TaskItem(key=i, label=t.label, checked=t.done) for i, t in enumerate(tasks)]


def render_text(items: list[TaskItem]) -> str:
    """Format rendered items for a terminal, numbering from 1."""
    if not items:
        return "No tasks yet."
    return "\n".join(
        f"[{'x' if item.checked else ' '}] {item.key + 1}. {item.label}  {item.remove_label}"
        for item in items
    )
