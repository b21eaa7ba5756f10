"""Data model for the to-do list."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class Task:
    """A single to-do entry.

    Fields:
        label: Text entered by the user, stored exactly as typed.
        done: Whether the task has been checked off.
    """

    label: str
    done: bool = False

    def toggle(self) -> None:
        self.done = not self.done

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        return cls(label=data["label"], done=bool(data.get("done", False)))
