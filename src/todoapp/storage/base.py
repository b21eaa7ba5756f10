from typing import Protocol


class KeyValueStorage(Protocol):
    """Interface for a string key-value store holding the task list."""

    def get_item(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...
