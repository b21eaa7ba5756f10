"""Factory functions to create the to-do app from configuration."""

from collections.abc import Callable

from todoapp.app import TodoApp
from todoapp.config.models import TodoConfig
from todoapp.storage import FileStorage


def create_app(
    config: TodoConfig,
    *,
    alert: Callable[[str], None] | None = None,
) -> TodoApp:
    """Create a file-backed TodoApp. The stored list is not restored yet."""
    storage = FileStorage(config.storage.path)
    return TodoApp(storage, key=config.storage.key, alert=alert)
