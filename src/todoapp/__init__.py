"""todoapp: an ordered to-do list persisted to a key-value store."""

from todoapp.app import TodoApp
from todoapp.config import TodoConfig, create_app, load_config
from todoapp.errors import StoredDataError
from todoapp.models import Task
from todoapp.render import TaskItem, render, render_text
from todoapp.serialization import dump_tasks, load_tasks
from todoapp.storage import FileStorage, KeyValueStorage, MemoryStorage

__all__ = [
    "FileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "StoredDataError",
    "Task",
    "TaskItem",
    "TodoApp",
    "TodoConfig",
    "create_app",
    "dump_tasks",
    "load_config",
    "load_tasks",
    "render",
    "render_text",
]
