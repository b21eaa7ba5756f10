from todoapp.storage.base import KeyValueStorage
from todoapp.storage.file import FileStorage
from todoapp.storage.memory import MemoryStorage

__all__ = ["FileStorage", "KeyValueStorage", "MemoryStorage"]
