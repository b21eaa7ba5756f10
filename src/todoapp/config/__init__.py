"""Configuration module for the to-do list."""

from todoapp.config.factory import create_app
from todoapp.config.loader import get_default_config_path, load_config
from todoapp.config.models import StorageConfig, TodoConfig

__all__ = [
    "StorageConfig",
    "TodoConfig",
    "create_app",
    "get_default_config_path",
    "load_config",
]
