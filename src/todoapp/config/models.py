"""Pydantic configuration models for the to-do list."""

from typing import Literal

from pydantic import BaseModel, Field

from todoapp.app import DEFAULT_STORAGE_KEY


class StorageConfig(BaseModel):
    """Where the task list is stored."""

    path: str = "data/tasks.json"
    key: str = Field(default=DEFAULT_STORAGE_KEY, min_length=1)

    model_config = {"frozen": True}


class TodoConfig(BaseModel):
    """Root configuration for the to-do list."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = {"frozen": True}
