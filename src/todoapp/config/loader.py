"""YAML configuration loading utilities."""

from pathlib import Path

import yaml

from todoapp.config.models import TodoConfig


def load_config(path: Path | str) -> TodoConfig:
    """Load configuration from YAML file.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path)
    with path.open() as f:
        raw = yaml.safe_load(f)

    return TodoConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).parent.parent.parent.parent / "configs" / "todo.yaml"
