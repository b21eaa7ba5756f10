"""Key-value storage persisted to a JSON file on disk."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileStorage:
    """Key-value storage backed by a single JSON object file.

    The whole file is rewritten on every ``set_item``. A missing file reads
    as an empty store. Write errors are not handled here.

    Args:
        path: Location of the JSON file; parent directories are created on
            first write.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        with self._path.open(encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Storage file {self._path} must hold a JSON object")
        return data

    def get_item(self, key: str) -> str | None:
        value = self._read().get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(
                f"Storage file {self._path} holds a {type(value).__name__} under {key!r}, expected a string"
            )
        return value

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as f:
            json.dump(items, f, indent=2, ensure_ascii=False)
        logger.debug("Wrote key %r to %s", key, self._path)
