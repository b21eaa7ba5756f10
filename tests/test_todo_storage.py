"""Tests for task serialization and storage backends."""

from pathlib import Path

import pytest

from todoapp.errors import StoredDataError
from todoapp.models import Task
from todoapp.serialization import dump_tasks, load_tasks
from todoapp.storage import FileStorage, MemoryStorage


class TestSerialization:
    def test_dump_tasks(self) -> None:
        blob = dump_tasks([Task("a"), Task("b", done=True)])
        assert blob == '[{"label": "a", "done": false}, {"label": "b", "done": true}]'

    def test_load_tasks(self) -> None:
        blob = '[{"label": "a", "done": false}, {"label": "ü", "done": true}]'
        assert load_tasks(blob) == [Task("a"), Task("ü", done=True)]

    @pytest.mark.parametrize("blob", [None, ""])
    def test_load_absent(self, blob: str | None) -> None:
        assert load_tasks(blob) == []

    def test_load_missing_done_defaults_false(self) -> None:
        assert load_tasks('[{"label": "a"}]') == [Task("a")]

    @pytest.mark.parametrize(
        "blob",
        [
            "<li>Buy milk<span>×</span></li>",
            '{"label": "a"}',
            '[{"done": true}]',
            '["a"]',
        ],
    )
    def test_load_malformed(self, blob: str) -> None:
        with pytest.raises(StoredDataError):
            load_tasks(blob)


class TestMemoryStorage:
    def test_get_set(self) -> None:
        storage = MemoryStorage()
        assert storage.get_item("data") is None
        storage.set_item("data", "x")
        storage.set_item("data", "y")
        assert storage.get_item("data") == "y"


class TestFileStorage:
    def test_missing_file_reads_empty(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path / "tasks.json")
        assert storage.get_item("data") is None

    def test_set_creates_parents_and_persists(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "tasks.json"
        FileStorage(path).set_item("data", "[]")

        assert path.exists()
        assert FileStorage(path).get_item("data") == "[]"

    def test_set_keeps_other_keys(self, tmp_path: Path) -> None:
        storage = FileStorage(tmp_path / "tasks.json")
        storage.set_item("a", "1")
        storage.set_item("b", "2")
        storage.set_item("a", "3")

        assert storage.get_item("a") == "3"
        assert storage.get_item("b") == "2"

    def test_non_object_file_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "tasks.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError):
            FileStorage(path).get_item("data")

    def test_non_string_value_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "tasks.json"
        path.write_text('{"data": [1]}')
        storage = FileStorage(path)
        with pytest.raises(ValueError, match="expected a string"):
            storage.get_item("data")
        assert storage.get_item("other") is None
