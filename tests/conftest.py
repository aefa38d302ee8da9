# tests/conftest.py - v2
"""Shared test fixtures for unit and integration tests.

Provides a small Note item type and caches rooted in pytest's tmp_path, so
no test touches the real documents directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest
from pydantic import BaseModel, ValidationError

from filecache.cache.file_cache import FileCache
from filecache.cache.persistence import PersistenceManager
from filecache.logging.context import clear_context
from filecache.storage.local_filesystem import LocalFileSystem


class Note(BaseModel):
    """Minimal cache item: an id and a title."""

    id: str
    title: str

    def to_json_value(self) -> Any:
        return self.model_dump(mode="json")

    def to_csv_line(self) -> str:
        return f"{self.id},{self.title}"

    @classmethod
    def parse_json(cls, value: Any) -> Note | None:
        if not isinstance(value, dict):
            return None
        try:
            return cls.model_validate(value)
        except ValidationError:
            return None

    @classmethod
    def parse_csv(cls, line: str) -> Note | None:
        parts = line.split(",", 1)
        if len(parts) != 2:
            return None
        return cls(id=parts[0], title=parts[1])


# === FIXTURES: Items ===


@pytest.fixture
def note_type() -> type[Note]:
    return Note


@pytest.fixture
def sample_notes() -> list[Note]:
    """Three notes with distinct ids."""
    return [
        Note(id="1", title="Buy milk"),
        Note(id="2", title="Walk dog"),
        Note(id="3", title="Call mom"),
    ]


# === FIXTURES: Storage ===


@pytest.fixture
def documents_dir(tmp_path: Path) -> Path:
    """Stand-in for the user documents directory."""
    return tmp_path / "Documents"


@pytest.fixture
def storage_dir(documents_dir: Path) -> Path:
    """Directory the persistence manager writes cache files to."""
    return documents_dir / "CacheStorage"


@pytest.fixture
def filesystem(documents_dir: Path) -> LocalFileSystem:
    return LocalFileSystem(documents_dir=documents_dir)


@pytest.fixture
def persistence(filesystem: LocalFileSystem) -> PersistenceManager:
    return PersistenceManager(filesystem=filesystem)


@pytest.fixture
def cache(persistence: PersistenceManager) -> FileCache[Note]:
    """Empty Note cache stored under tmp_path."""
    return FileCache(Note, persistence=persistence)


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers installed by setup_logging() during a test."""
    yield
    root = logging.getLogger("filecache")
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
