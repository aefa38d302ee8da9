# src/storage/base_filesystem.py - v1
"""Abstract filesystem capability used by the persistence manager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class BaseFileSystem(ABC):
    """Minimal filesystem surface: base directory, mkdir, exists, read, write."""

    @abstractmethod
    def documents_dir(self) -> Path | None:
        """Return the user documents-like base directory, or None if unknown."""

    @abstractmethod
    def make_dirs(self, path: Path) -> None:
        """Create a directory and any missing parents. Raises OSError."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check if path exists."""

    @abstractmethod
    def read_bytes(self, path: Path) -> bytes:
        """Read the whole file. Raises OSError."""

    @abstractmethod
    def write_bytes(self, path: Path, data: bytes) -> None:
        """Create or fully overwrite the file. Raises OSError."""
