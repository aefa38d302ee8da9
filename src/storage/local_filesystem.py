# src/storage/local_filesystem.py - v1
"""Local filesystem capability (default backend)."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from filecache.storage.base_filesystem import BaseFileSystem

logger = logging.getLogger(__name__)


class LocalFileSystem(BaseFileSystem):
    """Read and write files on the local disk."""

    def __init__(
        self, documents_dir: str | Path | None = None, atomic_writes: bool = True
    ) -> None:
        """Initialize with an optional base directory override.

        Args:
            documents_dir: Base directory to use instead of ~/Documents.
            atomic_writes: Write through a temp file and rename over the target.
        """
        self._documents = Path(documents_dir).expanduser() if documents_dir else None
        self._atomic = atomic_writes

    def documents_dir(self) -> Path | None:
        if self._documents is not None:
            return self._documents
        try:
            return Path.home() / "Documents"
        except RuntimeError as e:
            logger.error("Cannot determine home directory: %s", e)
            return None

    def make_dirs(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def read_bytes(self, path: Path) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: Path, data: bytes) -> None:
        p = Path(path)
        if not self._atomic:
            p.write_bytes(data)
            return

        # Temp file lives in the target directory so os.replace stays on one device
        fd, tmp_name = tempfile.mkstemp(
            dir=p.parent, prefix=f".{p.name}.", suffix=".tmp"
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, p)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
