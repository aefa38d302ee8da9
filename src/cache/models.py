# src/cache/models.py - v2
"""Outcome models returned by load and save.

Every failure class of the persistence manager maps to a status value
instead of an exception, so callers can branch on outcomes directly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel

LoadStatus = Literal[
    "loaded", "file_absent", "path_unresolved", "read_failed", "malformed"
]
SaveStatus = Literal[
    "saved", "path_unresolved", "serialization_failed", "write_failed"
]


class LoadOutcome(BaseModel):
    """Result of loading a cache file into memory."""

    status: LoadStatus
    path: Path | None = None
    loaded: int = 0
    skipped: int = 0
    error: str | None = None

    @property
    def applied(self) -> bool:
        """True when the in-memory store was replaced."""
        return self.status == "loaded"


class SaveOutcome(BaseModel):
    """Result of writing the in-memory store to disk."""

    status: SaveStatus
    path: Path | None = None
    written: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "saved"
