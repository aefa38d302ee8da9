# src/cache/persistence.py - v1
"""Bridge between a FileCache and a JSON file on disk.

Files live under ``<documents dir>/<storage subdir>/<file name>``. The
storage directory is resolved and created on first use, then memoized on the
manager instance. Nothing here raises to the caller: every failure ends up
in the returned outcome and in the log.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from filecache.cache.models import LoadOutcome, SaveOutcome
from filecache.logging.context import clear_context, set_operation_context
from filecache.storage.base_filesystem import BaseFileSystem
from filecache.storage.local_filesystem import LocalFileSystem

if TYPE_CHECKING:
    from filecache.cache.file_cache import FileCache

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "default.json"
DEFAULT_STORAGE_SUBDIR = "CacheStorage"


class PersistenceManager:
    """Resolves cache file paths and runs load/save against them."""

    def __init__(
        self,
        filesystem: BaseFileSystem | None = None,
        storage_subdir: str = DEFAULT_STORAGE_SUBDIR,
        default_file_name: str = DEFAULT_FILE_NAME,
        json_indent: int | None = None,
    ) -> None:
        self._fs = filesystem or LocalFileSystem()
        self._subdir = storage_subdir
        self._default_file_name = default_file_name
        self._json_indent = json_indent
        self._base_dir: Path | None = None

    @property
    def default_file_name(self) -> str:
        return self._default_file_name

    @property
    def base_dir(self) -> Path | None:
        """Memoized storage directory, None until first successful resolve."""
        return self._base_dir

    # --- Path resolution ---

    def resolve_path(self, file_name: str | None = None) -> Path | None:
        """Return the full path for ``file_name``, or None if no base dir.

        A directory creation failure is logged but the path is still
        returned; the later read or write reports the real problem.
        """
        if self._base_dir is None:
            self._base_dir = self._create_base_dir()
        if self._base_dir is None:
            return None
        return self._base_dir / (file_name or self._default_file_name)

    def _create_base_dir(self) -> Path | None:
        documents = self._fs.documents_dir()
        if documents is None:
            logger.error("Cannot resolve the documents directory")
            return None
        base = documents / self._subdir
        try:
            self._fs.make_dirs(base)
        except OSError as e:
            logger.error("Failed to create storage directory %s: %s", base, e)
        return base

    # --- Load ---

    def load(self, cache: FileCache[Any], file_name: str | None = None) -> LoadOutcome:
        """Replace the contents of ``cache`` with the file's items.

        The cache is left untouched unless the file exists and holds a JSON
        array of objects. Elements the item type cannot parse are skipped.
        """
        name = file_name or self._default_file_name
        set_operation_context("load", name)
        try:
            return self._load(cache, name)
        finally:
            clear_context()

    def _load(self, cache: FileCache[Any], name: str) -> LoadOutcome:
        path = self.resolve_path(name)
        if path is None:
            return LoadOutcome(status="path_unresolved")

        if not self._fs.exists(path):
            logger.info("No cache file at %s, keeping current contents", path)
            return LoadOutcome(status="file_absent", path=path)

        try:
            raw = self._fs.read_bytes(path)
        except OSError as e:
            logger.error("Failed to read %s: %s", path, e)
            return LoadOutcome(status="read_failed", path=path, error=str(e))

        try:
            document = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            logger.warning("Cache file %s is not valid JSON: %s", path, e)
            return LoadOutcome(status="malformed", path=path, error=str(e))

        if not isinstance(document, list) or not all(
            isinstance(element, dict) for element in document
        ):
            logger.warning("Cache file %s is not a JSON array of objects", path)
            return LoadOutcome(
                status="malformed", path=path,
                error="top level is not an array of objects",
            )

        items = []
        skipped = 0
        for index, element in enumerate(document):
            item = cache.item_type.parse_json(element)
            if item is None or not item.id:
                logger.warning("Skipping unparseable element %d in %s", index, path)
                skipped += 1
                continue
            items.append(item)

        cache.replace_contents(items)
        logger.info(
            "Loaded %d items from %s (%d skipped)", len(cache), path, skipped
        )
        return LoadOutcome(
            status="loaded", path=path, loaded=len(cache), skipped=skipped
        )

    # --- Save ---

    def save(self, cache: FileCache[Any], file_name: str | None = None) -> SaveOutcome:
        """Overwrite the file with every item of ``cache`` as a JSON array."""
        name = file_name or self._default_file_name
        set_operation_context("save", name)
        try:
            return self._save(cache, name)
        finally:
            clear_context()

    def _save(self, cache: FileCache[Any], name: str) -> SaveOutcome:
        path = self.resolve_path(name)
        if path is None:
            return SaveOutcome(status="path_unresolved")

        try:
            values = [item.to_json_value() for item in cache.items()]
            data = json.dumps(
                values, ensure_ascii=False, allow_nan=False, indent=self._json_indent
            ).encode("utf-8")
        except (TypeError, ValueError, RecursionError) as e:
            logger.error("Failed to serialize cache for %s: %s", path, e)
            return SaveOutcome(
                status="serialization_failed", path=path, error=str(e)
            )

        try:
            self._fs.write_bytes(path, data)
        except OSError as e:
            logger.error("Failed to write %s: %s", path, e)
            return SaveOutcome(status="write_failed", path=path, error=str(e))

        logger.info("Saved %d items to %s", len(values), path)
        return SaveOutcome(status="saved", path=path, written=len(values))
