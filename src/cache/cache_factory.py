# src/cache/cache_factory.py - v3
"""Factory wiring Settings into a FileCache."""

from __future__ import annotations

from typing import TypeVar

from filecache.cache.file_cache import FileCache
from filecache.cache.item import FileCacheItem, missing_item_methods
from filecache.cache.persistence import PersistenceManager
from filecache.config.settings import Settings
from filecache.storage.local_filesystem import LocalFileSystem

T = TypeVar("T", bound=FileCacheItem)


def create_persistence_manager(settings: Settings | None = None) -> PersistenceManager:
    """Build a PersistenceManager over the local filesystem.

    Args:
        settings: Application settings. Defaults to ~/Documents/CacheStorage.
    """
    if settings is None:
        return PersistenceManager()

    filesystem = LocalFileSystem(
        documents_dir=settings.documents_path,
        atomic_writes=settings.atomic_writes,
    )
    return PersistenceManager(
        filesystem=filesystem,
        storage_subdir=settings.storage_subdir,
        default_file_name=settings.default_file_name,
        json_indent=settings.json_indent,
    )


def create_file_cache(
    item_type: type[T], settings: Settings | None = None
) -> FileCache[T]:
    """Instantiate an empty FileCache for ``item_type``.

    Raises:
        TypeError: If ``item_type`` lacks one of the item capability methods.
    """
    missing = missing_item_methods(item_type)
    if missing:
        raise TypeError(
            f"{item_type.__name__} is not a cache item type, missing: "
            + ", ".join(missing)
        )
    return FileCache(item_type, persistence=create_persistence_manager(settings))
