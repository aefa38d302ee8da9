# src/cache/file_cache.py - v1
"""In-memory keyed store of cache items, synchronized with disk on request.

Mutations (add/delete) only touch memory. ``load`` and ``save`` delegate to
the owned PersistenceManager and are the only calls that reach the disk.
Not thread-safe: callers that share a cache across threads must guard every
call with one lock.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

from filecache.cache.item import FileCacheItem
from filecache.cache.models import LoadOutcome, SaveOutcome
from filecache.cache.persistence import PersistenceManager

T = TypeVar("T", bound=FileCacheItem)


class FileCache(Generic[T]):
    """Mapping of item id to item, with explicit load/save."""

    def __init__(
        self,
        item_type: type[T],
        persistence: PersistenceManager | None = None,
    ) -> None:
        self._item_type = item_type
        self._persistence = persistence or PersistenceManager()
        self._items: dict[str, T] = {}

    @property
    def item_type(self) -> type[T]:
        return self._item_type

    @property
    def persistence(self) -> PersistenceManager:
        return self._persistence

    # --- Store operations ---

    def add(self, item: T) -> None:
        """Insert ``item``, replacing any item with the same id.

        The replaced item is dropped whole and the new one moves to the end
        of iteration order.
        """
        key = item.id
        if not key:
            raise ValueError("Cache item id must be a non-empty string")
        self._items.pop(key, None)
        self._items[key] = item

    def delete(self, item_id: str) -> T | None:
        """Remove and return the item for ``item_id``; None if absent."""
        return self._items.pop(item_id, None)

    def get(self, item_id: str) -> T | None:
        return self._items.get(item_id)

    def items(self) -> list[T]:
        """Snapshot of current items in insertion order."""
        return list(self._items.values())

    def snapshot(self) -> Mapping[str, T]:
        """Read-only copy of the id -> item mapping."""
        return MappingProxyType(dict(self._items))

    def replace_contents(self, items: Iterable[T]) -> None:
        """Drop everything and insert ``items`` (later duplicates win)."""
        fresh: dict[str, T] = {}
        for item in items:
            fresh.pop(item.id, None)
            fresh[item.id] = item
        self._items = fresh

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items())

    # --- Disk synchronization ---

    def load(self, file_name: str | None = None) -> LoadOutcome:
        """Replace memory with the contents of ``file_name``."""
        return self._persistence.load(self, file_name)

    def save(self, file_name: str | None = None) -> SaveOutcome:
        """Write current memory to ``file_name``."""
        return self._persistence.save(self, file_name)
