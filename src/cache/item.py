# src/cache/item.py - v1
"""Item capability: what any type stored in a FileCache must provide."""

from __future__ import annotations

from typing import Any, Protocol


class FileCacheItem(Protocol):
    """Structural contract for cacheable items.

    Implementations expose a stable non-empty ``id``, two encodings (a
    JSON-compatible value and a single CSV line) and the matching parsing
    constructors, which return None instead of raising on bad input.
    Neither the parsers nor ``to_json_value`` may raise: load and save only
    absorb JSON codec errors, not exceptions thrown by item code.
    """

    @property
    def id(self) -> str: ...

    def to_json_value(self) -> Any: ...

    def to_csv_line(self) -> str: ...

    @classmethod
    def parse_json(cls, value: Any) -> FileCacheItem | None: ...

    @classmethod
    def parse_csv(cls, line: str) -> FileCacheItem | None: ...


ITEM_METHODS = ("to_json_value", "to_csv_line", "parse_json", "parse_csv")


def missing_item_methods(item_type: type) -> list[str]:
    """Names of capability methods that ``item_type`` does not provide.

    ``id`` is not checked here: model libraries often keep fields off the class.
    """
    return [
        name for name in ITEM_METHODS if not callable(getattr(item_type, name, None))
    ]
