# src/logging/context.py - v1
"""Contextual logging support: attach operation and cache file to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging, set per load/save call.
_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation", default=None
)
_cache_file: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "cache_file", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    operation: str | None = None
    cache_file: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        operation=_operation.get(),
        cache_file=_cache_file.get(),
    )


def set_operation_context(operation: str, cache_file: str | None = None) -> None:
    """Set context for one persistence operation (load or save)."""
    _operation.set(operation)
    _cache_file.set(cache_file)


def clear_context() -> None:
    """Reset all context variables."""
    _operation.set(None)
    _cache_file.set(None)
