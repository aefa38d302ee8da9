# src/__init__.py - v1
"""Generic in-process item cache persisted to a single JSON file."""

from filecache.version import __version__

__all__ = ["__version__"]
