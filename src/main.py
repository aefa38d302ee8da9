# src/main.py - v2
"""CLI entry point: path, list, csv and delete commands.

Usage:
    filecache path [file]
    filecache list [file]
    filecache csv [file]
    filecache delete <id> [--file FILE]

Every command works on schemaless records (JSON objects with an ``id``).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from filecache.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="filecache",
        description=f"filecache v{__version__} - inspect JSON file caches",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--documents-dir", type=Path, default=None,
        help="Base directory instead of the configured documents directory",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- path ---
    p_path = subparsers.add_parser("path", help="Print the resolved cache file path")
    p_path.add_argument("file", nargs="?", default=None, help="Cache file name")
    p_path.set_defaults(func=_cmd_path)

    # --- list ---
    p_list = subparsers.add_parser("list", help="Print every item as JSON")
    p_list.add_argument("file", nargs="?", default=None, help="Cache file name")
    p_list.set_defaults(func=_cmd_list)

    # --- csv ---
    p_csv = subparsers.add_parser("csv", help="Print every item as a CSV line")
    p_csv.add_argument("file", nargs="?", default=None, help="Cache file name")
    p_csv.set_defaults(func=_cmd_csv)

    # --- delete ---
    p_delete = subparsers.add_parser("delete", help="Delete one item and save")
    p_delete.add_argument("item_id", help="Id of the item to delete")
    p_delete.add_argument(
        "-f", "--file", default=None, help="Cache file name",
    )
    p_delete.set_defaults(func=_cmd_delete)

    return parser


def _open_cache(args: argparse.Namespace):
    """Build settings and logging from args, return an empty record cache."""
    from filecache.cache.cache_factory import create_file_cache
    from filecache.cache.record import RecordItem
    from filecache.config.settings import load_settings
    from filecache.logging.logger import setup_logging

    overrides: dict[str, object] = {}
    if args.documents_dir is not None:
        overrides["documents_dir"] = args.documents_dir
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    settings = load_settings(**overrides)

    setup_logging(
        level=settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )
    return create_file_cache(RecordItem, settings)


def _load_or_report(cache, file_name: str | None) -> bool:
    """Load ``file_name``; False when the file exists but could not be used."""
    outcome = cache.load(file_name)
    if outcome.status in ("loaded", "file_absent"):
        return True
    logger.error(
        "Cannot load %s: %s%s",
        outcome.path or file_name, outcome.status,
        f" ({outcome.error})" if outcome.error else "",
    )
    return False


def _cmd_path(args: argparse.Namespace) -> int:
    cache = _open_cache(args)
    path = cache.persistence.resolve_path(args.file)
    if path is None:
        logger.error("Cannot resolve the storage directory")
        return 1
    print(path)
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    cache = _open_cache(args)
    if not _load_or_report(cache, args.file):
        return 1
    for item in cache:
        print(json.dumps(item.to_json_value(), ensure_ascii=False, sort_keys=True))
    return 0


def _cmd_csv(args: argparse.Namespace) -> int:
    cache = _open_cache(args)
    if not _load_or_report(cache, args.file):
        return 1
    for item in cache:
        print(item.to_csv_line())
    return 0


def _cmd_delete(args: argparse.Namespace) -> int:
    cache = _open_cache(args)
    if not _load_or_report(cache, args.file):
        return 1

    removed = cache.delete(args.item_id)
    if removed is None:
        logger.error("No item with id %r", args.item_id)
        return 1

    outcome = cache.save(args.file)
    if not outcome.ok:
        logger.error("Cannot save %s: %s", outcome.path, outcome.status)
        return 1
    print(f"Deleted {removed.id}, {outcome.written} items remain")
    return 0


if __name__ == "__main__":
    sys.exit(main())
