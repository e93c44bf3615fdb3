"""Entry point for the pos-menu Textual app."""

from __future__ import annotations

import argparse
import logging
import sqlite3
import sys

from posmenu.config import DB_PATH, MENU_SNAPSHOT_PATH
from posmenu.logging_config import configure_logging
from posmenu.menu_app import MenuApp
from posmenu.persistence import KeyValueStore, MemoryKeyValueStore, SqliteKeyValueStore
from posmenu.snapshot import JsonSnapshotProvider, SnapshotError

logger = logging.getLogger(__name__)


def open_store(db_path: str) -> KeyValueStore:
    """Open the UI-state store, falling back to memory when the database is unusable."""
    store = SqliteKeyValueStore(db_path)
    try:
        store.bootstrap_schema()
    except (sqlite3.Error, OSError) as exc:
        logger.warning("UI state database %s unavailable, state will not persist: %s", db_path, exc)
        return MemoryKeyValueStore()
    return store


def main(argv: list[str] | None = None) -> int:
    """Run the Textual application."""
    parser = argparse.ArgumentParser(description="Browse the sectioned POS menu.")
    parser.add_argument("--snapshot", default=MENU_SNAPSHOT_PATH, help="menu snapshot JSON file")
    parser.add_argument("--db", default=DB_PATH, help="SQLite file for UI state")
    args = parser.parse_args(argv)

    configure_logging()

    provider = JsonSnapshotProvider(args.snapshot)
    try:
        provider.load()
    except SnapshotError as exc:
        logger.error("%s", exc)
        print(exc, file=sys.stderr)
        return 1

    MenuApp(provider, open_store(args.db)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
