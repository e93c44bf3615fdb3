"""Runtime configuration defaults for persistence, menu data and logging."""

from __future__ import annotations

import os

DB_PATH = os.environ.get("POS_MENU_DB_PATH", "data/pos_menu.db")
MENU_SNAPSHOT_PATH = os.environ.get("POS_MENU_SNAPSHOT_PATH", "data/menu_snapshot.json")

# The terminal belongs to the UI, so log records go to a file.
LOG_PATH = os.environ.get("POS_MENU_LOG_PATH", "/tmp/pos-menu-debug.log")
LOG_LEVEL = os.environ.get("POS_MENU_LOG_LEVEL", "INFO")

EXPANDED_SECTIONS_KEY = "pos_expanded_categories"
