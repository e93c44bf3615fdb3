"""Menu data providers: backend snapshots read from disk or held in memory."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Protocol, TypeVar

from posmenu.config import MENU_SNAPSHOT_PATH
from posmenu.models import Category, MenuItem

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SnapshotError(RuntimeError):
    """Raised when a menu snapshot file cannot be used at all."""


class MenuProvider(Protocol):
    """Read-only source of category and menu item snapshots."""

    def categories(self) -> list[Category]: ...

    def menu_items(self) -> list[MenuItem]: ...


class StaticMenuProvider:
    """Provider over lists already in memory."""

    def __init__(self, categories: Iterable[Category] = (), menu_items: Iterable[MenuItem] = ()) -> None:
        self._categories = list(categories)
        self._menu_items = list(menu_items)

    def categories(self) -> list[Category]:
        return list(self._categories)

    def menu_items(self) -> list[MenuItem]:
        return list(self._menu_items)


def _parse_records(records: Any, build: Callable[[Any], T], kind: str) -> list[T]:
    if not isinstance(records, list):
        logger.warning("Snapshot %s is not a list, ignoring it", kind)
        return []

    parsed: list[T] = []
    for idx, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning("Skipping %s record %d: not an object", kind, idx)
            continue
        try:
            parsed.append(build(record))
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping %s record %d: %s", kind, idx, exc)
    return parsed


def parse_snapshot(payload: Any) -> tuple[list[Category], list[MenuItem]]:
    """Turn a decoded snapshot document into categories and menu items."""
    if not isinstance(payload, dict):
        raise SnapshotError("Menu snapshot must be a JSON object")
    categories = _parse_records(payload.get("categories", []), Category.from_record, "category")
    menu_items = _parse_records(payload.get("menu_items", []), MenuItem.from_record, "menu_item")
    return categories, menu_items


class JsonSnapshotProvider:
    """Provider reading ``{"categories": [...], "menu_items": [...]}`` from a JSON file."""

    def __init__(self, path: str | Path = MENU_SNAPSHOT_PATH) -> None:
        self.path = Path(path)
        self._loaded: tuple[list[Category], list[MenuItem]] | None = None

    def load(self) -> tuple[list[Category], list[MenuItem]]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SnapshotError(f"Cannot read menu snapshot {self.path}: {exc}") from exc
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise SnapshotError(f"Menu snapshot {self.path} is not valid JSON: {exc}") from exc

        categories, menu_items = parse_snapshot(payload)
        logger.info(
            "Loaded menu snapshot %s categories=%d items=%d",
            self.path,
            len(categories),
            len(menu_items),
        )
        self._loaded = (categories, menu_items)
        return self._loaded

    def _snapshot(self) -> tuple[list[Category], list[MenuItem]]:
        if self._loaded is None:
            return self.load()
        return self._loaded

    def categories(self) -> list[Category]:
        return list(self._snapshot()[0])

    def menu_items(self) -> list[MenuItem]:
        return list(self._snapshot()[1])
