"""Category sidebar: expansion state, selection and its Textual widget."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from rich.text import Text
from textual.reactive import reactive
from textual.widgets import Static

from posmenu.config import EXPANDED_SECTIONS_KEY
from posmenu.constant import SECTION_ID_PREFIX
from posmenu.data import FIXED_SECTIONS, get_child_categories, strip_section_prefix
from posmenu.models import Category
from posmenu.persistence import KeyValueStore
from posmenu.rendering import badge_style

logger = logging.getLogger(__name__)

ROW_ALL = "all"
ROW_SECTION = "section"
ROW_CATEGORY = "category"


@dataclass(frozen=True)
class SidebarRow:
    """One visible sidebar line."""

    kind: str
    label: str
    selection: str | None
    section_id: str | None = None
    has_children: bool = False
    is_last_child: bool = False


class SidebarPresenter:
    """
    Sidebar state independent of rendering.

    Selection and expansion are separate: choosing a category expands the
    section that owns it but never collapses another section. The expanded
    set is written to ``store`` as a JSON array after every change. Store
    failures are logged and the in-memory state carries on for the session.
    """

    def __init__(
        self,
        categories: Iterable[Category],
        store: KeyValueStore,
        storage_key: str = EXPANDED_SECTIONS_KEY,
    ) -> None:
        self.categories = list(categories)
        self.store = store
        self.storage_key = storage_key
        self.selected_category: str | None = None
        self.expanded: set[str] = self._load_expanded()

    def _load_expanded(self) -> set[str]:
        try:
            raw = self.store.get(self.storage_key)
            if raw is None:
                return set()
            saved = json.loads(raw)
            if not isinstance(saved, list):
                raise ValueError(f"expected a JSON array, got {type(saved).__name__}")
            return {str(section_id) for section_id in saved}
        except Exception as exc:
            logger.warning("Failed to load expanded categories from storage: %s", exc)
            return set()

    def _save_expanded(self) -> None:
        try:
            self.store.set(self.storage_key, json.dumps(sorted(self.expanded)))
        except Exception as exc:
            logger.warning("Failed to save expanded categories to storage: %s", exc)

    def set_categories(self, categories: Iterable[Category]) -> None:
        self.categories = list(categories)

    def child_categories(self, section_id: str) -> list[Category]:
        return get_child_categories(section_id, self.categories)

    def is_expanded(self, section_id: str) -> bool:
        return section_id in self.expanded

    def toggle_expanded(self, section_id: str) -> bool:
        """Flip a section open or closed and return the new state."""
        if section_id in self.expanded:
            self.expanded.discard(section_id)
            expanded = False
        else:
            self.expanded.add(section_id)
            expanded = True
        self._save_expanded()
        return expanded

    def expand(self, section_id: str) -> None:
        if section_id in self.expanded:
            return
        self.expanded.add(section_id)
        self._save_expanded()

    def is_parent_of_selected(self, section_id: str) -> bool:
        if not self.selected_category:
            return False
        return any(cat.id == self.selected_category for cat in self.child_categories(section_id))

    def select(self, category_id: str | None) -> None:
        """Select all items (None), a section pseudo id or a category id."""
        logger.debug("sidebar select category_id=%r", category_id)
        self.selected_category = category_id
        if category_id is None:
            return
        if category_id.startswith(SECTION_ID_PREFIX):
            self.expand(strip_section_prefix(category_id))
            return
        for section in FIXED_SECTIONS:
            if self.is_parent_of_selected(section.id):
                self.expand(section.id)

    def rows(self) -> list[SidebarRow]:
        """Visible rows: All Items, every section, then children of expanded sections."""
        rows = [SidebarRow(kind=ROW_ALL, label="All Items", selection=None)]
        for section in FIXED_SECTIONS:
            children = self.child_categories(section.id)
            rows.append(
                SidebarRow(
                    kind=ROW_SECTION,
                    label=section.display_name,
                    selection=section.pseudo_id,
                    section_id=section.id,
                    has_children=bool(children),
                )
            )
            if not children or not self.is_expanded(section.id):
                continue
            for idx, child in enumerate(children):
                rows.append(
                    SidebarRow(
                        kind=ROW_CATEGORY,
                        label=child.name,
                        selection=child.id,
                        section_id=section.id,
                        is_last_child=idx == len(children) - 1,
                    )
                )
        return rows

    def row_index(self, selection: str | None) -> int | None:
        for idx, row in enumerate(self.rows()):
            if row.selection == selection:
                return idx
        return None


class CategorySidebar(Static):
    """Sidebar listing All Items, the fixed sections and expanded child categories."""

    cursor_index = reactive(0)

    def __init__(
        self,
        presenter: SidebarPresenter,
        on_select: Callable[[str | None], None],
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.presenter = presenter
        self.on_select = on_select

    def on_mount(self) -> None:
        self.refresh_rows()

    def move_cursor(self, delta: int) -> None:
        rows = self.presenter.rows()
        if not rows:
            return
        self.cursor_index = (self.cursor_index + delta) % len(rows)
        self.refresh_rows()

    def select_current(self) -> None:
        rows = self.presenter.rows()
        if not rows:
            return
        row = rows[min(self.cursor_index, len(rows) - 1)]
        self.select_value(row.selection)

    def select_value(self, selection: str | None) -> None:
        """Select a row by value and keep it in view."""
        self.presenter.select(selection)
        idx = self.presenter.row_index(selection)
        if idx is not None:
            self.cursor_index = idx
        self.refresh_rows()
        self.on_select(selection)

    def toggle_current(self) -> None:
        rows = self.presenter.rows()
        if not rows:
            return
        row = rows[min(self.cursor_index, len(rows) - 1)]
        if row.section_id is None:
            return
        self.presenter.toggle_expanded(row.section_id)
        # Collapsing from a child row leaves the cursor on its section.
        if row.kind == ROW_CATEGORY:
            idx = self.presenter.row_index(f"{SECTION_ID_PREFIX}{row.section_id}")
            if idx is not None:
                self.cursor_index = idx
        self.refresh_rows()

    def _visible_rows(self) -> int:
        height = self.size.height
        if height <= 0:
            return 12
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        start = selected - rows // 2
        start = max(0, start)
        start = min(start, total - rows)
        return (start, start + rows)

    def _format_row(self, row: SidebarRow, is_cursor: bool) -> Text:
        selected = self.presenter.selected_category
        text = Text()
        text.append("➤ " if is_cursor else "  ")

        if row.kind == ROW_ALL:
            style = "bold reverse" if selected is None else "bold"
            text.append(row.label, style=style)
            return text

        if row.kind == ROW_SECTION and row.section_id is not None:
            if row.has_children:
                text.append("▾ " if self.presenter.is_expanded(row.section_id) else "▸ ", style="dim")
            else:
                text.append("  ")
            if selected == row.selection:
                style = badge_style(row.section_id)
            elif self.presenter.is_parent_of_selected(row.section_id):
                style = "bold underline"
            else:
                style = "bold"
            text.append(row.label, style=style)
            return text

        text.append("    └ " if row.is_last_child else "    ├ ", style="dim")
        text.append(row.label, style="reverse" if selected == row.selection else "")
        return text

    def refresh_rows(self) -> None:
        rows = self.presenter.rows()
        if self.cursor_index >= len(rows):
            self.cursor_index = max(0, len(rows) - 1)

        start, end = self._window_bounds(len(rows), self._visible_rows(), self.cursor_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            lines.append_text(self._format_row(rows[idx], idx == self.cursor_index))

        if end < len(rows):
            lines.append("\n⋮", style="dim")

        self.update(lines)
