"""Main Textual app class."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Header, Static

from posmenu.data import find_root_section, get_section_display_name
from posmenu.grouping import (
    DISPLAY_MODE_ALL,
    DISPLAY_MODE_SECTION,
    get_display_mode,
    group_items_by_hierarchy,
    group_items_by_section,
    items_for_category,
)
from posmenu.models import Category, MenuItem, OrderLine
from posmenu.persistence import KeyValueStore
from posmenu.rendering import (
    format_menu_item,
    format_order_label,
    kitchen_ticket_lines,
    receipt_lines,
    section_badge,
)
from posmenu.sidebar import CategorySidebar, SidebarPresenter
from posmenu.snapshot import MenuProvider
from posmenu.ticket_modal import TicketModal

logger = logging.getLogger(__name__)

ROW_HEADER = "header"
ROW_SUBHEADER = "subheader"
ROW_ITEM = "item"


@dataclass(frozen=True)
class MenuRow:
    """A line in the menu pane; only item rows can be highlighted."""

    kind: str
    label: str
    item: MenuItem | None = None
    section_id: str | None = None


class MenuApp(App):
    """A Textual app for browsing the sectioned menu and building an order."""

    TITLE = "POS Menu"
    SUB_TITLE = "Sections / Categories"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #sidebar-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #menu-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #orders-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 3;
    }

    #sidebar, #menu-list, #orders-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    selected_index = reactive(0)
    order_selected_index = reactive(None)

    BINDINGS = [
        ("j", "sidebar_move(1)", "Next category"),
        ("k", "sidebar_move(-1)", "Previous category"),
        ("enter", "sidebar_select", "Select"),
        ("space", "sidebar_toggle", "Expand/collapse"),
        ("up", "cycle_items(-1)", "Previous item"),
        ("down", "cycle_items(1)", "Next item"),
        ("a", "add_selected", "Add to order"),
        ("n", "move_order_selection(1)", "Next order line"),
        ("p", "move_order_selection(-1)", "Previous order line"),
        ("d", "delete_selected_order", "Delete line"),
        ("t", "show_kitchen_ticket", "Kitchen ticket"),
        ("r", "show_receipt", "Receipt"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, provider: MenuProvider, store: KeyValueStore) -> None:
        super().__init__()
        self.categories: list[Category] = provider.categories()
        self.menu_items: list[MenuItem] = provider.menu_items()
        self.presenter = SidebarPresenter(self.categories, store)
        self.selected_category: str | None = None
        self.order_lines: list[OrderLine] = []
        self.system_status = ""
        logger.info("app_init categories=%d items=%d", len(self.categories), len(self.menu_items))

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="sidebar-pane"):
                yield Static("CATEGORIES", classes="pane-title")
                yield CategorySidebar(self.presenter, on_select=self._on_category_selected, id="sidebar")
            with Vertical(id="menu-pane"):
                yield Static(id="status-bar")
                yield Static(id="menu-list")
            with Vertical(id="orders-pane"):
                yield Static("Order", classes="pane-title")
                yield Static("(no items yet)", id="orders-list")

    def on_mount(self) -> None:
        self._refresh_all()

    def _modal_open(self) -> bool:
        return isinstance(self.screen, TicketModal)

    def _sidebar(self) -> CategorySidebar:
        return self.query_one("#sidebar", CategorySidebar)

    def action_sidebar_move(self, delta: int) -> None:
        if self._modal_open():
            return
        self._sidebar().move_cursor(delta)

    def action_sidebar_select(self) -> None:
        if self._modal_open():
            return
        self._sidebar().select_current()

    def action_sidebar_toggle(self) -> None:
        if self._modal_open():
            return
        self._sidebar().toggle_current()

    def _on_category_selected(self, selection: str | None) -> None:
        self.selected_category = selection
        self.selected_index = 0
        logger.info("category_selected selection=%r mode=%s", selection, get_display_mode(selection))
        self._refresh_menu()

    def action_cycle_items(self, delta: int) -> None:
        if self._modal_open():
            return
        items = self._selectable_items()
        if not items:
            self.selected_index = 0
            self._refresh_menu()
            return
        self.selected_index = (self.selected_index + delta) % len(items)
        self._refresh_menu()

    def action_add_selected(self) -> None:
        if self._modal_open():
            return
        items = self._selectable_items()
        if not items:
            return
        item = items[min(self.selected_index, len(items) - 1)]
        for idx, line in enumerate(self.order_lines):
            if line.item.id == item.id:
                line.quantity += 1
                self.order_selected_index = idx
                break
        else:
            self.order_lines.append(OrderLine(item=item))
            self.order_selected_index = len(self.order_lines) - 1
        self.system_status = ""
        self._refresh_orders()
        self._refresh_status()

    def action_move_order_selection(self, delta: int) -> None:
        if self._modal_open() or not self.order_lines:
            return
        if self.order_selected_index is None:
            self.order_selected_index = 0 if delta > 0 else len(self.order_lines) - 1
        else:
            self.order_selected_index = (self.order_selected_index + delta) % len(self.order_lines)
        self._refresh_orders()

    def action_delete_selected_order(self) -> None:
        if self._modal_open():
            return
        if not self.order_lines or self.order_selected_index is None:
            return

        idx = self.order_selected_index
        if not (0 <= idx < len(self.order_lines)):
            self.order_selected_index = None
            self._refresh_orders()
            return

        del self.order_lines[idx]

        if not self.order_lines:
            self.order_selected_index = None
        else:
            self.order_selected_index = min(idx, len(self.order_lines) - 1)

        self._refresh_orders()

    def action_show_kitchen_ticket(self) -> None:
        if self._modal_open():
            return
        if not self.order_lines:
            self.system_status = "Nothing to send: order is empty"
            self._refresh_status()
            return
        self.push_screen(TicketModal("KITCHEN", kitchen_ticket_lines(self.order_lines)))

    def action_show_receipt(self) -> None:
        if self._modal_open():
            return
        if not self.order_lines:
            self.system_status = "Nothing to show: order is empty"
            self._refresh_status()
            return
        self.push_screen(TicketModal("RECEIPT", receipt_lines(self.order_lines)))

    def menu_rows(self) -> list[MenuRow]:
        """Rows for the current sidebar selection."""
        mode = get_display_mode(self.selected_category)
        rows: list[MenuRow] = []

        if mode == DISPLAY_MODE_ALL:
            menu = group_items_by_hierarchy(self.menu_items, self.categories)
            for section in menu.sections:
                rows.append(MenuRow(kind=ROW_HEADER, label=section.display_name, section_id=section.id))
                for group in section.categories:
                    rows.append(MenuRow(kind=ROW_SUBHEADER, label=group.name, section_id=section.id))
                    rows.extend(
                        MenuRow(kind=ROW_ITEM, label="", item=item, section_id=section.id) for item in group.items
                    )
            return rows

        selected = self.selected_category or ""
        if mode == DISPLAY_MODE_SECTION:
            section_id = selected
            rows.append(MenuRow(kind=ROW_HEADER, label=get_section_display_name(section_id), section_id=section_id))
            for group in group_items_by_section(self.menu_items, self.categories, section_id):
                rows.append(MenuRow(kind=ROW_SUBHEADER, label=group.name, section_id=section_id))
                rows.extend(MenuRow(kind=ROW_ITEM, label="", item=item, section_id=section_id) for item in group.items)
            return rows

        section = find_root_section(selected, self.categories)
        section_id = section.id if section is not None else None
        category_name = next(
            (cat.name for cat in self.categories if cat.id == selected),
            selected,
        )
        rows.append(MenuRow(kind=ROW_SUBHEADER, label=category_name, section_id=section_id))
        rows.extend(
            MenuRow(kind=ROW_ITEM, label="", item=item, section_id=section_id)
            for item in items_for_category(self.menu_items, self.categories, selected)
        )
        return rows

    def _selectable_items(self) -> list[MenuItem]:
        return [row.item for row in self.menu_rows() if row.item is not None]

    def _section_for_item(self, item: MenuItem) -> str | None:
        if item.category_id is None:
            return None
        section = find_root_section(item.category_id, self.categories)
        return section.id if section is not None else None

    def _refresh_all(self) -> None:
        self._refresh_status()
        self._refresh_menu()
        self._refresh_orders()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            half = rows // 2
            start = selected - half
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        status = self.system_status or "Ready"
        bar.update(f"J/K categories, Enter select, Space expand. ↑/↓ items, A add.\n{status}")

    def _refresh_menu(self) -> None:
        try:
            menu_widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return

        rows = self.menu_rows()
        item_positions = [idx for idx, row in enumerate(rows) if row.kind == ROW_ITEM]
        if not item_positions:
            menu_widget.update("No items")
            return

        if self.selected_index >= len(item_positions):
            self.selected_index = 0
        cursor_row = item_positions[self.selected_index]

        visible_rows = self._visible_rows(menu_widget)
        start, end = self._window_bounds(len(rows), visible_rows, cursor_row)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            row = rows[idx]
            if row.kind == ROW_HEADER:
                lines.append_text(section_badge(row.section_id))
                lines.append(f" {row.label}", style="bold")
            elif row.kind == ROW_SUBHEADER:
                lines.append(f"  {row.label}", style="bold dim")
            elif row.item is not None:
                pointer = "➤ " if idx == cursor_row else "  "
                lines.append(f"  {pointer}")
                lines.append_text(format_menu_item(row.item))

        if end < len(rows):
            lines.append("\n⋮", style="dim")

        menu_widget.update(lines)

    def _refresh_orders(self) -> None:
        try:
            orders_widget = self.query_one("#orders-list", Static)
        except NoMatches:
            return
        if not self.order_lines:
            self.order_selected_index = None
            orders_widget.update("(no items yet)")
            return

        if self.order_selected_index is not None and self.order_selected_index >= len(self.order_lines):
            self.order_selected_index = len(self.order_lines) - 1

        visible_rows = self._visible_rows(orders_widget)
        start, end = self._window_bounds(len(self.order_lines), visible_rows, self.order_selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")

            pointer = "➤ " if idx == self.order_selected_index else "  "
            lines.append(pointer)
            lines.append(f"{idx + 1}. ")
            line = self.order_lines[idx]
            lines.append_text(format_order_label(line, self._section_for_item(line.item)))

        if end < len(self.order_lines):
            lines.append("\n⋮", style="dim")

        orders_widget.update(lines)
