"""Rendering and display-name helpers for the menu, order and ticket panes."""

from __future__ import annotations

from typing import Iterable

from rich.text import Text

from posmenu.constant import SECTION_BADGE_STYLES
from posmenu.data import get_section_by_id
from posmenu.models import MenuItem, OrderLine
from posmenu.naming import generate_display_name_for_receipt, resolve_item_display_name

_DEFAULT_BADGE_STYLE = "bold #ffffff on #4a4a4a"


def badge_style(section_id: str | None) -> str:
    """Return a consistent badge style for a section slug or pseudo id."""
    if section_id is None:
        return _DEFAULT_BADGE_STYLE
    section = get_section_by_id(section_id)
    if section is None:
        return _DEFAULT_BADGE_STYLE
    return SECTION_BADGE_STYLES.get(section.id, _DEFAULT_BADGE_STYLE)


def section_badge(section_id: str | None) -> Text:
    """Render the short code badge for a section, or nothing for unknown ids."""
    text = Text()
    section = get_section_by_id(section_id) if section_id else None
    if section is not None:
        text.append(f" {section.code_prefix} ", style=badge_style(section.id))
    return text


def format_menu_item(item: MenuItem) -> Text:
    """Render a menu line with its till name."""
    return Text(resolve_item_display_name(item))


def format_order_label(line: OrderLine, section_id: str | None = None) -> Text:
    """Render an order label with an optional coloured section tag."""
    text = section_badge(section_id)
    if text.plain:
        text.append(" ")
    if line.quantity > 1:
        text.append(f"{line.quantity}x ", style="bold")
    text.append(resolve_item_display_name(line.item))
    return text


def receipt_name(item: MenuItem) -> str:
    """Printed receipt name; keeps historical receipt wording."""
    base_name = item.item_name or item.name or ""
    variant_name = item.variant_name or item.variant_object_name
    return generate_display_name_for_receipt(base_name, variant_name, item.protein_type)


def kitchen_ticket_lines(lines: Iterable[OrderLine]) -> list[str]:
    """Kitchen ticket rows, preferring abbreviated kitchen names."""
    return [f"{line.quantity} x {resolve_item_display_name(line.item, use_kitchen_name=True)}" for line in lines]


def receipt_lines(lines: Iterable[OrderLine]) -> list[str]:
    """Customer receipt rows."""
    return [f"{line.quantity} x {receipt_name(line.item)}" for line in lines]


def format_ticket(title: str, rows: list[str]) -> Text:
    """Render a ticket preview body."""
    text = Text()
    text.append(title, style="bold")
    text.append("\n")
    text.append("-" * max(len(title), 16), style="dim")
    if not rows:
        text.append("\n(no items)", style="dim")
        return text
    for row in rows:
        text.append(f"\n{row}")
    return text
