"""Section -> category -> item grouping for the menu pane."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from posmenu.constant import SECTION_ID_PREFIX
from posmenu.data import FIXED_SECTIONS, resolve_section_uuid
from posmenu.models import Category, CategoryGroup, HierarchicalMenu, MenuItem, MenuSection

logger = logging.getLogger(__name__)

DISPLAY_MODE_ALL = "all"
DISPLAY_MODE_SECTION = "section"
DISPLAY_MODE_CATEGORY = "category"


def category_closure(root_ids: Iterable[str], categories: Sequence[Category]) -> set[str]:
    """
    Ids of ``root_ids`` plus every active category descending from them.

    Expansion repeats full passes over ``categories`` until a pass adds
    nothing. The set only grows and is bounded by the category list, so a
    parent cycle in the data ends the loop instead of hanging it.
    """
    closure = set(root_ids)
    found_new = True
    while found_new:
        found_new = False
        for cat in categories:
            if (
                cat.active
                and cat.parent_category_id
                and cat.parent_category_id in closure
                and cat.id not in closure
            ):
                closure.add(cat.id)
                found_new = True
    return closure


def _sort_items(items: Iterable[MenuItem]) -> list[MenuItem]:
    return sorted(items, key=lambda item: item.display_order)


def _category_groups(
    items: Sequence[MenuItem],
    categories: Sequence[Category],
    section_uuid: str,
) -> list[CategoryGroup]:
    direct_children = [cat for cat in categories if cat.active and cat.parent_category_id == section_uuid]
    if not category_closure((cat.id for cat in direct_children), categories):
        return []

    groups: list[CategoryGroup] = []
    for category in sorted(direct_children, key=lambda cat: cat.display_order):
        descendants = category_closure([category.id], categories)
        group_items = _sort_items(item for item in items if item.active and item.category_id in descendants)
        if group_items:
            groups.append(CategoryGroup(id=category.id, name=category.name, items=group_items))
    return groups


def group_items_by_hierarchy(items: Sequence[MenuItem], categories: Sequence[Category]) -> HierarchicalMenu:
    """
    Build the all-items tree, one entry per fixed section in registry order.

    Only the direct children of a section are shown as categories; items
    attached deeper in the tree surface under the top-level category they
    descend from. Sections and categories without items are omitted. Items
    attached to the section record itself are not matched by any category.
    """
    sections: list[MenuSection] = []
    for fixed_section in FIXED_SECTIONS:
        groups = _category_groups(items, categories, fixed_section.uuid)
        if not groups:
            continue
        sections.append(
            MenuSection(
                id=fixed_section.pseudo_id,
                name=fixed_section.name,
                display_name=fixed_section.display_name,
                categories=groups,
            )
        )
    logger.debug(
        "group_items_by_hierarchy items=%d categories=%d sections=%d",
        len(items),
        len(categories),
        len(sections),
    )
    return HierarchicalMenu(sections=sections)


def group_items_by_section(
    items: Sequence[MenuItem],
    categories: Sequence[Category],
    section_id: str,
) -> list[CategoryGroup]:
    """Category groups for one section (slug or "section-*" id); unknown sections give []."""
    section_uuid = resolve_section_uuid(section_id)
    if section_uuid is None:
        logger.warning("No uuid found for section: %s", section_id)
        return []
    groups = _category_groups(items, categories, section_uuid)
    logger.debug(
        "group_items_by_section section=%s categories=%d items=%d",
        section_id,
        len(groups),
        sum(len(group.items) for group in groups),
    )
    return groups


def filter_items_by_section(
    items: Sequence[MenuItem],
    categories: Sequence[Category],
    section_id: str,
) -> list[MenuItem]:
    """Flat list of active items anywhere below a section, in input order."""
    section_uuid = resolve_section_uuid(section_id)
    if section_uuid is None:
        logger.warning("No uuid found for section: %s", section_id)
        return []
    direct_children = [cat.id for cat in categories if cat.active and cat.parent_category_id == section_uuid]
    closure = category_closure(direct_children, categories)
    return [item for item in items if item.active and item.category_id in closure]


def items_for_category(
    items: Sequence[MenuItem],
    categories: Sequence[Category],
    category_id: str,
) -> list[MenuItem]:
    """Active items under one category and its descendants, in display order."""
    selected = next((category for category in categories if category.id == category_id), None)
    if selected is None or not selected.active:
        return []
    descendants = category_closure([category_id], categories)
    return _sort_items(item for item in items if item.active and item.category_id in descendants)


def get_display_mode(selected_category: str | None) -> str:
    """Map a sidebar selection onto "all", "section" or "category"."""
    if not selected_category or selected_category == DISPLAY_MODE_ALL:
        return DISPLAY_MODE_ALL
    if selected_category.startswith(SECTION_ID_PREFIX):
        return DISPLAY_MODE_SECTION
    return DISPLAY_MODE_CATEGORY
