"""Static section registry and category lookups."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from posmenu.constant import (
    CATEGORY_TO_SECTION_MAP,
    DEFAULT_SECTION_ID,
    FIXED_SECTION_ROWS,
    SECTION_ID_PREFIX,
    SECTION_RECORD_PREFIX,
    SECTION_UUID_MAP,
)
from posmenu.models import Category, Section

logger = logging.getLogger(__name__)

FIXED_SECTIONS: tuple[Section, ...] = tuple(
    Section(
        id=str(row["id"]),
        uuid=SECTION_UUID_MAP[str(row["id"])],
        name=str(row["name"]),
        display_name=str(row["display_name"]),
        order=order,
        code_prefix=str(row["code_prefix"]),
        icon=str(row["icon"]),
    )
    for order, row in enumerate(FIXED_SECTION_ROWS)
)

_SECTIONS_BY_ID: dict[str, Section] = {section.id: section for section in FIXED_SECTIONS}
_SECTIONS_BY_UUID: dict[str, Section] = {section.uuid: section for section in FIXED_SECTIONS}


def strip_section_prefix(section_id: str) -> str:
    """Turn a "section-*" pseudo id back into its slug."""
    if section_id.startswith(SECTION_ID_PREFIX):
        return section_id[len(SECTION_ID_PREFIX) :]
    return section_id


def get_section_by_id(section_id: str) -> Section | None:
    """Get a fixed section by slug or pseudo id."""
    return _SECTIONS_BY_ID.get(strip_section_prefix(section_id))


def resolve_section_uuid(section_id: str) -> str | None:
    """Get the category-tree uuid for a section slug or pseudo id."""
    section = get_section_by_id(section_id)
    if section is None:
        return None
    return section.uuid


def section_for_uuid(uuid: str | None) -> Section | None:
    """Get the fixed section whose record id is ``uuid``."""
    if uuid is None:
        return None
    return _SECTIONS_BY_UUID.get(uuid)


def get_section_display_name(section_id: str) -> str:
    """
    Get a human label for a section id.

    "section-starters" -> "Starters". Ids missing from the static table are
    rebuilt from their hyphenated slug: "section-main-course" -> "Main Course".
    """
    clean_id = strip_section_prefix(section_id)
    section = _SECTIONS_BY_ID.get(clean_id)
    if section is not None:
        return section.display_name
    return " ".join(word[:1].upper() + word[1:] for word in clean_id.split("-"))


def get_child_categories(section_id: str, categories: Iterable[Category]) -> list[Category]:
    """Active categories directly under a section, in display order."""
    section_uuid = resolve_section_uuid(section_id)
    if section_uuid is None:
        return []
    children = [cat for cat in categories if cat.active and cat.parent_category_id == section_uuid]
    return sorted(children, key=lambda cat: cat.display_order)


def find_root_section(category_id: str, categories: Iterable[Category]) -> Section | None:
    """Walk parent links up from a category to the section that owns it."""
    by_id: Mapping[str, Category] = {cat.id: cat for cat in categories}
    current_id: str | None = category_id
    # A well formed chain is never longer than the category list.
    for _ in range(len(by_id) + 1):
        if current_id is None:
            return None
        direct = section_for_uuid(current_id)
        if direct is not None:
            return direct
        category = by_id.get(current_id)
        if category is None:
            return None
        current_id = category.parent_category_id
    logger.warning("Parent cycle while resolving section for category %s", category_id)
    return None


def map_category_to_section(category: Category) -> str:
    """Guess the section slug for a legacy top-level category from its prefix or name."""
    if category.code_prefix:
        mapped = CATEGORY_TO_SECTION_MAP.get(category.code_prefix.upper())
        if mapped is not None:
            return mapped

    name_upper = category.name.upper()
    mapped = CATEGORY_TO_SECTION_MAP.get(name_upper)
    if mapped is not None:
        return mapped

    for key, section_id in CATEGORY_TO_SECTION_MAP.items():
        if key in name_upper or (name_upper and name_upper in key):
            return section_id

    logger.warning(
        "Category %r (prefix: %s) not mapped, defaulting to %s",
        category.name,
        category.code_prefix,
        DEFAULT_SECTION_ID,
    )
    return DEFAULT_SECTION_ID


def get_section_for_category(category: Category) -> Section | None:
    return get_section_by_id(map_category_to_section(category))


def organize_categories_by_section(
    categories: Iterable[Category],
    search_query: str = "",
    show_active: bool | None = True,
) -> list[dict[str, object]]:
    """
    Group categories (not items) under every fixed section for management screens.

    Direct children of a section record are placed by uuid. Legacy top-level
    categories are placed by name. Any other category inherits its parent's
    section. ``show_active`` selects active (True), inactive (False) or all (None).
    """
    source = list(categories)
    query = search_query.strip().lower()
    section_by_category: dict[str, Section] = {}

    for cat in source:
        section = section_for_uuid(cat.parent_category_id)
        if section is not None:
            section_by_category[cat.id] = section
        elif cat.parent_category_id is None and not cat.name.startswith(SECTION_RECORD_PREFIX):
            legacy = _SECTIONS_BY_ID.get(map_category_to_section(cat))
            if legacy is not None:
                section_by_category[cat.id] = legacy

    for cat in source:
        if cat.parent_category_id and section_for_uuid(cat.parent_category_id) is None:
            parent_section = section_by_category.get(cat.parent_category_id)
            if parent_section is not None:
                section_by_category[cat.id] = parent_section

    rows: list[dict[str, object]] = []
    for section in FIXED_SECTIONS:
        matched: list[Category] = []
        for cat in source:
            if cat.name.startswith(SECTION_RECORD_PREFIX):
                continue
            owner = section_by_category.get(cat.id)
            if owner is None or owner.id != section.id:
                continue
            if show_active is True and not cat.active:
                continue
            if show_active is False and cat.active:
                continue
            if query and query not in cat.name.lower():
                continue
            matched.append(cat)
        rows.append({"section": section, "categories": matched, "count": len(matched)})
    return rows
