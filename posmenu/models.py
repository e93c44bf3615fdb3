"""Domain models for pos-menu."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _first_present(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = record.get(key)
        if value:
            return value
    return None


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text or None


_FALSE_STRINGS = {"false", "0", "no", "off", ""}


def _active_flag(record: Mapping[str, Any]) -> bool:
    if "active" in record:
        value = record["active"]
    else:
        value = record.get("is_active", record.get("isActive", True))
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


@dataclass(frozen=True)
class Category:
    """A node in the backend category tree."""

    id: str
    name: str
    parent_category_id: str | None = None
    display_order: int = 0
    active: bool = True
    code_prefix: str | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Category:
        """Build a category from a backend row (snake_case or camelCase keys)."""
        return cls(
            id=str(record["id"]),
            name=str(record.get("name") or ""),
            parent_category_id=_optional_str(_first_present(record, "parent_category_id", "parentCategoryId")),
            display_order=int(_first_present(record, "display_order", "displayOrder") or 0),
            active=_active_flag(record),
            code_prefix=_optional_str(_first_present(record, "code_prefix", "codePrefix")),
        )


@dataclass(frozen=True)
class MenuItem:
    """A menu item as supplied by the backend, with every naming field it may carry."""

    id: str
    category_id: str | None = None
    display_order: int = 0
    active: bool = True
    name: str | None = None
    item_name: str | None = None
    variant_name: str | None = None
    variant_object_name: str | None = None
    protein_type: str | None = None
    kitchen_display_name: str | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> MenuItem:
        """Build a menu item from a backend row (snake_case or camelCase keys)."""
        variant = record.get("variant")
        variant_object_name = None
        if isinstance(variant, Mapping):
            variant_object_name = _optional_str(variant.get("name"))
        return cls(
            id=str(record["id"]),
            category_id=_optional_str(_first_present(record, "category_id", "categoryId")),
            display_order=int(_first_present(record, "display_order", "displayOrder") or 0),
            active=_active_flag(record),
            name=_optional_str(record.get("name")),
            item_name=_optional_str(record.get("item_name")),
            variant_name=_optional_str(_first_present(record, "variantName", "variant_name")),
            variant_object_name=variant_object_name,
            protein_type=_optional_str(_first_present(record, "protein_type", "proteinType")),
            kitchen_display_name=_optional_str(_first_present(record, "kitchen_display_name", "kitchenDisplayName")),
        )


@dataclass(frozen=True)
class Section:
    """A fixed top-level menu section mapped onto a category-tree root."""

    id: str
    uuid: str
    name: str
    display_name: str
    order: int
    code_prefix: str
    icon: str

    @property
    def pseudo_id(self) -> str:
        return f"section-{self.id}"


@dataclass
class CategoryGroup:
    """A displayed category with every item found beneath it."""

    id: str
    name: str
    items: list[MenuItem] = field(default_factory=list)


@dataclass
class MenuSection:
    """A section with its non-empty category groups."""

    id: str
    name: str
    display_name: str
    categories: list[CategoryGroup] = field(default_factory=list)


@dataclass
class HierarchicalMenu:
    """Section -> category -> items tree for the all-items view."""

    sections: list[MenuSection] = field(default_factory=list)


@dataclass
class OrderLine:
    """A registered order row."""

    item: MenuItem
    quantity: int = 1
