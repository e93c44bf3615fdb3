"""Display-name resolution for till, kitchen and receipt output."""

from __future__ import annotations

from typing import Any, Mapping

from posmenu.models import MenuItem


def _field(item: MenuItem | Mapping[str, Any], *keys: str) -> str | None:
    for key in keys:
        if isinstance(item, Mapping):
            value = item.get(key)
        else:
            value = getattr(item, key, None)
        if value:
            return str(value)
    return None


def _variant_name(item: MenuItem | Mapping[str, Any]) -> str | None:
    if isinstance(item, MenuItem):
        return item.variant_name or item.variant_object_name

    value = _field(item, "variantName", "variant_name")
    if value:
        return value
    variant = item.get("variant")
    if isinstance(variant, Mapping) and variant.get("name"):
        return str(variant["name"])
    return None


def resolve_item_display_name(item: MenuItem | Mapping[str, Any], use_kitchen_name: bool = False) -> str:
    """
    Resolve the name shown for an order line.

    Two naming conventions coexist in stored data. In the modern one ``name``
    already embeds the variant ("CHICKEN SHASHLICK BHUNA"); in the legacy one
    the variant lives in its own field ("SHASHLICK" + "CHICKEN"). The variant
    is only appended when neither string already contains the other.

    Kitchen tickets pass ``use_kitchen_name`` to prefer the abbreviated
    kitchen name when the item has one.
    """
    kitchen_display_name = _field(item, "kitchen_display_name", "kitchenDisplayName")
    variant_name = _variant_name(item)
    protein_type = _field(item, "protein_type", "proteinType")
    base_name = _field(item, "item_name", "name") or ""

    if use_kitchen_name and kitchen_display_name:
        return kitchen_display_name

    if not base_name:
        return variant_name or protein_type or kitchen_display_name or ""

    if not variant_name:
        if protein_type and protein_type.upper() not in base_name.upper():
            return f"{base_name} ({protein_type})"
        return base_name

    name_upper = base_name.upper()
    variant_upper = variant_name.upper()

    # "TIKKA MASALA" + "LAMB TIKKA MASALA": variant is the full name.
    if name_upper in variant_upper:
        return variant_name

    # "LAMB TIKKA MASALA" + "LAMB": base is the full name.
    if variant_upper in name_upper or name_upper == variant_upper:
        return base_name

    return f"{base_name} ({variant_name})"


def generate_display_name_for_receipt(
    base_name: str,
    variant_name: str | None = None,
    protein_type: str | None = None,
) -> str:
    """Receipt line name: the stored variant name verbatim, else base plus protein."""
    if variant_name:
        return variant_name
    if protein_type:
        return f"{base_name} ({protein_type})"
    return base_name


def generate_display_name(
    base_name: str,
    variant_name: str | None = None,
    protein_type: str | None = None,
    is_multi_variant: bool | None = None,
) -> str:
    """Rebuild "BASE (VARIANT)" for reordering past orders; protein beats variant."""
    effective_variant = protein_type or variant_name
    if not effective_variant:
        return base_name
    if is_multi_variant is False:
        return base_name
    return f"{base_name} ({effective_variant})"
