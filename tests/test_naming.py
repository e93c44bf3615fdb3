from posmenu.models import MenuItem
from posmenu.naming import (
    generate_display_name,
    generate_display_name_for_receipt,
    resolve_item_display_name,
)


def test_plain_name_is_returned_unchanged():
    assert resolve_item_display_name({"name": "TIKKA MASALA"}) == "TIKKA MASALA"


def test_item_name_overrides_name():
    item = {"name": "TIKKA", "item_name": "TIKKA MASALA"}
    assert resolve_item_display_name(item) == "TIKKA MASALA"


def test_variant_containing_base_wins():
    item = {"name": "TIKKA MASALA", "variant_name": "LAMB TIKKA MASALA"}
    assert resolve_item_display_name(item) == "LAMB TIKKA MASALA"


def test_base_containing_variant_wins():
    item = {"name": "CHICKEN SHASHLICK BHUNA", "variant_name": "chicken"}
    assert resolve_item_display_name(item) == "CHICKEN SHASHLICK BHUNA"


def test_equal_names_keep_variant_spelling():
    item = {"name": "Lamb Bhuna", "variantName": "LAMB BHUNA"}
    assert resolve_item_display_name(item) == "LAMB BHUNA"


def test_independent_variant_is_appended():
    item = {"name": "TIKKA MASALA", "variant_name": "Lamb"}
    assert resolve_item_display_name(item) == "TIKKA MASALA (Lamb)"


def test_protein_already_in_base_is_not_repeated():
    item = {"name": "LAMB TIKKA MASALA", "protein_type": "LAMB"}
    assert resolve_item_display_name(item) == "LAMB TIKKA MASALA"


def test_protein_is_appended_without_variant():
    assert resolve_item_display_name({"name": "KORMA", "proteinType": "PRAWN"}) == "KORMA (PRAWN)"


def test_variant_lookup_order():
    item = {
        "name": "BHUNA",
        "variantName": "Chicken",
        "variant_name": "Lamb",
        "variant": {"name": "Prawn"},
    }
    assert resolve_item_display_name(item) == "BHUNA (Chicken)"
    assert resolve_item_display_name({"name": "BHUNA", "variant": {"name": "Prawn"}}) == "BHUNA (Prawn)"


def test_variant_takes_precedence_over_protein():
    item = {"name": "BHUNA", "variant_name": "Lamb", "protein_type": "CHICKEN"}
    assert resolve_item_display_name(item) == "BHUNA (Lamb)"


def test_kitchen_name_wins_when_requested():
    item = {"name": "X", "variant_name": "Y", "kitchen_display_name": "K"}
    assert resolve_item_display_name(item, use_kitchen_name=True) == "K"
    assert resolve_item_display_name(item) == "X (Y)"


def test_kitchen_name_requested_but_missing_falls_through():
    item = {"name": "TIKKA MASALA", "variant_name": "Lamb"}
    assert resolve_item_display_name(item, use_kitchen_name=True) == "TIKKA MASALA (Lamb)"


def test_camel_case_kitchen_name():
    item = {"name": "GARLIC NAAN", "kitchenDisplayName": "G NAAN"}
    assert resolve_item_display_name(item, use_kitchen_name=True) == "G NAAN"


def test_missing_fields_never_raise():
    assert resolve_item_display_name({}) == ""
    assert resolve_item_display_name({"name": None, "variant_name": None}) == ""


def test_missing_base_name_falls_back_to_other_fields():
    assert resolve_item_display_name({"kitchen_display_name": "K"}) == "K"
    assert resolve_item_display_name({"protein_type": "LAMB"}) == "LAMB"
    assert resolve_item_display_name({"variant_name": "Lamb", "protein_type": "LAMB"}) == "Lamb"
    assert resolve_item_display_name(MenuItem(id="1", kitchen_display_name="TM")) == "TM"


def test_menu_item_instances_resolve_like_records():
    item = MenuItem(id="1", name="TIKKA MASALA", variant_object_name="Lamb", kitchen_display_name="TM")
    assert resolve_item_display_name(item) == "TIKKA MASALA (Lamb)"
    assert resolve_item_display_name(item, use_kitchen_name=True) == "TM"


def test_receipt_uses_variant_verbatim():
    assert generate_display_name_for_receipt("TIKKA MASALA", "Lamb") == "Lamb"
    assert generate_display_name_for_receipt("TIKKA MASALA", "LAMB TIKKA MASALA") == "LAMB TIKKA MASALA"


def test_receipt_falls_back_to_protein_then_base():
    assert generate_display_name_for_receipt("TIKKA MASALA", None, "LAMB") == "TIKKA MASALA (LAMB)"
    assert generate_display_name_for_receipt("TIKKA MASALA") == "TIKKA MASALA"


def test_receipt_and_till_names_diverge():
    item = {"name": "TIKKA MASALA", "variant_name": "Lamb"}
    assert resolve_item_display_name(item) == "TIKKA MASALA (Lamb)"
    assert generate_display_name_for_receipt(item["name"], item["variant_name"]) == "Lamb"


def test_reorder_name_prefers_protein():
    assert generate_display_name("TIKKA MASALA", "Lamb", "CHICKEN") == "TIKKA MASALA (CHICKEN)"
    assert generate_display_name("TIKKA MASALA", "Lamb") == "TIKKA MASALA (Lamb)"
    assert generate_display_name("TIKKA MASALA", "Lamb", is_multi_variant=False) == "TIKKA MASALA"
    assert generate_display_name("TIKKA MASALA") == "TIKKA MASALA"
