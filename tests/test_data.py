import logging

from posmenu.constant import SECTION_UUID_MAP
from posmenu.data import (
    FIXED_SECTIONS,
    find_root_section,
    get_child_categories,
    get_section_by_id,
    get_section_display_name,
    get_section_for_category,
    map_category_to_section,
    organize_categories_by_section,
    resolve_section_uuid,
    strip_section_prefix,
)
from posmenu.models import Category

MAINS = SECTION_UUID_MAP["main-course"]
STARTERS = SECTION_UUID_MAP["starters"]


def cat(cat_id, parent, order=0, active=True, name=None, code_prefix=None):
    return Category(
        id=cat_id,
        name=name or cat_id.upper(),
        parent_category_id=parent,
        display_order=order,
        active=active,
        code_prefix=code_prefix,
    )


def test_fixed_sections_order():
    assert [section.id for section in FIXED_SECTIONS] == [
        "starters",
        "main-course",
        "side-dishes",
        "accompaniments",
        "desserts-coffee",
        "drinks-wine",
        "set-meals",
    ]
    assert [section.order for section in FIXED_SECTIONS] == list(range(7))
    assert FIXED_SECTIONS[0].pseudo_id == "section-starters"


def test_strip_section_prefix():
    assert strip_section_prefix("section-starters") == "starters"
    assert strip_section_prefix("starters") == "starters"


def test_resolve_section_uuid():
    assert resolve_section_uuid("section-main-course") == MAINS
    assert resolve_section_uuid("main-course") == MAINS
    assert resolve_section_uuid("brunch") is None
    assert get_section_by_id("brunch") is None


def test_section_display_name_from_table():
    assert get_section_display_name("section-desserts-coffee") == "Desserts & Coffee"
    assert get_section_display_name("starters") == "Starters"


def test_section_display_name_fallback_title_cases():
    assert get_section_display_name("section-late-night-menu") == "Late Night Menu"
    assert get_section_display_name("brunch") == "Brunch"
    assert get_section_display_name("") == ""


def test_child_categories_sorted_and_active_only():
    categories = [
        cat("curries", MAINS, 2),
        cat("tandoori", MAINS, 0),
        cat("specials", MAINS, 1, active=False),
        cat("bhuna", "curries", 0),
        cat("starters", STARTERS, 0),
    ]
    assert [c.id for c in get_child_categories("main-course", categories)] == ["tandoori", "curries"]
    assert [c.id for c in get_child_categories("section-main-course", categories)] == ["tandoori", "curries"]


def test_child_categories_for_unknown_section():
    assert get_child_categories("brunch", [cat("a", MAINS)]) == []


def test_find_root_section_walks_up():
    categories = [cat("curries", MAINS), cat("bhuna", "curries"), cat("lamb-bhuna", "bhuna")]
    assert find_root_section("lamb-bhuna", categories).id == "main-course"
    assert find_root_section(MAINS, categories).id == "main-course"
    assert find_root_section("missing", categories) is None


def test_find_root_section_survives_cycles(caplog):
    categories = [cat("a", "b"), cat("b", "a")]
    with caplog.at_level(logging.WARNING):
        assert find_root_section("a", categories) is None
    assert "cycle" in caplog.text


def test_map_category_prefers_code_prefix():
    assert map_category_to_section(cat("x", None, name="Anything", code_prefix="drk")) == "drinks-wine"


def test_map_category_by_exact_then_partial_name():
    assert map_category_to_section(cat("x", None, name="naan")) == "accompaniments"
    assert map_category_to_section(cat("x", None, name="Red Wine Selection")) == "drinks-wine"


def test_section_for_category_follows_mapping():
    section = get_section_for_category(cat("x", None, name="naan"))
    assert section is not None
    assert section.id == "accompaniments"
    assert get_section_for_category(cat("x", None, name="Anything", code_prefix="drk")).id == "drinks-wine"


def test_map_category_defaults_to_main_course(caplog):
    with caplog.at_level(logging.WARNING):
        assert map_category_to_section(cat("x", None, name="Zzz")) == "main-course"
    assert "not mapped" in caplog.text


def _by_section(rows):
    return {row["section"].id: [c.id for c in row["categories"]] for row in rows}


def test_organize_categories_by_section():
    categories = [
        cat(STARTERS, None, name="[SECTION] STARTERS"),
        cat("starters", STARTERS, name="STARTERS"),
        cat("seafood", "starters", name="SEAFOOD"),
        cat("legacy-wine", None, name="WINE"),
        cat("old", MAINS, name="OLD CURRIES", active=False),
    ]
    rows = organize_categories_by_section(categories)
    assert len(rows) == 7
    by_section = _by_section(rows)
    assert by_section["starters"] == ["starters", "seafood"]
    assert by_section["drinks-wine"] == ["legacy-wine"]
    assert by_section["main-course"] == []
    assert rows[0]["count"] == 2


def test_organize_categories_filters():
    categories = [
        cat("curries", MAINS, name="Curries"),
        cat("old", MAINS, name="Old Curries", active=False),
        cat("grill", MAINS, name="Grill"),
    ]
    assert _by_section(organize_categories_by_section(categories, show_active=False))["main-course"] == ["old"]
    assert _by_section(organize_categories_by_section(categories, show_active=None))["main-course"] == [
        "curries",
        "old",
        "grill",
    ]
    assert _by_section(organize_categories_by_section(categories, " CURR ", show_active=None))["main-course"] == [
        "curries",
        "old",
    ]
