import json
import logging
from pathlib import Path

import pytest

from posmenu.models import Category, MenuItem
from posmenu.snapshot import JsonSnapshotProvider, SnapshotError, StaticMenuProvider, parse_snapshot

SAMPLE_SNAPSHOT = Path(__file__).resolve().parent.parent / "data" / "menu_snapshot.json"


def test_category_from_record_accepts_camel_case():
    category = Category.from_record(
        {"id": 7, "name": "CURRIES", "parentCategoryId": "root", "displayOrder": "3", "is_active": False}
    )
    assert category == Category(id="7", name="CURRIES", parent_category_id="root", display_order=3, active=False)


def test_menu_item_from_record_reads_every_naming_field():
    item = MenuItem.from_record(
        {
            "id": "i1",
            "categoryId": "curries",
            "name": "TIKKA MASALA",
            "item_name": "TIKKA MASALA",
            "variantName": "Lamb",
            "variant": {"name": "Lamb"},
            "proteinType": "LAMB",
            "kitchenDisplayName": "TM",
        }
    )
    assert item.category_id == "curries"
    assert item.variant_name == "Lamb"
    assert item.variant_object_name == "Lamb"
    assert item.protein_type == "LAMB"
    assert item.kitchen_display_name == "TM"
    assert item.active is True
    assert item.display_order == 0


def test_parse_snapshot_skips_bad_records(caplog):
    payload = {
        "categories": [{"id": "a", "name": "A"}, {"name": "no id"}, "junk"],
        "menu_items": [{"id": "x", "category_id": "a", "display_order": "not a number"}, {"id": "y", "category_id": "a"}],
    }
    with caplog.at_level(logging.WARNING):
        categories, items = parse_snapshot(payload)
    assert [c.id for c in categories] == ["a"]
    assert [i.id for i in items] == ["y"]
    assert "Skipping category record 1" in caplog.text
    assert "Skipping menu_item record 0" in caplog.text


def test_parse_snapshot_rejects_non_objects():
    with pytest.raises(SnapshotError):
        parse_snapshot([])


def test_json_provider_reads_file(tmp_path):
    path = tmp_path / "menu.json"
    path.write_text(
        json.dumps({"categories": [{"id": "a", "name": "A"}], "menu_items": [{"id": "x", "category_id": "a"}]}),
        encoding="utf-8",
    )
    provider = JsonSnapshotProvider(path)
    assert [c.id for c in provider.categories()] == ["a"]
    assert [i.id for i in provider.menu_items()] == ["x"]


def test_json_provider_missing_file(tmp_path):
    with pytest.raises(SnapshotError, match="Cannot read"):
        JsonSnapshotProvider(tmp_path / "missing.json").load()


def test_json_provider_invalid_json(tmp_path):
    path = tmp_path / "menu.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(SnapshotError, match="not valid JSON"):
        JsonSnapshotProvider(path).load()


def test_sample_snapshot_loads():
    provider = JsonSnapshotProvider(SAMPLE_SNAPSHOT)
    categories, items = provider.load()
    assert len(categories) == 13
    assert len(items) == 15


def test_static_provider_returns_copies():
    categories = [Category(id="a", name="A")]
    provider = StaticMenuProvider(categories, [])
    provider.categories().clear()
    assert provider.categories() == categories
    assert provider.menu_items() == []


def test_active_flag_reads_is_active_and_strings():
    assert MenuItem.from_record({"id": "x", "is_active": False}).active is False
    assert MenuItem.from_record({"id": "x", "active": "false"}).active is False
    assert Category.from_record({"id": "a", "name": "A", "active": "false"}).active is False
    assert Category.from_record({"id": "a", "name": "A", "isActive": "true"}).active is True
