"""Editable static section configuration."""

from __future__ import annotations

# Real section record ids in the category tree. Main categories point at these
# through parent_category_id.
SECTION_UUID_MAP: dict[str, str] = {
    "starters": "5cfed564-4034-4016-ad79-d5b1f0b7ee44",
    "main-course": "71d8a89e-6b2d-4d91-bfe1-83d537a8c5c7",
    "side-dishes": "8b161257-d508-46d6-806a-25ce33898bef",
    "accompaniments": "366f31f3-8c31-4221-93d3-aa77f0bd37dc",
    "desserts-coffee": "2fc410da-c162-4134-8b37-8a290eb0e0b4",
    "drinks-wine": "cc3e13e2-45ee-4f85-a333-c910f038efc6",
    "set-meals": "56bc46b0-5271-401d-8a02-d4970291ddb5",
}

# Canonical section rows consumed by posmenu.data (which wraps these into Section instances).
FIXED_SECTION_ROWS: list[dict[str, str | int]] = [
    {"id": "starters", "name": "STARTERS", "display_name": "Starters", "code_prefix": "APP", "icon": "🥗"},
    {"id": "main-course", "name": "MAIN COURSE", "display_name": "Main Course", "code_prefix": "MAIN", "icon": "🍛"},
    {"id": "side-dishes", "name": "SIDE DISHES", "display_name": "Side Dishes", "code_prefix": "SIDE", "icon": "🍚"},
    {"id": "accompaniments", "name": "ACCOMPANIMENTS", "display_name": "Accompaniments", "code_prefix": "ACC", "icon": "🫓"},
    {"id": "desserts-coffee", "name": "DESSERTS & COFFEE", "display_name": "Desserts & Coffee", "code_prefix": "DES", "icon": "🍰"},
    {"id": "drinks-wine", "name": "DRINKS & WINE", "display_name": "Drinks & Wine", "code_prefix": "DRK", "icon": "🍷"},
    {"id": "set-meals", "name": "SET MEALS", "display_name": "Set Meals", "code_prefix": "SET", "icon": "🍱"},
]

SECTION_ID_PREFIX = "section-"
SECTION_RECORD_PREFIX = "[SECTION]"
DEFAULT_SECTION_ID = "main-course"

# Category code prefixes and names mapped onto section slugs.
CATEGORY_TO_SECTION_MAP: dict[str, str] = {
    "APP": "starters",
    "ST": "starters",
    "APPETIZERS": "starters",
    "STARTERS": "starters",
    "MAIN": "main-course",
    "LAMB": "main-course",
    "TAND": "main-course",
    "TANDOORI": "main-course",
    "CHICKEN": "main-course",
    "VG": "main-course",
    "VEGETARIAN": "main-course",
    "CC": "main-course",
    "CURRY": "main-course",
    "BIRYANI": "main-course",
    "SIDE": "side-dishes",
    "RICE": "side-dishes",
    "VEGETABLE": "side-dishes",
    "ACC": "accompaniments",
    "BREAD": "accompaniments",
    "NAAN": "accompaniments",
    "ROTI": "accompaniments",
    "SAUCE": "accompaniments",
    "CONDIMENT": "accompaniments",
    "DES": "desserts-coffee",
    "DESS": "desserts-coffee",
    "DESSERT": "desserts-coffee",
    "DESSERTS": "desserts-coffee",
    "COFFEE": "desserts-coffee",
    "TEA": "desserts-coffee",
    "DRK": "drinks-wine",
    "DRINK": "drinks-wine",
    "DRINKS": "drinks-wine",
    "WINE": "drinks-wine",
    "BEER": "drinks-wine",
    "BEVERAGE": "drinks-wine",
    "SET": "set-meals",
    "MEAL": "set-meals",
    "COMBO": "set-meals",
}

# Badge colours per section slug, used by posmenu.rendering.
SECTION_BADGE_STYLES: dict[str, str] = {
    "starters": "bold #0b1f0f on #5fbf72",
    "main-course": "bold #ffffff on #b23a48",
    "side-dishes": "bold #1f1a0b on #e0b84c",
    "accompaniments": "bold #1f1a0b on #d9915a",
    "desserts-coffee": "bold #ffffff on #8a5a9e",
    "drinks-wine": "bold #ffffff on #2f6db5",
    "set-meals": "bold #ffffff on #4a4a4a",
}
