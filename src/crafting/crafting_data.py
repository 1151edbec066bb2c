"""
Built-in crafting data: precious materials, grades and runes.

Prices are in gold pieces and follow the weapon columns of the Core
Rulebook precious material and rune tables. The registry can also be loaded
from a JSON file in the same shape as CRAFTING_DATA, so none of these
numbers are fixed in code.
"""

from typing import Any


ITEM_GRADES: dict[str, dict[str, Any]] = {
    "low": {"id": "low-grade", "label": "Low-Grade"},
    "standard": {"id": "standard-grade", "label": "Standard-Grade"},
    "high": {"id": "high-grade", "label": "High-Grade"},
}


ITEM_MATERIALS: dict[str, dict[str, Any]] = {
    "adamantine": {
        "id": "adamantine",
        "label": "Adamantine",
        "default_grade": "standard",
        "grades": {
            "standard": {"price": 350, "level": 8, "hardness": 10, "hit_points": 40, "broken_threshold": 20},
            "high": {"price": 6000, "level": 16, "hardness": 13, "hit_points": 52, "broken_threshold": 26},
        },
    },
    "cold-iron": {
        "id": "cold-iron",
        "label": "Cold Iron",
        "default_grade": "low",
        "grades": {
            "low": {"price": 40, "level": 2, "hardness": 5, "hit_points": 20, "broken_threshold": 10},
            "standard": {"price": 880, "level": 10, "hardness": 7, "hit_points": 28, "broken_threshold": 14},
            "high": {"price": 9000, "level": 16, "hardness": 10, "hit_points": 40, "broken_threshold": 20},
        },
    },
    "darkwood": {
        "id": "darkwood",
        "label": "Darkwood",
        "default_grade": "standard",
        "grades": {
            "standard": {"price": 350, "level": 8, "hardness": 3, "hit_points": 12, "broken_threshold": 6},
            "high": {"price": 6000, "level": 16, "hardness": 5, "hit_points": 20, "broken_threshold": 10},
        },
    },
    "dragonhide": {
        "id": "dragonhide",
        "label": "Dragonhide",
        "default_grade": "standard",
        "grades": {
            "standard": {"price": 350, "level": 8, "hardness": 4, "hit_points": 16, "broken_threshold": 8},
            "high": {"price": 6000, "level": 16, "hardness": 7, "hit_points": 28, "broken_threshold": 14},
        },
    },
    "mithral": {
        "id": "mithral",
        "label": "Mithral",
        "default_grade": "standard",
        "grades": {
            "standard": {"price": 350, "level": 8, "hardness": 5, "hit_points": 20, "broken_threshold": 10},
            "high": {"price": 6000, "level": 16, "hardness": 8, "hit_points": 32, "broken_threshold": 16},
        },
    },
    "orichalcum": {
        "id": "orichalcum",
        "label": "Orichalcum",
        "default_grade": "high",
        "grades": {
            "high": {"price": 10000, "level": 17, "hardness": 16, "hit_points": 64, "broken_threshold": 32},
        },
    },
    "silver": {
        "id": "silver",
        "label": "Silver",
        "default_grade": "low",
        "grades": {
            "low": {"price": 40, "level": 2, "hardness": 3, "hit_points": 12, "broken_threshold": 6},
            "standard": {"price": 880, "level": 10, "hardness": 5, "hit_points": 20, "broken_threshold": 10},
            "high": {"price": 9000, "level": 16, "hardness": 8, "hit_points": 32, "broken_threshold": 16},
        },
    },
    "sovereign-steel": {
        "id": "sovereign-steel",
        "label": "Sovereign Steel",
        "default_grade": "standard",
        "grades": {
            "standard": {"price": 500, "level": 9, "hardness": 7, "hit_points": 28, "broken_threshold": 14},
            "high": {"price": 10000, "level": 17, "hardness": 11, "hit_points": 44, "broken_threshold": 22},
        },
    },
}


ITEM_RUNES: dict[str, dict[str, Any]] = {
    # Weapon runes
    "weapon-potency-1": {"label": "+1 Weapon Potency", "type": "potency", "mode": "weapon", "tier": 1, "price": 35, "level": 2},
    "weapon-potency-2": {"label": "+2 Weapon Potency", "type": "potency", "mode": "weapon", "tier": 2, "price": 935, "level": 10},
    "weapon-potency-3": {"label": "+3 Weapon Potency", "type": "potency", "mode": "weapon", "tier": 3, "price": 8935, "level": 16},
    "striking": {"label": "Striking", "type": "fundamental", "mode": "weapon", "tier": 1, "price": 65, "level": 4},
    "greater-striking": {"label": "Greater Striking", "type": "fundamental", "mode": "weapon", "tier": 2, "price": 1065, "level": 12},
    "major-striking": {"label": "Major Striking", "type": "fundamental", "mode": "weapon", "tier": 3, "price": 31065, "level": 19},
    # Armor runes
    "armor-potency-1": {"label": "+1 Armor Potency", "type": "potency", "mode": "armor", "tier": 1, "price": 160, "level": 5},
    "armor-potency-2": {"label": "+2 Armor Potency", "type": "potency", "mode": "armor", "tier": 2, "price": 1060, "level": 11},
    "armor-potency-3": {"label": "+3 Armor Potency", "type": "potency", "mode": "armor", "tier": 3, "price": 20560, "level": 18},
    "resilient": {"label": "Resilient", "type": "fundamental", "mode": "armor", "tier": 1, "price": 340, "level": 8},
    "greater-resilient": {"label": "Greater Resilient", "type": "fundamental", "mode": "armor", "tier": 2, "price": 3440, "level": 14},
    "major-resilient": {"label": "Major Resilient", "type": "fundamental", "mode": "armor", "tier": 3, "price": 49440, "level": 20},
}


CRAFTING_DATA: dict[str, Any] = {
    "grades": ITEM_GRADES,
    "materials": ITEM_MATERIALS,
    "runes": ITEM_RUNES,
}
