"""
Item catalog and loot item creation.

This module provides:
- ItemCatalog: Loads item templates and rollable tables from JSON catalog files
- CollectionResolver: Resolves (collection, entry id) references to templates
- ValueRandomizer: Instantiates templates with a d4 value multiplier
"""

from src.items.item_catalog import (
    ItemCatalog,
    EQUIPMENT_COLLECTION,
    TREASURE_TABLE_CATEGORY,
    PERMANENT_ITEMS_CATEGORY,
    CONSUMABLE_ITEMS_CATEGORY,
)
from src.items.collection_resolver import Catalog, CollectionResolver
from src.items.value_randomizer import ValueRandomizer

__all__ = [
    "ItemCatalog",
    "EQUIPMENT_COLLECTION",
    "TREASURE_TABLE_CATEGORY",
    "PERMANENT_ITEMS_CATEGORY",
    "CONSUMABLE_ITEMS_CATEGORY",
    "Catalog",
    "CollectionResolver",
    "ValueRandomizer",
]
