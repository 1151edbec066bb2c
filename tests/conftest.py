"""
Pytest fixtures for the Loot Workshop test suite.

Provides reusable fixtures for dice, catalogs, tables, crafting data and
inventory containers.
"""

import pytest
from unittest.mock import MagicMock

from src.crafting import MaterialGradeRegistry
from src.data_models import (
    DiceRoller,
    InventoryContainer,
    ItemCategory,
    ItemTemplate,
)
from src.items import EQUIPMENT_COLLECTION, ItemCatalog
from src.tables import RollableTable, TableEntry

from tests.helpers import make_instances


# =============================================================================
# DICE FIXTURES
# =============================================================================


@pytest.fixture
def seeded_dice():
    """Provide a seeded DiceRoller for reproducible tests."""
    return DiceRoller(seed=42)


@pytest.fixture
def clean_dice():
    """Provide an unseeded DiceRoller."""
    return DiceRoller()


# =============================================================================
# CATALOG FIXTURES
# =============================================================================


@pytest.fixture
def longsword():
    return ItemTemplate(
        template_id="longsword",
        name="Longsword",
        base_value=1,
        category=ItemCategory.WEAPON,
        level=0,
        group="sword",
        collection_id=EQUIPMENT_COLLECTION,
    )


@pytest.fixture
def chain_mail():
    return ItemTemplate(
        template_id="chain-mail",
        name="Chain Mail",
        base_value=6,
        category=ItemCategory.ARMOR,
        level=0,
        group="chain",
        collection_id=EQUIPMENT_COLLECTION,
    )


@pytest.fixture
def healing_potion():
    return ItemTemplate(
        template_id="healing-potion-minor",
        name="Minor Healing Potion",
        base_value=4,
        category=ItemCategory.CONSUMABLE,
        level=1,
        group="potion",
        collection_id=EQUIPMENT_COLLECTION,
    )


@pytest.fixture
def sample_catalog(longsword, chain_mail, healing_potion):
    """A catalog with three equipment templates and no files behind it."""
    catalog = ItemCatalog(catalog_path=None)
    for template in (longsword, chain_mail, healing_potion):
        catalog.register_item(template)
    return catalog


@pytest.fixture
def complete_table():
    """Three entries, all present in sample_catalog."""
    return RollableTable(
        table_id="complete",
        name="Complete Table",
        category="Treasure",
        entries=(
            TableEntry(EQUIPMENT_COLLECTION, "longsword"),
            TableEntry(EQUIPMENT_COLLECTION, "chain-mail"),
            TableEntry(EQUIPMENT_COLLECTION, "healing-potion-minor"),
        ),
    )


@pytest.fixture
def broken_table():
    """Three entries, one referencing an item missing from the catalog."""
    return RollableTable(
        table_id="broken",
        name="Broken Table",
        category="Treasure",
        entries=(
            TableEntry(EQUIPMENT_COLLECTION, "longsword"),
            TableEntry(EQUIPMENT_COLLECTION, "vorpal-sword"),
            TableEntry(EQUIPMENT_COLLECTION, "chain-mail"),
        ),
    )


# =============================================================================
# CRAFTING FIXTURES
# =============================================================================


@pytest.fixture
def crafting_data():
    """Small crafting data set used by the registry and calculator tests."""
    return {
        "grades": {
            "low": {"id": "low-grade", "label": "Low-Grade"},
            "standard": {"id": "standard-grade", "label": "Standard-Grade"},
            "high": {"id": "high-grade", "label": "High-Grade"},
        },
        "materials": {
            "cold-iron": {
                "label": "Cold Iron",
                "default_grade": "standard",
                "grades": {
                    "standard": {"price": 880, "level": 10, "hardness": 7, "hit_points": 28, "broken_threshold": 14},
                    "high": {"price": 9000, "level": 16, "hardness": 10, "hit_points": 40, "broken_threshold": 20},
                },
            },
            "silver": {
                "label": "Silver",
                "default_grade": "standard",
                "grades": {
                    "low": {"price": 10, "level": 1},
                    "standard": {"price": 20, "level": 2},
                },
            },
            "orichalcum": {
                "label": "Orichalcum",
                "default_grade": "high",
                "grades": {
                    "high": {"price": 10000, "level": 17},
                },
            },
        },
        "runes": {
            "potency-1": {"label": "+1 Potency", "type": "potency", "mode": "weapon", "tier": 1, "price": 35, "level": 2},
            "striking": {"label": "Striking", "type": "fundamental", "mode": "weapon", "tier": 1, "price": 35, "level": 5},
            "resilient": {"label": "Resilient", "type": "fundamental", "mode": "armor", "tier": 1, "price": 340, "level": 8},
        },
    }


@pytest.fixture
def registry(crafting_data):
    return MaterialGradeRegistry.from_dict(crafting_data)


# =============================================================================
# INVENTORY FIXTURES
# =============================================================================


@pytest.fixture
def empty_container():
    return InventoryContainer(owner_id="loot-pile")


@pytest.fixture
def full_container():
    """A container holding five instances."""
    return InventoryContainer(owner_id="loot-pile", items=make_instances(5, "existing"))


@pytest.fixture
def mock_store():
    store = MagicMock()
    store.write = MagicMock()
    return store


@pytest.fixture
def mock_notifier():
    notifier = MagicMock()
    notifier.warn = MagicMock()
    return notifier
