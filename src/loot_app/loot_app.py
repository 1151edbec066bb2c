"""
Loot sheet adapter.

LootApp is what a sheet (or the CLI) talks to. It does no rendering; it turns
user actions into calls on the engines and gathers the data a sheet shows:

- Roll table: draw → randomize values → merge → optional quick mystify
- Clear inventory
- Crafting tab: materials, grades for the chosen material, runes, base
  items, and the price/level of the current selection
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from src.crafting.crafting_types import (
    CraftingQuote,
    CraftingSelection,
    CreateMode,
)
from src.crafting.material_registry import MaterialGradeRegistry
from src.crafting.price_calculator import CraftingPriceCalculator
from src.data_models import DiceRoller, InventoryContainer, ItemCategory, ItemInstance, ItemTemplate
from src.inventory.container_store import ContainerStore
from src.inventory.inventory_merger import InventoryMerger
from src.items.collection_resolver import Catalog, CollectionResolver
from src.items.item_catalog import (
    CONSUMABLE_ITEMS_CATEGORY,
    EQUIPMENT_COLLECTION,
    PERMANENT_ITEMS_CATEGORY,
    TREASURE_TABLE_CATEGORY,
)
from src.items.value_randomizer import ValueRandomizer
from src.loot_app.identification import MystifyHook, NullMystifyHook, owned_item_reference
from src.loot_app.settings import FeatureFlags, Settings
from src.tables.table_roll_engine import LoggingNotifier, Notifier, TableRollEngine
from src.tables.table_types import DrawResult, RollableTable

logger = logging.getLogger(__name__)

# Base weapons that stay available despite failing the level/group filter
ALWAYS_AVAILABLE_WEAPONS = {"Aldori Dueling Sword"}
EXCLUDED_WEAPON_GROUPS = {"bomb"}
EXCLUDED_ARMOR_GROUPS = {""}


@dataclass
class RollOutcome:
    """Everything that happened during one roll-table action."""
    draw: DrawResult
    added: list[ItemInstance] = field(default_factory=list)
    mystified: list[str] = field(default_factory=list)   # Item references

    @property
    def total_value(self) -> float:
        return sum(item.value for item in self.added)


def _name_and_id(template: ItemTemplate) -> dict[str, str]:
    return {"id": template.template_id, "label": template.name}


class LootApp:
    """
    Presentation adapter for a loot container.

    All collaborators are injected; nothing is looked up globally.
    """

    def __init__(
        self,
        catalog: Catalog,
        registry: Optional[MaterialGradeRegistry] = None,
        dice: Optional[DiceRoller] = None,
        notifier: Optional[Notifier] = None,
        settings: Optional[FeatureFlags] = None,
        store: Optional[ContainerStore] = None,
        mystify_hook: Optional[MystifyHook] = None,
    ):
        """
        Initialize the adapter and its engines.

        Args:
            catalog: Item templates and rollable tables
            registry: Crafting data (built-in data if None)
            dice: Shared roller for table draws and value multipliers
            notifier: Receives user-facing warnings
            settings: Feature flags (all disabled if None)
            store: Container persistence (in-memory only if None)
            mystify_hook: Identification module (no-op if None)
        """
        self.catalog = catalog
        self.registry = registry if registry is not None else MaterialGradeRegistry.default()
        self.dice = dice or DiceRoller()
        self.notifier = notifier or LoggingNotifier()
        self.settings = settings or Settings()
        self.mystify_hook = mystify_hook or NullMystifyHook()

        self.resolver = CollectionResolver(catalog)
        self.roll_engine = TableRollEngine(self.resolver, self.dice, self.notifier)
        self.value_randomizer = ValueRandomizer(self.dice)
        self.merger = InventoryMerger(store)
        self.price_calculator = CraftingPriceCalculator(self.registry, catalog)

    # =========================================================================
    # LOOT ACTIONS
    # =========================================================================

    def roll_table(
        self,
        container: InventoryContainer,
        table_id: str,
        count: int,
        alt_key: bool = False,
    ) -> RollOutcome:
        """
        Draw from a table and put the results into a container.

        Args:
            container: Inventory receiving the loot
            table_id: Table to draw from
            count: Number of draws
            alt_key: Whether the alternate-action modifier was held; with the
                     quick mystify feature on, new items get mystified

        Returns:
            RollOutcome with the draw, the added instances and any
            mystified references

        Raises:
            TableNotFoundError: If the catalog has no such table
        """
        draw = self.roll_engine.draw_table(table_id, count)
        instances = self.value_randomizer.apply_all(draw.items)
        merge = self.merger.merge(container, instances)

        outcome = RollOutcome(draw=draw, added=merge.added)
        if alt_key and self.settings.is_enabled(Settings.FEATURES.QUICK_MYSTIFY.value):
            outcome.mystified = self._mystify_all(container, merge.added)
        return outcome

    def _mystify_all(
        self,
        container: InventoryContainer,
        items: list[ItemInstance],
    ) -> list[str]:
        mystified = []
        for item in items:
            reference = owned_item_reference(container.owner_id, item.instance_id)
            try:
                self.mystify_hook.mystify(reference, replace=True)
            except Exception as e:
                logger.error(f"Failed to mystify {reference}: {e}")
                continue
            mystified.append(reference)
        return mystified

    def clear_inventory(self, container: InventoryContainer) -> None:
        self.merger.clear(container)

    # =========================================================================
    # TABLE LISTINGS
    # =========================================================================

    def get_treasure_tables(self) -> list[RollableTable]:
        return self.catalog.list_tables(TREASURE_TABLE_CATEGORY)

    def get_magic_item_tables(self, category: str) -> list[RollableTable]:
        """Tables of one magic item category, e.g. "Permanent Items"."""
        return self.catalog.list_tables(category)

    # =========================================================================
    # CRAFTING
    # =========================================================================

    def collect_base_weapons(self) -> list[dict[str, str]]:
        """Level 0 weapons (no bombs) that can serve as a crafting base."""
        results = []
        for item in self.catalog.list_collection_contents(EQUIPMENT_COLLECTION):
            if item.category != ItemCategory.WEAPON:
                continue
            if item.name in ALWAYS_AVAILABLE_WEAPONS:
                results.append(_name_and_id(item))
                continue
            if item.level > 0:
                continue
            if item.group in EXCLUDED_WEAPON_GROUPS:
                continue
            results.append(_name_and_id(item))
        return results

    def collect_base_armors(self) -> list[dict[str, str]]:
        """Level 0 armors with an armor group."""
        results = []
        for item in self.catalog.list_collection_contents(EQUIPMENT_COLLECTION):
            if item.category != ItemCategory.ARMOR:
                continue
            if item.level > 0:
                continue
            if item.group in EXCLUDED_ARMOR_GROUPS:
                continue
            results.append(_name_and_id(item))
        return results

    def set_create_mode(self, selection: CraftingSelection, mode: CreateMode) -> CraftingSelection:
        """Switch crafting mode; the base item choices are reset."""
        selection.mode = mode
        selection.base_weapon_id = None
        selection.base_armor_id = None
        return selection

    def normalize_selection(self, selection: CraftingSelection) -> CraftingSelection:
        """
        Replace a grade the selected material does not have with its default.

        Mutates and returns the selection so the corrected grade can be
        written back to the actor.
        """
        if selection.has_material and not self.registry.has_grade(
            selection.material_key, selection.grade_key
        ):
            default = self.registry.default_grade(selection.material_key)
            if default is not None:
                selection.grade_key = default
        return selection

    def quote(self, selection: CraftingSelection) -> CraftingQuote:
        return self.price_calculator.compute(selection)

    def get_create_data(self, selection: CraftingSelection) -> dict[str, Any]:
        """
        Data for the crafting tab.

        Normalizes the selection first, so the grade list and the price
        always agree with each other.
        """
        self.normalize_selection(selection)
        quote = self.quote(selection)

        return {
            "createModes": [mode.value for mode in CreateMode],
            "selection": selection.to_flags(),
            "materials": self.registry.list_materials(),
            "grades": self.registry.list_grades(selection.material_key),
            "runes": [
                {
                    "key": rune.key,
                    "id": rune.rune_id,
                    "label": rune.label,
                    "type": rune.rune_type.value,
                    "mode": rune.mode.value,
                }
                for rune in self.registry.list_runes()
            ],
            "price": quote.price,
            "level": quote.level,
            "weapons": self.collect_base_weapons(),
            "armors": self.collect_base_armors(),
        }

    def get_data(self, selection: CraftingSelection) -> dict[str, Any]:
        """Everything the loot sheet renders."""
        return {
            "treasureTables": [_table_entry(t) for t in self.get_treasure_tables()],
            "magicItemTables": [
                _table_entry(t) for t in self.get_magic_item_tables(PERMANENT_ITEMS_CATEGORY)
            ],
            "consumablesTables": [
                _table_entry(t) for t in self.get_magic_item_tables(CONSUMABLE_ITEMS_CATEGORY)
            ],
            "create": self.get_create_data(selection),
        }


def _table_entry(table: RollableTable) -> dict[str, str]:
    return {"id": table.table_id, "label": table.name}
