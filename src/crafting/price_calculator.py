"""
Price and level of a crafted item.

Price adds up: material, then grade, then every rune. Level is a floor, so it
is the highest requirement among the grade, the runes and the base item.
"""

import logging
from typing import Optional

from src.crafting.crafting_types import CraftingQuote, CraftingSelection
from src.crafting.material_registry import MaterialGradeRegistry
from src.items.collection_resolver import Catalog
from src.items.item_catalog import EQUIPMENT_COLLECTION

logger = logging.getLogger(__name__)


class CraftingPriceCalculator:
    """
    Computes a CraftingQuote for a selection.

    Never raises for selection content: undeclared grades fall back to the
    material default, and unknown runes or base items contribute nothing.
    """

    def __init__(
        self,
        registry: MaterialGradeRegistry,
        catalog: Optional[Catalog] = None,
        base_collection_id: str = EQUIPMENT_COLLECTION,
    ):
        """
        Initialize the calculator.

        Args:
            registry: Materials, grades and runes
            catalog: Where base items are looked up (base level ignored if None)
            base_collection_id: Collection holding base weapons and armors
        """
        self.registry = registry
        self.catalog = catalog
        self.base_collection_id = base_collection_id

    def _base_item_level(self, selection: CraftingSelection) -> int:
        base_id = selection.base_item_id
        if base_id is None or self.catalog is None:
            return 0
        template = self.catalog.lookup(self.base_collection_id, base_id)
        if template is None:
            logger.debug(f"Base item {base_id} not in {self.base_collection_id}")
            return 0
        return template.level

    def compute(self, selection: CraftingSelection) -> CraftingQuote:
        """
        Price and level for a selection.

        Returns:
            A zero quote when no (known) material is selected
        """
        if not selection.has_material:
            return CraftingQuote()

        material = self.registry.get_material(selection.material_key)
        if material is None:
            logger.debug(f"Unknown material {selection.material_key}, no crafting applied")
            return CraftingQuote()

        grade_key = self.registry.effective_grade(material.key, selection.grade_key)
        if grade_key != selection.grade_key:
            logger.debug(f"{material.key}: grade {selection.grade_key} -> {grade_key}")
        grade = material.grades[grade_key]

        price = material.price + grade.price
        level = max(grade.level, self._base_item_level(selection))

        for rune_key in selection.selected_rune_keys():
            rune = self.registry.get_rune(rune_key)
            if rune is None:
                logger.debug(f"Ignoring unknown rune {rune_key}")
                continue
            price += rune.price
            level = max(level, rune.level)

        return CraftingQuote(
            price=price,
            level=level,
            material_key=material.key,
            grade_key=grade_key,
        )

    def calculate_price(self, selection: CraftingSelection) -> float:
        return self.compute(selection).price

    def calculate_level(self, selection: CraftingSelection) -> int:
        return self.compute(selection).level
