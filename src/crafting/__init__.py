"""
Crafted item configuration and pricing.

This module provides:
- Material, grade and rune types plus the per-actor CraftingSelection
- MaterialGradeRegistry: grade compatibility and default-grade fallback
- CraftingPriceCalculator: additive price, max-based level
"""

from src.crafting.crafting_types import (
    CREATE_KEY_NONE,
    CreateMode,
    RuneType,
    GradeStats,
    Grade,
    Material,
    Rune,
    CraftingSelection,
    CraftingQuote,
)
from src.crafting.material_registry import MaterialGradeRegistry
from src.crafting.price_calculator import CraftingPriceCalculator

__all__ = [
    "CREATE_KEY_NONE",
    "CreateMode",
    "RuneType",
    "GradeStats",
    "Grade",
    "Material",
    "Rune",
    "CraftingSelection",
    "CraftingQuote",
    "MaterialGradeRegistry",
    "CraftingPriceCalculator",
]
