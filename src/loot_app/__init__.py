"""
Loot sheet adapter and its collaborator interfaces.
"""

from src.loot_app.settings import Feature, FeatureFlags, Settings
from src.loot_app.identification import MystifyHook, NullMystifyHook, owned_item_reference
from src.loot_app.loot_app import LootApp, RollOutcome

__all__ = [
    "Feature",
    "FeatureFlags",
    "Settings",
    "MystifyHook",
    "NullMystifyHook",
    "owned_item_reference",
    "LootApp",
    "RollOutcome",
]
