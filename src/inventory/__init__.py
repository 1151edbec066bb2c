"""
Inventory containers: merging new loot and clearing.
"""

from src.inventory.container_store import ContainerStore, JsonContainerStore
from src.inventory.inventory_merger import InventoryMerger, MergeResult

__all__ = [
    "ContainerStore",
    "JsonContainerStore",
    "InventoryMerger",
    "MergeResult",
]
