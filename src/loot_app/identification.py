"""
Item identification (mystify) hook.

Mystifying hides an item's real identity from players. The loot sheet only
invokes it; what it does to the item belongs to the identification module.
"""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class MystifyHook(Protocol):
    def mystify(self, item_reference: str, replace: bool = True) -> None:
        ...


class NullMystifyHook:
    """Used when no identification module is installed."""

    def mystify(self, item_reference: str, replace: bool = True) -> None:
        logger.debug(f"No identification module, not mystifying {item_reference}")


def owned_item_reference(owner_id: str, instance_id: str) -> str:
    """Reference string for an item owned by an actor."""
    return f"Actor.{owner_id}.OwnedItem.{instance_id}"
