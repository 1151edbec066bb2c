"""
Merging new loot into an inventory container.

merge() reports exactly which instances it added, measured against a
snapshot of the container taken right before the append, so follow-up hooks
only touch fresh items.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from src.data_models import InventoryContainer, ItemInstance
from src.inventory.container_store import ContainerStore

logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    """Instances that were not in the container before the merge."""
    added: list[ItemInstance] = field(default_factory=list)

    @property
    def added_ids(self) -> list[str]:
        return [item.instance_id for item in self.added]

    def __len__(self) -> int:
        return len(self.added)


class InventoryMerger:
    """
    The only writer of inventory containers.

    Concurrent merges on the same container are not supported; the delta is
    only meaningful relative to the snapshot taken inside merge().
    """

    def __init__(self, store: Optional[ContainerStore] = None):
        self.store = store

    def _commit(self, container: InventoryContainer) -> None:
        if self.store is not None:
            self.store.write(container)

    def merge(
        self,
        container: InventoryContainer,
        new_instances: Iterable[ItemInstance],
    ) -> MergeResult:
        """
        Append instances to a container.

        Args:
            container: Target container
            new_instances: Instances to add

        Returns:
            MergeResult listing the instances absent from the pre-merge snapshot
        """
        existing_ids = container.item_ids()

        for instance in new_instances:
            if instance.instance_id in container:
                logger.warning(
                    f"Instance {instance.instance_id} already in {container.owner_id}, skipping"
                )
                continue
            container.items.append(instance)

        added = [item for item in container.items if item.instance_id not in existing_ids]
        self._commit(container)

        logger.info(f"Added {len(added)} items to {container.owner_id}")
        return MergeResult(added=added)

    def clear(self, container: InventoryContainer) -> None:
        """Remove every instance from a container. Cannot be undone."""
        removed = len(container)
        container.items = []
        self._commit(container)
        logger.info(f"Cleared {removed} items from {container.owner_id}")
