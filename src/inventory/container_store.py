"""
Persistence for inventory containers.

The merger only needs write(); JsonContainerStore also reads containers back
so the CLI can work across runs.
"""

import json
import logging
from pathlib import Path
from typing import Protocol

from src.data_models import InventoryContainer

logger = logging.getLogger(__name__)


class ContainerStore(Protocol):
    """Commits container mutations; durable once write() returns."""

    def write(self, container: InventoryContainer) -> None:
        ...


class JsonContainerStore:
    """Stores each container as <directory>/<owner_id>.json."""

    def __init__(self, directory: str | Path = "data/inventories"):
        self.directory = Path(directory)

    def _path_for(self, owner_id: str) -> Path:
        safe_name = "".join(c for c in owner_id if c.isalnum() or c in "-_.")
        if not safe_name:
            raise ValueError(f"Cannot build a file name from owner id {owner_id!r}")
        return self.directory / f"{safe_name}.json"

    def write(self, container: InventoryContainer) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        filepath = self._path_for(container.owner_id)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(container.to_dict(), f, indent=2, ensure_ascii=False)
        logger.debug(f"Wrote {len(container)} items to {filepath}")

    def read(self, owner_id: str) -> InventoryContainer:
        """
        Load a container, or an empty one if nothing was stored yet.
        """
        filepath = self._path_for(owner_id)
        if not filepath.exists():
            return InventoryContainer(owner_id=owner_id)
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        return InventoryContainer.from_dict(data)
