"""
Item catalog: the source of item templates and rollable tables.

Loads collection and table definitions from JSON files in
data/content/catalog/.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from src.data_models import ItemCategory, ItemTemplate
from src.tables.table_types import RollableTable, TableNotFoundError

logger = logging.getLogger(__name__)

# Collection ids used by the loot sheet
EQUIPMENT_COLLECTION = "equipment-srd"

# Table categories shown in the loot sheet
TREASURE_TABLE_CATEGORY = "Treasure"
PERMANENT_ITEMS_CATEGORY = "Permanent Items"
CONSUMABLE_ITEMS_CATEGORY = "Consumables Items"


class ItemCatalog:
    """
    Catalog of item templates grouped by collection, plus rollable tables.

    A JSON file may hold a collection, a list of tables, or both:

        {
            "collection": "equipment-srd",
            "items": [{"template_id": "longsword", "name": "Longsword", ...}],
            "tables": [{"table_id": "treasure-a", "entries": [...]}]
        }

    Files are loaded lazily on first access. Templates and tables can also be
    registered directly, which is what the tests do.
    """

    def __init__(self, catalog_path: Optional[str | Path] = "data/content/catalog"):
        """
        Initialize the item catalog.

        Args:
            catalog_path: Directory holding catalog JSON files, or None for
                          a catalog populated only through register_* calls
        """
        self.catalog_path = Path(catalog_path) if catalog_path is not None else None
        self._collections: dict[str, dict[str, ItemTemplate]] = {}  # collection -> {id: template}
        self._tables: dict[str, RollableTable] = {}
        self._loaded = catalog_path is None

    def load(self) -> None:
        """Load all catalog JSON files from the catalog directory."""
        self._loaded = True
        if self.catalog_path is None:
            return

        if not self.catalog_path.exists():
            logger.warning(f"Catalog directory not found: {self.catalog_path}")
            return

        for json_file in sorted(self.catalog_path.rglob("*.json")):
            try:
                self._load_file(json_file)
            except (OSError, ValueError, KeyError) as e:
                logger.error(f"Error loading {json_file}: {e}")

        item_count = sum(len(c) for c in self._collections.values())
        logger.info(
            f"Loaded {item_count} items in {len(self._collections)} collections "
            f"and {len(self._tables)} tables"
        )

    def _load_file(self, json_file: Path) -> None:
        """Load items and tables from a single JSON file."""
        with open(json_file, "r", encoding="utf-8") as f:
            data = json.load(f)

        collection_id = data.get("collection", "uncategorized")
        for item_data in data.get("items", []):
            if not item_data.get("template_id"):
                logger.warning(f"Item without template_id in {json_file}")
                continue
            try:
                template = ItemTemplate.from_dict(item_data, collection_id)
            except (ValueError, KeyError, TypeError) as e:
                logger.warning(
                    f"Error parsing item {item_data.get('template_id', '?')} from {json_file}: {e}"
                )
                continue
            self.register_item(template, collection_id)

        for table_data in data.get("tables", []):
            try:
                table = RollableTable.from_dict(table_data)
            except (ValueError, KeyError, TypeError) as e:
                logger.warning(
                    f"Error parsing table {table_data.get('table_id', '?')} from {json_file}: {e}"
                )
                continue
            self.register_table(table)

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load()

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def register_item(self, template: ItemTemplate, collection_id: Optional[str] = None) -> None:
        """Add a template to a collection, overwriting any duplicate id."""
        collection_id = collection_id or template.collection_id or "uncategorized"
        collection = self._collections.setdefault(collection_id, {})
        if template.template_id in collection:
            logger.warning(
                f"Duplicate template_id '{template.template_id}' in {collection_id} - overwriting"
            )
        collection[template.template_id] = template

    def register_table(self, table: RollableTable) -> None:
        if table.table_id in self._tables:
            logger.warning(f"Duplicate table_id '{table.table_id}' - overwriting")
        self._tables[table.table_id] = table

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def lookup(self, collection_id: str, entry_id: str) -> Optional[ItemTemplate]:
        """
        Get a template by collection and entry id.

        Returns:
            The template, or None if either the collection or the entry
            does not exist
        """
        self._ensure_loaded()
        return self._collections.get(collection_id, {}).get(entry_id)

    def get_table(self, table_id: str) -> RollableTable:
        """
        Get a rollable table by id.

        Raises:
            TableNotFoundError: If no table has that id
        """
        self._ensure_loaded()
        table = self._tables.get(table_id)
        if table is None:
            raise TableNotFoundError(f"Rollable table not found: {table_id}")
        return table

    def list_collection_contents(self, collection_id: str) -> list[ItemTemplate]:
        """All templates of a collection, in registration order."""
        self._ensure_loaded()
        return list(self._collections.get(collection_id, {}).values())

    def list_tables(self, category: Optional[str] = None) -> list[RollableTable]:
        """All tables, optionally restricted to one category."""
        self._ensure_loaded()
        tables = list(self._tables.values())
        if category is not None:
            tables = [t for t in tables if t.category == category]
        return tables

    def search(
        self,
        collection_id: str,
        category: Optional[ItemCategory] = None,
        max_level: Optional[int] = None,
    ) -> list[ItemTemplate]:
        """
        Filter a collection by item category and level.

        Args:
            collection_id: Collection to search
            category: Only templates of this category
            max_level: Only templates at or below this level

        Returns:
            Matching templates in registration order
        """
        results = []
        for template in self.list_collection_contents(collection_id):
            if category is not None and template.category != category:
                continue
            if max_level is not None and template.level > max_level:
                continue
            results.append(template)
        return results

    def __len__(self) -> int:
        """Total number of templates across collections."""
        self._ensure_loaded()
        return sum(len(c) for c in self._collections.values())
