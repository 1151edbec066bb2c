"""
Resolution of (collection, entry id) references against the catalog.
"""

import logging
from typing import Optional, Protocol

from src.data_models import ItemTemplate
from src.tables.table_types import RollableTable, TableEntry

logger = logging.getLogger(__name__)


class Catalog(Protocol):
    """The catalog operations the loot engines depend on."""

    def lookup(self, collection_id: str, entry_id: str) -> Optional[ItemTemplate]:
        ...

    def get_table(self, table_id: str) -> RollableTable:
        ...

    def list_collection_contents(self, collection_id: str) -> list[ItemTemplate]:
        ...

    def list_tables(self, category: Optional[str] = None) -> list[RollableTable]:
        ...


class CollectionResolver:
    """
    Turns table entry references into item templates.

    A missing entry is an expected outcome, reported as None. Failures of the
    catalog itself (unreadable data, unreachable backend) are not caught here
    and reach the caller unchanged.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def resolve(self, collection_id: str, entry_id: str) -> Optional[ItemTemplate]:
        """
        Look up one referenced item.

        Args:
            collection_id: Collection the entry lives in
            entry_id: Identifier within that collection

        Returns:
            The template, or None when the catalog has no such entry
        """
        template = self.catalog.lookup(collection_id, entry_id)
        if template is None:
            logger.debug(f"Unresolved table reference {collection_id}/{entry_id}")
        return template

    def resolve_entry(self, entry: TableEntry) -> Optional[ItemTemplate]:
        return self.resolve(entry.collection_id, entry.entry_id)
