"""
Weighted table draws resolved against the catalog.

Drawing from a rollable table is a two-step process:
1. Pick `count` entries independently, weighted by each entry's weight
   (with replacement, so an entry can come up more than once)
2. Resolve every picked entry through the CollectionResolver, dropping
   references the catalog no longer has

A draw that loses entries in step 2 still succeeds with what resolved; the
notifier is told once so the user knows the table is out of date.
"""

import logging
from typing import Optional, Protocol

from src.data_models import DiceRoller
from src.items.collection_resolver import Catalog, CollectionResolver
from src.tables.table_types import DrawResult, RollableTable, TableEntry

logger = logging.getLogger(__name__)

MISSING_ENTRIES_WARNING = (
    "Found one or more items in the rollable table that do not exist "
    "in the compendium, skipping these."
)


class Notifier(Protocol):
    """User-facing warning channel."""

    def warn(self, message: str) -> None:
        ...


class LoggingNotifier:
    """Notifier that writes warnings to the log."""

    def __init__(self, name: str = "loot.notifications"):
        self._logger = logging.getLogger(name)

    def warn(self, message: str) -> None:
        self._logger.warning(message)


class TableRollEngine:
    """
    Draws loot from rollable tables.

    Handles the draw process:
    1. Sample entries by weight using the injected DiceRoller
    2. Resolve each sampled entry (entries never see each other's outcome)
    3. Count hits and warn once if any reference was missing
    """

    def __init__(
        self,
        resolver: CollectionResolver,
        dice: Optional[DiceRoller] = None,
        notifier: Optional[Notifier] = None,
    ):
        """
        Initialize the engine.

        Args:
            resolver: Resolver used for every drawn entry
            dice: Roller for the weighted draws (a fresh unseeded one if None)
            notifier: Receives the missing-entries warning (logs if None)
        """
        self.resolver = resolver
        self.dice = dice or DiceRoller()
        self.notifier = notifier or LoggingNotifier()

    @property
    def catalog(self) -> Catalog:
        return self.resolver.catalog

    def sample_entries(self, table: RollableTable, count: int) -> list[TableEntry]:
        """
        Pick `count` entries from a table, weighted and with replacement.

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            raise ValueError(f"Draw count must be zero or more, got {count}")
        if table.is_empty():
            return []

        entries = list(table.entries)
        weights = table.weights
        return [
            self.dice.weighted_choice(entries, weights, f"{table.table_id} draw #{i + 1}")
            for i in range(count)
        ]

    def draw(self, table: RollableTable, count: int) -> DrawResult:
        """
        Draw and resolve `count` entries.

        Args:
            table: The table to draw from
            count: Number of independent draws (0 or more)

        Returns:
            DrawResult with the resolved templates in draw order;
            resolved_count never exceeds count

        Raises:
            ValueError: If count is negative
        """
        sampled = self.sample_entries(table, count)
        resolved = [self.resolver.resolve_entry(entry) for entry in sampled]

        result = DrawResult(
            table_id=table.table_id,
            requested=count,
            items=[template for template in resolved if template is not None],
        )

        if result.is_partial:
            logger.warning(
                f"Table {table.table_id}: resolved {result.resolved_count} of "
                f"{result.requested} draws"
            )
            self.notifier.warn(MISSING_ENTRIES_WARNING)
        else:
            logger.info(f"Table {table.table_id}: drew {result.resolved_count} items")

        return result

    def draw_table(self, table_id: str, count: int) -> DrawResult:
        """
        Fetch a table from the catalog and draw from it.

        Raises:
            TableNotFoundError: If the catalog has no such table
        """
        return self.draw(self.catalog.get_table(table_id), count)
