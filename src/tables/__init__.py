"""
Rollable loot tables and the draw engine.

This module provides:
- Table types (weighted entries referencing catalog items)
- TableRollEngine: weighted draws resolved through the CollectionResolver
"""

from src.tables.table_types import (
    TableEntry,
    RollableTable,
    DrawResult,
    TableNotFoundError,
)
from src.tables.table_roll_engine import (
    TableRollEngine,
    Notifier,
    LoggingNotifier,
    MISSING_ENTRIES_WARNING,
)

__all__ = [
    "TableEntry",
    "RollableTable",
    "DrawResult",
    "TableNotFoundError",
    "TableRollEngine",
    "Notifier",
    "LoggingNotifier",
    "MISSING_ENTRIES_WARNING",
]
