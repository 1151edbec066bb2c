"""
Table types for weighted loot draws.

A RollableTable is an ordered list of weighted entries. Each entry points at
an item by (collection, entry id) rather than carrying the item itself, so a
table can reference content that is later removed from the catalog.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from src.data_models import ItemTemplate


class TableNotFoundError(LookupError):
    """Raised when the catalog has no table with the requested id."""
    pass


@dataclass(frozen=True)
class TableEntry:
    """
    A single weighted entry in a rollable table.

    The entry references its result by collection and entry id; resolving
    that reference is the job of the CollectionResolver.
    """
    collection_id: str
    entry_id: str
    weight: int = 1
    text: Optional[str] = None            # Display text for the entry

    def __post_init__(self):
        if self.weight < 1:
            raise ValueError(f"Table entry weight must be positive, got {self.weight}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TableEntry":
        return cls(
            collection_id=data["collection"],
            entry_id=data["entry_id"],
            weight=data.get("weight", 1),
            text=data.get("text"),
        )


@dataclass(frozen=True)
class RollableTable:
    """
    A weighted table of item references.

    Entries keep their declaration order; weights give the draw
    distribution (an entry with weight 3 is three times as likely as one
    with weight 1).
    """
    table_id: str
    name: str
    entries: tuple[TableEntry, ...] = ()
    category: str = ""                    # e.g., "Treasure", "Permanent Items"
    description: str = ""

    @property
    def total_weight(self) -> int:
        return sum(entry.weight for entry in self.entries)

    @property
    def weights(self) -> list[int]:
        return [entry.weight for entry in self.entries]

    def is_empty(self) -> bool:
        return not self.entries

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RollableTable":
        return cls(
            table_id=data["table_id"],
            name=data.get("name", data["table_id"]),
            entries=tuple(TableEntry.from_dict(e) for e in data.get("entries", [])),
            category=data.get("category", ""),
            description=data.get("description", ""),
        )


@dataclass
class DrawResult:
    """
    Outcome of drawing N entries from a table.

    Only resolved templates are kept; misses are counted by the gap between
    requested and resolved_count.
    """
    table_id: str
    requested: int
    items: list[ItemTemplate] = field(default_factory=list)

    @property
    def resolved_count(self) -> int:
        return len(self.items)

    @property
    def missing_count(self) -> int:
        return self.requested - self.resolved_count

    @property
    def is_partial(self) -> bool:
        """True when at least one draw referenced a missing catalog entry."""
        return self.resolved_count < self.requested
