"""
Core data models for the Loot Workshop.

Defines the item templates held by the catalog, the concrete item instances
that live in an inventory container, and the seedable dice roller that every
random draw goes through.
"""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Sequence, TypeVar
import random
import uuid


T = TypeVar("T")


# =============================================================================
# ENUMERATIONS
# =============================================================================


class ItemCategory(str, Enum):
    """Broad item categories used for filtering catalog contents."""
    WEAPON = "weapon"
    ARMOR = "armor"
    CONSUMABLE = "consumable"
    EQUIPMENT = "equipment"
    TREASURE = "treasure"


# =============================================================================
# DICE AND RANDOMIZATION
# =============================================================================


class DiceRoller:
    """
    Seedable randomization interface.

    Each roller owns its own random.Random, so two components never share
    hidden RNG state. All table draws and value multipliers go through an
    instance of this class for reproducibility and logging.
    """

    # Rolls kept in the log; older rolls are dropped first
    ROLL_LOG_LIMIT = 500

    def __init__(self, seed: Optional[int] = None, log_limit: int = ROLL_LOG_LIMIT):
        self._seed = seed
        self._rng = random.Random(seed)
        self._roll_log: deque["DiceResult"] = deque(maxlen=log_limit)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def set_seed(self, seed: int) -> None:
        """Reseed the roller for reproducibility."""
        self._seed = seed
        self._rng.seed(seed)

    def roll(self, dice: str, reason: str = "") -> "DiceResult":
        """
        Roll dice using standard notation (e.g., '1d4', '2d6+1', 'd20-2').

        Args:
            dice: Dice notation string
            reason: Why this roll is being made (for logging)

        Returns:
            DiceResult with individual rolls and total
        """
        modifier = 0
        if '+' in dice:
            dice_part, mod_part = dice.split('+')
            modifier = int(mod_part)
        elif '-' in dice:
            dice_part, mod_part = dice.split('-')
            modifier = -int(mod_part)
        else:
            dice_part = dice

        num_dice, die_size = dice_part.lower().split('d')
        num_dice = int(num_dice) if num_dice else 1
        die_size = int(die_size)

        rolls = [self._rng.randint(1, die_size) for _ in range(num_dice)]
        total = sum(rolls) + modifier

        result = DiceResult(
            notation=dice,
            rolls=rolls,
            modifier=modifier,
            total=total,
            reason=reason,
        )

        self._roll_log.append(result)
        return result

    def roll_d4(self, reason: str = "") -> "DiceResult":
        """Convenience method for a single d4."""
        return self.roll("1d4", reason)

    def randint(self, a: int, b: int, reason: str = "") -> int:
        """Return a random integer in [a, b], inclusive, and log it."""
        value = self._rng.randint(a, b)
        self._roll_log.append(DiceResult(
            notation=f"range({a}-{b})",
            rolls=[value],
            modifier=0,
            total=value,
            reason=reason,
        ))
        return value

    def choice(self, seq: Sequence[T], reason: str = "") -> T:
        """
        Choose a random element from a non-empty sequence.

        Raises:
            IndexError: If sequence is empty
        """
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        index = self.randint(0, len(seq) - 1, reason)
        return seq[index]

    def weighted_choice(
        self,
        seq: Sequence[T],
        weights: Sequence[int],
        reason: str = "",
    ) -> T:
        """
        Choose one element with probability proportional to its weight.

        A single integer in [1, total_weight] is rolled and walked across
        the cumulative weights, the same way a ranged table entry is matched.

        Raises:
            IndexError: If sequence is empty
            ValueError: If weights do not line up or do not sum above zero
        """
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        if len(seq) != len(weights):
            raise ValueError("Sequence and weights must be the same length")
        total = sum(weights)
        if total <= 0:
            raise ValueError("Total weight must be positive")

        roll = self.randint(1, total, reason)
        upper = 0
        for item, weight in zip(seq, weights):
            upper += weight
            if roll <= upper:
                return item
        return seq[-1]

    def get_roll_log(self) -> list["DiceResult"]:
        """Get the most recent rolls of this roller, oldest first."""
        return list(self._roll_log)

    def clear_roll_log(self) -> None:
        """Clear the roll log."""
        self._roll_log.clear()


@dataclass
class DiceResult:
    """Result of a dice roll with full information."""
    notation: str
    rolls: list[int]
    modifier: int
    total: int
    reason: str
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        if self.modifier > 0:
            return f"{self.notation}: {self.rolls} + {self.modifier} = {self.total}"
        elif self.modifier < 0:
            return f"{self.notation}: {self.rolls} - {abs(self.modifier)} = {self.total}"
        return f"{self.notation}: {self.rolls} = {self.total}"


# =============================================================================
# ITEMS
# =============================================================================


@dataclass(frozen=True)
class ItemTemplate:
    """
    An immutable item definition owned by the catalog.

    Templates are never placed in a container directly; the value randomizer
    turns them into ItemInstance copies first.
    """
    template_id: str
    name: str
    base_value: float = 0.0
    category: ItemCategory = ItemCategory.EQUIPMENT
    level: int = 0
    group: str = ""                    # Subgroup tag (e.g., "sword", "bomb", "plate")
    collection_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any], collection_id: str = "") -> "ItemTemplate":
        """Create a template from catalog JSON."""
        return cls(
            template_id=data["template_id"],
            name=data.get("name", data["template_id"]),
            base_value=data.get("base_value", 0.0),
            category=ItemCategory(data.get("category", ItemCategory.EQUIPMENT.value)),
            level=data.get("level", 0),
            group=data.get("group", "") or "",
            collection_id=data.get("collection_id", collection_id),
        )


@dataclass
class ItemInstance:
    """A concrete copy of a template, owned by one inventory container."""
    template_id: str
    name: str
    value: float
    category: ItemCategory = ItemCategory.EQUIPMENT
    level: int = 0
    group: str = ""
    value_multiplier: int = 1
    instance_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @classmethod
    def from_template(
        cls,
        template: ItemTemplate,
        value_multiplier: int = 1,
    ) -> "ItemInstance":
        """Copy a template into a fresh instance with a scaled value."""
        return cls(
            template_id=template.template_id,
            name=template.name,
            value=template.base_value * value_multiplier,
            category=template.category,
            level=template.level,
            group=template.group,
            value_multiplier=value_multiplier,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ItemInstance":
        return cls(
            instance_id=data["instance_id"],
            template_id=data["template_id"],
            name=data.get("name", data["template_id"]),
            value=data.get("value", 0.0),
            category=ItemCategory(data.get("category", ItemCategory.EQUIPMENT.value)),
            level=data.get("level", 0),
            group=data.get("group", ""),
            value_multiplier=data.get("value_multiplier", 1),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "instance_id": self.instance_id,
            "template_id": self.template_id,
            "name": self.name,
            "value": self.value,
            "category": self.category.value,
            "level": self.level,
            "group": self.group,
            "value_multiplier": self.value_multiplier,
        }


# =============================================================================
# INVENTORY
# =============================================================================


@dataclass
class InventoryContainer:
    """
    The item instances owned by one actor (a loot pile, a chest, a merchant).

    Mutated only through InventoryMerger.merge and InventoryMerger.clear.
    """
    owner_id: str
    items: list[ItemInstance] = field(default_factory=list)

    def item_ids(self) -> set[str]:
        """Membership snapshot of the instance identifiers."""
        return {item.instance_id for item in self.items}

    def total_value(self) -> float:
        return sum(item.value for item in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, instance_id: str) -> bool:
        return any(item.instance_id == instance_id for item in self.items)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InventoryContainer":
        return cls(
            owner_id=data["owner_id"],
            items=[ItemInstance.from_dict(i) for i in data.get("items", [])],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "owner_id": self.owner_id,
            "items": [item.to_dict() for item in self.items],
        }
