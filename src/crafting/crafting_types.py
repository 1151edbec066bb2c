"""
Types for crafted item configuration: materials, grades, runes and the
per-actor crafting selection.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


# Sentinel for "nothing selected" in any crafting dropdown
CREATE_KEY_NONE = "none"

# Flag keys used to persist a crafting selection on an actor
CREATE_MODE = "create-mode"
CREATE_BASE_WEAPON = "create-base-weapon"
CREATE_BASE_ARMOR = "create-base-armor"
CREATE_MATERIAL = "create-material"
CREATE_GRADE = "create-grade"
CREATE_POTENCY = "create-potency"
CREATE_FUNDAMENTAL = "create-fundamental"


class CreateMode(str, Enum):
    """What kind of item is being crafted."""
    WEAPON = "weapon"
    ARMOR = "armor"
    NONE = "none"


class RuneType(str, Enum):
    """Rune categories."""
    POTENCY = "potency"            # Item bonus to attack rolls or AC
    FUNDAMENTAL = "fundamental"    # Striking / resilient


@dataclass(frozen=True)
class GradeStats:
    """
    Stats for one (material, grade) pair.

    Price and level are what the grade adds to a crafted item; the physical
    stats describe an item made of that material at that grade.
    """
    price: float = 0.0
    level: int = 0
    hardness: int = 0
    hit_points: int = 0
    broken_threshold: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GradeStats":
        return cls(
            price=data.get("price", 0.0),
            level=data.get("level", 0),
            hardness=data.get("hardness", 0),
            hit_points=data.get("hit_points", 0),
            broken_threshold=data.get("broken_threshold", 0),
        )


@dataclass(frozen=True)
class Grade:
    """A quality tier a material can be worked at."""
    key: str
    grade_id: str
    label: str


@dataclass
class Material:
    """
    A precious material and the grades it can be worked at.

    Not every material has every grade (orichalcum only comes in high grade),
    so `grades` only holds the declared keys.
    """
    key: str
    material_id: str
    label: str
    default_grade: str
    grades: dict[str, GradeStats] = field(default_factory=dict)
    price: float = 0.0            # Flat price added regardless of grade

    def __post_init__(self):
        if self.default_grade not in self.grades:
            raise ValueError(
                f"Material {self.key}: default grade '{self.default_grade}' is not declared"
            )

    def has_grade(self, grade_key: Optional[str]) -> bool:
        return grade_key is not None and grade_key in self.grades

    @classmethod
    def from_dict(cls, key: str, data: dict[str, Any]) -> "Material":
        return cls(
            key=key,
            material_id=data.get("id", key),
            label=data.get("label", key),
            default_grade=data["default_grade"],
            grades={g: GradeStats.from_dict(s) for g, s in data.get("grades", {}).items()},
            price=data.get("price", 0.0),
        )


@dataclass(frozen=True)
class Rune:
    """A potency or fundamental rune etched into a crafted item."""
    key: str
    rune_id: str
    label: str
    rune_type: RuneType
    mode: CreateMode
    tier: int = 1
    price: float = 0.0
    level: int = 0

    @classmethod
    def from_dict(cls, key: str, data: dict[str, Any]) -> "Rune":
        return cls(
            key=key,
            rune_id=data.get("id", key),
            label=data.get("label", key),
            rune_type=RuneType(data["type"]),
            mode=CreateMode(data.get("mode", CreateMode.WEAPON.value)),
            tier=data.get("tier", 1),
            price=data.get("price", 0.0),
            level=data.get("level", 0),
        )


def _is_selected(key: Optional[str]) -> bool:
    return bool(key) and key != CREATE_KEY_NONE


def _selected_or_none(key: Optional[str]) -> Optional[str]:
    return key if _is_selected(key) else None


@dataclass
class CraftingSelection:
    """
    One actor's pending crafting configuration.

    Stored on the actor as flat flags (see to_flags / from_flags); every key
    may be missing or CREATE_KEY_NONE.
    """
    mode: CreateMode = CreateMode.NONE
    base_weapon_id: Optional[str] = None
    base_armor_id: Optional[str] = None
    material_key: Optional[str] = None
    grade_key: Optional[str] = None
    potency_key: Optional[str] = None
    fundamental_keys: list[str] = field(default_factory=list)

    @property
    def base_item_id(self) -> Optional[str]:
        """The base item for the active mode, if one is chosen."""
        if self.mode == CreateMode.WEAPON and _is_selected(self.base_weapon_id):
            return self.base_weapon_id
        if self.mode == CreateMode.ARMOR and _is_selected(self.base_armor_id):
            return self.base_armor_id
        return None

    @property
    def has_material(self) -> bool:
        return _is_selected(self.material_key)

    def selected_rune_keys(self) -> list[str]:
        """Potency rune first, then fundamentals, skipping empty choices."""
        keys = [self.potency_key] if _is_selected(self.potency_key) else []
        keys.extend(k for k in self.fundamental_keys if _is_selected(k))
        return keys

    @classmethod
    def from_flags(cls, flags: dict[str, Any]) -> "CraftingSelection":
        """Build a selection from an actor's flag dictionary."""
        fundamental = flags.get(CREATE_FUNDAMENTAL) or []
        if isinstance(fundamental, str):
            fundamental = [fundamental]
        try:
            mode = CreateMode(flags.get(CREATE_MODE) or CreateMode.NONE.value)
        except ValueError:
            mode = CreateMode.NONE
        return cls(
            mode=mode,
            base_weapon_id=_selected_or_none(flags.get(CREATE_BASE_WEAPON)),
            base_armor_id=_selected_or_none(flags.get(CREATE_BASE_ARMOR)),
            material_key=_selected_or_none(flags.get(CREATE_MATERIAL)),
            grade_key=_selected_or_none(flags.get(CREATE_GRADE)),
            potency_key=_selected_or_none(flags.get(CREATE_POTENCY)),
            fundamental_keys=[k for k in fundamental if _is_selected(k)],
        )

    def to_flags(self) -> dict[str, Any]:
        return {
            CREATE_MODE: self.mode.value,
            CREATE_BASE_WEAPON: self.base_weapon_id or "",
            CREATE_BASE_ARMOR: self.base_armor_id or "",
            CREATE_MATERIAL: self.material_key or CREATE_KEY_NONE,
            CREATE_GRADE: self.grade_key or CREATE_KEY_NONE,
            CREATE_POTENCY: self.potency_key or CREATE_KEY_NONE,
            CREATE_FUNDAMENTAL: list(self.fundamental_keys),
        }


@dataclass(frozen=True)
class CraftingQuote:
    """Price and level of a crafting selection, after grade fallback."""
    price: float = 0.0
    level: int = 0
    material_key: Optional[str] = None
    grade_key: Optional[str] = None     # The grade actually used
