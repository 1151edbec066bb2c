"""
Registry of crafting materials, grades and runes.

Grades are only valid for some materials. Every grade-dependent lookup goes
through effective_grade(), which swaps an undeclared grade for the
material's default instead of failing.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from src.crafting.crafting_data import CRAFTING_DATA
from src.crafting.crafting_types import (
    CreateMode,
    Grade,
    GradeStats,
    Material,
    Rune,
    RuneType,
)

logger = logging.getLogger(__name__)


class MaterialGradeRegistry:
    """
    Materials, their declared grades, and runes, in declaration order.

    Usage:
        registry = MaterialGradeRegistry.default()
        grade = registry.effective_grade("orichalcum", "standard")  # "high"
        stats = registry.get_grade_stats("orichalcum", grade)
    """

    def __init__(
        self,
        materials: Optional[list[Material]] = None,
        grades: Optional[list[Grade]] = None,
        runes: Optional[list[Rune]] = None,
    ):
        self._materials: dict[str, Material] = {m.key: m for m in materials or []}
        self._grades: dict[str, Grade] = {g.key: g for g in grades or []}
        self._runes: dict[str, Rune] = {r.key: r for r in runes or []}

        # A material may declare a grade the grade list does not name
        for material in self._materials.values():
            for grade_key in material.grades:
                if grade_key not in self._grades:
                    logger.debug(f"Material {material.key} declares unlisted grade {grade_key}")
                    self._grades[grade_key] = Grade(key=grade_key, grade_id=grade_key, label=grade_key)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MaterialGradeRegistry":
        """
        Build a registry from the CRAFTING_DATA shape.

        Args:
            data: {"grades": {...}, "materials": {...}, "runes": {...}}
        """
        grades = [
            Grade(key=key, grade_id=g.get("id", key), label=g.get("label", key))
            for key, g in data.get("grades", {}).items()
        ]
        materials = [Material.from_dict(key, m) for key, m in data.get("materials", {}).items()]
        runes = [Rune.from_dict(key, r) for key, r in data.get("runes", {}).items()]
        return cls(materials=materials, grades=grades, runes=runes)

    @classmethod
    def default(cls) -> "MaterialGradeRegistry":
        """The built-in materials, grades and runes."""
        return cls.from_dict(CRAFTING_DATA)

    @classmethod
    def load(cls, path: str | Path) -> "MaterialGradeRegistry":
        """
        Load a registry from a JSON file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        registry = cls.from_dict(data)
        logger.info(
            f"Loaded {len(registry._materials)} materials and "
            f"{len(registry._runes)} runes from {path}"
        )
        return registry

    # =========================================================================
    # MATERIALS AND GRADES
    # =========================================================================

    def get_material(self, material_key: Optional[str]) -> Optional[Material]:
        if material_key is None:
            return None
        return self._materials.get(material_key)

    def has_grade(self, material_key: Optional[str], grade_key: Optional[str]) -> bool:
        """True iff the material exists and declares the grade."""
        material = self.get_material(material_key)
        return material is not None and material.has_grade(grade_key)

    def default_grade(self, material_key: Optional[str]) -> Optional[str]:
        material = self.get_material(material_key)
        return material.default_grade if material else None

    def effective_grade(
        self,
        material_key: Optional[str],
        grade_key: Optional[str],
    ) -> Optional[str]:
        """
        The grade that will actually be used for a material.

        Returns:
            grade_key when the material declares it, otherwise the material's
            default grade; None if the material itself is unknown
        """
        if self.has_grade(material_key, grade_key):
            return grade_key
        return self.default_grade(material_key)

    def get_grade_stats(
        self,
        material_key: Optional[str],
        grade_key: Optional[str],
    ) -> Optional[GradeStats]:
        """Stats for the effective grade, or None for an unknown material."""
        material = self.get_material(material_key)
        if material is None:
            return None
        return material.grades[self.effective_grade(material_key, grade_key)]

    def list_materials(self) -> list[dict[str, str]]:
        return [
            {"key": m.key, "id": m.material_id, "label": m.label}
            for m in self._materials.values()
        ]

    def list_grades(self, material_key: Optional[str]) -> list[dict[str, str]]:
        """Grades valid for a material, in registry order (empty if unknown)."""
        return [
            {"key": g.key, "id": g.grade_id, "label": g.label}
            for g in self._grades.values()
            if self.has_grade(material_key, g.key)
        ]

    # =========================================================================
    # RUNES
    # =========================================================================

    def get_rune(self, rune_key: Optional[str]) -> Optional[Rune]:
        if rune_key is None:
            return None
        return self._runes.get(rune_key)

    def list_runes(
        self,
        mode: Optional[CreateMode] = None,
        rune_type: Optional[RuneType] = None,
    ) -> list[Rune]:
        runes = list(self._runes.values())
        if mode is not None:
            runes = [r for r in runes if r.mode == mode]
        if rune_type is not None:
            runes = [r for r in runes if r.rune_type == rune_type]
        return runes

    def __contains__(self, material_key: str) -> bool:
        return material_key in self._materials

    def __len__(self) -> int:
        return len(self._materials)
