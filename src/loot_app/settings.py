"""
Feature flags for the loot sheet.
"""

from enum import Enum
from typing import Any, Optional, Protocol


class FeatureFlags(Protocol):
    """Boolean feature switches read at action time."""

    def is_enabled(self, flag_name: str) -> bool:
        ...


class Feature(str, Enum):
    """Known feature flag names."""
    QUICK_MYSTIFY = "quick-mystify"


class Settings:
    """
    In-memory feature settings.

    Unknown flags read as disabled.

    Usage:
        settings = Settings({Settings.FEATURES.QUICK_MYSTIFY: True})
        settings.is_enabled(Settings.FEATURES.QUICK_MYSTIFY)
    """

    FEATURES = Feature

    def __init__(self, values: Optional[dict[str | Feature, Any]] = None):
        self._values: dict[str, Any] = {}
        for key, value in (values or {}).items():
            self.set(key, value)

    @staticmethod
    def _key(flag_name: str | Feature) -> str:
        return flag_name.value if isinstance(flag_name, Feature) else flag_name

    def get(self, flag_name: str | Feature, default: Any = None) -> Any:
        return self._values.get(self._key(flag_name), default)

    def set(self, flag_name: str | Feature, value: Any) -> None:
        self._values[self._key(flag_name)] = value

    def is_enabled(self, flag_name: str | Feature) -> bool:
        return bool(self.get(flag_name, False))
