"""
Test helpers for the Loot Workshop test suite.

Small factories shared between test modules; fixtures live in conftest.py.
"""

from src.data_models import ItemCategory, ItemInstance


def make_instances(count: int, prefix: str = "item") -> list[ItemInstance]:
    """Create `count` distinct longsword instances with predictable ids."""
    return [
        ItemInstance(
            instance_id=f"{prefix}-{i}",
            template_id="longsword",
            name=f"Longsword {i}",
            value=1,
            category=ItemCategory.WEAPON,
        )
        for i in range(count)
    ]


class RecordingNotifier:
    """Notifier that keeps every warning it receives."""

    def __init__(self):
        self.warnings: list[str] = []

    def warn(self, message: str) -> None:
        self.warnings.append(message)


class RecordingMystifyHook:
    """Identification hook that records references, optionally failing on some."""

    def __init__(self, fail_on: set[str] | None = None):
        self.calls: list[tuple[str, bool]] = []
        self.fail_on = fail_on or set()

    def mystify(self, item_reference: str, replace: bool = True) -> None:
        self.calls.append((item_reference, replace))
        if item_reference in self.fail_on:
            raise RuntimeError(f"cannot mystify {item_reference}")
