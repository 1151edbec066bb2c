"""
Tests for the loot sheet adapter.

Covers the roll-table flow (draw, randomize, merge, quick mystify), clearing
inventories, and the data gathered for the crafting tab.
"""

import pytest

from src.crafting import CraftingSelection, CreateMode
from src.data_models import DiceRoller, ItemCategory, ItemTemplate
from src.items import EQUIPMENT_COLLECTION
from src.loot_app import LootApp, Settings
from src.tables import (
    MISSING_ENTRIES_WARNING,
    RollableTable,
    TableEntry,
    TableNotFoundError,
)

from tests.helpers import RecordingMystifyHook, RecordingNotifier


@pytest.fixture
def loot_catalog(sample_catalog, complete_table, broken_table):
    """sample_catalog plus the base items the crafting tab filters."""
    for template in (
        ItemTemplate("alchemists-fire", "Alchemist's Fire", 3, ItemCategory.WEAPON, 0, "bomb"),
        ItemTemplate("aldori-dueling-sword", "Aldori Dueling Sword", 2, ItemCategory.WEAPON, 1, "sword"),
        ItemTemplate("elven-curve-blade", "Elven Curve Blade", 4, ItemCategory.WEAPON, 2, "sword"),
        ItemTemplate("explorers-clothing", "Explorer's Clothing", 0.1, ItemCategory.ARMOR, 0, ""),
        ItemTemplate("celestial-armor", "Celestial Armor", 1800, ItemCategory.ARMOR, 13, "chain"),
    ):
        sample_catalog.register_item(template, EQUIPMENT_COLLECTION)
    sample_catalog.register_table(complete_table)
    sample_catalog.register_table(broken_table)
    sample_catalog.register_table(RollableTable(
        table_id="permanent-1",
        name="Permanent Items 1",
        category="Permanent Items",
        entries=(TableEntry(EQUIPMENT_COLLECTION, "longsword"),),
    ))
    sample_catalog.register_table(RollableTable(
        table_id="consumables-1",
        name="Consumables 1",
        category="Consumables Items",
        entries=(TableEntry(EQUIPMENT_COLLECTION, "healing-potion-minor"),),
    ))
    return sample_catalog


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def hook():
    return RecordingMystifyHook()


def make_app(catalog, registry, store=None, notifier=None, hook=None, quick_mystify=False, seed=42):
    return LootApp(
        catalog=catalog,
        registry=registry,
        dice=DiceRoller(seed=seed),
        notifier=notifier,
        settings=Settings({Settings.FEATURES.QUICK_MYSTIFY: quick_mystify}),
        store=store,
        mystify_hook=hook,
    )


class TestRollTable:
    """The roll-table action."""

    def test_roll_adds_items(self, loot_catalog, registry, empty_container, mock_store, notifier):
        app = make_app(loot_catalog, registry, store=mock_store, notifier=notifier)
        outcome = app.roll_table(empty_container, "complete", 3)

        assert len(outcome.added) == 3
        assert len(empty_container) == 3
        assert notifier.warnings == []
        mock_store.write.assert_called_once_with(empty_container)

    def test_roll_values_are_multiplied(self, loot_catalog, registry, empty_container):
        app = make_app(loot_catalog, registry)
        outcome = app.roll_table(empty_container, "complete", 10)
        for item in outcome.added:
            template = loot_catalog.lookup(EQUIPMENT_COLLECTION, item.template_id)
            assert 1 <= item.value_multiplier <= 4
            assert item.value == template.base_value * item.value_multiplier
        assert outcome.total_value == sum(item.value for item in outcome.added)

    def test_roll_keeps_existing_items(self, loot_catalog, registry, full_container):
        app = make_app(loot_catalog, registry)
        before = full_container.item_ids()
        outcome = app.roll_table(full_container, "complete", 2)

        assert len(full_container) == 7
        assert before <= full_container.item_ids()
        assert not any(item.instance_id in before for item in outcome.added)

    def test_missing_entries_warn_once(self, loot_catalog, registry, empty_container, notifier):
        app = make_app(loot_catalog, registry, notifier=notifier, seed=11)
        outcome = app.roll_table(empty_container, "broken", 12)

        assert outcome.draw.resolved_count == len(outcome.added)
        if outcome.draw.is_partial:
            assert notifier.warnings == [MISSING_ENTRIES_WARNING]
        else:
            assert notifier.warnings == []

    def test_missing_table_raises(self, loot_catalog, registry, empty_container, mock_store):
        app = make_app(loot_catalog, registry, store=mock_store)
        with pytest.raises(TableNotFoundError):
            app.roll_table(empty_container, "no-such-table", 1)
        assert len(empty_container) == 0
        mock_store.write.assert_not_called()

    def test_same_seed_same_loot(self, loot_catalog, registry, empty_container, full_container):
        first = make_app(loot_catalog, registry, seed=5).roll_table(empty_container, "complete", 6)
        second = make_app(loot_catalog, registry, seed=5).roll_table(full_container, "complete", 6)
        assert [i.template_id for i in first.added] == [i.template_id for i in second.added]
        assert [i.value for i in first.added] == [i.value for i in second.added]


class TestQuickMystify:
    """Mystifying new items after a roll."""

    def test_mystify_with_flag_and_alt_key(self, loot_catalog, registry, empty_container, hook):
        app = make_app(loot_catalog, registry, hook=hook, quick_mystify=True)
        outcome = app.roll_table(empty_container, "complete", 2, alt_key=True)

        expected = [f"Actor.loot-pile.OwnedItem.{item.instance_id}" for item in outcome.added]
        assert hook.calls == [(ref, True) for ref in expected]
        assert outcome.mystified == expected

    def test_only_new_items_are_mystified(self, loot_catalog, registry, full_container, hook):
        app = make_app(loot_catalog, registry, hook=hook, quick_mystify=True)
        app.roll_table(full_container, "complete", 1, alt_key=True)

        assert len(hook.calls) == 1
        assert "existing-" not in hook.calls[0][0]

    def test_no_mystify_without_alt_key(self, loot_catalog, registry, empty_container, hook):
        app = make_app(loot_catalog, registry, hook=hook, quick_mystify=True)
        outcome = app.roll_table(empty_container, "complete", 2)
        assert hook.calls == []
        assert outcome.mystified == []

    def test_no_mystify_when_feature_off(self, loot_catalog, registry, empty_container, hook):
        app = make_app(loot_catalog, registry, hook=hook, quick_mystify=False)
        app.roll_table(empty_container, "complete", 2, alt_key=True)
        assert hook.calls == []

    def test_feature_read_at_action_time(self, loot_catalog, registry, empty_container, hook):
        settings = Settings()
        app = LootApp(loot_catalog, registry, DiceRoller(seed=1), settings=settings, mystify_hook=hook)
        app.roll_table(empty_container, "complete", 1, alt_key=True)
        assert hook.calls == []

        settings.set(Settings.FEATURES.QUICK_MYSTIFY, True)
        app.roll_table(empty_container, "complete", 1, alt_key=True)
        assert len(hook.calls) == 1

    def test_hook_failure_does_not_abort(self, loot_catalog, registry, empty_container):
        """A failing item is logged and the remaining items are still mystified."""
        class FailsFirst(RecordingMystifyHook):
            def mystify(self, item_reference, replace=True):
                self.calls.append((item_reference, replace))
                if len(self.calls) == 1:
                    raise RuntimeError("item is already mystified")

        hook = FailsFirst()
        app = make_app(loot_catalog, registry, hook=hook, quick_mystify=True)
        outcome = app.roll_table(empty_container, "complete", 3, alt_key=True)

        assert len(hook.calls) == 3
        assert outcome.mystified == [ref for ref, _ in hook.calls[1:]]
        assert len(empty_container) == 3

    def test_failed_items_are_not_reported(self, loot_catalog, registry, empty_container):
        class AlwaysFails:
            def mystify(self, item_reference, replace=True):
                raise RuntimeError("identification module unavailable")

        app = make_app(loot_catalog, registry, hook=AlwaysFails(), quick_mystify=True)
        outcome = app.roll_table(empty_container, "complete", 2, alt_key=True)
        assert outcome.mystified == []
        assert len(outcome.added) == 2


class TestClearInventory:
    """The clear-inventory action."""

    def test_clear(self, loot_catalog, registry, full_container, mock_store):
        app = make_app(loot_catalog, registry, store=mock_store)
        app.clear_inventory(full_container)
        assert len(full_container) == 0
        mock_store.write.assert_called_once_with(full_container)

    def test_clear_empty(self, loot_catalog, registry, empty_container):
        app = make_app(loot_catalog, registry)
        app.clear_inventory(empty_container)
        assert len(empty_container) == 0


class TestTableListings:
    """Tables shown on the loot tab."""

    def test_treasure_tables(self, loot_catalog, registry):
        app = make_app(loot_catalog, registry)
        assert [t.table_id for t in app.get_treasure_tables()] == ["complete", "broken"]

    def test_magic_item_tables(self, loot_catalog, registry):
        app = make_app(loot_catalog, registry)
        assert [t.table_id for t in app.get_magic_item_tables("Permanent Items")] == ["permanent-1"]
        assert [t.table_id for t in app.get_magic_item_tables("Consumables Items")] == ["consumables-1"]


class TestBaseItems:
    """Base weapon and armor choices for crafting."""

    def test_base_weapons(self, loot_catalog, registry):
        app = make_app(loot_catalog, registry)
        labels = [w["label"] for w in app.collect_base_weapons()]
        assert "Longsword" in labels
        assert "Aldori Dueling Sword" in labels
        assert "Alchemist's Fire" not in labels
        assert "Elven Curve Blade" not in labels

    def test_base_weapon_shape(self, loot_catalog, registry):
        app = make_app(loot_catalog, registry)
        assert app.collect_base_weapons()[0] == {"id": "longsword", "label": "Longsword"}

    def test_base_armors(self, loot_catalog, registry):
        app = make_app(loot_catalog, registry)
        assert app.collect_base_armors() == [{"id": "chain-mail", "label": "Chain Mail"}]


class TestCrafting:
    """Crafting tab selection handling."""

    def test_normalize_replaces_undeclared_grade(self, loot_catalog, registry):
        app = make_app(loot_catalog, registry)
        selection = CraftingSelection(material_key="cold-iron", grade_key="low")
        app.normalize_selection(selection)
        assert selection.grade_key == "standard"

    def test_normalize_keeps_declared_grade(self, loot_catalog, registry):
        app = make_app(loot_catalog, registry)
        selection = CraftingSelection(material_key="silver", grade_key="low")
        app.normalize_selection(selection)
        assert selection.grade_key == "low"

    def test_normalize_without_material(self, loot_catalog, registry):
        app = make_app(loot_catalog, registry)
        selection = CraftingSelection(grade_key="high")
        app.normalize_selection(selection)
        assert selection.grade_key == "high"

    def test_set_create_mode_resets_base(self, loot_catalog, registry):
        app = make_app(loot_catalog, registry)
        selection = CraftingSelection(mode=CreateMode.WEAPON, base_weapon_id="longsword")
        app.set_create_mode(selection, CreateMode.ARMOR)
        assert selection.mode == CreateMode.ARMOR
        assert selection.base_weapon_id is None
        assert selection.base_armor_id is None

    def test_quote(self, loot_catalog, registry):
        app = make_app(loot_catalog, registry)
        selection = CraftingSelection(
            mode=CreateMode.WEAPON,
            material_key="silver",
            grade_key="standard",
            fundamental_keys=["striking"],
        )
        quote = app.quote(selection)
        assert (quote.price, quote.level) == (55, 5)

    def test_create_data(self, loot_catalog, registry):
        app = make_app(loot_catalog, registry)
        selection = CraftingSelection(mode=CreateMode.WEAPON, material_key="cold-iron", grade_key="low")
        data = app.get_create_data(selection)

        assert data["createModes"] == ["weapon", "armor", "none"]
        assert data["selection"]["create-grade"] == "standard"
        assert [g["key"] for g in data["grades"]] == ["standard", "high"]
        assert data["price"] == 880
        assert data["level"] == 10
        assert [m["key"] for m in data["materials"]] == ["cold-iron", "silver", "orichalcum"]
        assert {r["key"] for r in data["runes"]} == {"potency-1", "striking", "resilient"}
        assert {"id": "chain-mail", "label": "Chain Mail"} in data["armors"]

    def test_create_data_without_material(self, loot_catalog, registry):
        app = make_app(loot_catalog, registry)
        data = app.get_create_data(CraftingSelection())
        assert data["grades"] == []
        assert data["price"] == 0
        assert data["level"] == 0

    def test_sheet_data(self, loot_catalog, registry):
        app = make_app(loot_catalog, registry)
        data = app.get_data(CraftingSelection())
        assert data["treasureTables"] == [
            {"id": "complete", "label": "Complete Table"},
            {"id": "broken", "label": "Broken Table"},
        ]
        assert data["magicItemTables"] == [{"id": "permanent-1", "label": "Permanent Items 1"}]
        assert data["consumablesTables"] == [{"id": "consumables-1", "label": "Consumables 1"}]
        assert "create" in data
