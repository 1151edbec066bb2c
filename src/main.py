"""
Loot Workshop - Main Entry Point

Command line front end for the loot sheet: list rollable tables, roll loot
into an actor's inventory, clear an inventory, and price a crafted item.
"""

import sys
from pathlib import Path

# Add the project root to the Python path for module discovery
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import argparse
import logging
from dataclasses import dataclass, field
from typing import Optional

from src.crafting import (
    CraftingSelection,
    CreateMode,
    MaterialGradeRegistry,
)
from src.data_models import DiceRoller
from src.inventory import JsonContainerStore
from src.items import ItemCatalog
from src.loot_app import LootApp, Settings
from src.tables import TableNotFoundError


# Configure logging
def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class LootConfig:
    """Configuration for a loot workshop run."""

    data_dir: Path = field(default_factory=lambda: Path("data"))
    catalog_dir: Optional[Path] = None       # Defaults to <data_dir>/content/catalog
    inventory_dir: Optional[Path] = None     # Defaults to <data_dir>/inventories
    materials_file: Optional[Path] = None    # Built-in crafting data if None

    # Randomization
    seed: Optional[int] = None

    # Features
    quick_mystify: bool = False

    # Runtime options
    verbose: bool = False

    def __post_init__(self):
        """Ensure paths are Path objects and fill in derived directories."""
        if isinstance(self.data_dir, str):
            self.data_dir = Path(self.data_dir)
        if isinstance(self.materials_file, str):
            self.materials_file = Path(self.materials_file)
        if self.catalog_dir is None:
            self.catalog_dir = self.data_dir / "content" / "catalog"
        elif isinstance(self.catalog_dir, str):
            self.catalog_dir = Path(self.catalog_dir)
        if self.inventory_dir is None:
            self.inventory_dir = self.data_dir / "inventories"
        elif isinstance(self.inventory_dir, str):
            self.inventory_dir = Path(self.inventory_dir)


def create_loot_app(config: LootConfig, store: Optional[JsonContainerStore] = None) -> LootApp:
    """Wire a LootApp from configuration."""
    registry = (
        MaterialGradeRegistry.load(config.materials_file)
        if config.materials_file
        else MaterialGradeRegistry.default()
    )
    return LootApp(
        catalog=ItemCatalog(config.catalog_dir),
        registry=registry,
        dice=DiceRoller(config.seed),
        settings=Settings({Settings.FEATURES.QUICK_MYSTIFY: config.quick_mystify}),
        store=store or JsonContainerStore(config.inventory_dir),
    )


# =============================================================================
# COMMANDS
# =============================================================================

def cmd_tables(app: LootApp, store: JsonContainerStore, args: argparse.Namespace) -> int:
    tables = app.catalog.list_tables(args.category)
    if not tables:
        print("No rollable tables found.")
        return 0
    for table in tables:
        print(f"{table.table_id:30} {table.name} [{table.category}] ({len(table.entries)} entries)")
    return 0


def cmd_roll(app: LootApp, store: JsonContainerStore, args: argparse.Namespace) -> int:
    container = store.read(args.owner)
    try:
        outcome = app.roll_table(container, args.table, args.count, alt_key=args.mystify)
    except TableNotFoundError as e:
        print(f"Error: {e}")
        return 1

    print(f"Rolled {outcome.draw.resolved_count}/{outcome.draw.requested} on {args.table}:")
    for item in outcome.added:
        print(f"  {item.name:30} {item.value:>10.2f} gp (x{item.value_multiplier})")
    print(f"Total added value: {outcome.total_value:.2f} gp")
    print(f"{args.owner} now holds {len(container)} items")
    return 0


def cmd_clear(app: LootApp, store: JsonContainerStore, args: argparse.Namespace) -> int:
    container = store.read(args.owner)
    app.clear_inventory(container)
    print(f"Cleared inventory of {args.owner}")
    return 0


def cmd_price(app: LootApp, store: JsonContainerStore, args: argparse.Namespace) -> int:
    mode = CreateMode(args.mode)
    selection = CraftingSelection(
        mode=mode,
        base_weapon_id=args.base if mode == CreateMode.WEAPON else None,
        base_armor_id=args.base if mode == CreateMode.ARMOR else None,
        material_key=args.material,
        grade_key=args.grade,
        potency_key=args.potency,
        fundamental_keys=args.fundamental or [],
    )
    app.normalize_selection(selection)
    quote = app.quote(selection)

    if quote.material_key is None:
        print("No material selected: no crafting modification applied.")
    elif args.grade and quote.grade_key != args.grade:
        print(f"Grade '{args.grade}' is not available for {quote.material_key}, using '{quote.grade_key}'")
    print(f"Price: {quote.price} gp")
    print(f"Level: {quote.level}")
    return 0


def non_negative_int(value: str) -> int:
    """argparse type for draw counts."""
    count = int(value)
    if count < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {count}")
    return count


def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Loot Workshop - loot table rolls and crafted item pricing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src.main tables                               # List all tables
  python -m src.main roll --table treasure-minor --count 3 --owner chest-1
  python -m src.main clear --owner chest-1
  python -m src.main price --mode weapon --material silver --grade standard --potency weapon-potency-1
        """
    )

    # General options
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("data"),
        help="Directory for catalog and inventory data (default: data)",
    )
    parser.add_argument(
        "--materials-file",
        type=Path,
        help="JSON file with materials, grades and runes (default: built-in data)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible rolls",
    )
    parser.add_argument(
        "--quick-mystify",
        action="store_true",
        help="Enable mystifying newly rolled items",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    tables_parser = subparsers.add_parser("tables", help="List rollable tables")
    tables_parser.add_argument("--category", type=str, help="Only tables of this category")

    roll_parser = subparsers.add_parser("roll", help="Roll loot into an inventory")
    roll_parser.add_argument("--table", type=str, required=True, help="Table id")
    roll_parser.add_argument("--count", type=non_negative_int, default=1, help="Number of draws (default: 1)")
    roll_parser.add_argument("--owner", type=str, required=True, help="Inventory owner id")
    roll_parser.add_argument(
        "--mystify",
        action="store_true",
        help="Mystify the new items (requires --quick-mystify)",
    )

    clear_parser = subparsers.add_parser("clear", help="Remove every item from an inventory")
    clear_parser.add_argument("--owner", type=str, required=True, help="Inventory owner id")

    price_parser = subparsers.add_parser("price", help="Price a crafted item")
    price_parser.add_argument(
        "--mode",
        type=str,
        default=CreateMode.WEAPON.value,
        choices=[m.value for m in CreateMode],
        help="Kind of item (default: weapon)",
    )
    price_parser.add_argument("--base", type=str, help="Base weapon or armor id")
    price_parser.add_argument("--material", type=str, help="Material key")
    price_parser.add_argument("--grade", type=str, help="Grade key")
    price_parser.add_argument("--potency", type=str, help="Potency rune key")
    price_parser.add_argument(
        "--fundamental",
        type=str,
        action="append",
        help="Fundamental rune key (repeatable)",
    )

    return parser.parse_args(argv)


def create_config_from_args(args: argparse.Namespace) -> LootConfig:
    """Create LootConfig from parsed arguments."""
    return LootConfig(
        data_dir=args.data_dir,
        materials_file=args.materials_file,
        seed=args.seed,
        quick_mystify=args.quick_mystify,
        verbose=args.verbose,
    )


COMMANDS = {
    "tables": cmd_tables,
    "roll": cmd_roll,
    "clear": cmd_clear,
    "price": cmd_price,
}


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI usage."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    config = create_config_from_args(args)
    store = JsonContainerStore(config.inventory_dir)
    app = create_loot_app(config, store)
    return COMMANDS[args.command](app, store, args)


if __name__ == "__main__":
    sys.exit(main())
