#!/usr/bin/env python3
"""Demonstration of the RPG inventory system."""

import argparse
from typing import List, Optional

from ..config.config_manager import ConfigError, ConfigManager
from ..constants.game_constants import (
    DEFAULT_INVENTORY_SLOTS,
    DEFAULT_LOG_LEVEL,
    DEMO_LOOKUP_INDEX,
    DEMO_REMOVE_INDEX,
    TABLE_INDEX_WIDTH,
    TABLE_NAME_WIDTH,
    TABLE_RULE_WIDTH,
    TABLE_TYPE_WIDTH,
    TABLE_VALUE_WIDTH,
)
from ..game.items.item import Item, ItemType
from ..game.player.inventory import Inventory, InventoryError
from ..utils.logger import get_logger


def starting_items() -> List[Item]:
    """Items added at the start of the demo."""
    return [
        Item("Dragon Slayer Sword", ItemType.WEAPON, 500),
        Item("Diamond Armor", ItemType.ARMOR, 300),
        Item("Health Potion", ItemType.POTION, 50),
        Item("Magic Wand", ItemType.WEAPON, 250),
        Item("Shield of Valor", ItemType.ARMOR, 200),
    ]


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_row(index, name, type_name, value) -> str:
    return (f"{str(index):<{TABLE_INDEX_WIDTH}} {str(name):<{TABLE_NAME_WIDTH}} "
            f"{str(type_name):<{TABLE_TYPE_WIDTH}} {str(value):<{TABLE_VALUE_WIDTH}}")


def print_item_table(inventory: Inventory):
    """Print every held item as a fixed-width table."""
    print(format_row("Idx", "Name", "Type", "Value"))
    print("-" * TABLE_RULE_WIDTH)

    for index, item in enumerate(inventory):
        print(format_row(index, item.name, item.item_type.display_name, item.value))


def run_demo(max_slots: int = DEFAULT_INVENTORY_SLOTS) -> Inventory:
    """Exercise every inventory operation and print the results to stdout."""
    print("=== RPG Inventory System ===\n")

    inventory = Inventory(max_slots)
    print(f"Created inventory with max {inventory.max_slots} slots\n")

    print("--- Adding 5 items ---")
    for item in starting_items():
        try:
            inventory.add_item(item)
            print(f"✓ Added: {item.describe()}")
        except InventoryError as e:
            print(f"✗ Error: {e}")

    print("\n--- Inventory Status ---")
    print(f"Is full: {format_bool(inventory.is_full())}")
    print(f"Total items: {len(inventory)}")
    print(f"Total value: {inventory.total_value()}\n")

    print("--- Testing error handling (adding when full) ---")
    extra_item = Item("Extra Item", ItemType.POTION, 100)
    try:
        inventory.add_item(extra_item)
        print("✓ Added extra item")
    except InventoryError as e:
        print(f"✓ Error handled correctly: {e}")

    print(f"\n--- Removing item at index {DEMO_REMOVE_INDEX} ---")
    try:
        removed_item = inventory.remove_item(DEMO_REMOVE_INDEX)
        print(f"✓ Removed: {removed_item.name} (Value: {removed_item.value})")
    except InventoryError as e:
        print(f"✗ Error: {e}")

    print("\n--- Inventory after removal ---")
    print(f"Total items: {len(inventory)}")
    print(f"Total value: {inventory.total_value()}\n")

    print("--- All Items in Inventory ---")
    print_item_table(inventory)

    print("\n--- Final Summary ---")
    print(f"Total items in inventory: {len(inventory)}")
    print(f"Total value of all items: {inventory.total_value()}")
    print(f"Inventory is full: {format_bool(inventory.is_full())}")

    print("\n--- Get Item Demo ---")
    item = inventory.get_item(DEMO_LOOKUP_INDEX)
    if item is not None:
        print(f"Item at index {DEMO_LOOKUP_INDEX}: {item.describe()}")

    return inventory


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, load settings and run the demo."""
    parser = argparse.ArgumentParser(description="Run the RPG inventory demonstration")
    parser.add_argument("--slots", "-s", type=int, default=None,
                        help="Inventory capacity (overrides the config file)")
    parser.add_argument("--config", "-c", default=None,
                        help="Directory containing inventory.yaml")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log every inventory change to stderr")

    args = parser.parse_args(argv)
    logger = get_logger()

    max_slots = DEFAULT_INVENTORY_SLOTS
    log_level = DEFAULT_LOG_LEVEL
    log_file = None
    try:
        config = ConfigManager(args.config)
        settings = (config.get_max_slots(), config.get_log_level(), config.get_log_file())
    except ConfigError as e:
        logger.warning(f"{e}; using default settings")
    else:
        max_slots, log_level, log_file = settings

    if args.verbose:
        log_level = "DEBUG"
    try:
        logger.configure(log_level, log_file)
    except OSError as e:
        logger.warning(f"Cannot write log file {log_file}: {e}; logging to console only")
        logger.configure(log_level)

    if args.slots is not None:
        if args.slots < 0:
            parser.error("--slots must be zero or more")
        max_slots = args.slots

    run_demo(max_slots)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
