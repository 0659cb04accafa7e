"""Unit tests for logging utilities."""

import unittest
import sys
import os
import logging
import tempfile

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from rpg_inventory.utils.logger import get_logger
from rpg_inventory.game.items.item import Item, ItemType
from rpg_inventory.game.player.inventory import Inventory, InventoryFullError


class TestInventoryLogger(unittest.TestCase):
    """Test cases for InventoryLogger class."""

    def setUp(self):
        """Set up test fixtures."""
        self.logger = get_logger()

    def tearDown(self):
        self.logger.configure(logging.WARNING)

    def test_handlers_attached_once(self):
        """Test that repeated get_logger calls don't duplicate handlers."""
        count = len(self.logger.logger.handlers)
        get_logger()
        get_logger()
        self.assertEqual(len(self.logger.logger.handlers), count)

    def test_default_level_is_warning(self):
        """Test that a new logger stays quiet about routine item changes."""
        fresh = get_logger("rpg_inventory_default_level_check")
        self.assertEqual(fresh.logger.level, logging.WARNING)
        self.assertFalse(fresh.logger.isEnabledFor(logging.INFO))

    def test_item_action_format(self):
        """Test the item action message."""
        with self.assertLogs("rpg_inventory", level="INFO") as logs:
            self.logger.item_action("added", "Magic Wand", "slot 3")
            self.logger.item_action("dropped", "Old Boot")
        self.assertEqual(logs.records[0].getMessage(), "ITEM[Magic Wand] added - slot 3")
        self.assertEqual(logs.records[1].getMessage(), "ITEM[Old Boot] dropped")

    def test_inventory_logs_changes(self):
        """Test that inventory mutations are logged."""
        inventory = Inventory(1)
        with self.assertLogs("rpg_inventory", level="INFO") as logs:
            inventory.add_item(Item("Diamond Armor", ItemType.ARMOR, 300))
            with self.assertRaises(InventoryFullError):
                inventory.add_item(Item("Extra Item", ItemType.POTION, 100))
            inventory.remove_item(0)
        messages = [record.getMessage() for record in logs.records]
        self.assertIn("ITEM[Diamond Armor] added - slot 0", messages)
        self.assertIn("ITEM[Extra Item] rejected - 1/1 slots used", messages)
        self.assertIn("ITEM[Diamond Armor] removed - slot 0", messages)

    def test_configure_level_by_name(self):
        """Test setting the level from a name."""
        self.logger.configure("DEBUG")
        self.assertEqual(self.logger.logger.level, logging.DEBUG)

    def test_configure_log_file(self):
        """Test that a file handler is added and replaced."""
        with tempfile.TemporaryDirectory() as tmp:
            log_file = os.path.join(tmp, "logs", "inventory.log")
            self.logger.configure("INFO", log_file)
            self.logger.info("written to file")
            self.logger.configure("INFO")

            file_handlers = [h for h in self.logger.logger.handlers
                             if isinstance(h, logging.FileHandler)]
            self.assertEqual(file_handlers, [])
            with open(log_file, encoding="utf-8") as f:
                self.assertIn("written to file", f.read())


if __name__ == '__main__':
    unittest.main()
