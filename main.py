#!/usr/bin/env python3
"""Main entry point for the RPG Inventory System demo."""

import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))


def run() -> int:
    """Run the inventory demonstration."""
    from rpg_inventory.demo.inventory_demo import main

    return main()


if __name__ == "__main__":
    sys.exit(run())
