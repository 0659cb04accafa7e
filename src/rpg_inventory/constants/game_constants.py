"""Game constants and configuration values."""

# Inventory
DEFAULT_INVENTORY_SLOTS = 5

# Configuration
DEFAULT_CONFIG_FILE = "inventory.yaml"
DEFAULT_LOG_LEVEL = "WARNING"
LOGGER_NAME = "rpg_inventory"

# Display
TABLE_INDEX_WIDTH = 4
TABLE_NAME_WIDTH = 20
TABLE_TYPE_WIDTH = 10
TABLE_VALUE_WIDTH = 10
TABLE_RULE_WIDTH = 50

# Demonstration
DEMO_REMOVE_INDEX = 2
DEMO_LOOKUP_INDEX = 0
