"""Inventory system for player characters."""

from typing import Iterator, List, Optional

from ...constants.game_constants import DEFAULT_INVENTORY_SLOTS
from ...utils.logger import get_logger
from ..items.item import Item


class InventoryError(Exception):
    """Base class for inventory failures."""


class InventoryFullError(InventoryError):
    """Raised when adding to an inventory that has no free slot."""

    def __init__(self, item_name: str):
        super().__init__(f"Inventory is full! Cannot add item: {item_name}")
        self.item_name = item_name


class InvalidIndexError(InventoryError, IndexError):
    """Raised when removing from a position that holds no item."""

    def __init__(self, index: int):
        super().__init__(f"Invalid index: {index}")
        self.index = index


class Inventory:
    """Manages an ordered, capacity-bounded list of items.

    Positions are zero-based offsets into the current list. Removing an item
    renumbers every item after it.
    """

    def __init__(self, max_slots: int = DEFAULT_INVENTORY_SLOTS):
        """Initialize an empty inventory with a fixed number of slots."""
        self._items: List[Item] = []
        self._max_slots = max_slots
        self.logger = get_logger()

    @property
    def max_slots(self) -> int:
        return self._max_slots

    @property
    def items(self) -> List[Item]:
        """Get a copy of the held items in slot order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def add_item(self, item: Item):
        """Add an item to the end of the inventory.

        Raises:
            InventoryFullError: If every slot is taken. The item is not stored.
        """
        if self.is_full():
            self.logger.item_action("rejected", item.name,
                                    f"{len(self._items)}/{self._max_slots} slots used")
            raise InventoryFullError(item.name)
        self._items.append(item)
        self.logger.item_action("added", item.name, f"slot {len(self._items) - 1}")

    def remove_item(self, index: int) -> Item:
        """Remove and return the item at a position.

        Negative positions are not counted from the end; they are invalid.

        Raises:
            InvalidIndexError: If no item is held at ``index``.
        """
        if not self._is_valid_index(index):
            self.logger.debug(f"Remove from invalid index {index} "
                              f"(holding {len(self._items)} items)")
            raise InvalidIndexError(index)
        item = self._items.pop(index)
        self.logger.item_action("removed", item.name, f"slot {index}")
        return item

    def get_item(self, index: int) -> Optional[Item]:
        """Get the item at a position, or None if the position is empty."""
        if not self._is_valid_index(index):
            return None
        return self._items[index]

    def is_full(self) -> bool:
        """Check if inventory is at capacity."""
        return len(self._items) >= self._max_slots

    def total_value(self) -> int:
        """Get the total value of items in inventory."""
        return sum(item.value for item in self._items)

    def _is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self._items)
