"""Base item class for all inventory items."""

from dataclasses import dataclass
from enum import Enum


class ItemType(Enum):
    """Types of items in the game."""
    WEAPON = "weapon"
    ARMOR = "armor"
    POTION = "potion"

    @property
    def display_name(self) -> str:
        """Label shown in listings."""
        if self is ItemType.WEAPON:
            return "Weapon"
        if self is ItemType.ARMOR:
            return "Armor"
        if self is ItemType.POTION:
            return "Potion"
        raise ValueError(f"No display name for item type: {self!r}")


@dataclass(frozen=True)
class Item:
    """A single inventory entry.

    Items are immutable once created; replace an item rather than editing it.
    """

    name: str
    item_type: ItemType
    value: int

    def describe(self) -> str:
        """Get a one-line description with type and value."""
        return f"{self.name} (Type: {self.item_type.display_name}, Value: {self.value})"
