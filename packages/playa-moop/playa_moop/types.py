"""Moop (matter out of place) definitions and components."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from playa_craft import ItemType
from playa_notify import Position

MoopType = str

DEFAULT_COLLECTOR_RADIUS = 16.0


@dataclass(frozen=True)
class MoopConfig:
    """Static properties of one kind of moop.

    Attributes:
        display_name: Name shown to the player.
        emoji: Icon for the HUD.
        radius: Pickup radius in pixels.
        karma_reward: Karma granted on pickup. May be negative.
        spawn_weight: Relative spawn chance; 0 never spawns naturally.
        item: Inventory item a pickup turns into, or None when it only
            grants karma.
    """

    display_name: str
    emoji: str
    radius: float
    karma_reward: int
    spawn_weight: int
    item: ItemType | None

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise ValueError(f"radius must be > 0, got {self.radius}")
        if self.spawn_weight < 0:
            raise ValueError(f"spawn_weight must be >= 0, got {self.spawn_weight}")


MOOP_DEFINITIONS: Mapping[MoopType, MoopConfig] = {
    "ziptie": MoopConfig("Zip Tie", "🔗", 8, 2, 15, "Zip Tie"),
    "water-bottle": MoopConfig("Water Bottle", "🍼", 12, 3, 20, "Water"),
    "cup": MoopConfig("Cup", "🥤", 10, 2, 18, "Water"),
    "flashing-light": MoopConfig("Flashing Light", "💡", 14, 5, 8, "Light Bulb"),
    "furry-hat": MoopConfig("Furry Hat", "🎩", 16, 8, 5, "Furry Hat"),
    "cigarette-butt": MoopConfig("Cigarette Butt", "🚬", 6, 1, 25, "Trinket"),
    # Dropped bulbs only; picking one back up costs karma.
    "light-bulb": MoopConfig("Light Bulb", "💡", 8, -5, 0, "Light Bulb"),
    "ducting": MoopConfig("Ducting", "🔧", 10, 3, 12, "Ducting"),
    "bucket": MoopConfig("Bucket", "🪣", 14, 4, 8, "Bucket"),
    "glitter": MoopConfig("Glitter", "✨", 6, 2, 15, "Glitter"),
    "rope": MoopConfig("Rope", "🪢", 8, 3, 10, "Rope"),
    "plastic-bag": MoopConfig("Plastic Bag", "🛍️", 6, 1, 20, "Plastic Bag"),
    "boots": MoopConfig("Boots", "👢", 12, 4, 8, "Boots"),
    "cat-head": MoopConfig("Cat Head", "🐱", 14, 6, 6, "Cat Head"),
    "clothing": MoopConfig("Clothing", "👕", 12, 5, 8, None),
    "cape": MoopConfig("Cape", "🦸", 16, 8, 4, None),
}

# Inventory items the player may throw back on the ground.
LITTER_TYPES: Mapping[ItemType, MoopType] = {
    "Ducting": "ducting",
    "Bucket": "bucket",
    "Zip Tie": "ziptie",
    "Glitter": "glitter",
    "Rope": "rope",
    "Plastic Bag": "plastic-bag",
}


@dataclass
class MoopItem:
    """A piece of moop lying on the playa. Also an entity component."""

    type: MoopType
    position: Position
    radius: float
    karma_reward: int
    collected: bool = False


@dataclass
class Collector:
    """Component for entities that pick up moop.

    Attributes:
        radius: The collector's own pickup radius in pixels.
        collected: Pieces picked up that went into the inventory.
    """

    radius: float = DEFAULT_COLLECTOR_RADIUS
    collected: int = 0
