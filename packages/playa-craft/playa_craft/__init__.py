"""playa-craft - Inventory and automatic crafting for the playa player."""
from playa_craft.catalog import DEFAULT_CATALOG, DEFAULT_RECIPES, RecipeCatalog
from playa_craft.inventory import Inventory
from playa_craft.items import ITEM_TYPES, ItemType, is_item_type
from playa_craft.recipe import CraftingRecipe, can_craft
from playa_craft.resolver import (
    CRAFT_CATEGORY,
    CRAFT_NOTIFICATION_MS,
    CraftingResolver,
    craft_message,
)
from playa_craft.systems import make_auto_craft_system

__all__ = [
    "CRAFT_CATEGORY",
    "CRAFT_NOTIFICATION_MS",
    "CraftingRecipe",
    "CraftingResolver",
    "DEFAULT_CATALOG",
    "DEFAULT_RECIPES",
    "ITEM_TYPES",
    "Inventory",
    "ItemType",
    "RecipeCatalog",
    "can_craft",
    "craft_message",
    "is_item_type",
    "make_auto_craft_system",
]
