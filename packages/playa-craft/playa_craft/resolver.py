"""Auto-crafting against a recipe catalog."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from playa_notify import Notification, Position
from playa_craft.catalog import RecipeCatalog
from playa_craft.inventory import Inventory
from playa_craft.items import ItemType
from playa_craft.recipe import CraftingRecipe, can_craft

if TYPE_CHECKING:
    from playa_notify import NotificationSink

logger = logging.getLogger(__name__)

CRAFT_CATEGORY = "craft"
CRAFT_NOTIFICATION_MS = 5000


def craft_message(recipe: CraftingRecipe) -> str:
    return f"🔨 Crafted {recipe.result}! {recipe.description}"


class CraftingResolver:
    """Crafts everything an inventory currently allows.

    The resolver holds no inventory of its own; it borrows the one passed to
    :meth:`auto_craft_all` for the duration of a single pass and must be the
    only thing mutating it during that pass.
    """

    def __init__(self, catalog: RecipeCatalog, sink: NotificationSink) -> None:
        self._catalog = catalog
        self._sink = sink

    @property
    def catalog(self) -> RecipeCatalog:
        return self._catalog

    def can_craft(self, inventory: Inventory, recipe: CraftingRecipe) -> bool:
        return can_craft(inventory, recipe)

    def available_recipes(self, inventory: Inventory) -> list[CraftingRecipe]:
        """Recipes the inventory can craft right now. Does not mutate."""
        return [r for r in self._catalog if can_craft(inventory, r)]

    def auto_craft_all(self, inventory: Inventory, position: Position) -> list[ItemType]:
        """Run one auto-craft pass and return the items produced.

        Recipes are tried once each, in catalog order. Ingredients are taken
        as soon as a recipe fires, so an earlier recipe can starve a later
        one within the same pass.
        """
        crafted: list[ItemType] = []
        for recipe in self._catalog:
            if not can_craft(inventory, recipe):
                continue
            for item, quantity in recipe.ingredients:
                inventory.remove(item, quantity)
            inventory.add(recipe.result, 1)
            self._sink.notify(Notification(
                message=craft_message(recipe),
                category=CRAFT_CATEGORY,
                duration_ms=CRAFT_NOTIFICATION_MS,
                position=position,
            ))
            logger.info("auto-crafted %s using recipe %s", recipe.result, recipe.id)
            crafted.append(recipe.result)
        return crafted
