"""Crafting recipe definition and the craftability check."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from playa_craft.items import ItemType

if TYPE_CHECKING:
    from playa_craft.inventory import Inventory


@dataclass(frozen=True)
class CraftingRecipe:
    """Immutable crafting recipe.

    Attributes:
        id: Recipe identifier, unique within a catalog.
        result: Item type produced (one per craft).
        ingredients: Ordered ``(item, quantity)`` pairs consumed per craft.
        description: Player-facing text shown when the recipe fires.
    """

    id: str
    result: ItemType
    ingredients: tuple[tuple[ItemType, int], ...] = field(default_factory=tuple)
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("CraftingRecipe id must be non-empty")
        if not self.result:
            raise ValueError(f"recipe {self.id!r}: result must be non-empty")
        # Lists arrive from literal tables; store an immutable copy.
        object.__setattr__(
            self, "ingredients", tuple((item, qty) for item, qty in self.ingredients)
        )
        seen: set[ItemType] = set()
        for item, qty in self.ingredients:
            if qty <= 0:
                raise ValueError(
                    f"recipe {self.id!r}: quantity of {item!r} must be > 0, got {qty}"
                )
            if item in seen:
                raise ValueError(f"recipe {self.id!r}: {item!r} listed twice")
            seen.add(item)
        if self.result in seen:
            raise ValueError(f"recipe {self.id!r}: result {self.result!r} is also an ingredient")

    @property
    def requirements(self) -> dict[ItemType, int]:
        return dict(self.ingredients)


def can_craft(inventory: Inventory, recipe: CraftingRecipe) -> bool:
    """True when ``inventory`` holds every ingredient of ``recipe``.

    An inventory restricted to item types that exclude the result can never
    craft it, so its ingredients are never taken.
    """
    return inventory.accepts(recipe.result) and inventory.has_all(recipe.requirements)
