"""Read-only recipe catalog and the game's built-in recipes."""
from __future__ import annotations

from typing import Iterable, Iterator

from playa_craft.recipe import CraftingRecipe


class RecipeCatalog:
    """Ordered, immutable collection of recipes.

    Iteration follows declaration order, which is also the order an
    auto-craft pass resolves recipes in.
    """

    def __init__(self, recipes: Iterable[CraftingRecipe]) -> None:
        by_id: dict[str, CraftingRecipe] = {}
        for recipe in recipes:
            if recipe.id in by_id:
                raise ValueError(f"duplicate recipe id {recipe.id!r}")
            by_id[recipe.id] = recipe
        self._by_id = by_id
        self._ordered = tuple(by_id.values())

    def get(self, recipe_id: str) -> CraftingRecipe:
        """Look up a recipe. Raises KeyError if unknown."""
        if recipe_id not in self._by_id:
            raise KeyError(recipe_id)
        return self._by_id[recipe_id]

    def has(self, recipe_id: str) -> bool:
        return recipe_id in self._by_id

    def ids(self) -> list[str]:
        return [r.id for r in self._ordered]

    def recipes(self) -> tuple[CraftingRecipe, ...]:
        return self._ordered

    def producing(self, item: str) -> list[CraftingRecipe]:
        """Recipes whose result is ``item``."""
        return [r for r in self._ordered if r.result == item]

    def __iter__(self) -> Iterator[CraftingRecipe]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, recipe_id: object) -> bool:
        return recipe_id in self._by_id


DEFAULT_RECIPES: tuple[CraftingRecipe, ...] = (
    CraftingRecipe(
        id="totem",
        result="Totem",
        ingredients=(("Light Bulb", 2), ("Glitter", 1), ("Rope", 1)),
        description="A spiritual totem that raises mood and attracts wombats",
    ),
    CraftingRecipe(
        id="swamp-cooler",
        result="Swamp Cooler",
        ingredients=(("Water", 1), ("Battery", 1), ("Bucket", 1), ("Ducting", 1)),
        description="A cooling device that creates an energy and mood aura when placed",
    ),
    CraftingRecipe(
        id="cape",
        result="Cape",
        ingredients=(("Clothing", 1), ("Zip Tie", 1), ("Glitter", 2)),
        description="A magical cape that increases your movement speed",
    ),
    CraftingRecipe(
        id="costume",
        result="Costume",
        ingredients=(("Furry Hat", 1), ("Boots", 1), ("Cat Head", 1)),
        description="A complete costume that greatly boosts your mood and energy",
    ),
)

DEFAULT_CATALOG = RecipeCatalog(DEFAULT_RECIPES)
