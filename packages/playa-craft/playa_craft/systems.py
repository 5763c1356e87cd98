"""System factory for auto-crafting."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from playa_craft.inventory import Inventory
from playa_craft.items import ItemType
from playa_craft.resolver import CraftingResolver
from playa_notify import Position

if TYPE_CHECKING:
    from playa import FrameContext, World


def make_auto_craft_system(
    resolver: CraftingResolver,
    on_crafted: Callable[[World, FrameContext, int, list[ItemType]], None] | None = None,
) -> Callable[[World, FrameContext], None]:
    """Return a system that runs an auto-craft pass each frame.

    Operates on entities holding both ``Inventory`` and ``Position``.
    ``on_crafted(world, ctx, entity_id, items)`` fires when a pass produced
    at least one item.
    """

    def auto_craft_system(world: World, ctx: FrameContext) -> None:
        for eid, (inv, pos) in list(world.query(Inventory, Position)):
            crafted = resolver.auto_craft_all(inv, pos)
            if crafted and on_crafted is not None:
                on_crafted(world, ctx, eid, crafted)

    return auto_craft_system
