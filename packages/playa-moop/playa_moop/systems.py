"""System factory for moop pickup."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from playa_craft import Inventory
from playa_notify import Notification, Position
from playa_stats import PlayerStats

from playa_moop.collection import PICKUP_CATEGORY, collect_moop, overlaps, pickup_message
from playa_moop.types import MOOP_DEFINITIONS, Collector, MoopItem

if TYPE_CHECKING:
    from playa import FrameContext, World
    from playa_notify import NotificationSink

logger = logging.getLogger(__name__)


def make_moop_collection_system(
    sink: NotificationSink,
    on_collected: Callable[[World, FrameContext, int, MoopItem], None] | None = None,
) -> Callable[[World, FrameContext], None]:
    """Return a system that lets collectors pick up moop they touch.

    Collectors are entities holding ``Collector``, ``PlayerStats``,
    ``Inventory`` and ``Position``; moop are entities holding ``MoopItem``.
    A pickup grants karma, adds the matching inventory item when there is
    one, notifies ``sink`` and despawns the moop entity.
    ``on_collected(world, ctx, entity_id, moop)`` fires once per pickup.
    """

    def moop_collection_system(world: World, ctx: FrameContext) -> None:
        litter = list(world.query(MoopItem))
        collectors = list(world.query(Collector, PlayerStats, Inventory, Position))
        for eid, (collector, stats, inv, pos) in collectors:
            picked = False
            for mid, (moop,) in litter:
                if moop.collected or not overlaps(pos, collector.radius, moop.position, moop.radius):
                    continue
                result = collect_moop(moop, stats)
                stats = result.stats
                picked = True
                moop.collected = True
                world.despawn(mid)

                config = MOOP_DEFINITIONS.get(moop.type)
                if config is not None and config.item is not None and inv.accepts(config.item):
                    inv.add(config.item, 1)
                    collector.collected += 1

                sink.notify(Notification(
                    message=pickup_message(moop, result.karma_gained),
                    category=PICKUP_CATEGORY,
                    duration_ms=0,
                    position=moop.position,
                ))
                logger.info("entity %d collected %s (%+d karma)", eid, moop.type, result.karma_gained)
                if on_collected is not None:
                    on_collected(world, ctx, eid, result.moop)
            if picked:
                world.attach(eid, stats)

    return moop_collection_system
