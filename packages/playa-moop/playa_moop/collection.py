"""Picking up moop and throwing it back down."""
from __future__ import annotations

import dataclasses
import logging
import math
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from playa_craft import Inventory, ItemType
from playa_notify import Notification, Position
from playa_stats import PlayerStats, StatDelta, apply_stat_delta

from playa_moop.types import LITTER_TYPES, MOOP_DEFINITIONS, MoopItem, MoopType

if TYPE_CHECKING:
    from playa_notify import NotificationSink

logger = logging.getLogger(__name__)

PICKUP_CATEGORY = "item"
LITTER_CATEGORY = "warning"
LITTER_PENALTY_MULTIPLIER = 2


@dataclass(frozen=True)
class MoopCollectionResult:
    success: bool
    moop: MoopItem | None
    karma_gained: int
    stats: PlayerStats


def make_moop(moop_type: MoopType, position: Position) -> MoopItem:
    """Build an uncollected moop item from its definition.

    Raises:
        KeyError: If ``moop_type`` has no definition.
    """
    config = MOOP_DEFINITIONS[moop_type]
    return MoopItem(
        type=moop_type,
        position=position,
        radius=config.radius,
        karma_reward=config.karma_reward,
    )


def pick_moop_type(rng: random.Random) -> MoopType:
    """Choose a naturally spawning moop type by spawn weight."""
    types = [t for t, c in MOOP_DEFINITIONS.items() if c.spawn_weight > 0]
    weights = [MOOP_DEFINITIONS[t].spawn_weight for t in types]
    return rng.choices(types, weights=weights)[0]


def moop_karma_reward(moop_type: MoopType) -> int:
    """Karma for picking up ``moop_type``; 0 for unknown types."""
    config = MOOP_DEFINITIONS.get(moop_type)
    return config.karma_reward if config is not None else 0


def overlaps(
    player_pos: Position, player_radius: float,
    moop_pos: Position, moop_radius: float,
) -> bool:
    distance = math.hypot(player_pos.x - moop_pos.x, player_pos.y - moop_pos.y)
    return distance < player_radius + moop_radius


def find_collectible_moop(
    player_pos: Position, player_radius: float, moop_items: Iterable[MoopItem],
) -> list[MoopItem]:
    """Uncollected items within reach of the player, in input order."""
    return [
        m for m in moop_items
        if not m.collected and overlaps(player_pos, player_radius, m.position, m.radius)
    ]


def collect_moop(moop: MoopItem, stats: PlayerStats) -> MoopCollectionResult:
    """Pick up ``moop`` and grant its karma.

    Pure: returns a collected copy of the item and new stats. An item that
    was already collected yields ``success=False`` and unchanged stats.
    """
    if moop.collected:
        return MoopCollectionResult(False, None, 0, stats)
    gained = moop.karma_reward
    return MoopCollectionResult(
        success=True,
        moop=dataclasses.replace(moop, collected=True),
        karma_gained=gained,
        stats=apply_stat_delta(stats, StatDelta(karma=gained)),
    )


def pickup_message(moop: MoopItem, karma_gained: int) -> str:
    config = MOOP_DEFINITIONS.get(moop.type)
    name = config.display_name if config is not None else moop.type
    return f"+1 {name} ({karma_gained:+d} karma)"


def litter_penalty(item: ItemType) -> int:
    """Karma lost for dropping ``item``: twice its pickup reward."""
    moop_type = LITTER_TYPES.get(item)
    if moop_type is None:
        return 0
    return moop_karma_reward(moop_type) * LITTER_PENALTY_MULTIPLIER


def drop_litter(
    inventory: Inventory,
    item: ItemType,
    stats: PlayerStats,
    sink: NotificationSink,
    position: Position,
) -> PlayerStats | None:
    """Throw one ``item`` on the ground and take the karma penalty.

    Returns the new stats, or None when ``item`` is not litter or none is
    held. Nothing changes in that case.
    """
    if item not in LITTER_TYPES or inventory.remove(item, 1) == 0:
        return None
    penalty = litter_penalty(item)
    sink.notify(Notification(
        message=f"Littered {item} • -{penalty} karma",
        category=LITTER_CATEGORY,
        duration_ms=0,
        position=position,
    ))
    logger.info("littered %s for -%d karma", item, penalty)
    return apply_stat_delta(stats, StatDelta(karma=-penalty))
