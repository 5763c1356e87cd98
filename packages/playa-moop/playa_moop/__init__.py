"""playa-moop - Litter pickup and littering for the playa player."""
from playa_moop.collection import (
    LITTER_CATEGORY,
    LITTER_PENALTY_MULTIPLIER,
    PICKUP_CATEGORY,
    MoopCollectionResult,
    collect_moop,
    drop_litter,
    find_collectible_moop,
    litter_penalty,
    make_moop,
    moop_karma_reward,
    overlaps,
    pick_moop_type,
    pickup_message,
)
from playa_moop.systems import make_moop_collection_system
from playa_moop.types import (
    DEFAULT_COLLECTOR_RADIUS,
    LITTER_TYPES,
    MOOP_DEFINITIONS,
    Collector,
    MoopConfig,
    MoopItem,
    MoopType,
)

__all__ = [
    "Collector",
    "DEFAULT_COLLECTOR_RADIUS",
    "LITTER_CATEGORY",
    "LITTER_PENALTY_MULTIPLIER",
    "LITTER_TYPES",
    "MOOP_DEFINITIONS",
    "MoopCollectionResult",
    "MoopConfig",
    "MoopItem",
    "MoopType",
    "PICKUP_CATEGORY",
    "collect_moop",
    "drop_litter",
    "find_collectible_moop",
    "litter_penalty",
    "make_moop",
    "make_moop_collection_system",
    "moop_karma_reward",
    "overlaps",
    "pick_moop_type",
    "pickup_message",
]
