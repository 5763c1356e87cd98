"""playa-stats - Need and mood model for the playa player."""
from playa_stats.apply import STAT_BOUNDS, apply_stat_delta, clamp
from playa_stats.config import DEFAULT_DECAY_CONFIG, DecayConfig, load_decay_config
from playa_stats.effects import (
    bathroom_decay,
    compute_frame_effects,
    hunger_decay,
    karma_decay,
    low_energy_mood_penalty,
    mood_decay,
    movement_energy_decay,
    thirst_decay,
    well_being,
)
from playa_stats.systems import make_stat_decay_system
from playa_stats.types import (
    BADNESS_ACCUMULATORS,
    STAT_NAMES,
    Motion,
    PlayerStats,
    StatDelta,
)

__all__ = [
    "BADNESS_ACCUMULATORS",
    "DEFAULT_DECAY_CONFIG",
    "DecayConfig",
    "Motion",
    "PlayerStats",
    "STAT_BOUNDS",
    "STAT_NAMES",
    "StatDelta",
    "apply_stat_delta",
    "bathroom_decay",
    "clamp",
    "compute_frame_effects",
    "hunger_decay",
    "karma_decay",
    "load_decay_config",
    "low_energy_mood_penalty",
    "make_stat_decay_system",
    "mood_decay",
    "movement_energy_decay",
    "thirst_decay",
    "well_being",
]
