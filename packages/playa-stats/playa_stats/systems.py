"""System factory for per-frame stat decay."""
from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Callable

from playa_stats.apply import STAT_BOUNDS, apply_stat_delta
from playa_stats.config import DecayConfig
from playa_stats.effects import compute_frame_effects, low_energy_mood_penalty
from playa_stats.types import BADNESS_ACCUMULATORS, Motion, PlayerStats

if TYPE_CHECKING:
    from playa import FrameContext, World

logger = logging.getLogger(__name__)


def _critical_stats(stats: PlayerStats) -> set[str]:
    names = {n for n in BADNESS_ACCUMULATORS if getattr(stats, n) >= 100.0}
    if stats.energy <= 0.0:
        names.add("energy")
    return names


def make_stat_decay_system(
    config: DecayConfig,
    *,
    low_energy_penalty: bool = False,
    on_critical: Callable[[World, FrameContext, int, str], None] | None = None,
) -> Callable[[World, FrameContext], None]:
    """Return a system that applies natural stat effects every frame.

    Operates on entities holding both ``PlayerStats`` and ``Motion``. The
    motion accumulator is reset once its distance has been charged.
    ``on_critical(world, ctx, entity_id, stat_name)`` fires on the frame a
    badness accumulator reaches its maximum or energy runs out.
    """

    def stat_decay_system(world: World, ctx: FrameContext) -> None:
        for eid, (stats, motion) in list(world.query(PlayerStats, Motion)):
            delta = compute_frame_effects(motion.distance, ctx.dt, stats, config)
            if low_energy_penalty:
                penalty = low_energy_mood_penalty(ctx.dt, stats.energy, config)
                delta = dataclasses.replace(delta, mood=delta.mood + penalty)
            before = _critical_stats(stats)
            updated = apply_stat_delta(stats, delta, STAT_BOUNDS)
            world.attach(eid, updated)
            motion.distance = 0.0

            for name in sorted(_critical_stats(updated) - before):
                logger.debug("entity %d: %s critical at frame %d", eid, name, ctx.frame)
                if on_critical is not None:
                    on_critical(world, ctx, eid, name)

    return stat_decay_system
