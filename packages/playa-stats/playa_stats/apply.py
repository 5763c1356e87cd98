"""Applying a frame's StatDelta to the player snapshot."""
from __future__ import annotations

import dataclasses
from typing import Mapping

from playa_stats.types import STAT_NAMES, PlayerStats, StatDelta

# (low, high); None leaves that side open. Karma is never clamped.
STAT_BOUNDS: Mapping[str, tuple[float | None, float | None]] = {
    "energy": (0.0, 100.0),
    "mood": (0.0, 100.0),
    "thirst": (0.0, 100.0),
    "hunger": (0.0, 100.0),
    "karma": (None, None),
    "bathroom": (0.0, 100.0),
}


def clamp(value: float, low: float | None, high: float | None) -> float:
    if low is not None and value < low:
        return low
    if high is not None and value > high:
        return high
    return value


def apply_stat_delta(
    stats: PlayerStats,
    delta: StatDelta,
    bounds: Mapping[str, tuple[float | None, float | None]] = STAT_BOUNDS,
) -> PlayerStats:
    """Return a new snapshot with ``delta`` added and bounds enforced.

    Stats missing from ``bounds`` are left unclamped.
    """
    updated: dict[str, float] = {}
    for name in STAT_NAMES:
        low, high = bounds.get(name, (None, None))
        updated[name] = clamp(getattr(stats, name) + getattr(delta, name), low, high)
    return dataclasses.replace(stats, **updated)
