"""Core data types for player stats."""
from __future__ import annotations

from dataclasses import dataclass

STAT_NAMES: tuple[str, ...] = (
    "energy", "mood", "thirst", "hunger", "karma", "bathroom",
)

# Higher value means a worse player condition.
BADNESS_ACCUMULATORS: tuple[str, ...] = ("thirst", "hunger", "bathroom")


@dataclass
class PlayerStats:
    """Snapshot of the player's needs.

    Attributes:
        energy: 0-100, higher is better. Spent by moving.
        mood: 0-100, higher is better. Drifts toward well-being.
        thirst: 0-100 badness accumulator.
        hunger: 0-100 badness accumulator.
        karma: Signed, 0 is neutral. Relaxes toward 0.
        bathroom: 0-100 badness accumulator.
    """

    energy: float = 100.0
    mood: float = 100.0
    thirst: float = 0.0
    hunger: float = 0.0
    karma: float = 0.0
    bathroom: float = 0.0


@dataclass(frozen=True)
class StatDelta:
    """Additive change for each stat over one frame."""

    energy: float = 0.0
    mood: float = 0.0
    thirst: float = 0.0
    hunger: float = 0.0
    karma: float = 0.0
    bathroom: float = 0.0

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in STAT_NAMES}


@dataclass
class Motion:
    """Distance travelled (pixels) since the stats were last updated."""

    distance: float = 0.0
