"""Core data types for end-of-game progression."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from playa_craft import Inventory


@dataclass(frozen=True)
class StatRange:
    """Inclusive bounds on a stat. ``None`` leaves that side open."""

    min: float | None = None
    max: float | None = None

    def contains(self, value: float) -> bool:
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True


@dataclass(frozen=True)
class ArchetypeRequirements:
    stats: Mapping[str, StatRange] = field(default_factory=dict)
    achievements: tuple[str, ...] = ()
    items: tuple[tuple[str, int], ...] = ()
    drugs: tuple[tuple[str, int], ...] = ()  # (drug type, doses)
    hours: StatRange | None = None

    def complexity(self) -> int:
        """Number of requirement categories in use."""
        return sum(1 for part in (self.stats, self.achievements, self.items, self.drugs)
                   if part) + (self.hours is not None)


@dataclass(frozen=True)
class Archetype:
    id: str
    name: str
    description: str
    emoji: str
    requirements: ArchetypeRequirements
    quote: str = ""
    color: str = "#FFFFFF"


@dataclass
class Award:
    """Unlockable award. ``unlocked_at`` is the host clock reading at unlock."""

    id: str
    name: str
    description: str
    emoji: str
    unlocked: bool = False
    unlocked_at: float | None = None


@dataclass
class PlayerProgress:
    """Everything the archetype and award rules look at.

    Attributes:
        stats: Stat name -> value. Besides the need stats this may carry
            ``coins`` and ``light_battery``.
        achievements: Achievement ids earned so far.
        inventory: The player's inventory.
        total_drugs_taken: Doses taken over the whole game.
        game_hours: In-game hours played.
        moop_collected: Pieces of litter picked up.
    """

    stats: Mapping[str, float] = field(default_factory=dict)
    achievements: frozenset[str] = frozenset()
    inventory: Inventory = field(default_factory=Inventory)
    total_drugs_taken: int = 0
    game_hours: float = 0.0
    moop_collected: int = 0
