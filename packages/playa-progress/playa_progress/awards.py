"""Unlockable awards and the rules that unlock them."""
from __future__ import annotations

import logging
from typing import Callable, Mapping

from playa_progress.types import Award, PlayerProgress

logger = logging.getLogger(__name__)

AwardRule = Callable[[PlayerProgress], bool]


def _holds_any(progress: PlayerProgress, *items: str) -> bool:
    return any(progress.inventory.quantity_of(item) > 0 for item in items)


def _karma(progress: PlayerProgress) -> float:
    return progress.stats.get("karma", 0.0)


AWARD_RULES: Mapping[str, AwardRule] = {
    "first-moop": lambda p: p.moop_collected >= 1,
    "moop-collector": lambda p: p.moop_collected >= 50,
    "art-car-rider": lambda p: "art-car-rider" in p.achievements,
    "not-a-darkwad": lambda p: "not-a-darkwad" in p.achievements,
    "psychedelic-pioneer": lambda p: p.total_drugs_taken >= 5,
    "craft-artisan": lambda p: _holds_any(p, "Totem", "Cape", "Costume"),
    "party-survivor": lambda p: _holds_any(p, "Beer", "Vodka"),
    "desert-wanderer": lambda p: p.game_hours >= 4,
    "spiritual-journey": lambda p: _karma(p) >= 100,
    "burning-man-master": lambda p: (
        _karma(p) >= 200 and p.game_hours >= 8 and len(p.achievements) >= 3
    ),
}

_AWARD_TABLE: tuple[tuple[str, str, str, str], ...] = (
    ("first-moop", "First Cleanup", "Picked up your first piece of moop", "🗑️"),
    ("moop-collector", "Moop Collector", "Collected 50 pieces of moop", "🧹"),
    ("art-car-rider", "Art Car Rider", "Rode an art car for the first time", "🚗"),
    ("not-a-darkwad", "Not a Darkwad", "Found your first light bulb", "💡"),
    ("psychedelic-pioneer", "Psychedelic Pioneer", "Experienced multiple altered states", "🌈"),
    ("craft-artisan", "Craft Artisan", "Created your first crafted item", "🔨"),
    ("party-survivor", "Party Survivor", "Consumed various party substances", "🍻"),
    ("desert-wanderer", "Desert Wanderer", "Spent significant time exploring the playa", "🏜️"),
    ("spiritual-journey", "Spiritual Journey", "Achieved high karma through good deeds", "✨"),
    ("burning-man-master", "Burning Man Master", "Completed the ultimate Burning Man experience", "👑"),
)


def default_awards() -> list[Award]:
    """Fresh, all-locked copies of the game's awards."""
    return [Award(id=i, name=n, description=d, emoji=e) for i, n, d, e in _AWARD_TABLE]


def check_and_unlock_awards(
    awards: list[Award],
    progress: PlayerProgress,
    now: float,
    rules: Mapping[str, AwardRule] = AWARD_RULES,
) -> list[Award]:
    """Unlock every locked award whose rule now holds.

    Awards are updated in place. Returns the ones unlocked by this call.
    Awards without a rule stay locked.
    """
    unlocked: list[Award] = []
    for award in awards:
        if award.unlocked:
            continue
        rule = rules.get(award.id)
        if rule is None or not rule(progress):
            continue
        award.unlocked = True
        award.unlocked_at = now
        logger.info("award unlocked: %s - %s", award.name, award.description)
        unlocked.append(award)
    return unlocked
