"""playa-progress - End-of-game archetypes and awards."""
from playa_progress.archetypes import (
    BURNER_ARCHETYPES,
    calculate_player_archetype,
    meets_requirements,
)
from playa_progress.awards import (
    AWARD_RULES,
    AwardRule,
    check_and_unlock_awards,
    default_awards,
)
from playa_progress.types import (
    Archetype,
    ArchetypeRequirements,
    Award,
    PlayerProgress,
    StatRange,
)

__all__ = [
    "AWARD_RULES",
    "Archetype",
    "ArchetypeRequirements",
    "Award",
    "AwardRule",
    "BURNER_ARCHETYPES",
    "PlayerProgress",
    "StatRange",
    "calculate_player_archetype",
    "check_and_unlock_awards",
    "default_awards",
    "meets_requirements",
]
