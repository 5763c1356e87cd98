"""Burner archetypes awarded at the end of a game."""
from __future__ import annotations

from typing import Sequence

from playa_progress.types import (
    Archetype,
    ArchetypeRequirements,
    PlayerProgress,
    StatRange,
)


def meets_requirements(archetype: Archetype, progress: PlayerProgress) -> bool:
    """Check every requirement category of ``archetype``.

    A stat requirement on a stat absent from ``progress.stats`` fails rather
    than passing vacuously, so ``coins`` and ``light_battery`` must be
    supplied for the archetypes that test them. Drug requirements count
    total doses taken, whatever the type.
    """
    req = archetype.requirements

    for stat_name, bounds in req.stats.items():
        if stat_name not in progress.stats:
            return False
        if not bounds.contains(progress.stats[stat_name]):
            return False

    for achievement in req.achievements:
        if achievement not in progress.achievements:
            return False

    for item, quantity in req.items:
        if progress.inventory.quantity_of(item) < quantity:
            return False

    for _drug, count in req.drugs:
        if progress.total_drugs_taken < count:
            return False

    if req.hours is not None and not req.hours.contains(progress.game_hours):
        return False

    return True


def calculate_player_archetype(
    progress: PlayerProgress,
    archetypes: Sequence[Archetype] | None = None,
) -> Archetype | None:
    """Pick the most specific archetype the player qualifies for.

    Archetypes with more requirement categories are tried first; ties keep
    their declared order. Returns None when nothing matches.
    """
    candidates = BURNER_ARCHETYPES if archetypes is None else archetypes
    ordered = sorted(candidates, key=lambda a: a.requirements.complexity(), reverse=True)
    for archetype in ordered:
        if meets_requirements(archetype, progress):
            return archetype
    return None


BURNER_ARCHETYPES: tuple[Archetype, ...] = (
    Archetype(
        id="virgin-burner",
        name="Virgin Burner",
        description="Fresh to the playa, wide-eyed and ready for adventure",
        emoji="🌟",
        requirements=ArchetypeRequirements(
            stats={"karma": StatRange(min=0, max=50)},
            hours=StatRange(max=2),
        ),
        quote="\"I have no idea what I'm doing but this is amazing!\"",
        color="#FFD700",
    ),
    Archetype(
        id="moop-warrior",
        name="Moop Warrior",
        description="Dedicated to keeping the playa clean, one piece of trash at a time",
        emoji="🗑️",
        requirements=ArchetypeRequirements(
            stats={"karma": StatRange(min=100)},
            achievements=("moop-collector",),
        ),
        quote="\"Leave no trace... except for these amazing memories!\"",
        color="#4CAF50",
    ),
    Archetype(
        id="psychedelic-explorer",
        name="Psychedelic Explorer",
        description="Journeyed deep into altered states and emerged enlightened",
        emoji="🌈",
        requirements=ArchetypeRequirements(
            stats={"mood": StatRange(min=80)},
            drugs=(("acid", 2), ("shrooms", 1)),
        ),
        quote="\"The colors... the colors are alive!\"",
        color="#9C27B0",
    ),
    Archetype(
        id="party-animal",
        name="Party Animal",
        description="The life of every party, keeping the energy flowing all night long",
        emoji="🎉",
        requirements=ArchetypeRequirements(
            stats={"energy": StatRange(min=90)},
            items=(("Beer", 5), ("Vodka", 2)),
        ),
        quote="\"What happens at Burning Man stays at Burning Man... mostly!\"",
        color="#FF5722",
    ),
    Archetype(
        id="art-car-nomad",
        name="Art Car Nomad",
        description="Hitched rides on every moving sculpture, seeing the playa from every angle",
        emoji="🚗",
        requirements=ArchetypeRequirements(
            stats={"karma": StatRange(min=75)},
            achievements=("art-car-rider",),
        ),
        quote="\"The journey is the destination, especially when you're on fire!\"",
        color="#FF9800",
    ),
    Archetype(
        id="light-walker",
        name="Light Walker",
        description="Illuminated the darkness, bringing beauty to the night",
        emoji="💡",
        requirements=ArchetypeRequirements(
            stats={"light_battery": StatRange(min=80)},
            items=(("Light Bulb", 10),),
        ),
        quote="\"In darkness, we find our light... and share it with the world.\"",
        color="#FFEB3B",
    ),
    Archetype(
        id="craft-master",
        name="Craft Master",
        description="Mastered the art of creation, building wonders from playa dust",
        emoji="🔨",
        requirements=ArchetypeRequirements(
            items=(("Totem", 1), ("Cape", 1), ("Costume", 1)),
        ),
        quote="\"From dust we came, to dust we return... but in between, we build miracles!\"",
        color="#795548",
    ),
    Archetype(
        id="spiritual-seeker",
        name="Spiritual Seeker",
        description="Found enlightenment through meditation, connection, and inner peace",
        emoji="🧘",
        requirements=ArchetypeRequirements(
            stats={"mood": StatRange(min=95), "karma": StatRange(min=150)},
            hours=StatRange(min=6),
        ),
        quote="\"The temple burns, but the spirit remains eternal.\"",
        color="#607D8B",
    ),
    Archetype(
        id="survivalist",
        name="Desert Survivalist",
        description="Thrived in the harsh conditions, mastering the art of playa living",
        emoji="🏜️",
        requirements=ArchetypeRequirements(
            stats={
                "energy": StatRange(min=70),
                "mood": StatRange(min=70),
                "karma": StatRange(min=50),
            },
            hours=StatRange(min=8),
        ),
        quote="\"The playa provides... but only to those who respect her power.\"",
        color="#8D6E63",
    ),
    Archetype(
        id="legendary-burner",
        name="Legendary Burner",
        description="Achieved true mastery of the Burning Man experience",
        emoji="🔥",
        requirements=ArchetypeRequirements(
            stats={
                "mood": StatRange(min=90),
                "energy": StatRange(min=90),
                "karma": StatRange(min=200),
                "coins": StatRange(min=100),
            },
            achievements=("moop-collector", "art-car-rider", "not-a-darkwad"),
            hours=StatRange(min=10),
        ),
        quote="\"I am the playa, and the playa is me. We are one.\"",
        color="#E91E63",
    ),
)
