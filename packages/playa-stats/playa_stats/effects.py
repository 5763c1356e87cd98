"""Per-frame stat effects.

Every function here is pure: it reads only its arguments and returns the
additive change for one stat. Callers add the result to their snapshot and
own clamping (see :mod:`playa_stats.apply`). Inputs are not validated; a
negative ``delta_time`` or an out-of-range stat simply produces the
corresponding arithmetic result.
"""
from __future__ import annotations

from playa_stats.config import DecayConfig
from playa_stats.types import PlayerStats, StatDelta

# Per-second rate at which mood closes the gap to well-being.
MOOD_CONVERGENCE_RATE = 2.0


def movement_energy_decay(distance_moved: float, config: DecayConfig) -> float:
    """Energy spent walking ``distance_moved`` pixels."""
    return -(distance_moved * config.energy_decay_per_pixel)


def well_being(energy: float, thirst: float, hunger: float) -> float:
    """Mean of energy and the inverted thirst and hunger accumulators."""
    return (energy + (100 - thirst) + (100 - hunger)) / 3


def mood_decay(
    delta_time: float,
    energy: float,
    thirst: float,
    hunger: float,
    mood: float,
    config: DecayConfig,
) -> float:
    """Mood change: relax toward well-being, plus a constant erosion.

    At equilibrium (mood equal to well-being) only the erosion term
    ``-delta_time * mood_decay_per_second`` remains.
    """
    toward = (well_being(energy, thirst, hunger) - mood) * MOOD_CONVERGENCE_RATE * delta_time
    base = -(delta_time * config.mood_decay_per_second)
    return toward + base


def thirst_decay(delta_time: float, config: DecayConfig) -> float:
    return delta_time * config.thirst_decay_per_second


def hunger_decay(delta_time: float, config: DecayConfig) -> float:
    return delta_time * config.hunger_decay_per_second


def bathroom_decay(delta_time: float, config: DecayConfig) -> float:
    return delta_time * config.bathroom_decay_per_second


def karma_decay(delta_time: float, karma: float, config: DecayConfig) -> float:
    """Pull karma toward neutral.

    The step never exceeds ``abs(karma)``, so a long frame lands on zero
    instead of flipping the sign.
    """
    if karma == 0:
        return 0.0
    step = min(delta_time * config.karma_decay_per_second, abs(karma))
    return -step if karma > 0 else step


def low_energy_mood_penalty(
    delta_time: float, energy: float, config: DecayConfig
) -> float:
    """Extra mood loss while energy is below ``low_energy_threshold``.

    Not part of :func:`compute_frame_effects`; hosts that want the penalty
    add it to the mood delta themselves.
    """
    if energy >= config.low_energy_threshold:
        return 0.0
    return -(delta_time * config.mood_decay_from_low_energy)


def compute_frame_effects(
    distance_moved: float,
    delta_time: float,
    stats: PlayerStats,
    config: DecayConfig,
) -> StatDelta:
    """All natural stat changes for one frame."""
    return StatDelta(
        energy=movement_energy_decay(distance_moved, config),
        mood=mood_decay(
            delta_time, stats.energy, stats.thirst, stats.hunger, stats.mood, config
        ),
        thirst=thirst_decay(delta_time, config),
        hunger=hunger_decay(delta_time, config),
        karma=karma_decay(delta_time, stats.karma, config),
        bathroom=bathroom_decay(delta_time, config),
    )
