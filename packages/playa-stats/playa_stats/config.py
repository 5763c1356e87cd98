"""Decay rate configuration."""
from __future__ import annotations

import dataclasses
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping


@dataclass(frozen=True)
class DecayConfig:
    """Immutable rate constants for per-frame stat drift.

    All rates are magnitudes; the functions in :mod:`playa_stats.effects`
    decide the sign.

    Attributes:
        energy_decay_per_pixel: Energy spent per pixel moved.
        mood_decay_per_second: Constant mood erosion.
        mood_decay_from_low_energy: Extra mood erosion while energy is low.
            Only applied by callers that opt into the low-energy penalty.
        low_energy_threshold: Energy below this counts as low.
        thirst_decay_per_second: Thirst gained per second.
        hunger_decay_per_second: Hunger gained per second.
        karma_decay_per_second: Speed at which karma returns to neutral.
        bathroom_decay_per_second: Bathroom need gained per second.
    """

    energy_decay_per_pixel: float = 0.01
    mood_decay_per_second: float = 0.1
    mood_decay_from_low_energy: float = 0.2
    low_energy_threshold: float = 30.0
    thirst_decay_per_second: float = 0.75
    hunger_decay_per_second: float = 0.5
    karma_decay_per_second: float = 0.01
    bathroom_decay_per_second: float = 0.3

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"{f.name} must be >= 0, got {value}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DecayConfig:
        """Build a config from a complete record.

        Every rate must be present; there is no merging with the defaults.
        """
        names = [f.name for f in dataclasses.fields(cls)]
        missing = [n for n in names if n not in data]
        if missing:
            raise ValueError(f"missing decay rates: {', '.join(missing)}")
        unknown = sorted(set(data) - set(names))
        if unknown:
            raise ValueError(f"unknown decay rates: {', '.join(unknown)}")
        return cls(**{n: float(data[n]) for n in names})

    def as_dict(self) -> dict[str, float]:
        return dataclasses.asdict(self)


DEFAULT_DECAY_CONFIG = DecayConfig()


def load_decay_config(path: str | Path) -> DecayConfig:
    """Read a ``[decay]`` table from a TOML file."""
    with open(path, "rb") as f:
        data = tomllib.load(f)
    if "decay" not in data:
        raise ValueError(f"{path}: no [decay] table")
    return DecayConfig.from_dict(data["decay"])
