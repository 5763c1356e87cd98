"""Notification record and world position."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Position:
    """World position in pixels. Also used as an entity component."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Notification:
    """A human-readable event for the notification pipeline.

    Attributes:
        message: Text shown to the player.
        category: Display category (e.g. "craft", "warning").
        duration_ms: How long the UI should keep it on screen; 0 leaves it
            to the host.
        position: World position the notification is anchored to.
    """

    message: str
    category: str
    duration_ms: int
    position: Position
