"""playa - A small frame-stepped engine for the playa player simulation."""

from playa.clock import FrameClock
from playa.engine import Engine
from playa.types import DeadEntityError, EntityId, FrameContext, System
from playa.world import World

__all__ = [
    "Engine",
    "World",
    "FrameClock",
    "FrameContext",
    "EntityId",
    "System",
    "DeadEntityError",
]
