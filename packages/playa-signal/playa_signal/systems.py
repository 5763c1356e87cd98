"""System factory for signal dispatch."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from playa_signal.bus import SignalBus

if TYPE_CHECKING:
    from playa import FrameContext, World


def make_signal_system(bus: SignalBus) -> Callable[[World, FrameContext], None]:
    """Return a system that delivers every queued signal once per frame.

    Register it last so signals published by earlier systems reach their
    handlers within the same frame.
    """

    def signal_system(world: World, ctx: FrameContext) -> None:
        bus.flush()

    return signal_system
