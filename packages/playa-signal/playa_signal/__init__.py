"""playa-signal - In-process event bus for the playa engine."""
from __future__ import annotations

from playa_signal.bus import Handler, SignalBus
from playa_signal.systems import make_signal_system

__all__ = ["Handler", "SignalBus", "make_signal_system"]
