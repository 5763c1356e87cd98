"""Notification sinks.

The simulation never talks to a UI directly. It is handed an object with a
single ``notify(notification)`` method; the host decides where the
notification ends up.
"""
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from playa_notify.types import Notification

if TYPE_CHECKING:
    from playa_signal import SignalBus


@runtime_checkable
class NotificationSink(Protocol):
    def notify(self, notification: Notification) -> None: ...


class NullSink:
    """Drops every notification."""

    def notify(self, notification: Notification) -> None:
        return None


class NotificationLog:
    """In-memory sink keeping the most recent notifications.

    ``max_entries`` of 0 keeps everything.
    """

    def __init__(self, max_entries: int = 0) -> None:
        maxlen = max_entries if max_entries > 0 else None
        self._entries: deque[Notification] = deque(maxlen=maxlen)

    def notify(self, notification: Notification) -> None:
        self._entries.append(notification)

    def query(self, category: str | None = None) -> list[Notification]:
        result = list(self._entries)
        if category is not None:
            result = [n for n in result if n.category == category]
        return result

    def last(self, category: str | None = None) -> Notification | None:
        for n in reversed(self._entries):
            if category is None or n.category == category:
                return n
        return None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class SignalNotificationSink:
    """Forwards notifications onto a SignalBus.

    Handlers subscribed to ``signal_name`` receive ``message``, ``category``,
    ``duration_ms``, ``x`` and ``y`` once the bus is flushed.
    """

    def __init__(self, bus: SignalBus, signal_name: str = "notification") -> None:
        self._bus = bus
        self._signal_name = signal_name

    @property
    def signal_name(self) -> str:
        return self._signal_name

    def notify(self, notification: Notification) -> None:
        self._bus.publish(
            self._signal_name,
            message=notification.message,
            category=notification.category,
            duration_ms=notification.duration_ms,
            x=notification.position.x,
            y=notification.position.y,
        )
