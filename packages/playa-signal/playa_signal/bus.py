"""In-memory pub/sub bus with per-frame flush semantics."""
from __future__ import annotations

from typing import Any, Callable

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queues published signals until :meth:`flush` delivers them.

    Handlers receive ``(signal_name, data)`` in subscription order. Signals
    published by a handler during a flush are delivered on the next flush.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, [])):
                handler(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()
