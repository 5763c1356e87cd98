"""playa-notify - Notification records and sinks."""
from __future__ import annotations

from playa_notify.sinks import (
    NotificationLog,
    NotificationSink,
    NullSink,
    SignalNotificationSink,
)
from playa_notify.types import Notification, Position

__all__ = [
    "Notification",
    "NotificationLog",
    "NotificationSink",
    "NullSink",
    "Position",
    "SignalNotificationSink",
]
