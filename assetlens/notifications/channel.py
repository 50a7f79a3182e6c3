import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone

NOTIFICATION_TYPES = frozenset({"success", "error", "info"})


@dataclass(frozen=True)
class Notification:
    """Status message for the presentation layer. The consumer dismisses it."""

    type: str
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


NotificationListener = Callable[[Notification], None]


class NotificationChannel:
    """Fan-out of ephemeral status messages.

    The channel keeps the most recent notification (the one a toast would
    show) plus an append-only log. It never expires anything itself.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._log: list[Notification] = []
        self._listeners: list[NotificationListener] = []

    def subscribe(self, listener: NotificationListener) -> None:
        self._listeners.append(listener)

    def emit(self, type: str, message: str) -> Notification:
        if type not in NOTIFICATION_TYPES:
            raise ValueError(f"Unknown notification type '{type}'")
        notification = Notification(type=type, message=message)
        with self._lock:
            self._log.append(notification)
        for listener in list(self._listeners):
            listener(notification)
        return notification

    def success(self, message: str) -> Notification:
        return self.emit("success", message)

    def error(self, message: str) -> Notification:
        return self.emit("error", message)

    def info(self, message: str) -> Notification:
        return self.emit("info", message)

    @property
    def latest(self) -> Notification | None:
        with self._lock:
            return self._log[-1] if self._log else None

    def history(self) -> list[Notification]:
        with self._lock:
            return list(self._log)
