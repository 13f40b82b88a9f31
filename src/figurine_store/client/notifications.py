"""Publish/subscribe channel for user-facing notifications."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal
from uuid import uuid4

NotificationType = Literal["success", "error", "info", "warning"]

DEFAULT_DURATION_MS = 3000


@dataclass(frozen=True)
class Notification:
    """A single toast-style message.

    A ``duration_ms`` of 0 means the notification is not dismissed
    automatically.
    """

    id: str
    message: str
    type: NotificationType
    duration_ms: int


Listener = Callable[[Notification], None]


@dataclass
class NotificationBus:
    """Fans notifications out to subscribers until closed."""

    listeners: list[Listener] = field(default_factory=list)
    closed: bool = False

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it."""
        if self.closed:
            raise RuntimeError("Notification bus is closed")
        self.listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self.listeners:
                self.listeners.remove(listener)

        return unsubscribe

    def notify(
        self,
        message: str,
        type: NotificationType = "info",  # noqa: A002
        duration_ms: int = DEFAULT_DURATION_MS,
    ) -> str:
        """Publish a notification and return its id."""
        notification = Notification(
            id=uuid4().hex, message=message, type=type, duration_ms=duration_ms
        )
        if self.closed:
            return notification.id
        for listener in list(self.listeners):
            listener(notification)
        return notification.id

    def success(self, message: str, duration_ms: int = DEFAULT_DURATION_MS) -> str:
        return self.notify(message, "success", duration_ms)

    def error(self, message: str, duration_ms: int = DEFAULT_DURATION_MS) -> str:
        return self.notify(message, "error", duration_ms)

    def info(self, message: str, duration_ms: int = DEFAULT_DURATION_MS) -> str:
        return self.notify(message, "info", duration_ms)

    def warning(self, message: str, duration_ms: int = DEFAULT_DURATION_MS) -> str:
        return self.notify(message, "warning", duration_ms)

    def close(self) -> None:
        """Drop all listeners; later notifications are discarded."""
        self.listeners.clear()
        self.closed = True
