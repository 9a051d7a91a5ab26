"""Transient user-facing notifications (toasts) raised by the controllers."""

import logging
from dataclasses import dataclass
from typing import Callable, Literal

logger = logging.getLogger(__name__)

NotificationVariant = Literal["default", "destructive"]


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: NotificationVariant = "default"

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


class Notifier:
    """
    Collects notifications in emission order and forwards each one to
    subscribed callbacks. Delivery to the screen is up to the subscriber.
    """

    def __init__(self):
        self.history: list[Notification] = []
        self._subscribers: list[Callable[[Notification], None]] = []

    def subscribe(self, callback: Callable[[Notification], None]) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[Notification], None]) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def notify(self, title: str, description: str, variant: NotificationVariant = "default") -> Notification:
        notification = Notification(title=title, description=description, variant=variant)
        self.history.append(notification)
        for callback in list(self._subscribers):
            try:
                callback(notification)
            except Exception:
                logger.exception("[Notifier] Subscriber failed for %r", title)
        return notification

    def error(self, title: str, description: str) -> Notification:
        return self.notify(title, description, "destructive")

    @property
    def last(self) -> Notification | None:
        return self.history[-1] if self.history else None

    def clear(self) -> None:
        self.history.clear()
