from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class Variant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notification:
    """A toast-style message shown to the dashboard user."""

    title: str
    description: str = ""
    variant: Variant = Variant.DEFAULT


class Notifier:
    def notify(self, title: str, description: str = "", variant: Variant = Variant.DEFAULT) -> Notification:
        notification = Notification(title=title, description=description, variant=variant)
        self.deliver(notification)
        return notification

    def deliver(self, notification: Notification) -> None:
        raise NotImplementedError


class LoggingNotifier(Notifier):
    """Default notifier when no UI is attached: notifications go to the log."""

    def deliver(self, notification: Notification) -> None:
        level = logging.WARNING if notification.variant == Variant.DESTRUCTIVE else logging.INFO
        logger.log(level, "%s: %s", notification.title, notification.description)
