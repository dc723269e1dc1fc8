"""
Transient user notifications

The stores report what happened through a ``Notifier``; a UI would render
these as toasts. ``LoggingNotifier`` is the default.
"""

import logging
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: str = "default"  # or "destructive"


class Notifier(Protocol):
    def notify(self, notification: Notification) -> None:
        ...


class LoggingNotifier:
    """Writes notifications to the log"""

    def __init__(self, logger: logging.Logger = None):
        self._logger = logger or logging.getLogger(self.__class__.__name__)

    def notify(self, notification: Notification) -> None:
        level = logging.WARNING if notification.variant == "destructive" else logging.INFO
        self._logger.log(level, "%s: %s", notification.title, notification.description)
