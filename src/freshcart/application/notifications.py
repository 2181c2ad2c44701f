"""User-facing notifications emitted by the cart store and checkout.

The store only decides *what* to say; a Notifier decides where it goes
(log file, terminal, test recorder).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT = "default"
DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notification:
    title: str
    description: str = ""
    variant: str = DEFAULT


class Notifier(ABC):

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Deliver a notification to the user."""


class LoggingNotifier(Notifier):

    def notify(self, notification: Notification) -> None:
        level = logging.WARNING if notification.variant == DESTRUCTIVE else logging.INFO
        if notification.description:
            logger.log(level, "%s: %s", notification.title, notification.description)
        else:
            logger.log(level, "%s", notification.title)
