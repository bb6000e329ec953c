"""
Notifier implementations and alert message formatting.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import Iterable, Optional, TextIO, Tuple

from ..models import AlertEvent


logger = logging.getLogger(__name__)


def format_alert(event: AlertEvent) -> Tuple[str, str]:
    """
    Render an alert event as a notification (title, body) pair.

    Returns:
        Tuple of (title, body)
    """
    title = f"تغییر قیمت {event.label}"
    body = f"قیمت {event.label} بیش از {event.display_percent}٪ تغییر کرد."
    return title, body


class Notifier(ABC):
    """Delivers a single local notification."""

    @abstractmethod
    def notify(self, title: str, body: str) -> None:
        """Show a notification with the given title and body."""


class LoggingNotifier(Notifier):
    """Writes notifications to the application log."""

    def notify(self, title: str, body: str) -> None:
        logger.info(f"🔔 {title}: {body}")


class ConsoleNotifier(Notifier):
    """Prints notifications to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def notify(self, title: str, body: str) -> None:
        print(f"🔔 {title}", file=self.stream)
        print(f"   {body}", file=self.stream)


def dispatch_alerts(notifier: Notifier, events: Iterable[AlertEvent]) -> int:
    """
    Send one notification per alert event.

    A failing notification is logged and does not stop the remaining ones.

    Returns:
        Number of notifications delivered
    """
    delivered = 0
    for event in events:
        title, body = format_alert(event)
        try:
            notifier.notify(title, body)
            delivered += 1
        except Exception as e:
            logger.error(f"Failed to deliver alert for {event.asset.value}: {e}")
    return delivered
