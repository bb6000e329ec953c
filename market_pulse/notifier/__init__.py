"""
Notification module for delivering price alerts.
"""

from .notifier import (
    Notifier,
    LoggingNotifier,
    ConsoleNotifier,
    format_alert,
    dispatch_alerts,
)

__all__ = ["Notifier", "LoggingNotifier", "ConsoleNotifier", "format_alert", "dispatch_alerts"]
