"""Transient user notifications."""

from probe_console.notifications.bus import NotificationBus, NotificationHandler

__all__ = ["NotificationBus", "NotificationHandler"]
