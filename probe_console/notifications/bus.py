# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""In-process notification bus with auto-expiring entries."""

import asyncio
import logging
import threading
import time
import uuid
from collections.abc import Callable

from probe_console.core.constants import DEFAULT_NOTIFICATION_TTL
from probe_console.core.models import Notification, Severity

logger = logging.getLogger(__name__)

NotificationHandler = Callable[[Notification], None]


class NotificationBus:
    """Fan-out of ephemeral alerts to any number of subscribers.

    Each published notification receives an expiry deadline ``ttl`` seconds
    after creation. Expired entries are pruned whenever the active set is read
    and, if an asyncio loop is running at publish time, removed by a timer
    scheduled on that loop.
    """

    def __init__(
        self,
        ttl: float = DEFAULT_NOTIFICATION_TTL,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the bus.

        Args:
            ttl: Seconds a notification stays active. ``0`` or less disables expiry.
            clock: Source of epoch seconds, injectable for tests.
        """
        self.ttl = ttl
        self._clock = clock
        self._lock = threading.RLock()
        self._active: list[Notification] = []
        self._subscribers: dict[str, NotificationHandler] = {}

    def subscribe(self, handler: NotificationHandler) -> str:
        token = str(uuid.uuid4())
        with self._lock:
            self._subscribers[token] = handler
        return token

    def unsubscribe(self, token: str) -> None:
        with self._lock:
            self._subscribers.pop(token, None)

    def publish(self, notification: Notification) -> Notification:
        """Activate a notification and deliver it to subscribers.

        Args:
            notification: The alert to publish. Missing ``id``, ``created_at``
                and ``expires_at`` fields are assigned here.

        Returns:
            The published notification with all fields populated.
        """
        now = self._clock()
        if not notification.id:
            notification.id = str(uuid.uuid4())
        if notification.created_at is None:
            notification.created_at = now
        if notification.expires_at is None and self.ttl > 0:
            notification.expires_at = notification.created_at + self.ttl

        with self._lock:
            self._prune(now)
            self._active.append(notification)
            handlers = list(self._subscribers.values())

        logger.debug(
            f"Notification [{notification.severity.value}] {notification.title}: "
            f"{notification.message}"
        )
        self._schedule_expiry(notification)

        for handler in handlers:
            try:
                handler(notification)
            except Exception as e:
                logger.error(f"Notification subscriber failed on '{notification.title}': {e}")
        return notification

    def notify(self, severity: Severity, title: str, message: str) -> Notification:
        """Convenience wrapper building and publishing a notification."""
        return self.publish(Notification(severity=severity, title=title, message=message))

    def dismiss(self, notification_id: str) -> bool:
        """Remove a notification before it expires.

        Returns:
            True if the notification was active and has been removed.
        """
        with self._lock:
            for index, notification in enumerate(self._active):
                if notification.id == notification_id:
                    del self._active[index]
                    return True
        return False

    def clear(self) -> None:
        with self._lock:
            self._active.clear()

    @property
    def active(self) -> list[Notification]:
        """Currently active notifications, oldest first."""
        with self._lock:
            self._prune(self._clock())
            return list(self._active)

    def _prune(self, now: float) -> None:
        self._active = [n for n in self._active if not n.is_expired(now)]

    def _schedule_expiry(self, notification: Notification) -> None:
        if notification.expires_at is None:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop: expiry is handled lazily by ``active``
            return
        delay = max(notification.expires_at - self._clock(), 0.0)
        loop.call_later(delay, self.dismiss, notification.id)
