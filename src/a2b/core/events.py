#!/usr/bin/env python3
"""
Change Notifications

Synchronous in-process publish/subscribe used to tell views that the record
store changed so they can recompute their derived data.
"""

import logging
from collections import defaultdict
from collections.abc import Callable
from threading import Lock
from typing import Any

logger = logging.getLogger(__name__)

SERVICES_UPDATED = "servicesUpdated"
SALES_UPDATED = "salesUpdated"

Callback = Callable[..., None]


class ChangeNotifier:
    """
    Topic-based callback registry.

    Callbacks run on the publishing thread, in subscription order.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._subscribers: dict[str, list[Callback]] = defaultdict(list)

    def subscribe(self, topic: str, callback: Callback) -> Callable[[], None]:
        """
        Register a callback for a topic.

        Returns:
            Function that removes this subscription (safe to call twice)
        """
        with self._lock:
            self._subscribers[topic].append(callback)

        def unsubscribe() -> None:
            with self._lock:
                callbacks = self._subscribers.get(topic, [])
                if callback in callbacks:
                    callbacks.remove(callback)

        return unsubscribe

    def publish(self, topic: str, **payload: Any) -> int:
        """
        Invoke every callback subscribed to a topic.

        Returns:
            Number of callbacks invoked
        """
        with self._lock:
            callbacks = list(self._subscribers.get(topic, []))

        for callback in callbacks:
            try:
                callback(**payload)
            except Exception:
                logger.exception("Subscriber for %s failed", topic)
                raise
        logger.debug("Published %s to %d subscriber(s)", topic, len(callbacks))
        return len(callbacks)

    def subscriber_count(self, topic: str) -> int:
        with self._lock:
            return len(self._subscribers.get(topic, []))

    def clear(self) -> None:
        """Drop all subscriptions."""
        with self._lock:
            self._subscribers.clear()
