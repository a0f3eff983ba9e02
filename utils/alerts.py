"""
Synchronous alert notification registry.
Fans stock alerts out to every registered listener.
"""

import logging
import threading
import uuid
from collections.abc import Callable
from typing import Protocol, runtime_checkable

logger_alerts = logging.getLogger(__name__)


@runtime_checkable
class AlertListener(Protocol):
    """Anything that can receive an alert message, e.g. an SMS or email service."""

    def on_alert(self, message: str) -> None: ...


AlertCallback = Callable[[str], None]


class AlertNotifier:
    """
    Observer registry mapping subscription id to callback.

    Listeners are invoked synchronously in registration order. Delivery is
    fire-and-forget: a failing listener is logged and skipped, and nothing
    is retried or deduplicated.
    """

    def __init__(self):
        self.subscribers: dict[str, AlertCallback] = {}
        self._lock = threading.Lock()

    def subscribe(self, listener: AlertCallback | AlertListener) -> str:
        """Register a callable or an object with on_alert(); return its subscription id."""
        if isinstance(listener, AlertListener):
            callback = listener.on_alert
        elif callable(listener):
            callback = listener
        else:
            raise TypeError("Listener must be callable or provide on_alert(message).")

        subscription_id = str(uuid.uuid4())
        with self._lock:
            self.subscribers[subscription_id] = callback
        logger_alerts.debug(f"Alert listener {_name_of(callback)} subscribed as {subscription_id}")
        return subscription_id

    def unsubscribe(self, subscription_id: str) -> bool:
        """Remove a subscription. Returns False if the id was not registered."""
        with self._lock:
            callback = self.subscribers.pop(subscription_id, None)
        if callback is None:
            logger_alerts.warning(f"Alert subscription {subscription_id} not found")
            return False
        logger_alerts.debug(f"Alert listener {_name_of(callback)} unsubscribed")
        return True

    def publish(self, message: str) -> None:
        """Deliver a message to every listener, in registration order."""
        with self._lock:
            callbacks = list(self.subscribers.values())

        logger_alerts.info(f"Alert published to {len(callbacks)} listener(s): {message}")
        for callback in callbacks:
            try:
                callback(message)
            except Exception as e:
                logger_alerts.error(
                    f"Error in alert listener '{_name_of(callback)}': {e}",
                    exc_info=False,
                )

    def __len__(self) -> int:
        return len(self.subscribers)


def _name_of(callback: AlertCallback) -> str:
    return getattr(callback, "__qualname__", None) or type(callback).__name__
