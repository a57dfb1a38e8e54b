# src/services/cart_events.py

"""In-process cart change notifications.

Views subscribe when mounted and unsubscribe when dismissed so a
notification never reaches a screen that is gone.
"""

import logging
from collections.abc import Callable

from src.config.settings import Settings

logger = logging.getLogger("storefront.events")

CartListener = Callable[[], None]


class Subscription:
    """Handle returned by :meth:`CartEvents.subscribe`."""

    def __init__(self, events: "CartEvents", listener: CartListener) -> None:
        self._events = events
        self._listener = listener
        self.active = True

    def unsubscribe(self) -> None:
        """Stop receiving notifications. Safe to call twice."""
        if self.active:
            self._events._remove(self._listener)
            self.active = False


class CartEvents:
    """Observable subject for the named "cart changed" event."""

    def __init__(self, name: str = Settings.CART_CHANGED_EVENT) -> None:
        self.name = name
        self._listeners: list[CartListener] = []

    def subscribe(self, listener: CartListener) -> Subscription:
        """Register *listener*; it is called with no arguments."""
        self._listeners.append(listener)
        logger.debug(
            "Subscribed to '%s' (%d listeners)",
            self.name,
            len(self._listeners),
        )
        return Subscription(self, listener)

    def _remove(self, listener: CartListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            return
        logger.debug(
            "Unsubscribed from '%s' (%d listeners)",
            self.name,
            len(self._listeners),
        )

    @property
    def listener_count(self) -> int:
        """Number of live subscriptions."""
        return len(self._listeners)

    def emit(self) -> None:
        """Notify every current listener.

        A failing listener is logged and does not stop delivery to the
        others.
        """
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.error(
                    "Listener for '%s' raised",
                    self.name,
                    exc_info=True,
                )
