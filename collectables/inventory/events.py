"""Observer registry for ledger notifications."""

import logging
from enum import Enum, auto
from typing import Any, Callable, Dict, Hashable

logger = logging.getLogger(__name__)

Callback = Callable[[Any], None]


class LedgerEvent(Enum):
    """Notifications an inventory ledger emits."""
    ITEM_ADDED = auto()      # payload: Stack after the add
    ITEM_REMOVED = auto()    # payload: Stack after the decrement
    ACTIVE_CHANGED = auto()  # payload: newly active Stack


class NotificationChannel:
    """
    Maps each event to the subscribers listening for it.

    Subscribers are identified by any hashable key (usually the observer
    object itself) so they can unsubscribe without holding on to the bound
    method they registered. Delivery is synchronous and in subscription order.
    """

    def __init__(self):
        self._subscribers: Dict[LedgerEvent, Dict[Hashable, Callback]] = {
            event: {} for event in LedgerEvent
        }

    def subscribe(self, event: LedgerEvent, subscriber: Hashable, callback: Callback) -> None:
        """
        Register ``callback`` for ``event`` under ``subscriber``.

        Subscribing an already registered key replaces its callback and keeps
        its place in the delivery order.
        """
        self._subscribers[event][subscriber] = callback

    def unsubscribe(self, event: LedgerEvent, subscriber: Hashable) -> bool:
        """Remove one subscription. Returns True if it existed."""
        return self._subscribers[event].pop(subscriber, None) is not None

    def unsubscribe_all(self, subscriber: Hashable) -> int:
        """Remove every subscription held by ``subscriber``. Returns how many were removed."""
        return sum(self.unsubscribe(event, subscriber) for event in LedgerEvent)

    def subscriber_count(self, event: LedgerEvent) -> int:
        return len(self._subscribers[event])

    def emit(self, event: LedgerEvent, payload: Any) -> None:
        """
        Deliver ``payload`` to every subscriber of ``event``.

        Exceptions raised by a callback propagate to the caller. Subscribers
        may subscribe or unsubscribe from inside a callback; the change takes
        effect from the next emit.
        """
        logger.debug("Emitting %s to %d subscriber(s)", event.name, len(self._subscribers[event]))
        for callback in list(self._subscribers[event].values()):
            callback(payload)
