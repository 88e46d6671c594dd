"""Synchronous publish/subscribe for board notifications."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable

from tileboard.models.events import BoardEvent

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]


class EventBus:
    """Delivers events to handlers in subscription order.

    Handlers run on the publisher's call stack.  An exception raised by a
    handler propagates to whoever published the event.
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[Handler]] = defaultdict(list)
        self._wildcard: list[Handler] = []

    # -- subscription ---------------------------------------------------------

    def subscribe(self, event_type: type, handler: Handler) -> Callable[[], None]:
        """Call *handler* for every published *event_type*.

        Returns a function that removes the subscription again.
        """
        self._handlers[event_type].append(handler)
        return lambda: self._remove(self._handlers[event_type], handler)

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        """Call *handler* for every event regardless of type."""
        self._wildcard.append(handler)
        return lambda: self._remove(self._wildcard, handler)

    @staticmethod
    def _remove(handlers: list[Handler], handler: Handler) -> None:
        if handler in handlers:
            handlers.remove(handler)

    # -- delivery -------------------------------------------------------------

    def publish(self, event: BoardEvent) -> None:
        handlers = [*self._handlers.get(type(event), ()), *self._wildcard]
        logger.debug("publish %s to %d handler(s)", event, len(handlers))
        for handler in handlers:
            handler(event)
