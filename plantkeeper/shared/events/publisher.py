# 📄 File: plantkeeper/shared/events/publisher.py

# 🧭 Purpose (Layman Explanation):
# Passes plant events (watered, grew) on to whoever is interested,
# for example the console that prints "Oak was watered".

# 🧪 Purpose (Technical Summary):
# Synchronous in-process event publisher with per-type and catch-all subscriptions.
# Handlers run in subscription order on the caller's thread; failures are logged and re-raised.

# 🔗 Dependencies:
# - typing: Type annotations
# - plantkeeper.shared.utils.logging: structured logging

# 🔄 Connected Modules / Calls From:
# Used by: plant event handlers wiring (create_plant_event_publisher), application code

from collections import defaultdict
from typing import Callable, Dict, List, Optional

from plantkeeper.shared.events.base import DomainEvent
from plantkeeper.shared.utils.logging import get_logger

logger = get_logger(__name__)

EventHandler = Callable[[DomainEvent], None]

# Subscription key matching every event type
ALL_EVENTS = "*"


class EventPublisher:
    """
    Publishes domain events to subscribed handlers.

    Handlers are called synchronously in the order they subscribed,
    type-specific ones before catch-all ones.
    """

    def __init__(self):
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._published_count = 0

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        """
        Register a handler for an event type.

        Args:
            event_type: Event type to listen to, or ALL_EVENTS
            handler: Callable receiving the event
        """
        if handler not in self._handlers[event_type]:
            self._handlers[event_type].append(handler)
            logger.debug(f"Handler {getattr(handler, '__name__', handler)!s} subscribed to {event_type}")

    def subscribe_all(self, handler: EventHandler) -> None:
        """Register a handler for every event type."""
        self.subscribe(ALL_EVENTS, handler)

    def unsubscribe(self, event_type: str, handler: EventHandler) -> bool:
        """
        Remove a handler.

        Returns:
            True if the handler was subscribed
        """
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def get_handlers(self, event_type: str) -> List[EventHandler]:
        """Handlers that would receive an event of the given type."""
        handlers = list(self._handlers.get(event_type, []))
        if event_type != ALL_EVENTS:
            handlers.extend(self._handlers.get(ALL_EVENTS, []))
        return handlers

    def publish(self, event: Optional[DomainEvent]) -> int:
        """
        Deliver an event to its handlers.

        Args:
            event: Event to publish; None is ignored

        Returns:
            Number of handlers invoked
        """
        if event is None:
            return 0

        handlers = self.get_handlers(event.event_type)
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    f"Event handler failed for {event}: {e}",
                    extra={'event_type': event.event_type, 'event_id': event.metadata.event_id},
                    exc_info=True
                )
                raise

        self._published_count += 1
        return len(handlers)

    @property
    def published_count(self) -> int:
        return self._published_count
