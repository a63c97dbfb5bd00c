# 📄 File: plantkeeper/shared/events/__init__.py

# 🧭 Purpose (Layman Explanation):
# Sets up the event system that lets the app react when something happens to a plant,
# like printing a notice when it is watered.

# 🧪 Purpose (Technical Summary):
# Domain events package: base event classes and the synchronous publisher.

from .base import DomainEvent, EventMetadata, PlantEvent
from .publisher import ALL_EVENTS, EventHandler, EventPublisher

__all__ = [
    "DomainEvent",
    "EventMetadata",
    "PlantEvent",
    "ALL_EVENTS",
    "EventHandler",
    "EventPublisher",
]
