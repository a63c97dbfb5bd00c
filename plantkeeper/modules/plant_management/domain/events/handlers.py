# 📄 File: plantkeeper/modules/plant_management/domain/events/handlers.py
# 🧭 Purpose (Layman Explanation):
# Decides what happens after a plant is watered or grows: print the message for the
# user and write it to the log.
# 🧪 Purpose (Technical Summary):
# Event handlers for plant domain events plus a factory wiring them into an EventPublisher.
# 🔗 Dependencies:
# plantkeeper.shared.events, plantkeeper.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# Application code embedding the Plant entity (console apps, tests)

from plantkeeper.shared.events.base import PlantEvent
from plantkeeper.shared.events.publisher import EventPublisher
from plantkeeper.shared.utils.logging import get_logger

from .plant_events import PlantGrew, PlantWatered

logger = get_logger(__name__)


def print_plant_notice(event: PlantEvent) -> None:
    """Write the event's notice to standard output."""
    print(event.message)


def log_plant_event(event: PlantEvent) -> None:
    """Record a plant event in the application log."""
    logger.info(
        event.message,
        extra={
            'event_type': event.event_type,
            'event_id': event.metadata.event_id,
            'plant_name': event.plant_name,
        }
    )


def create_plant_event_publisher(console: bool = True) -> EventPublisher:
    """
    Build a publisher with the standard plant event handlers.

    Args:
        console: Also print notices to stdout

    Returns:
        Configured EventPublisher
    """
    publisher = EventPublisher()
    for event_type in (PlantWatered.EVENT_TYPE, PlantGrew.EVENT_TYPE):
        if console:
            publisher.subscribe(event_type, print_plant_notice)
        publisher.subscribe(event_type, log_plant_event)
    return publisher
