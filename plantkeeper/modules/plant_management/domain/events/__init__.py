# 📄 File: plantkeeper/modules/plant_management/domain/events/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the events that happen to a plant (watered, grew) so other parts of the app can react.
# 🧪 Purpose (Technical Summary):
# Package initialization for plant domain events and their handlers.

from .plant_events import PlantGrew, PlantWatered
from .handlers import create_plant_event_publisher, log_plant_event, print_plant_notice

__all__ = [
    "PlantWatered",
    "PlantGrew",
    "create_plant_event_publisher",
    "log_plant_event",
    "print_plant_notice",
]
