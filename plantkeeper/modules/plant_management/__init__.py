# 📄 File: plantkeeper/modules/plant_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# The plant module: everything about a single plant, what it is and what can happen to it.
# 🧪 Purpose (Technical Summary):
# Public surface of the plant management module (entity, enums, events, handlers).

"""
Plant Management Module

- Plant: validated plant entity
- PlantType / AgeCategory: closed enumerations
- PlantWatered / PlantGrew: events returned by Plant.water() and Plant.grow()
- create_plant_event_publisher: publisher wired with console and log handlers
"""

from .domain.events import (
    PlantGrew,
    PlantWatered,
    create_plant_event_publisher,
    log_plant_event,
    print_plant_notice,
)
from .domain.models import AgeCategory, Plant, PlantType

__all__ = [
    "Plant",
    "PlantType",
    "AgeCategory",
    "PlantWatered",
    "PlantGrew",
    "create_plant_event_publisher",
    "log_plant_event",
    "print_plant_notice",
]
