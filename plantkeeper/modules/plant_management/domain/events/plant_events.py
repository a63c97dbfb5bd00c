# 📄 File: plantkeeper/modules/plant_management/domain/events/plant_events.py
# 🧭 Purpose (Layman Explanation):
# Defines what gets reported when a plant is watered or grows, so the caller can show
# the message on screen, log it, or ignore it.
# 🧪 Purpose (Technical Summary):
# Plant domain events carrying the state change and a localized human-readable notice,
# returned by Plant.water() and Plant.grow() instead of writing to the console.
# 🔗 Dependencies:
# datetime, typing, plantkeeper.shared.events.base, localization and formatting utilities
# 🔄 Connected Modules / Calls From:
# Plant domain model, plant event handlers, EventPublisher

from datetime import datetime
from typing import Optional

from plantkeeper.shared.events.base import PlantEvent
from plantkeeper.shared.utils.formatters import format_plant_number, format_watering_time
from plantkeeper.shared.utils.localization import translate


class PlantWatered(PlantEvent):
    """
    Event fired when a plant is watered.

    Data:
    - plant_name: name of the watered plant
    - watered_at: watering timestamp
    - formatted_time: watering time as dd.MM.yyyy HH:mm
    - message: localized watering notice
    """
    EVENT_TYPE = "plant.watered"

    def __init__(self, plant_name: str, watered_at: datetime, locale: Optional[str] = None, **kwargs):
        formatted_time = format_watering_time(watered_at, locale)
        super().__init__(
            self.EVENT_TYPE,
            plant_name,
            data={
                'watered_at': watered_at,
                'formatted_time': formatted_time,
                'message': translate('plants.watered', locale, name=plant_name, time=formatted_time),
            },
            **kwargs
        )

    def _validate_event_data(self):
        super()._validate_event_data()
        if not isinstance(self.data.get('watered_at'), datetime):
            raise ValueError("Watering events must contain watered_at")

    @property
    def watered_at(self) -> datetime:
        return self.data['watered_at']

    @property
    def formatted_time(self) -> str:
        return self.data['formatted_time']

    @property
    def message(self) -> str:
        return self.data['message']


class PlantGrew(PlantEvent):
    """
    Event fired when a plant grows.

    Data:
    - plant_name: name of the plant
    - amount: growth in meters
    - previous_height / new_height: height before and after, in meters
    - message: localized growth notice
    """
    EVENT_TYPE = "plant.grew"

    def __init__(
        self,
        plant_name: str,
        amount: float,
        previous_height: float,
        new_height: float,
        locale: Optional[str] = None,
        **kwargs
    ):
        super().__init__(
            self.EVENT_TYPE,
            plant_name,
            data={
                'amount': amount,
                'previous_height': previous_height,
                'new_height': new_height,
                'message': translate(
                    'plants.grew',
                    locale,
                    name=plant_name,
                    amount=format_plant_number(amount),
                    height=format_plant_number(new_height),
                ),
            },
            **kwargs
        )

    def _validate_event_data(self):
        super()._validate_event_data()
        if self.data['new_height'] <= self.data['previous_height']:
            raise ValueError("Growth events must increase the height")

    @property
    def amount(self) -> float:
        return self.data['amount']

    @property
    def previous_height(self) -> float:
        return self.data['previous_height']

    @property
    def new_height(self) -> float:
        return self.data['new_height']

    @property
    def message(self) -> str:
        return self.data['message']
