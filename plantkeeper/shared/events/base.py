# 📄 File: plantkeeper/shared/events/base.py

# 🧭 Purpose (Layman Explanation):
# Defines the basic building blocks for events - templates describing what information
# an event carries when something happens to a plant, like being watered.

# 🧪 Purpose (Technical Summary):
# Base event classes for domain events, providing structure for event data,
# metadata and serialization across Plant Keeper.

# 🔗 Dependencies:
# - uuid: Event unique identifiers
# - datetime: Event timestamps
# - dataclasses: Event metadata structure
# - typing: Type annotations
# - plantkeeper.shared.utils.logging: correlation id context

# 🔄 Connected Modules / Calls From:
# Used by: Plant domain events, event publisher, event handlers

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from plantkeeper.shared.utils.logging import correlation_id_var


@dataclass
class EventMetadata:
    """
    Metadata for domain events.

    Contains common information about event routing and tracking.
    """
    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = "1.0"
    source: str = "plantkeeper"
    correlation_id: Optional[str] = None

    # Routing metadata
    category: str = "general"
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert metadata to dictionary."""
        data = asdict(self)
        data['timestamp'] = self.timestamp.isoformat()
        return data


class DomainEvent(ABC):
    """
    Base class for all domain events.

    Provides common structure and functionality for events
    throughout Plant Keeper.
    """

    def __init__(
        self,
        event_type: str,
        data: Dict[str, Any],
        metadata: Optional[EventMetadata] = None,
        **kwargs
    ):
        """
        Initialize domain event.

        Args:
            event_type: Type identifier for the event
            data: Event payload data
            metadata: Event metadata
            **kwargs: Additional metadata fields
        """
        self.event_type = event_type
        self.data = data or {}

        if metadata is None:
            metadata = EventMetadata()

        for key, value in kwargs.items():
            if hasattr(metadata, key):
                setattr(metadata, key, value)

        # Inherit the correlation id of the surrounding log_context
        if metadata.correlation_id is None:
            metadata.correlation_id = correlation_id_var.get() or None

        self.metadata = metadata

        self._validate()

    def _validate(self):
        """Validate event structure and data."""
        if not self.event_type:
            raise ValueError("Event type is required")

        if not isinstance(self.data, dict):
            raise ValueError("Event data must be a dictionary")

        self._validate_event_data()

    @abstractmethod
    def _validate_event_data(self):
        """Validate event-specific data. Override in subclasses."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary representation."""
        return {
            'event_type': self.event_type,
            'data': self.data,
            'metadata': self.metadata.to_dict()
        }

    def to_json(self) -> str:
        """Convert event to JSON string."""
        return json.dumps(self.to_dict(), default=str, ensure_ascii=False)

    def add_tag(self, tag: str):
        """Add tag to event metadata."""
        if tag not in self.metadata.tags:
            self.metadata.tags.append(tag)

    def has_tag(self, tag: str) -> bool:
        """Check if event has specific tag."""
        return tag in self.metadata.tags

    def __str__(self) -> str:
        return f"{self.event_type}({self.metadata.event_id})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type='{self.event_type}', id='{self.metadata.event_id}')"


class PlantEvent(DomainEvent):
    """Base class for plant-related events."""

    def __init__(
        self,
        event_type: str,
        plant_name: str,
        data: Dict[str, Any] = None,
        **kwargs
    ):
        data = dict(data or {})
        data['plant_name'] = plant_name

        kwargs.setdefault('category', 'plant')

        super().__init__(event_type, data, **kwargs)

    def _validate_event_data(self):
        """Validate plant event data."""
        if not self.data.get('plant_name'):
            raise ValueError("Plant events must contain plant_name")

    @property
    def plant_name(self) -> str:
        """Get plant name from event data."""
        return self.data['plant_name']
