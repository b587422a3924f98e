"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import EventId, Inventory, Money, UserId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    description: str
    starts_at: datetime
    location: str
    image_url: str
    price: Money
    inventory: Inventory
    promoter_id: UserId
    created_at: datetime
    updated_at: datetime

    def has_started(self, now: datetime) -> bool:
        return self.starts_at <= now

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.promoter_id == user_id


@dataclass(frozen=True)
class NewEvent:
    """Attributes of an event about to be created."""

    name: str
    description: str
    starts_at: datetime
    location: str
    image_url: str
    price: Money
    inventory: Inventory
    promoter_id: UserId


@dataclass(frozen=True)
class EventChanges:
    """Promoter edits to an event; ``None`` leaves a field untouched."""

    name: str | None = None
    description: str | None = None
    starts_at: datetime | None = None
    location: str | None = None
    image_url: str | None = None
    price: Money | None = None
    total: int | None = None

    def attributes(self) -> dict:
        """Changed non-inventory attributes, keyed by field name."""
        values = {
            "name": self.name,
            "description": self.description,
            "starts_at": self.starts_at,
            "location": self.location,
            "image_url": self.image_url,
            "price": self.price,
        }
        return {key: value for key, value in values.items() if value is not None}


@dataclass(frozen=True)
class EventPage:
    """One page of the public event listing."""

    events: tuple[Event, ...]
    page: int
    limit: int
    total: int

    @property
    def pages(self) -> int:
        return -(-self.total // self.limit) if self.total else 0
