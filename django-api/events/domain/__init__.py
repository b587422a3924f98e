from events.domain.models import Event, EventChanges, EventPage, NewEvent
from events.domain.value_objects import EventId, Inventory, Money, UserId

__all__ = [
    "Event",
    "EventChanges",
    "EventPage",
    "NewEvent",
    "EventId",
    "UserId",
    "Money",
    "Inventory",
]
