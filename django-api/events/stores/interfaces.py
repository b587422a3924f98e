"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventId, EventPage, Inventory, NewEvent, UserId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_open_events(
        self, page: int, limit: int, search: str | None = None
    ) -> EventPage:
        """Return future events with tickets left, ordered by starts_at ascending."""
        ...

    @abstractmethod
    def list_events_by_promoter(self, promoter_id: UserId) -> list[Event]:
        """Return a promoter's events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_event_for_update(self, event_id: EventId) -> Event | None:
        """Return an event by ID holding its row lock until the transaction ends."""
        ...

    @abstractmethod
    def create_event(self, new_event: NewEvent) -> Event:
        """Persist a new event and return it."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, attributes: dict) -> None:
        """Write changed non-inventory attributes of an event."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> None:
        """Remove an event."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...


class InventoryLedger(ABC):
    """Authoritative ticket counts of events.

    Implementations mutate counts in the durable store, never by reading
    and writing back a value held in memory.
    """

    @abstractmethod
    def decrement_available(self, event_id: EventId) -> None:
        """Take one ticket out of an event's inventory.

        Raises:
            NoInventoryError: If the event has no tickets left.
        """
        ...

    @abstractmethod
    def adjust_total(self, event_id: EventId, new_total: int) -> Inventory:
        """Change an event's total, shifting available by the same amount.

        Raises:
            EventNotFoundError: If the event does not exist.
            InvalidAdjustmentError: If the new total is below the sold count.
        """
        ...

    @abstractmethod
    def can_delete(self, event_id: EventId) -> bool:
        """True when the event has sold no tickets."""
        ...
