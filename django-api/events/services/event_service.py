"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from datetime import datetime

from django.db import transaction

from events.domain import Event, EventChanges, EventId, EventPage, Inventory, Money, NewEvent, UserId
from events.domain.errors import (
    EventHasSalesError,
    EventNotFoundError,
    InvalidEventIdError,
    NotEventOwnerError,
)
from events.stores.interfaces import EventStore, InventoryLedger

logger = logging.getLogger(__name__)


def parse_event_id(event_id: str) -> EventId:
    """Parse a raw event ID.

    Raises:
        InvalidEventIdError: If the event_id is not a valid UUID.
    """
    try:
        return EventId.from_string(str(event_id))
    except ValueError as exc:
        raise InvalidEventIdError() from exc


class EventService:
    """Service for event catalog and promoter operations."""

    def __init__(self, store: EventStore, ledger: InventoryLedger) -> None:
        self._store = store
        self._ledger = ledger

    def list_events(self, page: int = 1, limit: int = 10, search: str | None = None) -> EventPage:
        """Return a page of upcoming events that still have tickets."""
        return self._store.list_open_events(page=page, limit=limit, search=search)

    def list_promoter_events(self, promoter_id: UserId) -> list[Event]:
        return self._store.list_events_by_promoter(promoter_id)

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(event_id=str(event_id))
        return event

    def create_event(
        self,
        promoter_id: UserId,
        *,
        name: str,
        description: str,
        starts_at: datetime,
        location: str,
        image_url: str,
        price: Money,
        total: int,
    ) -> Event:
        """Create an event whose whole inventory is available."""
        event = self._store.create_event(
            NewEvent(
                name=name,
                description=description,
                starts_at=starts_at,
                location=location,
                image_url=image_url,
                price=price,
                inventory=Inventory.fresh(total),
                promoter_id=promoter_id,
            )
        )
        logger.info("Promoter %s created event %s with %d tickets", promoter_id, event.id, total)
        return event

    def update_event(self, event_id: str, promoter_id: UserId, changes: EventChanges) -> Event:
        """Apply a promoter's edits to an event it owns.

        A changed total goes through the inventory ledger in the same
        transaction as the other attributes.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            NotEventOwnerError: If the promoter does not own the event.
            InvalidAdjustmentError: If the new total is below the sold count.
        """
        parsed = parse_event_id(event_id)
        with transaction.atomic():
            event = self._owned_event_for_update(parsed, promoter_id)

            attributes = changes.attributes()
            if attributes:
                self._store.update_event(parsed, attributes)
            if changes.total is not None and changes.total != event.inventory.total:
                self._ledger.adjust_total(parsed, changes.total)

            updated = self._store.get_event(parsed)
        return updated

    def delete_event(self, event_id: str, promoter_id: UserId) -> None:
        """Delete an event that has not sold any ticket.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            NotEventOwnerError: If the promoter does not own the event.
            EventHasSalesError: If at least one ticket was sold.
        """
        parsed = parse_event_id(event_id)
        with transaction.atomic():
            event = self._owned_event_for_update(parsed, promoter_id)
            if not self._ledger.can_delete(parsed):
                raise EventHasSalesError(event_id=str(parsed), sold=event.inventory.sold)
            self._store.delete_event(parsed)
        logger.info("Promoter %s deleted event %s", promoter_id, parsed)

    def _owned_event_for_update(self, event_id: EventId, promoter_id: UserId) -> Event:
        event = self._store.get_event_for_update(event_id)
        if event is None:
            raise EventNotFoundError(event_id=str(event_id))
        if not event.is_owned_by(promoter_id):
            raise NotEventOwnerError(event_id=str(event_id))
        return event
