from events.services.event_service import EventService, parse_event_id
from events.stores.django_store import DjangoEventStore, DjangoInventoryLedger


def get_event_service() -> EventService:
    return EventService(store=DjangoEventStore(), ledger=DjangoInventoryLedger())


__all__ = ["EventService", "get_event_service", "parse_event_id"]
