"""Django ORM implementation of the EventStore and InventoryLedger."""

import logging

from django.db import transaction
from django.db.models import F, Q
from django.utils import timezone

from events import cache as event_cache
from events import models as orm
from events.domain import Event, EventId, EventPage, Inventory, Money, NewEvent, UserId
from events.domain.errors import EventNotFoundError, NoInventoryError
from events.stores.interfaces import EventStore, InventoryLedger

logger = logging.getLogger(__name__)


def to_domain(row: orm.Event) -> Event:
    """Convert an ORM row into a domain Event."""
    return Event(
        id=EventId(row.id),
        name=row.name,
        description=row.description,
        starts_at=row.starts_at,
        location=row.location,
        image_url=row.image_url,
        price=Money(row.price),
        inventory=Inventory(total=row.total, available=row.available),
        promoter_id=UserId(row.promoter_id),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_open_events(
        self, page: int, limit: int, search: str | None = None
    ) -> EventPage:
        queryset = orm.Event.objects.filter(available__gt=0, starts_at__gt=timezone.now())
        if search:
            queryset = queryset.filter(name__icontains=search)

        total = queryset.count()
        offset = (page - 1) * limit
        rows = queryset.order_by("starts_at")[offset : offset + limit]
        return EventPage(
            events=tuple(to_domain(row) for row in rows),
            page=page,
            limit=limit,
            total=total,
        )

    def list_events_by_promoter(self, promoter_id: UserId) -> list[Event]:
        rows = orm.Event.objects.filter(promoter_id=promoter_id.value).order_by("-created_at")
        return [to_domain(row) for row in rows]

    def get_event(self, event_id: EventId) -> Event | None:
        row = orm.Event.objects.filter(pk=event_id.value).first()
        return to_domain(row) if row else None

    def get_event_for_update(self, event_id: EventId) -> Event | None:
        row = orm.Event.objects.select_for_update().filter(pk=event_id.value).first()
        return to_domain(row) if row else None

    def create_event(self, new_event: NewEvent) -> Event:
        row = orm.Event.objects.create(
            name=new_event.name,
            description=new_event.description,
            starts_at=new_event.starts_at,
            location=new_event.location,
            image_url=new_event.image_url,
            price=new_event.price.amount,
            total=new_event.inventory.total,
            available=new_event.inventory.available,
            promoter_id=new_event.promoter_id.value,
        )
        return to_domain(row)

    def update_event(self, event_id: EventId, attributes: dict) -> None:
        row = orm.Event.objects.get(pk=event_id.value)
        for field, value in attributes.items():
            setattr(row, field, value.amount if isinstance(value, Money) else value)
        row.save(update_fields=[*attributes, "updated_at"])

    def delete_event(self, event_id: EventId) -> None:
        orm.Event.objects.filter(pk=event_id.value).delete()

    def event_exists(self, event_id: EventId) -> bool:
        return orm.Event.objects.filter(pk=event_id.value).exists()


class DjangoInventoryLedger(InventoryLedger):
    """Inventory counts kept in the events table.

    Queryset ``update()`` bypasses model signals, so cache invalidation is
    scheduled on commit here.
    """

    def decrement_available(self, event_id: EventId) -> None:
        updated = orm.Event.objects.filter(pk=event_id.value, available__gt=0).update(
            available=F("available") - 1, updated_at=timezone.now()
        )
        if updated == 0:
            raise NoInventoryError(event_id=str(event_id))
        transaction.on_commit(lambda: event_cache.invalidate_event(event_id.value))

    def adjust_total(self, event_id: EventId, new_total: int) -> Inventory:
        with transaction.atomic():
            row = (
                orm.Event.objects.select_for_update()
                .filter(pk=event_id.value)
                .values("total", "available")
                .first()
            )
            if row is None:
                raise EventNotFoundError(event_id=str(event_id))

            current = Inventory(total=row["total"], available=row["available"])
            adjusted = current.adjusted(new_total)
            delta = adjusted.total - current.total
            orm.Event.objects.filter(pk=event_id.value).update(
                total=F("total") + delta,
                available=F("available") + delta,
                updated_at=timezone.now(),
            )

        logger.info(
            "Adjusted event %s total %d -> %d (available %d)",
            event_id,
            current.total,
            adjusted.total,
            adjusted.available,
        )
        transaction.on_commit(lambda: event_cache.invalidate_event(event_id.value))
        return adjusted

    def can_delete(self, event_id: EventId) -> bool:
        return orm.Event.objects.filter(
            Q(pk=event_id.value) & Q(available=F("total"))
        ).exists()
