"""Django ORM implementation of the TicketStore."""

from django.db import IntegrityError, transaction

from events.domain import EventId, UserId
from events.stores.django_store import to_domain as event_to_domain
from tickets import models as orm
from tickets.domain import NewTicket, PurchasedTicket, Ticket, TicketId
from tickets.domain.errors import DuplicatePurchaseError, RedemptionCodeTakenError
from tickets.stores.interfaces import TicketStore


def to_domain(row: orm.Ticket) -> Ticket:
    return Ticket(
        id=TicketId(row.id),
        code=row.code,
        event_id=EventId(row.event_id),
        buyer_id=UserId(row.buyer_id),
        purchased_at=row.purchased_at,
    )


def to_purchased(row: orm.Ticket) -> PurchasedTicket:
    return PurchasedTicket(ticket=to_domain(row), event=event_to_domain(row.event))


class DjangoTicketStore(TicketStore):
    """Relational ticket store using Django ORM."""

    def add(self, new_ticket: NewTicket) -> Ticket:
        try:
            # Savepoint: a rejected insert must not poison the reservation transaction.
            with transaction.atomic():
                row = orm.Ticket.objects.create(
                    code=new_ticket.code,
                    event_id=new_ticket.event_id.value,
                    buyer_id=new_ticket.buyer_id.value,
                    purchased_at=new_ticket.purchased_at,
                )
        except IntegrityError as exc:
            if self.exists_for(new_ticket.event_id, new_ticket.buyer_id):
                raise DuplicatePurchaseError(
                    event_id=str(new_ticket.event_id), buyer_id=str(new_ticket.buyer_id)
                ) from exc
            if orm.Ticket.objects.filter(code=new_ticket.code).exists():
                raise RedemptionCodeTakenError(new_ticket.code) from exc
            raise
        return to_domain(row)

    def exists_for(self, event_id: EventId, buyer_id: UserId) -> bool:
        return orm.Ticket.objects.filter(event_id=event_id.value, buyer_id=buyer_id.value).exists()

    def get(self, ticket_id: TicketId) -> PurchasedTicket | None:
        row = orm.Ticket.objects.select_related("event").filter(pk=ticket_id.value).first()
        return to_purchased(row) if row else None

    def get_by_code(self, code: str) -> PurchasedTicket | None:
        row = orm.Ticket.objects.select_related("event").filter(code=code).first()
        return to_purchased(row) if row else None

    def list_for_buyer(self, buyer_id: UserId) -> list[PurchasedTicket]:
        rows = (
            orm.Ticket.objects.select_related("event")
            .filter(buyer_id=buyer_id.value)
            .order_by("-purchased_at")
        )
        return [to_purchased(row) for row in rows]
