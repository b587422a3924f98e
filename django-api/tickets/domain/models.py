"""Domain models for purchased tickets."""

from dataclasses import dataclass
from datetime import datetime

from events.domain import Event, EventId, UserId
from tickets.domain.value_objects import TicketId


@dataclass(frozen=True)
class NewTicket:
    """A ticket about to be inserted by a reservation."""

    event_id: EventId
    buyer_id: UserId
    code: str
    purchased_at: datetime


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket. Immutable once issued."""

    id: TicketId
    code: str
    event_id: EventId
    buyer_id: UserId
    purchased_at: datetime

    def belongs_to(self, buyer_id: UserId) -> bool:
        return self.buyer_id == buyer_id


@dataclass(frozen=True)
class PurchasedTicket:
    """A ticket together with the event it admits to."""

    ticket: Ticket
    event: Event


@dataclass(frozen=True)
class TicketView:
    """Read model of a ticket; ``event_elapsed`` is computed when read."""

    ticket: Ticket
    event: Event
    event_elapsed: bool
