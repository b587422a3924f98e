"""Buyer-facing ticket queries."""

from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from events.domain import UserId
from tickets.domain import TicketId, TicketView
from tickets.domain.errors import InvalidTicketIdError, NotTicketOwnerError, TicketNotFoundError
from tickets.services.validation_service import to_view
from tickets.stores.interfaces import TicketStore


class TicketService:
    """Service for reading a buyer's own tickets."""

    def __init__(self, store: TicketStore, clock: Callable[[], datetime] = timezone.now) -> None:
        self._store = store
        self._clock = clock

    def list_for_buyer(self, buyer_id: UserId) -> list[TicketView]:
        """Return the buyer's tickets, newest first."""
        now = self._clock()
        return [to_view(purchased, now) for purchased in self._store.list_for_buyer(buyer_id)]

    def get_for_buyer(self, ticket_id: str, buyer_id: UserId) -> TicketView:
        """Return one of the buyer's tickets.

        Raises:
            InvalidTicketIdError: If the ticket_id is not a valid UUID.
            TicketNotFoundError: If the ticket does not exist.
            NotTicketOwnerError: If the ticket belongs to another buyer.
        """
        try:
            parsed = TicketId.from_string(str(ticket_id))
        except ValueError as exc:
            raise InvalidTicketIdError() from exc

        purchased = self._store.get(parsed)
        if purchased is None:
            raise TicketNotFoundError()
        if not purchased.ticket.belongs_to(buyer_id):
            raise NotTicketOwnerError()
        return to_view(purchased, self._clock())
