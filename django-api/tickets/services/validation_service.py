"""Validation gateway: look a ticket up by its redemption code."""

from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from tickets.domain import PurchasedTicket, TicketView
from tickets.domain.errors import TicketNotFoundError
from tickets.stores.interfaces import TicketStore


def to_view(purchased: PurchasedTicket, now: datetime) -> TicketView:
    return TicketView(
        ticket=purchased.ticket,
        event=purchased.event,
        event_elapsed=purchased.event.starts_at < now,
    )


class TicketValidationService:
    """Read-only lookup used at venue gates."""

    def __init__(self, store: TicketStore, clock: Callable[[], datetime] = timezone.now) -> None:
        self._store = store
        self._clock = clock

    def lookup(self, code: str) -> TicketView:
        """Return the ticket carrying ``code``.

        Raises:
            TicketNotFoundError: If no ticket has this code.
        """
        purchased = self._store.get_by_code(code.strip().upper())
        if purchased is None:
            raise TicketNotFoundError()
        return to_view(purchased, self._clock())
