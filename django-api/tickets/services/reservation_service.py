"""Reservation engine: turns one unit of event inventory into a ticket.

The precondition checks, the inventory decrement and the ticket insert run
in a single unit of work holding the event's row lock. Nothing persists
unless all of them succeed.
"""

import logging
import time
from collections.abc import Callable
from datetime import datetime

from django.db import DatabaseError, InterfaceError, OperationalError
from django.utils import timezone

from events.domain import EventId, UserId
from events.domain.errors import NoInventoryError
from events.services import parse_event_id
from tickets.codes import TicketCodeGenerator
from tickets.domain import NewTicket, Ticket
from tickets.domain.errors import (
    CodeGenerationFailedError,
    DuplicatePurchaseError,
    EventClosedError,
    EventNotFoundError,
    RedemptionCodeTakenError,
    ReservationConflictError,
    SoldOutError,
    StorageUnavailableError,
)
from tickets.stores.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)

CONTENTION_MARKERS = (
    "database is locked",
    "database table is locked",
    "lock timeout",
    "could not obtain lock",
    "deadlock",
    "could not serialize",
    "serialization failure",
)


def is_lock_contention(error: OperationalError) -> bool:
    """True for lock waits, deadlocks and serialization failures."""
    message = str(error).lower()
    return any(marker in message for marker in CONTENTION_MARKERS)


class ReservationService:
    """Service for buying tickets."""

    def __init__(
        self,
        uow_factory: Callable[[], AbstractUnitOfWork],
        code_generator: TicketCodeGenerator,
        clock: Callable[[], datetime] = timezone.now,
        code_max_attempts: int = 5,
        max_attempts: int = 3,
        backoff_seconds: float = 0.05,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._uow_factory = uow_factory
        self._codes = code_generator
        self._clock = clock
        self._code_max_attempts = code_max_attempts
        self._max_attempts = max_attempts
        self._backoff_seconds = backoff_seconds
        self._sleep = sleep

    def reserve(self, event_id: str, buyer_id: UserId) -> Ticket:
        """Reserve one ticket of an event for a buyer.

        Lock contention is retried with exponential backoff.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            EventClosedError: If the event has already started.
            SoldOutError: If no tickets are left.
            DuplicatePurchaseError: If the buyer already holds a ticket for the event.
            ReservationConflictError: If contention outlasted every retry.
            CodeGenerationFailedError: If no unique redemption code was found.
            StorageUnavailableError: If the database failed.
        """
        parsed = parse_event_id(event_id)
        delay = self._backoff_seconds
        for attempt in range(1, self._max_attempts + 1):
            try:
                return self._reserve_once(parsed, buyer_id)
            except OperationalError as exc:
                if not is_lock_contention(exc):
                    logger.error("Database failure reserving event %s: %s", parsed, exc)
                    raise StorageUnavailableError() from exc
                if attempt == self._max_attempts:
                    logger.warning(
                        "Giving up on event %s after %d contended attempts", parsed, attempt
                    )
                    raise ReservationConflictError(event_id=str(parsed)) from exc
                logger.warning(
                    "Contention reserving event %s (attempt %d), retrying in %.3fs",
                    parsed,
                    attempt,
                    delay,
                )
                self._sleep(delay)
                delay *= 2
            except (InterfaceError, DatabaseError) as exc:
                logger.error("Database failure reserving event %s: %s", parsed, exc)
                raise StorageUnavailableError() from exc
        raise ReservationConflictError(event_id=str(parsed))

    def _reserve_once(self, event_id: EventId, buyer_id: UserId) -> Ticket:
        with self._uow_factory() as uow:
            event = uow.events.get_event_for_update(event_id)
            if event is None:
                raise EventNotFoundError(event_id=str(event_id))
            if event.has_started(self._clock()):
                raise EventClosedError(event_id=str(event_id))
            if event.inventory.available <= 0:
                raise SoldOutError(event_id=str(event_id))
            if uow.tickets.exists_for(event_id, buyer_id):
                raise DuplicatePurchaseError(event_id=str(event_id), buyer_id=str(buyer_id))

            try:
                uow.ledger.decrement_available(event_id)
            except NoInventoryError as exc:
                raise SoldOutError(event_id=str(event_id)) from exc

            ticket = self._issue_ticket(uow, event_id, buyer_id)
            uow.commit()

        logger.info("Buyer %s reserved ticket %s for event %s", buyer_id, ticket.id, event_id)
        return ticket

    def _issue_ticket(self, uow: AbstractUnitOfWork, event_id: EventId, buyer_id: UserId) -> Ticket:
        for attempt in range(1, self._code_max_attempts + 1):
            new_ticket = NewTicket(
                event_id=event_id,
                buyer_id=buyer_id,
                code=self._codes.generate(),
                purchased_at=self._clock(),
            )
            try:
                return uow.tickets.add(new_ticket)
            except RedemptionCodeTakenError:
                logger.warning(
                    "Redemption code collision for event %s (attempt %d)", event_id, attempt
                )

        logger.error(
            "No unique redemption code for event %s after %d attempts",
            event_id,
            self._code_max_attempts,
        )
        raise CodeGenerationFailedError(attempts=self._code_max_attempts)
