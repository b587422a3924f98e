from django.conf import settings

from tickets.codes import TicketCodeGenerator
from tickets.services.reservation_service import ReservationService
from tickets.services.ticket_service import TicketService
from tickets.services.validation_service import TicketValidationService
from tickets.stores.django_store import DjangoTicketStore
from tickets.stores.unit_of_work import DjangoUnitOfWork


def get_reservation_service() -> ReservationService:
    return ReservationService(
        uow_factory=lambda: DjangoUnitOfWork(lock_timeout_ms=settings.TICKETS_LOCK_TIMEOUT_MS),
        code_generator=TicketCodeGenerator(prefix=settings.TICKETS_CODE_PREFIX),
        code_max_attempts=settings.TICKETS_CODE_MAX_ATTEMPTS,
        max_attempts=settings.TICKETS_RESERVE_MAX_ATTEMPTS,
        backoff_seconds=settings.TICKETS_RESERVE_BACKOFF_SECONDS,
    )


def get_ticket_service() -> TicketService:
    return TicketService(store=DjangoTicketStore())


def get_validation_service() -> TicketValidationService:
    return TicketValidationService(store=DjangoTicketStore())


__all__ = [
    "ReservationService",
    "TicketService",
    "TicketValidationService",
    "get_reservation_service",
    "get_ticket_service",
    "get_validation_service",
]
