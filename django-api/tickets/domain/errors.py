"""Errors raised while reserving and reading tickets."""

from events.domain import errors as event_errors
from events.domain.errors import DomainError, ErrorCode


class ReservationError(DomainError):
    """Base class for reservation failures."""


class EventNotFoundError(ReservationError, event_errors.EventNotFoundError):
    """Raised when the event to reserve does not exist."""


class EventClosedError(ReservationError):
    """Raised when the event has already started."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_CLOSED,
            message="Tickets cannot be bought for past events",
        )
        self.event_id = event_id


class SoldOutError(ReservationError):
    """Raised when no tickets are left."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.SOLD_OUT,
            message="No tickets available for this event",
        )
        self.event_id = event_id


class DuplicatePurchaseError(ReservationError):
    """Raised when the buyer already holds a ticket for the event."""

    def __init__(self, event_id: str, buyer_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_PURCHASE,
            message="You already have a ticket for this event",
        )
        self.event_id = event_id
        self.buyer_id = buyer_id


class ReservationConflictError(ReservationError):
    """Raised when lock contention outlasted every retry. Safe to retry later."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.RESERVATION_CONFLICT,
            message="The event is busy, please try again",
        )
        self.event_id = event_id


class CodeGenerationFailedError(ReservationError):
    """Raised when no unique redemption code could be generated."""

    def __init__(self, attempts: int) -> None:
        super().__init__(
            code=ErrorCode.CODE_GENERATION_FAILED,
            message="The ticket could not be issued",
        )
        self.attempts = attempts


class StorageUnavailableError(ReservationError):
    """Raised when the database cannot complete the reservation."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_UNAVAILABLE,
            message="Service temporarily unavailable",
        )


class TicketNotFoundError(DomainError):
    """Raised when no ticket matches an ID or redemption code."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )


class InvalidTicketIdError(DomainError):
    """Raised when a ticket ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_ID,
            message="Invalid ticket ID format",
        )


class NotTicketOwnerError(DomainError):
    """Raised when a user reads a ticket bought by someone else."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_TICKET_OWNER,
            message="You do not have permission to view this ticket",
        )


class RedemptionCodeTakenError(Exception):
    """A freshly generated code already belongs to another ticket."""

    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code
