"""Domain error codes for the marketplace."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    NOT_EVENT_OWNER = "NOT_EVENT_OWNER"
    INVALID_ADJUSTMENT = "INVALID_ADJUSTMENT"
    EVENT_HAS_SALES = "EVENT_HAS_SALES"
    NO_INVENTORY = "NO_INVENTORY"
    EVENT_CLOSED = "EVENT_CLOSED"
    SOLD_OUT = "SOLD_OUT"
    DUPLICATE_PURCHASE = "DUPLICATE_PURCHASE"
    RESERVATION_CONFLICT = "RESERVATION_CONFLICT"
    CODE_GENERATION_FAILED = "CODE_GENERATION_FAILED"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    INVALID_TICKET_ID = "INVALID_TICKET_ID"
    NOT_TICKET_OWNER = "NOT_TICKET_OWNER"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class NotEventOwnerError(DomainError):
    """Raised when a promoter acts on an event created by someone else."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_EVENT_OWNER,
            message="You do not have permission to change this event",
        )
        self.event_id = event_id


class InvalidAdjustmentError(DomainError):
    """Raised when a new total would leave fewer tickets than already sold."""

    def __init__(self, new_total: int, sold: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ADJUSTMENT,
            message="Total tickets cannot be lower than tickets already sold",
        )
        self.new_total = new_total
        self.sold = sold


class EventHasSalesError(DomainError):
    """Raised when deleting an event that already sold tickets."""

    def __init__(self, event_id: str, sold: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_HAS_SALES,
            message="Events with sold tickets cannot be deleted",
        )
        self.event_id = event_id
        self.sold = sold


class NoInventoryError(DomainError):
    """Raised by the inventory ledger when nothing is left to decrement."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.NO_INVENTORY,
            message="No tickets left for this event",
        )
        self.event_id = event_id
