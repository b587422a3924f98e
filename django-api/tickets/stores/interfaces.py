"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import EventId, UserId
from tickets.domain import NewTicket, PurchasedTicket, Ticket, TicketId


class TicketStore(ABC):
    """Interface for ticket persistence operations."""

    @abstractmethod
    def add(self, new_ticket: NewTicket) -> Ticket:
        """Insert a ticket.

        A failed insert leaves the surrounding transaction usable.

        Raises:
            DuplicatePurchaseError: If the buyer already holds a ticket for the event.
            RedemptionCodeTakenError: If the code belongs to another ticket.
        """
        ...

    @abstractmethod
    def exists_for(self, event_id: EventId, buyer_id: UserId) -> bool:
        """Check if the buyer already holds a ticket for the event."""
        ...

    @abstractmethod
    def get(self, ticket_id: TicketId) -> PurchasedTicket | None:
        """Return a ticket by ID, or None if not found."""
        ...

    @abstractmethod
    def get_by_code(self, code: str) -> PurchasedTicket | None:
        """Return a ticket by redemption code, or None if not found."""
        ...

    @abstractmethod
    def list_for_buyer(self, buyer_id: UserId) -> list[PurchasedTicket]:
        """Return a buyer's tickets ordered by purchased_at descending."""
        ...
