"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self
from uuid import UUID

from events.domain.errors import InvalidAdjustmentError


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UserId:
    """Unique identifier for a buyer or promoter."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Inventory:
    """Ticket inventory of an event.

    ``total`` is the declared size, ``available`` what is left to sell.
    """

    total: int
    available: int

    def __post_init__(self) -> None:
        if self.total < 1:
            raise ValueError("Inventory total must be at least 1")
        if not 0 <= self.available <= self.total:
            raise ValueError("Inventory available must be between 0 and total")

    @classmethod
    def fresh(cls, total: int) -> Self:
        """Inventory of a newly created event: nothing sold yet."""
        return cls(total=total, available=total)

    @property
    def sold(self) -> int:
        return self.total - self.available

    @property
    def can_delete(self) -> bool:
        return self.sold == 0

    def adjusted(self, new_total: int) -> Self:
        """Return the inventory after changing ``total`` to ``new_total``.

        Raises:
            InvalidAdjustmentError: If the new total is below the number
                already sold or below one.
        """
        if new_total < 1 or new_total < self.sold:
            raise InvalidAdjustmentError(new_total=new_total, sold=self.sold)
        return type(self)(
            total=new_total,
            available=self.available + (new_total - self.total),
        )
