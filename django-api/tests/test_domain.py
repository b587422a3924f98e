"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import importlib
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from events.domain import Event, EventId, Inventory, Money, UserId
from events.domain.errors import ErrorCode, InvalidAdjustmentError


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(Decimal("10.50")).amount == Decimal("10.50")

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(Decimal("0")).amount == Decimal("0")

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(Decimal("7.5"))) == "7.50"


class TestInventory:
    """Tests for Inventory value object."""

    def test_fresh_inventory_has_everything_available(self):
        """A new event starts with available equal to total."""
        inventory = Inventory.fresh(50)
        assert inventory.total == 50
        assert inventory.available == 50
        assert inventory.sold == 0

    def test_rejects_total_below_one(self):
        """Inventory total must be at least one."""
        with pytest.raises(ValueError):
            Inventory(total=0, available=0)

    def test_rejects_available_above_total(self):
        """Available can never exceed total."""
        with pytest.raises(ValueError):
            Inventory(total=5, available=6)

    def test_rejects_negative_available(self):
        """Available can never drop below zero."""
        with pytest.raises(ValueError):
            Inventory(total=5, available=-1)

    def test_can_delete_only_without_sales(self):
        """Deletion is allowed only while nothing was sold."""
        assert Inventory(total=10, available=10).can_delete
        assert not Inventory(total=10, available=9).can_delete

    def test_adjust_below_sold_is_rejected(self):
        """Total 50 with 40 sold cannot shrink to 30."""
        inventory = Inventory(total=50, available=10)
        with pytest.raises(InvalidAdjustmentError) as excinfo:
            inventory.adjusted(30)
        assert excinfo.value.code == ErrorCode.INVALID_ADJUSTMENT
        assert excinfo.value.sold == 40

    def test_adjust_down_keeps_sold_count(self):
        """Total 50 with 40 sold can shrink to 45, leaving 5 available."""
        assert Inventory(total=50, available=10).adjusted(45) == Inventory(total=45, available=5)

    def test_adjust_to_exactly_sold_leaves_nothing_available(self):
        """Shrinking total to the sold count sells the event out."""
        assert Inventory(total=50, available=10).adjusted(40) == Inventory(total=40, available=0)

    def test_adjust_up_adds_available(self):
        """Growing total grows available by the same amount."""
        assert Inventory(total=10, available=2).adjusted(15) == Inventory(total=15, available=7)

    def test_adjust_to_zero_is_rejected(self):
        """An unsold event still needs at least one ticket."""
        with pytest.raises(InvalidAdjustmentError):
            Inventory(total=10, available=10).adjusted(0)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        raw = "12345678-1234-5678-1234-567812345678"
        assert EventId.from_string(raw).value == UUID(raw)

    def test_from_string_invalid_uuid(self):
        """EventId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")


class TestEvent:
    """Tests for Event domain model behaviour."""

    def _event(self, starts_at: datetime, promoter: UserId) -> Event:
        now = datetime.now(timezone.utc)
        return Event(
            id=EventId(uuid4()),
            name="Jazz Night",
            description="An evening of standards.",
            starts_at=starts_at,
            location="Blue Room, Recife",
            image_url="https://example.com/jazz.jpg",
            price=Money(Decimal("30")),
            inventory=Inventory.fresh(20),
            promoter_id=promoter,
            created_at=now,
            updated_at=now,
        )

    def test_has_started_at_start_time(self):
        """An event whose start time equals now is no longer open."""
        now = datetime.now(timezone.utc)
        event = self._event(now, UserId(uuid4()))
        assert event.has_started(now)
        assert not event.has_started(now - timedelta(seconds=1))

    def test_is_owned_by_promoter(self):
        """Ownership compares promoter identifiers."""
        promoter = UserId(uuid4())
        event = self._event(datetime.now(timezone.utc), promoter)
        assert event.is_owned_by(promoter)
        assert not event.is_owned_by(UserId(uuid4()))


class TestPackaging:
    """The Django apps must be regular packages to be installed."""

    @pytest.mark.parametrize("name", ["accounts", "events", "tickets"])
    def test_app_is_regular_package(self, name):
        module = importlib.import_module(name)
        assert module.__file__ is not None
