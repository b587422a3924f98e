"""Concurrent reservation tests.

Real threads with their own database connections race for the same event.
Run with: pytest tests/test_concurrency.py -v
"""

import threading

import pytest
from django.db import connection

from events.domain import UserId
from tickets.domain.errors import DuplicatePurchaseError, ReservationError, SoldOutError
from tickets.models import Ticket
from tickets.services import get_reservation_service


def race(event_id, buyer_ids) -> list:
    """Reserve concurrently for each buyer ID; return tickets and errors."""
    barrier = threading.Barrier(len(buyer_ids))
    results = []

    def attempt(buyer_id):
        try:
            barrier.wait()
            results.append(get_reservation_service().reserve(str(event_id), UserId(buyer_id)))
        except ReservationError as error:
            results.append(error)
        finally:
            connection.close()

    threads = [threading.Thread(target=attempt, args=(buyer_id,)) for buyer_id in buyer_ids]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return results


def split(results):
    errors = [result for result in results if isinstance(result, ReservationError)]
    tickets = [result for result in results if not isinstance(result, ReservationError)]
    return tickets, errors


@pytest.mark.django_db(transaction=True)
class TestConcurrentReservations:
    """Inventory and uniqueness hold under parallel purchases."""

    def test_inventory_is_never_oversold(self, make_event, make_user):
        """k tickets, N > k buyers: exactly k succeed, the rest are sold out."""
        event = make_event(total=3)
        buyers = [make_user() for _ in range(8)]

        tickets, errors = split(race(event.id, [buyer.id for buyer in buyers]))

        assert len(tickets) == 3
        assert len(errors) == 5
        assert all(isinstance(error, SoldOutError) for error in errors)
        event.refresh_from_db()
        assert event.available == 0
        assert Ticket.objects.filter(event=event).count() == 3

    def test_last_ticket_goes_to_one_buyer(self, make_event, make_user):
        """Event{total:1}: of two simultaneous buyers one wins, one is sold out."""
        event = make_event(total=1)
        first, second = make_user(), make_user()

        tickets, errors = split(race(event.id, [first.id, second.id]))

        assert len(tickets) == 1
        assert len(errors) == 1
        assert isinstance(errors[0], SoldOutError)
        event.refresh_from_db()
        assert event.available == 0

    def test_same_buyer_gets_one_ticket(self, make_event, buyer):
        """Parallel purchases by one buyer yield one ticket and duplicates."""
        event = make_event(total=10)

        tickets, errors = split(race(event.id, [buyer.id] * 5))

        assert len(tickets) == 1
        assert len(errors) == 4
        assert all(isinstance(error, DuplicatePurchaseError) for error in errors)
        event.refresh_from_db()
        assert event.available == 9

    def test_codes_are_unique(self, make_event, make_user):
        """Every issued ticket carries a distinct redemption code."""
        event = make_event(total=12)
        buyers = [make_user() for _ in range(12)]

        tickets, errors = split(race(event.id, [buyer.id for buyer in buyers]))

        assert errors == []
        codes = set(Ticket.objects.filter(event=event).values_list("code", flat=True))
        assert len(codes) == 12
        assert codes == {ticket.code for ticket in tickets}
