"""Integration tests for the ticket endpoints.

Run with: pytest tests/test_tickets_api.py -v
"""

from datetime import timedelta
from uuid import uuid4

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from events.domain import UserId
from tickets.models import Ticket
from tickets.services import get_reservation_service


def purchase(api_client: APIClient, event_id):
    return api_client.post(f"/api/tickets/purchase/{event_id}")


@pytest.mark.django_db
class TestPurchase:
    """Tests for POST /api/tickets/purchase/{event_id}"""

    def test_buyer_purchases_ticket(self, api_client: APIClient, buyer, make_event):
        event = make_event(total=50)
        api_client.force_authenticate(user=buyer)

        response = purchase(api_client, event.id)

        assert response.status_code == 201
        assert response.data["event_id"] == str(event.id)
        assert response.data["buyer_id"] == str(buyer.id)
        assert response.data["code"]
        event.refresh_from_db()
        assert event.available == 49

    def test_promoter_cannot_purchase(self, api_client: APIClient, promoter, make_event):
        event = make_event()
        api_client.force_authenticate(user=promoter)

        response = purchase(api_client, event.id)

        assert response.status_code == 403
        assert not Ticket.objects.exists()

    def test_anonymous_cannot_purchase(self, api_client: APIClient, make_event):
        response = purchase(api_client, make_event().id)
        assert response.status_code == 401

    def test_second_purchase_is_a_conflict(self, api_client: APIClient, buyer, make_event):
        event = make_event()
        api_client.force_authenticate(user=buyer)
        purchase(api_client, event.id)

        response = purchase(api_client, event.id)

        assert response.status_code == 409
        assert response.data["error"]["code"] == "DUPLICATE_PURCHASE"

    def test_sold_out_is_a_conflict(self, api_client: APIClient, buyer, make_event):
        event = make_event(total=1, available=0)
        api_client.force_authenticate(user=buyer)

        response = purchase(api_client, event.id)

        assert response.status_code == 409
        assert response.data["error"]["code"] == "SOLD_OUT"

    def test_past_event_is_rejected(self, api_client: APIClient, buyer, make_event):
        event = make_event(starts_at=timezone.now() - timedelta(hours=1))
        api_client.force_authenticate(user=buyer)

        response = purchase(api_client, event.id)

        assert response.status_code == 400
        assert response.data["error"]["code"] == "EVENT_CLOSED"

    def test_unknown_event_is_not_found(self, api_client: APIClient, buyer):
        api_client.force_authenticate(user=buyer)
        response = purchase(api_client, uuid4())
        assert response.status_code == 404

    def test_malformed_event_id(self, api_client: APIClient, buyer):
        api_client.force_authenticate(user=buyer)
        response = purchase(api_client, "12345")
        assert response.status_code == 400
        assert response.data["error"]["code"] == "INVALID_EVENT_ID"


@pytest.mark.django_db
class TestMyTickets:
    """Tests for GET /api/tickets/mine and /api/tickets/{id}"""

    def test_lists_own_tickets_newest_first(self, api_client: APIClient, buyer, make_user, make_event):
        older, newer = make_event(name="Older"), make_event(name="Newer")
        service = get_reservation_service()
        service.reserve(str(older.id), UserId(buyer.id))
        service.reserve(str(newer.id), UserId(buyer.id))
        service.reserve(str(older.id), UserId(make_user().id))
        api_client.force_authenticate(user=buyer)

        response = api_client.get("/api/tickets/mine")

        assert response.status_code == 200
        assert response.data["total"] == 2
        assert [item["event"]["name"] for item in response.data["data"]] == ["Newer", "Older"]

    def test_ticket_detail_for_owner(self, api_client: APIClient, buyer, make_event):
        ticket = get_reservation_service().reserve(str(make_event().id), UserId(buyer.id))
        api_client.force_authenticate(user=buyer)

        response = api_client.get(f"/api/tickets/{ticket.id}")

        assert response.status_code == 200
        assert response.data["ticket"]["code"] == ticket.code

    def test_ticket_detail_of_someone_else(self, api_client: APIClient, buyer, make_user, make_event):
        ticket = get_reservation_service().reserve(str(make_event().id), UserId(buyer.id))
        api_client.force_authenticate(user=make_user())

        response = api_client.get(f"/api/tickets/{ticket.id}")

        assert response.status_code == 403

    def test_ticket_detail_not_found(self, api_client: APIClient, buyer):
        api_client.force_authenticate(user=buyer)
        assert api_client.get(f"/api/tickets/{uuid4()}").status_code == 404
        assert api_client.get("/api/tickets/not-a-uuid").status_code == 400


@pytest.mark.django_db
class TestValidateTicket:
    """Tests for GET /api/tickets/validate/{code}"""

    def test_valid_code_for_upcoming_event(self, api_client: APIClient, buyer, promoter, make_event):
        event = make_event()
        ticket = get_reservation_service().reserve(str(event.id), UserId(buyer.id))
        api_client.force_authenticate(user=promoter)

        response = api_client.get(f"/api/tickets/validate/{ticket.code}")

        assert response.status_code == 200
        assert response.data["ticket"]["id"] == str(ticket.id)
        assert response.data["event"]["id"] == str(event.id)
        assert response.data["event_elapsed"] is False

    def test_elapsed_is_computed_at_lookup(self, api_client: APIClient, buyer, promoter, make_event):
        event = make_event()
        ticket = get_reservation_service().reserve(str(event.id), UserId(buyer.id))
        type(event).objects.filter(pk=event.pk).update(
            starts_at=timezone.now() - timedelta(hours=2)
        )
        api_client.force_authenticate(user=promoter)

        response = api_client.get(f"/api/tickets/validate/{ticket.code}")

        assert response.data["event_elapsed"] is True

    def test_unknown_code(self, api_client: APIClient, promoter):
        api_client.force_authenticate(user=promoter)
        response = api_client.get("/api/tickets/validate/ING-NOPE-NOPE")
        assert response.status_code == 404
        assert response.data["error"]["code"] == "TICKET_NOT_FOUND"

    def test_short_code_is_rejected(self, api_client: APIClient, promoter):
        api_client.force_authenticate(user=promoter)
        response = api_client.get("/api/tickets/validate/ING")
        assert response.status_code == 400
