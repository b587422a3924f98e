"""Tests for registration, login and role rules.

Run with: pytest tests/test_accounts.py -v
"""

import pytest
from rest_framework.exceptions import ValidationError
from rest_framework.test import APIClient

from accounts.handlers.serializers import RegisterSerializer
from accounts.models import Role, User
from accounts.roles import can_manage_events, can_purchase


class TestRoles:
    """Tests for role-based rules."""

    def test_buyer_can_purchase_only(self):
        assert can_purchase(Role.BUYER)
        assert not can_manage_events(Role.BUYER)

    def test_promoter_can_manage_only(self):
        assert can_manage_events(Role.PROMOTER)
        assert not can_purchase(Role.PROMOTER)


@pytest.mark.django_db
class TestRegister:
    """Tests for POST /api/auth/register"""

    def test_register_defaults_to_buyer(self, api_client: APIClient):
        response = api_client.post(
            "/api/auth/register",
            {"name": "Ana Souza", "email": "Ana@Example.com", "password": "secret123"},
            format="json",
        )

        assert response.status_code == 201
        assert response.data["user"]["role"] == "buyer"
        assert response.data["access"]
        user = User.objects.get(email="ana@example.com")
        assert user.check_password("secret123")

    def test_register_promoter(self, api_client: APIClient):
        response = api_client.post(
            "/api/auth/register",
            {"name": "Bruno", "email": "bruno@example.com", "password": "secret123", "role": "promoter"},
            format="json",
        )
        assert response.data["user"]["role"] == "promoter"

    def test_register_rejects_unknown_role(self, api_client: APIClient):
        response = api_client.post(
            "/api/auth/register",
            {"name": "Carla", "email": "carla@example.com", "password": "secret123", "role": "admin"},
            format="json",
        )
        assert response.status_code == 400

    def test_register_rejects_duplicate_email(self, api_client: APIClient, make_user):
        make_user(email="dup@example.com")
        response = api_client.post(
            "/api/auth/register",
            {"name": "Dup", "email": "dup@example.com", "password": "secret123"},
            format="json",
        )
        assert response.status_code == 400

    def test_email_taken_after_validation_is_a_validation_error(self, make_user):
        """A registration racing another one for the same email fails cleanly."""
        make_user(email="race@example.com")

        with pytest.raises(ValidationError) as excinfo:
            RegisterSerializer().create(
                {"name": "Rita", "email": "race@example.com", "password": "secret123", "role": Role.BUYER}
            )
        assert "email" in excinfo.value.detail
        assert User.objects.filter(email="race@example.com").count() == 1

    def test_register_rejects_short_password(self, api_client: APIClient):
        response = api_client.post(
            "/api/auth/register",
            {"name": "Eva", "email": "eva@example.com", "password": "123"},
            format="json",
        )
        assert response.status_code == 400


@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login"""

    def test_login_returns_usable_token(self, api_client: APIClient, make_user, make_event):
        user = make_user(email="fabio@example.com")
        response = api_client.post(
            "/api/auth/login",
            {"email": "fabio@example.com", "password": "secret123"},
            format="json",
        )
        assert response.status_code == 200

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access']}")
        purchase = api_client.post(f"/api/tickets/purchase/{make_event().id}")
        assert purchase.status_code == 201
        assert purchase.data["buyer_id"] == str(user.id)

    def test_login_with_wrong_password(self, api_client: APIClient, make_user):
        make_user(email="gil@example.com")
        response = api_client.post(
            "/api/auth/login",
            {"email": "gil@example.com", "password": "wrong-password"},
            format="json",
        )
        assert response.status_code == 401

    def test_login_with_email_as_registered(self, api_client: APIClient):
        """The address typed at registration logs in, whatever its case."""
        api_client.post(
            "/api/auth/register",
            {"name": "Hugo Lima", "email": "Hugo@Example.com", "password": "secret123"},
            format="json",
        )

        response = api_client.post(
            "/api/auth/login",
            {"email": "Hugo@Example.com", "password": "secret123"},
            format="json",
        )
        assert response.status_code == 200
        assert response.data["access"]
