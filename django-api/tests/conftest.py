"""Pytest configuration and shared fixtures."""

import itertools
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

_sequence = itertools.count(1)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_user():
    """Create users; the test must have database access."""
    from accounts.models import Role, User

    def _make(role=Role.BUYER, **kwargs):
        n = next(_sequence)
        kwargs.setdefault("email", f"user{n}@example.com")
        kwargs.setdefault("name", f"User {n}")
        return User.objects.create_user(password="secret123", role=role, **kwargs)

    return _make


@pytest.fixture
def buyer(make_user):
    return make_user()


@pytest.fixture
def promoter(make_user):
    from accounts.models import Role

    return make_user(role=Role.PROMOTER)


@pytest.fixture
def make_event(promoter):
    """Create event rows directly, bypassing the service layer."""
    from events.models import Event

    def _make(total=50, available=None, **kwargs):
        kwargs.setdefault("name", "Summer Festival")
        kwargs.setdefault("description", "Three days of live music by the lake.")
        kwargs.setdefault("starts_at", timezone.now() + timedelta(days=30))
        kwargs.setdefault("location", "Lakeside Park, Porto Alegre")
        kwargs.setdefault("image_url", "https://example.com/festival.jpg")
        kwargs.setdefault("price", Decimal("120.00"))
        kwargs.setdefault("promoter", promoter)
        return Event.objects.create(
            total=total,
            available=total if available is None else available,
            **kwargs,
        )

    return _make
