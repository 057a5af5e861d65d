"""Pytest configuration and shared fixtures."""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.models import User
from accounts.tokens import issue_token
from events.models import Event, TicketType

GATEWAY_SECRET = "test_gateway_secret"


@pytest.fixture(autouse=True)
def test_settings(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
    settings.PAYMENT_GATEWAY = {
        "KEY_ID": "rzp_test_key",
        "KEY_SECRET": GATEWAY_SECRET,
        "CURRENCY": "INR",
    }
    return settings


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def make_user(db):
    counter = iter(range(1, 10_000))

    def _make_user(role: str = User.Role.ATTENDEE, **fields) -> User:
        n = next(counter)
        fields.setdefault("email", f"{role}{n}@example.com")
        fields.setdefault("first_name", "Test")
        fields.setdefault("last_name", f"User{n}")
        fields.setdefault("is_verified", True)
        return User.objects.create_user(password="Secret123", role=role, **fields)

    return _make_user


@pytest.fixture
def attendee(make_user) -> User:
    return make_user(User.Role.ATTENDEE)


@pytest.fixture
def organizer(make_user) -> User:
    return make_user(User.Role.ORGANIZER)


@pytest.fixture
def admin_user(make_user) -> User:
    return make_user(User.Role.ADMIN)


@pytest.fixture
def client_for():
    def _client_for(user: User) -> APIClient:
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(user.pk)}")
        return client

    return _client_for


@pytest.fixture
def make_event(organizer):
    def _make_event(
        tiers: list[dict] | None = None,
        starts_in: timedelta = timedelta(days=10),
        duration: timedelta = timedelta(hours=3),
        **fields,
    ) -> Event:
        start = timezone.now() + starts_in
        fields.setdefault("organizer", organizer)
        fields.setdefault("title", "PyCon Meetup")
        fields.setdefault("description", "An evening of Python talks")
        fields.setdefault("category", "meetup")
        fields.setdefault("status", Event.Status.PUBLISHED)
        fields.setdefault(
            "venue",
            {"type": "physical", "name": "Hall A", "address": {"city": "Pune", "country": "India"}},
        )
        event = Event.objects.create(start_date=start, end_date=start + duration, **fields)
        tiers = tiers or [{"name": "General", "price": "2999", "quantity": 100}]
        for position, tier in enumerate(tiers):
            TicketType.objects.create(
                event=event,
                position=position,
                name=tier["name"],
                price=Decimal(str(tier["price"])),
                quantity=tier["quantity"],
                sold=tier.get("sold", 0),
                max_per_order=tier.get("max_per_order", 10),
            )
        return event

    return _make_event
