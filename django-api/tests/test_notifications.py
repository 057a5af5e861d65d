"""Integration tests for the notification inbox and service endpoints.

Run with: pytest tests/test_notifications.py -v
"""

import uuid
from unittest.mock import Mock

import pytest

from notifications.domain import NotificationType
from notifications.mailer import Mailer
from notifications.models import Notification
from notifications.services.notification_service import NotificationService
from notifications.stores.django_store import DjangoNotificationStore


@pytest.fixture
def notify(attendee):
    def _notify(user=None, **kwargs):
        return NotificationService(DjangoNotificationStore(), Mailer()).notify(
            (user or attendee).pk,
            NotificationType.PAYMENT_SUCCESS,
            "Payment successful",
            "Your payment was received.",
            **kwargs,
        )

    return _notify


@pytest.mark.django_db
class TestNotificationService:
    """Tests for NotificationService.notify."""

    def test_stringifies_data(self, notify):
        booking_id = uuid.uuid4()

        notification = notify(data={"bookingId": booking_id})

        assert notification.data == {"bookingId": str(booking_id)}
        assert notification.is_read is False

    def test_email_failure_keeps_record(self, attendee):
        mailer = Mock(spec=Mailer)
        mailer.send.side_effect = ConnectionRefusedError("smtp down")
        service = NotificationService(DjangoNotificationStore(), mailer)

        service.notify(
            attendee.pk,
            NotificationType.BOOKING_CANCELLED,
            "Booking cancelled",
            "Cancelled",
            email_to=attendee.email,
        )

        assert Notification.objects.filter(user=attendee).count() == 1


@pytest.mark.django_db
class TestInbox:
    """Tests for GET /api/notifications and PUT /api/notifications/{id}/read"""

    def test_lists_own_notifications(self, notify, client_for, attendee, make_user):
        notify()
        notify()
        notify(user=make_user())

        body = client_for(attendee).get("/api/notifications").json()

        assert body["total"] == 2
        assert body["pagination"]["limit"] == 50
        assert body["notifications"][0]["type"] == "payment_success"

    def test_mark_read(self, notify, client_for, attendee):
        notification = notify()

        response = client_for(attendee).put(f"/api/notifications/{notification.id}/read")

        assert response.status_code == 200
        assert response.json()["notification"]["isRead"] is True
        assert response.json()["notification"]["readAt"] is not None

    def test_cannot_read_someone_elses(self, notify, client_for, make_user):
        notification = notify()

        response = client_for(make_user()).put(f"/api/notifications/{notification.id}/read")

        assert response.status_code == 403

    def test_unknown_notification(self, client_for, attendee):
        response = client_for(attendee).put(f"/api/notifications/{uuid.uuid4()}/read")

        assert response.status_code == 404
        assert response.json()["message"] == "Notification not found"


@pytest.mark.django_db
class TestServiceEndpoints:
    """Tests for health and unknown routes."""

    def test_health(self, api_client):
        response = api_client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "OK"
        assert response.json()["message"] == "EventHub API is running"

    def test_unknown_route(self, api_client):
        response = api_client.get("/api/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Route not found"}
