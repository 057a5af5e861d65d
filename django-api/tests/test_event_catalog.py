"""Integration tests for the event catalog.

Run with: pytest tests/test_event_catalog.py -v
"""

import uuid
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from bookings.models import Booking
from events.models import Event


def event_payload(**overrides) -> dict:
    start = timezone.now() + timedelta(days=30)
    payload = {
        "title": "Data Summit",
        "description": "Talks on data engineering",
        "category": "conference",
        "startDate": start.isoformat(),
        "endDate": (start + timedelta(hours=8)).isoformat(),
        "venue": {"type": "physical", "name": "Expo Centre", "address": {"city": "Mumbai"}},
        "status": "published",
        "ticketTypes": [
            {"name": "Early Bird", "price": "999.00", "quantity": 50, "maxPerOrder": 4},
            {"name": "Regular", "price": "1499.00", "quantity": 200},
        ],
    }
    payload.update(overrides)
    return payload


@pytest.mark.django_db
class TestEventList:
    """Tests for GET /api/events"""

    def test_list_events_returns_paginated_results(self, api_client: APIClient, make_event):
        """Given published events exist, returns paginated list."""
        make_event(title="First")
        make_event(title="Second")
        make_event(title="Hidden", status=Event.Status.DRAFT)

        response = api_client.get("/api/events", {"limit": 1})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["total"] == 2
        assert body["count"] == 1
        assert body["pagination"] == {"page": 1, "limit": 1, "pages": 2}
        assert body["events"][0]["title"] == "Second"

    def test_list_events_empty_catalog(self, api_client: APIClient):
        """Given no events, returns empty list."""
        response = api_client.get("/api/events")

        assert response.status_code == 200
        assert response.json()["events"] == []
        assert response.json()["total"] == 0

    def test_ended_events_are_completed_on_read(self, api_client: APIClient, make_event):
        """Given a published event that has ended, listing marks it completed."""
        ended = make_event(starts_in=-timedelta(hours=5), duration=timedelta(hours=2))

        response = api_client.get("/api/events")

        assert response.json()["total"] == 0
        ended.refresh_from_db()
        assert ended.status == Event.Status.COMPLETED

    def test_filter_by_category_and_location(self, api_client: APIClient, make_event):
        make_event(title="Pune meetup")
        make_event(
            title="Goa concert",
            category="concert",
            venue={"type": "physical", "address": {"city": "Panaji", "state": "Goa"}},
        )

        by_category = api_client.get("/api/events", {"category": "concert"}).json()
        by_location = api_client.get("/api/events", {"location": "goa"}).json()

        assert [e["title"] for e in by_category["events"]] == ["Goa concert"]
        assert [e["title"] for e in by_location["events"]] == ["Goa concert"]

    def test_invalid_page_rejected(self, api_client: APIClient):
        response = api_client.get("/api/events", {"page": "0"})

        assert response.status_code == 400
        assert response.json()["success"] is False


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET /api/events/{id}"""

    def test_get_event_counts_view(self, api_client: APIClient, make_event):
        """Given an existing event, returns it with computed totals and counts the view."""
        event = make_event(tiers=[{"name": "General", "price": "2999", "quantity": 100, "sold": 25}])

        response = api_client.get(f"/api/events/{event.id}")

        assert response.status_code == 200
        data = response.data["event"]
        assert data["views"] == 1
        assert data["totalTicketsSold"] == 25
        assert data["availableTickets"] == 75
        assert data["ticketTypes"][0]["price"] == Decimal("2999.00")
        assert data["organizer"]["id"] == str(event.organizer_id)

    def test_get_event_invalid_id(self, api_client: APIClient):
        """Given a malformed id, returns 400."""
        response = api_client.get("/api/events/not-a-uuid")

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid event ID format"}

    def test_get_event_not_found(self, api_client: APIClient):
        """Given an unknown id, returns 404."""
        response = api_client.get(f"/api/events/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["message"] == "Event not found"

    def test_categories(self, api_client: APIClient):
        response = api_client.get("/api/events/categories")

        assert response.status_code == 200
        assert {"value": "concert", "label": "Concert"} in response.json()["categories"]


@pytest.mark.django_db
class TestEventSearch:
    """Tests for GET /api/events/search"""

    def test_search_requires_query(self, api_client: APIClient):
        response = api_client.get("/api/events/search")

        assert response.status_code == 400
        assert response.json()["message"] == "Search query is required"

    def test_search_matches_title_and_description(self, api_client: APIClient, make_event):
        make_event(title="Rust Night", description="Systems programming")
        make_event(title="Design Jam", description="Figma and rust-coloured posters")
        make_event(title="Yoga", description="Stretching")

        response = api_client.get("/api/events/search", {"q": "rust"})

        assert response.status_code == 200
        assert response.json()["total"] == 2

    def test_search_by_date(self, api_client: APIClient, make_event):
        event = make_event(title="Dated talk")
        make_event(title="Other talk", starts_in=timedelta(days=20))

        day = timezone.localtime(event.start_date).date().isoformat()
        response = api_client.get("/api/events/search", {"q": "talk", "date": day})

        assert [e["title"] for e in response.json()["events"]] == ["Dated talk"]


@pytest.mark.django_db
class TestEventManagement:
    """Tests for organizer create/update/delete/analytics."""

    def test_organizer_creates_event(self, client_for, organizer):
        response = client_for(organizer).post("/api/events", event_payload(), format="json")

        assert response.status_code == 201
        event = response.data["event"]
        assert event["organizer"]["id"] == str(organizer.id)
        assert [t["name"] for t in event["ticketTypes"]] == ["Early Bird", "Regular"]
        assert event["ticketTypes"][0]["maxPerOrder"] == 4
        assert event["ticketTypes"][1]["maxPerOrder"] == 10

    def test_attendee_cannot_create_event(self, client_for, attendee):
        response = client_for(attendee).post("/api/events", event_payload(), format="json")

        assert response.status_code == 403
        assert response.json()["message"] == "User role attendee is not authorized to access this route"

    def test_create_rejects_end_before_start(self, client_for, organizer):
        start = timezone.now() + timedelta(days=3)
        payload = event_payload(
            startDate=start.isoformat(), endDate=(start - timedelta(hours=1)).isoformat()
        )

        response = client_for(organizer).post("/api/events", payload, format="json")

        assert response.status_code == 400
        assert response.json()["message"] == "End date must be after start date"

    def test_create_requires_ticket_types(self, client_for, organizer):
        response = client_for(organizer).post(
            "/api/events", event_payload(ticketTypes=[]), format="json"
        )

        assert response.status_code == 400
        assert response.json()["message"] == "At least one ticket type is required"

    def test_create_rejects_unknown_venue_type(self, client_for, organizer):
        response = client_for(organizer).post(
            "/api/events", event_payload(venue={"type": "moon"}), format="json"
        )

        assert response.status_code == 400
        assert "venue" in response.json()["errors"]

    def test_update_event_title(self, client_for, make_event, organizer):
        event = make_event()

        response = client_for(organizer).put(
            f"/api/events/{event.id}", {"title": "Renamed"}, format="json"
        )

        assert response.status_code == 200
        assert response.data["event"]["title"] == "Renamed"

    def test_update_cannot_shrink_below_sold(self, client_for, make_event, organizer):
        event = make_event(tiers=[{"name": "General", "price": "100", "quantity": 50, "sold": 30}])
        tier = event.ticket_types.get()

        response = client_for(organizer).put(
            f"/api/events/{event.id}",
            {"ticketTypes": [{"id": str(tier.id), "name": "General", "price": "100", "quantity": 20}]},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Quantity for General cannot be less than the 30 tickets sold"
        )

    def test_other_organizer_cannot_update(self, client_for, make_event, make_user):
        event = make_event()
        rival = make_user("organizer")

        response = client_for(rival).put(
            f"/api/events/{event.id}", {"title": "Mine now"}, format="json"
        )

        assert response.status_code == 403

    def test_delete_event(self, client_for, make_event, organizer):
        event = make_event()

        response = client_for(organizer).delete(f"/api/events/{event.id}")

        assert response.status_code == 200
        assert response.json()["message"] == "Event deleted successfully"
        assert not Event.objects.filter(pk=event.id).exists()

    def test_delete_refused_with_confirmed_bookings(self, client_for, make_event, organizer, attendee):
        event = make_event()
        tier = event.ticket_types.get()
        client_for(attendee).post(
            "/api/bookings",
            {
                "eventId": str(event.id),
                "items": [{"ticketTypeId": str(tier.id), "quantity": 1}],
                "attendees": [{"firstName": "Asha", "lastName": "Rao", "email": "asha@example.com"}],
                "paymentMethod": "credit_card",
            },
            format="json",
        )
        assert Booking.objects.filter(event=event).exists()

        response = client_for(organizer).delete(f"/api/events/{event.id}")

        assert response.status_code == 400
        assert response.json()["message"] == "Cannot delete event with confirmed bookings"

    def test_my_events_lists_drafts(self, client_for, make_event, organizer):
        make_event(status=Event.Status.DRAFT)
        make_event()

        response = client_for(organizer).get("/api/events/organizer/my-events")

        assert response.json()["total"] == 2

    def test_analytics(self, client_for, make_event, organizer):
        event = make_event(tiers=[{"name": "General", "price": "500", "quantity": 10, "sold": 4}])

        response = client_for(organizer).get(f"/api/events/{event.id}/analytics")

        assert response.status_code == 200
        analytics = response.data["analytics"]
        assert analytics["overview"]["totalBookings"] == 0
        assert analytics["ticketSales"] == [
            {"name": "General", "sold": 4, "revenue": Decimal("2000"), "remaining": 6}
        ]
