"""Integration tests for reviews, votes and moderation.

Run with: pytest tests/test_reviews.py -v
"""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from events.models import Event
from reviews.domain.errors import DuplicateReviewError
from reviews.domain.models import ModerationStatus
from reviews.models import Review
from reviews.stores.django_store import DjangoReviewStore


@pytest.fixture
def attended(client_for, make_event):
    """Book ``user`` onto a new event, then move the event into the past."""

    def _attended(user, event=None):
        event = event or make_event()
        tier = event.ticket_types.get()
        response = client_for(user).post(
            "/api/bookings",
            {
                "eventId": str(event.id),
                "items": [{"ticketTypeId": str(tier.id), "quantity": 1}],
                "attendees": [{"firstName": "Asha", "lastName": "Rao", "email": "asha@example.com"}],
                "paymentMethod": "debit_card",
            },
            format="json",
        )
        start = timezone.now() - timedelta(days=2)
        Event.objects.filter(pk=event.id).update(
            start_date=start, end_date=start + timedelta(hours=3)
        )
        return event, response.data["booking"]["id"]

    return _attended


@pytest.fixture
def post_review(client_for):
    def _post_review(user, event, booking_id, rating=5, **extra):
        payload = {
            "eventId": str(event.id),
            "bookingId": booking_id,
            "rating": rating,
            "comment": "Loved it",
            **extra,
        }
        return client_for(user).post("/api/reviews", payload, format="json")

    return _post_review


@pytest.mark.django_db
class TestCreateReview:
    """Tests for POST /api/reviews"""

    def test_review_after_event_updates_rating(self, attended, post_review, attendee):
        event, booking_id = attended(attendee)

        response = post_review(
            attendee, event, booking_id, rating=4, aspects={"venue": 5, "value": 3}
        )

        assert response.status_code == 201
        review = response.data["review"]
        assert review["isVerified"] is True
        assert review["moderationStatus"] == "approved"
        assert review["aspects"] == {"organization": None, "venue": 5, "content": None, "value": 3}
        event.refresh_from_db()
        assert event.average_rating == Decimal("4.0")
        assert event.total_reviews == 1

    def test_average_rounds_to_one_decimal(self, attended, post_review, make_user, make_event):
        event = make_event()
        for rating in (5, 4, 4):
            user = make_user()
            _, booking_id = attended(user, event)
            post_review(user, event, booking_id, rating=rating)

        event.refresh_from_db()
        assert event.average_rating == Decimal("4.3")
        assert event.total_reviews == 3

    def test_cannot_review_before_event_ends(self, client_for, post_review, attendee, make_event):
        event = make_event()
        tier = event.ticket_types.get()
        booking_id = client_for(attendee).post(
            "/api/bookings",
            {
                "eventId": str(event.id),
                "items": [{"ticketTypeId": str(tier.id), "quantity": 1}],
                "attendees": [{"firstName": "Asha", "lastName": "Rao", "email": "asha@example.com"}],
                "paymentMethod": "paypal",
            },
            format="json",
        ).data["booking"]["id"]

        response = post_review(attendee, event, booking_id)

        assert response.status_code == 400
        assert response.json()["message"] == "Cannot review an event that hasn't ended yet"

    def test_cannot_review_with_someone_elses_booking(self, attended, post_review, attendee, make_user):
        event, booking_id = attended(attendee)

        response = post_review(make_user(), event, booking_id)

        assert response.status_code == 400
        assert response.json()["message"] == "Booking not found or not confirmed"

    def test_one_review_per_event(self, attended, post_review, attendee):
        event, booking_id = attended(attendee)
        post_review(attendee, event, booking_id)

        response = post_review(attendee, event, booking_id, rating=1)

        assert response.status_code == 400
        assert response.json()["message"] == "You have already reviewed this event"
        assert Review.objects.count() == 1

    def test_store_maps_unique_violation_to_duplicate(self, attended, attendee):
        """A second insert for the same user and event surfaces as DuplicateReviewError."""
        event, booking_id = attended(attendee)
        store = DjangoReviewStore()
        fields = dict(
            user_id=attendee.id,
            event_id=event.id,
            booking_id=booking_id,
            rating=5,
            comment="Loved it",
            title="",
            aspects={},
            moderation_status=ModerationStatus.APPROVED,
            is_verified=True,
        )
        store.create(**fields)

        with pytest.raises(DuplicateReviewError):
            store.create(**{**fields, "rating": 2})
        assert Review.objects.count() == 1

    def test_rating_out_of_range(self, attended, post_review, attendee):
        event, booking_id = attended(attendee)

        response = post_review(attendee, event, booking_id, rating=6)

        assert response.status_code == 400
        assert "rating" in response.json()["errors"]


@pytest.mark.django_db
class TestReadReviews:
    """Tests for review listings."""

    def test_event_reviews_with_distribution(self, attended, post_review, api_client, make_user, make_event):
        event = make_event()
        for rating in (5, 5, 3):
            user = make_user()
            _, booking_id = attended(user, event)
            post_review(user, event, booking_id, rating=rating)

        body = api_client.get(f"/api/reviews/event/{event.id}", {"sort": "lowest"}).json()

        assert body["total"] == 3
        assert [r["rating"] for r in body["reviews"]] == [3, 5, 5]
        assert body["ratingDistribution"] == [{"rating": 5, "count": 2}, {"rating": 3, "count": 1}]

    def test_filter_by_rating(self, attended, post_review, api_client, make_user, make_event):
        event = make_event()
        for rating in (5, 2):
            user = make_user()
            _, booking_id = attended(user, event)
            post_review(user, event, booking_id, rating=rating)

        body = api_client.get(f"/api/reviews/event/{event.id}", {"rating": 2}).json()

        assert [r["rating"] for r in body["reviews"]] == [2]

    def test_unknown_event(self, api_client):
        response = api_client.get("/api/reviews/event/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404

    def test_user_reviews(self, attended, post_review, api_client, attendee):
        event, booking_id = attended(attendee)
        post_review(attendee, event, booking_id)

        body = api_client.get(f"/api/reviews/user/{attendee.id}").json()

        assert body["total"] == 1
        assert body["reviews"][0]["event"]["title"] == event.title


@pytest.mark.django_db
class TestChangeReview:
    """Tests for update, delete, vote and report."""

    def test_update_sends_review_back_to_moderation(self, attended, post_review, client_for, attendee):
        event, booking_id = attended(attendee)
        review_id = post_review(attendee, event, booking_id).data["review"]["id"]

        response = client_for(attendee).put(
            f"/api/reviews/{review_id}", {"rating": 2}, format="json"
        )

        assert response.status_code == 200
        assert response.data["review"]["rating"] == 2
        assert response.data["review"]["moderationStatus"] == "pending"
        event.refresh_from_db()
        assert event.total_reviews == 0
        assert event.average_rating == Decimal("0")

    def test_only_author_can_update(self, attended, post_review, client_for, attendee, make_user):
        event, booking_id = attended(attendee)
        review_id = post_review(attendee, event, booking_id).data["review"]["id"]

        response = client_for(make_user()).put(
            f"/api/reviews/{review_id}", {"rating": 1}, format="json"
        )

        assert response.status_code == 404
        assert response.json()["message"] == (
            "Review not found or you don't have permission to update it"
        )

    def test_delete_review(self, attended, post_review, client_for, attendee):
        event, booking_id = attended(attendee)
        review_id = post_review(attendee, event, booking_id).data["review"]["id"]

        response = client_for(attendee).delete(f"/api/reviews/{review_id}")

        assert response.status_code == 200
        assert not Review.objects.exists()
        event.refresh_from_db()
        assert event.total_reviews == 0

    def test_votes_never_go_negative(self, attended, post_review, client_for, attendee, make_user):
        event, booking_id = attended(attendee)
        review_id = post_review(attendee, event, booking_id).data["review"]["id"]
        voter = client_for(make_user())
        url = f"/api/reviews/{review_id}/vote"

        assert voter.post(url, {"helpful": True}, format="json").json()["helpfulVotes"] == 1
        assert voter.post(url, {"helpful": False}, format="json").json()["helpfulVotes"] == 0
        assert voter.post(url, {"helpful": False}, format="json").json()["helpfulVotes"] == 0

    def test_vote_requires_boolean(self, attended, post_review, client_for, attendee):
        event, booking_id = attended(attendee)
        review_id = post_review(attendee, event, booking_id).data["review"]["id"]

        response = client_for(attendee).post(
            f"/api/reviews/{review_id}/vote", {"helpful": "yes"}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["errors"]["helpful"] == ["Helpful must be a boolean value"]

    def test_report(self, attended, post_review, client_for, attendee, make_user):
        event, booking_id = attended(attendee)
        review_id = post_review(attendee, event, booking_id).data["review"]["id"]

        response = client_for(make_user()).post(
            f"/api/reviews/{review_id}/report", {"reason": "Spam"}, format="json"
        )

        assert response.status_code == 200
        assert Review.objects.get().report_count == 1

    def test_anonymous_visitors_can_vote_and_report(self, attended, post_review, api_client, attendee):
        event, booking_id = attended(attendee)
        review_id = post_review(attendee, event, booking_id).data["review"]["id"]

        vote = api_client.post(f"/api/reviews/{review_id}/vote", {"helpful": True}, format="json")
        report = api_client.post(f"/api/reviews/{review_id}/report", {}, format="json")

        assert vote.status_code == 200
        assert vote.json()["helpfulVotes"] == 1
        assert report.status_code == 200
        assert Review.objects.get().report_count == 1


@pytest.mark.django_db
class TestModeration:
    """Tests for the admin moderation queue."""

    def test_queue_and_approve(self, attended, post_review, client_for, attendee, admin_user):
        event, booking_id = attended(attendee)
        review_id = post_review(attendee, event, booking_id, rating=3).data["review"]["id"]
        client_for(attendee).put(f"/api/reviews/{review_id}", {"rating": 4}, format="json")
        admin = client_for(admin_user)

        queue = admin.get("/api/reviews/admin/pending").json()
        assert [r["id"] for r in queue["reviews"]] == [review_id]

        response = admin.put(
            f"/api/reviews/admin/{review_id}/moderate",
            {"moderationStatus": "approved", "moderationNotes": "Fine"},
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Review approved successfully"
        assert response.data["review"]["moderationNotes"] == "Fine"
        event.refresh_from_db()
        assert event.average_rating == Decimal("4.0")
        assert event.total_reviews == 1

    def test_invalid_status(self, attended, post_review, client_for, attendee, admin_user):
        event, booking_id = attended(attendee)
        review_id = post_review(attendee, event, booking_id).data["review"]["id"]

        response = client_for(admin_user).put(
            f"/api/reviews/admin/{review_id}/moderate",
            {"moderationStatus": "maybe"},
            format="json",
        )

        assert response.status_code == 400

    def test_non_admin_refused(self, client_for, organizer):
        response = client_for(organizer).get("/api/reviews/admin/pending")

        assert response.status_code == 403
