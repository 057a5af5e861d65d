"""Unit tests for the service layer.

These test error handling and domain error mapping against mocked stores.
Run with: pytest tests/test_services.py -v
"""

import uuid
from datetime import timedelta
from decimal import Decimal
from unittest.mock import MagicMock, Mock

import pytest
from django.utils import timezone

from bookings.domain import Booking, BookingStatus, LineItem, PaymentStatus
from bookings.domain.errors import (
    BookingAccessDeniedError,
    BookingAlreadyCancelledError,
    CancellationWindowClosedError,
    InvalidBookingIdError,
)
from bookings.services.booking_service import BookingService
from bookings.stores.interfaces import BookingStore
from common.domain.errors import InvalidInputError
from common.domain.models import Actor, PageRequest, Role
from events.domain import EventId, TicketTypeId
from events.domain.errors import EventNotFoundError, InvalidEventDatesError, InvalidEventIdError
from events.services.event_service import EventService
from events.stores.interfaces import EventStore
from notifications.services.notification_service import NotificationService
from reviews.domain.errors import InvalidModerationStatusError, ReviewNotAllowedError
from reviews.services.review_service import ReviewService
from reviews.stores.interfaces import ReviewStore

OWNER = Actor(id=uuid.uuid4(), role=Role.ATTENDEE)
ORGANIZER = Actor(id=uuid.uuid4(), role=Role.ORGANIZER)
STRANGER = Actor(id=uuid.uuid4(), role=Role.ATTENDEE)


def make_booking(status=BookingStatus.CONFIRMED, starts_in=timedelta(days=5)):
    now = timezone.now()
    item = LineItem(
        ticket_type_id=TicketTypeId(uuid.uuid4()),
        ticket_type_name="General",
        price=Decimal("2999"),
        quantity=2,
        subtotal=Decimal("5998"),
    )
    return Booking(
        id=uuid.uuid4(),
        booking_number="BKTEST0001",
        user_id=OWNER.id,
        event_id=uuid.uuid4(),
        event_organizer_id=ORGANIZER.id,
        event_title="PyCon Meetup",
        event_start_date=now + starts_in,
        items=(item,),
        attendees=(),
        total_amount=Decimal("5998"),
        platform_fee=Decimal("179.94"),
        processing_fee=Decimal("2.50"),
        final_amount=Decimal("6180.44"),
        status=status,
        payment_status=PaymentStatus.COMPLETED,
        payment_method="card",
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def event_store():
    store = Mock(spec=EventStore)
    store.atomic.return_value = MagicMock()
    return store


@pytest.fixture
def booking_store():
    store = Mock(spec=BookingStore)
    store.atomic.return_value = MagicMock()
    return store


@pytest.fixture
def booking_service(booking_store, event_store):
    return BookingService(booking_store, event_store, Mock(spec=NotificationService))


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self, event_store):
        """get_event raises InvalidEventIdError for malformed UUID."""
        with pytest.raises(InvalidEventIdError):
            EventService(event_store).get_event("not-a-uuid")
        event_store.event_exists.assert_not_called()

    def test_get_event_not_found_raises_error(self, event_store):
        """get_event raises EventNotFoundError when the store has no such event."""
        event_store.event_exists.return_value = False
        with pytest.raises(EventNotFoundError):
            EventService(event_store).get_event(str(uuid.uuid4()))
        event_store.increment_views.assert_not_called()

    def test_search_requires_query(self, event_store):
        with pytest.raises(InvalidInputError) as exc:
            EventService(event_store).search("", PageRequest())
        assert exc.value.message == "Search query is required"

    def test_create_event_rejects_past_start(self, event_store):
        start = timezone.now() - timedelta(hours=1)
        fields = {"start_date": start, "end_date": start + timedelta(hours=2)}
        with pytest.raises(InvalidEventDatesError) as exc:
            EventService(event_store).create_event(ORGANIZER, fields, [{"name": "General"}])
        assert exc.value.message == "Start date must be in the future"
        event_store.create_event.assert_not_called()

    def test_create_event_requires_ticket_types(self, event_store):
        start = timezone.now() + timedelta(days=1)
        fields = {"start_date": start, "end_date": start + timedelta(hours=2)}
        with pytest.raises(InvalidInputError):
            EventService(event_store).create_event(ORGANIZER, fields, [])

    def test_list_events_completes_ended_events_first(self, event_store):
        event_store.complete_ended_events.return_value = 2
        EventService(event_store).list_events(Mock(), PageRequest())
        event_store.complete_ended_events.assert_called_once()
        event_store.list_events.assert_called_once()


class TestBookingService:
    """Tests for BookingService cancellation rules."""

    def test_invalid_booking_id(self, booking_service):
        with pytest.raises(InvalidBookingIdError):
            booking_service.get_booking(OWNER, "abc")

    def test_stranger_cannot_view(self, booking_service, booking_store):
        booking_store.get_booking.return_value = make_booking()
        with pytest.raises(BookingAccessDeniedError):
            booking_service.get_booking(STRANGER, str(uuid.uuid4()))

    def test_owner_blocked_inside_cutoff(self, booking_service, booking_store):
        booking_store.get_booking.return_value = make_booking(starts_in=timedelta(hours=10))
        with pytest.raises(CancellationWindowClosedError):
            booking_service.cancel_booking(OWNER, str(uuid.uuid4()))
        booking_store.transition.assert_not_called()

    def test_organizer_may_cancel_inside_cutoff(self, booking_service, booking_store, event_store):
        booking = make_booking(starts_in=timedelta(hours=10))
        booking_store.get_booking.return_value = booking
        booking_store.transition.return_value = booking
        event_store.release_tickets.return_value = True

        booking_service.cancel_booking(ORGANIZER, str(booking.id))

        changes = booking_store.transition.call_args.kwargs
        assert changes["status"] is BookingStatus.CANCELLED
        assert changes["payment_status"] is PaymentStatus.REFUNDED
        assert changes["refund_details"]["refundReason"] == "Cancelled by organizer"
        event_store.release_tickets.assert_called_once_with(
            EventId(booking.event_id), booking.items[0].ticket_type_id, 2
        )

    def test_pending_booking_cancel_releases_nothing(self, booking_service, booking_store, event_store):
        booking = make_booking(status=BookingStatus.PENDING)
        booking_store.get_booking.return_value = booking
        booking_store.transition.return_value = booking

        booking_service.cancel_booking(OWNER, str(booking.id))

        event_store.release_tickets.assert_not_called()

    def test_cancelled_booking_cannot_be_cancelled_again(self, booking_service, booking_store):
        booking_store.get_booking.return_value = make_booking(status=BookingStatus.CANCELLED)
        with pytest.raises(BookingAlreadyCancelledError):
            booking_service.cancel_booking(OWNER, str(uuid.uuid4()))


class TestReviewService:
    """Tests for ReviewService aggregate and moderation rules."""

    @pytest.fixture
    def review_store(self):
        return Mock(spec=ReviewStore)

    def test_recompute_rounds_to_one_decimal(self, review_store, booking_store, event_store):
        event_id = uuid.uuid4()
        review_store.rating_summary.return_value = (Decimal("4.25"), 4)
        ReviewService(review_store, booking_store, event_store).recompute_rating(event_id)
        event_store.set_rating.assert_called_once_with(EventId(event_id), Decimal("4.3"), 4)

    def test_recompute_without_reviews_resets(self, review_store, booking_store, event_store):
        event_id = uuid.uuid4()
        review_store.rating_summary.return_value = (None, 0)
        ReviewService(review_store, booking_store, event_store).recompute_rating(event_id)
        event_store.set_rating.assert_called_once_with(EventId(event_id), Decimal("0"), 0)

    def test_review_requires_confirmed_booking(self, review_store, booking_store, event_store):
        booking_store.has_confirmed_booking.return_value = False
        service = ReviewService(review_store, booking_store, event_store)
        with pytest.raises(ReviewNotAllowedError):
            service.create_review(OWNER, str(uuid.uuid4()), str(uuid.uuid4()), 5, "Great")
        review_store.create.assert_not_called()

    def test_unknown_moderation_status(self, review_store, booking_store, event_store):
        service = ReviewService(review_store, booking_store, event_store)
        with pytest.raises(InvalidModerationStatusError):
            service.moderate(ORGANIZER, str(uuid.uuid4()), "maybe")
