"""Review engine.

An event's ``average_rating``/``total_reviews`` aggregate is recomputed from
approved public reviews after every change that can affect it.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID

from django.utils import timezone

from accounts.domain.errors import UserNotFoundError
from bookings.services.booking_service import parse_booking_id
from bookings.stores.interfaces import BookingStore
from common.domain.models import Actor, Page, PageRequest
from events.domain import EventId, EventStatus
from events.domain.errors import EventNotFoundError
from events.services.event_service import parse_event_id
from events.stores.interfaces import EventStore
from reviews.domain import ModerationStatus, Review, ReviewSort
from reviews.domain.errors import (
    DuplicateReviewError,
    InvalidModerationStatusError,
    ReviewNotAllowedError,
    ReviewNotFoundError,
)
from reviews.stores.interfaces import ReviewStore

logger = logging.getLogger(__name__)

ONE_DECIMAL = Decimal("0.1")


@dataclass(frozen=True)
class EventReviews:
    page: Page[Review]
    rating_distribution: list[dict]


def parse_review_id(value: str | UUID) -> UUID:
    try:
        return UUID(str(value))
    except ValueError:
        raise ReviewNotFoundError() from None


class ReviewService:
    def __init__(self, store: ReviewStore, bookings: BookingStore, events: EventStore) -> None:
        self._store = store
        self._bookings = bookings
        self._events = events

    @staticmethod
    def _now() -> datetime:
        return timezone.now()

    def recompute_rating(self, event_id: UUID) -> None:
        average, total = self._store.rating_summary(event_id)
        if not total:
            average = Decimal("0")
        else:
            average = average.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)
        self._events.set_rating(EventId(event_id), average, total)
        logger.debug("Event %s rating now %s over %d reviews", event_id, average, total)

    def create_review(
        self,
        actor: Actor,
        event_id: str | UUID,
        booking_id: str | UUID,
        rating: int,
        comment: str,
        title: str = "",
        aspects: dict | None = None,
    ) -> Review:
        eid = parse_event_id(event_id)
        bid = parse_booking_id(booking_id)
        if not self._bookings.has_confirmed_booking(actor.id, eid.value, bid):
            raise ReviewNotAllowedError("Booking not found or not confirmed")

        event = self._events.get_event(eid)
        if event is None:
            raise EventNotFoundError(str(eid.value))
        if event.status is not EventStatus.COMPLETED and not event.has_ended(self._now()):
            raise ReviewNotAllowedError("Cannot review an event that hasn't ended yet")
        if self._store.exists_for(actor.id, eid.value):
            raise DuplicateReviewError()

        review = self._store.create(
            user_id=actor.id,
            event_id=eid.value,
            booking_id=bid,
            rating=rating,
            comment=comment,
            title=title,
            aspects=aspects or {},
            moderation_status=ModerationStatus.APPROVED,
            is_verified=True,
        )
        self.recompute_rating(eid.value)
        logger.info("Review %s created for event %s", review.id, eid.value)
        return review

    def list_event_reviews(
        self, event_id: str | UUID, sort: str, rating: int | None, page: PageRequest
    ) -> EventReviews:
        eid = parse_event_id(event_id)
        if not self._events.event_exists(eid):
            raise EventNotFoundError(str(eid.value))
        try:
            order = ReviewSort(sort)
        except ValueError:
            order = ReviewSort.NEWEST
        return EventReviews(
            page=self._store.list_for_event(eid.value, order, rating, page),
            rating_distribution=self._store.rating_distribution(eid.value),
        )

    def list_user_reviews(self, user_id: str | UUID, page: PageRequest) -> Page[Review]:
        try:
            uid = UUID(str(user_id))
        except ValueError:
            raise UserNotFoundError() from None
        if not self._store.user_exists(uid):
            raise UserNotFoundError()
        return self._store.list_for_user(uid, page)

    def _get_owned(self, actor: Actor, review_id: str | UUID, action: str) -> Review:
        message = f"Review not found or you don't have permission to {action} it"
        try:
            rid = UUID(str(review_id))
        except ValueError:
            raise ReviewNotFoundError(message) from None
        review = self._store.get(rid)
        if review is None or review.user_id != actor.id:
            raise ReviewNotFoundError(message)
        return review

    def update_review(self, actor: Actor, review_id: str | UUID, changes: dict) -> Review:
        """Apply ``changes``; an edited review goes back to moderation."""
        review = self._get_owned(actor, review_id, "update")
        updated = self._store.update(
            review.id, moderation_status=ModerationStatus.PENDING, **changes
        )
        self.recompute_rating(review.event_id)
        return updated

    def delete_review(self, actor: Actor, review_id: str | UUID) -> None:
        review = self._get_owned(actor, review_id, "delete")
        self._store.delete(review.id)
        self.recompute_rating(review.event_id)
        logger.info("Review %s deleted by %s", review.id, actor.id)

    def vote(self, review_id: str | UUID, helpful: bool) -> int:
        votes = self._store.adjust_helpful_votes(parse_review_id(review_id), helpful)
        if votes is None:
            raise ReviewNotFoundError()
        return votes

    def report(self, review_id: str | UUID, reason: str | None = None) -> None:
        rid = parse_review_id(review_id)
        if not self._store.increment_reports(rid):
            raise ReviewNotFoundError()
        logger.info("Review %s reported: %s", rid, reason or "no reason given")

    def moderate(
        self, actor: Actor, review_id: str | UUID, status: str, notes: str | None = None
    ) -> Review:
        try:
            moderation_status = ModerationStatus(status)
        except ValueError:
            raise InvalidModerationStatusError() from None
        review = self._store.get(parse_review_id(review_id))
        if review is None:
            raise ReviewNotFoundError()

        changes = {"moderation_status": moderation_status}
        if notes:
            changes["moderation_notes"] = notes
        moderated = self._store.update(review.id, **changes)
        if moderation_status is not ModerationStatus.PENDING:
            self.recompute_rating(review.event_id)
        logger.info("Review %s %s by %s", review.id, moderation_status.value, actor.id)
        return moderated

    def list_for_moderation(self, status: str | None, page: PageRequest) -> Page[Review]:
        if not status or status == "all":
            return self._store.list_by_moderation(None, page)
        try:
            return self._store.list_by_moderation(ModerationStatus(status), page)
        except ValueError:
            raise InvalidModerationStatusError() from None
