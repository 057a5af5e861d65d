"""Event service - catalog business logic.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Ended events are completed lazily: every read path flips published events
whose end date has passed before it answers.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from uuid import UUID

from django.utils import timezone

from common.domain.errors import InvalidInputError
from common.domain.models import Actor, Page, PageRequest
from events.domain import CATEGORIES, Event, EventFilters, EventId, SalesSummary
from events.domain.errors import (
    EventAccessDeniedError,
    EventHasBookingsError,
    EventNotFoundError,
    InvalidEventDatesError,
    InvalidEventIdError,
)
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventAnalytics:
    event: Event
    sales: SalesSummary


def parse_event_id(value: str | UUID) -> EventId:
    try:
        return EventId.from_string(value)
    except (TypeError, ValueError):
        raise InvalidEventIdError() from None


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    @staticmethod
    def _now() -> datetime:
        return timezone.now()

    def list_events(self, filters: EventFilters, page: PageRequest) -> Page[Event]:
        completed = self._store.complete_ended_events(self._now())
        if completed:
            logger.info("Marked %d ended events completed", completed)
        return self._store.list_events(filters, page)

    def get_event(self, event_id: str | UUID) -> Event:
        """Return an event by ID, counting the view.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        eid = parse_event_id(event_id)
        if not self._store.event_exists(eid):
            raise EventNotFoundError(str(eid.value))
        self._store.increment_views(eid)
        self._store.complete_event_if_ended(eid, self._now())
        return self._store.get_event(eid)

    def categories(self) -> list[dict]:
        return [{"value": value, "label": label} for value, label in CATEGORIES]

    def search(
        self,
        query: str | None,
        page: PageRequest,
        location: str | None = None,
        category: str | None = None,
        on_date: date | None = None,
    ) -> Page[Event]:
        if not query:
            raise InvalidInputError("Search query is required")
        starts_after = starts_before = None
        if on_date is not None:
            starts_after = timezone.make_aware(datetime.combine(on_date, time.min))
            starts_before = starts_after + timedelta(days=1, microseconds=-1)
        filters = EventFilters(
            text=query,
            location=location,
            category=category,
            starts_after=starts_after,
            starts_before=starts_before,
        )
        return self._store.list_events(filters, page)

    def create_event(self, actor: Actor, fields: dict, ticket_types: list[dict]) -> Event:
        if not ticket_types:
            raise InvalidInputError("At least one ticket type is required")
        start, end = fields["start_date"], fields["end_date"]
        if end <= start:
            raise InvalidEventDatesError("End date must be after start date")
        if start <= self._now():
            raise InvalidEventDatesError("Start date must be in the future")

        event = self._store.create_event(actor.id, fields, ticket_types)
        logger.info("Event %s created by %s", event.id.value, actor.id)
        return event

    def _get_managed(self, actor: Actor, event_id: str | UUID, action: str) -> Event:
        eid = parse_event_id(event_id)
        event = self._store.get_event(eid)
        if event is None:
            raise EventNotFoundError(str(eid.value))
        if not event.is_managed_by(actor):
            raise EventAccessDeniedError(action)
        return event

    def update_event(
        self,
        actor: Actor,
        event_id: str | UUID,
        fields: dict,
        ticket_types: list[dict] | None = None,
    ) -> Event:
        event = self._get_managed(actor, event_id, "update this event")

        if "start_date" in fields or "end_date" in fields:
            start = fields.get("start_date", event.start_date)
            end = fields.get("end_date", event.end_date)
            if end <= start:
                raise InvalidEventDatesError("End date must be after start date")

        if ticket_types is not None:
            if not ticket_types:
                raise InvalidInputError("At least one ticket type is required")
            for data in ticket_types:
                self._check_tier_update(event, data)

        return self._store.update_event(event.id, fields, ticket_types)

    @staticmethod
    def _check_tier_update(event: Event, data: dict) -> None:
        current = None
        for ticket_type in event.ticket_types:
            if ticket_type.id.value == data.get("id"):
                current = ticket_type
        if current is not None and data.get("quantity", current.quantity.value) < current.sold:
            raise InvalidInputError(
                f"Quantity for {current.name} cannot be less than the {current.sold} tickets sold"
            )

    def delete_event(self, actor: Actor, event_id: str | UUID) -> None:
        event = self._get_managed(actor, event_id, "delete this event")
        if self._store.has_confirmed_bookings(event.id):
            raise EventHasBookingsError()
        self._store.delete_event(event.id)
        logger.info("Event %s deleted by %s", event.id.value, actor.id)

    def my_events(self, actor: Actor, status: str | None, page: PageRequest) -> Page[Event]:
        self._store.complete_ended_events(self._now())
        filters = EventFilters(status=status or None, organizer_id=actor.id)
        return self._store.list_events(filters, page)

    def analytics(self, actor: Actor, event_id: str | UUID) -> EventAnalytics:
        event = self._get_managed(actor, event_id, "view analytics for this event")
        return EventAnalytics(event=event, sales=self._store.sales_summary(event.id))
