"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import ContextManager
from uuid import UUID

from common.domain.models import Page, PageRequest
from events.domain import (
    Event,
    EventFilters,
    EventId,
    OrganizerStats,
    SalesSummary,
    TicketTypeId,
)


class EventStore(ABC):
    """Interface for catalog persistence operations."""

    @abstractmethod
    def atomic(self) -> ContextManager:
        """Return a context manager that commits or rolls back as one unit."""
        ...

    @abstractmethod
    def list_events(self, filters: EventFilters, page: PageRequest) -> Page[Event]:
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event with its ticket types, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        ...

    @abstractmethod
    def complete_ended_events(self, now: datetime) -> int:
        """Flip every published event whose end date has passed to completed."""
        ...

    @abstractmethod
    def complete_event_if_ended(self, event_id: EventId, now: datetime) -> bool:
        ...

    @abstractmethod
    def increment_views(self, event_id: EventId) -> None:
        ...

    @abstractmethod
    def create_event(self, organizer_id: UUID, fields: dict, ticket_types: list[dict]) -> Event:
        ...

    @abstractmethod
    def update_event(
        self, event_id: EventId, fields: dict, ticket_types: list[dict] | None
    ) -> Event:
        """Apply field changes; when ``ticket_types`` is given it replaces the tier list."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> None:
        ...

    @abstractmethod
    def has_confirmed_bookings(self, event_id: EventId) -> bool:
        ...

    @abstractmethod
    def reserve_tickets(self, event_id: EventId, ticket_type_id: TicketTypeId, quantity: int) -> bool:
        """Add ``quantity`` to the tier's sold counter if it stays within quantity.

        Returns False, leaving the counter untouched, when it would not.
        """
        ...

    @abstractmethod
    def release_tickets(self, event_id: EventId, ticket_type_id: TicketTypeId, quantity: int) -> bool:
        """Subtract ``quantity`` from the tier's sold counter, never below zero."""
        ...

    @abstractmethod
    def set_rating(self, event_id: EventId, average: Decimal, total: int) -> None:
        ...

    @abstractmethod
    def sales_summary(self, event_id: EventId) -> SalesSummary:
        """Totals over the event's confirmed bookings."""
        ...

    @abstractmethod
    def organizer_stats(self, organizer_id: UUID, now: datetime) -> OrganizerStats:
        ...
