"""Domain models representing persisted catalog state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID

from common.domain.models import Actor
from events.domain.value_objects import Capacity, EventId, Money, TicketTypeId

CATEGORIES = (
    ("conference", "Conference"),
    ("workshop", "Workshop"),
    ("seminar", "Seminar"),
    ("networking", "Networking"),
    ("concert", "Concert"),
    ("festival", "Festival"),
    ("sports", "Sports"),
    ("exhibition", "Exhibition"),
    ("webinar", "Webinar"),
    ("meetup", "Meetup"),
    ("other", "Other"),
)


class EventStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a ticket tier."""

    id: TicketTypeId
    event_id: EventId
    name: str
    price: Money
    quantity: Capacity
    sold: int
    max_per_order: int
    description: str = ""
    sale_start_date: datetime | None = None
    sale_end_date: datetime | None = None

    @property
    def available(self) -> int:
        return max(0, self.quantity.value - self.sold)

    @property
    def revenue(self) -> Decimal:
        return self.price.amount * self.sold

    def can_sell(self, quantity: int) -> bool:
        return self.sold + quantity <= self.quantity.value


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event and its ticket tiers."""

    id: EventId
    organizer_id: UUID
    title: str
    description: str
    category: str
    start_date: datetime
    end_date: datetime
    status: EventStatus
    created_at: datetime
    updated_at: datetime
    organizer_name: str = ""
    short_description: str = ""
    tags: tuple[str, ...] = ()
    timezone: str = "UTC"
    venue: dict = field(default_factory=dict)
    images: tuple[dict, ...] = ()
    capacity: int | None = None
    is_public: bool = True
    requires_approval: bool = False
    refund_policy: str = ""
    additional_info: str = ""
    average_rating: Decimal = Decimal("0")
    total_reviews: int = 0
    views: int = 0
    ticket_types: tuple[TicketType, ...] = ()

    def ticket_type(self, ticket_type_id: TicketTypeId) -> TicketType | None:
        for ticket_type in self.ticket_types:
            if ticket_type.id == ticket_type_id:
                return ticket_type
        return None

    def has_ended(self, now: datetime) -> bool:
        return self.end_date <= now

    @property
    def is_bookable(self) -> bool:
        return self.status is EventStatus.PUBLISHED

    def is_managed_by(self, actor: Actor) -> bool:
        return actor.is_admin or actor.id == self.organizer_id

    @property
    def total_tickets_sold(self) -> int:
        return sum(t.sold for t in self.ticket_types)

    @property
    def available_tickets(self) -> int:
        return sum(t.available for t in self.ticket_types)

    @property
    def total_revenue(self) -> Decimal:
        return sum((t.revenue for t in self.ticket_types), Decimal("0"))

    @property
    def min_price(self) -> Decimal:
        return min((t.price.amount for t in self.ticket_types), default=Decimal("0"))

    @property
    def max_price(self) -> Decimal:
        return max((t.price.amount for t in self.ticket_types), default=Decimal("0"))


@dataclass(frozen=True)
class EventFilters:
    """Catalog query. ``None`` means no constraint."""

    status: str | None = EventStatus.PUBLISHED.value
    category: str | None = None
    location: str | None = None
    starts_after: datetime | None = None
    starts_before: datetime | None = None
    text: str | None = None
    organizer_id: UUID | None = None
    sort: str = "-createdAt"


@dataclass(frozen=True)
class SalesSummary:
    """Confirmed-booking totals for one event."""

    bookings: int
    revenue: Decimal
    tickets_sold: int


@dataclass(frozen=True)
class OrganizerStats:
    """Totals over every event one organizer owns."""

    total_events: int = 0
    total_tickets_sold: int = 0
    upcoming_events: int = 0
