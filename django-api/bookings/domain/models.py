"""Domain models for bookings and price quotes."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID

from common.domain.models import Actor
from events.domain import Event, TicketTypeId


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLATION_REQUESTED = "cancellation_requested"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


INVENTORY_HOLDING = (BookingStatus.CONFIRMED, BookingStatus.CANCELLATION_REQUESTED)


@dataclass(frozen=True)
class ItemRequest:
    ticket_type_id: TicketTypeId
    quantity: int


@dataclass(frozen=True)
class LineItem:
    """Snapshot of one tier at booking time."""

    ticket_type_id: TicketTypeId
    ticket_type_name: str
    price: Decimal
    quantity: int
    subtotal: Decimal


@dataclass(frozen=True)
class AttendeeInfo:
    first_name: str
    last_name: str
    email: str
    phone: str = ""
    ticket_code: str = ""
    checked_in: bool = False
    check_in_time: datetime | None = None


@dataclass(frozen=True)
class Quote:
    event: Event
    items: tuple[LineItem, ...]
    total_amount: Decimal
    platform_fee: Decimal
    processing_fee: Decimal
    final_amount: Decimal


@dataclass(frozen=True)
class Booking:
    id: UUID
    booking_number: str
    user_id: UUID
    event_id: UUID
    event_organizer_id: UUID
    event_title: str
    event_start_date: datetime
    items: tuple[LineItem, ...]
    attendees: tuple[AttendeeInfo, ...]
    total_amount: Decimal
    platform_fee: Decimal
    processing_fee: Decimal
    final_amount: Decimal
    status: BookingStatus
    payment_status: PaymentStatus
    payment_method: str
    created_at: datetime
    updated_at: datetime
    user_email: str = ""
    user_name: str = ""
    organizer_email: str = ""
    payment_order_id: UUID | None = None
    payment_details: dict = field(default_factory=dict)
    billing_address: dict = field(default_factory=dict)
    special_requests: str = ""
    refund_details: dict = field(default_factory=dict)
    cancellation_request: dict = field(default_factory=dict)
    cancellation_rejection: dict = field(default_factory=dict)

    @property
    def total_tickets(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def holds_inventory(self) -> bool:
        return self.status in INVENTORY_HOLDING

    def is_owned_by(self, actor: Actor) -> bool:
        return self.user_id == actor.id

    def is_managed_by(self, actor: Actor) -> bool:
        return actor.is_admin or self.event_organizer_id == actor.id

    def hours_until_start(self, now: datetime) -> float:
        return (self.event_start_date - now).total_seconds() / 3600


@dataclass(frozen=True)
class BookingStats:
    total_bookings: int = 0
    total_spent: Decimal = Decimal("0")
    upcoming_bookings: int = 0
