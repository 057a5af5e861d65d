from abc import ABC, abstractmethod
from datetime import datetime
from typing import ContextManager
from uuid import UUID

from bookings.domain import AttendeeInfo, Booking, BookingStats, BookingStatus, PaymentStatus, Quote
from common.domain.models import Page, PageRequest


class BookingStore(ABC):
    """Interface for booking persistence."""

    @abstractmethod
    def atomic(self) -> ContextManager:
        ...

    @abstractmethod
    def create_booking(
        self,
        user_id: UUID,
        quote: Quote,
        attendees: list[AttendeeInfo],
        status: BookingStatus,
        payment_status: PaymentStatus,
        payment_method: str,
        billing_address: dict,
        special_requests: str,
        payment_details: dict | None = None,
        payment_order_id: UUID | None = None,
    ) -> Booking:
        """Persist a booking with its line items and attendees."""
        ...

    @abstractmethod
    def get_booking(self, booking_id: UUID) -> Booking | None:
        ...

    @abstractmethod
    def list_for_user(self, user_id: UUID, status: str | None, page: PageRequest) -> Page[Booking]:
        ...

    @abstractmethod
    def list_for_event(self, event_id: UUID, status: str | None, page: PageRequest) -> Page[Booking]:
        ...

    @abstractmethod
    def transition(
        self, booking_id: UUID, expected: tuple[BookingStatus, ...], **changes
    ) -> Booking | None:
        """Apply ``changes`` only while the booking's status is one of ``expected``.

        Returns the updated booking, or None when the status had already moved on.
        """
        ...

    @abstractmethod
    def has_confirmed_booking(self, user_id: UUID, event_id: UUID, booking_id: UUID) -> bool:
        ...

    @abstractmethod
    def stats_for_user(self, user_id: UUID, now: datetime) -> BookingStats:
        """Count the user's bookings, paid spend and confirmed bookings still ahead."""
        ...
