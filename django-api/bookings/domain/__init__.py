from bookings.domain.models import (
    AttendeeInfo,
    Booking,
    BookingStats,
    BookingStatus,
    ItemRequest,
    LineItem,
    PaymentStatus,
    Quote,
)

__all__ = [
    "AttendeeInfo",
    "Booking",
    "BookingStats",
    "BookingStatus",
    "ItemRequest",
    "LineItem",
    "PaymentStatus",
    "Quote",
]
