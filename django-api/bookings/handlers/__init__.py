from bookings.handlers.views import (
    BookingCancelView,
    BookingDetailView,
    BookingListView,
    CancellationRejectView,
    CancellationRequestView,
    EventBookingListView,
)

__all__ = [
    "BookingCancelView",
    "BookingDetailView",
    "BookingListView",
    "CancellationRejectView",
    "CancellationRequestView",
    "EventBookingListView",
]
