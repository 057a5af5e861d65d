from django.urls import path

from bookings.handlers import (
    BookingCancelView,
    BookingDetailView,
    BookingListView,
    CancellationRejectView,
    CancellationRequestView,
    EventBookingListView,
)

urlpatterns = [
    path("bookings", BookingListView.as_view(), name="booking-list"),
    path("bookings/event/<str:event_id>", EventBookingListView.as_view(), name="event-bookings"),
    path("bookings/<str:booking_id>", BookingDetailView.as_view(), name="booking-detail"),
    path("bookings/<str:booking_id>/cancel", BookingCancelView.as_view(), name="booking-cancel"),
    path(
        "bookings/<str:booking_id>/request-cancel",
        CancellationRequestView.as_view(),
        name="booking-request-cancel",
    ),
    path(
        "bookings/<str:booking_id>/reject-request",
        CancellationRejectView.as_view(),
        name="booking-reject-request",
    ),
]
