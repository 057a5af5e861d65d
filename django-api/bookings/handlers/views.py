"""HTTP handlers for bookings."""

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.handlers.actor import actor_for
from accounts.permissions import IsOrganizerOrAdmin
from bookings.handlers.serializers import (
    BookingCreateSerializer,
    BookingSerializer,
    ReasonSerializer,
    RequiredReasonSerializer,
    StatusQuerySerializer,
)
from bookings.services.booking_service import BookingService
from bookings.stores.django_store import DjangoBookingStore
from common.handlers.pagination import page_request, paginated_response
from common.handlers.requests import validated_data
from events.stores.django_store import DjangoEventStore
from notifications.handlers.views import get_notification_service


def get_booking_service() -> BookingService:
    return BookingService(DjangoBookingStore(), DjangoEventStore(), get_notification_service())


def booking_response(booking, message: str | None = None, status_code: int = status.HTTP_200_OK):
    body = {"success": True, "booking": BookingSerializer(booking).data}
    if message:
        body["message"] = message
    return Response(body, status=status_code)


class BookingListView(APIView):
    """Handler for GET/POST /api/bookings"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        page = page_request(request)
        query = validated_data(StatusQuerySerializer, request.query_params)
        result = get_booking_service().list_my_bookings(actor_for(request), query.get("status"), page)
        items = BookingSerializer(result.items, many=True).data
        return paginated_response(items, result.total, page, "bookings")

    def post(self, request: Request) -> Response:
        data = validated_data(BookingCreateSerializer, request.data)
        booking = get_booking_service().create_booking(actor_for(request), **data)
        return booking_response(booking, status_code=status.HTTP_201_CREATED)


class BookingDetailView(APIView):
    """Handler for GET /api/bookings/{booking_id}"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, booking_id: str) -> Response:
        booking = get_booking_service().get_booking(actor_for(request), booking_id)
        return booking_response(booking)


class BookingCancelView(APIView):
    """Handler for PUT /api/bookings/{booking_id}/cancel"""

    permission_classes = [IsAuthenticated]

    def put(self, request: Request, booking_id: str) -> Response:
        data = validated_data(ReasonSerializer, request.data)
        booking = get_booking_service().cancel_booking(
            actor_for(request), booking_id, data.get("reason")
        )
        return booking_response(booking, "Booking cancelled successfully")


class CancellationRequestView(APIView):
    """Handler for POST /api/bookings/{booking_id}/request-cancel"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, booking_id: str) -> Response:
        data = validated_data(RequiredReasonSerializer, request.data)
        booking = get_booking_service().request_cancellation(
            actor_for(request), booking_id, data["reason"]
        )
        return booking_response(booking, "Cancellation request submitted")


class CancellationRejectView(APIView):
    """Handler for PUT /api/bookings/{booking_id}/reject-request"""

    permission_classes = [IsOrganizerOrAdmin]

    def put(self, request: Request, booking_id: str) -> Response:
        data = validated_data(ReasonSerializer, request.data)
        booking = get_booking_service().reject_cancellation(
            actor_for(request), booking_id, data.get("reason")
        )
        return booking_response(booking, "Cancellation request rejected")


class EventBookingListView(APIView):
    """Handler for GET /api/bookings/event/{event_id}"""

    permission_classes = [IsOrganizerOrAdmin]

    def get(self, request: Request, event_id: str) -> Response:
        page = page_request(request)
        query = validated_data(StatusQuerySerializer, request.query_params)
        result = get_booking_service().list_event_bookings(
            actor_for(request), event_id, query.get("status"), page
        )
        items = BookingSerializer(result.items, many=True).data
        return paginated_response(items, result.total, page, "bookings")
