"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to the shared exception handler
- Never contain business logic
"""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.handlers.actor import actor_for
from accounts.permissions import IsOrganizerOrAdmin
from common.handlers.pagination import page_request, paginated_response
from common.handlers.requests import validated_data
from events.domain import EventFilters
from events.handlers.serializers import (
    EventQuerySerializer,
    EventSerializer,
    EventSummarySerializer,
    EventWriteSerializer,
    SearchQuerySerializer,
    analytics_payload,
)
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsOrganizerOrAdmin()]
        return [AllowAny()]

    def get(self, request: Request) -> Response:
        page = page_request(request)
        query = validated_data(EventQuerySerializer, request.query_params)
        result = get_event_service().list_events(EventFilters(**query), page)
        items = EventSummarySerializer(result.items, many=True).data
        return paginated_response(items, result.total, page, "events")

    def post(self, request: Request) -> Response:
        data = dict(validated_data(EventWriteSerializer, request.data))
        ticket_types = data.pop("ticket_types", [])
        event = get_event_service().create_event(actor_for(request), data, ticket_types)
        return Response(
            {"success": True, "event": EventSerializer(event).data},
            status=status.HTTP_201_CREATED,
        )


class EventDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/events/{event_id}"""

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsOrganizerOrAdmin()]

    def get(self, request: Request, event_id: str) -> Response:
        event = get_event_service().get_event(event_id)
        return Response({"success": True, "event": EventSerializer(event).data})

    def put(self, request: Request, event_id: str) -> Response:
        data = dict(validated_data(EventWriteSerializer, request.data, partial=True))
        ticket_types = data.pop("ticket_types", None)
        event = get_event_service().update_event(actor_for(request), event_id, data, ticket_types)
        return Response({"success": True, "event": EventSerializer(event).data})

    def delete(self, request: Request, event_id: str) -> Response:
        get_event_service().delete_event(actor_for(request), event_id)
        return Response({"success": True, "message": "Event deleted successfully"})


class CategoryListView(APIView):
    """Handler for GET /api/events/categories"""

    def get(self, request: Request) -> Response:
        return Response({"success": True, "categories": get_event_service().categories()})


class EventSearchView(APIView):
    """Handler for GET /api/events/search"""

    def get(self, request: Request) -> Response:
        page = page_request(request)
        query = validated_data(SearchQuerySerializer, request.query_params)
        result = get_event_service().search(
            query.get("q"),
            page,
            location=query.get("location"),
            category=query.get("category"),
            on_date=query.get("date"),
        )
        items = EventSummarySerializer(result.items, many=True).data
        return paginated_response(items, result.total, page, "events")


class OrganizerEventListView(APIView):
    """Handler for GET /api/events/organizer/my-events"""

    permission_classes = [IsOrganizerOrAdmin]

    def get(self, request: Request) -> Response:
        page = page_request(request)
        result = get_event_service().my_events(
            actor_for(request), request.query_params.get("status"), page
        )
        items = EventSerializer(result.items, many=True).data
        return paginated_response(items, result.total, page, "events")


class EventAnalyticsView(APIView):
    """Handler for GET /api/events/{event_id}/analytics"""

    permission_classes = [IsOrganizerOrAdmin]

    def get(self, request: Request, event_id: str) -> Response:
        analytics = get_event_service().analytics(actor_for(request), event_id)
        return Response({"success": True, "analytics": analytics_payload(analytics)})
