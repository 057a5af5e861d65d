"""HTTP handlers for the notification inbox."""

from uuid import UUID

from django.conf import settings
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.handlers.actor import actor_for
from common.handlers.pagination import page_request, paginated_response
from notifications.handlers.serializers import NotificationSerializer
from notifications.mailer import Mailer
from notifications.services.notification_service import NotificationService
from notifications.stores.django_store import DjangoNotificationStore


def get_notification_service() -> NotificationService:
    return NotificationService(DjangoNotificationStore(), Mailer())


class NotificationListView(APIView):
    """Handler for GET /api/notifications"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        page = page_request(request, default_limit=settings.EVENTHUB["NOTIFICATION_PAGE_SIZE"])
        result = get_notification_service().list_notifications(actor_for(request), page)
        items = NotificationSerializer(result.items, many=True).data
        return paginated_response(items, result.total, page, "notifications")


class NotificationReadView(APIView):
    """Handler for PUT /api/notifications/{notification_id}/read"""

    permission_classes = [IsAuthenticated]

    def put(self, request: Request, notification_id: UUID) -> Response:
        notification = get_notification_service().mark_read(actor_for(request), notification_id)
        return Response({"success": True, "notification": NotificationSerializer(notification).data})
