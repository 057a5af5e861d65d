from django.utils import timezone
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView


class HealthView(APIView):
    """Handler for GET /api/health"""

    authentication_classes = []

    def get(self, request: Request) -> Response:
        return Response(
            {
                "status": "OK",
                "message": "EventHub API is running",
                "timestamp": timezone.now().isoformat(),
            }
        )
