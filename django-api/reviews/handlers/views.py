"""HTTP handlers for reviews and moderation."""

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.handlers.actor import actor_for
from accounts.permissions import IsAdmin
from bookings.stores.django_store import DjangoBookingStore
from common.handlers.pagination import page_request, paginated_response
from common.handlers.requests import validated_data
from events.stores.django_store import DjangoEventStore
from reviews.handlers.serializers import (
    EventReviewQuerySerializer,
    ModerationSerializer,
    ReportSerializer,
    ReviewCreateSerializer,
    ReviewSerializer,
    ReviewUpdateSerializer,
    VoteSerializer,
)
from reviews.services.review_service import ReviewService
from reviews.stores.django_store import DjangoReviewStore


def get_review_service() -> ReviewService:
    return ReviewService(DjangoReviewStore(), DjangoBookingStore(), DjangoEventStore())


class ReviewCreateView(APIView):
    """Handler for POST /api/reviews"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request) -> Response:
        data = validated_data(ReviewCreateSerializer, request.data)
        review = get_review_service().create_review(actor_for(request), **data)
        return Response(
            {"success": True, "review": ReviewSerializer(review).data},
            status=status.HTTP_201_CREATED,
        )


class EventReviewListView(APIView):
    """Handler for GET /api/reviews/event/{event_id}"""

    permission_classes = [AllowAny]

    def get(self, request: Request, event_id: str) -> Response:
        page = page_request(request)
        query = validated_data(EventReviewQuerySerializer, request.query_params)
        result = get_review_service().list_event_reviews(
            event_id, query["sort"], query.get("rating"), page
        )
        items = ReviewSerializer(result.page.items, many=True).data
        return paginated_response(
            items,
            result.page.total,
            page,
            "reviews",
            ratingDistribution=result.rating_distribution,
        )


class UserReviewListView(APIView):
    """Handler for GET /api/reviews/user/{user_id}"""

    permission_classes = [AllowAny]

    def get(self, request: Request, user_id: str) -> Response:
        page = page_request(request)
        result = get_review_service().list_user_reviews(user_id, page)
        items = ReviewSerializer(result.items, many=True).data
        return paginated_response(items, result.total, page, "reviews")


class ReviewDetailView(APIView):
    """Handler for PUT/DELETE /api/reviews/{review_id}"""

    permission_classes = [IsAuthenticated]

    def put(self, request: Request, review_id: str) -> Response:
        changes = validated_data(ReviewUpdateSerializer, request.data)
        review = get_review_service().update_review(actor_for(request), review_id, dict(changes))
        return Response({"success": True, "review": ReviewSerializer(review).data})

    def delete(self, request: Request, review_id: str) -> Response:
        get_review_service().delete_review(actor_for(request), review_id)
        return Response({"success": True, "message": "Review deleted successfully"})


class ReviewVoteView(APIView):
    """Handler for POST /api/reviews/{review_id}/vote"""

    permission_classes = [AllowAny]

    def post(self, request: Request, review_id: str) -> Response:
        data = validated_data(VoteSerializer, request.data)
        votes = get_review_service().vote(review_id, data["helpful"])
        return Response({"success": True, "helpfulVotes": votes})


class ReviewReportView(APIView):
    """Handler for POST /api/reviews/{review_id}/report"""

    permission_classes = [AllowAny]

    def post(self, request: Request, review_id: str) -> Response:
        data = validated_data(ReportSerializer, request.data)
        get_review_service().report(review_id, data.get("reason"))
        return Response({"success": True, "message": "Review reported successfully"})


class ModerationQueueView(APIView):
    """Handler for GET /api/reviews/admin/pending"""

    permission_classes = [IsAdmin]

    def get(self, request: Request) -> Response:
        page = page_request(request)
        status_filter = request.query_params.get("status", "pending")
        result = get_review_service().list_for_moderation(status_filter, page)
        items = ReviewSerializer(result.items, many=True).data
        return paginated_response(items, result.total, page, "reviews")


class ModerateReviewView(APIView):
    """Handler for PUT /api/reviews/admin/{review_id}/moderate"""

    permission_classes = [IsAdmin]

    def put(self, request: Request, review_id: str) -> Response:
        data = validated_data(ModerationSerializer, request.data)
        review = get_review_service().moderate(
            actor_for(request), review_id, data["status"], data.get("notes")
        )
        return Response(
            {
                "success": True,
                "message": f"Review {review.moderation_status.value} successfully",
                "review": ReviewSerializer(review).data,
            }
        )
