from django.urls import path

from reviews.handlers import (
    EventReviewListView,
    ModerateReviewView,
    ModerationQueueView,
    ReviewCreateView,
    ReviewDetailView,
    ReviewReportView,
    ReviewVoteView,
    UserReviewListView,
)

urlpatterns = [
    path("reviews", ReviewCreateView.as_view(), name="review-create"),
    path("reviews/event/<str:event_id>", EventReviewListView.as_view(), name="event-reviews"),
    path("reviews/user/<str:user_id>", UserReviewListView.as_view(), name="user-reviews"),
    path("reviews/admin/pending", ModerationQueueView.as_view(), name="review-moderation-queue"),
    path(
        "reviews/admin/<str:review_id>/moderate",
        ModerateReviewView.as_view(),
        name="review-moderate",
    ),
    path("reviews/<str:review_id>", ReviewDetailView.as_view(), name="review-detail"),
    path("reviews/<str:review_id>/vote", ReviewVoteView.as_view(), name="review-vote"),
    path("reviews/<str:review_id>/report", ReviewReportView.as_view(), name="review-report"),
]
