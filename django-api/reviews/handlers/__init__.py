from reviews.handlers.views import (
    EventReviewListView,
    ModerateReviewView,
    ModerationQueueView,
    ReviewCreateView,
    ReviewDetailView,
    ReviewReportView,
    ReviewVoteView,
    UserReviewListView,
)

__all__ = [
    "EventReviewListView",
    "ModerateReviewView",
    "ModerationQueueView",
    "ReviewCreateView",
    "ReviewDetailView",
    "ReviewReportView",
    "ReviewVoteView",
    "UserReviewListView",
]
