from reviews.domain.models import ASPECTS, ModerationStatus, Review, ReviewSort

__all__ = ["ASPECTS", "ModerationStatus", "Review", "ReviewSort"]
