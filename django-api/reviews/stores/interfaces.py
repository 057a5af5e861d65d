from abc import ABC, abstractmethod
from decimal import Decimal
from uuid import UUID

from common.domain.models import Page, PageRequest
from reviews.domain import ModerationStatus, Review, ReviewSort


class ReviewStore(ABC):
    @abstractmethod
    def create(
        self,
        user_id: UUID,
        event_id: UUID,
        booking_id: UUID,
        rating: int,
        comment: str,
        title: str,
        aspects: dict,
        moderation_status: ModerationStatus,
        is_verified: bool,
    ) -> Review:
        """Insert a review; raises DuplicateReviewError on a second review for the event."""
        ...

    @abstractmethod
    def get(self, review_id: UUID) -> Review | None:
        ...

    @abstractmethod
    def exists_for(self, user_id: UUID, event_id: UUID) -> bool:
        ...

    @abstractmethod
    def list_for_event(
        self, event_id: UUID, sort: ReviewSort, rating: int | None, page: PageRequest
    ) -> Page[Review]:
        """Approved public reviews only."""
        ...

    @abstractmethod
    def rating_distribution(self, event_id: UUID) -> list[dict]:
        ...

    @abstractmethod
    def list_for_user(self, user_id: UUID, page: PageRequest) -> Page[Review]:
        ...

    @abstractmethod
    def list_by_moderation(self, status: ModerationStatus | None, page: PageRequest) -> Page[Review]:
        ...

    @abstractmethod
    def update(self, review_id: UUID, **fields) -> Review:
        ...

    @abstractmethod
    def delete(self, review_id: UUID) -> None:
        ...

    @abstractmethod
    def adjust_helpful_votes(self, review_id: UUID, helpful: bool) -> int | None:
        """Add or remove one vote (never below zero); None if the review is missing."""
        ...

    @abstractmethod
    def increment_reports(self, review_id: UUID) -> bool:
        ...

    @abstractmethod
    def rating_summary(self, event_id: UUID) -> tuple[Decimal | None, int]:
        """Average and count over approved public reviews."""
        ...

    @abstractmethod
    def user_exists(self, user_id: UUID) -> bool:
        ...
