"""Django ORM implementation of the ReviewStore."""

from decimal import Decimal
from uuid import UUID

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import Avg, Count, F, IntegerField, Value
from django.db.models.functions import Greatest

from common.domain.models import Page, PageRequest
from reviews import models
from reviews.domain import ASPECTS, ModerationStatus, Review, ReviewSort
from reviews.domain.errors import DuplicateReviewError
from reviews.stores.interfaces import ReviewStore

ORDERING = {
    ReviewSort.NEWEST: "-created_at",
    ReviewSort.OLDEST: "created_at",
    ReviewSort.HIGHEST: "-rating",
    ReviewSort.LOWEST: "rating",
    ReviewSort.HELPFUL: "-helpful_votes",
}


def to_domain(row: models.Review) -> Review:
    aspects = {
        name: getattr(row, f"{name}_rating")
        for name in ASPECTS
        if getattr(row, f"{name}_rating") is not None
    }
    return Review(
        id=row.id,
        user_id=row.user_id,
        user_name=row.user.full_name,
        event_id=row.event_id,
        event_title=row.event.title,
        booking_id=row.booking_id,
        rating=row.rating,
        title=row.title,
        comment=row.comment,
        aspects=aspects,
        is_verified=row.is_verified,
        is_public=row.is_public,
        helpful_votes=row.helpful_votes,
        report_count=row.report_count,
        moderation_status=ModerationStatus(row.moderation_status),
        moderation_notes=row.moderation_notes,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def aspect_columns(aspects: dict) -> dict:
    return {f"{name}_rating": aspects[name] for name in ASPECTS if name in aspects}


class DjangoReviewStore(ReviewStore):
    def _queryset(self):
        return models.Review.objects.select_related("user", "event")

    def _page(self, qs, page: PageRequest) -> Page[Review]:
        rows = qs[page.offset : page.offset + page.limit]
        return Page(items=tuple(to_domain(row) for row in rows), total=qs.count())

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
        try:
            with transaction.atomic():
                row = models.Review.objects.create(
                    user_id=user_id,
                    event_id=event_id,
                    booking_id=booking_id,
                    rating=rating,
                    comment=comment,
                    title=title,
                    moderation_status=moderation_status.value,
                    is_verified=is_verified,
                    **aspect_columns(aspects),
                )
        except IntegrityError:
            raise DuplicateReviewError() from None
        return self.get(row.id)

    def get(self, review_id: UUID) -> Review | None:
        row = self._queryset().filter(pk=review_id).first()
        return to_domain(row) if row else None

    def exists_for(self, user_id: UUID, event_id: UUID) -> bool:
        return models.Review.objects.filter(user_id=user_id, event_id=event_id).exists()

    def _published(self, event_id: UUID):
        return models.Review.objects.filter(
            event_id=event_id,
            is_public=True,
            moderation_status=models.Review.ModerationStatus.APPROVED,
        )

    def list_for_event(
        self, event_id: UUID, sort: ReviewSort, rating: int | None, page: PageRequest
    ) -> Page[Review]:
        qs = self._published(event_id).select_related("user", "event")
        if rating:
            qs = qs.filter(rating=rating)
        return self._page(qs.order_by(ORDERING[sort], "-created_at"), page)

    def rating_distribution(self, event_id: UUID) -> list[dict]:
        rows = (
            self._published(event_id)
            .values("rating")
            .annotate(count=Count("id"))
            .order_by("-rating")
        )
        return [{"rating": row["rating"], "count": row["count"]} for row in rows]

    def list_for_user(self, user_id: UUID, page: PageRequest) -> Page[Review]:
        return self._page(self._queryset().filter(user_id=user_id).order_by("-created_at"), page)

    def list_by_moderation(self, status: ModerationStatus | None, page: PageRequest) -> Page[Review]:
        qs = self._queryset()
        if status is not None:
            qs = qs.filter(moderation_status=status.value)
        return self._page(qs.order_by("-created_at"), page)

    def update(self, review_id: UUID, **fields) -> Review:
        row = models.Review.objects.get(pk=review_id)
        aspects = fields.pop("aspects", None)
        if aspects is not None:
            fields.update(aspect_columns(aspects))
        if isinstance(fields.get("moderation_status"), ModerationStatus):
            fields["moderation_status"] = fields["moderation_status"].value
        for name, value in fields.items():
            setattr(row, name, value)
        row.save()
        return self.get(review_id)

    def delete(self, review_id: UUID) -> None:
        models.Review.objects.filter(pk=review_id).delete()

    def adjust_helpful_votes(self, review_id: UUID, helpful: bool) -> int | None:
        if helpful:
            change = F("helpful_votes") + 1
        else:
            change = Greatest(F("helpful_votes") - 1, Value(0), output_field=IntegerField())
        if not models.Review.objects.filter(pk=review_id).update(helpful_votes=change):
            return None
        return models.Review.objects.values_list("helpful_votes", flat=True).get(pk=review_id)

    def increment_reports(self, review_id: UUID) -> bool:
        return bool(
            models.Review.objects.filter(pk=review_id).update(report_count=F("report_count") + 1)
        )

    def rating_summary(self, event_id: UUID) -> tuple[Decimal | None, int]:
        result = self._published(event_id).aggregate(average=Avg("rating"), total=Count("id"))
        average = result["average"]
        return (Decimal(str(average)) if average is not None else None), result["total"]

    def user_exists(self, user_id: UUID) -> bool:
        return get_user_model().objects.filter(pk=user_id).exists()
