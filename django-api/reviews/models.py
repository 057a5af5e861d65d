"""Django ORM models (persistence layer) for event reviews."""

import uuid

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

STAR_VALIDATORS = [MinValueValidator(1), MaxValueValidator(5)]


class Review(models.Model):
    class ModerationStatus(models.TextChoices):
        PENDING = "pending"
        APPROVED = "approved"
        REJECTED = "rejected"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="reviews"
    )
    event = models.ForeignKey("events.Event", on_delete=models.CASCADE, related_name="reviews")
    booking = models.ForeignKey("bookings.Booking", on_delete=models.CASCADE, related_name="+")
    rating = models.PositiveSmallIntegerField(validators=STAR_VALIDATORS)
    title = models.CharField(max_length=100, blank=True)
    comment = models.CharField(max_length=1000)
    organization_rating = models.PositiveSmallIntegerField(null=True, blank=True, validators=STAR_VALIDATORS)
    venue_rating = models.PositiveSmallIntegerField(null=True, blank=True, validators=STAR_VALIDATORS)
    content_rating = models.PositiveSmallIntegerField(null=True, blank=True, validators=STAR_VALIDATORS)
    value_rating = models.PositiveSmallIntegerField(null=True, blank=True, validators=STAR_VALIDATORS)
    is_verified = models.BooleanField(default=False)
    is_public = models.BooleanField(default=True)
    helpful_votes = models.PositiveIntegerField(default=0)
    report_count = models.PositiveIntegerField(default=0)
    moderation_status = models.CharField(
        max_length=16, choices=ModerationStatus.choices, default=ModerationStatus.PENDING
    )
    moderation_notes = models.CharField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["user", "event"], name="one_review_per_user_event"),
            models.CheckConstraint(
                condition=models.Q(rating__gte=1, rating__lte=5), name="review_rating_range"
            ),
        ]
        indexes = [models.Index(fields=["event", "moderation_status", "is_public"])]

    def __str__(self) -> str:
        return f"{self.rating}* by {self.user_id} on {self.event_id}"
