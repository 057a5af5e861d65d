"""Django ORM models (persistence layer) for in-app notifications."""

import uuid

from django.conf import settings
from django.db import models


class Notification(models.Model):
    class Type(models.TextChoices):
        BOOKING_CONFIRMATION = "booking_confirmation"
        BOOKING_CANCELLED = "booking_cancelled"
        CANCELLATION_REQUESTED = "cancellation_requested"
        CANCELLATION_REJECTED = "cancellation_rejected"
        EVENT_REMINDER = "event_reminder"
        EVENT_UPDATE = "event_update"
        EVENT_CANCELLED = "event_cancelled"
        PAYMENT_SUCCESS = "payment_success"
        PAYMENT_FAILED = "payment_failed"
        REFUND_PROCESSED = "refund_processed"
        REVIEW_REQUEST = "review_request"
        NEW_EVENT_RECOMMENDATION = "new_event_recommendation"
        SYSTEM_ANNOUNCEMENT = "system_announcement"

    class Priority(models.TextChoices):
        LOW = "low"
        MEDIUM = "medium"
        HIGH = "high"
        URGENT = "urgent"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="notifications"
    )
    type = models.CharField(max_length=40, choices=Type.choices)
    title = models.CharField(max_length=200)
    message = models.CharField(max_length=1000)
    data = models.JSONField(default=dict, blank=True)
    priority = models.CharField(max_length=10, choices=Priority.choices, default=Priority.MEDIUM)
    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "-created_at"]),
            models.Index(fields=["user", "is_read"]),
        ]

    def __str__(self) -> str:
        return f"{self.type} -> {self.user_id}"
