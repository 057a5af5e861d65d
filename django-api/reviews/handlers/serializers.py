"""Review request validation and response shaping."""

from rest_framework import serializers

from reviews.domain import ASPECTS


class AspectsSerializer(serializers.Serializer):
    organization = serializers.IntegerField(min_value=1, max_value=5, required=False)
    venue = serializers.IntegerField(min_value=1, max_value=5, required=False)
    content = serializers.IntegerField(min_value=1, max_value=5, required=False)
    value = serializers.IntegerField(min_value=1, max_value=5, required=False)


class ReviewCreateSerializer(serializers.Serializer):
    eventId = serializers.CharField(source="event_id")
    bookingId = serializers.CharField(source="booking_id")
    rating = serializers.IntegerField(min_value=1, max_value=5)
    title = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    comment = serializers.CharField(max_length=1000)
    aspects = AspectsSerializer(required=False)


class ReviewUpdateSerializer(serializers.Serializer):
    rating = serializers.IntegerField(min_value=1, max_value=5, required=False)
    title = serializers.CharField(max_length=100, required=False, allow_blank=True)
    comment = serializers.CharField(max_length=1000, required=False)
    aspects = AspectsSerializer(required=False)


class VoteSerializer(serializers.Serializer):
    helpful = serializers.JSONField()

    def validate_helpful(self, value):
        if not isinstance(value, bool):
            raise serializers.ValidationError("Helpful must be a boolean value")
        return value


class ReportSerializer(serializers.Serializer):
    reason = serializers.CharField(max_length=500, required=False, allow_blank=True)


class ModerationSerializer(serializers.Serializer):
    moderationStatus = serializers.CharField(source="status")
    moderationNotes = serializers.CharField(
        max_length=500, source="notes", required=False, allow_blank=True
    )


class EventReviewQuerySerializer(serializers.Serializer):
    sort = serializers.CharField(required=False, default="newest")
    rating = serializers.IntegerField(min_value=1, max_value=5, required=False)


class ReviewSerializer(serializers.Serializer):
    """Serializer for Review domain model."""

    id = serializers.UUIDField()
    user = serializers.SerializerMethodField()
    event = serializers.SerializerMethodField()
    booking = serializers.UUIDField(source="booking_id")
    rating = serializers.IntegerField()
    title = serializers.CharField()
    comment = serializers.CharField()
    aspects = serializers.SerializerMethodField()
    isVerified = serializers.BooleanField(source="is_verified")
    isPublic = serializers.BooleanField(source="is_public")
    helpfulVotes = serializers.IntegerField(source="helpful_votes")
    reportCount = serializers.IntegerField(source="report_count")
    moderationStatus = serializers.CharField(source="moderation_status.value")
    moderationNotes = serializers.CharField(source="moderation_notes")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    def get_user(self, review) -> dict:
        return {"id": str(review.user_id), "name": review.user_name}

    def get_event(self, review) -> dict:
        return {"id": str(review.event_id), "title": review.event_title}

    def get_aspects(self, review) -> dict:
        return {name: review.aspects.get(name) for name in ASPECTS}
