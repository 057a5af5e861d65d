"""Serializers for catalog requests and Event/TicketType domain models."""

from rest_framework import serializers

from events.domain import CATEGORIES, EventStatus

VENUE_TYPES = ("physical", "online", "hybrid")
WRITABLE_STATUSES = (
    EventStatus.DRAFT.value,
    EventStatus.PUBLISHED.value,
    EventStatus.CANCELLED.value,
)


def money_field(**kwargs) -> serializers.DecimalField:
    return serializers.DecimalField(max_digits=12, decimal_places=2, **kwargs)


class TicketTypeSerializer(serializers.Serializer):
    """Serializer for TicketType domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    price = money_field(source="price.amount")
    quantity = serializers.IntegerField(source="quantity.value")
    sold = serializers.IntegerField()
    available = serializers.IntegerField()
    maxPerOrder = serializers.IntegerField(source="max_per_order")
    saleStartDate = serializers.DateTimeField(source="sale_start_date")
    saleEndDate = serializers.DateTimeField(source="sale_end_date")


class EventSummarySerializer(serializers.Serializer):
    """Serializer for Event domain model in list responses."""

    id = serializers.UUIDField(source="id.value")
    organizer = serializers.SerializerMethodField()
    title = serializers.CharField()
    description = serializers.CharField()
    category = serializers.CharField()
    startDate = serializers.DateTimeField(source="start_date")
    endDate = serializers.DateTimeField(source="end_date")
    venue = serializers.JSONField()
    images = serializers.JSONField()
    status = serializers.CharField(source="status.value")
    averageRating = serializers.DecimalField(max_digits=2, decimal_places=1, source="average_rating")
    totalReviews = serializers.IntegerField(source="total_reviews")
    ticketTypes = TicketTypeSerializer(many=True, source="ticket_types")
    totalTicketsSold = serializers.IntegerField(source="total_tickets_sold")
    availableTickets = serializers.IntegerField(source="available_tickets")
    minPrice = money_field(source="min_price")
    maxPrice = money_field(source="max_price")
    createdAt = serializers.DateTimeField(source="created_at")

    def get_organizer(self, event) -> dict:
        return {"id": str(event.organizer_id), "name": event.organizer_name}


class EventSerializer(EventSummarySerializer):
    """Serializer for Event domain model in detail responses."""

    shortDescription = serializers.CharField(source="short_description")
    tags = serializers.ListField(child=serializers.CharField())
    timezone = serializers.CharField()
    capacity = serializers.IntegerField()
    isPublic = serializers.BooleanField(source="is_public")
    requiresApproval = serializers.BooleanField(source="requires_approval")
    refundPolicy = serializers.CharField(source="refund_policy")
    additionalInfo = serializers.CharField(source="additional_info")
    views = serializers.IntegerField()
    totalRevenue = money_field(source="total_revenue")
    updatedAt = serializers.DateTimeField(source="updated_at")


class TicketTypeInputSerializer(serializers.Serializer):
    id = serializers.UUIDField(required=False)
    name = serializers.CharField(max_length=100)
    description = serializers.CharField(max_length=500, required=False, allow_blank=True)
    price = money_field(min_value=0)
    quantity = serializers.IntegerField(min_value=1)
    maxPerOrder = serializers.IntegerField(min_value=1, source="max_per_order", required=False)
    saleStartDate = serializers.DateTimeField(source="sale_start_date", required=False, allow_null=True)
    saleEndDate = serializers.DateTimeField(source="sale_end_date", required=False, allow_null=True)


class EventWriteSerializer(serializers.Serializer):
    """Validates create and (partial) update payloads."""

    title = serializers.CharField(max_length=200)
    description = serializers.CharField(max_length=5000)
    shortDescription = serializers.CharField(
        max_length=300, source="short_description", required=False, allow_blank=True
    )
    category = serializers.ChoiceField(choices=CATEGORIES)
    tags = serializers.ListField(child=serializers.CharField(max_length=50), required=False)
    startDate = serializers.DateTimeField(source="start_date")
    endDate = serializers.DateTimeField(source="end_date")
    timezone = serializers.CharField(max_length=64, required=False)
    venue = serializers.DictField()
    images = serializers.ListField(child=serializers.DictField(), required=False)
    capacity = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    status = serializers.ChoiceField(choices=WRITABLE_STATUSES, required=False)
    isPublic = serializers.BooleanField(source="is_public", required=False)
    requiresApproval = serializers.BooleanField(source="requires_approval", required=False)
    refundPolicy = serializers.CharField(source="refund_policy", required=False, allow_blank=True)
    additionalInfo = serializers.CharField(source="additional_info", required=False, allow_blank=True)
    ticketTypes = TicketTypeInputSerializer(many=True, source="ticket_types", required=False)

    def validate_venue(self, value: dict) -> dict:
        if value.get("type") not in VENUE_TYPES:
            raise serializers.ValidationError("Venue type must be physical, online or hybrid")
        return value


class SearchQuerySerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True)
    location = serializers.CharField(required=False)
    category = serializers.CharField(required=False)
    date = serializers.DateField(required=False)


class EventQuerySerializer(serializers.Serializer):
    status = serializers.CharField(required=False, default=EventStatus.PUBLISHED.value)
    category = serializers.CharField(required=False)
    location = serializers.CharField(required=False)
    startDate = serializers.DateTimeField(required=False, source="starts_after")
    endDate = serializers.DateTimeField(required=False, source="starts_before")
    search = serializers.CharField(required=False, source="text")
    sort = serializers.CharField(required=False, default="-createdAt")


def analytics_payload(analytics) -> dict:
    event, sales = analytics.event, analytics.sales
    return {
        "overview": {
            "totalViews": event.views,
            "totalBookings": sales.bookings,
            "totalRevenue": sales.revenue,
            "totalTicketsSold": sales.tickets_sold,
        },
        "ticketSales": [
            {
                "name": t.name,
                "sold": t.sold,
                "revenue": t.revenue,
                "remaining": t.available,
            }
            for t in event.ticket_types
        ],
    }
