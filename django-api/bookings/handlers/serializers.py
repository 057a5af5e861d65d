"""Booking request validation and response shaping."""

from rest_framework import serializers

from bookings.models import Booking

DIRECT_PAYMENT_METHODS = ("credit_card", "debit_card", "paypal", "bank_transfer")


def money_field(**kwargs) -> serializers.DecimalField:
    return serializers.DecimalField(max_digits=12, decimal_places=2, **kwargs)


class ItemInputSerializer(serializers.Serializer):
    ticketTypeId = serializers.UUIDField(source="ticket_type_id")
    quantity = serializers.IntegerField(min_value=1)


class AttendeeInputSerializer(serializers.Serializer):
    firstName = serializers.CharField(max_length=50, source="first_name")
    lastName = serializers.CharField(max_length=50, source="last_name")
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True, default="")


class OrderInputSerializer(serializers.Serializer):
    """Fields shared by direct bookings and gateway orders."""

    eventId = serializers.CharField(source="event_id")
    items = ItemInputSerializer(many=True, allow_empty=False)
    attendees = AttendeeInputSerializer(many=True, allow_empty=False)
    billingAddress = serializers.DictField(source="billing_address", required=False, default=dict)
    specialRequests = serializers.CharField(
        max_length=500, source="special_requests", required=False, allow_blank=True, default=""
    )


class BookingCreateSerializer(OrderInputSerializer):
    paymentMethod = serializers.ChoiceField(choices=DIRECT_PAYMENT_METHODS, source="payment_method")


class ReasonSerializer(serializers.Serializer):
    reason = serializers.CharField(max_length=500, required=False, allow_blank=True)


class RequiredReasonSerializer(serializers.Serializer):
    reason = serializers.CharField(max_length=500)


class StatusQuerySerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Booking.Status.choices, required=False)


class LineItemSerializer(serializers.Serializer):
    ticketTypeId = serializers.UUIDField(source="ticket_type_id.value")
    ticketTypeName = serializers.CharField(source="ticket_type_name")
    price = money_field()
    quantity = serializers.IntegerField()
    subtotal = money_field()


class AttendeeSerializer(serializers.Serializer):
    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")
    email = serializers.EmailField()
    phone = serializers.CharField()
    ticketCode = serializers.CharField(source="ticket_code")
    checkedIn = serializers.BooleanField(source="checked_in")
    checkInTime = serializers.DateTimeField(source="check_in_time")


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.UUIDField()
    bookingNumber = serializers.CharField(source="booking_number")
    user = serializers.SerializerMethodField()
    event = serializers.SerializerMethodField()
    items = LineItemSerializer(many=True)
    attendees = AttendeeSerializer(many=True)
    totalTickets = serializers.IntegerField(source="total_tickets")
    totalAmount = money_field(source="total_amount")
    platformFee = money_field(source="platform_fee")
    processingFee = money_field(source="processing_fee")
    finalAmount = money_field(source="final_amount")
    status = serializers.CharField(source="status.value")
    paymentStatus = serializers.CharField(source="payment_status.value")
    paymentMethod = serializers.CharField(source="payment_method")
    paymentOrder = serializers.UUIDField(source="payment_order_id")
    paymentDetails = serializers.DictField(source="payment_details")
    billingAddress = serializers.DictField(source="billing_address")
    specialRequests = serializers.CharField(source="special_requests")
    refundDetails = serializers.DictField(source="refund_details")
    cancellationRequest = serializers.DictField(source="cancellation_request")
    cancellationRejection = serializers.DictField(source="cancellation_rejection")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    def get_user(self, booking) -> dict:
        return {"id": str(booking.user_id), "name": booking.user_name, "email": booking.user_email}

    def get_event(self, booking) -> dict:
        return {
            "id": str(booking.event_id),
            "title": booking.event_title,
            "startDate": serializers.DateTimeField().to_representation(booking.event_start_date),
            "organizer": str(booking.event_organizer_id),
        }
