from rest_framework import serializers

from bookings.handlers.serializers import OrderInputSerializer
from bookings.models import Booking


class CreateOrderSerializer(OrderInputSerializer):
    paymentMethod = serializers.ChoiceField(
        choices=Booking.PaymentMethod.choices, source="payment_method", required=False
    )


class VerifyPaymentSerializer(serializers.Serializer):
    razorpay_order_id = serializers.CharField(max_length=64)
    razorpay_payment_id = serializers.CharField(max_length=64)
    razorpay_signature = serializers.CharField(max_length=256)


class PaymentOrderSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    userId = serializers.UUIDField(source="user_id")
    eventId = serializers.UUIDField(source="event_id")
    bookingId = serializers.UUIDField(source="booking_id")
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    currency = serializers.CharField()
    userEmail = serializers.EmailField(source="user_email")
    userPhone = serializers.CharField(source="user_phone")
    razorpayOrderId = serializers.CharField(source="gateway_order_id")
    razorpayPaymentId = serializers.CharField(source="gateway_payment_id")
    paymentStatus = serializers.CharField(source="status.value")
    createdAt = serializers.DateTimeField(source="created_at")
