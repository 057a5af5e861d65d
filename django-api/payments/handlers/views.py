"""HTTP handlers for the payment bridge.

Failures here use the ``{"success": false, "error": ...}`` envelope.
"""

from django.conf import settings
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.handlers.actor import actor_for
from bookings.handlers.views import get_booking_service
from common.handlers.requests import validated_data
from notifications.handlers.views import get_notification_service
from payments.gateway import RazorpayGateway
from payments.handlers.serializers import (
    CreateOrderSerializer,
    PaymentOrderSerializer,
    VerifyPaymentSerializer,
)
from payments.services.payment_service import PaymentService
from payments.stores.django_store import DjangoPaymentOrderStore


def get_payment_service() -> PaymentService:
    return PaymentService(
        DjangoPaymentOrderStore(),
        get_booking_service(),
        RazorpayGateway.from_settings(),
        get_notification_service(),
        currency=settings.PAYMENT_GATEWAY["CURRENCY"],
    )


class PaymentView(APIView):
    permission_classes = [IsAuthenticated]
    error_key = "error"


class CreateOrderView(PaymentView):
    """Handler for POST /api/payments/create-order"""

    def post(self, request: Request) -> Response:
        data = validated_data(CreateOrderSerializer, request.data)
        created = get_payment_service().create_order(actor_for(request), **data)
        return Response(
            {
                "success": True,
                "key_id": created.key_id,
                "order": created.gateway_order,
                "display_amount": created.payment.amount,
                "paymentData": PaymentOrderSerializer(created.payment).data,
                "booking": {
                    "id": str(created.booking.id),
                    "bookingNumber": created.booking.booking_number,
                },
            }
        )


class VerifyPaymentView(PaymentView):
    """Handler for POST /api/payments/verify-payment"""

    def post(self, request: Request) -> Response:
        data = validated_data(VerifyPaymentSerializer, request.data)
        verified = get_payment_service().verify_payment(
            actor_for(request),
            data["razorpay_order_id"],
            data["razorpay_payment_id"],
            data["razorpay_signature"],
        )
        payment, booking = verified.payment, verified.booking
        if booking is None:
            return Response(
                {"success": True, "message": "Payment Verified", "paymentOrder": str(payment.id)}
            )
        return Response(
            {
                "success": True,
                "message": "Payment Verified Successfully",
                "paid_amount": payment.amount,
                "paymentOrder": str(payment.id),
                "booking": {
                    "id": str(booking.id),
                    "bookingNumber": booking.booking_number,
                    "status": booking.status.value,
                    "paymentStatus": booking.payment_status.value,
                },
            }
        )
