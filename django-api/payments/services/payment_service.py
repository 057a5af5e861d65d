"""Payment bridge between bookings and the Razorpay gateway.

``create_order`` prices the request, opens a gateway order and records a
pending booking. ``verify_payment`` checks the checkout signature and then,
in one transaction, marks the order paid, reserves the tickets and confirms
the booking.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from django.utils import timezone

from bookings.domain import Booking
from bookings.domain.errors import InvalidBookingStateError
from bookings.services.booking_service import BookingService, epoch_millis
from common.domain.models import Actor
from events.domain import Money
from notifications.domain import NotificationType
from notifications.services.notification_service import NotificationService
from payments.domain import OrderStatus, PaymentOrder
from payments.domain.errors import (
    MissingPayerEmailError,
    PaymentAccessDeniedError,
    PaymentAlreadyVerifiedError,
    PaymentOrderClosedError,
    PaymentOrderNotFoundError,
    SignatureMismatchError,
)
from payments.gateway import RazorpayGateway
from payments.stores.interfaces import PaymentOrderStore

logger = logging.getLogger(__name__)

GATEWAY_NAME = "razorpay"


@dataclass(frozen=True)
class CreatedOrder:
    key_id: str
    gateway_order: dict
    payment: PaymentOrder
    booking: Booking


@dataclass(frozen=True)
class VerifiedPayment:
    payment: PaymentOrder
    booking: Booking | None


class PaymentService:
    def __init__(
        self,
        store: PaymentOrderStore,
        bookings: BookingService,
        gateway: RazorpayGateway,
        notifications: NotificationService,
        currency: str,
    ) -> None:
        self._store = store
        self._bookings = bookings
        self._gateway = gateway
        self._notifications = notifications
        self._currency = currency

    @staticmethod
    def _now() -> datetime:
        return timezone.now()

    def create_order(
        self,
        actor: Actor,
        event_id: str | UUID,
        items: list[dict],
        attendees: list[dict],
        billing_address: dict,
        payment_method: str | None = None,
        special_requests: str = "",
    ) -> CreatedOrder:
        order = self._bookings.quote(event_id, items)

        email = actor.email or billing_address.get("email")
        phone = actor.phone or billing_address.get("phone") or ""
        if not email:
            raise MissingPayerEmailError()

        gateway_order = self._gateway.create_order(
            amount=Money(order.final_amount).minor_units,
            currency=self._currency,
            receipt=f"receipt_{epoch_millis(self._now())}",
            notes={
                "userId": str(actor.id),
                "eventId": str(order.event.id.value),
                "userEmail": email,
                "userPhone": phone,
            },
        )

        with self._store.atomic():
            payment = self._store.create(
                user_id=actor.id,
                event_id=order.event.id.value,
                amount=order.final_amount,
                currency=self._currency,
                user_email=email,
                user_phone=phone,
                gateway_order_id=gateway_order["id"],
            )
            booking = self._bookings.create_pending_booking(
                actor,
                order,
                attendees,
                billing_address,
                payment_method or GATEWAY_NAME,
                special_requests,
                payment_order_id=payment.id,
            )
            payment = self._store.attach_booking(payment.id, booking.id)

        logger.info(
            "Gateway order %s opened for booking %s", payment.gateway_order_id, booking.booking_number
        )
        return CreatedOrder(self._gateway.key_id, gateway_order, payment, booking)

    def verify_payment(
        self, actor: Actor, order_id: str, payment_id: str, signature: str
    ) -> VerifiedPayment:
        if not self._gateway.verify_signature(order_id, payment_id, signature):
            logger.warning("Signature mismatch for gateway order %s", order_id)
            raise SignatureMismatchError()

        payment = self._store.get_by_gateway_order_id(order_id)
        if payment is None:
            raise PaymentOrderNotFoundError()
        if payment.status is OrderStatus.PAID:
            raise PaymentAlreadyVerifiedError()
        if payment.user_id != actor.id:
            raise PaymentAccessDeniedError()
        if payment.status is not OrderStatus.PENDING:
            raise PaymentOrderClosedError()

        booking = None
        try:
            with self._store.atomic():
                paid = self._store.mark_paid(payment.id, payment_id)
                if paid is None:
                    raise PaymentAlreadyVerifiedError()
                if paid.booking_id:
                    booking = self._bookings.confirm_payment(
                        paid.booking_id, payment_id, GATEWAY_NAME
                    )
        except InvalidBookingStateError:
            # booking was cancelled while checkout was open; keep the payment id for the refund
            self._store.mark_failed(payment.id, payment_id)
            logger.warning(
                "Payment %s captured for closed booking %s, refund required",
                payment_id,
                payment.booking_id,
            )
            raise PaymentOrderClosedError() from None

        logger.info("Payment %s verified for gateway order %s", payment_id, order_id)
        message = f"Your payment of {paid.amount} {paid.currency} was received."
        if booking is not None:
            message = f"{message} Booking {booking.booking_number} is confirmed."
        self._notifications.notify(
            actor.id,
            NotificationType.PAYMENT_SUCCESS,
            "Payment successful",
            message,
            data={"paymentOrderId": paid.id, "bookingId": paid.booking_id or ""},
        )
        return VerifiedPayment(paid, booking)
