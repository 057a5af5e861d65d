"""Django ORM implementation of the PaymentOrderStore."""

from decimal import Decimal
from typing import ContextManager
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from payments import models
from payments.domain import OrderStatus, PaymentOrder
from payments.stores.interfaces import PaymentOrderStore


def to_domain(row: models.PaymentOrder) -> PaymentOrder:
    return PaymentOrder(
        id=row.id,
        user_id=row.user_id,
        event_id=row.event_id,
        booking_id=row.booking_id,
        amount=row.amount,
        currency=row.currency,
        user_email=row.user_email,
        user_phone=row.user_phone,
        gateway_order_id=row.gateway_order_id,
        gateway_payment_id=row.gateway_payment_id,
        status=OrderStatus(row.status),
        created_at=row.created_at,
    )


class DjangoPaymentOrderStore(PaymentOrderStore):
    def atomic(self) -> ContextManager:
        return transaction.atomic()

    def create(
        self,
        user_id: UUID,
        event_id: UUID,
        amount: Decimal,
        currency: str,
        user_email: str,
        user_phone: str,
        gateway_order_id: str,
    ) -> PaymentOrder:
        row = models.PaymentOrder.objects.create(
            user_id=user_id,
            event_id=event_id,
            amount=amount,
            currency=currency,
            user_email=user_email,
            user_phone=user_phone,
            gateway_order_id=gateway_order_id,
        )
        return to_domain(row)

    def attach_booking(self, order_id: UUID, booking_id: UUID) -> PaymentOrder:
        models.PaymentOrder.objects.filter(pk=order_id).update(
            booking_id=booking_id, updated_at=timezone.now()
        )
        return to_domain(models.PaymentOrder.objects.get(pk=order_id))

    def get_by_gateway_order_id(self, gateway_order_id: str) -> PaymentOrder | None:
        row = models.PaymentOrder.objects.filter(gateway_order_id=gateway_order_id).first()
        return to_domain(row) if row else None

    def mark_paid(self, order_id: UUID, gateway_payment_id: str) -> PaymentOrder | None:
        updated = models.PaymentOrder.objects.filter(
            pk=order_id, status=models.PaymentOrder.Status.PENDING
        ).update(
            status=models.PaymentOrder.Status.PAID,
            gateway_payment_id=gateway_payment_id,
            updated_at=timezone.now(),
        )
        if not updated:
            return None
        return to_domain(models.PaymentOrder.objects.get(pk=order_id))

    def mark_failed(self, order_id: UUID, gateway_payment_id: str = "") -> PaymentOrder | None:
        updated = models.PaymentOrder.objects.filter(
            pk=order_id, status=models.PaymentOrder.Status.PENDING
        ).update(
            status=models.PaymentOrder.Status.FAILED,
            gateway_payment_id=gateway_payment_id,
            updated_at=timezone.now(),
        )
        if not updated:
            return None
        return to_domain(models.PaymentOrder.objects.get(pk=order_id))
