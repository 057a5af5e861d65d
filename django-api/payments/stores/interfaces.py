from abc import ABC, abstractmethod
from decimal import Decimal
from typing import ContextManager
from uuid import UUID

from payments.domain import PaymentOrder


class PaymentOrderStore(ABC):
    @abstractmethod
    def atomic(self) -> ContextManager:
        ...

    @abstractmethod
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
        ...

    @abstractmethod
    def attach_booking(self, order_id: UUID, booking_id: UUID) -> PaymentOrder:
        ...

    @abstractmethod
    def get_by_gateway_order_id(self, gateway_order_id: str) -> PaymentOrder | None:
        ...

    @abstractmethod
    def mark_paid(self, order_id: UUID, gateway_payment_id: str) -> PaymentOrder | None:
        """Move a Pending order to Paid; None if it was no longer Pending."""
        ...

    @abstractmethod
    def mark_failed(self, order_id: UUID, gateway_payment_id: str = "") -> PaymentOrder | None:
        """Move a Pending order to Failed; None if it was no longer Pending."""
        ...
