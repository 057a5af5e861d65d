from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"
    FAILED = "Failed"
    REFUNDED = "Refunded"


@dataclass(frozen=True)
class PaymentOrder:
    """A gateway order; ``amount`` is in major currency units."""

    id: UUID
    user_id: UUID
    event_id: UUID
    amount: Decimal
    currency: str
    user_email: str
    gateway_order_id: str
    status: OrderStatus
    created_at: datetime
    user_phone: str = ""
    booking_id: UUID | None = None
    gateway_payment_id: str = ""
