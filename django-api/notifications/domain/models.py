from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID


class NotificationType(str, Enum):
    BOOKING_CONFIRMATION = "booking_confirmation"
    BOOKING_CANCELLED = "booking_cancelled"
    CANCELLATION_REQUESTED = "cancellation_requested"
    CANCELLATION_REJECTED = "cancellation_rejected"
    PAYMENT_SUCCESS = "payment_success"
    REFUND_PROCESSED = "refund_processed"


@dataclass(frozen=True)
class Notification:
    id: UUID
    user_id: UUID
    type: str
    title: str
    message: str
    priority: str
    is_read: bool
    read_at: datetime | None
    created_at: datetime
    data: dict = field(default_factory=dict)
