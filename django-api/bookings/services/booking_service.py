"""Booking engine.

Inventory is reserved with one conditional counter update per line item
inside the same transaction as the booking write, so a tier can never be
sold past its quantity. Cancellation hands inventory back only when the
booking was holding it.
"""

import logging
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from django.conf import settings
from django.utils import timezone

from bookings.domain import (
    AttendeeInfo,
    Booking,
    BookingStatus,
    ItemRequest,
    LineItem,
    PaymentStatus,
    Quote,
)
from bookings.domain.codes import generate_ticket_code
from bookings.domain.errors import (
    BookingAccessDeniedError,
    BookingAlreadyCancelledError,
    BookingNotFoundError,
    CancellationWindowClosedError,
    InvalidBookingIdError,
    InvalidBookingStateError,
)
from bookings.domain.pricing import quote
from bookings.stores.interfaces import BookingStore
from common.domain.models import Actor, Page, PageRequest
from events.domain import EventId, TicketTypeId
from events.domain.errors import EventAccessDeniedError, EventNotFoundError, TicketsUnavailableError
from events.services.event_service import parse_event_id
from events.stores.interfaces import EventStore
from notifications.domain import NotificationType
from notifications.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

CLOSED_STATUSES = (BookingStatus.CANCELLED, BookingStatus.REFUNDED)


def parse_booking_id(value: str | UUID) -> UUID:
    try:
        return UUID(str(value))
    except ValueError:
        raise InvalidBookingIdError() from None


def epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


class BookingService:
    def __init__(
        self,
        store: BookingStore,
        events: EventStore,
        notifications: NotificationService,
    ) -> None:
        self._store = store
        self._events = events
        self._notifications = notifications
        config = settings.EVENTHUB
        self._platform_fee_rate = Decimal(config["PLATFORM_FEE_RATE"])
        self._processing_fee = Decimal(config["PROCESSING_FEE"])
        self._cutoff_hours = config["CANCELLATION_CUTOFF_HOURS"]

    @staticmethod
    def _now() -> datetime:
        return timezone.now()

    def quote(self, event_id: str | UUID, items: list[dict]) -> Quote:
        eid = parse_event_id(event_id)
        event = self._events.get_event(eid)
        if event is None:
            raise EventNotFoundError(str(eid.value))
        requested = [
            ItemRequest(TicketTypeId(item["ticket_type_id"]), item["quantity"]) for item in items
        ]
        return quote(event, requested, self._platform_fee_rate, self._processing_fee)

    def reserve(self, event_id: EventId, items: tuple[LineItem, ...]) -> None:
        """Reserve every line item; call inside ``atomic`` so a shortfall rolls back."""
        for item in items:
            if not self._events.reserve_tickets(event_id, item.ticket_type_id, item.quantity):
                logger.warning(
                    "Reservation of %d x %s failed for event %s",
                    item.quantity,
                    item.ticket_type_name,
                    event_id.value,
                )
                raise TicketsUnavailableError(item.ticket_type_name)

    def release(self, booking: Booking) -> None:
        for item in booking.items:
            if not self._events.release_tickets(
                EventId(booking.event_id), item.ticket_type_id, item.quantity
            ):
                logger.warning(
                    "Sold counter for %s below %d while releasing booking %s",
                    item.ticket_type_id.value,
                    item.quantity,
                    booking.booking_number,
                )

    @staticmethod
    def _with_ticket_codes(attendees: list[dict]) -> list[AttendeeInfo]:
        return [
            AttendeeInfo(
                first_name=a["first_name"],
                last_name=a["last_name"],
                email=a["email"],
                phone=a.get("phone", ""),
                ticket_code=generate_ticket_code(),
            )
            for a in attendees
        ]

    def create_booking(
        self,
        actor: Actor,
        event_id: str | UUID,
        items: list[dict],
        attendees: list[dict],
        billing_address: dict,
        payment_method: str,
        special_requests: str = "",
    ) -> Booking:
        """Book and settle in one step; the payment is treated as already completed."""
        order = self.quote(event_id, items)
        now = self._now()
        with self._store.atomic():
            self.reserve(order.event.id, order.items)
            booking = self._store.create_booking(
                user_id=actor.id,
                quote=order,
                attendees=self._with_ticket_codes(attendees),
                status=BookingStatus.CONFIRMED,
                payment_status=PaymentStatus.COMPLETED,
                payment_method=payment_method,
                billing_address=billing_address,
                special_requests=special_requests,
                payment_details={
                    "transactionId": f"txn_{epoch_millis(now)}",
                    "paymentGateway": payment_method,
                    "paymentDate": now.isoformat(),
                },
            )
        logger.info("Booking %s confirmed for %s", booking.booking_number, actor.id)
        self._notifications.notify(
            booking.user_id,
            NotificationType.BOOKING_CONFIRMATION,
            "Booking confirmed",
            f"Your booking {booking.booking_number} for {booking.event_title} is confirmed.",
            data={"bookingId": booking.id, "eventId": booking.event_id},
        )
        return booking

    def create_pending_booking(
        self,
        actor: Actor,
        order: Quote,
        attendees: list[dict],
        billing_address: dict,
        payment_method: str,
        special_requests: str,
        payment_order_id: UUID,
    ) -> Booking:
        """Record a booking that waits for gateway confirmation; nothing is reserved yet."""
        return self._store.create_booking(
            user_id=actor.id,
            quote=order,
            attendees=self._with_ticket_codes(attendees),
            status=BookingStatus.PENDING,
            payment_status=PaymentStatus.PENDING,
            payment_method=payment_method,
            billing_address=billing_address,
            special_requests=special_requests,
            payment_order_id=payment_order_id,
        )

    def confirm_payment(self, booking_id: UUID, transaction_id: str, gateway: str) -> Booking:
        """Reserve inventory and confirm a pending booking; call inside ``atomic``."""
        booking = self._get(booking_id)
        if booking.status is not BookingStatus.PENDING:
            raise InvalidBookingStateError("Booking is not awaiting payment")
        self.reserve(EventId(booking.event_id), booking.items)
        confirmed = self._store.transition(
            booking.id,
            (BookingStatus.PENDING,),
            status=BookingStatus.CONFIRMED,
            payment_status=PaymentStatus.COMPLETED,
            payment_details={
                "transactionId": transaction_id,
                "paymentGateway": gateway,
                "paymentDate": self._now().isoformat(),
            },
        )
        if confirmed is None:
            raise InvalidBookingStateError("Booking is not awaiting payment")
        return confirmed

    def _get(self, booking_id: str | UUID) -> Booking:
        booking = self._store.get_booking(parse_booking_id(booking_id))
        if booking is None:
            raise BookingNotFoundError()
        return booking

    def get_booking(self, actor: Actor, booking_id: str | UUID) -> Booking:
        booking = self._get(booking_id)
        if not (booking.is_owned_by(actor) or booking.is_managed_by(actor)):
            raise BookingAccessDeniedError("view this booking")
        return booking

    def list_my_bookings(self, actor: Actor, status: str | None, page: PageRequest) -> Page[Booking]:
        return self._store.list_for_user(actor.id, status, page)

    def list_event_bookings(
        self, actor: Actor, event_id: str | UUID, status: str | None, page: PageRequest
    ) -> Page[Booking]:
        eid = parse_event_id(event_id)
        event = self._events.get_event(eid)
        if event is None:
            raise EventNotFoundError(str(eid.value))
        if not event.is_managed_by(actor):
            raise EventAccessDeniedError("view bookings for this event")
        return self._store.list_for_event(eid.value, status, page)

    def cancel_booking(self, actor: Actor, booking_id: str | UUID, reason: str | None = None) -> Booking:
        booking = self._get(booking_id)
        manager = booking.is_managed_by(actor)
        if not (booking.is_owned_by(actor) or manager):
            raise BookingAccessDeniedError("cancel this booking")
        if booking.status in CLOSED_STATUSES:
            raise BookingAlreadyCancelledError()

        now = self._now()
        if not manager and booking.hours_until_start(now) < self._cutoff_hours:
            logger.warning("Late cancellation refused for booking %s", booking.booking_number)
            raise CancellationWindowClosedError(self._cutoff_hours)

        changes = {
            "status": BookingStatus.CANCELLED,
            "refund_details": {
                "refundAmount": float(booking.final_amount),
                "refundDate": now.isoformat(),
                "refundReason": reason or ("Cancelled by organizer" if manager else "User cancellation"),
                "refundTransactionId": f"ref_{epoch_millis(now)}",
            },
        }
        if booking.payment_status is PaymentStatus.COMPLETED:
            changes["payment_status"] = PaymentStatus.REFUNDED

        with self._store.atomic():
            cancelled = self._store.transition(booking.id, (booking.status,), **changes)
            if cancelled is None:
                raise BookingAlreadyCancelledError()
            if booking.holds_inventory:
                self.release(booking)

        logger.info("Booking %s cancelled by %s", booking.booking_number, actor.id)
        self._notifications.notify(
            booking.user_id,
            NotificationType.BOOKING_CANCELLED,
            "Booking cancelled",
            f"Your booking {booking.booking_number} for {booking.event_title} has been cancelled. "
            f"A refund of {booking.final_amount} will be processed.",
            data={"bookingId": booking.id, "eventId": booking.event_id},
            email_to=booking.user_email,
        )
        return cancelled

    def request_cancellation(self, actor: Actor, booking_id: str | UUID, reason: str) -> Booking:
        booking = self._get(booking_id)
        if not booking.is_owned_by(actor):
            raise BookingAccessDeniedError("request cancellation for this booking")
        if booking.status in CLOSED_STATUSES:
            raise BookingAlreadyCancelledError()
        if booking.status is BookingStatus.CANCELLATION_REQUESTED:
            raise InvalidBookingStateError("Cancellation already requested for this booking")
        if booking.status is not BookingStatus.CONFIRMED:
            raise InvalidBookingStateError("Only confirmed bookings can be cancelled")

        requested = self._store.transition(
            booking.id,
            (BookingStatus.CONFIRMED,),
            status=BookingStatus.CANCELLATION_REQUESTED,
            cancellation_request={"reason": reason, "requestedAt": self._now().isoformat()},
        )
        if requested is None:
            raise InvalidBookingStateError("Only confirmed bookings can be cancelled")

        self._notifications.notify(
            booking.event_organizer_id,
            NotificationType.CANCELLATION_REQUESTED,
            "Cancellation requested",
            f"{booking.user_name} requested cancellation of booking {booking.booking_number} "
            f"for {booking.event_title}. Reason: {reason}",
            data={"bookingId": booking.id, "eventId": booking.event_id},
            email_to=booking.organizer_email,
        )
        return requested

    def reject_cancellation(
        self, actor: Actor, booking_id: str | UUID, reason: str | None = None
    ) -> Booking:
        booking = self._get(booking_id)
        if not booking.is_managed_by(actor):
            raise BookingAccessDeniedError("reject cancellation requests for this booking")
        if booking.status is not BookingStatus.CANCELLATION_REQUESTED:
            raise InvalidBookingStateError("No pending cancellation request for this booking")

        rejected = self._store.transition(
            booking.id,
            (BookingStatus.CANCELLATION_REQUESTED,),
            status=BookingStatus.CONFIRMED,
            cancellation_rejection={
                "reason": reason or "",
                "rejectedAt": self._now().isoformat(),
                "rejectedBy": str(actor.id),
            },
        )
        if rejected is None:
            raise InvalidBookingStateError("No pending cancellation request for this booking")

        message = f"Your cancellation request for booking {booking.booking_number} was rejected."
        if reason:
            message = f"{message} Reason: {reason}"
        self._notifications.notify(
            booking.user_id,
            NotificationType.CANCELLATION_REJECTED,
            "Cancellation request rejected",
            message,
            data={"bookingId": booking.id, "eventId": booking.event_id},
            email_to=booking.user_email,
        )
        return rejected
