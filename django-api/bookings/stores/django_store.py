"""Django ORM implementation of the BookingStore."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import ContextManager
from uuid import UUID

from django.db import transaction
from django.db.models import Count, Q, Sum
from django.utils import timezone

from bookings import models
from bookings.domain import (
    AttendeeInfo,
    Booking,
    BookingStats,
    BookingStatus,
    LineItem,
    PaymentStatus,
    Quote,
)
from bookings.domain.codes import generate_booking_number
from bookings.stores.interfaces import BookingStore
from common.domain.models import Page, PageRequest
from events.domain import TicketTypeId


def to_domain(row: models.Booking) -> Booking:
    event = row.event
    return Booking(
        id=row.id,
        booking_number=row.booking_number,
        user_id=row.user_id,
        user_email=row.user.email,
        user_name=row.user.full_name,
        event_id=row.event_id,
        event_organizer_id=event.organizer_id,
        organizer_email=event.organizer.email,
        event_title=event.title,
        event_start_date=event.start_date,
        items=tuple(
            LineItem(
                ticket_type_id=TicketTypeId(item.ticket_type_id),
                ticket_type_name=item.ticket_type_name,
                price=item.price,
                quantity=item.quantity,
                subtotal=item.subtotal,
            )
            for item in row.items.all()
        ),
        attendees=tuple(
            AttendeeInfo(
                first_name=a.first_name,
                last_name=a.last_name,
                email=a.email,
                phone=a.phone,
                ticket_code=a.ticket_code,
                checked_in=a.checked_in,
                check_in_time=a.check_in_time,
            )
            for a in row.attendees.all()
        ),
        total_amount=row.total_amount,
        platform_fee=row.platform_fee,
        processing_fee=row.processing_fee,
        final_amount=row.final_amount,
        status=BookingStatus(row.status),
        payment_status=PaymentStatus(row.payment_status),
        payment_method=row.payment_method,
        payment_order_id=row.payment_order_id,
        payment_details=row.payment_details,
        billing_address=row.billing_address,
        special_requests=row.special_requests,
        refund_details=row.refund_details,
        cancellation_request=row.cancellation_request,
        cancellation_rejection=row.cancellation_rejection,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoBookingStore(BookingStore):
    def _queryset(self):
        return models.Booking.objects.select_related("user", "event__organizer").prefetch_related(
            "items", "attendees"
        )

    def atomic(self) -> ContextManager:
        return transaction.atomic()

    @transaction.atomic
    def create_booking(
        self,
        user_id: UUID,
        quote: Quote,
        attendees: list[AttendeeInfo],
        status: BookingStatus,
        payment_status: PaymentStatus,
        payment_method: str,
        billing_address: dict,
        special_requests: str,
        payment_details: dict | None = None,
        payment_order_id: UUID | None = None,
    ) -> Booking:
        row = models.Booking.objects.create(
            booking_number=generate_booking_number(),
            user_id=user_id,
            event_id=quote.event.id.value,
            total_amount=quote.total_amount,
            platform_fee=quote.platform_fee,
            processing_fee=quote.processing_fee,
            final_amount=quote.final_amount,
            status=status.value,
            payment_status=payment_status.value,
            payment_method=payment_method,
            payment_order_id=payment_order_id,
            payment_details=payment_details or {},
            billing_address=billing_address,
            special_requests=special_requests,
        )
        models.BookingItem.objects.bulk_create(
            models.BookingItem(
                booking=row,
                ticket_type_id=item.ticket_type_id.value,
                ticket_type_name=item.ticket_type_name,
                price=item.price,
                quantity=item.quantity,
                subtotal=item.subtotal,
            )
            for item in quote.items
        )
        models.Attendee.objects.bulk_create(
            models.Attendee(
                booking=row,
                first_name=a.first_name,
                last_name=a.last_name,
                email=a.email.lower(),
                phone=a.phone,
                ticket_code=a.ticket_code,
            )
            for a in attendees
        )
        return self.get_booking(row.id)

    def get_booking(self, booking_id: UUID) -> Booking | None:
        row = self._queryset().filter(pk=booking_id).first()
        return to_domain(row) if row else None

    def _page(self, qs, status: str | None, page: PageRequest) -> Page[Booking]:
        if status:
            qs = qs.filter(status=status)
        qs = qs.order_by("-created_at")
        rows = qs[page.offset : page.offset + page.limit]
        return Page(items=tuple(to_domain(row) for row in rows), total=qs.count())

    def list_for_user(self, user_id: UUID, status: str | None, page: PageRequest) -> Page[Booking]:
        return self._page(self._queryset().filter(user_id=user_id), status, page)

    def list_for_event(self, event_id: UUID, status: str | None, page: PageRequest) -> Page[Booking]:
        return self._page(self._queryset().filter(event_id=event_id), status, page)

    def transition(
        self, booking_id: UUID, expected: tuple[BookingStatus, ...], **changes
    ) -> Booking | None:
        values = {
            name: value.value if isinstance(value, Enum) else value
            for name, value in changes.items()
        }
        values["updated_at"] = timezone.now()
        updated = models.Booking.objects.filter(
            pk=booking_id, status__in=[status.value for status in expected]
        ).update(**values)
        if not updated:
            return None
        return self.get_booking(booking_id)

    def has_confirmed_booking(self, user_id: UUID, event_id: UUID, booking_id: UUID) -> bool:
        return models.Booking.objects.filter(
            pk=booking_id,
            user_id=user_id,
            event_id=event_id,
            status=models.Booking.Status.CONFIRMED,
        ).exists()

    def stats_for_user(self, user_id: UUID, now: datetime) -> BookingStats:
        totals = models.Booking.objects.filter(user_id=user_id).aggregate(
            bookings=Count("id"),
            spent=Sum(
                "final_amount",
                filter=Q(payment_status=models.Booking.PaymentStatus.COMPLETED),
            ),
            upcoming=Count(
                "id",
                filter=Q(status=models.Booking.Status.CONFIRMED, event__start_date__gte=now),
            ),
        )
        return BookingStats(
            total_bookings=totals["bookings"],
            total_spent=totals["spent"] or Decimal("0"),
            upcoming_bookings=totals["upcoming"],
        )
