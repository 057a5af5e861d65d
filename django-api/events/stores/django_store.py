"""Django ORM implementation of the EventStore."""

from datetime import datetime
from decimal import Decimal
from typing import ContextManager
from uuid import UUID

from django.db import transaction
from django.db.models import Count, F, Q, Sum

from common.domain.models import Page, PageRequest
from events import models
from events.domain import (
    Capacity,
    Event,
    EventFilters,
    EventId,
    EventStatus,
    Money,
    OrganizerStats,
    SalesSummary,
    TicketType,
    TicketTypeId,
)
from events.stores.interfaces import EventStore

SORT_FIELDS = {
    "createdAt": "created_at",
    "-createdAt": "-created_at",
    "startDate": "start_date",
    "-startDate": "-start_date",
    "title": "title",
    "-title": "-title",
}

TICKET_TYPE_FIELDS = (
    "name",
    "description",
    "price",
    "quantity",
    "max_per_order",
    "sale_start_date",
    "sale_end_date",
)


def ticket_type_to_domain(row: models.TicketType) -> TicketType:
    return TicketType(
        id=TicketTypeId(row.id),
        event_id=EventId(row.event_id),
        name=row.name,
        description=row.description,
        price=Money(row.price),
        quantity=Capacity(row.quantity),
        sold=row.sold,
        max_per_order=row.max_per_order,
        sale_start_date=row.sale_start_date,
        sale_end_date=row.sale_end_date,
    )


def event_to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        organizer_id=row.organizer_id,
        organizer_name=row.organizer.full_name,
        title=row.title,
        description=row.description,
        short_description=row.short_description,
        category=row.category,
        tags=tuple(row.tags),
        start_date=row.start_date,
        end_date=row.end_date,
        timezone=row.timezone,
        venue=row.venue,
        images=tuple(row.images),
        capacity=row.capacity,
        status=EventStatus(row.status),
        is_public=row.is_public,
        requires_approval=row.requires_approval,
        refund_policy=row.refund_policy,
        additional_info=row.additional_info,
        average_rating=row.average_rating,
        total_reviews=row.total_reviews,
        views=row.views,
        created_at=row.created_at,
        updated_at=row.updated_at,
        ticket_types=tuple(ticket_type_to_domain(t) for t in row.ticket_types.all()),
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def _queryset(self):
        return models.Event.objects.select_related("organizer").prefetch_related("ticket_types")

    def atomic(self) -> ContextManager:
        return transaction.atomic()

    def list_events(self, filters: EventFilters, page: PageRequest) -> Page[Event]:
        qs = self._queryset()
        if filters.status:
            qs = qs.filter(status=filters.status)
        if filters.category:
            qs = qs.filter(category=filters.category)
        if filters.organizer_id:
            qs = qs.filter(organizer_id=filters.organizer_id)
        if filters.location:
            qs = qs.filter(
                Q(venue__address__city__icontains=filters.location)
                | Q(venue__address__state__icontains=filters.location)
                | Q(venue__address__country__icontains=filters.location)
            )
        if filters.starts_after:
            qs = qs.filter(start_date__gte=filters.starts_after)
        if filters.starts_before:
            qs = qs.filter(start_date__lte=filters.starts_before)
        if filters.text:
            qs = qs.filter(
                Q(title__icontains=filters.text) | Q(description__icontains=filters.text)
            )

        qs = qs.order_by(SORT_FIELDS.get(filters.sort, "-created_at"))
        total = qs.count()
        rows = qs[page.offset : page.offset + page.limit]
        return Page(items=tuple(event_to_domain(row) for row in rows), total=total)

    def get_event(self, event_id: EventId) -> Event | None:
        row = self._queryset().filter(pk=event_id.value).first()
        return event_to_domain(row) if row else None

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()

    def complete_ended_events(self, now: datetime) -> int:
        return models.Event.objects.filter(
            status=models.Event.Status.PUBLISHED, end_date__lte=now
        ).update(status=models.Event.Status.COMPLETED, updated_at=now)

    def complete_event_if_ended(self, event_id: EventId, now: datetime) -> bool:
        updated = models.Event.objects.filter(
            pk=event_id.value, status=models.Event.Status.PUBLISHED, end_date__lte=now
        ).update(status=models.Event.Status.COMPLETED, updated_at=now)
        return updated > 0

    def increment_views(self, event_id: EventId) -> None:
        models.Event.objects.filter(pk=event_id.value).update(views=F("views") + 1)

    @transaction.atomic
    def create_event(self, organizer_id: UUID, fields: dict, ticket_types: list[dict]) -> Event:
        row = models.Event.objects.create(organizer_id=organizer_id, **fields)
        for position, data in enumerate(ticket_types):
            self._create_ticket_type(row, position, data)
        return self.get_event(EventId(row.id))

    @transaction.atomic
    def update_event(
        self, event_id: EventId, fields: dict, ticket_types: list[dict] | None
    ) -> Event:
        row = models.Event.objects.select_for_update().get(pk=event_id.value)
        for name, value in fields.items():
            setattr(row, name, value)
        row.save()

        if ticket_types is not None:
            existing = {t.id: t for t in row.ticket_types.all()}
            kept = set()
            for position, data in enumerate(ticket_types):
                ticket_type = existing.get(data.get("id"))
                if ticket_type is None:
                    kept.add(self._create_ticket_type(row, position, data).id)
                    continue
                kept.add(ticket_type.id)
                for name in TICKET_TYPE_FIELDS:
                    if name in data:
                        setattr(ticket_type, name, data[name])
                ticket_type.position = position
                ticket_type.save()
            # tiers with sales are never dropped
            row.ticket_types.exclude(id__in=kept).filter(sold=0).delete()
        return self.get_event(event_id)

    def _create_ticket_type(
        self, event: models.Event, position: int, data: dict
    ) -> models.TicketType:
        values = {name: data[name] for name in TICKET_TYPE_FIELDS if name in data}
        return models.TicketType.objects.create(event=event, position=position, **values)

    def delete_event(self, event_id: EventId) -> None:
        models.Event.objects.filter(pk=event_id.value).delete()

    def has_confirmed_bookings(self, event_id: EventId) -> bool:
        from bookings.models import Booking

        return Booking.objects.filter(
            event_id=event_id.value,
            status__in=[Booking.Status.CONFIRMED, Booking.Status.CANCELLATION_REQUESTED],
        ).exists()

    def reserve_tickets(self, event_id: EventId, ticket_type_id: TicketTypeId, quantity: int) -> bool:
        updated = models.TicketType.objects.filter(
            pk=ticket_type_id.value,
            event_id=event_id.value,
            sold__lte=F("quantity") - quantity,
        ).update(sold=F("sold") + quantity)
        return updated == 1

    def release_tickets(self, event_id: EventId, ticket_type_id: TicketTypeId, quantity: int) -> bool:
        updated = models.TicketType.objects.filter(
            pk=ticket_type_id.value,
            event_id=event_id.value,
            sold__gte=quantity,
        ).update(sold=F("sold") - quantity)
        return updated == 1

    def set_rating(self, event_id: EventId, average: Decimal, total: int) -> None:
        models.Event.objects.filter(pk=event_id.value).update(
            average_rating=average, total_reviews=total
        )

    def sales_summary(self, event_id: EventId) -> SalesSummary:
        from bookings.models import Booking, BookingItem

        confirmed = Booking.objects.filter(
            event_id=event_id.value, status=Booking.Status.CONFIRMED
        )
        revenue = confirmed.aggregate(total=Sum("final_amount"))["total"] or Decimal("0")
        tickets = (
            BookingItem.objects.filter(booking__in=confirmed).aggregate(total=Sum("quantity"))["total"]
            or 0
        )
        return SalesSummary(bookings=confirmed.count(), revenue=revenue, tickets_sold=tickets)

    def organizer_stats(self, organizer_id: UUID, now: datetime) -> OrganizerStats:
        events = models.Event.objects.filter(organizer_id=organizer_id)
        totals = events.aggregate(
            events=Count("id"), upcoming=Count("id", filter=Q(start_date__gte=now))
        )
        sold = models.TicketType.objects.filter(event__in=events).aggregate(total=Sum("sold"))
        return OrganizerStats(
            total_events=totals["events"],
            total_tickets_sold=sold["total"] or 0,
            upcoming_events=totals["upcoming"],
        )
