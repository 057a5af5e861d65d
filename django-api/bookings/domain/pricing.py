"""Order validation and fee computation shared by direct bookings and gateway orders."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from bookings.domain.models import ItemRequest, LineItem, Quote
from events.domain import Event, TicketTypeId
from events.domain.errors import (
    EventNotBookableError,
    MaxPerOrderExceededError,
    TicketsUnavailableError,
    TicketTypeNotFoundError,
)

CENTS = Decimal("0.01")


def quote(
    event: Event,
    requested: Iterable[ItemRequest],
    platform_fee_rate: Decimal,
    processing_fee: Decimal,
) -> Quote:
    """Price ``requested`` against ``event``'s current catalog.

    Checks run in order and the first failure is raised: the event must be
    published, then for each tier (repeated items summed) the tier must
    exist, have enough unsold tickets and allow that many per order.
    """
    if not event.is_bookable:
        raise EventNotBookableError()

    # repeated tiers count as one line
    quantities: dict[TicketTypeId, int] = {}
    for request in requested:
        tier_id = request.ticket_type_id
        quantities[tier_id] = quantities.get(tier_id, 0) + request.quantity

    items = []
    for ticket_type_id, quantity in quantities.items():
        ticket_type = event.ticket_type(ticket_type_id)
        if ticket_type is None:
            raise TicketTypeNotFoundError(str(ticket_type_id.value))
        if not ticket_type.can_sell(quantity):
            raise TicketsUnavailableError(ticket_type.name)
        if quantity > ticket_type.max_per_order:
            raise MaxPerOrderExceededError(ticket_type.name, ticket_type.max_per_order)
        items.append(
            LineItem(
                ticket_type_id=ticket_type.id,
                ticket_type_name=ticket_type.name,
                price=ticket_type.price.amount,
                quantity=quantity,
                subtotal=(ticket_type.price * quantity).amount,
            )
        )

    total = sum((item.subtotal for item in items), Decimal("0"))
    platform_fee = (total * platform_fee_rate).quantize(CENTS, rounding=ROUND_HALF_UP)
    return Quote(
        event=event,
        items=tuple(items),
        total_amount=total,
        platform_fee=platform_fee,
        processing_fee=processing_fee,
        final_amount=total + platform_fee + processing_fee,
    )
