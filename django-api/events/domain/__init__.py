from events.domain.models import (
    CATEGORIES,
    Event,
    EventFilters,
    EventStatus,
    OrganizerStats,
    SalesSummary,
    TicketType,
)
from events.domain.value_objects import Capacity, EventId, Money, TicketTypeId

__all__ = [
    "CATEGORIES",
    "Event",
    "EventFilters",
    "EventStatus",
    "OrganizerStats",
    "SalesSummary",
    "TicketType",
    "EventId",
    "TicketTypeId",
    "Money",
    "Capacity",
]
