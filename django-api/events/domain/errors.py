"""Domain errors for the events module."""

from common.domain.errors import (
    BusinessRuleError,
    ErrorCode,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str = "") -> None:
        super().__init__(code=ErrorCode.EVENT_NOT_FOUND, message="Event not found")
        self.event_id = event_id


class InvalidEventIdError(InvalidInputError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__("Invalid event ID format", code=ErrorCode.INVALID_ID)


class InvalidEventDatesError(InvalidInputError):
    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EVENT_DATES)


class EventNotBookableError(BusinessRuleError):
    def __init__(self, message: str = "Event is not available for booking") -> None:
        super().__init__(code=ErrorCode.EVENT_NOT_BOOKABLE, message=message)


class EventHasBookingsError(BusinessRuleError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_HAS_BOOKINGS,
            message="Cannot delete event with confirmed bookings",
        )


class TicketTypeNotFoundError(InvalidInputError):
    def __init__(self, ticket_type_id: str) -> None:
        super().__init__(
            f"Ticket type not found: {ticket_type_id}", code=ErrorCode.TICKET_TYPE_NOT_FOUND
        )


class TicketsUnavailableError(BusinessRuleError):
    def __init__(self, ticket_type_name: str) -> None:
        super().__init__(
            code=ErrorCode.TICKETS_UNAVAILABLE,
            message=f"Not enough tickets available for {ticket_type_name}",
        )


class MaxPerOrderExceededError(BusinessRuleError):
    def __init__(self, ticket_type_name: str, limit: int) -> None:
        super().__init__(
            code=ErrorCode.MAX_PER_ORDER_EXCEEDED,
            message=f"Maximum {limit} tickets allowed per order for {ticket_type_name}",
        )


class EventAccessDeniedError(NotAuthorizedError):
    def __init__(self, action: str) -> None:
        super().__init__(f"Not authorized to {action}")
