"""Domain errors for the bookings module."""

from common.domain.errors import (
    BusinessRuleError,
    ErrorCode,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)


class BookingNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.BOOKING_NOT_FOUND, message="Booking not found")


class InvalidBookingIdError(InvalidInputError):
    def __init__(self) -> None:
        super().__init__("Invalid booking ID format", code=ErrorCode.INVALID_ID)


class BookingAccessDeniedError(NotAuthorizedError):
    def __init__(self, action: str) -> None:
        super().__init__(f"Not authorized to {action}")


class BookingAlreadyCancelledError(BusinessRuleError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_ALREADY_CANCELLED, message="Booking is already cancelled"
        )


class CancellationWindowClosedError(BusinessRuleError):
    def __init__(self, hours: int) -> None:
        super().__init__(
            code=ErrorCode.CANCELLATION_WINDOW_CLOSED,
            message=f"Cannot cancel booking less than {hours} hours before event",
        )


class InvalidBookingStateError(BusinessRuleError):
    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_BOOKING_STATE, message=message)
