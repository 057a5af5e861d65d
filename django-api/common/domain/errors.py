"""Domain error codes and error categories shared by every app.

Each app declares its concrete errors in its own ``domain/errors.py`` by
subclassing one of the categories below. Handlers map the category to an
HTTP status; the message is always safe to show to the user.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_INPUT = "INVALID_INPUT"
    INVALID_ID = "INVALID_ID"

    # accounts
    USER_EXISTS = "USER_EXISTS"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    EMAIL_NOT_VERIFIED = "EMAIL_NOT_VERIFIED"
    ACCOUNT_DEACTIVATED = "ACCOUNT_DEACTIVATED"
    ALREADY_VERIFIED = "ALREADY_VERIFIED"
    INVALID_OTP = "INVALID_OTP"
    INVALID_TOKEN = "INVALID_TOKEN"
    WRONG_PASSWORD = "WRONG_PASSWORD"
    EMAIL_DELIVERY_FAILED = "EMAIL_DELIVERY_FAILED"

    # events
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    EVENT_NOT_BOOKABLE = "EVENT_NOT_BOOKABLE"
    EVENT_HAS_BOOKINGS = "EVENT_HAS_BOOKINGS"
    INVALID_EVENT_DATES = "INVALID_EVENT_DATES"
    TICKET_TYPE_NOT_FOUND = "TICKET_TYPE_NOT_FOUND"
    TICKETS_UNAVAILABLE = "TICKETS_UNAVAILABLE"
    MAX_PER_ORDER_EXCEEDED = "MAX_PER_ORDER_EXCEEDED"

    # bookings
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    BOOKING_ALREADY_CANCELLED = "BOOKING_ALREADY_CANCELLED"
    CANCELLATION_WINDOW_CLOSED = "CANCELLATION_WINDOW_CLOSED"
    INVALID_BOOKING_STATE = "INVALID_BOOKING_STATE"

    # payments
    PAYMENT_ORDER_NOT_FOUND = "PAYMENT_ORDER_NOT_FOUND"
    SIGNATURE_MISMATCH = "SIGNATURE_MISMATCH"
    PAYMENT_ALREADY_VERIFIED = "PAYMENT_ALREADY_VERIFIED"
    PAYMENT_ORDER_CLOSED = "PAYMENT_ORDER_CLOSED"
    MISSING_PAYER_EMAIL = "MISSING_PAYER_EMAIL"
    GATEWAY_ERROR = "GATEWAY_ERROR"

    # reviews
    REVIEW_NOT_FOUND = "REVIEW_NOT_FOUND"
    REVIEW_NOT_ALLOWED = "REVIEW_NOT_ALLOWED"
    DUPLICATE_REVIEW = "DUPLICATE_REVIEW"

    # notifications
    NOTIFICATION_NOT_FOUND = "NOTIFICATION_NOT_FOUND"

    NOT_AUTHORIZED = "NOT_AUTHORIZED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidInputError(DomainError):
    """Malformed or missing input (400)."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_INPUT) -> None:
        super().__init__(code=code, message=message)


class AuthenticationError(DomainError):
    """Caller could not be authenticated (401)."""


class NotAuthorizedError(DomainError):
    """Caller is authenticated but not allowed to act (403)."""

    def __init__(self, message: str = "Not authorized") -> None:
        super().__init__(code=ErrorCode.NOT_AUTHORIZED, message=message)


class NotFoundError(DomainError):
    """Referenced resource does not exist (404)."""


class BusinessRuleError(DomainError):
    """Request is well-formed but violates a business rule (400)."""


class GatewayError(DomainError):
    """An external collaborator failed (500)."""
