"""Domain errors for the payments module."""

from common.domain.errors import (
    BusinessRuleError,
    ErrorCode,
    GatewayError,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)


class SignatureMismatchError(BusinessRuleError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.SIGNATURE_MISMATCH, message="Payment Verification Failed")


class PaymentOrderNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.PAYMENT_ORDER_NOT_FOUND, message="Order not found")


class PaymentAlreadyVerifiedError(BusinessRuleError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_ALREADY_VERIFIED, message="Payment already verified"
        )


class PaymentOrderClosedError(BusinessRuleError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_ORDER_CLOSED, message="Booking was cancelled before payment"
        )


class PaymentAccessDeniedError(NotAuthorizedError):
    def __init__(self) -> None:
        super().__init__("Unauthorized")


class MissingPayerEmailError(InvalidInputError):
    def __init__(self) -> None:
        super().__init__("User email is required", code=ErrorCode.MISSING_PAYER_EMAIL)


class OrderCreationError(GatewayError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.GATEWAY_ERROR, message="Cannot create order")
