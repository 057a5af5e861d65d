"""Domain errors for the accounts module."""

from common.domain.errors import (
    AuthenticationError,
    BusinessRuleError,
    ErrorCode,
    GatewayError,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)


class UserExistsError(BusinessRuleError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.USER_EXISTS, message="User already exists with this email")


class UnknownUserError(InvalidInputError):
    """Raised by the OTP flow, which reports unknown users as bad input."""

    def __init__(self) -> None:
        super().__init__("User not found", code=ErrorCode.USER_NOT_FOUND)


class UserNotFoundError(NotFoundError):
    def __init__(self, message: str = "User not found") -> None:
        super().__init__(code=ErrorCode.USER_NOT_FOUND, message=message)


class InvalidCredentialsError(AuthenticationError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_CREDENTIALS, message="Invalid credentials")


class EmailNotVerifiedError(AuthenticationError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMAIL_NOT_VERIFIED,
            message="Please verify your email before logging in",
        )


class AccountDeactivatedError(AuthenticationError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.ACCOUNT_DEACTIVATED, message="Account has been deactivated")


class AlreadyVerifiedError(BusinessRuleError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.ALREADY_VERIFIED, message="User already verified")


class InvalidOtpError(BusinessRuleError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_OTP, message="Invalid or expired OTP")


class InvalidTokenError(BusinessRuleError):
    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(code=ErrorCode.INVALID_TOKEN, message=message)


class WrongPasswordError(BusinessRuleError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.WRONG_PASSWORD, message="Current password is incorrect")


class EmailDeliveryError(GatewayError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.EMAIL_DELIVERY_FAILED, message="Email could not be sent")


class UserAccessDeniedError(NotAuthorizedError):
    def __init__(self) -> None:
        super().__init__("Not authorized to view this user's bookings")
