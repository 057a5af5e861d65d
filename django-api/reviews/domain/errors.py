"""Domain errors for the reviews module."""

from common.domain.errors import BusinessRuleError, ErrorCode, InvalidInputError, NotFoundError


class ReviewNotFoundError(NotFoundError):
    def __init__(self, message: str = "Review not found") -> None:
        super().__init__(code=ErrorCode.REVIEW_NOT_FOUND, message=message)


class ReviewNotAllowedError(BusinessRuleError):
    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.REVIEW_NOT_ALLOWED, message=message)


class DuplicateReviewError(BusinessRuleError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_REVIEW, message="You have already reviewed this event"
        )


class InvalidModerationStatusError(InvalidInputError):
    def __init__(self) -> None:
        super().__init__(
            "Invalid moderation status. Must be 'approved', 'rejected', or 'pending'"
        )
