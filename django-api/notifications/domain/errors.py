from common.domain.errors import ErrorCode, NotFoundError


class NotificationNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.NOTIFICATION_NOT_FOUND, message="Notification not found")
