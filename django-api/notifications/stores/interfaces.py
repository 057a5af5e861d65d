from abc import ABC, abstractmethod
from datetime import datetime
from uuid import UUID

from common.domain.models import Page, PageRequest
from notifications.domain import Notification


class NotificationStore(ABC):
    @abstractmethod
    def add(self, user_id: UUID, type: str, title: str, message: str, data: dict) -> Notification:
        ...

    @abstractmethod
    def list_for_user(self, user_id: UUID, page: PageRequest) -> Page[Notification]:
        """Return the user's notifications, newest first."""
        ...

    @abstractmethod
    def get(self, notification_id: UUID) -> Notification | None:
        ...

    @abstractmethod
    def mark_read(self, notification_id: UUID, read_at: datetime) -> Notification:
        ...
