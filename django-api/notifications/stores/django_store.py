"""Django ORM implementation of the NotificationStore."""

from datetime import datetime
from uuid import UUID

from common.domain.models import Page, PageRequest
from notifications import models
from notifications.domain import Notification
from notifications.stores.interfaces import NotificationStore


def to_domain(row: models.Notification) -> Notification:
    return Notification(
        id=row.id,
        user_id=row.user_id,
        type=row.type,
        title=row.title,
        message=row.message,
        priority=row.priority,
        is_read=row.is_read,
        read_at=row.read_at,
        created_at=row.created_at,
        data=row.data,
    )


class DjangoNotificationStore(NotificationStore):
    def add(self, user_id: UUID, type: str, title: str, message: str, data: dict) -> Notification:
        row = models.Notification.objects.create(
            user_id=user_id, type=type, title=title[:200], message=message[:1000], data=data
        )
        return to_domain(row)

    def list_for_user(self, user_id: UUID, page: PageRequest) -> Page[Notification]:
        qs = models.Notification.objects.filter(user_id=user_id).order_by("-created_at")
        rows = qs[page.offset : page.offset + page.limit]
        return Page(items=tuple(to_domain(row) for row in rows), total=qs.count())

    def get(self, notification_id: UUID) -> Notification | None:
        row = models.Notification.objects.filter(pk=notification_id).first()
        return to_domain(row) if row else None

    def mark_read(self, notification_id: UUID, read_at: datetime) -> Notification:
        models.Notification.objects.filter(pk=notification_id).update(is_read=True, read_at=read_at)
        return to_domain(models.Notification.objects.get(pk=notification_id))
