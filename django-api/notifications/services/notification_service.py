"""Notification sink and inbox.

``notify`` writes the in-app record and, when asked, sends an email. Email
is best-effort: a delivery failure is logged and never undoes the state
change that triggered it.
"""

import logging
from uuid import UUID

from django.utils import timezone

from common.domain.errors import NotAuthorizedError
from common.domain.models import Actor, Page, PageRequest
from notifications.domain import Notification, NotificationType
from notifications.domain.errors import NotificationNotFoundError
from notifications.mailer import Mailer
from notifications.stores.interfaces import NotificationStore

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, store: NotificationStore, mailer: Mailer) -> None:
        self._store = store
        self._mailer = mailer

    def notify(
        self,
        user_id: UUID,
        type: NotificationType,
        title: str,
        message: str,
        data: dict | None = None,
        email_to: str | None = None,
    ) -> Notification:
        notification = self._store.add(
            user_id=user_id,
            type=type.value,
            title=title,
            message=message,
            data={key: str(value) for key, value in (data or {}).items()},
        )
        if email_to:
            try:
                self._mailer.send(to=email_to, subject=title, message=message)
            except Exception:
                logger.exception("Failed to send %s email to %s", type.value, email_to)
        return notification

    def list_notifications(self, actor: Actor, page: PageRequest) -> Page[Notification]:
        return self._store.list_for_user(actor.id, page)

    def mark_read(self, actor: Actor, notification_id: UUID) -> Notification:
        notification = self._store.get(notification_id)
        if notification is None:
            raise NotificationNotFoundError()
        if notification.user_id != actor.id:
            raise NotAuthorizedError("Not authorized")
        return self._store.mark_read(notification_id, timezone.now())
