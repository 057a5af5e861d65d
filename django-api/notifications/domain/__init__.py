from notifications.domain.models import Notification, NotificationType

__all__ = ["Notification", "NotificationType"]
