from notifications.handlers.views import NotificationListView, NotificationReadView

__all__ = ["NotificationListView", "NotificationReadView"]
