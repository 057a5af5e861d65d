from events.handlers.views import (
    CategoryListView,
    EventAnalyticsView,
    EventDetailView,
    EventListView,
    EventSearchView,
    OrganizerEventListView,
)

__all__ = [
    "CategoryListView",
    "EventAnalyticsView",
    "EventDetailView",
    "EventListView",
    "EventSearchView",
    "OrganizerEventListView",
]
